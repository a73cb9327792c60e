[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "creditledger"
version = "0.1.0"
description = "Personal credit-card ledger: label statement transactions, plan installments and keep them in SQLite"
requires-python = ">=3.10"
keywords = ["credit card", "statement", "ledger", "installment", "sqlite", "finance"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Accounting",
]
dependencies = [
    "python-dotenv",
]

[project.optional-dependencies]
test = [
    "pytest",
    "freezegun",
]

[project.scripts]
creditledger = "creditledger.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["creditledger"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
