"""Credit-card ledger: statement lines, labels and installments in SQLite."""

__version__ = "0.1.0"