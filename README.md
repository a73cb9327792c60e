# creditledger

A small personal ledger for credit-card spending. It turns the text of
credit-card statement pages into transaction lines, matches each line
against your own labels, keeps labels, transactions and installments in a
SQLite database and helps you plan installment payments.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Configuration

The database location is read from the `DATABASE_URL` environment variable
unless it is given explicitly. A `.env` file found from the working
directory upwards is loaded first, so a line such as this is enough:

```
DATABASE_URL=ledger.sqlite
```

A value starting with `file:` is opened as an SQLite URI.

## Command line

```
creditledger [--database PATH] COMMAND ...
```

`--database` overrides `DATABASE_URL`.

| Command | What it does |
| --- | --- |
| `creditledger init` | create all tables that do not exist yet |
| `creditledger labels` | list label names with the number of text fragments each has |
| `creditledger labels show LABEL_ID` | list the text fragments of a label |
| `creditledger labels add-name NAME` | create a label name |
| `creditledger labels add ID_LABEL TEXT` | attach a text fragment to a label (a non-numeric id becomes 0) |
| `creditledger labels delete-name LABEL_ID` | delete a label name; refused (exit status 1) while it still has fragments |
| `creditledger labels delete FRAGMENT_ID` | delete a text fragment |
| `creditledger credits` | list saved transactions with their payment channel |
| `creditledger month-add DATE MONTHS` | shift an ISO date by a number of months (needs no database) |
| `creditledger match TEXT` | print the label id and channel that the stored fragments give to `TEXT` |

Output is tab separated. Errors (no database location, database errors, a
transaction whose payment type is missing) are printed to standard error
with exit status 1.

## Using it as a library

```python
from creditledger.database import Database
from creditledger.dates import month_add, diff_month
from creditledger.labels import search_labels

with Database("ledger.sqlite") as db:
    db.create_schema()
    name = db.insert_label_name("Subscriptions")
    db.insert_label(name.id, "VPNISE")
    print(search_labels("PAYPAL *VPNISE 123", db.select_labels()))

print(month_add("2024-12-24", "1"))            # 2025-01-24
print(diff_month("2024-01-01", "2024-03-01"))  # 3
```

Modules:

- `creditledger.dates` – `month_add`, `format_date` (`dd/mm/yy` to ISO),
  `format_period` (ISO date to `YYYY-MM`), `diff_month` (months between two
  dates, both included) and `thai_now` (current time in UTC+7).
- `creditledger.models` – dataclasses `StatementLine`, `Label`, `LabelName`,
  `Credit`, `Installment`, `InstallmentItem`, `Bank` and `PaymentType`.
- `creditledger.database` – the `Database` class (a context manager) with
  insert, select and delete methods for labels, label names, credits,
  installments and installment items, and selects for banks and payment
  types; `connect_database` opens one from `DATABASE_URL`.
- `creditledger.labels` – `search_labels` returns `(label id, channel)` for
  the first fragment found in the text, case-insensitively, or `(0, 0)`;
  `detect_channel` gives 2 for installment text and 1 otherwise.
- `creditledger.statement` – `parse_statement_pages` turns the text of
  statement pages into `StatementLine` records; `split_line` reads a single
  line and raises `StatementParseError` for an unreadable amount.
- `creditledger.uploads` – working with freshly read lines: `load_statement`,
  `apply_period`, `relabel`, `total_amount`, `total_for_label`,
  `label_share`, `format_thai`, `year_choices` and `save_lines`.
- `creditledger.installments` – `payment_amount`, `installment_schedule`,
  `picker_change`, `schedule_difference`, `item_difference` and
  `InstallmentPlan`, which works out months, period, even payment and
  difference for a date range and total, and saves the installment with
  its payments.

## What it does not do

- It does not open PDF files. Statement parsing takes the text of each page,
  which you have to extract yourself.
- It has no graphical interface, and the command line has no commands for
  loading statements or planning installments; use the library for those.
- Banks and payment types can be read but not created; add their rows to
  the `bank` and `payment_type` tables directly.