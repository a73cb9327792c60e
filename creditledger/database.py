"""SQLite storage for labels, credits, installments, banks and payment types."""

from __future__ import annotations

import os
import sqlite3
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from creditledger.models import (
    Bank,
    Credit,
    Installment,
    InstallmentItem,
    Label,
    LabelName,
    PaymentType,
)

_SCHEMA = """
CREATE TABLE IF NOT EXISTS bank (
    id INTEGER PRIMARY KEY NOT NULL,
    name TEXT NOT NULL
);
CREATE TABLE IF NOT EXISTS cash (
    id INTEGER PRIMARY KEY NOT NULL,
    date TEXT NOT NULL,
    period TEXT NOT NULL,
    type TEXT NOT NULL,
    label_id INTEGER NOT NULL,
    amount REAL NOT NULL
);
CREATE TABLE IF NOT EXISTS credits (
    id INTEGER PRIMARY KEY NOT NULL,
    date TEXT NOT NULL,
    ctx TEXT NOT NULL,
    amount REAL NOT NULL,
    label_id INTEGER NOT NULL,
    period TEXT NOT NULL,
    payment_type_id INTEGER NOT NULL
);
CREATE TABLE IF NOT EXISTS installment (
    id INTEGER PRIMARY KEY NOT NULL,
    date_stard TEXT NOT NULL,
    date_end TEXT NOT NULL,
    time INTEGER NOT NULL,
    note TEXT NOT NULL,
    label_id INTEGER NOT NULL,
    amount REAL NOT NULL,
    total REAL NOT NULL
);
CREATE TABLE IF NOT EXISTS installment_items (
    id INTEGER PRIMARY KEY NOT NULL,
    date TEXT NOT NULL,
    period TEXT NOT NULL,
    bank_id INTEGER NOT NULL,
    amount REAL NOT NULL,
    installment_id INTEGER NOT NULL
);
CREATE TABLE IF NOT EXISTS labels (
    id INTEGER PRIMARY KEY NOT NULL,
    id_label INTEGER NOT NULL,
    abb_ctx TEXT NOT NULL
);
CREATE TABLE IF NOT EXISTS labels_name (
    id INTEGER PRIMARY KEY NOT NULL,
    label TEXT NOT NULL
);
CREATE TABLE IF NOT EXISTS payment_type (
    id INTEGER PRIMARY KEY NOT NULL,
    chanel TEXT NOT NULL
);
CREATE TABLE IF NOT EXISTS setting_hotkey (
    id INTEGER PRIMARY KEY NOT NULL,
    type TEXT NOT NULL,
    label_id INTEGER NOT NULL,
    amount REAL NOT NULL
);
CREATE TABLE IF NOT EXISTS setting_pass_pdf (
    id INTEGER PRIMARY KEY NOT NULL,
    ctx TEXT NOT NULL,
    type TEXT NOT NULL
);
"""

_INSTALLMENT_COLUMNS = "id, date_stard, date_end, time, note, label_id, amount, total"
_ITEM_COLUMNS = "id, date, period, bank_id, amount, installment_id"
_CREDIT_COLUMNS = "id, date, ctx, amount, label_id, period, payment_type_id"


class Database:
    """A connection to the ledger's SQLite database."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        target = os.fspath(path)
        self.path = target
        self.connection = sqlite3.connect(target, uri=str(target).startswith("file:"))

    def __enter__(self) -> "Database":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def close(self) -> None:
        self.connection.close()

    def create_schema(self) -> None:
        """Create every table that does not exist yet."""
        with self.connection:
            self.connection.executescript(_SCHEMA)

    def _insert(self, sql: str, params: tuple) -> int:
        with self.connection:
            cursor = self.connection.execute(sql, params)
        return cursor.lastrowid

    def _rows(self, sql: str, params: tuple = ()) -> list[tuple]:
        return self.connection.execute(sql, params).fetchall()

    def _delete(self, sql: str, params: tuple) -> None:
        with self.connection:
            self.connection.execute(sql, params)

    # inserts

    def insert_label(self, id_label: int, abb_ctx: str) -> Label:
        row_id = self._insert(
            "INSERT INTO labels (id_label, abb_ctx) VALUES (?, ?)", (id_label, abb_ctx)
        )
        return Label(row_id, id_label, abb_ctx)

    def insert_label_name(self, label: str) -> LabelName:
        row_id = self._insert("INSERT INTO labels_name (label) VALUES (?)", (label,))
        return LabelName(row_id, label)

    def insert_credit(
        self,
        date: str,
        ctx: str,
        amount: float,
        label_id: int,
        period: str,
        payment_type_id: int,
    ) -> Credit:
        row_id = self._insert(
            "INSERT INTO credits (date, ctx, amount, label_id, period, payment_type_id)"
            " VALUES (?, ?, ?, ?, ?, ?)",
            (date, ctx, amount, label_id, period, payment_type_id),
        )
        return Credit(row_id, date, ctx, float(amount), label_id, period, payment_type_id)

    def insert_installment(
        self,
        date_start: str,
        date_end: str,
        time: int,
        note: str,
        label_id: int,
        amount: float,
        total: float,
    ) -> Installment:
        row_id = self._insert(
            "INSERT INTO installment"
            " (date_stard, date_end, time, note, label_id, amount, total)"
            " VALUES (?, ?, ?, ?, ?, ?, ?)",
            (date_start, date_end, time, note, label_id, amount, total),
        )
        return Installment(
            row_id, date_start, date_end, time, note, label_id, float(amount), float(total)
        )

    def insert_installment_item(
        self,
        date: str,
        period: str,
        bank_id: int,
        amount: float,
        installment_id: int,
    ) -> InstallmentItem:
        row_id = self._insert(
            "INSERT INTO installment_items (date, period, bank_id, amount, installment_id)"
            " VALUES (?, ?, ?, ?, ?)",
            (date, period, bank_id, amount, installment_id),
        )
        return InstallmentItem(row_id, date, period, bank_id, float(amount), installment_id)

    # selects

    def select_labels(self) -> list[Label]:
        rows = self._rows("SELECT id, id_label, abb_ctx FROM labels ORDER BY id")
        return [Label(*row) for row in rows]

    def select_labels_where(self, id_label: int) -> list[Label]:
        rows = self._rows(
            "SELECT id, id_label, abb_ctx FROM labels WHERE id_label = ? ORDER BY id",
            (id_label,),
        )
        return [Label(*row) for row in rows]

    def count_labels_where(self, id_label: int) -> int:
        (count,) = self.connection.execute(
            "SELECT COUNT(*) FROM labels WHERE id_label = ?", (id_label,)
        ).fetchone()
        return count

    def select_labels_like(self, search_pattern: str) -> list[Label]:
        """Labels whose text equals the pattern wrapped in ``%`` signs."""
        rows = self._rows(
            "SELECT id, id_label, abb_ctx FROM labels WHERE abb_ctx = ? ORDER BY id",
            (f"%{search_pattern}%",),
        )
        return [Label(*row) for row in rows]

    def select_labels_name(self) -> list[LabelName]:
        rows = self._rows("SELECT id, label FROM labels_name ORDER BY id")
        return [LabelName(*row) for row in rows]

    def select_labels_name_where(self, label_name_id: int) -> list[LabelName]:
        rows = self._rows(
            "SELECT id, label FROM labels_name WHERE id = ? ORDER BY id", (label_name_id,)
        )
        return [LabelName(*row) for row in rows]

    def select_credit(self) -> list[Credit]:
        rows = self._rows(f"SELECT {_CREDIT_COLUMNS} FROM credits ORDER BY id")
        return [Credit(*row) for row in rows]

    def select_bank(self) -> list[Bank]:
        rows = self._rows("SELECT id, name FROM bank ORDER BY id")
        return [Bank(*row) for row in rows]

    def select_bank_where(self, bank_id: int) -> list[Bank]:
        rows = self._rows("SELECT id, name FROM bank WHERE id = ? ORDER BY id", (bank_id,))
        return [Bank(*row) for row in rows]

    def select_installment(self) -> list[Installment]:
        rows = self._rows(f"SELECT {_INSTALLMENT_COLUMNS} FROM installment ORDER BY id")
        return [Installment(*row) for row in rows]

    def select_installment_items(self) -> list[InstallmentItem]:
        rows = self._rows(f"SELECT {_ITEM_COLUMNS} FROM installment_items ORDER BY id")
        return [InstallmentItem(*row) for row in rows]

    def select_installment_items_where(self, installment_id: int) -> list[InstallmentItem]:
        rows = self._rows(
            f"SELECT {_ITEM_COLUMNS} FROM installment_items"
            " WHERE installment_id = ? ORDER BY id",
            (installment_id,),
        )
        return [InstallmentItem(*row) for row in rows]

    def select_payment_type_where(self, payment_type_id: int) -> list[PaymentType]:
        rows = self._rows(
            "SELECT id, chanel FROM payment_type WHERE id = ? ORDER BY id",
            (payment_type_id,),
        )
        return [PaymentType(*row) for row in rows]

    # deletes

    def delete_label(self, label_id: int) -> None:
        self._delete("DELETE FROM labels WHERE id = ?", (label_id,))

    def delete_label_name(self, label_name_id: int) -> None:
        self._delete("DELETE FROM labels_name WHERE id = ?", (label_name_id,))


def connect_database(url: str | os.PathLike[str] | None = None) -> Database:
    """Open the database at ``url``, or at ``DATABASE_URL`` from the environment.

    A ``.env`` file found from the working directory upwards is loaded first.
    Raises RuntimeError when no location is known.
    """
    if url is None:
        load_dotenv(find_dotenv(usecwd=True))
        url = os.environ.get("DATABASE_URL")
        if not url:
            raise RuntimeError("DATABASE_URL must be set")
    if isinstance(url, Path):
        url = str(url)
    return Database(url)