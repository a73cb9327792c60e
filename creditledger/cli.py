"""Command line front end for the credit ledger."""

from __future__ import annotations

import argparse
import re
import sqlite3
import sys
from collections.abc import Sequence

from creditledger.database import Database, connect_database
from creditledger.dates import month_add
from creditledger.labels import search_labels

_INT_TEXT = re.compile(r"[+-]?\d+")


def _int_or_zero(text: str) -> int:
    return int(text) if _INT_TEXT.fullmatch(text) else 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="creditledger", description="Label and review card statement spending."
    )
    parser.add_argument(
        "--database",
        help="path of the SQLite database (default: DATABASE_URL from the environment)",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("init", help="create the database tables")

    labels = commands.add_parser("labels", help="list label names with their fragment counts")
    label_commands = labels.add_subparsers(dest="action")
    show = label_commands.add_parser("show", help="list the text fragments of a label")
    show.add_argument("label_id", type=int)
    add_name = label_commands.add_parser("add-name", help="create a label name")
    add_name.add_argument("name")
    add = label_commands.add_parser("add", help="attach a text fragment to a label")
    add.add_argument("id_label")
    add.add_argument("abb_ctx")
    delete_name = label_commands.add_parser(
        "delete-name", help="delete a label name that has no fragments"
    )
    delete_name.add_argument("label_id", type=int)
    delete = label_commands.add_parser("delete", help="delete a text fragment")
    delete.add_argument("fragment_id", type=int)

    commands.add_parser("credits", help="list the saved card transactions")

    shift = commands.add_parser("month-add", help="shift an ISO date by a number of months")
    shift.add_argument("date")
    shift.add_argument("months")

    match = commands.add_parser("match", help="find the label and channel of statement text")
    match.add_argument("text")
    return parser


def _show_label_names(db: Database) -> None:
    print("ID\tLABEL\tAMOUNT")
    for name in db.select_labels_name():
        print(f"{name.id}\t{name.label}\t{db.count_labels_where(name.id)}")


def _show_fragments(db: Database, label_id: int) -> None:
    print("ID\tLABEL")
    for fragment in db.select_labels_where(label_id):
        print(f"{fragment.id}\t{fragment.abb_ctx}")


def _run_labels(db: Database, args: argparse.Namespace) -> int:
    action = args.action
    if action is None:
        _show_label_names(db)
    elif action == "show":
        _show_fragments(db, args.label_id)
    elif action == "add-name":
        created = db.insert_label_name(args.name)
        print(f"{created.id}\t{created.label}")
    elif action == "add":
        created = db.insert_label(_int_or_zero(args.id_label), args.abb_ctx)
        print(f"{created.id}\t{created.id_label}\t{created.abb_ctx}")
    elif action == "delete-name":
        count = db.count_labels_where(args.label_id)
        if count != 0:
            print(f"can't delete: label has {count} fragments", file=sys.stderr)
            return 1
        db.delete_label_name(args.label_id)
    elif action == "delete":
        db.delete_label(args.fragment_id)
    return 0


def _run_credits(db: Database) -> int:
    channels: dict[int, str] = {}
    rows = []
    for credit in db.select_credit():
        if credit.payment_type_id not in channels:
            found = db.select_payment_type_where(credit.payment_type_id)
            if not found:
                raise LookupError(f"unknown payment type {credit.payment_type_id}")
            channels[credit.payment_type_id] = found[0].channel
        rows.append(
            f"{credit.date}\t{credit.ctx}\t{credit.amount:.2f}\t{credit.label_id}"
            f"\t{credit.period}\t{channels[credit.payment_type_id]}"
        )
    print("DATE\tCTX\tAMOUNT\tLABEL\tPERIOD\tCHANNEL")
    for row in rows:
        print(row)
    return 0


def _run_with_database(args: argparse.Namespace) -> int:
    with connect_database(args.database) as db:
        if args.command == "init":
            db.create_schema()
            return 0
        if args.command == "labels":
            return _run_labels(db, args)
        if args.command == "credits":
            return _run_credits(db)
        label_id, channel = search_labels(args.text, db.select_labels())
        print(f"{label_id} {channel}")
        return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; returns the exit status."""
    args = _build_parser().parse_args(argv)
    if args.command == "month-add":
        print(month_add(args.date, args.months))
        return 0
    try:
        return _run_with_database(args)
    except (RuntimeError, LookupError, sqlite3.Error) as err:
        print(f"error: {err}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())