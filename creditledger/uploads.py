"""Working with uploaded statement lines before they are saved."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from datetime import datetime

from creditledger.database import Database
from creditledger.models import Credit, StatementLine
from creditledger.statement import parse_statement_pages

_U64_MAX = 2**64 - 1


def load_statement(
    db: Database, pages: Iterable[str], now: datetime | None = None
) -> list[StatementLine]:
    """Parse statement pages, labelling lines with the labels stored in ``db``."""
    return parse_statement_pages(pages, db.select_labels(), now)


def apply_period(lines: Iterable[StatementLine], year: int, month: int) -> list[StatementLine]:
    """Book every line to the period ``year-month``."""
    period = f"{year}-{month:02d}"
    return [line.with_period(period) for line in lines]


def total_amount(lines: Iterable[StatementLine]) -> float:
    return sum((line.amount for line in lines), 0.0)


def total_for_label(lines: Iterable[StatementLine], label_id: int) -> float:
    return sum((line.amount for line in lines if line.label_id == label_id), 0.0)


def label_share(lines: Sequence[StatementLine], label_id: int) -> float:
    """Percentage of the total amount that falls on ``label_id``."""
    part = total_for_label(lines, label_id)
    whole = total_amount(lines)
    if whole == 0:
        if part == 0 or math.isnan(part):
            return math.nan
        return math.copysign(math.inf, part)
    return part / whole * 100.0


def _as_u64(value: float) -> int:
    if math.isnan(value) or value <= 0:
        return 0
    if value >= _U64_MAX:
        return _U64_MAX
    return int(value)


def format_thai(number: float) -> str:
    """Format an amount with thousands separators and two decimals."""
    whole = _as_u64(number)
    fraction, _ = math.modf(number) if math.isfinite(number) else (math.nan, number)
    cents = _as_u64(math.floor(fraction * 100.0 + 0.5)) if fraction > 0 else 0
    return f"{whole:,}.{cents:02d}"


def year_choices(year: int) -> list[int]:
    """The years offered around ``year``: five before and five after."""
    return list(range(year - 5, year + 6))


def relabel(lines: Sequence[StatementLine], index: int, label_id: int) -> list[StatementLine]:
    """Return the lines with the one at ``index`` given another label."""
    updated = list(lines)
    target = updated[index]
    updated[index] = StatementLine(
        date=target.date,
        ctx=target.ctx,
        amount=target.amount,
        label_id=label_id,
        period=target.period,
        payment_type_id=target.payment_type_id,
    )
    return updated


def save_lines(db: Database, lines: Iterable[StatementLine]) -> list[Credit]:
    """Store each line as a credit and return the stored rows."""
    return [
        db.insert_credit(
            line.date,
            line.ctx,
            line.amount,
            int(line.label_id),
            line.period,
            int(line.payment_type_id),
        )
        for line in lines
    ]