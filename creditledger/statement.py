"""Turn the text of card statement pages into statement lines."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Sequence
from datetime import datetime

from creditledger.dates import format_date, thai_now
from creditledger.labels import search_labels
from creditledger.models import Label, StatementLine

_log = logging.getLogger(__name__)

_DATE_START = re.compile(r"\d{2}/\d{2}/\d{2}")


class StatementParseError(ValueError):
    """Raised when a transaction line carries an amount that is not a number."""


def _parse_amount(text: str) -> float:
    cleaned = text.replace(",", "")
    if "_" in cleaned:
        raise ValueError(cleaned)
    return float(cleaned)


def split_line(
    line: str,
    total_pages: int,
    index: int,
    labels: Iterable[Label],
    now: datetime | None = None,
) -> StatementLine | None:
    """Read one transaction line of page ``index``.

    Returns ``None`` for lines with too few fields, lines on the last page
    and negative amounts. Raises StatementParseError for a bad amount.
    """
    fields = line.split()
    if len(fields) <= 2 or index + 1 >= total_pages:
        _log.debug("skipping line %r: insufficient data", line)
        return None
    date = fields[1]
    ctx = " ".join(fields[2:-1])
    amount_text = fields[-1]
    label_id, payment_type_id = search_labels(ctx, labels)
    try:
        amount = _parse_amount(amount_text)
    except ValueError as err:
        raise StatementParseError(f"Failed to parse amount: {amount_text}") from err
    if not amount >= 0.0:
        return None
    moment = now if now is not None else thai_now()
    return StatementLine(
        date=format_date(date),
        ctx=ctx,
        amount=amount,
        label_id=label_id,
        period=f"{moment.year}-{moment.month:02d}",
        payment_type_id=payment_type_id,
    )


def parse_statement_pages(
    pages: Iterable[str],
    labels: Iterable[Label],
    now: datetime | None = None,
) -> list[StatementLine]:
    """Collect the transactions from the text of each statement page."""
    page_texts: Sequence[str] = list(pages)
    label_list = list(labels)
    moment = now if now is not None else thai_now()
    result: list[StatementLine] = []
    for index, text in enumerate(page_texts):
        for line in text.splitlines():
            if not _DATE_START.match(line):
                continue
            parsed = split_line(line, len(page_texts), index, label_list, moment)
            if parsed is not None:
                result.append(parsed)
    return result