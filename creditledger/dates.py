"""Date helpers for statement and installment handling."""

from __future__ import annotations

import logging
import re
from datetime import date, datetime, timedelta, timezone

_log = logging.getLogger(__name__)

_ISO_FORMAT = "%Y-%m-%d"
_SIGNED_INT = re.compile(r"[+-]?\d+")
_SHORT_DATE = re.compile(r"(\d{1,2})/(\d{1,2})/(\d{2})")
THAI_TZ = timezone(timedelta(hours=7))


def _parse_iso(text: str) -> date:
    return datetime.strptime(text, _ISO_FORMAT).date()


def month_add(date: str, add: str) -> str:
    """Shift an ISO date by a number of months given as text.

    Returns an empty string when the date or the month count cannot be
    parsed, or when the day does not exist in the target month.
    """
    try:
        start = _parse_iso(date)
    except ValueError as err:
        _log.warning("invalid date %r: %s", date, err)
        return ""
    if not _SIGNED_INT.fullmatch(add):
        _log.warning("invalid month count %r", add)
        return ""
    total_months = start.year * 12 + (start.month - 1) + int(add)
    new_year, month_index = divmod(total_months, 12)
    try:
        shifted = start.replace(year=new_year, month=month_index + 1)
    except ValueError:
        _log.warning("invalid date after adding months")
        return ""
    return shifted.isoformat()


def format_date(date: str) -> str:
    """Turn a ``dd/mm/yy`` statement date into ``YYYY-MM-DD``, or ``""``."""
    match = _SHORT_DATE.fullmatch(date)
    if match is None:
        _log.warning("invalid statement date %r", date)
        return ""
    day, month, short_year = (int(part) for part in match.groups())
    year = 2000 + short_year if short_year < 70 else 1900 + short_year
    try:
        return datetime(year, month, day).date().isoformat()
    except ValueError as err:
        _log.warning("invalid statement date %r: %s", date, err)
        return ""


def format_period(date: str) -> str:
    """Return the ``YYYY-MM`` period of an ISO date; raises ValueError."""
    parsed = _parse_iso(date)
    return f"{parsed.year:04d}-{parsed.month:02d}"


def diff_month(date1: str, date2: str) -> int:
    """Count the months from ``date1`` to ``date2``, both months included."""
    first = _parse_iso(date1)
    second = _parse_iso(date2)
    return (second.year - first.year) * 12 + (second.month - first.month) + 1


def thai_now() -> datetime:
    """The current time in the UTC+7 zone."""
    return datetime.now(timezone.utc).astimezone(THAI_TZ)