"""Planning installment purchases and storing them with their payments."""

from __future__ import annotations

import re
from collections.abc import Mapping

from creditledger.database import Database
from creditledger.dates import diff_month, format_period, month_add
from creditledger.models import Installment, InstallmentItem

_INT_TEXT = re.compile(r"[+-]?\d+")
_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


def _parse_float(value: object) -> float | None:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    text = str(value)
    if not text or text != text.strip() or "_" in text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def _parse_int(value: object) -> int | None:
    if isinstance(value, int) and not isinstance(value, bool):
        number = value
    else:
        text = str(value)
        if not _INT_TEXT.fullmatch(text):
            return None
        number = int(text)
    if not _I32_MIN <= number <= _I32_MAX:
        return None
    return number


def _round2(value: float) -> float:
    return float(f"{value:.2f}")


def payment_amount(total: object, time: object) -> float:
    """The monthly payment of ``total`` over ``time`` months, to two decimals.

    Returns 0.0 when either value cannot be read or ``time`` is zero.
    """
    price = _parse_float(total)
    months = _parse_int(time)
    if price is None or months is None or months == 0:
        return 0.0
    return _round2(price / months)


def picker_change(start_date: str, end_date: str) -> tuple[int, str]:
    """Months covered by two ISO dates, both included, and the start period.

    Raises ValueError when a date cannot be read.
    """
    months = diff_month(start_date, end_date)
    return months, format_period(start_date)


def installment_schedule(start_date: str, total: float, time: object) -> list[tuple[str, float]]:
    """The planned payments: one ``(date, amount)`` pair for each month."""
    months = _parse_int(time) or 0
    divisor = _parse_float(time)
    divisor = 0.0 if divisor is None else divisor
    schedule = []
    for offset in range(months):
        share = total / divisor if divisor else _zero_division(total)
        schedule.append((month_add(start_date, str(offset)), _round2(share)))
    return schedule


def _zero_division(total: float) -> float:
    if total != total or total == 0:
        return float("nan")
    return float("inf") if total > 0 else float("-inf")


def schedule_difference(static_price: float, time: object, total: float) -> float:
    """How far the even payments over ``time`` months miss ``total``."""
    months = _parse_float(time)
    months = 0.0 if months is None else months
    return static_price * months - total


def item_difference(static_price: float, index: int, current: object, total: float) -> float:
    """The difference left when the payment at ``index`` is set to ``current``."""
    earlier = static_price * (float(index) - 1.0)
    amount = _parse_float(current)
    amount = 0.0 if amount is None else amount
    return _round2(earlier + amount) - total


class InstallmentPlan:
    """An installment being planned between two dates for a total price."""

    def __init__(self, start_date: str, end_date: str, total: float) -> None:
        self.start_date = start_date
        self.end_date = end_date
        self.total = float(total)
        self.time, self.period = picker_change(start_date, end_date)
        self.static_price = payment_amount(self.total, self.time)
        self.diff = schedule_difference(self.static_price, self.time, self.total)

    @property
    def schedule(self) -> list[tuple[str, float]]:
        """The planned payment dates and amounts."""
        return installment_schedule(self.start_date, self.total, self.time)

    def save(
        self,
        db: Database,
        note: str,
        label_id: int,
        amount: object,
        bank_id: int,
        payments: Mapping[object, object],
    ) -> tuple[Installment, list[InstallmentItem]]:
        """Store the installment and the payments given for its months.

        ``payments`` maps a month index (as int or text) to its amount.
        Raises ValueError when the amount or a payment cannot be read.
        """
        master = db.insert_installment(
            self.start_date,
            self.end_date,
            self.time,
            note,
            label_id,
            float(str(amount)),
            self.total,
        )
        items = []
        for index in range(self.time):
            if index in payments:
                value = payments[index]
            elif str(index) in payments:
                value = payments[str(index)]
            else:
                continue
            items.append(
                db.insert_installment_item(
                    self.start_date,
                    self.period,
                    bank_id,
                    float(str(value)),
                    master.id,
                )
            )
        return master, items