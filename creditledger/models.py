"""Records handled by the ledger: statement lines and stored rows."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass
class StatementLine:
    """One transaction read from a card statement."""

    date: str
    ctx: str
    amount: float
    label_id: int
    period: str
    payment_type_id: int

    def with_period(self, period: str) -> "StatementLine":
        """Return a copy of this line booked to another period."""
        return replace(self, period=period)


@dataclass
class Label:
    """A text fragment that assigns a label to matching transactions."""

    id: int
    id_label: int
    abb_ctx: str


@dataclass
class LabelName:
    id: int
    label: str


@dataclass
class Credit:
    """A saved card transaction."""

    id: int
    date: str
    ctx: str
    amount: float
    label_id: int
    period: str
    payment_type_id: int


@dataclass
class Installment:
    """A purchase paid back over several months."""

    id: int
    date_start: str
    date_end: str
    time: int
    note: str
    label_id: int
    amount: float
    total: float


@dataclass
class InstallmentItem:
    """One monthly payment of an installment."""

    id: int
    date: str
    period: str
    bank_id: int
    amount: float
    installment_id: int


@dataclass
class Bank:
    id: int
    name: str


@dataclass
class PaymentType:
    id: int
    channel: str