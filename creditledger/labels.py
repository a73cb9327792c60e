"""Assign labels and payment channels to statement text."""

from __future__ import annotations

import re
from collections.abc import Iterable

from creditledger.models import Label

CHANNEL_NONE = 0
CHANNEL_CREDIT = 1
CHANNEL_INSTALLMENT = 2

_INSTALLMENT_PATTERN = re.compile(r"\d{2}/10|INSTALLMENT", re.IGNORECASE)


def detect_channel(ctx: str) -> int:
    """Return the installment channel for installment text, else the credit one."""
    if _INSTALLMENT_PATTERN.search(ctx.lower()):
        return CHANNEL_INSTALLMENT
    return CHANNEL_CREDIT


def search_labels(ctx: str, labels: Iterable[Label]) -> tuple[int, int]:
    """Find the first label whose text occurs in ``ctx``, ignoring case.

    Returns ``(label id, channel)``, or ``(0, 0)`` when nothing matches.
    """
    ctx_lower = ctx.lower()
    for item in labels:
        if re.search(re.escape(item.abb_ctx), ctx_lower, re.IGNORECASE):
            return item.id_label, detect_channel(ctx)
    return 0, CHANNEL_NONE