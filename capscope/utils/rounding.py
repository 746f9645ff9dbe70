"""Rounding helpers matching the published output contract."""

from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties toward positive infinity.

    ``round()`` uses banker's rounding (``round(12.5) == 12``); report
    percentages round ties up (``12.5 -> 13``).
    """
    return math.floor(value + 0.5)


def percentage(count: int, total: int) -> int:
    """Return ``count`` as a rounded share of ``total``; 0 when ``total`` is 0."""
    if total <= 0:
        return 0
    return round_half_up(count / total * 100)
