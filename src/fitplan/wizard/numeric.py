"""Rounding helpers shared by the wizard calculations."""

from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero.

    Unlike the builtin ``round``, halves never go to the even neighbour:
    ``round_half_up(296.5) == 297``.
    """
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)


def round_to(value: float, digits: int) -> float:
    """Round half-up to a fixed number of decimal places."""
    factor = 10 ** digits
    return round_half_up(value * factor) / factor
