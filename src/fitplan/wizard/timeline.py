"""Weight-change timeline projection.

Both directions hinge on one constant: changing body mass by one kilogram
takes a cumulative energy difference of 7000 kcal.

    days  = |delta_kg| * 7000 / rate
    delta = rate * days / 7000
"""

from __future__ import annotations

from fitplan.wizard.errors import ZeroRateError
from fitplan.wizard.numeric import round_half_up, round_to

KCAL_PER_KG = 7000


def days_to_reach(delta_kg: float, rate: int) -> int:
    """Days needed to change weight by ``delta_kg`` at ``rate`` kcal/day.

    Args:
        delta_kg: Weight difference in kg; the sign is ignored
        rate: Daily deficit or surplus in kcal

    Returns:
        Whole days, rounded half-up

    Raises:
        ZeroRateError: If rate is 0
    """
    if rate == 0:
        raise ZeroRateError("Cannot project a weight change at a rate of 0 kcal/day")
    return round_half_up(abs(delta_kg) * KCAL_PER_KG / rate)


def delta_kg_for_duration(duration_days: int, rate: int) -> float:
    """Unsigned weight change after ``duration_days`` at ``rate`` kcal/day."""
    return rate * duration_days / KCAL_PER_KG


def weekly_progress(rate: int) -> float:
    """Kilograms gained or lost per week at ``rate`` kcal/day."""
    return round_to(delta_kg_for_duration(7, rate), 2)
