"""The fixed ladder of daily kcal deficit/surplus options."""

from __future__ import annotations

from typing import Iterator

from fitplan.wizard.errors import RateOutOfRangeError

RATE_STEP = 100
MAX_WEEKLY_DIFFERENCE = 7


class RateLadder:
    """Ordered, immutable set of daily rates: 100, 200, ..., 700 kcal."""

    RATES: tuple[int, ...] = tuple(
        RATE_STEP * step for step in range(1, MAX_WEEKLY_DIFFERENCE + 1)
    )

    @classmethod
    def for_each(cls) -> Iterator[int]:
        """Iterate the rates in ascending order."""
        return iter(cls.RATES)

    @classmethod
    def contains(cls, rate: int) -> bool:
        return rate in cls.RATES

    def __iter__(self) -> Iterator[int]:
        return self.for_each()

    def __contains__(self, rate: object) -> bool:
        return rate in self.RATES

    def __len__(self) -> int:
        return len(self.RATES)


def rate_for_weekly_difference(weekly_difference: int) -> int:
    """Daily rate selected by a ladder index; 0 means maintain."""
    if not 0 <= weekly_difference <= MAX_WEEKLY_DIFFERENCE:
        raise RateOutOfRangeError(
            f"weekly_difference must be between 0 and {MAX_WEEKLY_DIFFERENCE}, "
            f"got {weekly_difference}"
        )
    return weekly_difference * RATE_STEP
