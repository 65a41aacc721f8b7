"""Body Mass Index classification.

BMI values are rounded to whole numbers before they are classified or shown.
The target band (20-25) is narrower than the standard-weight band and is only
used to derive a single target weight.
"""

from __future__ import annotations

from fitplan.wizard.models import BmiCategory, BmiRange
from fitplan.wizard.numeric import round_half_up

# Upper bounds (exclusive) of each clinical band, ascending
BMI_THRESHOLDS: tuple[tuple[float, BmiCategory], ...] = (
    (18.5, BmiCategory.UNDERWEIGHT),
    (25.0, BmiCategory.STANDARD_WEIGHT),
    (30.0, BmiCategory.OVERWEIGHT),
    (35.0, BmiCategory.OBESE),
)

TARGET_BMI_RANGE = BmiRange(lower=20, upper=25)


def _height_m_squared(height_cm: float) -> float:
    return (height_cm / 100) ** 2


def calculate_bmi(weight: float, height_cm: float) -> int:
    """BMI for a weight in kg and height in cm, rounded to a whole number."""
    return round_half_up(weight / _height_m_squared(height_cm))


def classify(bmi: float) -> BmiCategory:
    """Map a BMI value onto its clinical category."""
    for upper, category in BMI_THRESHOLDS:
        if bmi < upper:
            return category
    return BmiCategory.SEVERELY_OBESE


def target_band() -> BmiRange:
    """The fixed BMI band a target weight should land in."""
    return TARGET_BMI_RANGE


def calculate_target_weight(height_cm: float) -> int:
    """Weight at the middle of the target band, rounded to whole kg."""
    return round_half_up(TARGET_BMI_RANGE.midpoint * _height_m_squared(height_cm))


def target_weight_bounds(height_cm: float) -> tuple[int, int]:
    """Weights at the lower and upper edge of the target band."""
    height_sq = _height_m_squared(height_cm)
    return (
        round_half_up(TARGET_BMI_RANGE.lower * height_sq),
        round_half_up(TARGET_BMI_RANGE.upper * height_sq),
    )
