"""Energy expenditure estimates.

BMR uses the original Harris-Benedict equation (1919), rounded to a whole
kcal. TDEE scales BMR by an activity multiplier and drops the fraction.
"""

from __future__ import annotations

import math

from fitplan.wizard.models import CalculationSex
from fitplan.wizard.numeric import round_half_up


def calculate_bmr(
    sex: CalculationSex,
    weight: float,
    height: float,
    age: int,
) -> float:
    """Calculate Basal Metabolic Rate using the Harris-Benedict equation.

    Args:
        sex: Biological sex
        weight: Weight in kg
        height: Height in cm
        age: Age in years

    Returns:
        BMR in kcal per day, rounded to a whole number
    """
    if sex == CalculationSex.MALE:
        bmr = 66.0 + 13.7 * weight + 5.0 * height - 6.8 * age
    else:
        bmr = 655.0 + 9.6 * weight + 1.8 * height - 4.7 * age

    return float(round_half_up(bmr))


def calculate_tdee(bmr: float, activity_level: float) -> float:
    """Calculate Total Daily Energy Expenditure.

    Args:
        bmr: Basal Metabolic Rate
        activity_level: Activity multiplier (1.0 - 2.0)

    Returns:
        TDEE in kcal per day, fraction dropped
    """
    return float(math.floor(bmr * activity_level))
