"""Goal wizard calculation engine.

Turns body metrics and a goal into energy expenditure, a BMI classification
and weight-change timelines across a fixed ladder of daily calorie rates.

Key components:
- BMR (Harris-Benedict) and TDEE from body metrics and activity level
- BMI classification and the 20-25 target band
- Rate ladder of 100-700 kcal/day
- Timeline projection at 7000 kcal per kg, in both directions
"""

from __future__ import annotations

from fitplan.wizard.calculator import (
    calculate,
    calculate_for_target_date,
    calculate_for_target_date_input,
    calculate_for_target_weight,
    calculate_for_target_weight_input,
)
from fitplan.wizard.errors import (
    InvalidDurationError,
    RateOutOfRangeError,
    ValidationError,
    WizardError,
    ZeroRateError,
)
from fitplan.wizard.models import (
    BmiCategory,
    BmiRange,
    CalculationGoal,
    CalculationSex,
    RatedResult,
    WizardInput,
    WizardRecommendation,
    WizardResult,
    WizardTargetDateInput,
    WizardTargetDateResult,
    WizardTargetWeightInput,
    WizardTargetWeightResult,
)
from fitplan.wizard.rates import RateLadder

__all__ = [
    "BmiCategory",
    "BmiRange",
    "CalculationGoal",
    "CalculationSex",
    "InvalidDurationError",
    "RateOutOfRangeError",
    "RateLadder",
    "RatedResult",
    "ValidationError",
    "WizardError",
    "WizardInput",
    "WizardRecommendation",
    "WizardResult",
    "WizardTargetDateInput",
    "WizardTargetDateResult",
    "WizardTargetWeightInput",
    "WizardTargetWeightResult",
    "ZeroRateError",
    "calculate",
    "calculate_for_target_date",
    "calculate_for_target_date_input",
    "calculate_for_target_weight",
    "calculate_for_target_weight_input",
]
