"""Value objects for the goal wizard.

Inputs arrive pre-validated (see ``fitplan.wizard.validation``); results are
built fresh per call and never mutated afterwards. Every result knows how to
render itself as a JSON-ready dict with camelCase keys and ISO dates.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum


class CalculationSex(Enum):
    """Biological sex for BMR calculation."""

    MALE = "male"
    FEMALE = "female"


class CalculationGoal(Enum):
    """Direction of the weight change."""

    LOSS = "loss"
    GAIN = "gain"


class WizardRecommendation(Enum):
    """What the wizard suggests doing with the chosen rate."""

    HOLD = "hold"
    LOSE = "lose"
    GAIN = "gain"


class BmiCategory(Enum):
    """Clinical weight-status bands."""

    UNDERWEIGHT = "underweight"              # BMI < 18.5
    STANDARD_WEIGHT = "standard_weight"      # 18.5 <= BMI < 25
    OVERWEIGHT = "overweight"                # 25 <= BMI < 30
    OBESE = "obese"                          # 30 <= BMI < 35
    SEVERELY_OBESE = "severely_obese"        # BMI >= 35


@dataclass(frozen=True)
class BmiRange:
    """Inclusive BMI band."""

    lower: int
    upper: int

    @property
    def midpoint(self) -> float:
        return (self.lower + self.upper) / 2

    def to_dict(self) -> dict:
        return {"lower": self.lower, "upper": self.upper}


@dataclass(frozen=True)
class WizardInput:
    """Body metrics and goal for the basic calculation.

    ``weekly_difference`` is an index into the rate ladder (0-7), not a literal
    weekly value: the daily kcal rate is ``weekly_difference * 100``.
    """

    age: int
    sex: CalculationSex
    weight: float               # kg
    height: float               # cm
    activity_level: float       # 1.0, 1.25, 1.5, 1.75 or 2.0
    weekly_difference: int
    calculation_goal: CalculationGoal


@dataclass(frozen=True)
class WizardResult:
    """Energy expenditure, BMI classification and default projection."""

    bmr: float
    tdee: float
    deficit: float
    target: float
    bmi: int
    bmi_category: BmiCategory
    target_bmi: BmiRange
    target_weight: int
    target_weight_lower: int
    target_weight_upper: int
    duration_days: int
    duration_days_lower: int
    duration_days_upper: int
    recommendation: WizardRecommendation

    def to_dict(self) -> dict:
        return {
            "bmr": self.bmr,
            "tdee": self.tdee,
            "deficit": self.deficit,
            "target": self.target,
            "bmi": self.bmi,
            "bmiCategory": self.bmi_category.value,
            "targetBmi": self.target_bmi.to_dict(),
            "targetWeight": self.target_weight,
            "targetWeightLower": self.target_weight_lower,
            "targetWeightUpper": self.target_weight_upper,
            "durationDays": self.duration_days,
            "durationDaysLower": self.duration_days_lower,
            "durationDaysUpper": self.duration_days_upper,
            "recommendation": self.recommendation.value,
        }


@dataclass(frozen=True)
class WizardTargetWeightInput:
    """Fixed target weight; the wizard answers with a date per rate."""

    age: int
    sex: CalculationSex
    current_weight: float
    height: float
    target_weight: float
    start_date: date


@dataclass(frozen=True)
class WizardTargetWeightResult:
    """Completion date per rate plus a classification of the target."""

    date_by_rate: dict[int, date]
    progress_by_rate: dict[int, float]
    target_classification: BmiCategory
    warning: bool
    message: str

    def to_dict(self) -> dict:
        return {
            "dateByRate": {
                str(rate): day.isoformat() for rate, day in self.date_by_rate.items()
            },
            "progressByRate": {
                str(rate): progress for rate, progress in self.progress_by_rate.items()
            },
            "targetClassification": self.target_classification.value,
            "warning": self.warning,
            "message": self.message,
        }


@dataclass(frozen=True)
class WizardTargetDateInput:
    """Fixed target date; the wizard answers with a reachable weight per rate."""

    age: int
    sex: CalculationSex
    current_weight: float
    height: float
    calculation_goal: CalculationGoal
    start_date: date
    target_date: date


@dataclass(frozen=True)
class RatedResult:
    """Weight and BMI reachable at one rate."""

    target_weight: int
    bmi: int
    bmi_category: BmiCategory

    def to_dict(self) -> dict:
        return {
            "targetWeight": self.target_weight,
            "bmi": self.bmi,
            "bmiCategory": self.bmi_category.value,
        }


@dataclass(frozen=True)
class WizardTargetDateResult:
    """Recommendable outcomes keyed by rate. May be empty."""

    duration_days: int
    result_by_rate: dict[int, RatedResult] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "durationDays": self.duration_days,
            "resultByRate": {
                str(rate): result.to_dict()
                for rate, result in self.result_by_rate.items()
            },
        }
