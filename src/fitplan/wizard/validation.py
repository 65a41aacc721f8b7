"""Input validation for the goal wizard.

The calculations trust their inputs. Whoever decodes user input (the CLI, a
request handler) runs these checks first; every rejected field is collected
into a single ValidationError.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Union

from fitplan.wizard.errors import FieldError, ValidationError
from fitplan.wizard.models import (
    WizardInput,
    WizardTargetDateInput,
    WizardTargetWeightInput,
)
from fitplan.wizard.rates import MAX_WEEKLY_DIFFERENCE

AGE_RANGE = (18, 99)
WEIGHT_RANGE = (30.0, 300.0)
HEIGHT_RANGE = (100.0, 220.0)


@dataclass(frozen=True)
class ActivityLevelInfo:
    """A named activity level and its TDEE multiplier."""

    level: float
    key: str
    label: str
    description: str


ACTIVITY_LEVELS: tuple[ActivityLevelInfo, ...] = (
    ActivityLevelInfo(
        1.0,
        "sedentary",
        "Mostly Sedentary",
        "Office job, no regular workouts, stationary most of the day.",
    ),
    ActivityLevelInfo(
        1.25,
        "light",
        "Light Activity",
        "Moving around at work or training 2-3 times a week.",
    ),
    ActivityLevelInfo(
        1.5,
        "moderate",
        "Moderate Activity",
        "Consistent training 3-4 times a week including cardio sessions.",
    ),
    ActivityLevelInfo(
        1.75,
        "high",
        "Highly Active",
        "Working out almost every day.",
    ),
    ActivityLevelInfo(
        2.0,
        "athlete",
        "Athlete",
        "Semi-professional or professional training load.",
    ),
)

VALID_ACTIVITY_LEVELS = tuple(info.level for info in ACTIVITY_LEVELS)


def parse_activity_level(value: Union[str, float]) -> float:
    """Resolve an activity level given as multiplier or key.

    Args:
        value: A multiplier such as ``1.5`` / ``"1.5"`` or a key such as
            ``"moderate"``

    Returns:
        The multiplier

    Raises:
        ValidationError: If the value names no known activity level
    """
    if isinstance(value, str):
        key = value.strip().lower()
        for info in ACTIVITY_LEVELS:
            if info.key == key:
                return info.level
        try:
            value = float(key)
        except ValueError:
            raise ValidationError([_activity_level_error()]) from None

    if float(value) not in VALID_ACTIVITY_LEVELS:
        raise ValidationError([_activity_level_error()])
    return float(value)


def _activity_level_error() -> FieldError:
    return FieldError(
        "activity_level",
        "validation.wizard.activity_level",
        "Please enter a valid activity level.",
    )


def _check_range(
    errors: list[FieldError],
    field: str,
    value: float,
    bounds: tuple[float, float],
    code: str,
    message: str,
) -> None:
    low, high = bounds
    if not low <= value <= high:
        errors.append(FieldError(field, code, message))


def _check_age(errors: list[FieldError], age: int) -> None:
    _check_range(
        errors, "age", age, AGE_RANGE, "validation.wizard.age",
        "Please provide an age between 18 and 99.",
    )


def _check_weight(errors: list[FieldError], field: str, weight: float) -> None:
    _check_range(
        errors, field, weight, WEIGHT_RANGE, "validation.wizard.weight",
        "Please provide a weight between 30kg and 300kg.",
    )


def _check_height(errors: list[FieldError], height: float) -> None:
    _check_range(
        errors, "height", height, HEIGHT_RANGE, "validation.wizard.height",
        "Please provide a height between 100cm and 220cm.",
    )


def _raise_if_any(errors: list[FieldError]) -> None:
    if errors:
        raise ValidationError(errors)


def validate_wizard_input(wizard_input: WizardInput) -> None:
    """Reject a WizardInput with out-of-range fields.

    Raises:
        ValidationError: Listing every offending field
    """
    errors: list[FieldError] = []
    _check_age(errors, wizard_input.age)
    _check_weight(errors, "weight", wizard_input.weight)
    _check_height(errors, wizard_input.height)

    if wizard_input.activity_level not in VALID_ACTIVITY_LEVELS:
        errors.append(_activity_level_error())

    _check_range(
        errors,
        "weekly_difference",
        wizard_input.weekly_difference,
        (0, MAX_WEEKLY_DIFFERENCE),
        "validation.wizard.weekly_difference",
        f"Please choose a weekly difference between 0 and {MAX_WEEKLY_DIFFERENCE}.",
    )

    _raise_if_any(errors)


def validate_target_weight_input(wizard_input: WizardTargetWeightInput) -> None:
    """Reject a WizardTargetWeightInput with out-of-range fields."""
    errors: list[FieldError] = []
    _check_age(errors, wizard_input.age)
    _check_weight(errors, "current_weight", wizard_input.current_weight)
    _check_height(errors, wizard_input.height)
    _check_weight(errors, "target_weight", wizard_input.target_weight)
    _raise_if_any(errors)


def validate_target_date_input(
    wizard_input: WizardTargetDateInput,
    today: Optional[date] = None,
) -> None:
    """Reject a WizardTargetDateInput with out-of-range fields or dates.

    Args:
        wizard_input: Input to check
        today: Reference day for rejecting past target dates; skipped if None
    """
    errors: list[FieldError] = []
    _check_age(errors, wizard_input.age)
    _check_weight(errors, "current_weight", wizard_input.current_weight)
    _check_height(errors, wizard_input.height)

    if wizard_input.target_date <= wizard_input.start_date:
        errors.append(
            FieldError(
                "target_date",
                "validation.wizard.target_date",
                "Your target date must lie after the start date.",
            )
        )
    elif today is not None and wizard_input.target_date < today:
        errors.append(
            FieldError(
                "target_date",
                "validation.wizard.target_date",
                "Your target date lies in the past.",
            )
        )

    _raise_if_any(errors)
