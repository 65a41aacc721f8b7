"""Calorie and weight target records built from a chosen projection.

These are the records a tracker persists once the user settles on a rate.
Building them is pure; storing them is somebody else's job.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from fitplan.wizard.errors import WizardError
from fitplan.wizard.models import (
    CalculationGoal,
    WizardInput,
    WizardResult,
    WizardTargetDateResult,
    WizardTargetWeightResult,
)


@dataclass(frozen=True)
class CalorieTarget:
    """Daily calorie goal for a period."""

    added: date
    start_date: date
    end_date: date
    target_calories: float
    maximum_calories: float

    def to_dict(self) -> dict:
        return {
            "added": self.added.isoformat(),
            "startDate": self.start_date.isoformat(),
            "endDate": self.end_date.isoformat(),
            "targetCalories": self.target_calories,
            "maximumCalories": self.maximum_calories,
        }


@dataclass(frozen=True)
class WeightTarget:
    """Weight goal for a period."""

    added: date
    start_date: date
    end_date: date
    initial_weight: float
    target_weight: float

    def to_dict(self) -> dict:
        return {
            "added": self.added.isoformat(),
            "startDate": self.start_date.isoformat(),
            "endDate": self.end_date.isoformat(),
            "initialWeight": self.initial_weight,
            "targetWeight": self.target_weight,
        }


@dataclass(frozen=True)
class WizardTargets:
    """The pair of records produced by one wizard run."""

    calorie_target: CalorieTarget
    weight_target: WeightTarget

    def to_dict(self) -> dict:
        return {
            "calorieTarget": self.calorie_target.to_dict(),
            "weightTarget": self.weight_target.to_dict(),
        }


def _unknown_rate(selected_rate: int, available: list[int]) -> WizardError:
    return WizardError(
        f"Rate {selected_rate} is not available; choose one of {sorted(available)}"
    )


def create_target_weight_targets(
    wizard_input: WizardInput,
    wizard_result: WizardResult,
    target_weight_result: WizardTargetWeightResult,
    start_date: date,
    target_weight: float,
    selected_rate: int,
    today: Optional[date] = None,
) -> WizardTargets:
    """Targets for a fixed target weight reached at ``selected_rate``.

    Args:
        wizard_input: Input of the basic calculation
        wizard_result: Result of the basic calculation (supplies TDEE)
        target_weight_result: Dates per rate for the target weight
        start_date: First day of the diet
        target_weight: Desired weight in kg
        selected_rate: Daily rate picked by the user
        today: Creation day, defaults to date.today()

    Raises:
        WizardError: If selected_rate has no projected date
    """
    if selected_rate not in target_weight_result.date_by_rate:
        raise _unknown_rate(selected_rate, list(target_weight_result.date_by_rate))

    added = today or date.today()
    end_date = target_weight_result.date_by_rate[selected_rate]
    direction = -1 if target_weight < wizard_input.weight else 1

    return WizardTargets(
        calorie_target=CalorieTarget(
            added=added,
            start_date=start_date,
            end_date=end_date,
            target_calories=wizard_result.tdee + direction * selected_rate,
            maximum_calories=wizard_result.tdee,
        ),
        weight_target=WeightTarget(
            added=added,
            start_date=start_date,
            end_date=end_date,
            initial_weight=wizard_input.weight,
            target_weight=target_weight,
        ),
    )


def create_target_date_targets(
    wizard_input: WizardInput,
    wizard_result: WizardResult,
    target_date_result: WizardTargetDateResult,
    start_date: date,
    end_date: date,
    selected_rate: int,
    today: Optional[date] = None,
) -> WizardTargets:
    """Targets for a fixed target date at ``selected_rate``.

    Raises:
        WizardError: If selected_rate was filtered out or never projected
    """
    if selected_rate not in target_date_result.result_by_rate:
        raise _unknown_rate(selected_rate, list(target_date_result.result_by_rate))

    added = today or date.today()
    direction = -1 if wizard_input.calculation_goal == CalculationGoal.LOSS else 1

    return WizardTargets(
        calorie_target=CalorieTarget(
            added=added,
            start_date=start_date,
            end_date=end_date,
            target_calories=wizard_result.tdee + direction * selected_rate,
            maximum_calories=wizard_result.tdee,
        ),
        weight_target=WeightTarget(
            added=added,
            start_date=start_date,
            end_date=end_date,
            initial_weight=wizard_input.weight,
            target_weight=target_date_result.result_by_rate[selected_rate].target_weight,
        ),
    )
