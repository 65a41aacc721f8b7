"""Goal wizard entry points.

Three questions are answered here, all as pure functions of their inputs:

- ``calculate``: energy expenditure, BMI and how long the default target
  weight takes at the chosen rate.
- ``calculate_for_target_weight``: for a fixed target weight, the date it is
  reached at every rate on the ladder. Unsafe targets are flagged.
- ``calculate_for_target_date``: for a fixed date, the weight reachable at
  every rate. Outcomes that contradict the goal are dropped.

Inputs are expected to be validated by the caller
(``fitplan.wizard.validation``); nothing is re-checked here apart from the
duration of a target-date projection.
"""

from __future__ import annotations

import logging
import math
from datetime import date, timedelta

import structlog

from fitplan.wizard.bmi import (
    calculate_bmi,
    calculate_target_weight,
    classify,
    target_band,
    target_weight_bounds,
)
from fitplan.wizard.energy import calculate_bmr, calculate_tdee
from fitplan.wizard.errors import InvalidDurationError
from fitplan.wizard.models import (
    BmiCategory,
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
from fitplan.wizard.numeric import round_half_up
from fitplan.wizard.rates import RateLadder, rate_for_weekly_difference
from fitplan.wizard.timeline import (
    days_to_reach,
    delta_kg_for_duration,
    weekly_progress,
)

logger = structlog.wrap_logger(
    logging.getLogger(__name__), wrapper_class=structlog.stdlib.BoundLogger
)

# Target categories that trigger a warning, with their advisory message
TARGET_WARNINGS: dict[BmiCategory, str] = {
    BmiCategory.UNDERWEIGHT: (
        "Your target weight will classify you as underweight. "
        "You should revisit your choice."
    ),
    BmiCategory.OBESE: (
        "Your target weight will classify you as obese. "
        "You should revisit your choice."
    ),
    BmiCategory.SEVERELY_OBESE: (
        "Your target weight will classify you as severely obese. "
        "You should revisit your choice."
    ),
}

# Outcomes a target-date projection must not recommend, per goal
NON_RECOMMENDABLE: dict[CalculationGoal, frozenset[BmiCategory]] = {
    CalculationGoal.LOSS: frozenset({BmiCategory.UNDERWEIGHT}),
    CalculationGoal.GAIN: frozenset({BmiCategory.OBESE, BmiCategory.SEVERELY_OBESE}),
}


def _signed(goal: CalculationGoal) -> int:
    return -1 if goal == CalculationGoal.LOSS else 1


def calculate(wizard_input: WizardInput) -> WizardResult:
    """Energy expenditure, BMI and default projection for a wizard input.

    Args:
        wizard_input: Body metrics, activity level, ladder index and goal

    Returns:
        WizardResult with calorie target and the days needed to reach the
        middle of the target BMI band at the chosen rate
    """
    bmr = calculate_bmr(
        wizard_input.sex,
        wizard_input.weight,
        wizard_input.height,
        wizard_input.age,
    )
    tdee = calculate_tdee(bmr, wizard_input.activity_level)

    rate = rate_for_weekly_difference(wizard_input.weekly_difference)
    target = tdee + _signed(wizard_input.calculation_goal) * rate

    bmi = calculate_bmi(wizard_input.weight, wizard_input.height)
    target_weight = calculate_target_weight(wizard_input.height)
    target_weight_lower, target_weight_upper = target_weight_bounds(wizard_input.height)

    # Maintaining: nothing to project
    if rate == 0:
        duration_days = duration_days_lower = duration_days_upper = 0
        recommendation = WizardRecommendation.HOLD
    else:
        duration_days = days_to_reach(wizard_input.weight - target_weight, rate)
        duration_days_lower = days_to_reach(
            wizard_input.weight - target_weight_lower, rate
        )
        duration_days_upper = days_to_reach(
            wizard_input.weight - target_weight_upper, rate
        )
        if wizard_input.calculation_goal == CalculationGoal.LOSS:
            recommendation = WizardRecommendation.LOSE
        else:
            recommendation = WizardRecommendation.GAIN

    result = WizardResult(
        bmr=bmr,
        tdee=tdee,
        deficit=float(rate),
        target=target,
        bmi=bmi,
        bmi_category=classify(bmi),
        target_bmi=target_band(),
        target_weight=target_weight,
        target_weight_lower=target_weight_lower,
        target_weight_upper=target_weight_upper,
        duration_days=duration_days,
        duration_days_lower=duration_days_lower,
        duration_days_upper=duration_days_upper,
        recommendation=recommendation,
    )

    logger.debug(
        "wizard.calculate",
        input=wizard_input,
        tdee=result.tdee,
        target=result.target,
        bmi_category=result.bmi_category.value,
        duration_days=result.duration_days,
    )

    return result


def calculate_for_target_weight(
    start_date: date,
    age: int,
    height: float,
    current_weight: float,
    sex: CalculationSex,
    target_weight: float,
) -> WizardTargetWeightResult:
    """Date the target weight is reached at each rate of the ladder.

    A target classified as underweight, obese or severely obese still gets its
    dates; the result carries ``warning=True`` and an advisory message.

    Args:
        start_date: First day of the diet
        age: Age in years
        height: Height in cm
        current_weight: Current weight in kg
        sex: Biological sex
        target_weight: Desired weight in kg

    Returns:
        WizardTargetWeightResult keyed by daily rate
    """
    difference = abs(current_weight - target_weight)

    date_by_rate: dict[int, date] = {}
    progress_by_rate: dict[int, float] = {}
    for rate in RateLadder.for_each():
        date_by_rate[rate] = start_date + timedelta(days=days_to_reach(difference, rate))
        progress_by_rate[rate] = weekly_progress(rate)

    target_classification = classify(calculate_bmi(target_weight, height))
    message = TARGET_WARNINGS.get(target_classification, "")

    result = WizardTargetWeightResult(
        date_by_rate=date_by_rate,
        progress_by_rate=progress_by_rate,
        target_classification=target_classification,
        warning=target_classification in TARGET_WARNINGS,
        message=message,
    )

    logger.debug(
        "wizard.calculate_for_target_weight",
        start_date=start_date.isoformat(),
        current_weight=current_weight,
        target_weight=target_weight,
        target_classification=target_classification.value,
        warning=result.warning,
    )

    return result


def calculate_for_target_date(
    age: int,
    height: float,
    current_weight: float,
    sex: CalculationSex,
    start_date: date,
    target_date: date,
    goal: CalculationGoal,
) -> WizardTargetDateResult:
    """Weight reachable by ``target_date`` at each recommendable rate.

    Progress accrues per completed week, and only whole kilograms of change
    count towards the projected weight. Rates whose outcome contradicts the
    goal (underweight when losing, obese when gaining) are left out, so the
    result may be empty.

    Args:
        age: Age in years
        height: Height in cm
        current_weight: Current weight in kg
        sex: Biological sex
        start_date: First day of the diet
        target_date: Day the goal should be met
        goal: Lose or gain weight

    Returns:
        WizardTargetDateResult keyed by daily rate

    Raises:
        InvalidDurationError: If target_date is not after start_date
    """
    duration_days = (target_date - start_date).days
    if duration_days <= 0:
        raise InvalidDurationError(
            f"Target date {target_date.isoformat()} must lie after "
            f"start date {start_date.isoformat()}"
        )

    elapsed_days = (duration_days // 7) * 7
    direction = _signed(goal)
    excluded = NON_RECOMMENDABLE[goal]

    result_by_rate: dict[int, RatedResult] = {}
    for rate in RateLadder.for_each():
        delta = math.floor(delta_kg_for_duration(elapsed_days, rate))
        weight = round_half_up(current_weight + direction * delta)
        bmi = calculate_bmi(weight, height)
        category = classify(bmi)

        if category in excluded:
            continue

        result_by_rate[rate] = RatedResult(
            target_weight=weight,
            bmi=bmi,
            bmi_category=category,
        )

    logger.debug(
        "wizard.calculate_for_target_date",
        duration_days=duration_days,
        goal=goal.value,
        current_weight=current_weight,
        rates=sorted(result_by_rate),
    )

    return WizardTargetDateResult(
        duration_days=duration_days,
        result_by_rate=result_by_rate,
    )


def calculate_for_target_weight_input(
    wizard_input: WizardTargetWeightInput,
) -> WizardTargetWeightResult:
    """``calculate_for_target_weight`` taking a bundled input."""
    return calculate_for_target_weight(
        start_date=wizard_input.start_date,
        age=wizard_input.age,
        height=wizard_input.height,
        current_weight=wizard_input.current_weight,
        sex=wizard_input.sex,
        target_weight=wizard_input.target_weight,
    )


def calculate_for_target_date_input(
    wizard_input: WizardTargetDateInput,
) -> WizardTargetDateResult:
    """``calculate_for_target_date`` taking a bundled input."""
    return calculate_for_target_date(
        age=wizard_input.age,
        height=wizard_input.height,
        current_weight=wizard_input.current_weight,
        sex=wizard_input.sex,
        start_date=wizard_input.start_date,
        target_date=wizard_input.target_date,
        goal=wizard_input.calculation_goal,
    )
