"""Tests for the goal wizard entry points."""

from __future__ import annotations

from dataclasses import replace
from datetime import date, timedelta

import pytest

from fitplan.wizard import (
    BmiCategory,
    BmiRange,
    CalculationGoal,
    CalculationSex,
    InvalidDurationError,
    RateLadder,
    WizardInput,
    WizardRecommendation,
    WizardTargetDateInput,
    WizardTargetWeightInput,
    calculate,
    calculate_for_target_date,
    calculate_for_target_date_input,
    calculate_for_target_weight,
    calculate_for_target_weight_input,
)
from fitplan.wizard.calculator import TARGET_WARNINGS


class TestCalculate:
    """Tests for calculate."""

    def test_weight_loss_for_men(self, male_loss_input: WizardInput) -> None:
        result = calculate(male_loss_input)

        assert result.bmr == 1995
        assert result.tdee == 2992.0
        assert result.deficit == 500
        assert result.bmi == 28
        assert result.bmi_category == BmiCategory.OVERWEIGHT
        assert result.target_bmi == BmiRange(20, 25)
        assert result.target_weight == 73
        assert result.target == 2492
        assert result.duration_days == 238.0
        assert result.recommendation == WizardRecommendation.LOSE

    def test_weight_gain_for_women(self, female_gain_input: WizardInput) -> None:
        result = calculate(female_gain_input)

        assert result.bmr == 1316
        assert result.tdee == 1645.0
        assert result.deficit == 100
        assert result.bmi == 22
        assert result.bmi_category == BmiCategory.STANDARD_WEIGHT
        assert result.target_bmi == BmiRange(20, 25)
        assert result.target_weight == 54
        assert result.target == 1745
        assert result.duration_days == 140.0
        assert result.recommendation == WizardRecommendation.GAIN

    def test_band_edges(
        self, male_loss_input: WizardInput, female_gain_input: WizardInput
    ) -> None:
        """Durations to the BMI 20 and BMI 25 weights."""
        male = calculate(male_loss_input)
        assert (male.target_weight_lower, male.target_weight_upper) == (65, 81)
        assert (male.duration_days_lower, male.duration_days_upper) == (350, 126)

        female = calculate(female_gain_input)
        assert (female.target_weight_lower, female.target_weight_upper) == (48, 60)
        assert (female.duration_days_lower, female.duration_days_upper) == (280, 560)

    def test_zero_rate_holds(self, male_loss_input: WizardInput) -> None:
        """weekly_difference 0 maintains: no duration, target equals TDEE."""
        result = calculate(replace(male_loss_input, weekly_difference=0))

        assert result.deficit == 0
        assert result.target == result.tdee
        assert result.duration_days == 0
        assert result.duration_days_lower == 0
        assert result.duration_days_upper == 0
        assert result.recommendation == WizardRecommendation.HOLD

    def test_target_band_independent_of_input(self, male_loss_input: WizardInput) -> None:
        variants = [
            male_loss_input,
            replace(male_loss_input, age=70, activity_level=2.0),
            replace(male_loss_input, sex=CalculationSex.FEMALE, weight=55),
            replace(male_loss_input, calculation_goal=CalculationGoal.GAIN),
        ]
        for wizard_input in variants:
            assert calculate(wizard_input).target_bmi == BmiRange(20, 25)

    def test_duration_never_negative(self, male_loss_input: WizardInput) -> None:
        """Already below the target weight while losing still yields >= 0."""
        result = calculate(replace(male_loss_input, weight=60))
        assert result.duration_days >= 0

    @pytest.mark.parametrize(
        "sex, age, weight, height, expected",
        [
            (CalculationSex.MALE, 25, 130, 180, BmiCategory.SEVERELY_OBESE),
            (CalculationSex.MALE, 25, 110, 180, BmiCategory.OBESE),
            (CalculationSex.MALE, 25, 55, 180, BmiCategory.UNDERWEIGHT),
            (CalculationSex.FEMALE, 30, 80, 160, BmiCategory.OBESE),
            (CalculationSex.FEMALE, 18, 40, 150, BmiCategory.UNDERWEIGHT),
            (CalculationSex.FEMALE, 45, 120, 165, BmiCategory.SEVERELY_OBESE),
        ],
    )
    def test_classification(
        self,
        sex: CalculationSex,
        age: int,
        weight: float,
        height: float,
        expected: BmiCategory,
    ) -> None:
        wizard_input = WizardInput(
            age=age,
            sex=sex,
            weight=weight,
            height=height,
            activity_level=1.0,
            weekly_difference=0,
            calculation_goal=CalculationGoal.LOSS,
        )
        assert calculate(wizard_input).bmi_category == expected

    def test_to_dict(self, male_loss_input: WizardInput) -> None:
        data = calculate(male_loss_input).to_dict()

        assert data["bmiCategory"] == "overweight"
        assert data["targetBmi"] == {"lower": 20, "upper": 25}
        assert data["durationDays"] == 238
        assert data["recommendation"] == "lose"


class TestCalculateForTargetWeight:
    """Tests for calculate_for_target_weight."""

    def test_weight_loss_duration(self, start_date: date) -> None:
        expected = {100: 1190, 200: 595, 300: 397, 400: 298, 500: 238, 600: 198, 700: 170}

        result = calculate_for_target_weight(
            start_date, 30, 170, 100, CalculationSex.MALE, 83
        )

        assert result.target_classification == BmiCategory.OVERWEIGHT
        assert result.warning is False
        assert result.message == ""
        for rate, days in expected.items():
            assert result.date_by_rate[rate] == start_date + timedelta(days=days)

    def test_weight_gain_duration(self, start_date: date) -> None:
        expected = {100: 350, 200: 175, 300: 117, 400: 88, 500: 70, 600: 58, 700: 50}

        result = calculate_for_target_weight(
            start_date, 30, 155, 45, CalculationSex.FEMALE, 50
        )

        assert result.target_classification == BmiCategory.STANDARD_WEIGHT
        assert result.warning is False
        for rate, days in expected.items():
            assert result.date_by_rate[rate] == start_date + timedelta(days=days)

    def test_covers_whole_ladder(self, start_date: date) -> None:
        result = calculate_for_target_weight(
            start_date, 30, 170, 100, CalculationSex.MALE, 83
        )
        assert list(result.date_by_rate) == list(RateLadder.RATES)
        assert list(result.progress_by_rate) == list(RateLadder.RATES)
        assert result.progress_by_rate[500] == pytest.approx(0.5)

    def test_dates_non_increasing_in_rate(self, start_date: date) -> None:
        for target in (50, 83, 99.5, 140):
            result = calculate_for_target_weight(
                start_date, 30, 170, 100, CalculationSex.MALE, target
            )
            dates = [result.date_by_rate[rate] for rate in RateLadder.RATES]
            assert dates == sorted(dates, reverse=True)

    def test_warns_for_underweight_target(self, start_date: date) -> None:
        result = calculate_for_target_weight(
            start_date, 30, 170, 60, CalculationSex.MALE, 50
        )

        assert result.target_classification == BmiCategory.UNDERWEIGHT
        assert result.warning is True
        assert result.message == (
            "Your target weight will classify you as underweight. "
            "You should revisit your choice."
        )

    def test_warns_for_obese_target(self, start_date: date) -> None:
        result = calculate_for_target_weight(
            start_date, 30, 170, 60, CalculationSex.MALE, 95
        )

        assert result.target_classification == BmiCategory.OBESE
        assert result.warning is True
        assert result.message == TARGET_WARNINGS[BmiCategory.OBESE]

    def test_warns_for_severely_obese_target(self, start_date: date) -> None:
        result = calculate_for_target_weight(
            start_date, 30, 170, 100, CalculationSex.MALE, 150
        )

        assert result.target_classification == BmiCategory.SEVERELY_OBESE
        assert result.warning is True
        assert result.message == (
            "Your target weight will classify you as severely obese. "
            "You should revisit your choice."
        )

    def test_flagged_targets_keep_dates(self, start_date: date) -> None:
        """A warning does not remove the projected dates."""
        result = calculate_for_target_weight(
            start_date, 30, 170, 100, CalculationSex.MALE, 150
        )
        assert len(result.date_by_rate) == len(RateLadder.RATES)

    def test_no_change_reaches_target_on_start(self, start_date: date) -> None:
        result = calculate_for_target_weight(
            start_date, 30, 170, 70, CalculationSex.MALE, 70
        )
        assert set(result.date_by_rate.values()) == {start_date}

    def test_input_variant(self, start_date: date) -> None:
        wizard_input = WizardTargetWeightInput(
            age=30,
            sex=CalculationSex.MALE,
            current_weight=100,
            height=170,
            target_weight=83,
            start_date=start_date,
        )
        result = calculate_for_target_weight_input(wizard_input)
        assert result.date_by_rate[500] == start_date + timedelta(days=238)

    def test_to_dict(self, start_date: date) -> None:
        data = calculate_for_target_weight(
            start_date, 30, 170, 100, CalculationSex.MALE, 83
        ).to_dict()

        assert data["dateByRate"]["500"] == "2024-12-25"
        assert data["targetClassification"] == "overweight"
        assert data["warning"] is False


class TestCalculateForTargetDate:
    """Tests for calculate_for_target_date."""

    def test_weight_loss_goal(self, start_date: date) -> None:
        expected = {
            100: (82, 28),
            200: (78, 27),
            300: (75, 26),
            400: (71, 25),
            500: (68, 24),
        }

        result = calculate_for_target_date(
            30, 170, 85, CalculationSex.MALE,
            start_date, start_date + timedelta(days=250), CalculationGoal.LOSS,
        )

        assert result.duration_days == 250
        for rate, (weight, bmi) in expected.items():
            assert result.result_by_rate[rate].target_weight == weight
            assert result.result_by_rate[rate].bmi == bmi

    def test_weight_gain_goal(self, start_date: date) -> None:
        expected = {
            100: (47, 20),
            200: (49, 20),
            300: (51, 21),
            400: (53, 22),
            500: (55, 23),
            600: (57, 24),
            700: (59, 25),
        }

        result = calculate_for_target_date(
            30, 155, 45, CalculationSex.FEMALE,
            start_date, start_date + timedelta(days=150), CalculationGoal.GAIN,
        )

        for rate, (weight, bmi) in expected.items():
            assert result.result_by_rate[rate].target_weight == weight
            assert result.result_by_rate[rate].bmi == bmi

    def test_filters_underweight_for_loss(self, start_date: date) -> None:
        result = calculate_for_target_date(
            30, 170, 60, CalculationSex.MALE,
            start_date, start_date + timedelta(days=300), CalculationGoal.LOSS,
        )

        assert list(result.result_by_rate) == [100]
        for rated in result.result_by_rate.values():
            assert rated.bmi_category != BmiCategory.UNDERWEIGHT

    def test_filters_obese_for_gain(self, start_date: date) -> None:
        result = calculate_for_target_date(
            30, 155, 45, CalculationSex.FEMALE,
            start_date, start_date + timedelta(days=300), CalculationGoal.GAIN,
        )

        assert list(result.result_by_rate) == [100, 200, 300, 400, 500, 600]
        for rated in result.result_by_rate.values():
            assert rated.bmi_category not in (
                BmiCategory.OBESE,
                BmiCategory.SEVERELY_OBESE,
            )

    def test_loss_keeps_overweight_outcomes(self, start_date: date) -> None:
        """Only underweight outcomes are dropped when losing."""
        result = calculate_for_target_date(
            30, 170, 130, CalculationSex.MALE,
            start_date, start_date + timedelta(days=70), CalculationGoal.LOSS,
        )
        assert len(result.result_by_rate) == len(RateLadder.RATES)
        assert result.result_by_rate[100].bmi_category == BmiCategory.SEVERELY_OBESE

    def test_empty_result_is_not_an_error(self, start_date: date) -> None:
        result = calculate_for_target_date(
            30, 180, 50, CalculationSex.MALE,
            start_date, start_date + timedelta(days=100), CalculationGoal.LOSS,
        )
        assert result.result_by_rate == {}
        assert result.to_dict()["resultByRate"] == {}

    def test_partial_week_counts_nothing(self, start_date: date) -> None:
        result = calculate_for_target_date(
            30, 170, 70, CalculationSex.MALE,
            start_date, start_date + timedelta(days=6), CalculationGoal.LOSS,
        )
        assert {rated.target_weight for rated in result.result_by_rate.values()} == {70}

    @pytest.mark.parametrize("days", [0, -1, -30])
    def test_rejects_non_positive_duration(self, start_date: date, days: int) -> None:
        with pytest.raises(InvalidDurationError):
            calculate_for_target_date(
                30, 170, 80, CalculationSex.MALE,
                start_date, start_date + timedelta(days=days), CalculationGoal.LOSS,
            )

    def test_input_variant(self, start_date: date) -> None:
        wizard_input = WizardTargetDateInput(
            age=30,
            sex=CalculationSex.FEMALE,
            current_weight=45,
            height=155,
            calculation_goal=CalculationGoal.GAIN,
            start_date=start_date,
            target_date=start_date + timedelta(days=150),
        )
        result = calculate_for_target_date_input(wizard_input)
        assert result.result_by_rate[700].target_weight == 59

    def test_to_dict(self, start_date: date) -> None:
        data = calculate_for_target_date(
            30, 155, 45, CalculationSex.FEMALE,
            start_date, start_date + timedelta(days=150), CalculationGoal.GAIN,
        ).to_dict()

        assert data["durationDays"] == 150
        assert data["resultByRate"]["100"] == {
            "targetWeight": 47,
            "bmi": 20,
            "bmiCategory": "standard_weight",
        }
