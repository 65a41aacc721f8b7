"""Pytest fixtures for fitplan tests."""

from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

from fitplan.wizard.models import CalculationGoal, CalculationSex, WizardInput


@pytest.fixture
def start_date() -> date:
    """Fixed calculation start date."""
    return date(2024, 5, 1)


@pytest.fixture
def male_loss_input() -> WizardInput:
    """30 year old man, 90 kg at 180 cm, losing at 500 kcal/day."""
    return WizardInput(
        age=30,
        sex=CalculationSex.MALE,
        weight=90,
        height=180,
        activity_level=1.5,
        weekly_difference=5,
        calculation_goal=CalculationGoal.LOSS,
    )


@pytest.fixture
def female_gain_input() -> WizardInput:
    """25 year old woman, 52 kg at 155 cm, gaining at 100 kcal/day."""
    return WizardInput(
        age=25,
        sex=CalculationSex.FEMALE,
        weight=52,
        height=155,
        activity_level=1.25,
        weekly_difference=1,
        calculation_goal=CalculationGoal.GAIN,
    )


@pytest.fixture
def missing_config(tmp_path: Path) -> Path:
    """Path to a config file that does not exist (defaults apply)."""
    return tmp_path / "config.yaml"
