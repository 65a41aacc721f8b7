"""Tests for logging setup and engine log output."""

from __future__ import annotations

import json
import logging
from datetime import timedelta
from pathlib import Path

import pytest
import structlog
from typer.testing import CliRunner

from fitplan.cli import app
from fitplan.config import configure_logging
from fitplan.wizard import (
    CalculationGoal,
    CalculationSex,
    WizardInput,
    calculate,
    calculate_for_target_date,
    calculate_for_target_weight,
)

runner = CliRunner()

CALCULATE_ARGS = [
    "wizard", "calculate",
    "--age", "30", "--sex", "male", "--weight", "90", "--height", "180",
    "--activity", "1.5", "--weekly-difference", "5", "--goal", "loss", "--json",
]


@pytest.fixture(autouse=True)
def reset_logging():
    """Start and finish every test with unconfigured logging."""

    def _reset() -> None:
        structlog.reset_defaults()
        root = logging.getLogger()
        for handler in list(root.handlers):
            root.removeHandler(handler)
        root.setLevel(logging.WARNING)

    _reset()
    yield
    _reset()


def run_engine(wizard_input: WizardInput, start_date) -> None:
    calculate(wizard_input)
    calculate_for_target_weight(start_date, 30, 180, 90, CalculationSex.MALE, 73)
    calculate_for_target_date(
        30, 180, 90, CalculationSex.MALE,
        start_date, start_date + timedelta(days=150), CalculationGoal.LOSS,
    )


class TestUnconfigured:
    """The engine stays silent until logging is configured."""

    def test_entry_points_write_nothing(
        self, capsys, male_loss_input: WizardInput, start_date
    ) -> None:
        run_engine(male_loss_input, start_date)

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_json_debug_events_on_stderr(
        self, capsys, male_loss_input: WizardInput, start_date
    ) -> None:
        configure_logging("DEBUG", json=True)
        run_engine(male_loss_input, start_date)

        captured = capsys.readouterr()
        assert captured.out == ""
        events = [json.loads(line) for line in captured.err.splitlines() if line]
        assert [event["event"] for event in events] == [
            "wizard.calculate",
            "wizard.calculate_for_target_weight",
            "wizard.calculate_for_target_date",
        ]
        assert events[0]["level"] == "debug"
        assert events[0]["duration_days"] == 238
        assert "timestamp" in events[0]

    def test_console_renderer(self, capsys, male_loss_input: WizardInput) -> None:
        configure_logging("debug")
        calculate(male_loss_input)

        err = capsys.readouterr().err
        assert "wizard.calculate" in err
        assert "duration_days=238" in err

    def test_default_level_suppresses_debug(
        self, capsys, male_loss_input: WizardInput
    ) -> None:
        configure_logging()
        calculate(male_loss_input)

        assert capsys.readouterr().err == ""

    def test_unknown_level_falls_back_to_warning(self) -> None:
        configure_logging("LOUD")
        assert logging.getLogger().level == logging.WARNING

    def test_numeric_level(self) -> None:
        configure_logging(logging.INFO)
        assert logging.getLogger().level == logging.INFO


class TestVerboseFlag:
    """Tests for the global --verbose option."""

    def test_verbose_logs_engine_events(self, missing_config: Path) -> None:
        result = runner.invoke(app, ["--config", str(missing_config), "-v", *CALCULATE_ARGS])

        assert result.exit_code == 0
        assert "wizard.calculate" in result.output

    def test_quiet_by_default(self, missing_config: Path) -> None:
        result = runner.invoke(app, ["--config", str(missing_config), *CALCULATE_ARGS])

        assert result.exit_code == 0
        assert "wizard.calculate" not in result.output

    def test_json_logging_from_config(self, tmp_path: Path) -> None:
        config_path = tmp_path / "config.yaml"
        config_path.write_text("logging:\n  level: debug\n  json: true\n")

        result = runner.invoke(app, ["--config", str(config_path), *CALCULATE_ARGS])

        assert result.exit_code == 0
        assert '"event": "wizard.calculate"' in result.output
