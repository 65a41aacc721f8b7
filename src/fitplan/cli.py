"""CLI interface using Typer."""

from __future__ import annotations

import json
from datetime import date
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.table import Table

from fitplan.config import configure_logging, get_settings, reload_settings
from fitplan.wizard import (
    CalculationGoal,
    CalculationSex,
    RateLadder,
    ValidationError,
    WizardError,
    WizardInput,
    WizardResult,
    WizardTargetDateInput,
    WizardTargetDateResult,
    WizardTargetWeightInput,
    WizardTargetWeightResult,
    calculate,
    calculate_for_target_date_input,
    calculate_for_target_weight_input,
)
from fitplan.wizard.errors import FieldError
from fitplan.wizard.targets import (
    WizardTargets,
    create_target_date_targets,
    create_target_weight_targets,
)
from fitplan.wizard.validation import (
    ACTIVITY_LEVELS,
    parse_activity_level,
    validate_target_date_input,
    validate_target_weight_input,
    validate_wizard_input,
)

app = typer.Typer(
    help="Calorie and weight goal planning",
    no_args_is_help=True,
)
console = Console()

wizard_app = typer.Typer(help="Goal wizard: TDEE, BMI and weight timelines")
app.add_typer(wizard_app, name="wizard")


# ============================================================================
# Helpers
# ============================================================================


def output_json(response: dict, file=None) -> None:
    """Output JSON response to stdout or file."""
    json_str = json.dumps(response, indent=2)
    if file:
        file.write(json_str)
    else:
        print(json_str)


def use_json(json_output: bool) -> bool:
    """JSON if requested on the command line or configured as default."""
    return json_output or get_settings().defaults.output_format == "json"


def fail(command: str, error: WizardError, json_output: bool) -> NoReturn:
    """Report a wizard error and exit with status 1."""
    if isinstance(error, ValidationError):
        messages = [f"{e.field}: {e.message}" for e in error.errors]
        details = error.to_dict()["errors"]
    else:
        messages = [str(error)]
        details = [{"message": str(error)}]

    if json_output:
        output_json({
            "success": False,
            "command": command,
            "errors": details,
        })
    else:
        for message in messages:
            console.print(f"[red]{message}[/red]")
    raise typer.Exit(1)


def parse_date(value: Optional[str], field: str) -> date:
    """Parse YYYY-MM-DD, defaulting to today."""
    if value is None:
        return date.today()
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise ValidationError([
            FieldError(
                field,
                "validation.wizard.date",
                f"Invalid date '{value}', expected YYYY-MM-DD.",
            )
        ]) from None


def resolve_activity(activity: Optional[str]) -> float:
    if activity is None:
        return get_settings().defaults.activity_level
    return parse_activity_level(activity)


def check_rate(rate: int) -> None:
    if not RateLadder.contains(rate):
        raise ValidationError([
            FieldError(
                "rate",
                "validation.wizard.rate",
                f"Please choose a rate out of {list(RateLadder.RATES)}.",
            )
        ])


def print_wizard_result(result: WizardResult) -> None:
    table = Table(title="Wizard Result")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")

    table.add_row("BMR", f"{result.bmr:.0f} kcal")
    table.add_row("TDEE", f"{result.tdee:.0f} kcal")
    table.add_row("Deficit/Surplus", f"{result.deficit:.0f} kcal")
    table.add_row("Daily target", f"{result.target:.0f} kcal")
    table.add_row("BMI", f"{result.bmi} ({result.bmi_category.value})")
    table.add_row(
        "Target BMI", f"{result.target_bmi.lower}-{result.target_bmi.upper}"
    )
    table.add_row(
        "Target weight",
        f"{result.target_weight} kg "
        f"({result.target_weight_lower}-{result.target_weight_upper} kg)",
    )
    table.add_row("Duration", f"{result.duration_days} days")
    table.add_row("Recommendation", result.recommendation.value)

    console.print(table)


def print_target_weight_result(result: WizardTargetWeightResult) -> None:
    table = Table(title=f"Target classification: {result.target_classification.value}")
    table.add_column("Rate (kcal/day)", justify="right", style="cyan")
    table.add_column("kg/week", justify="right")
    table.add_column("Reached on")

    for rate, day in result.date_by_rate.items():
        table.add_row(str(rate), f"{result.progress_by_rate[rate]:.2f}", day.isoformat())

    console.print(table)
    if result.warning:
        console.print(f"[yellow]{result.message}[/yellow]")


def print_target_date_result(result: WizardTargetDateResult) -> None:
    if not result.result_by_rate:
        console.print("[yellow]No recommendable rate reaches a safe weight by that date.[/yellow]")
        return

    table = Table(title=f"Reachable in {result.duration_days} days")
    table.add_column("Rate (kcal/day)", justify="right", style="cyan")
    table.add_column("Weight (kg)", justify="right")
    table.add_column("BMI", justify="right")
    table.add_column("Category")

    for rate, rated in result.result_by_rate.items():
        table.add_row(
            str(rate), str(rated.target_weight), str(rated.bmi), rated.bmi_category.value
        )

    console.print(table)


def print_targets(targets: WizardTargets) -> None:
    calorie = targets.calorie_target
    weight = targets.weight_target
    console.print("[bold]Calorie target[/bold]")
    console.print(f"  {calorie.start_date} to {calorie.end_date}")
    console.print(f"  Target: {calorie.target_calories:.0f} kcal/day")
    console.print(f"  Maximum: {calorie.maximum_calories:.0f} kcal/day")
    console.print("[bold]Weight target[/bold]")
    console.print(f"  {weight.start_date} to {weight.end_date}")
    console.print(f"  {weight.initial_weight} kg -> {weight.target_weight} kg")


# ============================================================================
# Main Commands
# ============================================================================


@app.callback()
def main(
    config: Optional[Path] = typer.Option(
        None, "--config", help="Path to config.yaml (default: ~/.fitplan/config.yaml)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Load settings and configure logging before any command."""
    settings = reload_settings(config)
    configure_logging(
        "DEBUG" if verbose else settings.logging.level,
        json=settings.logging.json,
    )


@app.command("activity-levels")
def activity_levels(
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """List the supported activity levels."""
    if use_json(json_output):
        output_json({
            "success": True,
            "command": "activity-levels",
            "data": [
                {
                    "level": info.level,
                    "key": info.key,
                    "label": info.label,
                    "description": info.description,
                }
                for info in ACTIVITY_LEVELS
            ],
            "human_summary": f"{len(ACTIVITY_LEVELS)} activity levels",
        })
        return

    table = Table(title="Activity Levels")
    table.add_column("Level", justify="right", style="cyan")
    table.add_column("Key")
    table.add_column("Label")
    table.add_column("Description")
    for info in ACTIVITY_LEVELS:
        table.add_row(str(info.level), info.key, info.label, info.description)
    console.print(table)


# ============================================================================
# Wizard Commands
# ============================================================================


@wizard_app.command("calculate")
def wizard_calculate(
    age: int = typer.Option(..., "--age", help="Age in years"),
    sex: CalculationSex = typer.Option(..., "--sex", case_sensitive=False, help="Sex"),
    weight: float = typer.Option(..., "--weight", help="Current weight in kg"),
    height: float = typer.Option(..., "--height", help="Height in cm"),
    activity: Optional[str] = typer.Option(
        None, "--activity", help="Activity multiplier or key (see activity-levels)"
    ),
    weekly_difference: Optional[int] = typer.Option(
        None, "--weekly-difference", help="Rate ladder index 0-7 (x100 kcal/day)"
    ),
    goal: CalculationGoal = typer.Option(..., "--goal", case_sensitive=False, help="Goal"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Calculate BMR, TDEE, BMI and the default timeline."""
    json_output = use_json(json_output)
    settings = get_settings()

    try:
        wizard_input = WizardInput(
            age=age,
            sex=sex,
            weight=weight,
            height=height,
            activity_level=resolve_activity(activity),
            weekly_difference=(
                settings.defaults.weekly_difference
                if weekly_difference is None
                else weekly_difference
            ),
            calculation_goal=goal,
        )
        validate_wizard_input(wizard_input)
        result = calculate(wizard_input)
    except WizardError as e:
        fail("wizard calculate", e, json_output)

    if json_output:
        output_json({
            "success": True,
            "command": "wizard calculate",
            "data": result.to_dict(),
            "human_summary": (
                f"TDEE {result.tdee:.0f} kcal, target {result.target:.0f} kcal, "
                f"{result.duration_days} days to {result.target_weight} kg"
            ),
        })
    else:
        print_wizard_result(result)


@wizard_app.command("target-weight")
def wizard_target_weight(
    age: int = typer.Option(..., "--age", help="Age in years"),
    sex: CalculationSex = typer.Option(..., "--sex", case_sensitive=False, help="Sex"),
    weight: float = typer.Option(..., "--weight", help="Current weight in kg"),
    height: float = typer.Option(..., "--height", help="Height in cm"),
    target_weight: float = typer.Option(..., "--target-weight", help="Target weight in kg"),
    start_date: Optional[str] = typer.Option(
        None, "--start-date", help="Start date (YYYY-MM-DD, default: today)"
    ),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show when a target weight is reached at each rate."""
    json_output = use_json(json_output)

    try:
        wizard_input = WizardTargetWeightInput(
            age=age,
            sex=sex,
            current_weight=weight,
            height=height,
            target_weight=target_weight,
            start_date=parse_date(start_date, "start_date"),
        )
        validate_target_weight_input(wizard_input)
        result = calculate_for_target_weight_input(wizard_input)
    except WizardError as e:
        fail("wizard target-weight", e, json_output)

    if json_output:
        output_json({
            "success": True,
            "command": "wizard target-weight",
            "data": result.to_dict(),
            "human_summary": (
                f"Target classifies as {result.target_classification.value}"
                + (f": {result.message}" if result.warning else "")
            ),
        })
    else:
        print_target_weight_result(result)


@wizard_app.command("target-date")
def wizard_target_date(
    age: int = typer.Option(..., "--age", help="Age in years"),
    sex: CalculationSex = typer.Option(..., "--sex", case_sensitive=False, help="Sex"),
    weight: float = typer.Option(..., "--weight", help="Current weight in kg"),
    height: float = typer.Option(..., "--height", help="Height in cm"),
    goal: CalculationGoal = typer.Option(..., "--goal", case_sensitive=False, help="Goal"),
    target_date: str = typer.Option(..., "--target-date", help="Target date (YYYY-MM-DD)"),
    start_date: Optional[str] = typer.Option(
        None, "--start-date", help="Start date (YYYY-MM-DD, default: today)"
    ),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show the weight reachable by a target date at each safe rate."""
    json_output = use_json(json_output)

    try:
        wizard_input = WizardTargetDateInput(
            age=age,
            sex=sex,
            current_weight=weight,
            height=height,
            calculation_goal=goal,
            start_date=parse_date(start_date, "start_date"),
            target_date=parse_date(target_date, "target_date"),
        )
        validate_target_date_input(wizard_input, today=date.today())
        result = calculate_for_target_date_input(wizard_input)
    except WizardError as e:
        fail("wizard target-date", e, json_output)

    if json_output:
        output_json({
            "success": True,
            "command": "wizard target-date",
            "data": result.to_dict(),
            "human_summary": (
                f"{len(result.result_by_rate)} recommendable rates "
                f"over {result.duration_days} days"
            ),
        })
    else:
        print_target_date_result(result)


@wizard_app.command("plan-weight")
def wizard_plan_weight(
    age: int = typer.Option(..., "--age", help="Age in years"),
    sex: CalculationSex = typer.Option(..., "--sex", case_sensitive=False, help="Sex"),
    weight: float = typer.Option(..., "--weight", help="Current weight in kg"),
    height: float = typer.Option(..., "--height", help="Height in cm"),
    activity: Optional[str] = typer.Option(
        None, "--activity", help="Activity multiplier or key (see activity-levels)"
    ),
    target_weight: float = typer.Option(..., "--target-weight", help="Target weight in kg"),
    rate: int = typer.Option(..., "--rate", help="Daily rate in kcal (100-700)"),
    start_date: Optional[str] = typer.Option(
        None, "--start-date", help="Start date (YYYY-MM-DD, default: today)"
    ),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Build calorie and weight targets for a target weight at one rate."""
    json_output = use_json(json_output)

    try:
        check_rate(rate)
        start = parse_date(start_date, "start_date")
        goal = CalculationGoal.LOSS if target_weight < weight else CalculationGoal.GAIN

        wizard_input = WizardInput(
            age=age,
            sex=sex,
            weight=weight,
            height=height,
            activity_level=resolve_activity(activity),
            weekly_difference=rate // 100,
            calculation_goal=goal,
        )
        target_weight_input = WizardTargetWeightInput(
            age=age,
            sex=sex,
            current_weight=weight,
            height=height,
            target_weight=target_weight,
            start_date=start,
        )
        validate_wizard_input(wizard_input)
        validate_target_weight_input(target_weight_input)

        targets = create_target_weight_targets(
            wizard_input,
            calculate(wizard_input),
            calculate_for_target_weight_input(target_weight_input),
            start_date=start,
            target_weight=target_weight,
            selected_rate=rate,
        )
    except WizardError as e:
        fail("wizard plan-weight", e, json_output)

    if json_output:
        output_json({
            "success": True,
            "command": "wizard plan-weight",
            "data": targets.to_dict(),
            "human_summary": (
                f"{targets.calorie_target.target_calories:.0f} kcal/day "
                f"until {targets.calorie_target.end_date.isoformat()}"
            ),
        })
    else:
        print_targets(targets)


@wizard_app.command("plan-date")
def wizard_plan_date(
    age: int = typer.Option(..., "--age", help="Age in years"),
    sex: CalculationSex = typer.Option(..., "--sex", case_sensitive=False, help="Sex"),
    weight: float = typer.Option(..., "--weight", help="Current weight in kg"),
    height: float = typer.Option(..., "--height", help="Height in cm"),
    activity: Optional[str] = typer.Option(
        None, "--activity", help="Activity multiplier or key (see activity-levels)"
    ),
    goal: CalculationGoal = typer.Option(..., "--goal", case_sensitive=False, help="Goal"),
    target_date: str = typer.Option(..., "--target-date", help="Target date (YYYY-MM-DD)"),
    rate: int = typer.Option(..., "--rate", help="Daily rate in kcal (100-700)"),
    start_date: Optional[str] = typer.Option(
        None, "--start-date", help="Start date (YYYY-MM-DD, default: today)"
    ),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Build calorie and weight targets for a target date at one rate."""
    json_output = use_json(json_output)

    try:
        check_rate(rate)
        start = parse_date(start_date, "start_date")
        end = parse_date(target_date, "target_date")

        wizard_input = WizardInput(
            age=age,
            sex=sex,
            weight=weight,
            height=height,
            activity_level=resolve_activity(activity),
            weekly_difference=rate // 100,
            calculation_goal=goal,
        )
        target_date_input = WizardTargetDateInput(
            age=age,
            sex=sex,
            current_weight=weight,
            height=height,
            calculation_goal=goal,
            start_date=start,
            target_date=end,
        )
        validate_wizard_input(wizard_input)
        validate_target_date_input(target_date_input, today=date.today())

        targets = create_target_date_targets(
            wizard_input,
            calculate(wizard_input),
            calculate_for_target_date_input(target_date_input),
            start_date=start,
            end_date=end,
            selected_rate=rate,
        )
    except WizardError as e:
        fail("wizard plan-date", e, json_output)

    if json_output:
        output_json({
            "success": True,
            "command": "wizard plan-date",
            "data": targets.to_dict(),
            "human_summary": (
                f"{targets.calorie_target.target_calories:.0f} kcal/day, "
                f"{targets.weight_target.target_weight} kg by {end.isoformat()}"
            ),
        })
    else:
        print_targets(targets)


if __name__ == "__main__":
    app()
