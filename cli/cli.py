"""CLI for the FitTrain recommendation engine.

Developer CLI that runs the recommendation engine against a JSON exercise
library and a JSON client profile, printing ranked exercises, a daily
workout, or a weekly plan.
"""

import json
import sys
from pathlib import Path
from typing import NoReturn

import typer
from loguru import logger
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from fittrain.config.settings import settings
from fittrain.core.logger import setup_logger
from fittrain.exercises.errors import ExerciseLibraryError
from fittrain.exercises.models import Exercise
from fittrain.exercises.store import JsonExerciseStore
from fittrain.profiles.models import ClientProfile
from fittrain.recommendations.calendar import date_for_weekday, today_index, weekday_index, weekday_name
from fittrain.recommendations.daily import compose_daily_workout
from fittrain.recommendations.scorer import score_recommendations
from fittrain.recommendations.types import DailyWorkout, Recommendation
from fittrain.recommendations.weekly import compose_weekly_plan

console = Console()

app = typer.Typer(
    name="fittrain",
    help="FitTrain CLI - exercise recommendations, daily workouts and weekly plans",
    add_completion=False,
)

EMPTY_MESSAGE = "No matching exercises for this client. Add exercises to the library or relax the profile constraints."

ExercisesOption = typer.Option(None, "--exercises", "-e", help="JSON exercise library (default: FITTRAIN_EXERCISE_LIBRARY)")
ProfileOption = typer.Option(None, "--profile", "-p", help="JSON client profile (default: no constraints)")
JsonOption = typer.Option(False, "--json", help="Print JSON instead of tables")
DebugOption = typer.Option(False, "--debug", help="Enable debug logging")


def _setup_logging(debug: bool = False) -> None:
    level = "DEBUG" if debug else settings.log_level
    setup_logger(level=level, log_file=settings.log_file)


def _fail(message: str) -> NoReturn:
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")
    raise typer.Exit(1)


def _load_exercises(path: Path | None) -> list[Exercise]:
    library = path or settings.exercise_library_path
    if library is None:
        _fail("No exercise library given. Use --exercises or set FITTRAIN_EXERCISE_LIBRARY.")

    try:
        return JsonExerciseStore(library).list_exercises()
    except ExerciseLibraryError as e:
        logger.bind(code=e.code).error("Failed to load exercise library")
        _fail(f"{e.code}: {'; '.join(e.details)}")


def _load_profile(path: Path | None) -> ClientProfile:
    if path is None:
        return ClientProfile()

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
        return ClientProfile.model_validate(raw)
    except FileNotFoundError:
        _fail(f"Profile not found: {path}")
    except UnicodeDecodeError:
        _fail(f"Profile is not valid UTF-8: {path}")
    except OSError as e:
        _fail(f"Profile could not be read: {path}: {e.strerror or e}")
    except json.JSONDecodeError as e:
        _fail(f"Profile is not valid JSON: {path}: {e.msg}")
    except ValidationError as e:
        _fail(f"Invalid profile {path}:\n{e}")


def _parse_day(value: str | None) -> int:
    if value is None:
        return today_index()
    if value.strip().isdigit():
        day = int(value)
        if 0 <= day <= 6:
            return day
        raise typer.BadParameter("Day index must be between 0 (Sunday) and 6 (Saturday)")
    day_index = weekday_index(value)
    if day_index is None:
        raise typer.BadParameter(f"Unknown weekday: {value}")
    return day_index


def _recommendation_payload(rec: Recommendation) -> dict:
    return {
        "exercise": rec.exercise.model_dump(mode="json", by_alias=True),
        "score": rec.score,
        "matchReason": rec.match_reasons,
        "tags": rec.tags,
    }


def _workout_payload(workout: DailyWorkout) -> dict:
    return {role.value: [_recommendation_payload(rec) for rec in recs] for role, recs in workout.sections()}


def _recommendation_table(title: str, recommendations: list[Recommendation]) -> Table:
    table = Table(title=title, show_lines=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Exercise", style="bold")
    table.add_column("Category")
    table.add_column("Difficulty")
    table.add_column("Equipment")
    table.add_column("Score", justify="right", style="cyan")
    table.add_column("Tags", style="green")

    for position, rec in enumerate(recommendations, start=1):
        exercise = rec.exercise
        table.add_row(
            str(position),
            exercise.name,
            exercise.category,
            exercise.difficulty,
            exercise.equipment,
            str(rec.score),
            ", ".join(rec.tags),
        )
    return table


def _print_workout(title: str, workout: DailyWorkout) -> None:
    if workout.is_empty:
        console.print(Panel(EMPTY_MESSAGE, title=title, border_style="yellow"))
        return

    console.print(Panel(title, border_style="blue"))
    for role, recs in workout.sections():
        if recs:
            console.print(_recommendation_table(role.value.capitalize(), recs))


@app.command()
def recommend(
    exercises: Path | None = ExercisesOption,
    profile: Path | None = ProfileOption,
    count: int | None = typer.Option(None, "--count", "-n", min=1, help="Number of recommendations"),
    as_json: bool = JsonOption,
    debug: bool = DebugOption,
) -> None:
    """Rank the exercises that best suit a client."""
    _setup_logging(debug)
    library = _load_exercises(exercises)
    client = _load_profile(profile)

    recommendations = score_recommendations(library, client, count or settings.ui_recommendation_count)

    if as_json:
        typer.echo(json.dumps([_recommendation_payload(rec) for rec in recommendations], indent=2))
        return
    if not recommendations:
        console.print(Panel(EMPTY_MESSAGE, title="Recommendations", border_style="yellow"))
        return
    console.print(_recommendation_table("Recommendations", recommendations))


@app.command()
def daily(
    exercises: Path | None = ExercisesOption,
    profile: Path | None = ProfileOption,
    day: str | None = typer.Option(None, "--day", "-d", help="Weekday name or index 0-6 (0 = Sunday); default today"),
    as_json: bool = JsonOption,
    debug: bool = DebugOption,
) -> None:
    """Compose one day's workout."""
    _setup_logging(debug)
    day_of_week = _parse_day(day)
    library = _load_exercises(exercises)
    client = _load_profile(profile)

    workout = compose_daily_workout(library, client, day_of_week)

    if as_json:
        typer.echo(json.dumps({"day": day_of_week, "workout": _workout_payload(workout)}, indent=2))
        return
    _print_workout(f"{weekday_name(day_of_week)} {date_for_weekday(day_of_week):%b %d}", workout)


@app.command()
def week(
    exercises: Path | None = ExercisesOption,
    profile: Path | None = ProfileOption,
    as_json: bool = JsonOption,
    debug: bool = DebugOption,
) -> None:
    """Compose a weekly plan over the client's training days."""
    _setup_logging(debug)
    library = _load_exercises(exercises)
    client = _load_profile(profile)

    plan = compose_weekly_plan(library, client)

    if as_json:
        typer.echo(json.dumps({str(day): _workout_payload(workout) for day, workout in plan.items()}, indent=2))
        return
    if not plan:
        console.print(Panel("No training days resolved for this client.", title="Weekly plan", border_style="yellow"))
        return
    for day, workout in plan.items():
        _print_workout(weekday_name(day), workout)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        console.print("[yellow]Interrupted[/yellow]")
        sys.exit(130)


if __name__ == "__main__":
    main()
