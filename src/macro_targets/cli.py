import json
import logging
import os
from dataclasses import asdict
from datetime import date
from pathlib import Path
from typing import Optional

import typer

from .models import DayEntry
from .profile_io import load_profile, parse_session
from .targets import compute_daily_targets, estimate_tdee

app = typer.Typer(help="Daily nutrition target utilities")

PROFILE_ENVVAR = "MACRO_TARGETS_PROFILE"
LOG_LEVEL_ENVVAR = "MACRO_TARGETS_LOG_LEVEL"


def _log_level(name: Optional[str]) -> int:
    """Numeric level for ``name``; unknown or empty names fall back to WARNING."""
    level = logging.getLevelName((name or "WARNING").strip().upper())
    if not isinstance(level, int):
        typer.echo(f"warning: unknown log level {name!r}, using WARNING", err=True)
        return logging.WARNING
    return level


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log pipeline stages at DEBUG level"),
) -> None:
    level = logging.DEBUG if verbose else _log_level(os.environ.get(LOG_LEVEL_ENVVAR))
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s %(message)s")


def _reference_date(on: Optional[str]) -> date:
    if on is None:
        return date.today()
    try:
        return date.fromisoformat(on)
    except ValueError:
        raise typer.BadParameter(f"expected YYYY-MM-DD, got {on!r}", param_hint="--on") from None


def _fail(message: str) -> None:
    typer.echo(f"error: {message}", err=True)
    raise typer.Exit(code=2)


@app.command()
def targets(
    weight_kg: float = typer.Option(..., help="Body weight in kg"),
    day_type: str = typer.Option("performance", help="Day type: performance, fatburner, metabolize"),
    profile: Path = typer.Option(..., envvar=PROFILE_ENVVAR, exists=True, dir_okay=False, help="Profile JSON file"),
    session: list[str] = typer.Option([], "--session", "-s", help="Planned session as TYPE:MINUTES, repeatable"),
    on: Optional[str] = typer.Option(None, help="Reference date for the age calculation (default: today)"),
) -> None:
    """Compute daily calorie, macro and meal-point targets."""
    reference = _reference_date(on)
    try:
        user = load_profile(profile)
        entry = DayEntry(
            weight_kg=weight_kg,
            day_type=day_type.lower(),
            sessions=tuple(parse_session(s) for s in session),
        )
    except ValueError as exc:
        _fail(str(exc))

    result = compute_daily_targets(user, entry, reference)
    if result is None:
        typer.echo("null")
        raise typer.Exit(code=1)
    typer.echo(json.dumps(asdict(result), ensure_ascii=False))


@app.command()
def tdee(
    weight_kg: float = typer.Option(..., min=0.0001, help="Body weight in kg"),
    profile: Path = typer.Option(..., envvar=PROFILE_ENVVAR, exists=True, dir_okay=False, help="Profile JSON file"),
    session: list[str] = typer.Option([], "--session", "-s", help="Planned session as TYPE:MINUTES, repeatable"),
    on: Optional[str] = typer.Option(None, help="Reference date for the age calculation (default: today)"),
) -> None:
    """Estimate total daily energy expenditure before the goal adjustment."""
    reference = _reference_date(on)
    try:
        user = load_profile(profile)
        sessions = [parse_session(s) for s in session]
    except ValueError as exc:
        _fail(str(exc))

    typer.echo(
        json.dumps(
            {
                "weight_kg": weight_kg,
                "bmr_equation": user.bmr_equation,
                "estimated_tdee": estimate_tdee(user, weight_kg, sessions, reference),
            }
        )
    )


if __name__ == "__main__":
    app()
