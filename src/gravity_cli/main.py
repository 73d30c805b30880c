"""CLI entrypoint using typer."""

from __future__ import annotations

from pathlib import Path

import structlog
import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from gravity_core.config.settings import Settings
from gravity_core.exceptions import GravityError
from gravity_core.models.geometry import Point
from gravity_core.models.match import AttributeProfile, RequirementSet
from gravity_core.models.weights import DIMENSIONS, MatchWeights
from gravity_engine.conversion import weights_to_position
from gravity_engine.keyboard import shift_weight
from gravity_engine.magnetics import resolve_pointer
from gravity_engine.observability import configure_logging, session_context
from gravity_engine.presets import active_preset
from gravity_engine.scoring import calculate_match

app = typer.Typer(
    name="gravity",
    help="Inspect the match-priority circle and overlap scorer",
)
console = Console()
logger = structlog.get_logger()


def _load_settings(verbose: bool) -> Settings:
    """Build settings and configure logging for a command."""
    settings = Settings()
    if verbose:
        settings.log_level = "DEBUG"
    configure_logging(settings)
    return settings


def _weights(
    skills: int, compensation: int, culture: int, normalized: bool = False
) -> MatchWeights:
    """Validate a weight triple from the command line.

    With ``normalized`` the triple must also sum to 100, as engine outputs do.
    """
    try:
        result = MatchWeights(skills=skills, compensation=compensation, culture=culture)
    except ValidationError as exc:
        console.print(f"[red]Error:[/red] invalid weights: {exc.errors()[0]['msg']}")
        raise typer.Exit(code=1) from exc

    if normalized and result.total != 100:
        console.print(
            f"[red]Error:[/red] invalid weights: must sum to 100, got {result.total}"
        )
        raise typer.Exit(code=1)
    return result


def _print_weights(weights: MatchWeights) -> None:
    """Print a weight triple as a small table."""
    table = Table(show_header=True, header_style="bold")
    for dimension in DIMENSIONS:
        table.add_column(dimension.capitalize(), justify="right")
    table.add_row(*(f"{weights.get(d)}%" for d in DIMENSIONS))
    console.print(table)


@app.command()
def weights(
    x: float = typer.Argument(..., help="Horizontal position in the 300x300 space"),
    y: float = typer.Argument(..., help="Vertical position in the 300x300 space"),
    dragging: bool = typer.Option(
        False, "--dragging", help="Apply the soft drag pull instead of the release snap"
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
) -> None:
    """Resolve a pointer position into priority weights."""
    settings = _load_settings(verbose)
    with session_context("weights"):
        result = resolve_pointer(
            Point(x=x, y=y), is_dragging=dragging, strength=settings.pull_strength
        )
        _print_weights(result)

        preset = active_preset(result)
        if preset is not None:
            console.print(f"[dim]Preset: {preset.label}[/dim]")


@app.command()
def position(
    skills: int = typer.Argument(..., help="Skills weight"),
    compensation: int = typer.Argument(..., help="Compensation weight"),
    culture: int = typer.Argument(..., help="Culture weight"),
) -> None:
    """Show where the puck is drawn for a weight triple."""
    point = weights_to_position(_weights(skills, compensation, culture))
    console.print(f"x={point.x:.2f} y={point.y:.2f}")


@app.command()
def shift(
    skills: int = typer.Argument(..., help="Skills weight"),
    compensation: int = typer.Argument(..., help="Compensation weight"),
    culture: int = typer.Argument(..., help="Culture weight"),
    dimension: str = typer.Argument(..., help="Dimension to shift: skills, compensation, culture"),
    amount: int | None = typer.Option(
        None, "--by", help="Signed points to move (default: keyboard step)"
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
) -> None:
    """Shift weight toward one dimension the way the arrow keys do."""
    settings = _load_settings(verbose)
    step = settings.keyboard_step if amount is None else amount
    current = _weights(skills, compensation, culture, normalized=True)
    with session_context("shift"):
        try:
            result = shift_weight(current, dimension, step)
        except GravityError as exc:
            console.print(f"[red]Error:[/red] {exc}")
            raise typer.Exit(code=1) from exc
        logger.debug("weights_shifted", dimension=dimension, before=current, after=result)
        _print_weights(result)


@app.command()
def preset(
    skills: int = typer.Argument(..., help="Skills weight"),
    compensation: int = typer.Argument(..., help="Compensation weight"),
    culture: int = typer.Argument(..., help="Culture weight"),
) -> None:
    """Show which preset, if any, a weight triple matches."""
    current = _weights(skills, compensation, culture, normalized=True)
    with session_context("preset"):
        match = active_preset(current)
    console.print(match.key if match is not None else "none")


@app.command()
def score(
    target: Path = typer.Argument(
        ..., help="JSON file with the target's requirements", exists=True
    ),
    candidate: Path = typer.Argument(
        ..., help="JSON file with the candidate's attributes", exists=True
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
) -> None:
    """Score a candidate's attributes against a target's requirements."""
    settings = _load_settings(verbose)
    try:
        requirements = RequirementSet.model_validate_json(target.read_text())
        attributes = AttributeProfile.model_validate_json(candidate.read_text())
    except ValidationError as exc:
        console.print(f"[red]Error:[/red] invalid input: {exc.error_count()} validation error(s)")
        raise typer.Exit(code=1) from exc

    with session_context("score"):
        result = calculate_match(requirements, attributes, settings.category_weights())
        logger.info("score_command_complete", overall=result.overall, band=result.band)

    console.print(f"[bold]Overall:[/bold] {result.overall}% ({result.band})")
    table = Table(show_header=True, header_style="bold")
    table.add_column("Dimension")
    table.add_column("Overlap", justify="right")
    for dimension, value in result.breakdown.items():
        table.add_row(dimension, f"{value}%")
    console.print(table)


@app.command()
def version() -> None:
    """Show version."""
    console.print("match-gravity v0.1.0")


if __name__ == "__main__":
    app()
