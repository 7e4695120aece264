"""ABOUTME: CLI entry point for typecoverage commands.
ABOUTME: Provides matchup, chart, defense, and coverage commands via Typer."""

from collections.abc import Callable
from pathlib import Path

import polars as pl
import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from typecoverage.analysis import (
    DefensiveCategory,
    classify_defensive,
    coverage_frame,
    coverage_symbol,
    defensive_profile,
    dual_effectiveness,
    dual_type_chart_frame,
    uncovered_types,
)
from typecoverage.config import load_roster
from typecoverage.logs import init_logging
from typecoverage.settings import settings
from typecoverage.utils.type_chart import TYPES, PokeType, UnknownTypeError, parse_type

app = typer.Typer(
    name="typecoverage",
    help="Pokemon type effectiveness and team coverage tool.",
    no_args_is_help=True,
)

console = Console()


def _parse_type_arg(value: str) -> PokeType:
    """Parse a type given on the command line, exiting on unknown types."""
    try:
        return parse_type(value)
    except UnknownTypeError as e:
        console.print(f"[red]Error:[/] {escape(str(e))}")
        raise typer.Exit(1) from None


def _format_multiplier(multiplier: float) -> str:
    return f"{multiplier:g}×"


def _format_types(types: list[PokeType]) -> str:
    return ", ".join(str(t) for t in types) if types else "-"


def _matrix_table(
    title: str,
    label_header: str,
    frame: pl.DataFrame,
    label_column: str,
    symbol_of: Callable[[float], str],
) -> Table:
    """Build a rich table from a label column plus one multiplier column per type."""
    table = Table(title=title)
    table.add_column(label_header, style="bold")
    for def_type in TYPES:
        table.add_column(def_type.value[:3], justify="center")

    for row in frame.iter_rows(named=True):
        table.add_row(row[label_column], *(symbol_of(row[def_type.value]) for def_type in TYPES))
    return table


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable logging with the default logging config"),
    log_config: Path | None = typer.Option(None, "--log-config", help="Enable logging with this logging YAML file"),
) -> None:
    """Pokemon type effectiveness and team coverage tool."""
    if log_config is None:
        if not verbose:
            return
        log_config = settings.logging_config_path

    try:
        init_logging(log_config)
    except FileNotFoundError as e:
        console.print(f"[red]Error:[/] {escape(str(e))}")
        raise typer.Exit(1) from None


@app.command()
def matchup(
    attacker: str = typer.Argument(..., help="Attacking type"),
    defender: str = typer.Argument(..., help="Defender's primary type"),
    second: str | None = typer.Argument(None, help="Defender's secondary type"),
) -> None:
    """Show the multiplier of an attacking type against a mono- or dual-type defender."""
    atk_type = _parse_type_arg(attacker)
    def_type1 = _parse_type_arg(defender)
    def_type2 = _parse_type_arg(second) if second else None

    multiplier = dual_effectiveness(atk_type, def_type1, def_type2)
    category = classify_defensive(multiplier)

    defender_label = f"{def_type1}/{def_type2}" if def_type2 and def_type2 != def_type1 else str(def_type1)
    console.print(f"{atk_type} vs {defender_label}: [bold]{_format_multiplier(multiplier)}[/] ({category.value})")


@app.command()
def chart(
    secondary: str | None = typer.Option(None, "--secondary", "-s", help="Secondary defending type"),
) -> None:
    """Print the attacker x defender type chart."""
    secondary_type = _parse_type_arg(secondary) if secondary else None
    frame = dual_type_chart_frame(secondary_type)

    title = f"Type chart (secondary: {secondary_type})" if secondary_type else "Type chart"
    table = _matrix_table(title, "Atk \\ Def", frame, "attacker", lambda value: classify_defensive(value).symbol)
    console.print(table)


@app.command()
def defense(
    type1: str = typer.Argument(..., help="Defender's primary type"),
    type2: str | None = typer.Argument(None, help="Defender's secondary type"),
) -> None:
    """Show weaknesses, resistances, and immunities of a defensive typing."""
    def_type1 = _parse_type_arg(type1)
    def_type2 = _parse_type_arg(type2) if type2 else None

    profile = defensive_profile(def_type1, def_type2)
    quadruple = [t for t, c in profile["categories"].items() if c == DefensiveCategory.QUADRUPLE_WEAK]

    console.print(f"[red]Weaknesses ({profile['weakness_count']}):[/] {_format_types(profile['weaknesses'])}")
    if quadruple:
        console.print(f"[red]  4x:[/] {_format_types(quadruple)}")
    console.print(f"[green]Resistances ({profile['resistance_count']}):[/] {_format_types(profile['resistances'])}")
    console.print(f"[blue]Immunities ({profile['immunity_count']}):[/] {_format_types(profile['immunities'])}")


@app.command()
def coverage(
    roster_file: Path = typer.Argument(..., help="Roster YAML file"),
) -> None:
    """Show offensive type coverage of a roster file."""
    try:
        roster_config = load_roster(roster_file)
    except FileNotFoundError as e:
        console.print(f"[red]Error:[/] {escape(str(e))}")
        raise typer.Exit(1) from None
    except ValidationError as e:
        console.print(f"[red]Invalid roster file:[/] {escape(str(e))}")
        raise typer.Exit(1) from None

    frame = coverage_frame(roster_config.to_roster(), roster_config.get_member_names())
    console.print(_matrix_table("Offensive type coverage", "Pokemon", frame, "member", coverage_symbol))

    team_row = frame.row(-1, named=True)
    missing = uncovered_types({def_type: team_row[def_type.value] for def_type in TYPES})
    if missing:
        console.print(f"[yellow]Not covered super effectively:[/] {_format_types(missing)}")
    else:
        console.print("[green]Every type is covered super effectively.[/]")


if __name__ == "__main__":
    app()
