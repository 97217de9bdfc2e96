"""CLI de vehicle-query (Typer + Rich).

Comandos:
- `search`: búsqueda no interactiva con flags.
- `interactive`: bucle de preguntas (equivalente al flujo original).
- `doctor`: diagnósticos de entorno.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from cli import doctor
from cli.prompts import collect_criteria
from cli.ui_components import (
    build_vehicles_table,
    print_banner,
    print_export_outcome,
    print_no_results,
    print_vehicles,
    say,
)
from core.config import AppSettings
from core.domain.errors import DecodeError, FetchError, InvalidCriteriaError
from core.domain.models import FilterCriteria, VehicleRecord
from core.services.vehicle_search import PipelineHooks, PipelineResult, run_search

app = typer.Typer(
    no_args_is_help=True,
    help="Query the OpenDataSoft vehicle dataset and export results to JSON/CSV.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _settings_with_overrides(
    json_output: Path | None,
    csv_output: Path | None,
    escape: bool | None,
) -> AppSettings:
    settings = AppSettings()
    update: dict[str, object] = {}
    if json_output is not None:
        update["json_output_path"] = json_output
    if csv_output is not None:
        update["csv_output_path"] = csv_output
    if escape is not None:
        update["escape_free_text"] = escape
    return settings.model_copy(update=update) if update else settings


def _execute(criteria: FilterCriteria, settings: AppSettings, *, table: bool = False) -> PipelineResult:
    def _show(vehicles: list[VehicleRecord]) -> None:
        if table:
            _console.print(build_vehicles_table(vehicles))
        else:
            print_vehicles(_console, vehicles)

    hooks = PipelineHooks(
        vehicles_found=_show,
        no_results=lambda: print_no_results(_console),
        export_done=lambda outcome: print_export_outcome(_console, outcome),
    )
    try:
        return run_search(criteria, settings=settings, hooks=hooks)
    except (FetchError, DecodeError) as exc:
        say(_console, f"Error: {exc}", style="bold red")
        raise typer.Exit(code=1) from exc


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Vehicle dataset query tool."""

    try:
        settings = AppSettings()
    except ValidationError as exc:
        say(_console, f"Invalid configuration: {exc}", style="bold red")
        raise typer.Exit(code=2) from exc

    level = "DEBUG" if verbose else settings.log_level
    configure_logging(level)


@app.command()
def search(
    make: str = typer.Option("", "--make", help="Car maker (exact match)."),
    model: str = typer.Option("", "--model", help="Model (exact match)."),
    year: int = typer.Option(0, "--year", help="Model year (0 = any)."),
    cylinders: int = typer.Option(0, "--cylinders", help="Cylinder count (0 = any)."),
    limit: int = typer.Option(0, "--limit", help="Maximum results (0 = default)."),
    sort: str = typer.Option("", "--sort", help="Sort by make, model, year or cylinders."),
    json_output: Optional[Path] = typer.Option(None, "--json-output", help="JSON destination."),
    csv_output: Optional[Path] = typer.Option(None, "--csv-output", help="CSV destination."),
    escape: Optional[bool] = typer.Option(
        None, "--escape/--no-escape", help="Percent-encode free text in the query URL."
    ),
    table: bool = typer.Option(False, "--table", help="Render results as a table."),
) -> None:
    """Run a single non-interactive search."""

    settings = _settings_with_overrides(json_output, csv_output, escape)
    criteria = FilterCriteria(
        make=make.strip(),
        model=model.strip(),
        sort_field=sort.strip(),
        year=year,
        cylinders=cylinders,
        result_limit=limit,
    )
    try:
        _execute(criteria, settings, table=table)
    except InvalidCriteriaError as exc:
        raise typer.BadParameter(str(exc)) from exc


@app.command()
def interactive(
    json_output: Optional[Path] = typer.Option(None, "--json-output", help="JSON destination."),
    csv_output: Optional[Path] = typer.Option(None, "--csv-output", help="CSV destination."),
) -> None:
    """Ask for filters one by one, then search and export."""

    settings = _settings_with_overrides(json_output, csv_output, None)
    print_banner(_console)
    criteria = collect_criteria(_console, settings.query_policy())
    _execute(criteria, settings)


def run() -> None:
    app()
