"""Doctor command for environment diagnostics."""

from __future__ import annotations

import os
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import Fetcher
from core.config import AppSettings
from core.domain.errors import FetchError
from core.domain.models import FilterCriteria
from core.query_builder import QueryBuilder

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_api(settings: AppSettings) -> tuple[bool, str]:
    query = QueryBuilder(settings.query_policy()).build(FilterCriteria(result_limit=1))
    try:
        body = Fetcher(settings).fetch(query)
    except FetchError as exc:
        return False, str(exc)
    return True, f"OK ({len(body)} bytes)"


def _check_writable(path: Path) -> tuple[bool, str]:
    directory = path.resolve().parent
    if not directory.is_dir():
        return False, f"{directory} does not exist"
    if not os.access(directory, os.W_OK):
        return False, f"{directory} is not writable"
    return True, str(path.resolve())


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="vehicle-query Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    table.add_row("API base_url", "OK", settings.api_base_url)
    table.add_row("Dataset", "OK", settings.dataset)
    table.add_row("Timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row(
        "URL escaping",
        "ON" if settings.escape_free_text else "OFF",
        "Free-text filters are sent as typed" if not settings.escape_free_text else "percent-encoded",
    )

    # Connectivity (best-effort)
    ok_api, detail_api = _check_api(settings)
    table.add_row("API connectivity", "OK" if ok_api else "FAIL", detail_api)

    # Outputs
    failures = 0
    for label, path in (("JSON output", settings.json_output_path), ("CSV output", settings.csv_output_path)):
        ok, detail = _check_writable(path)
        failures += 0 if ok else 1
        table.add_row(label, "OK" if ok else "FAIL", detail)

    _console.print(table)

    if failures:
        _console.print(
            "\n[yellow]Note:[/yellow] set VEHICLE_QUERY_JSON_OUTPUT_PATH / VEHICLE_QUERY_CSV_OUTPUT_PATH "
            "or pass --json-output / --csv-output to write elsewhere."
        )
