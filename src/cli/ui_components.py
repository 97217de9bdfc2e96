"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- `search`, `interactive` y `doctor` comparten banner y mensajes.
"""

from __future__ import annotations

from typing import Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import VehicleRecord
from core.services.vehicle_search import ExportOutcome

NO_RESULTS_MESSAGE = "No vehicles found for the given criteria."


def say(console: Console, message: str, *, style: str | None = None) -> None:
    """Imprime texto plano: sin markup, sin resaltado y sin cortar líneas."""

    console.print(message, style=style, markup=False, emoji=False, highlight=False, soft_wrap=True)


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida (solo en modo interactivo)."""

    title = Text("VEHICLE-QUERY", style="bold cyan")
    subtitle = Text("OpenDataSoft • all-vehicles-model", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def print_vehicles(console: Console, vehicles: Sequence[VehicleRecord]) -> None:
    say(console, "Vehicles found:")
    for v in vehicles:
        say(console, v.console_line())


def print_no_results(console: Console) -> None:
    say(console, NO_RESULTS_MESSAGE, style="yellow")


def print_export_outcome(console: Console, outcome: ExportOutcome) -> None:
    if outcome.ok:
        say(console, f"Vehicles data saved to {outcome.path}", style="green")
    else:
        say(console, f"Error saving to {outcome.name}: {outcome.error}", style="red")


def build_vehicles_table(vehicles: Sequence[VehicleRecord]) -> Table:
    """Tabla Rich alternativa al listado por líneas (`--table`)."""

    table = Table(title="Vehicles")
    table.add_column("Make", style="cyan", no_wrap=True)
    table.add_column("Model", style="white")
    table.add_column("Year", style="magenta")
    table.add_column("Cylinders", style="green", justify="right")
    for v in vehicles:
        table.add_row(Text(v.make), Text(v.model), Text(v.year), str(v.cylinders))
    return table
