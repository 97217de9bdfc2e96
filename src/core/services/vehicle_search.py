"""Orquestación de la búsqueda de vehículos.

Este módulo encadena QueryBuilder -> Fetcher -> ResponseDecoder -> Exporters.
La CLI solo se ocupa de recoger filtros y de imprimir; los efectos visuales se
inyectan mediante `PipelineHooks`, de modo que el pipeline es reutilizable
desde tests u otros entry-points.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Sequence

from adapters.csv_exporter import CsvExporter
from adapters.http_client import Fetcher
from adapters.json_exporter import JsonExporter
from core.config import AppSettings
from core.domain.errors import ExportError
from core.domain.models import FilterCriteria, VehicleRecord
from core.interfaces.exporter import VehicleExporter, VehicleFetcher
from core.query_builder import QueryBuilder
from core.response_decoder import decode

logger = logging.getLogger(__name__)


@dataclass
class ExportTarget:
    """Un exportador y su destino."""

    exporter: VehicleExporter
    path: Path


@dataclass
class ExportOutcome:
    name: str
    path: Path
    error: ExportError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class SearchResult:
    query: str
    vehicles: list[VehicleRecord]


@dataclass
class PipelineHooks:
    """Optional callbacks for UI layers."""

    vehicles_found: Callable[[Sequence[VehicleRecord]], None] | None = None
    no_results: Callable[[], None] | None = None
    export_done: Callable[[ExportOutcome], None] | None = None


@dataclass
class PipelineResult:
    search: SearchResult
    exports: list[ExportOutcome] = field(default_factory=list)


def default_export_targets(settings: AppSettings) -> list[ExportTarget]:
    return [
        ExportTarget(JsonExporter(), settings.json_output_path),
        ExportTarget(CsvExporter(), settings.csv_output_path),
    ]


def search_vehicles(
    criteria: FilterCriteria,
    *,
    settings: AppSettings | None = None,
    builder: QueryBuilder | None = None,
    fetcher: VehicleFetcher | None = None,
) -> SearchResult:
    """Valida, construye la URL, consulta la API y decodifica.

    Lanza `InvalidCriteriaError`, `FetchError` o `DecodeError`; todos son
    fatales para la ejecución.
    """

    settings = settings or AppSettings()
    builder = builder or QueryBuilder(settings.query_policy())
    fetcher = fetcher or Fetcher(settings)

    query = builder.build_validated(criteria)
    body = fetcher.fetch(query)
    return SearchResult(query=query, vehicles=decode(body))


def export_all(
    vehicles: Sequence[VehicleRecord],
    targets: Sequence[ExportTarget],
    *,
    on_done: Callable[[ExportOutcome], None] | None = None,
) -> list[ExportOutcome]:
    """Ejecuta cada exportador de forma independiente.

    Un fallo en uno no impide que el siguiente lo intente; los errores se
    devuelven en cada `ExportOutcome`.
    """

    outcomes: list[ExportOutcome] = []
    for target in targets:
        outcome = ExportOutcome(name=target.exporter.name, path=target.path)
        try:
            target.exporter.export(vehicles, target.path)
        except ExportError as exc:
            logger.warning("%s export failed: %s", target.exporter.name, exc)
            outcome.error = exc
        outcomes.append(outcome)
        if on_done:
            on_done(outcome)
    return outcomes


def run_search(
    criteria: FilterCriteria,
    *,
    settings: AppSettings | None = None,
    builder: QueryBuilder | None = None,
    fetcher: VehicleFetcher | None = None,
    targets: Sequence[ExportTarget] | None = None,
    hooks: PipelineHooks | None = None,
) -> PipelineResult:
    """Pipeline completo: búsqueda, presentación (hooks) y export.

    Con cero resultados no se invoca ningún exportador.
    """

    settings = settings or AppSettings()
    hooks = hooks or PipelineHooks()

    result = search_vehicles(criteria, settings=settings, builder=builder, fetcher=fetcher)
    if not result.vehicles:
        if hooks.no_results:
            hooks.no_results()
        return PipelineResult(search=result)

    if hooks.vehicles_found:
        hooks.vehicles_found(result.vehicles)

    if targets is None:
        targets = default_export_targets(settings)
    exports = export_all(result.vehicles, targets, on_done=hooks.export_done)
    return PipelineResult(search=result, exports=exports)
