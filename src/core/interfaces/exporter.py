"""Contratos de exportación.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- JSON y CSV son intercambiables y el pipeline los ejecuta por igual.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, Sequence, runtime_checkable

from core.domain.models import VehicleRecord


@runtime_checkable
class VehicleExporter(Protocol):
    """Contrato mínimo para un exportador de resultados.

    Reglas de diseño:
    - Sobrescribe el destino si ya existe.
    - Lanza `ExportError` (o subclases) y devuelve la ruta escrita.
    """

    name: str

    def export(self, vehicles: Sequence[VehicleRecord], output_path: Path) -> Path:
        ...


@runtime_checkable
class VehicleFetcher(Protocol):
    """Obtiene el cuerpo crudo de una URL de consulta."""

    def fetch(self, query: str) -> bytes:
        ...
