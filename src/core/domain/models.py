"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da modelos inmutables y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- `model_dump(mode="json")` alimenta directamente el export JSON.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class SortField(str, Enum):
    """Campos por los que la API permite ordenar."""

    MAKE = "make"
    MODEL = "model"
    YEAR = "year"
    CYLINDERS = "cylinders"

    @classmethod
    def values(cls) -> list[str]:
        return [f.value for f in cls]


class VehicleRecord(BaseModel):
    """Un vehículo devuelto por el dataset.

    `year` se mantiene como texto: la API lo devuelve como string.
    """

    model_config = ConfigDict(frozen=True)

    make: str = Field(default="", description="Fabricante.")
    model: str = Field(default="", description="Modelo.")
    year: str = Field(default="", description="Año del modelo (texto, tal cual la API).")
    cylinders: int = Field(
        default=0,
        description="Número de cilindros; 0 si la API no lo informa.",
    )

    def console_line(self) -> str:
        return f"Make: {self.make}, Model: {self.model}, Year: {self.year}, Cylinders: {self.cylinders}"


class FilterCriteria(BaseModel):
    """Filtros de búsqueda introducidos por el usuario.

    Convención: cadena vacía o 0 significan "sin filtro". La validación de
    rangos la hace `QueryBuilder.validate` contra la `QueryPolicy`.
    """

    make: str = ""
    model: str = ""
    sort_field: str = ""
    year: int = 0
    cylinders: int = 0
    result_limit: int = 0


class QueryPolicy(BaseModel):
    """Constantes que gobiernan la construcción de la consulta."""

    model_config = ConfigDict(frozen=True)

    base_url: str = "https://public.opendatasoft.com/api/records/1.0/search/"
    dataset: str = "all-vehicles-model"
    default_rows: int = Field(default=10, ge=1)
    max_rows: int = Field(default=50, ge=1)
    min_year: int = 1980
    max_year: int = 2025
    allowed_cylinders: frozenset[int] = frozenset({3, 4, 5, 6, 8, 10, 12, 16})
    sort_fields: frozenset[str] = frozenset(SortField.values())
    escape_free_text: bool = False
