"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Los valores por defecto de la consulta (filas, años, cilindros, orden) viven
  aquí y se inyectan en el `QueryBuilder` como `QueryPolicy`.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.models import QueryPolicy, SortField


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "vehicle-query"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "vehicle-query"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "vehicle-query"
    return Path.home() / ".config" / "vehicle-query"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="VEHICLE_QUERY_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_base_url: str = Field(
        default="https://public.opendatasoft.com/api/records/1.0/search/",
        min_length=8,
        description="Endpoint de búsqueda de OpenDataSoft.",
    )
    dataset: str = Field(
        default="all-vehicles-model",
        min_length=1,
        description="Identificador del dataset consultado.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="vehicle-query/0.1",
        min_length=1,
        description="User-Agent enviado a la API.",
    )

    default_rows: int = Field(
        default=10,
        ge=1,
        description="Filas pedidas cuando el usuario no indica un límite.",
    )
    max_rows: int = Field(
        default=50,
        ge=1,
        description="Límite máximo de resultados aceptado.",
    )
    min_year: int = Field(default=1980, description="Primer año aceptado.")
    max_year: int = Field(default=2025, description="Último año aceptado.")
    allowed_cylinders: list[int] = Field(
        default_factory=lambda: [3, 4, 5, 6, 8, 10, 12, 16],
        description="Número de cilindros aceptados como filtro.",
    )
    escape_free_text: bool = Field(
        default=False,
        description="Codificar (percent-encoding) marca/modelo/orden en la URL.",
    )

    json_output_path: Path = Field(
        default=Path("vehicles.json"),
        description="Destino del export JSON.",
    )
    csv_output_path: Path = Field(
        default=Path("vehicles.csv"),
        description="Destino del export CSV.",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Nivel de logging de la CLI (DEBUG, INFO, WARNING...).",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.strip().upper() if isinstance(value, str) else value

    def query_policy(self) -> QueryPolicy:
        """Construye la política inyectada en el `QueryBuilder`."""

        return QueryPolicy(
            base_url=self.api_base_url,
            dataset=self.dataset,
            default_rows=self.default_rows,
            max_rows=self.max_rows,
            min_year=self.min_year,
            max_year=self.max_year,
            allowed_cylinders=frozenset(self.allowed_cylinders),
            sort_fields=frozenset(f.value for f in SortField),
            escape_free_text=self.escape_free_text,
        )
