"""Taxonomía de errores del dominio.

Los adaptadores traducen excepciones de librerías (httpx, OSError, json) a
estas clases, de modo que la CLI solo conoce el contrato del Core.
"""

from __future__ import annotations

from pathlib import Path


class VehicleQueryError(Exception):
    """Base de todos los errores de la aplicación."""


class InvalidCriteriaError(VehicleQueryError, ValueError):
    """Filtros fuera de la política configurada."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field


class FetchError(VehicleQueryError):
    """Fallo al obtener la respuesta de la API."""


class RemoteStatusError(FetchError):
    def __init__(self, status_code: int) -> None:
        super().__init__(f"external API returned an error: {status_code}")
        self.status_code = status_code


class TransportError(FetchError):
    def __init__(self, detail: str) -> None:
        super().__init__(f"failed to fetch data from external API: {detail}")
        self.detail = detail


class DecodeError(VehicleQueryError):
    """La respuesta no es un sobre (envelope) utilizable."""


class MalformedPayloadError(DecodeError):
    pass


class UnexpectedShapeError(DecodeError):
    pass


class ExportError(VehicleQueryError):
    """Fallo al persistir los resultados en disco."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path


class CannotCreateDestinationError(ExportError):
    pass


class WriteFailureError(ExportError):
    pass
