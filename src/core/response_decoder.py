"""Decodificación del sobre JSON de OpenDataSoft.

Política best-effort:
- Solo fallan el parseo JSON y la forma del nivel superior (`records`).
- Elementos sin `fields` utilizable se descartan en silencio.
- Campos ausentes o de tipo incorrecto toman valores por defecto.
"""

from __future__ import annotations

import json
import logging
import math
import re
from typing import Any

from core.domain.errors import MalformedPayloadError, UnexpectedShapeError
from core.domain.models import VehicleRecord

logger = logging.getLogger(__name__)

_LONE_SURROGATE = re.compile("[\ud800-\udfff]")


def coerce_cylinders(value: Any) -> int:
    """Convierte cualquier número a entero truncando hacia cero; el resto vale 0."""

    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return 0
        return math.trunc(value)
    return 0


def _text(fields: dict[str, Any], key: str) -> str:
    value = fields.get(key)
    if not isinstance(value, str):
        return ""
    # JSON admite surrogates sueltos; no se pueden codificar en UTF-8.
    return _LONE_SURROGATE.sub("\ufffd", value)


def decode_record(fields: dict[str, Any]) -> VehicleRecord:
    return VehicleRecord(
        make=_text(fields, "make"),
        model=_text(fields, "model"),
        year=_text(fields, "year"),
        cylinders=coerce_cylinders(fields.get("cylinders")),
    )


def decode(body: bytes | str) -> list[VehicleRecord]:
    """Convierte el cuerpo de la respuesta en una lista de `VehicleRecord`.

    Mantiene el orden devuelto por la API.
    """

    try:
        payload = json.loads(body)
    except (ValueError, TypeError) as exc:
        raise MalformedPayloadError(f"failed to parse JSON: {exc}") from exc

    if not isinstance(payload, dict):
        raise UnexpectedShapeError("invalid JSON structure from API: top level is not an object")
    records = payload.get("records")
    if not isinstance(records, list):
        raise UnexpectedShapeError("invalid JSON structure from API: missing 'records' list")

    vehicles: list[VehicleRecord] = []
    for index, item in enumerate(records):
        fields = item.get("fields") if isinstance(item, dict) else None
        if not isinstance(fields, dict):
            logger.debug("Skipping record %d without usable 'fields'", index)
            continue
        vehicles.append(decode_record(fields))

    logger.info("Decoded %d of %d records", len(vehicles), len(records))
    return vehicles
