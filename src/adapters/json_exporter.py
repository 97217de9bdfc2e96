"""Exportación JSON de los resultados.

Por qué JSON:
- Interoperabilidad con otras herramientas y pipelines.
- Conserva `cylinders` como entero.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Sequence

from core.domain.errors import CannotCreateDestinationError, WriteFailureError
from core.domain.models import VehicleRecord

logger = logging.getLogger(__name__)


class JsonExporter:
    """Escribe un array JSON indentado con `make`, `model`, `year`, `cylinders`."""

    name = "JSON"

    def export(self, vehicles: Sequence[VehicleRecord], output_path: Path) -> Path:
        payload = [v.model_dump(mode="json") for v in vehicles]
        text = json.dumps(payload, ensure_ascii=False, indent=2)

        try:
            handle = output_path.open("w", encoding="utf-8")
        except OSError as exc:
            raise CannotCreateDestinationError(
                output_path, f"failed to create JSON file: {exc}"
            ) from exc

        try:
            with handle:
                handle.write(text)
        except (OSError, ValueError) as exc:
            raise WriteFailureError(output_path, f"failed to write JSON to file: {exc}") from exc

        logger.info("Wrote %d vehicles to %s", len(payload), output_path)
        return output_path
