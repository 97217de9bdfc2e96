"""Exportación CSV de los resultados (una fila por vehículo)."""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Sequence

from core.domain.errors import CannotCreateDestinationError, WriteFailureError
from core.domain.models import VehicleRecord

logger = logging.getLogger(__name__)

CSV_HEADER = ["Make", "Model", "Year", "Cylinders"]


class CsvExporter:
    name = "CSV"

    def export(self, vehicles: Sequence[VehicleRecord], output_path: Path) -> Path:
        try:
            handle = output_path.open("w", encoding="utf-8", newline="")
        except OSError as exc:
            raise CannotCreateDestinationError(
                output_path, f"failed to create CSV file: {exc}"
            ) from exc

        try:
            with handle:
                writer = csv.writer(handle, lineterminator="\n")
                writer.writerow(CSV_HEADER)
                for v in vehicles:
                    writer.writerow([v.make, v.model, v.year, str(v.cylinders)])
        except (OSError, ValueError, csv.Error) as exc:
            raise WriteFailureError(output_path, f"failed to write row to CSV: {exc}") from exc

        logger.info("Wrote %d vehicles to %s", len(vehicles), output_path)
        return output_path
