import csv
import json
import sys
from pathlib import Path

import pytest

from adapters.csv_exporter import CsvExporter
from adapters.json_exporter import JsonExporter
from core.domain.errors import CannotCreateDestinationError, WriteFailureError
from core.domain.models import VehicleRecord
from core.interfaces.exporter import VehicleExporter


def test_exporters_satisfy_protocol():
    assert isinstance(JsonExporter(), VehicleExporter)
    assert isinstance(CsvExporter(), VehicleExporter)


def test_json_round_trip(tmp_path, vehicles):
    path = JsonExporter().export(vehicles, tmp_path / "vehicles.json")

    data = json.loads(path.read_text(encoding="utf-8"))
    assert len(data) == len(vehicles)
    assert [VehicleRecord(**item) for item in data] == vehicles
    assert set(data[0]) == {"make", "model", "year", "cylinders"}
    assert isinstance(data[0]["cylinders"], int)


def test_json_is_indented(tmp_path, vehicles):
    path = JsonExporter().export(vehicles[:1], tmp_path / "vehicles.json")
    assert path.read_text(encoding="utf-8").splitlines()[1] == "  {"


def test_csv_round_trip(tmp_path, vehicles):
    path = CsvExporter().export(vehicles, tmp_path / "vehicles.csv")

    with path.open(encoding="utf-8", newline="") as handle:
        rows = list(csv.reader(handle))
    assert rows[0] == ["Make", "Model", "Year", "Cylinders"]
    parsed = [
        VehicleRecord(make=m, model=mo, year=y, cylinders=int(c)) for m, mo, y, c in rows[1:]
    ]
    assert parsed == vehicles


def test_csv_quotes_special_characters(tmp_path, vehicles):
    path = CsvExporter().export(vehicles, tmp_path / "vehicles.csv")
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "Make,Model,Year,Cylinders"
    assert lines[1] == "Honda,Civic,2015,4"
    assert lines[2] == 'Ford,"Mustang, GT",2018,8'
    assert lines[3] == 'Tesla,"Model ""S""",2020,0'


@pytest.mark.parametrize("exporter", [JsonExporter(), CsvExporter()])
def test_export_overwrites_existing_file(tmp_path, vehicles, exporter):
    path = tmp_path / "out"
    path.write_text("x" * 10_000, encoding="utf-8")
    exporter.export(vehicles[:1], path)
    assert "xxxx" not in path.read_text(encoding="utf-8")


@pytest.mark.parametrize("exporter", [JsonExporter(), CsvExporter()])
def test_missing_directory_cannot_create_destination(tmp_path, vehicles, exporter):
    target = tmp_path / "missing" / "out"
    with pytest.raises(CannotCreateDestinationError) as excinfo:
        exporter.export(vehicles, target)
    assert excinfo.value.path == target


@pytest.mark.parametrize("exporter", [JsonExporter(), CsvExporter()])
def test_directory_as_destination_cannot_create(tmp_path, vehicles, exporter):
    with pytest.raises(CannotCreateDestinationError):
        exporter.export(vehicles, tmp_path)


@pytest.mark.skipif(not sys.platform.startswith("linux"), reason="/dev/full is Linux only")
@pytest.mark.parametrize("exporter", [JsonExporter(), CsvExporter()])
def test_full_device_is_write_failure(vehicles, exporter):
    target = Path("/dev/full")
    with pytest.raises(WriteFailureError) as excinfo:
        exporter.export(vehicles, target)
    assert excinfo.value.path == target


@pytest.mark.parametrize("exporter", [JsonExporter(), CsvExporter()])
def test_unencodable_text_is_write_failure(tmp_path, exporter):
    target = tmp_path / "out"
    broken = [VehicleRecord(make="Kia\ud83d", model="Rio", year="2019", cylinders=4)]
    with pytest.raises(WriteFailureError) as excinfo:
        exporter.export(broken, target)
    assert excinfo.value.path == target
