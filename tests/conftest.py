from __future__ import annotations

import json

import pytest

from core.domain.models import VehicleRecord


@pytest.fixture
def envelope_body() -> bytes:
    payload = {
        "nhits": 2,
        "records": [
            {
                "datasetid": "all-vehicles-model",
                "fields": {"make": "Toyota", "model": "Corolla", "year": "2020", "cylinders": 4.0},
            },
            {"datasetid": "all-vehicles-model", "recordid": "broken"},
        ],
    }
    return json.dumps(payload).encode("utf-8")


@pytest.fixture
def vehicles() -> list[VehicleRecord]:
    return [
        VehicleRecord(make="Honda", model="Civic", year="2015", cylinders=4),
        VehicleRecord(make="Ford", model="Mustang, GT", year="2018", cylinders=8),
        VehicleRecord(make="Tesla", model='Model "S"', year="2020", cylinders=0),
    ]


class StaticFetcher:
    """Devuelve siempre el mismo cuerpo y recuerda las URLs pedidas."""

    def __init__(self, body: bytes) -> None:
        self.body = body
        self.queries: list[str] = []

    def fetch(self, query: str) -> bytes:
        self.queries.append(query)
        return self.body


@pytest.fixture
def static_fetcher():
    return StaticFetcher
