"""Bucle de preguntas interactivas.

Recoge `FilterCriteria` ya validados: cada pregunta numérica se repite hasta
que el valor es 0 (sin filtro) o cumple la `QueryPolicy`.
"""

from __future__ import annotations

from typing import Callable

import typer
from rich.console import Console

from cli.ui_components import say
from core.domain.models import FilterCriteria, QueryPolicy


def _ask_text(question: str) -> str:
    return str(typer.prompt(question, default="", show_default=False)).strip()


def _ask_int(
    console: Console,
    question: str,
    accept: Callable[[int], bool],
    error: str,
) -> int:
    while True:
        raw = _ask_text(question)
        if not raw:
            return 0
        try:
            value = int(raw)
        except ValueError:
            say(console, error, style="red")
            continue
        if value == 0 or accept(value):
            return value
        say(console, error, style="red")


def collect_criteria(console: Console, policy: QueryPolicy) -> FilterCriteria:
    make = _ask_text("Enter the car maker (press Enter to skip)")

    # El modelo solo tiene sentido si hay marca.
    model = ""
    if make:
        model = _ask_text("Enter the model (press Enter to skip)")

    year = _ask_int(
        console,
        "Enter the year (press Enter to skip)",
        lambda y: policy.min_year <= y <= policy.max_year,
        f"Please select a year between {policy.min_year} and {policy.max_year}.",
    )
    cylinders = _ask_int(
        console,
        "Enter the number of cylinders (press Enter to skip)",
        lambda c: c in policy.allowed_cylinders,
        "Invalid option.",
    )
    result_limit = _ask_int(
        console,
        "Enter the maximum number of results you want (press Enter to skip)",
        lambda n: 0 <= n <= policy.max_rows,
        "Invalid option.",
    )

    sort_options = ", ".join(sorted(policy.sort_fields))
    while True:
        sort_field = _ask_text(
            f"Do you want to sort the results? (Sort by: {sort_options}) (press Enter to skip)"
        )
        if not sort_field or sort_field in policy.sort_fields:
            break
        say(console, "Invalid option.", style="red")

    return FilterCriteria(
        make=make,
        model=model,
        sort_field=sort_field,
        year=year,
        cylinders=cylinders,
        result_limit=result_limit,
    )
