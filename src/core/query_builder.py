"""Construcción de la URL de consulta.

Cada filtro es una cláusula `key=value` independiente. El orden es fijo
(rows, sort, make, model, year, cylinders) para que la URL sea reproducible.
"""

from __future__ import annotations

import logging
from urllib.parse import quote

from core.domain.errors import InvalidCriteriaError
from core.domain.models import FilterCriteria, QueryPolicy

logger = logging.getLogger(__name__)


class QueryBuilder:
    """Traduce `FilterCriteria` a la URL de búsqueda de OpenDataSoft."""

    def __init__(self, policy: QueryPolicy | None = None) -> None:
        self._policy = policy or QueryPolicy()

    @property
    def policy(self) -> QueryPolicy:
        return self._policy

    def _text(self, value: str) -> str:
        if self._policy.escape_free_text:
            return quote(value, safe="")
        return value

    def build(self, criteria: FilterCriteria) -> str:
        """Construye la URL. No valida: cualquier combinación produce una URL."""

        p = self._policy
        url = f"{p.base_url}?dataset={p.dataset}&q="

        rows = criteria.result_limit if criteria.result_limit != 0 else p.default_rows
        url += f"&rows={rows}"

        if criteria.sort_field:
            url += f"&sort={self._text(criteria.sort_field)}"
        if criteria.make:
            url += f"&refine.make={self._text(criteria.make)}"
        if criteria.model:
            url += f"&refine.model={self._text(criteria.model)}"
        if criteria.year != 0:
            url += f"&refine.year={criteria.year}"
        if criteria.cylinders != 0:
            url += f"&refine.cylinders={criteria.cylinders}"

        logger.debug("Built query URL: %s", url)
        return url

    def validate(self, criteria: FilterCriteria) -> FilterCriteria:
        """Comprueba los filtros contra la política; lanza `InvalidCriteriaError`."""

        p = self._policy
        if criteria.year != 0 and not p.min_year <= criteria.year <= p.max_year:
            raise InvalidCriteriaError(
                "year", f"must be between {p.min_year} and {p.max_year}, got {criteria.year}"
            )
        if criteria.cylinders != 0 and criteria.cylinders not in p.allowed_cylinders:
            allowed = ", ".join(str(c) for c in sorted(p.allowed_cylinders))
            raise InvalidCriteriaError(
                "cylinders", f"must be one of {allowed}, got {criteria.cylinders}"
            )
        if not 0 <= criteria.result_limit <= p.max_rows:
            raise InvalidCriteriaError(
                "result_limit", f"must be between 0 and {p.max_rows}, got {criteria.result_limit}"
            )
        if criteria.sort_field and criteria.sort_field not in p.sort_fields:
            allowed = ", ".join(sorted(p.sort_fields))
            raise InvalidCriteriaError(
                "sort_field", f"must be one of {allowed}, got {criteria.sort_field!r}"
            )
        return criteria

    def build_validated(self, criteria: FilterCriteria) -> str:
        return self.build(self.validate(criteria))
