"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts y headers para la API de vehículos.
- Traduce excepciones de httpx a `FetchError` del dominio.
- Facilita testeo: se puede inyectar un `httpx.Client` con `MockTransport`.
"""

from __future__ import annotations

import logging

import httpx

from core.config import AppSettings
from core.domain.errors import RemoteStatusError, TransportError

logger = logging.getLogger(__name__)


def build_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Crea un `httpx.Client` con defaults seguros.

    Por qué un builder:
    - Centraliza timeouts/headers para la CLI, el pipeline y `doctor`.
    - `transport` permite sustituir la red en tests.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.Client(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


class Fetcher:
    """Ejecuta un único GET síncrono y devuelve el cuerpo completo."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.Client | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._client = client

    def fetch(self, query: str) -> bytes:
        if self._client is not None:
            return self._get(self._client, query)
        with build_client(self._settings) as client:
            return self._get(client, query)

    @staticmethod
    def _get(client: httpx.Client, query: str) -> bytes:
        try:
            response = client.get(query)
            # `.content` fuerza la lectura completa; un cuerpo truncado falla aquí.
            body = response.content
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise TransportError(str(exc) or type(exc).__name__) from exc

        if not response.is_success:
            raise RemoteStatusError(response.status_code)

        logger.debug("GET %s -> %s (%d bytes)", query, response.status_code, len(body))
        return body
