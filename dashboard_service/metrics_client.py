from __future__ import annotations

import logging
from typing import Optional, Protocol

import httpx
from pydantic import ValidationError

from metrics_api.schemas import Snapshot

logger = logging.getLogger(__name__)


class MetricsFetchError(Exception):
    """Fallo al obtener un Snapshot (transporte, HTTP o esquema)."""


class MetricsFetcher(Protocol):
    """Interfaz abstracta de la fuente de snapshots.

    El view-model solo depende de esta interfaz, no del cliente HTTP concreto.
    """

    async def fetch_snapshot(self) -> Snapshot:
        """Obtiene un Snapshot o lanza `MetricsFetchError`."""

        ...


class HttpMetricsClient(MetricsFetcher):
    """Cliente HTTP de `GET /api/metrics` sobre `httpx.AsyncClient`.

    Si se pasa un `client` externo (p.ej. con `httpx.ASGITransport`), no se
    cierra en `aclose()`: el dueño es quien lo creó.
    """

    def __init__(
        self,
        url: str,
        *,
        timeout_seconds: float = 2.5,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._url = url
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout_seconds)

    @property
    def url(self) -> str:
        return self._url

    async def fetch_snapshot(self) -> Snapshot:  # type: ignore[override]
        try:
            resp = await self._client.get(self._url)
            resp.raise_for_status()
            payload = resp.json()
        except httpx.HTTPStatusError as e:
            raise MetricsFetchError(
                f"HTTP {e.response.status_code} from {self._url}"
            ) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            # InvalidURL no hereda de HTTPError
            raise MetricsFetchError(f"{type(e).__name__} fetching {self._url}") from e
        except ValueError as e:
            # Cuerpo que no es JSON
            raise MetricsFetchError(f"invalid JSON from {self._url}") from e

        try:
            return Snapshot.model_validate(payload)
        except ValidationError as e:
            raise MetricsFetchError(
                f"snapshot schema mismatch from {self._url}: {e.error_count()} errors"
            ) from e

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HttpMetricsClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
