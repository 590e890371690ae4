"""Cliente HTTP del API Hexbot.

Fase única:
- Compone la URL (`HexbotRequest.url`), hace un GET y decodifica el JSON.
- Sin retries ni cancelación: cualquier política se aplica desde fuera.

Errores:
- Fallo de red/timeout -> `TransportError` (causa original en `.cause`).
- Status no exitoso con `{"error"|"message": ...}` -> `ServiceError`.
- Cuerpo que no cumple el esquema -> `DecodeError`.
- Configuración inválida (sin `settings` explícitos) -> `ConfigurationError`.
"""

from __future__ import annotations

import logging

import httpx

from adapters.http_client import build_async_client, build_client
from core.config import AppSettings, load_settings
from core.domain.bounded import BoundedValue
from core.domain.models import HexbotResponse, decode_service_reply
from core.domain.seed import SeedEncoder
from core.domain.size_limit import SizeLimit
from core.errors import DecodeError, ServiceError, TransportError
from core.services.request_builder import HexbotRequest

logger = logging.getLogger(__name__)


def _make_request(
    count: BoundedValue | None,
    size: SizeLimit | None,
    seed: SeedEncoder | None,
) -> HexbotRequest:
    request = HexbotRequest()
    if count is not None:
        request.count = count
    if size is not None:
        request.size = size
    if seed is not None:
        request.seed = seed
    return request


def _service_error_from(response: httpx.Response) -> ServiceError | None:
    try:
        decode_service_reply(response.content, status_code=response.status_code)
    except ServiceError as exc:
        return exc
    except DecodeError:
        return None
    return None


def interpret_response(response: httpx.Response) -> HexbotResponse:
    """Convierte una respuesta HTTP en `HexbotResponse` o en un error tipado."""

    try:
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        service_error = _service_error_from(response)
        if service_error is not None:
            logger.warning("Hexbot API error (HTTP %s): %s", response.status_code, service_error.message)
            raise service_error from exc
        logger.warning("Hexbot API answered HTTP %s", response.status_code)
        raise TransportError(
            f"Hexbot API answered HTTP {response.status_code}.",
            cause=exc,
            status_code=response.status_code,
        ) from exc

    try:
        return decode_service_reply(response.content, status_code=response.status_code)
    except ServiceError as exc:
        logger.warning("Hexbot API returned a message instead of colors: %s", exc.message)
        raise


class HexbotClient:
    """Cliente síncrono (httpx.Client)."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.Client | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._settings = settings or load_settings()
        self._owns_client = client is None
        self._client = client or build_client(self._settings, transport=transport)

    @property
    def endpoint(self) -> str:
        return self._settings.api_endpoint

    def fetch(
        self,
        count: BoundedValue | None = None,
        size: SizeLimit | None = None,
        seed: SeedEncoder | None = None,
    ) -> HexbotResponse:
        return self.fetch_request(_make_request(count, size, seed))

    def fetch_request(self, request: HexbotRequest) -> HexbotResponse:
        url = request.url(self.endpoint)
        logger.debug("GET %s", url)
        try:
            response = self._client.get(url)
        except httpx.HTTPError as exc:
            logger.warning("Request to %s failed: %s", url, exc)
            raise TransportError(f"Request to {url} failed: {exc}", cause=exc) from exc
        return interpret_response(response)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> HexbotClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class AsyncHexbotClient:
    """Cliente asíncrono (httpx.AsyncClient); usar con `async with`."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or load_settings()
        self._owns_client = client is None
        self._client = client or build_async_client(self._settings, transport=transport)

    @property
    def endpoint(self) -> str:
        return self._settings.api_endpoint

    async def fetch(
        self,
        count: BoundedValue | None = None,
        size: SizeLimit | None = None,
        seed: SeedEncoder | None = None,
    ) -> HexbotResponse:
        return await self.fetch_request(_make_request(count, size, seed))

    async def fetch_request(self, request: HexbotRequest) -> HexbotResponse:
        url = request.url(self.endpoint)
        logger.debug("GET %s", url)
        try:
            response = await self._client.get(url)
        except httpx.HTTPError as exc:
            logger.warning("Request to %s failed: %s", url, exc)
            raise TransportError(f"Request to {url} failed: {exc}", cause=exc) from exc
        return interpret_response(response)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> AsyncHexbotClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
