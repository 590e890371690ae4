"""Contrato de las fuentes de colores.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- El cliente síncrono, el asíncrono y cualquier stub de test son
  intercambiables sin acoplar el Core a httpx.
"""

from __future__ import annotations

from typing import Awaitable, Protocol, runtime_checkable

from core.domain.models import HexbotResponse
from core.services.request_builder import HexbotRequest


@runtime_checkable
class ColorSource(Protocol):
    """Fuente síncrona: una petición, una respuesta decodificada."""

    def fetch_request(self, request: HexbotRequest) -> HexbotResponse:
        ...


@runtime_checkable
class AsyncColorSource(Protocol):
    """Variante asíncrona; el único punto de suspensión es la red."""

    def fetch_request(self, request: HexbotRequest) -> Awaitable[HexbotResponse]:
        ...
