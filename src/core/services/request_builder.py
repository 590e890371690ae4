"""Composición de la URL de petición.

Pura y sin I/O: la red es responsabilidad del adaptador HTTP.
El orden de los parámetros es fijo (count, width/height, seed) y los
parámetros ausentes no aportan nada.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from core.domain.bounded import BoundedValue, Count
from core.domain.seed import SeedEncoder
from core.domain.size_limit import SizeLimit

logger = logging.getLogger(__name__)


def as_count(count: BoundedValue) -> Count:
    """Normaliza cualquier `BoundedValue` al rango del API (1..1000).

    Un valor construido con otros límites lanza `CountOutOfRangeError` si
    queda fuera de [1, 1000].
    """

    if isinstance(count, Count):
        return count
    return Count.absent() if count.value is None else Count.of(count.value)


def build_url(endpoint: str, count: BoundedValue, size: SizeLimit, seed: SeedEncoder) -> str:
    count = as_count(count)
    url = endpoint if endpoint.endswith("?") else f"{endpoint}?"
    if count.present:
        url += f"&count={count.value}"
    if size.present:
        url += f"&width={size.width.value}&height={size.height.value}"
    if seed.present:
        url += f"&seed={seed.encoded}"
    logger.debug("Built hexbot URL: %s", url)
    return url


@dataclass
class HexbotRequest:
    """Parámetros de una petición; todos ausentes por defecto."""

    count: BoundedValue = field(default_factory=Count.absent)
    size: SizeLimit = field(default_factory=SizeLimit.absent)
    seed: SeedEncoder = field(default_factory=SeedEncoder.absent)

    def __post_init__(self) -> None:
        self.count = as_count(self.count)

    def url(self, endpoint: str) -> str:
        return build_url(endpoint, self.count, self.size, self.seed)
