"""Límite de tamaño (`width`/`height`) para colores con coordenadas.

Por qué una sola clase:
- El par ancho/alto se valida siempre de forma conjunta; nunca existe un
  límite parcial.
- La forma "legacy" (un único par de coordenadas) y la forma de dos campos
  comparten la misma validación.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.domain.bounded import BoundedValue
from core.domain.coordinates import CoordinatePair
from core.errors import SizeLimitOutOfRangeError

SIZE_MIN = 10
SIZE_MAX = 100_000


def _rejected_dimensions(width: int, height: int) -> list[str]:
    rejected: list[str] = []
    for name, value in (("width", width), ("height", height)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"{name} must be an int, got {type(value).__name__}.")
        if not SIZE_MIN <= value <= SIZE_MAX:
            rejected.append(name)
    return rejected


@dataclass(frozen=True)
class SizeLimit:
    """Par validado (ancho, alto) o ausente ("sin coordenadas")."""

    width: BoundedValue
    height: BoundedValue

    def __post_init__(self) -> None:
        if self.width.present != self.height.present:
            raise ValueError("width and height must be both present or both absent.")
        if self.width.value is None or self.height.value is None:
            return
        # Los BoundedValue pueden venir con otros límites; se valida contra los del API.
        rejected = _rejected_dimensions(self.width.value, self.height.value)
        if rejected:
            raise SizeLimitOutOfRangeError(
                self.width.value, self.height.value, SIZE_MIN, SIZE_MAX, rejected
            )

    @classmethod
    def create(cls, width: int, height: int) -> SizeLimit:
        rejected = _rejected_dimensions(width, height)
        if rejected:
            raise SizeLimitOutOfRangeError(width, height, SIZE_MIN, SIZE_MAX, rejected)
        return cls(
            BoundedValue(width, SIZE_MIN, SIZE_MAX, "width"),
            BoundedValue(height, SIZE_MIN, SIZE_MAX, "height"),
        )

    @classmethod
    def from_coordinates(cls, limit: CoordinatePair) -> SizeLimit:
        """Forma legacy: un único par (x=ancho, y=alto)."""

        return cls.create(limit.x, limit.y)

    @classmethod
    def absent(cls) -> SizeLimit:
        return cls(
            BoundedValue(None, SIZE_MIN, SIZE_MAX, "width"),
            BoundedValue(None, SIZE_MIN, SIZE_MAX, "height"),
        )

    @classmethod
    def min(cls) -> SizeLimit:
        return cls.create(SIZE_MIN, SIZE_MIN)

    @classmethod
    def max(cls) -> SizeLimit:
        return cls.create(SIZE_MAX, SIZE_MAX)

    @property
    def present(self) -> bool:
        return self.width.present

    def as_coordinates(self) -> CoordinatePair | None:
        if self.width.value is None or self.height.value is None:
            return None
        return CoordinatePair(x=self.width.value, y=self.height.value)

    def __str__(self) -> str:
        if not self.present:
            return ""
        return f"width:{self.width},height:{self.height}"
