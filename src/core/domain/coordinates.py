"""Par de coordenadas (x, y)."""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class CoordinatePair(BaseModel):
    """Punto entero; también es el objeto `coordinates` de cada color.

    No tiene rango propio: los límites viven en `SizeLimit`.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    x: int = Field(..., description="Componente horizontal.")
    y: int = Field(..., description="Componente vertical.")

    def add(self, other: CoordinatePair) -> CoordinatePair:
        return CoordinatePair(x=self.x + other.x, y=self.y + other.y)

    def sub(self, other: CoordinatePair) -> CoordinatePair:
        return CoordinatePair(x=self.x - other.x, y=self.y - other.y)

    def __add__(self, other: object) -> CoordinatePair:
        if not isinstance(other, CoordinatePair):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> CoordinatePair:
        if not isinstance(other, CoordinatePair):
            return NotImplemented
        return self.sub(other)

    def __str__(self) -> str:
        return f"({self.x}|{self.y})"
