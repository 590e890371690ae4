"""Errores tipados del cliente Hexbot.

Por qué una jerarquía propia:
- Los fallos de validación se detectan al construir los parámetros, así una
  petición inválida nunca sale por la red.
- Los fallos de transporte/decodificación se envuelven sin perder la causa
  original (`__cause__` y `.cause`).
"""

from __future__ import annotations

from enum import Enum
from typing import Sequence


class HexbotError(Exception):
    """Base de todos los errores del cliente."""


class RangeError(HexbotError, ValueError):
    """Un parámetro numérico quedó fuera de su rango cerrado."""

    def __init__(
        self,
        parameter: str,
        value: int,
        minimum: int,
        maximum: int,
        message: str | None = None,
    ) -> None:
        self.parameter = parameter
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            message or f"{parameter}={value} is out of range [{minimum}, {maximum}]."
        )


class CountOutOfRangeError(RangeError):
    """`count` fuera de [1, 1000]."""

    def __init__(self, value: int, minimum: int, maximum: int) -> None:
        super().__init__("count", value, minimum, maximum)


class SizeLimitOutOfRangeError(RangeError):
    """`width`/`height` fuera de [10, 100000].

    La validación es conjunta: `dimensions` lista todas las dimensiones
    rechazadas, no solo la primera.
    """

    def __init__(
        self,
        width: int,
        height: int,
        minimum: int,
        maximum: int,
        dimensions: Sequence[str],
    ) -> None:
        self.width = width
        self.height = height
        self.dimensions = tuple(dimensions)
        super().__init__(
            ",".join(self.dimensions),
            width if "width" in self.dimensions else height,
            minimum,
            maximum,
            f"width={width}, height={height}: {', '.join(self.dimensions)} "
            f"out of range [{minimum}, {maximum}].",
        )


class SeedErrorKind(str, Enum):
    EMPTY = "empty"
    TOO_MANY_COLORS = "too_many_colors"
    INVALID_COLOR = "invalid_color"


class SeedError(HexbotError, ValueError):
    """Seed rechazado. `kind` indica el motivo."""

    kind: SeedErrorKind

    def __init__(self, kind: SeedErrorKind, message: str) -> None:
        self.kind = kind
        super().__init__(message)


class EmptySeedError(SeedError):
    def __init__(self) -> None:
        super().__init__(SeedErrorKind.EMPTY, "The given seed has no colors.")


class TooManyColorsError(SeedError):
    def __init__(self, length: int, maximum: int) -> None:
        self.length = length
        self.maximum = maximum
        super().__init__(
            SeedErrorKind.TOO_MANY_COLORS,
            f"The given seed has {length} colors, at most {maximum} are allowed.",
        )


class InvalidColorError(SeedError):
    def __init__(self, color: object) -> None:
        self.color = color
        super().__init__(
            SeedErrorKind.INVALID_COLOR,
            f"{color!r} is not a color in [0x000000, 0xFFFFFF].",
        )


class TransportError(HexbotError):
    """Fallo del transporte HTTP (red, timeout o status no exitoso)."""

    def __init__(
        self,
        message: str,
        *,
        cause: BaseException | None = None,
        status_code: int | None = None,
    ) -> None:
        self.cause = cause
        self.status_code = status_code
        super().__init__(message)


class DecodeError(TransportError):
    """El cuerpo de la respuesta no cumple el esquema de colores."""


class ServiceError(HexbotError):
    """El servicio respondió con un mensaje/error en lugar de colores."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class ConfigurationError(HexbotError, ValueError):
    """La configuración (entorno o `.env`) no pasa la validación."""

    def __init__(self, message: str, *, cause: BaseException | None = None) -> None:
        self.cause = cause
        super().__init__(message)
