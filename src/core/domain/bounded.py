"""Enteros acotados a un rango cerrado.

Por qué un wrapper y no un `int | None`:
- El valor se valida al construirse, así un parámetro inválido nunca llega a
  la URL.
- "Ausente" es un estado explícito: significa "omitir este parámetro".
"""

from __future__ import annotations

from dataclasses import dataclass, field

from core.errors import CountOutOfRangeError, RangeError

COUNT_MIN = 1
COUNT_MAX = 1000


@dataclass(frozen=True)
class BoundedValue:
    """Entero opcional dentro de `[minimum, maximum]` (inclusive)."""

    value: int | None
    minimum: int
    maximum: int
    parameter: str = "value"

    def __post_init__(self) -> None:
        if self.minimum > self.maximum:
            raise ValueError(f"Empty range [{self.minimum}, {self.maximum}].")
        if self.value is None:
            return
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"{self.parameter} must be an int, got {type(self.value).__name__}.")
        if not self.minimum <= self.value <= self.maximum:
            raise self._out_of_range(self.value)

    def _out_of_range(self, value: int) -> RangeError:
        return RangeError(self.parameter, value, self.minimum, self.maximum)

    @classmethod
    def create(
        cls,
        value: int,
        minimum: int,
        maximum: int,
        *,
        parameter: str = "value",
    ) -> BoundedValue:
        return BoundedValue(value, minimum, maximum, parameter)

    @classmethod
    def absent(cls, minimum: int, maximum: int, *, parameter: str = "value") -> BoundedValue:
        return BoundedValue(None, minimum, maximum, parameter)

    @property
    def present(self) -> bool:
        return self.value is not None

    def contains(self, value: int) -> bool:
        return self.minimum <= value <= self.maximum

    def __str__(self) -> str:
        return "" if self.value is None else str(self.value)


@dataclass(frozen=True)
class Count(BoundedValue):
    """Parámetro `count` del API: cuántos colores devolver (1..1000)."""

    value: int | None = None
    minimum: int = field(default=COUNT_MIN, init=False, repr=False)
    maximum: int = field(default=COUNT_MAX, init=False, repr=False)
    parameter: str = field(default="count", init=False, repr=False)

    def _out_of_range(self, value: int) -> RangeError:
        return CountOutOfRangeError(value, self.minimum, self.maximum)

    @classmethod
    def create(  # type: ignore[override]
        cls,
        value: int,
        minimum: int = COUNT_MIN,
        maximum: int = COUNT_MAX,
        *,
        parameter: str = "count",
    ) -> Count:
        if (minimum, maximum) != (COUNT_MIN, COUNT_MAX):
            raise ValueError(f"count bounds are fixed to [{COUNT_MIN}, {COUNT_MAX}].")
        return cls(value)

    @classmethod
    def of(cls, value: int) -> Count:
        return cls(value)

    @classmethod
    def absent(cls) -> Count:  # type: ignore[override]
        return cls(None)

    @classmethod
    def min(cls) -> Count:
        return cls(COUNT_MIN)

    @classmethod
    def max(cls) -> Count:
        return cls(COUNT_MAX)
