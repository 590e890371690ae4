"""Parámetro `seed`: hasta 10 colores que sesgan la respuesta del servicio.

Formato en el wire: códigos hex de 6 dígitos en mayúsculas, separados por
comas y en el orden recibido (`8B0000,8B008B`).
"""

from __future__ import annotations

import re
from typing import Iterable, Sequence

from core.errors import EmptySeedError, InvalidColorError, TooManyColorsError

SEED_MAX_COLORS = 10
COLOR_MIN = 0x000000
COLOR_MAX = 0xFFFFFF

_HEX_CODE = re.compile(r"[0-9A-Fa-f]{6}")


def _check_color(color: object) -> int:
    if isinstance(color, bool) or not isinstance(color, int):
        raise InvalidColorError(color)
    if not COLOR_MIN <= color <= COLOR_MAX:
        raise InvalidColorError(color)
    return color


def encode_color(color: int) -> str:
    return f"{_check_color(color):06X}"


class SeedEncoder:
    """Seed validado, o ausente si no se quiere enviar el parámetro.

    Es el único tipo mutable del dominio: `append` añade un color y, si falla,
    deja el estado anterior intacto.
    """

    __slots__ = ("_encoded",)

    def __init__(self) -> None:
        self._encoded: str | None = None

    @classmethod
    def create(cls, colors: Sequence[int]) -> SeedEncoder:
        colors = list(colors)
        if not colors:
            raise EmptySeedError()
        if len(colors) > SEED_MAX_COLORS:
            raise TooManyColorsError(len(colors), SEED_MAX_COLORS)
        seed = cls()
        seed._encoded = ",".join(encode_color(color) for color in colors)
        return seed

    @classmethod
    def absent(cls) -> SeedEncoder:
        return cls()

    @classmethod
    def parse(cls, text: str) -> SeedEncoder:
        """Reconstruye un seed desde su forma de wire (`AABBCC,112233`)."""

        tokens = text.split(",") if text else []
        for token in tokens:
            if not _HEX_CODE.fullmatch(token):
                raise InvalidColorError(token)
        return cls.create([int(token, 16) for token in tokens])

    @classmethod
    def from_hex_codes(cls, codes: Iterable[str]) -> SeedEncoder:
        """Acepta códigos con o sin `#` (entrada de la CLI)."""

        return cls.parse(",".join(code.strip().lstrip("#") for code in codes))

    @property
    def present(self) -> bool:
        return self._encoded is not None

    @property
    def encoded(self) -> str | None:
        return self._encoded

    def colors(self) -> list[int]:
        if self._encoded is None:
            return []
        return [int(token, 16) for token in self._encoded.split(",")]

    def append(self, color: int) -> None:
        code = encode_color(color)
        if self._encoded is None:
            self._encoded = code
            return
        if len(self) >= SEED_MAX_COLORS:
            raise TooManyColorsError(len(self) + 1, SEED_MAX_COLORS)
        self._encoded = f"{self._encoded},{code}"

    def __len__(self) -> int:
        if self._encoded is None:
            return 0
        return self._encoded.count(",") + 1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SeedEncoder):
            return NotImplemented
        return self._encoded == other._encoded

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"SeedEncoder({self._encoded!r})"

    def __str__(self) -> str:
        return self._encoded or ""
