"""Modelos de la respuesta del API Hexbot (Pydantic v2).

Por qué Pydantic en el dominio:
- El esquema JSON (`{"colors": [{"value": "#RRGGBB", "coordinates": ...}]}`)
  se valida en un único paso: o se decodifica entera o falla.
- `pydantic_extra_types.color.Color` nos da el modelo de color (hex/RGB)
  sin reimplementar conversiones.

Nota:
- Estos modelos describen *qué* devuelve el servicio, no *cómo* se obtiene.
"""

from __future__ import annotations

import re
from typing import Any, Iterator

from pydantic import BaseModel, Field, ValidationError, field_serializer, field_validator, model_validator
from pydantic.config import ConfigDict
from pydantic_core import from_json
from pydantic_extra_types.color import Color

from core.domain.coordinates import CoordinatePair
from core.errors import DecodeError, ServiceError

_WIRE_COLOR = re.compile(r"#[0-9A-Fa-f]{6}")


def color_to_hex(color: Color) -> str:
    """`#RRGGBB` en mayúsculas (sin forma corta ni canal alfa)."""

    red, green, blue = color.as_rgb_tuple(alpha=False)
    return f"#{red:02X}{green:02X}{blue:02X}"


class ColorEntry(BaseModel):
    """Una entrada del array `colors`: un color y, opcionalmente, su posición."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    color: Color = Field(
        ...,
        alias="value",
        description="Color devuelto por el servicio (`#RRGGBB`).",
    )
    coordinates: CoordinatePair | None = Field(
        default=None,
        description="Posición dentro de width/height; solo si se pidió límite.",
    )

    @field_validator("color", mode="before")
    @classmethod
    def _require_wire_format(cls, value: object) -> object:
        # `Color` acepta cualquier color CSS; el servicio solo envía `#RRGGBB`.
        if isinstance(value, Color):
            return value
        if not isinstance(value, str) or not _WIRE_COLOR.fullmatch(value):
            raise ValueError(f"color must be #RRGGBB, got {value!r}")
        return value

    @field_serializer("color")
    def _dump_color(self, color: Color) -> str:
        return color_to_hex(color)

    @property
    def has_coordinates(self) -> bool:
        return self.coordinates is not None

    @property
    def hex(self) -> str:
        return color_to_hex(self.color)

    def __str__(self) -> str:
        if self.coordinates is None:
            return self.hex
        return f"{self.hex}-{self.coordinates}"


class HexbotResponse(BaseModel):
    """Respuesta decodificada: secuencia ordenada y no vacía de `ColorEntry`.

    Invariantes:
    - Nunca está vacía (el servicio siempre devuelve al menos un color).
    - O todas las entradas tienen coordenadas o ninguna.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    entries: tuple[ColorEntry, ...] = Field(
        ...,
        alias="colors",
        min_length=1,
        description="Colores en el orden de la respuesta.",
    )

    @model_validator(mode="after")
    def _check_uniform_coordinates(self) -> HexbotResponse:
        flags = {entry.has_coordinates for entry in self.entries}
        if len(flags) > 1:
            raise ValueError("colors mix entries with and without coordinates")
        return self

    @classmethod
    def decode(cls, payload: bytes | str) -> HexbotResponse:
        try:
            return cls.model_validate_json(payload)
        except ValidationError as exc:
            raise DecodeError(f"Invalid hexbot response: {exc}", cause=exc) from exc

    def color_at(self, index: int) -> Color | None:
        entry = self.entry_at(index)
        return entry.color if entry is not None else None

    def entry_at(self, index: int) -> ColorEntry | None:
        if 0 <= index < len(self.entries):
            return self.entries[index]
        return None

    def colors(self) -> list[Color]:
        return [entry.color for entry in self.entries]

    @property
    def has_coordinates(self) -> bool:
        return self.entries[0].has_coordinates

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[ColorEntry]:  # type: ignore[override]
        return iter(self.entries)

    def __str__(self) -> str:
        return "[" + ", ".join(str(entry) for entry in self.entries) + "]"


class MessageReply(BaseModel):
    model_config = ConfigDict(extra="ignore")

    message: str


class ErrorReply(BaseModel):
    model_config = ConfigDict(extra="ignore")

    error: str


def decode_service_reply(payload: bytes | str, *, status_code: int | None = None) -> HexbotResponse:
    """Decodifica cualquier variante de respuesta del servicio.

    - `{"colors": [...]}` -> `HexbotResponse`.
    - `{"error": "..."}` / `{"message": "..."}` -> `ServiceError`.
    - Cualquier otra cosa -> `DecodeError`.
    """

    try:
        # Con límite de anidamiento: un cuerpo demasiado profundo es ValueError.
        data = from_json(payload)
    except ValueError as exc:
        raise DecodeError("Response body is not valid JSON.", cause=exc, status_code=status_code) from exc

    if isinstance(data, dict) and "colors" not in data:
        try:
            if "error" in data:
                raise ServiceError(ErrorReply.model_validate(data).error, status_code=status_code)
            if "message" in data:
                raise ServiceError(MessageReply.model_validate(data).message, status_code=status_code)
        except ValidationError as exc:
            raise DecodeError(f"Invalid service reply: {exc}", cause=exc, status_code=status_code) from exc

    try:
        return HexbotResponse.model_validate(data)
    except ValidationError as exc:
        raise DecodeError(f"Invalid hexbot response: {exc}", cause=exc, status_code=status_code) from exc
