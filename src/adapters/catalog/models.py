"""Modelos para ficheros JSON de entrada (data-driven).

Formatos:
- Catálogo: {"entries": [{"id": "...", "name": "...", "color": "#3b82f6"}]}
- Pares:    {"pairs": [{"foreground": "#000", "background": "#fff", "label": "..."}]}

Los colores se validan como hex al cargar; un catálogo con un hex roto no
llega al motor.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict

from core.domain.models import ContrastPair
from core.services.color_space import is_valid_hex, normalize_hex


class CatalogEntry(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    identifier: str | None = Field(default=None, alias="id")
    name: str = Field(..., min_length=1)
    color: str | None = None
    category: str | None = None

    @field_validator("color")
    @classmethod
    def _check_color(cls, value: str | None) -> str | None:
        if value is None or value == "":
            return None
        if not is_valid_hex(value):
            raise ValueError(f"invalid hex color: {value!r}")
        return normalize_hex(value)


class CatalogFile(BaseModel):
    entries: list[CatalogEntry] = Field(default_factory=list)


class PairsFile(BaseModel):
    pairs: list[ContrastPair] = Field(default_factory=list)
