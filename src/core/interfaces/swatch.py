"""Contrato de candidatos rankeables.

Cualquier objeto con `name` y `color` (hex) sirve: `NamedColor`, entradas
de catálogo ya resueltas o dataclasses del caller.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Swatch(Protocol):
    """Color con nombre.

    `identifier` es opcional; si existe se propaga al `SimilarityMatch`.
    """

    @property
    def name(self) -> str: ...

    @property
    def color(self) -> str: ...
