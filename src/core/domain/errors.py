"""Errores del dominio.

Un único error de entrada: el color hex mal formado. Todo lo demás en el
motor son funciones totales sobre tripletas ya validadas.
"""

from __future__ import annotations


class InvalidFormatError(ValueError):
    """El valor no coincide con `#?RRGGBB` (6 dígitos hex)."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"invalid hex color: {value!r} (expected #RRGGBB)")
