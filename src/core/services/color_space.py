"""Conversión entre representaciones de color (hex, RGB, HSL).

Reglas:
- La validación ocurre una sola vez, aquí, al parsear hex.
- El resto de funciones opera sobre `Rgb`/`Hsl` ya validados y no falla.
"""

from __future__ import annotations

import math
import re

from core.domain.errors import InvalidFormatError
from core.domain.models import Hsl, Rgb

_HEX_RE = re.compile(r"#?([0-9a-fA-F]{6})")

ColorLike = str | Rgb | tuple[int, int, int]


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def is_valid_hex(value: object) -> bool:
    """`True` si `value` es un string `#?RRGGBB`. Nunca lanza."""

    return isinstance(value, str) and _HEX_RE.fullmatch(value) is not None


def parse_hex(value: str) -> Rgb:
    """Parsea `#RRGGBB` / `RRGGBB` (sin distinguir mayúsculas) a `Rgb`."""

    m = _HEX_RE.fullmatch(value) if isinstance(value, str) else None
    if m is None:
        raise InvalidFormatError(value)
    digits = m.group(1)
    return Rgb(r=int(digits[0:2], 16), g=int(digits[2:4], 16), b=int(digits[4:6], 16))


def format_hex(rgb: Rgb) -> str:
    """Inverso de `parse_hex`: `#rrggbb` en minúsculas."""

    return "#" + "".join(f"{c:02x}" for c in rgb.as_tuple())


def normalize_hex(value: str) -> str:
    """Añade `#` si falta. No valida dígitos ni cambia mayúsculas."""

    return value if value.startswith("#") else f"#{value}"


def coerce_rgb(color: ColorLike) -> Rgb:
    """Acepta hex, `Rgb` o tupla (r, g, b) y devuelve `Rgb`."""

    if isinstance(color, Rgb):
        return color
    if isinstance(color, str):
        return parse_hex(color)
    if isinstance(color, tuple) and len(color) == 3:
        r, g, b = color
        return Rgb(r=r, g=g, b=b)
    raise InvalidFormatError(color)


def to_hsl(rgb: Rgb) -> Hsl:
    """RGB -> HSL con h, s, l redondeados a enteros.

    Colores acromáticos (max == min) devuelven h = 0 y s = 0.
    """

    r, g, b = (c / 255 for c in rgb.as_tuple())
    mx = max(r, g, b)
    mn = min(r, g, b)
    lightness = (mx + mn) / 2

    hue = 0.0
    saturation = 0.0
    if mx != mn:
        d = mx - mn
        saturation = d / (2 - mx - mn) if lightness > 0.5 else d / (mx + mn)
        if mx == r:
            hue = ((g - b) / d + (6 if g < b else 0)) / 6
        elif mx == g:
            hue = ((b - r) / d + 2) / 6
        else:
            hue = ((r - g) / d + 4) / 6

    return Hsl(
        h=_round_half_up(hue * 360) % 360,
        s=_round_half_up(saturation * 100),
        l=_round_half_up(lightness * 100),
    )


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(hsl: Hsl) -> Rgb:
    h = hsl.h / 360
    s = hsl.s / 100
    lightness = hsl.l / 100

    if s == 0:
        r = g = b = lightness
    else:
        q = lightness * (1 + s) if lightness < 0.5 else lightness + s - lightness * s
        p = 2 * lightness - q
        r = _hue_to_channel(p, q, h + 1 / 3)
        g = _hue_to_channel(p, q, h)
        b = _hue_to_channel(p, q, h - 1 / 3)

    return Rgb(r=_round_half_up(r * 255), g=_round_half_up(g * 255), b=_round_half_up(b * 255))


def hex_to_hsl(value: str) -> Hsl:
    return to_hsl(parse_hex(value))


def hsl_to_hex(hsl: Hsl) -> str:
    return format_hex(hsl_to_rgb(hsl))


__all__ = [
    "ColorLike",
    "coerce_rgb",
    "format_hex",
    "hex_to_hsl",
    "hsl_to_hex",
    "hsl_to_rgb",
    "is_valid_hex",
    "normalize_hex",
    "parse_hex",
    "to_hsl",
]
