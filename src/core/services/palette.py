"""Utilidades de paleta sobre HSL.

Todas las funciones reciben y devuelven hex; la aleatoriedad se inyecta
con `rng` para poder reproducir paletas (tests, `--seed` en la CLI).
"""

from __future__ import annotations

import json
import random
from typing import Sequence

from core.domain.models import Hsl
from core.services.color_space import ColorLike, coerce_rgb, format_hex, hsl_to_hex, to_hsl


def _clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return max(low, min(high, value))


def _hsl_of(color: ColorLike) -> Hsl:
    return to_hsl(coerce_rgb(color))


def _rotate(hsl: Hsl, degrees: float) -> str:
    h = (hsl.h + degrees) % 360
    # float % puede devolver 360.0 para giros negativos diminutos.
    if h >= 360:
        h = 0.0
    return hsl_to_hex(Hsl(h=h, s=hsl.s, l=hsl.l))


def adjust_lightness(color: ColorLike, amount: float) -> str:
    hsl = _hsl_of(color)
    return hsl_to_hex(Hsl(h=hsl.h, s=hsl.s, l=_clamp(hsl.l + amount)))


def adjust_saturation(color: ColorLike, amount: float) -> str:
    hsl = _hsl_of(color)
    return hsl_to_hex(Hsl(h=hsl.h, s=_clamp(hsl.s + amount), l=hsl.l))


def adjust_hue(color: ColorLike, amount: float) -> str:
    return _rotate(_hsl_of(color), amount)


def complementary(color: ColorLike) -> str:
    return _rotate(_hsl_of(color), 180)


def analogous(color: ColorLike) -> list[str]:
    """[-30°, color, +30°]."""

    hsl = _hsl_of(color)
    return [_rotate(hsl, -30), format_hex(coerce_rgb(color)), _rotate(hsl, 30)]


def triadic(color: ColorLike) -> list[str]:
    hsl = _hsl_of(color)
    return [format_hex(coerce_rgb(color)), _rotate(hsl, 120), _rotate(hsl, 240)]


def is_light_color(color: ColorLike) -> bool:
    """Brillo YIQ > 0.5. Heurística rápida para elegir texto claro/oscuro."""

    rgb = coerce_rgb(color)
    brightness = (0.299 * rgb.r + 0.587 * rgb.g + 0.114 * rgb.b) / 255
    return brightness > 0.5


def _check_count(count: int) -> None:
    if count < 1:
        raise ValueError(f"palette size must be >= 1 (got {count})")


def random_color(rng: random.Random | None = None) -> str:
    rng = rng or random.Random()
    return "#" + "".join(f"{rng.randrange(256):02x}" for _ in range(3))


def random_palette(count: int = 5, rng: random.Random | None = None) -> list[str]:
    _check_count(count)
    rng = rng or random.Random()
    return [random_color(rng) for _ in range(count)]


def harmonious_palette(count: int = 5, rng: random.Random | None = None) -> list[str]:
    """Hues equiespaciados desde una base aleatoria.

    Saturación 60–90 y luminosidad 45–75 para evitar tonos lavados o casi negros.
    """

    _check_count(count)
    rng = rng or random.Random()
    base_hue = rng.randrange(360)
    palette: list[str] = []
    for i in range(count):
        hue = (base_hue + i * 360 / count) % 360
        saturation = 60 + rng.random() * 30
        lightness = 45 + rng.random() * 30
        palette.append(hsl_to_hex(Hsl(h=hue, s=saturation, l=lightness)))
    return palette


def placeholder_color(identifier: str) -> str:
    """Color determinista para entradas sin color (hue = suma de code points)."""

    hue = sum(ord(ch) for ch in identifier) % 360
    return hsl_to_hex(Hsl(h=hue, s=70, l=50))


def export_as_css(colors: Sequence[str], names: Sequence[str] | None = None) -> str:
    """Custom properties CSS en `:root`. Nombres por defecto: `color-N`."""

    lines = [":root {"]
    for index, color in enumerate(colors):
        name = names[index] if names and index < len(names) and names[index] else f"color-{index + 1}"
        lines.append(f"  --{name}: {color};")
    lines.append("}")
    return "\n".join(lines)


def export_as_array(colors: Sequence[str]) -> str:
    return json.dumps(list(colors), indent=2)


__all__ = [
    "adjust_hue",
    "adjust_lightness",
    "adjust_saturation",
    "analogous",
    "complementary",
    "export_as_array",
    "export_as_css",
    "harmonious_palette",
    "is_light_color",
    "placeholder_color",
    "random_color",
    "random_palette",
    "triadic",
]
