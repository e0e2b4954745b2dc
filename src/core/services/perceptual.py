"""Comparador perceptual: contraste WCAG y similitud HSL.

Dos algoritmos independientes:
- Contraste: luminancia relativa sRGB -> ratio (L1+0.05)/(L2+0.05) -> nota WCAG.
  Nunca pasa por HSL.
- Similitud: distancia ponderada en HSL (hue circular) -> score 0..100.

Funciones puras, sin estado ni logging; se pueden invocar en paralelo.
"""

from __future__ import annotations

from typing import Iterable

from core.domain.models import (
    ComplianceGrade,
    ComplianceResult,
    ContrastReport,
    Rgb,
    SimilarityMatch,
    TextSizeCompliance,
    WcagCompliance,
)
from core.interfaces.swatch import Swatch
from core.services.color_space import ColorLike, coerce_rgb, format_hex, to_hsl

# Coeficientes de luminancia sRGB (no configurables).
_RED_WEIGHT = 0.2126
_GREEN_WEIGHT = 0.7152
_BLUE_WEIGHT = 0.0722
_LINEAR_THRESHOLD = 0.03928

AA_NORMAL = 4.5
AA_LARGE = 3.0
AAA_NORMAL = 7.0
AAA_LARGE = 4.5

HUE_WEIGHT = 0.5
SATURATION_WEIGHT = 0.3
LIGHTNESS_WEIGHT = 0.2
_MAX_HUE_DISTANCE = 180.0
_MAX_LINEAR_DISTANCE = 100.0


def _linearize(channel: int) -> float:
    value = channel / 255
    if value <= _LINEAR_THRESHOLD:
        return value / 12.92
    return ((value + 0.055) / 1.055) ** 2.4


def relative_luminance(rgb: Rgb) -> float:
    """Luminancia relativa WCAG en [0, 1]."""

    return (
        _RED_WEIGHT * _linearize(rgb.r)
        + _GREEN_WEIGHT * _linearize(rgb.g)
        + _BLUE_WEIGHT * _linearize(rgb.b)
    )


def contrast_ratio(color_a: ColorLike, color_b: ColorLike) -> float:
    """Ratio de contraste en [1, 21]; simétrico.

    Lanza `InvalidFormatError` si algún hex está mal formado.
    """

    lum_a = relative_luminance(coerce_rgb(color_a))
    lum_b = relative_luminance(coerce_rgb(color_b))
    lighter = max(lum_a, lum_b)
    darker = min(lum_a, lum_b)
    return (lighter + 0.05) / (darker + 0.05)


def format_ratio(ratio: float, precision: int = 2) -> str:
    """Formato legible, p.ej. `4.50:1`."""

    return f"{ratio:.{precision}f}:1"


def check_wcag_compliance(ratio: float) -> WcagCompliance:
    return WcagCompliance(
        aa=TextSizeCompliance(normal=ratio >= AA_NORMAL, large=ratio >= AA_LARGE),
        aaa=TextSizeCompliance(normal=ratio >= AAA_NORMAL, large=ratio >= AAA_LARGE),
    )


def grade_for_ratio(ratio: float) -> ComplianceGrade:
    if ratio >= AAA_NORMAL:
        return ComplianceGrade.AAA
    if ratio >= AA_NORMAL:
        return ComplianceGrade.AA
    return ComplianceGrade.FAIL


def compliance_grade(ratio: float) -> ComplianceResult:
    """Nota global + desglose AA/AAA x normal/grande.

    Los umbrales de texto grande solo aparecen en el desglose; no alteran la nota.
    """

    breakdown = check_wcag_compliance(ratio)
    return ComplianceResult(
        ratio=ratio,
        grade=grade_for_ratio(ratio),
        aa=breakdown.aa,
        aaa=breakdown.aaa,
    )


def analyze_contrast(foreground: ColorLike, background: ColorLike, *, label: str | None = None) -> ContrastReport:
    fg = coerce_rgb(foreground)
    bg = coerce_rgb(background)
    ratio = contrast_ratio(fg, bg)
    return ContrastReport(
        foreground=format_hex(fg),
        background=format_hex(bg),
        ratio=ratio,
        compliance=compliance_grade(ratio),
        label=label,
    )


def _closeness(distance: float, max_distance: float) -> float:
    return 100 - (distance / max_distance * 100)


def similarity_score(reference: ColorLike, candidate: ColorLike) -> float:
    """Similitud perceptual ponderada en [0, 100] (100 = idénticos).

    El hue es cíclico: 350° y 10° están a 20°, no a 340°.
    """

    a = to_hsl(coerce_rgb(reference))
    b = to_hsl(coerce_rgb(candidate))

    hue_diff = abs(a.h - b.h)
    if hue_diff > 180:
        hue_diff = 360 - hue_diff
    sat_diff = abs(a.s - b.s)
    light_diff = abs(a.l - b.l)

    return (
        _closeness(hue_diff, _MAX_HUE_DISTANCE) * HUE_WEIGHT
        + _closeness(sat_diff, _MAX_LINEAR_DISTANCE) * SATURATION_WEIGHT
        + _closeness(light_diff, _MAX_LINEAR_DISTANCE) * LIGHTNESS_WEIGHT
    )


def rank_by_similarity(
    reference: ColorLike,
    candidates: Iterable[Swatch],
    *,
    threshold: float | None = None,
    limit: int | None = None,
) -> list[SimilarityMatch]:
    """Puntúa cada candidato contra `reference` y ordena de mayor a menor.

    - `threshold`: conserva solo scores estrictamente mayores (política del caller).
    - `limit`: trunca tras ordenar. El orden entre empates es el de entrada.
    """

    ref = coerce_rgb(reference)
    matches: list[SimilarityMatch] = []
    for swatch in candidates:
        score = similarity_score(ref, swatch.color)
        if threshold is not None and not score > threshold:
            continue
        matches.append(
            SimilarityMatch(
                name=swatch.name,
                color=format_hex(coerce_rgb(swatch.color)),
                score=score,
                identifier=getattr(swatch, "identifier", None),
            )
        )

    matches.sort(key=lambda m: m.score, reverse=True)
    if limit is not None:
        matches = matches[:limit]
    return matches


__all__ = [
    "AAA_LARGE",
    "AAA_NORMAL",
    "AA_LARGE",
    "AA_NORMAL",
    "analyze_contrast",
    "check_wcag_compliance",
    "compliance_grade",
    "contrast_ratio",
    "format_ratio",
    "grade_for_ratio",
    "rank_by_similarity",
    "relative_luminance",
    "similarity_score",
]
