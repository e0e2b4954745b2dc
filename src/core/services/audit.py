"""Orquestación de auditorías de contraste y matching de catálogo.

Este módulo agrupa los flujos por lotes que usa la CLI. Mantiene los efectos
secundarios (impresión, barras de progreso) fuera de la lógica: la UI se
engancha mediante `AuditHooks`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable, Sequence

from core.domain.models import AuditReport, ContrastPair, NamedColor, SimilarityMatch
from core.services.color_space import coerce_rgb, format_hex
from core.services.palette import placeholder_color
from core.services.perceptual import analyze_contrast, rank_by_similarity

logger = logging.getLogger(__name__)


@dataclass
class AuditHooks:
    """Callbacks opcionales para capas de UI."""

    started: Callable[[int], None] | None = None
    progress: Callable[[int, int, str], None] | None = None


@dataclass
class MatchResult:
    reference: str
    matches: list[SimilarityMatch]
    considered: int
    placeholders: list[str] = field(default_factory=list)


def sanitize_label_for_filename(value: str) -> str:
    """Slug apto para nombres de fichero de reportes."""

    out: list[str] = []
    for ch in value.strip():
        if ch.isalnum() or ch in ("-", "_", "."):
            out.append(ch)
        elif ch == "#":
            continue
        else:
            out.append("-")
    cleaned = "".join(out).strip("-_")
    return cleaned or "audit"


def dedupe_pairs(pairs: Iterable[ContrastPair]) -> list[ContrastPair]:
    """Elimina pares repetidos (mismo fg/bg normalizado), conservando el primero."""

    seen: set[tuple[str, str]] = set()
    deduped: list[ContrastPair] = []
    for pair in pairs:
        key = (pair.foreground.lstrip("#").lower(), pair.background.lstrip("#").lower())
        if key in seen:
            continue
        seen.add(key)
        deduped.append(pair)
    return deduped


def run_audit(
    pairs: Sequence[ContrastPair],
    *,
    dedupe: bool = True,
    hooks: AuditHooks | None = None,
) -> AuditReport:
    """Calcula ratio + cumplimiento para cada par.

    Un hex inválido aborta la auditoría con `InvalidFormatError`.
    """

    hooks = hooks or AuditHooks()
    selected = dedupe_pairs(pairs) if dedupe else list(pairs)
    if len(selected) != len(pairs):
        logger.info("Skipped %d duplicated pair(s)", len(pairs) - len(selected))

    if hooks.started:
        hooks.started(len(selected))

    entries = []
    for index, pair in enumerate(selected, start=1):
        report = analyze_contrast(pair.foreground, pair.background, label=pair.label)
        logger.debug(
            "Pair %s on %s -> %.2f (%s)",
            report.foreground,
            report.background,
            report.ratio,
            report.compliance.grade.value,
        )
        entries.append(report)
        if hooks.progress:
            hooks.progress(index, len(selected), pair.label or f"{report.foreground}/{report.background}")

    return AuditReport(entries=entries)


def resolve_swatches(entries: Iterable[object]) -> tuple[list[NamedColor], list[str]]:
    """Convierte entradas de catálogo en `NamedColor`.

    Entradas sin color reciben `placeholder_color` derivado del id (o nombre).
    Devuelve también los nombres que necesitaron placeholder.
    """

    swatches: list[NamedColor] = []
    placeholders: list[str] = []
    for entry in entries:
        name = str(getattr(entry, "name"))
        identifier = getattr(entry, "identifier", None)
        color = getattr(entry, "color", None)
        if not color:
            color = placeholder_color(identifier or name)
            placeholders.append(name)
        swatches.append(
            NamedColor(
                name=name,
                color=color,
                identifier=identifier,
                category=getattr(entry, "category", None),
            )
        )
    return swatches, placeholders


def match_catalog(
    reference: str,
    entries: Iterable[object],
    *,
    threshold: float | None,
    limit: int | None,
) -> MatchResult:
    ref = format_hex(coerce_rgb(reference))
    swatches, placeholders = resolve_swatches(entries)
    if placeholders:
        logger.warning("%d catalog entr(y/ies) without color; using placeholders", len(placeholders))

    matches = rank_by_similarity(ref, swatches, threshold=threshold, limit=limit)
    logger.info("Ranked %d/%d catalog entries against %s", len(matches), len(swatches), ref)
    return MatchResult(reference=ref, matches=matches, considered=len(swatches), placeholders=placeholders)
