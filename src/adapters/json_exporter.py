"""Exportación JSON de resultados.

Por qué JSON:
- Interoperabilidad con pipelines de diseño (tokens, CI de accesibilidad).
- Permite persistir resultados sin depender del render HTML/PDF.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from core.domain.models import AuditReport, SimilarityMatch

logger = logging.getLogger(__name__)


def _write_json(payload: Any, output_path: Path) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    logger.info("Wrote %s", output_path)
    return output_path


def export_audit_json(*, report: AuditReport, output_path: Path) -> Path:
    """Exporta `AuditReport` a JSON UTF-8 con formato estable."""

    payload = report.model_dump(mode="json")
    payload["summary"] = {
        "total": len(report.entries),
        "passing": len(report.passing),
        "failing": len(report.failing),
    }
    return _write_json(payload, output_path)


def export_matches_json(*, reference: str, matches: list[SimilarityMatch], output_path: Path) -> Path:
    payload = {
        "reference": reference,
        "matches": [m.model_dump(mode="json") for m in matches],
    }
    return _write_json(payload, output_path)
