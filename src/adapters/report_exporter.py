"""Exportación de reportes de auditoría.

Por qué está en adapters:
- PDF/HTML son detalles de infraestructura (WeasyPrint/Jinja2).
- El Core solo conoce el agregado `AuditReport`.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from core.domain.models import AuditReport
from core.services.perceptual import format_ratio

logger = logging.getLogger(__name__)

_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


def _get_env() -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(_TEMPLATES_DIR)),
        autoescape=select_autoescape(["html", "xml"]),
    )
    env.filters["ratio"] = format_ratio
    return env


def render_audit_html(*, report: AuditReport, title: str = "Contrast audit", precision: int = 2) -> str:
    """Renderiza un HTML autocontenido para el reporte."""

    generated_at_local = report.generated_at.astimezone().isoformat(timespec="seconds")
    template = _get_env().get_template("audit.html")
    return template.render(
        title=title,
        report=report,
        entries=report.entries,
        passing_count=len(report.passing),
        failing_count=len(report.failing),
        generated_at=report.generated_at.isoformat(timespec="seconds"),
        generated_at_local=generated_at_local,
        rendered_at=datetime.now().astimezone().isoformat(timespec="seconds"),
        precision=precision,
    )


def export_audit_html(
    *, report: AuditReport, output_path: Path, title: str = "Contrast audit", precision: int = 2
) -> Path:
    """Exporta la auditoría como HTML.

    También sirve como fallback cuando el render PDF no está soportado por el entorno.
    """

    output_path.parent.mkdir(parents=True, exist_ok=True)
    html = render_audit_html(report=report, title=title, precision=precision)
    output_path.write_text(html, encoding="utf-8")
    logger.info("Wrote %s", output_path)
    return output_path


def export_audit_pdf(
    *, report: AuditReport, output_path: Path, title: str = "Contrast audit", precision: int = 2
) -> Path:
    """Exporta la auditoría como PDF.

    WeasyPrint necesita librerías del sistema (Pango); se importa aquí para
    que el resto del módulo funcione sin ellas.
    """

    from weasyprint import HTML  # noqa: PLC0415

    output_path.parent.mkdir(parents=True, exist_ok=True)
    html = render_audit_html(report=report, title=title, precision=precision)
    HTML(string=html, base_url=str(_TEMPLATES_DIR)).write_pdf(str(output_path))
    logger.info("Wrote %s", output_path)
    return output_path
