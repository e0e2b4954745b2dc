"""Doctor command for environment diagnostics."""

from __future__ import annotations

from pathlib import Path

import typer
from jinja2 import TemplateError
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from adapters.report_exporter import export_audit_pdf, render_audit_html
from core.config import AppSettings, get_user_env_file, write_user_env_vars
from core.domain.models import AuditReport, ContrastPair
from core.services.audit import run_audit
from core.services.perceptual import contrast_ratio, similarity_score

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_engine() -> tuple[bool, str]:
    """Known values: black/white is 21:1 and a color is 100% similar to itself."""

    ratio = contrast_ratio("#000000", "#ffffff")
    score = similarity_score("#3b82f6", "#3b82f6")
    ok = abs(ratio - 21.0) < 1e-9 and abs(score - 100.0) < 1e-9
    return ok, f"black/white {ratio:.2f}:1, self-similarity {score:.1f}"


def _check_html() -> tuple[bool, str]:
    try:
        report = run_audit([ContrastPair(foreground="#000000", background="#ffffff", label="doctor")])
        html = render_audit_html(report=report)
    except (OSError, TemplateError) as exc:
        return False, str(exc)
    return "doctor" in html, f"{len(html)} bytes"


def _check_pdf(reports_dir: Path) -> tuple[bool, str]:
    """Attempt to generate a minimal PDF to detect WeasyPrint issues."""

    tmp = reports_dir / "_doctor_test.pdf"
    try:
        export_audit_pdf(report=AuditReport(), output_path=tmp)
    except (ImportError, OSError) as exc:
        return False, str(exc)
    tmp.unlink(missing_ok=True)
    return True, "OK"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="palette-lens Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Match threshold", "OK", f"> {settings.match_threshold:g} (limit {settings.match_limit})")
    table.add_row("Ratio precision", "OK", str(settings.ratio_precision))
    table.add_row("Reports dir", "OK", str(settings.reports_dir))
    table.add_row("User config", "OK" if get_user_env_file().exists() else "OPTIONAL", str(get_user_env_file()))

    ok_engine, detail_engine = _check_engine()
    table.add_row("Color engine", "OK" if ok_engine else "FAIL", detail_engine)

    ok_html, detail_html = _check_html()
    table.add_row("HTML report", "OK" if ok_html else "FAIL", detail_html)

    ok_pdf, detail_pdf = _check_pdf(settings.reports_dir)
    table.add_row("WeasyPrint PDF", "OK" if ok_pdf else "FAIL", detail_pdf)

    _console.print(table)

    if not ok_pdf:
        _console.print(
            "\n[yellow]Note:[/yellow] When PDF export fails, `audit --pdf-out` automatically falls back to HTML."
        )


@app.command()
def configure() -> None:
    """Interactive setup (stores config in the user config .env)."""

    current = AppSettings()

    threshold = typer.prompt("Match threshold (0-100)", default=current.match_threshold, type=float)
    limit = typer.prompt("Match limit", default=current.match_limit, type=int)
    precision = typer.prompt("Ratio precision (decimals)", default=current.ratio_precision, type=int)
    palette_size = typer.prompt("Default palette size", default=current.palette_size, type=int)

    # Mismas restricciones que al leer el .env.
    try:
        checked = AppSettings(
            _env_file=None,
            match_threshold=threshold,
            match_limit=limit,
            ratio_precision=precision,
            palette_size=palette_size,
        )
    except ValidationError as exc:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in exc.errors())
        raise typer.BadParameter(f"invalid settings ({fields}); nothing was saved") from exc

    env_path = write_user_env_vars(
        {
            "PALETTE_LENS_MATCH_THRESHOLD": f"{checked.match_threshold:g}",
            "PALETTE_LENS_MATCH_LIMIT": str(checked.match_limit),
            "PALETTE_LENS_RATIO_PRECISION": str(checked.ratio_precision),
            "PALETTE_LENS_PALETTE_SIZE": str(checked.palette_size),
        }
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")
