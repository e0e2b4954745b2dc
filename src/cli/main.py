"""CLI principal (Typer).

Comandos:
- contrast / similarity / convert: operaciones sueltas del motor de color.
- match: ranking de un catálogo JSON contra un color de referencia.
- audit: auditoría de contraste por lotes con exportación JSON/HTML/PDF.
- palette / doctor: sub-apps.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.progress import BarColumn, Progress, TextColumn

from adapters.catalog import load_catalog, load_pairs
from adapters.json_exporter import export_audit_json, export_matches_json
from adapters.report_exporter import export_audit_html, export_audit_pdf
from cli.doctor import app as doctor_app
from cli.palette import app as palette_app
from cli.ui_components import (
    build_audit_table,
    build_color_table,
    build_contrast_panel,
    build_matches_table,
    print_banner,
)
from core.config import AppSettings
from core.domain.errors import InvalidFormatError
from core.services.audit import AuditHooks, match_catalog, run_audit, sanitize_label_for_filename
from core.services.color_space import format_hex, parse_hex, to_hsl
from core.services.palette import is_light_color
from core.services.perceptual import analyze_contrast, relative_luminance, similarity_score

logger = logging.getLogger(__name__)

app = typer.Typer(no_args_is_help=True, help="Perceptual color analysis: WCAG contrast, similarity and palettes.")
app.add_typer(palette_app, name="palette")
app.add_typer(doctor_app, name="doctor")

_console = Console()


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False, rich_tracebacks=False)],
        force=True,
    )


def _bad_color(exc: InvalidFormatError) -> typer.BadParameter:
    return typer.BadParameter(str(exc))


def _fail(message: str) -> typer.Exit:
    _console.print(f"[red]Error:[/red] {message}")
    return typer.Exit(code=1)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Logging DEBUG en stderr."),
    banner: bool = typer.Option(False, "--banner", help="Muestra el banner antes del comando."),
) -> None:
    settings = AppSettings()
    _configure_logging("DEBUG" if verbose else settings.log_level)
    ctx.obj = settings
    if banner:
        print_banner(_console)


def _settings(ctx: typer.Context) -> AppSettings:
    return ctx.obj if isinstance(ctx.obj, AppSettings) else AppSettings()


@app.command()
def contrast(
    ctx: typer.Context,
    foreground: str = typer.Argument(..., help="Color del texto (#RRGGBB)."),
    background: str = typer.Argument(..., help="Color de fondo (#RRGGBB)."),
    as_json: bool = typer.Option(False, "--json", help="Salida JSON."),
) -> None:
    """Ratio de contraste WCAG y nota AA/AAA."""

    settings = _settings(ctx)
    try:
        report = analyze_contrast(foreground, background)
    except InvalidFormatError as exc:
        raise _bad_color(exc) from exc

    if as_json:
        typer.echo(report.model_dump_json(indent=2))
        return
    _console.print(build_contrast_panel(report, precision=settings.ratio_precision))


@app.command()
def similarity(
    reference: str = typer.Argument(..., help="Color de referencia."),
    candidate: str = typer.Argument(..., help="Color candidato."),
    as_json: bool = typer.Option(False, "--json", help="Salida JSON."),
) -> None:
    """Similitud perceptual ponderada (0-100)."""

    try:
        score = similarity_score(reference, candidate)
        ref_hex = format_hex(parse_hex(reference))
        cand_hex = format_hex(parse_hex(candidate))
    except InvalidFormatError as exc:
        raise _bad_color(exc) from exc

    if as_json:
        typer.echo(json.dumps({"reference": ref_hex, "candidate": cand_hex, "score": score}, indent=2))
        return
    _console.print(f"[bold]{ref_hex}[/bold] vs [bold]{cand_hex}[/bold]: [green]{score:.2f}[/green] / 100")


@app.command()
def convert(color: str = typer.Argument(..., help="Color hex a inspeccionar.")) -> None:
    """Muestra hex normalizado, RGB, HSL y luminancia."""

    try:
        rgb = parse_hex(color)
    except InvalidFormatError as exc:
        raise _bad_color(exc) from exc

    hex_color = format_hex(rgb)
    _console.print(
        build_color_table(hex_color, rgb, to_hsl(rgb), relative_luminance(rgb), is_light_color(rgb))
    )


@app.command()
def match(
    ctx: typer.Context,
    reference: str = typer.Argument(..., help="Color de marca/referencia."),
    catalog: Path = typer.Option(..., "--catalog", "-c", exists=True, dir_okay=False, help="Catálogo JSON."),
    threshold: Optional[float] = typer.Option(None, "--threshold", min=0, max=100, help="Score mínimo (exclusivo)."),
    limit: Optional[int] = typer.Option(None, "--limit", min=1, help="Máximo de resultados."),
    json_out: Optional[Path] = typer.Option(None, "--json-out", help="Exporta los matches a JSON."),
) -> None:
    """Rankea un catálogo por similitud con `reference`."""

    settings = _settings(ctx)
    try:
        entries = load_catalog(catalog).entries
    except (OSError, json.JSONDecodeError, ValidationError) as exc:
        raise _fail(f"could not load catalog {catalog}: {exc}") from exc

    try:
        result = match_catalog(
            reference,
            entries,
            threshold=settings.match_threshold if threshold is None else threshold,
            limit=settings.match_limit if limit is None else limit,
        )
    except InvalidFormatError as exc:
        raise _bad_color(exc) from exc

    if result.placeholders:
        _console.print(
            f"[yellow]Warning:[/yellow] {len(result.placeholders)} entr(y/ies) without color used a placeholder."
        )

    if not result.matches:
        _console.print(f"[dim]No matches above the threshold ({result.considered} entries considered).[/dim]")
    else:
        _console.print(build_matches_table(result.reference, result.matches))

    if json_out:
        export_matches_json(reference=result.reference, matches=result.matches, output_path=json_out)
        _console.print(f"[green]Saved JSON:[/green] {json_out}")


@app.command()
def audit(
    ctx: typer.Context,
    pairs_path: Path = typer.Argument(..., exists=True, dir_okay=False, help="JSON con pares fg/bg."),
    json_out: Optional[Path] = typer.Option(None, "--json-out", help="Exporta resultados a JSON."),
    html_out: Optional[Path] = typer.Option(None, "--html-out", help="Exporta reporte HTML."),
    pdf_out: Optional[Path] = typer.Option(None, "--pdf-out", help="Exporta reporte PDF (WeasyPrint)."),
    keep_duplicates: bool = typer.Option(False, "--keep-duplicates", help="No elimina pares repetidos."),
    strict: bool = typer.Option(False, "--strict", help="Exit code 1 si algún par no llega a AA."),
    export: bool = typer.Option(False, "--export", help="Exporta JSON + HTML a `reports_dir`."),
) -> None:
    """Auditoría de contraste por lotes."""

    settings = _settings(ctx)
    if export:
        base = f"audit-{sanitize_label_for_filename(pairs_path.stem)}"
        json_out = json_out or settings.reports_dir / f"{base}.json"
        html_out = html_out or settings.reports_dir / f"{base}.html"
    try:
        pairs = load_pairs(pairs_path).pairs
    except (OSError, json.JSONDecodeError, ValidationError) as exc:
        raise _fail(f"could not load pairs {pairs_path}: {exc}") from exc

    with Progress(
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TextColumn("{task.completed}/{task.total}"),
        console=_console,
        transient=True,
    ) as progress:
        task_id = progress.add_task("Auditing", total=len(pairs))
        hooks = AuditHooks(
            started=lambda total: progress.update(task_id, total=total),
            progress=lambda done, total, label: progress.update(task_id, completed=done, description=label),
        )
        try:
            report = run_audit(pairs, dedupe=not keep_duplicates, hooks=hooks)
        except InvalidFormatError as exc:
            raise typer.BadParameter(str(exc), param_hint="PAIRS_PATH") from exc

    _console.print(build_audit_table(report, precision=settings.ratio_precision))
    _console.print(
        f"{len(report.entries)} pair(s): [green]{len(report.passing)} passing[/green], "
        f"[red]{len(report.failing)} failing[/red]"
    )

    if json_out:
        export_audit_json(report=report, output_path=json_out)
        _console.print(f"[green]Saved JSON:[/green] {json_out}")
    if html_out:
        export_audit_html(report=report, output_path=html_out, precision=settings.ratio_precision)
        _console.print(f"[green]Saved HTML:[/green] {html_out}")
    if pdf_out:
        try:
            export_audit_pdf(report=report, output_path=pdf_out, precision=settings.ratio_precision)
            _console.print(f"[green]Saved PDF:[/green] {pdf_out}")
        except (ImportError, OSError) as exc:
            fallback = pdf_out.with_suffix(".html")
            logger.warning("PDF export failed (%s); falling back to HTML", exc)
            export_audit_html(report=report, output_path=fallback, precision=settings.ratio_precision)
            _console.print(f"[yellow]PDF export failed, saved HTML instead:[/yellow] {fallback}")

    if strict and report.failing:
        raise typer.Exit(code=1)


def run() -> None:
    app()
