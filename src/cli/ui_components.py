"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from typing import Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import AuditReport, ComplianceGrade, ContrastReport, Hsl, Rgb, SimilarityMatch
from core.services.perceptual import format_ratio

_GRADE_STYLES = {
    ComplianceGrade.AAA: "bold green",
    ComplianceGrade.AA: "bold cyan",
    ComplianceGrade.FAIL: "bold red",
}


def _flag(ok: bool) -> Text:
    return Text("pass", style="green") if ok else Text("fail", style="red")


def _swatch(hex_color: str) -> Text:
    return Text("    ", style=f"on {hex_color}")


def _stack(*renderables: object) -> Table:
    grid = Table.grid(padding=(1, 0))
    grid.add_column()
    for r in renderables:
        grid.add_row(r)
    return grid


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida (solo en modo interactivo)."""

    title = Text("palette-lens", style="bold magenta")
    subtitle = Text("Contraste WCAG • Similitud perceptual • Paletas", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="magenta", padding=(1, 4)))


def build_contrast_panel(report: ContrastReport, *, precision: int = 2) -> Panel:
    """Panel con ratio, nota global y desglose AA/AAA."""

    grade = report.compliance.grade
    table = Table.grid(padding=(0, 2))
    table.add_column(style="bold")
    table.add_column()
    table.add_row("Foreground", Text.assemble(_swatch(report.foreground), " ", report.foreground))
    table.add_row("Background", Text.assemble(_swatch(report.background), " ", report.background))
    table.add_row("Ratio", format_ratio(report.ratio, precision))
    table.add_row("Grade", Text(grade.value, style=_GRADE_STYLES[grade]))

    breakdown = Table(show_header=True, header_style="bold")
    breakdown.add_column("Level")
    breakdown.add_column("Normal text")
    breakdown.add_column("Large text")
    breakdown.add_row("AA", _flag(report.compliance.aa.normal), _flag(report.compliance.aa.large))
    breakdown.add_row("AAA", _flag(report.compliance.aaa.normal), _flag(report.compliance.aaa.large))

    title = Text(report.label or "Contrast", style="bold yellow")
    return Panel(_stack(table, breakdown), title=title, border_style=_GRADE_STYLES[grade].split()[-1])


def build_color_table(hex_color: str, rgb: Rgb, hsl: Hsl, luminance: float, light: bool) -> Table:
    table = Table(title=f"Color {hex_color}", show_header=False)
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    table.add_row("Swatch", _swatch(hex_color))
    table.add_row("Hex", hex_color)
    table.add_row("RGB", f"{rgb.r}, {rgb.g}, {rgb.b}")
    table.add_row("HSL", f"{hsl.h:g}°, {hsl.s:g}%, {hsl.l:g}%")
    table.add_row("Luminance", f"{luminance:.4f}")
    table.add_row("Tone", "light" if light else "dark")
    return table


def build_matches_table(reference: str, matches: Sequence[SimilarityMatch]) -> Table:
    table = Table(title=f"Matches for {reference}")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Name", style="cyan")
    table.add_column("Color", style="white")
    table.add_column("Score", style="green", justify="right")
    for index, match in enumerate(matches, start=1):
        table.add_row(
            str(index),
            match.name,
            Text.assemble(_swatch(match.color), " ", match.color),
            f"{round(match.score)}%",
        )
    return table


def build_audit_table(report: AuditReport, *, precision: int = 2) -> Table:
    table = Table(title="Contrast audit")
    table.add_column("Pair", style="cyan")
    table.add_column("Ratio", justify="right")
    table.add_column("Grade")
    table.add_column("AA", justify="center")
    table.add_column("AA large", justify="center")
    table.add_column("AAA", justify="center")
    table.add_column("AAA large", justify="center")
    for entry in report.entries:
        c = entry.compliance
        table.add_row(
            entry.label or f"{entry.foreground} / {entry.background}",
            format_ratio(entry.ratio, precision),
            Text(c.grade.value, style=_GRADE_STYLES[c.grade]),
            _flag(c.aa.normal),
            _flag(c.aa.large),
            _flag(c.aaa.normal),
            _flag(c.aaa.large),
        )
    return table
