"""Sub-app `palette`: esquemas, ajustes y generación de paletas."""

from __future__ import annotations

import random
from enum import Enum
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from core.config import AppSettings
from core.domain.errors import InvalidFormatError
from core.services.palette import (
    adjust_hue,
    adjust_lightness,
    adjust_saturation,
    analogous,
    complementary,
    export_as_array,
    export_as_css,
    harmonious_palette,
    random_palette,
    triadic,
)

app = typer.Typer(no_args_is_help=True, help="Palette helpers (schemes, adjustments, generation).")

_console = Console()


class SchemeKind(str, Enum):
    COMPLEMENTARY = "complementary"
    ANALOGOUS = "analogous"
    TRIADIC = "triadic"


class GenerateMode(str, Enum):
    HARMONIOUS = "harmonious"
    RANDOM = "random"


class OutputFormat(str, Enum):
    TABLE = "table"
    CSS = "css"
    JSON = "json"


def _emit(colors: list[str], fmt: OutputFormat, *, title: str) -> None:
    if fmt is OutputFormat.CSS:
        typer.echo(export_as_css(colors))
        return
    if fmt is OutputFormat.JSON:
        typer.echo(export_as_array(colors))
        return

    table = Table(title=title)
    table.add_column("#", style="dim", justify="right")
    table.add_column("Swatch")
    table.add_column("Hex", style="white")
    for index, color in enumerate(colors, start=1):
        table.add_row(str(index), Text("      ", style=f"on {color}"), color)
    _console.print(table)


@app.command()
def scheme(
    color: str = typer.Argument(..., help="Color base (#RRGGBB)."),
    kind: SchemeKind = typer.Option(SchemeKind.COMPLEMENTARY, "--kind", "-k"),
    fmt: OutputFormat = typer.Option(OutputFormat.TABLE, "--format", "-f"),
) -> None:
    """Colores complementario / análogos / triádicos."""

    try:
        if kind is SchemeKind.COMPLEMENTARY:
            colors = [complementary(color)]
        elif kind is SchemeKind.ANALOGOUS:
            colors = analogous(color)
        else:
            colors = triadic(color)
    except InvalidFormatError as exc:
        raise typer.BadParameter(str(exc)) from exc

    _emit(colors, fmt, title=f"{kind.value.capitalize()} of {color}")


@app.command()
def adjust(
    color: str = typer.Argument(..., help="Color base (#RRGGBB)."),
    lightness: float = typer.Option(0.0, "--lightness", "-l", help="Delta de luminosidad (-100..100)."),
    saturation: float = typer.Option(0.0, "--saturation", "-s", help="Delta de saturación (-100..100)."),
    hue: float = typer.Option(0.0, "--hue", help="Rotación de tono en grados."),
) -> None:
    """Ajusta luminosidad, saturación y tono (en ese orden)."""

    try:
        result = color
        if lightness:
            result = adjust_lightness(result, lightness)
        if saturation:
            result = adjust_saturation(result, saturation)
        if hue:
            result = adjust_hue(result, hue)
    except InvalidFormatError as exc:
        raise typer.BadParameter(str(exc)) from exc

    typer.echo(result)


@app.command()
def generate(
    mode: GenerateMode = typer.Option(GenerateMode.HARMONIOUS, "--mode", "-m"),
    count: Optional[int] = typer.Option(None, "--count", "-n", min=1, max=32, help="Colores (default: settings)."),
    seed: Optional[int] = typer.Option(None, "--seed", help="Semilla para resultados reproducibles."),
    fmt: OutputFormat = typer.Option(OutputFormat.TABLE, "--format", "-f"),
) -> None:
    """Genera una paleta armónica o aleatoria."""

    size = count or AppSettings().palette_size
    rng = random.Random(seed)
    if mode is GenerateMode.HARMONIOUS:
        colors = harmonious_palette(size, rng)
    else:
        colors = random_palette(size, rng)

    _emit(colors, fmt, title=f"{mode.value.capitalize()} palette")
