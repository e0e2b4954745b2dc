"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validación de rangos en el borde (canales 0..255, hue 0..360) sin que el
  motor tenga que re-validar nada.
- Serialización directa a JSON para exportadores y la CLI.

Nota:
- Todos los modelos son inmutables (`frozen`): son valores, no entidades.
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class Rgb(BaseModel):
    """Color sRGB con canales enteros 0..255."""

    model_config = ConfigDict(frozen=True)

    r: int = Field(..., ge=0, le=255, description="Canal rojo.")
    g: int = Field(..., ge=0, le=255, description="Canal verde.")
    b: int = Field(..., ge=0, le=255, description="Canal azul.")

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)


class Hsl(BaseModel):
    """Color HSL: hue circular en grados, saturación y luminosidad en 0..100."""

    model_config = ConfigDict(frozen=True)

    h: float = Field(..., ge=0, lt=360, description="Tono en grados [0, 360).")
    s: float = Field(..., ge=0, le=100, description="Saturación [0, 100].")
    l: float = Field(..., ge=0, le=100, description="Luminosidad [0, 100].")  # noqa: E741


class ComplianceGrade(str, Enum):
    """Nota global WCAG para texto normal."""

    AAA = "AAA"
    AA = "AA"
    FAIL = "FAIL"


class TextSizeCompliance(BaseModel):
    model_config = ConfigDict(frozen=True)

    normal: bool = Field(..., description="Cumple para texto normal.")
    large: bool = Field(..., description="Cumple para texto grande (>=18pt o 14pt bold).")


class WcagCompliance(BaseModel):
    """Desglose por nivel (AA/AAA) y tamaño de texto."""

    model_config = ConfigDict(frozen=True)

    aa: TextSizeCompliance
    aaa: TextSizeCompliance


class ComplianceResult(BaseModel):
    """Nota global + desglose, siempre asociado a un ratio concreto."""

    model_config = ConfigDict(frozen=True)

    ratio: float = Field(..., description="Ratio de contraste evaluado.")
    grade: ComplianceGrade
    aa: TextSizeCompliance
    aaa: TextSizeCompliance

    @property
    def passes(self) -> bool:
        return self.grade is not ComplianceGrade.FAIL


class ContrastPair(BaseModel):
    """Par primer plano / fondo a evaluar (entrada de auditorías)."""

    model_config = ConfigDict(frozen=True)

    foreground: str = Field(..., min_length=1, description="Color del texto (hex).")
    background: str = Field(..., min_length=1, description="Color de fondo (hex).")
    label: str | None = Field(default=None, max_length=256, description="Nombre legible del par.")


class ContrastReport(BaseModel):
    """Resultado de contraste de un par ya normalizado."""

    model_config = ConfigDict(frozen=True)

    foreground: str = Field(..., description="Primer plano en formato #rrggbb.")
    background: str = Field(..., description="Fondo en formato #rrggbb.")
    ratio: float = Field(..., ge=1.0, le=21.0 + 1e-9)
    compliance: ComplianceResult
    label: str | None = None


class NamedColor(BaseModel):
    """Swatch con nombre: candidato para ranking por similitud."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, max_length=256)
    color: str = Field(..., min_length=1, description="Color hex del swatch.")
    identifier: str | None = Field(default=None, description="Id externo (p.ej. componente del catálogo).")
    category: str | None = None


class SimilarityMatch(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    color: str
    score: float = Field(..., description="Similitud perceptual [0, 100].")
    identifier: str | None = None


class AuditReport(BaseModel):
    """Agregado de una auditoría de contraste por lotes."""

    entries: list[ContrastReport] = Field(default_factory=list)
    generated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Momento de generación (UTC).",
    )

    @property
    def passing(self) -> list[ContrastReport]:
        return [e for e in self.entries if e.compliance.passes]

    @property
    def failing(self) -> list[ContrastReport]:
        return [e for e in self.entries if not e.compliance.passes]
