"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que CLI y adaptadores lean la misma política (umbral de matching,
  precisión de ratios, carpeta de reportes).
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


APP_NAME = "palette-lens"


def _config_base() -> Path:
    if sys.platform.startswith("win"):
        return Path(os.environ.get("APPDATA", str(Path.home())))
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support"
    return Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config")


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (APPDATA, Application Support o XDG)."""

    return _config_base() / APP_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _read_env_file(path: Path) -> dict[str, str]:
    """Lee `KEY=value` ignorando comentarios; las comillas externas se descartan."""

    if not path.exists():
        return {}
    data: dict[str, str] = {}
    for line in path.read_text(encoding="utf-8").splitlines():
        key, sep, value = line.strip().partition("=")
        key = key.strip()
        if not sep or not key or key.startswith("#"):
            continue
        data[key] = value.strip().strip("\"'")
    return data


def write_user_env_vars(values: dict[str, str]) -> Path:
    """Fusiona `values` en el .env de usuario y lo reescribe ordenado por clave.

    Los valores `None` no pisan lo que ya hubiera guardado.
    """

    env_path = get_user_env_file()
    merged = _read_env_file(env_path)
    merged.update({key: value for key, value in values.items() if value is not None})

    env_path.parent.mkdir(parents=True, exist_ok=True)
    body = "".join(f"{key}={merged[key]}\n" for key in sorted(merged))
    env_path.write_text(f"# {APP_NAME} user config (.env)\n{body}", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    El motor de color no lee settings: umbral y límite de matching son
    política del caller y la CLI los toma de aquí.
    """

    model_config = SettingsConfigDict(
        env_prefix="PALETTE_LENS_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    match_threshold: float = Field(
        default=60.0,
        ge=0,
        le=100,
        description="Score mínimo (exclusivo) para considerar un swatch como match.",
    )
    match_limit: int = Field(
        default=12,
        ge=1,
        le=500,
        description="Máximo de matches devueltos por `match`.",
    )
    ratio_precision: int = Field(
        default=2,
        ge=0,
        le=6,
        description="Decimales al mostrar ratios (4.50:1).",
    )
    palette_size: int = Field(
        default=5,
        ge=1,
        le=32,
        description="Número de colores por defecto en paletas generadas.",
    )
    reports_dir: Path = Field(
        default=Path("reports"),
        description="Carpeta por defecto para exportaciones JSON/HTML/PDF.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging (DEBUG, INFO, WARNING, ERROR).",
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value!r}")
        return level
