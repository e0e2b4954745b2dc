"""Fixtures comunes.

- Aísla cada test del `.env` del proyecto/usuario y de variables PALETTE_LENS_*.
- Ficheros JSON de ejemplo (catálogo y pares).
"""

from __future__ import annotations

import json
import os
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for key in list(os.environ):
        if key.upper().startswith("PALETTE_LENS_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture()
def catalog_path(tmp_path: Path) -> Path:
    data = {
        "entries": [
            {"id": "btn-1", "name": "Cyan button", "color": "#00ffff"},
            {"id": "card-1", "name": "Red card", "color": "FF0000", "category": "cards"},
            {"id": "nav-1", "name": "Orange nav", "color": "#ff2b00"},
            {"id": "badge-1", "name": "Gray badge", "color": "#808080"},
        ]
    }
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.fixture()
def pairs_path(tmp_path: Path) -> Path:
    data = {
        "pairs": [
            {"foreground": "#000000", "background": "#ffffff", "label": "Body text"},
            {"foreground": "#767676", "background": "#FFFFFF", "label": "Muted text"},
            {"foreground": "#aaaaaa", "background": "#ffffff", "label": "Placeholder"},
        ]
    }
    path = tmp_path / "pairs.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path
