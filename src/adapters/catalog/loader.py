"""Carga de catálogos y pares desde JSON.

Errores de I/O, JSON o validación se propagan tal cual; la CLI decide cómo
presentarlos.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from adapters.catalog.models import CatalogFile, PairsFile

logger = logging.getLogger(__name__)


def load_catalog(path: Path) -> CatalogFile:
    raw = path.read_text(encoding="utf-8")
    data = json.loads(raw)
    # Se acepta también una lista plana de entradas.
    if isinstance(data, list):
        data = {"entries": data}
    catalog = CatalogFile.model_validate(data)
    logger.debug("Loaded %d catalog entries from %s", len(catalog.entries), path)
    return catalog


def load_pairs(path: Path) -> PairsFile:
    raw = path.read_text(encoding="utf-8")
    data = json.loads(raw)
    if isinstance(data, list):
        data = {"pairs": data}
    pairs = PairsFile.model_validate(data)
    logger.debug("Loaded %d contrast pairs from %s", len(pairs.pairs), path)
    return pairs
