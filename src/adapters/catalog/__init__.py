from adapters.catalog.loader import load_catalog, load_pairs
from adapters.catalog.models import CatalogEntry, CatalogFile, PairsFile

__all__ = [
    "CatalogEntry",
    "CatalogFile",
    "PairsFile",
    "load_catalog",
    "load_pairs",
]
