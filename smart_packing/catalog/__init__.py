"""Item catalog for the packing engine.

This package holds the read-only catalog of packable items and the helpers that
build it:

- ItemCatalog: indexed, immutable collection (by id, category and tag)
- load_catalog: reads the bundled JSON dataset, falling back to the embedded
  defaults when the dataset cannot be used
- create_fallback_entries: the embedded default entries

Example Usage:
    >>> from smart_packing.catalog import load_catalog
    >>>
    >>> catalog = load_catalog()
    >>> passport = catalog.get("passport")
"""

from smart_packing.catalog.fallback import create_fallback_entries
from smart_packing.catalog.loader import (
    DEFAULT_CATALOG_PATH,
    load_catalog,
    load_fallback_catalog,
    read_catalog_entries,
)
from smart_packing.catalog.registry import CatalogError, ItemCatalog

__all__ = [
    "CatalogError",
    "DEFAULT_CATALOG_PATH",
    "ItemCatalog",
    "create_fallback_entries",
    "load_catalog",
    "load_fallback_catalog",
    "read_catalog_entries",
]
