"""Catalog loading with an embedded fallback that never fails the caller."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Union

from pydantic import TypeAdapter, ValidationError

from smart_packing.catalog.fallback import create_fallback_entries
from smart_packing.catalog.registry import CatalogError, ItemCatalog
from smart_packing.core.schemas import CatalogEntry

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent.parent / "data" / "smart_items.json"

_ENTRIES_ADAPTER = TypeAdapter(List[CatalogEntry])


def read_catalog_entries(path: Union[str, Path]) -> List[CatalogEntry]:
    """Parse and validate a JSON array of catalog entries.

    Raises:
        OSError: the file cannot be read
        ValidationError: the content is not valid JSON or not a valid entry list
    """
    raw = Path(path).read_bytes()
    return _ENTRIES_ADAPTER.validate_json(raw)


def load_fallback_catalog() -> ItemCatalog:
    logger.warning("Loading fallback packing items")
    return ItemCatalog(create_fallback_entries())


def load_catalog(path: Optional[Union[str, Path]] = None) -> ItemCatalog:
    """Load the catalog dataset, substituting the embedded defaults on failure.

    Any problem with the dataset (missing file, malformed JSON, invalid
    entries, duplicate ids or an empty list) is logged and replaced by the
    fallback set; it never propagates to the caller.
    """
    source = Path(path) if path else DEFAULT_CATALOG_PATH
    try:
        entries = read_catalog_entries(source)
        if not entries:
            logger.error("Catalog dataset %s contains no entries", source)
            return load_fallback_catalog()
        catalog = ItemCatalog(entries)
    except OSError as exc:
        logger.error("Could not load catalog dataset %s: %s", source, exc)
        return load_fallback_catalog()
    except ValidationError as exc:
        logger.error("Error decoding catalog dataset %s: %s", source, exc)
        return load_fallback_catalog()
    except CatalogError as exc:
        logger.error("Inconsistent catalog dataset %s: %s", source, exc)
        return load_fallback_catalog()

    logger.info("Loaded %s smart packing items from %s", len(catalog), source.name)
    return catalog
