"""Pytest configuration for the smart packing project."""
from __future__ import annotations

import sys
from datetime import date, timedelta
from pathlib import Path
from typing import Any, Callable, Iterable

import pytest

# Ensure the project root is on sys.path so that import smart_packing works under pytest.
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from smart_packing.catalog import ItemCatalog, load_catalog  # noqa: E402
from smart_packing.core.context import build_trip_context  # noqa: E402
from smart_packing.core.schemas import (  # noqa: E402
    CatalogEntry,
    Condition,
    ConditionType,
    ItemCategory,
    ItemPriority,
    QuantityRule,
    TripContext,
    TripSnapshot,
)

# A Monday, so short trips built from it are never weekend trips.
DEFAULT_START = date(2025, 6, 2)


def make_trip(days: int = 5, start: date = DEFAULT_START, **overrides: Any) -> TripSnapshot:
    """Build a trip snapshot lasting ``days`` days."""

    fields = {
        "name": "Test trip",
        "destination": "",
        "start_date": start,
        "end_date": start + timedelta(days=days),
    }
    fields.update(overrides)
    return TripSnapshot(**fields)


def make_context(days: int = 5, **overrides: Any) -> TripContext:
    return build_trip_context(make_trip(days, **overrides))


def make_entry(
    item_id: str,
    *,
    category: ItemCategory = ItemCategory.OTHER,
    priority: ItemPriority = ItemPriority.RECOMMENDED,
    conditions: Iterable[Condition] = (),
    quantity_rules: Iterable[QuantityRule] = (),
    **overrides: Any,
) -> CatalogEntry:
    """Build a catalog entry with sensible defaults for tests."""

    fields = {
        "id": item_id,
        "name_key": f"item_{item_id}",
        "category": category,
        "priority": priority,
        "conditions": tuple(conditions),
        "quantity_rules": tuple(quantity_rules),
    }
    fields.update(overrides)
    return CatalogEntry(**fields)


def always(weight: float = 1.0) -> Condition:
    """Condition matching every trip (duration > 0)."""

    return Condition(type=ConditionType.DURATION, values=("0",), operator="greaterThan", weight=weight)


@pytest.fixture(scope="session")
def bundled_catalog() -> ItemCatalog:
    """The catalog shipped in smart_packing/data."""

    return load_catalog()


@pytest.fixture
def trip_factory() -> Callable[..., TripSnapshot]:
    return make_trip


@pytest.fixture
def context_factory() -> Callable[..., TripContext]:
    return make_context


@pytest.fixture
def entry_factory() -> Callable[..., CatalogEntry]:
    return make_entry
