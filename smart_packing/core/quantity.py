"""Quantity calculation: an ordered reducer over an entry's quantity rules."""
from __future__ import annotations

from functools import reduce
from typing import Callable, Dict

from smart_packing.core.conditions import condition_matches
from smart_packing.core.schemas import (
    CatalogEntry,
    ItemCategory,
    QuantityFormula,
    QuantityRule,
    TemperatureRange,
    TripContext,
)
from smart_packing.core.thresholds import QUANTITY

_COLD_BUCKETS = frozenset({TemperatureRange.COLD, TemperatureRange.FREEZING})


def _clamp(value: int, lower: int, upper: int) -> int:
    return max(lower, min(upper, value))


def clothing_quantity(entry: CatalogEntry, context: TripContext) -> int:
    """Tag-driven heuristics for clothing items."""
    days = context.trip_duration
    if entry.has_tag("underwear", "socks"):
        return min(days + 1, QUANTITY.daily_wear_cap)
    if entry.has_tag("shirts", "tops"):
        return _clamp(days // 2, QUANTITY.tops_min, QUANTITY.tops_max)
    if entry.has_tag("pants", "bottoms"):
        return QUANTITY.bottoms_long_trip if context.is_long_trip else QUANTITY.bottoms_default
    if entry.has_tag("outerwear"):
        return 1
    return entry.base_quantity


def conditional_quantity(entry: CatalogEntry, context: TripContext) -> int:
    """Category-specific heuristics behind the ``conditional`` formula."""
    if entry.category is ItemCategory.CLOTHING:
        return clothing_quantity(entry, context)
    if entry.category is ItemCategory.TOILETRIES:
        return 2 if context.is_long_trip else 1
    if entry.category is ItemCategory.ELECTRONICS:
        return 2 if context.number_of_people > QUANTITY.busy_party_size else 1
    if entry.category is ItemCategory.DOCUMENTS:
        return 1
    return entry.base_quantity


def weather_dependent_quantity(entry: CatalogEntry, context: TripContext) -> int:
    """Base quantity, plus one when the item fits the weather extreme."""
    base = entry.base_quantity
    if context.weather is None:
        return base
    bucket = context.weather.temperature_range
    if bucket in _COLD_BUCKETS and entry.has_tag("cold", "winter"):
        return base + 1
    if bucket is TemperatureRange.HOT and entry.has_tag("sun", "cooling"):
        return base + 1
    return base


_FORMULAS: Dict[QuantityFormula, Callable[[CatalogEntry, TripContext], int]] = {
    QuantityFormula.FIXED: lambda entry, context: entry.base_quantity,
    QuantityFormula.PER_DAY: lambda entry, context: entry.base_quantity * context.trip_duration,
    QuantityFormula.PER_PERSON: lambda entry, context: entry.base_quantity * context.number_of_people,
    QuantityFormula.PER_DAY_PER_PERSON: lambda entry, context: (
        entry.base_quantity * context.trip_duration * context.number_of_people
    ),
    QuantityFormula.CONDITIONAL: conditional_quantity,
    QuantityFormula.WEATHER_DEPENDENT: weather_dependent_quantity,
}

_missing = set(QuantityFormula) - set(_FORMULAS)
if _missing:
    raise RuntimeError(f"No formula registered for: {sorted(f.value for f in _missing)}")


def apply_rule(quantity: int, rule: QuantityRule, entry: CatalogEntry, context: TripContext) -> int:
    """Reducer step: a guarded rule whose condition fails leaves ``quantity`` as is."""
    if rule.condition is not None and not condition_matches(rule.condition, context):
        return quantity
    computed = _FORMULAS[rule.formula](entry, context)
    return _clamp(computed, rule.min_quantity, rule.max_quantity)


def calculate_quantity(entry: CatalogEntry, context: TripContext) -> int:
    """Recommended unit count for ``entry``; the last applicable rule wins."""
    quantity = reduce(
        lambda current, rule: apply_rule(current, rule, entry, context),
        entry.quantity_rules,
        entry.base_quantity,
    )
    return _clamp(quantity, QUANTITY.global_min, QUANTITY.global_max)
