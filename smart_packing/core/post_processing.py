"""Post-processing pipeline refining the raw recommendation set.

Each stage is a plain callable ``(recommendations, context) -> recommendations``
returning a new list. Recommendations are immutable, so stages never alias or
mutate records owned by an earlier stage.
"""
from __future__ import annotations

import logging
from typing import Callable, List, Sequence, Set

from smart_packing.core.schemas import (
    ItemCategory,
    ItemPriority,
    Recommendation,
    TripContext,
)
from smart_packing.core.thresholds import BUNDLING, CARDINALITY

logger = logging.getLogger(__name__)

Stage = Callable[[List[Recommendation], TripContext], List[Recommendation]]


def calculate_max_items(context: TripContext) -> int:
    """Upper bound on the list size for the given trip."""
    max_items = CARDINALITY.base
    if context.is_long_trip:
        max_items += CARDINALITY.long_trip_bonus
    if context.is_short_trip:
        max_items -= CARDINALITY.short_trip_penalty
    if context.has_outdoor_activities:
        max_items += CARDINALITY.outdoor_bonus
    if context.is_business_focused:
        max_items += CARDINALITY.business_bonus
    max_items += CARDINALITY.per_extra_person * (context.number_of_people - 1)
    return max(CARDINALITY.floor, min(CARDINALITY.ceiling, max_items))


def prune_short_trip(recommendations: List[Recommendation], context: TripContext) -> List[Recommendation]:
    """Drop weak recommendations on short trips, critical items excepted."""
    if not context.is_short_trip:
        return list(recommendations)
    return [
        rec
        for rec in recommendations
        if rec.confidence > BUNDLING.short_trip_prune_at or rec.priority is ItemPriority.CRITICAL
    ]


def cap_cardinality(recommendations: List[Recommendation], context: TripContext) -> List[Recommendation]:
    """Keep every must-have item, then fill up with the most confident rest."""
    max_items = calculate_max_items(context)
    if len(recommendations) <= max_items:
        return list(recommendations)

    must_have = [rec for rec in recommendations if rec.entry.is_must_have]
    others = sorted(
        (rec for rec in recommendations if not rec.entry.is_must_have),
        key=lambda rec: -rec.confidence,
    )
    capacity = max(0, max_items - len(must_have))
    logger.info(
        "Capping %s recommendations to %s (%s must-have items)",
        len(recommendations),
        max_items,
        len(must_have),
    )
    return must_have + others[:capacity]


def remove_redundant_alternatives(
    recommendations: List[Recommendation], context: TripContext
) -> List[Recommendation]:
    """Keep the most confident item of every alternative group."""
    covered: Set[str] = set()
    kept: List[Recommendation] = []
    for rec in sorted(recommendations, key=lambda rec: -rec.confidence):
        entry = rec.entry
        if entry.id in covered or any(alternative in covered for alternative in entry.alternatives):
            logger.debug("Skipping %s, an alternative is already included", entry.id)
            continue
        kept.append(rec)
        covered.add(entry.id)
        covered.update(entry.alternatives)
    return kept


def bundle_chargers(recommendations: List[Recommendation], context: TripContext) -> List[Recommendation]:
    needs_charger = any(rec.entry.has_tag("needs_charger") for rec in recommendations)
    has_charger = any(rec.entry.has_tag("charger") for rec in recommendations)
    if not (needs_charger and has_charger):
        return list(recommendations)
    return [
        rec.with_confidence(rec.confidence + BUNDLING.charger_boost) if rec.entry.has_tag("charger") else rec
        for rec in recommendations
    ]


def bundle_activity_gear(recommendations: List[Recommendation], context: TripContext) -> List[Recommendation]:
    activities = context.activity_values
    if not activities:
        return list(recommendations)
    return [
        rec.with_confidence(rec.confidence + BUNDLING.activity_boost)
        if activities.intersection(rec.entry.tags)
        else rec
        for rec in recommendations
    ]


def bundle_weather_clothing(recommendations: List[Recommendation], context: TripContext) -> List[Recommendation]:
    climate = context.trip.climate
    if climate is None:
        return list(recommendations)

    def fits_climate(rec: Recommendation) -> bool:
        return rec.entry.category is ItemCategory.CLOTHING and rec.entry.has_tag(climate.value)

    if sum(1 for rec in recommendations if fits_climate(rec)) >= BUNDLING.climate_clothing_min_count:
        return list(recommendations)
    return [
        rec.with_confidence(rec.confidence + BUNDLING.climate_clothing_boost) if fits_climate(rec) else rec
        for rec in recommendations
    ]


def apply_bundling(recommendations: List[Recommendation], context: TripContext) -> List[Recommendation]:
    """Confidence-only adjustments coupling related items; never removes any."""
    bundled = bundle_chargers(recommendations, context)
    bundled = bundle_activity_gear(bundled, context)
    return bundle_weather_clothing(bundled, context)


class PostProcessingPipeline:
    """Ordered filter/bundle stages applied to the engine output."""

    def __init__(self, stages: Sequence[Stage]):
        self.stages = tuple(stages)

    def run(self, recommendations: Sequence[Recommendation], context: TripContext) -> List[Recommendation]:
        current = list(recommendations)
        for stage in self.stages:
            before = len(current)
            current = stage(current, context)
            logger.debug("Stage %s: %s -> %s recommendations", stage.__name__, before, len(current))
        return current


def create_default_pipeline() -> PostProcessingPipeline:
    """Short-trip pruning, cardinality cap, deduplication, then bundling."""
    return PostProcessingPipeline(
        [
            prune_short_trip,
            cap_cardinality,
            remove_redundant_alternatives,
            apply_bundling,
        ]
    )
