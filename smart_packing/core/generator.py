"""Packing-list generation: context -> rule engine -> post-processing -> items.

``PackingListGenerator`` wires the pipeline together. Every collaborator is
injected (catalog, rule engine, post-processing pipeline and name resolver) so
tests can run against fixture catalogs without hidden global state.

Each call to :meth:`PackingListGenerator.generate` is a full, pure run from a
trip snapshot to an ordered item list; nothing is cached between calls.
"""
from __future__ import annotations

import logging
from collections import Counter
from typing import List, Optional, Sequence

from smart_packing.catalog import ItemCatalog, load_catalog
from smart_packing.core.config import PackingSettings
from smart_packing.core.context import build_trip_context, describe_trip_type
from smart_packing.core.localization import Localizer, NameResolver
from smart_packing.core.output import to_pack_items
from smart_packing.core.post_processing import (
    PostProcessingPipeline,
    calculate_max_items,
    create_default_pipeline,
)
from smart_packing.core.rule_engine import RuleEngine
from smart_packing.core.schemas import (
    GenerationStats,
    ItemPriority,
    PackItem,
    PackingListResult,
    Recommendation,
    TripContext,
    TripSnapshot,
)

logger = logging.getLogger(__name__)


def summarize(recommendations: Sequence[Recommendation], context: TripContext) -> GenerationStats:
    """Counts per priority tier, average confidence and auto-selected items."""
    counts = Counter(rec.priority for rec in recommendations)
    total = len(recommendations)
    average = sum(rec.confidence for rec in recommendations) / total if total else 0.0
    return GenerationStats(
        total_recommendations=total,
        by_priority={priority: counts[priority] for priority in ItemPriority if counts[priority]},
        average_confidence=min(1.0, average),
        auto_selected=sum(1 for rec in recommendations if rec.is_auto_selected),
        max_items=calculate_max_items(context),
    )


class PackingListGenerator:
    """Creates ranked, deduplicated, quantity-assigned packing lists."""

    def __init__(
        self,
        catalog: ItemCatalog,
        *,
        rule_engine: Optional[RuleEngine] = None,
        pipeline: Optional[PostProcessingPipeline] = None,
        resolve_name: Optional[NameResolver] = None,
        settings: Optional[PackingSettings] = None,
    ) -> None:
        self.settings = settings or PackingSettings()
        self.catalog = catalog
        self.rule_engine = rule_engine or RuleEngine()
        self.pipeline = pipeline or create_default_pipeline()
        self.resolve_name = resolve_name or Localizer(self.settings.locale)

    def generate(self, trip: TripSnapshot) -> List[PackItem]:
        """Return the ordered packing list for ``trip``."""
        return self.generate_report(trip).items

    def generate_report(self, trip: TripSnapshot) -> PackingListResult:
        """Run the full pipeline and keep the intermediate context and stats."""
        context = build_trip_context(trip)
        if self.settings.debug_logging:
            self._log_trip_analysis(context)

        raw = self.rule_engine.generate_recommendations(self.catalog.items, context)
        recommendations = self.pipeline.run(raw, context)
        items = to_pack_items(recommendations, self.resolve_name)
        stats = summarize(recommendations, context)

        logger.info(
            "Generated %s packing items for %s (%s candidates evaluated)",
            len(items),
            trip.destination or "unnamed destination",
            len(raw),
        )
        if self.settings.debug_logging:
            self._log_generation_results(stats)

        return PackingListResult(
            context=context,
            recommendations=recommendations,
            items=items,
            stats=stats,
        )

    def _log_trip_analysis(self, context: TripContext) -> None:
        trip = context.trip
        logger.debug("Smart packing analysis for: %s", trip.name or "trip")
        logger.debug("Destination: %s", trip.destination)
        logger.debug("Duration: %s days", context.trip_duration)
        logger.debug("People: %s", context.number_of_people)
        logger.debug("Climate: %s", trip.climate.value if trip.climate else "unknown")
        logger.debug("Activities: %s", ", ".join(sorted(context.activity_values)))
        logger.debug("Transport: %s", ", ".join(sorted(context.transport_values)))
        logger.debug("Accommodation: %s", trip.accommodation.value)
        logger.debug("Business: %s", "Yes" if context.is_business_focused else "No")
        logger.debug("Trip type: %s", describe_trip_type(context))
        if context.weather is not None:
            logger.debug(
                "Weather: %s, %s",
                context.weather.temperature_range.value,
                context.weather.season.value,
            )

    def _log_generation_results(self, stats: GenerationStats) -> None:
        logger.debug("Generated %s recommendations:", stats.total_recommendations)
        for priority, count in stats.by_priority.items():
            logger.debug("  %s: %s", priority.value.capitalize(), count)
        logger.debug("Average confidence: %.1f%%", stats.average_confidence * 100)
        logger.debug("Auto-selected: %s/%s", stats.auto_selected, stats.total_recommendations)


def generate_packing_list(trip: TripSnapshot, catalog: Optional[ItemCatalog] = None) -> List[PackItem]:
    """One-shot helper; loads the bundled catalog when none is given."""
    generator = PackingListGenerator(catalog if catalog is not None else load_catalog())
    return generator.generate(trip)
