"""Tests for the post-processing pipeline stages."""
from __future__ import annotations

from typing import List

import pytest

from conftest import make_context, make_entry
from smart_packing.core.post_processing import (
    PostProcessingPipeline,
    apply_bundling,
    bundle_activity_gear,
    bundle_chargers,
    bundle_weather_clothing,
    calculate_max_items,
    cap_cardinality,
    create_default_pipeline,
    prune_short_trip,
    remove_redundant_alternatives,
)
from smart_packing.core.schemas import (
    Activity,
    Climate,
    ItemCategory,
    ItemPriority,
    Recommendation,
)


def _rec(item_id: str, confidence: float, **entry_fields) -> Recommendation:
    return Recommendation(
        entry=make_entry(item_id, **entry_fields),
        recommended_quantity=1,
        confidence=confidence,
    )


def _ids(recommendations: List[Recommendation]) -> List[str]:
    return [rec.item_id for rec in recommendations]


class TestMaxItems:
    """Cardinality limit derived from the trip context."""

    def test_standard_trip(self):
        assert calculate_max_items(make_context(days=7)) == 30

    def test_adjustments_add_up(self):
        context = make_context(
            days=14,
            activities={Activity.HIKING, Activity.BUSINESS},
            number_of_people=3,
        )
        assert calculate_max_items(context) == 30 + 15 + 10 + 8 + 10

    def test_short_trip_penalty(self):
        assert calculate_max_items(make_context(days=2)) == 20

    def test_ceiling(self):
        context = make_context(days=20, activities={Activity.SKIING}, number_of_people=12)
        assert calculate_max_items(context) == 80


class TestShortTripPruning:
    def test_weak_items_dropped_on_short_trips(self):
        recs = [
            _rec("strong", 0.8),
            _rec("weak", 0.4),
            _rec("weak_critical", 0.4, priority=ItemPriority.CRITICAL),
        ]
        assert _ids(prune_short_trip(recs, make_context(days=2))) == ["strong", "weak_critical"]

    def test_longer_trips_untouched(self):
        recs = [_rec("weak", 0.35)]
        assert _ids(prune_short_trip(recs, make_context(days=5))) == ["weak"]


class TestCardinalityCap:
    def test_under_limit_is_unchanged(self):
        recs = [_rec(f"item{i}", 0.5) for i in range(5)]
        assert _ids(cap_cardinality(recs, make_context())) == _ids(recs)

    def test_keeps_must_haves_then_most_confident(self):
        """Test that every must-have survives and the rest are ranked by confidence."""
        must_haves = [_rec(f"must{i}", 0.7, is_essential=True) for i in range(10)]
        others = [_rec(f"other{i}", 0.31 + i * 0.01) for i in range(30)]

        capped = cap_cardinality(must_haves + others, make_context(days=7))

        assert len(capped) == 30
        assert _ids(capped)[:10] == _ids(must_haves)
        assert _ids(capped)[10:] == [f"other{i}" for i in range(29, 9, -1)]

    def test_capacity_never_negative(self):
        """Test that must-haves alone may exceed the limit."""
        must_haves = [_rec(f"crit{i}", 1.0, priority=ItemPriority.CRITICAL) for i in range(35)]
        others = [_rec("extra", 0.9)]

        capped = cap_cardinality(must_haves + others, make_context(days=7))

        assert len(capped) == 35
        assert "extra" not in _ids(capped)


class TestAlternativeDeduplication:
    def test_keeps_most_confident_of_group(self):
        recs = [
            _rec("suit", 0.8, alternatives=("dress",)),
            _rec("dress", 0.9, alternatives=("suit",)),
            _rec("socks", 0.7),
        ]
        assert _ids(remove_redundant_alternatives(recs, make_context())) == ["dress", "socks"]

    def test_one_sided_alternative(self):
        """Test that an entry listed as someone else's alternative is skipped."""
        recs = [_rec("boots", 0.9, alternatives=("sneakers",)), _rec("sneakers", 0.6)]
        assert _ids(remove_redundant_alternatives(recs, make_context())) == ["boots"]

    def test_stable_on_equal_confidence(self):
        recs = [_rec("a", 0.8, alternatives=("b",)), _rec("b", 0.8, alternatives=("a",))]
        assert _ids(remove_redundant_alternatives(recs, make_context())) == ["a"]


class TestBundling:
    """Confidence-only adjustments."""

    def test_charger_boost_needs_both_sides(self):
        charger = _rec("charger", 0.5, tags=("charger",))
        camera = _rec("camera", 0.5, tags=("needs_charger",))

        boosted = bundle_chargers([charger, camera], make_context())
        alone = bundle_chargers([charger], make_context())

        assert boosted[0].confidence == pytest.approx(0.8)
        assert boosted[1].confidence == pytest.approx(0.5)
        assert alone[0].confidence == pytest.approx(0.5)

    def test_activity_boost(self):
        recs = [_rec("poles", 0.5, tags=("hiking",)), _rec("towel", 0.5, tags=("beach",))]
        boosted = bundle_activity_gear(recs, make_context(activities={Activity.HIKING}))
        assert [rec.confidence for rec in boosted] == pytest.approx([0.7, 0.5])

    def test_weather_clothing_boost_when_few(self):
        recs = [
            _rec("jacket", 0.5, category=ItemCategory.CLOTHING, tags=("cold",)),
            _rec("warmers", 0.5, category=ItemCategory.OTHER, tags=("cold",)),
        ]
        boosted = bundle_weather_clothing(recs, make_context(climate=Climate.COLD))
        assert [rec.confidence for rec in boosted] == pytest.approx([0.8, 0.5])

    def test_weather_clothing_untouched_when_plenty(self):
        recs = [_rec(f"layer{i}", 0.5, category=ItemCategory.CLOTHING, tags=("cold",)) for i in range(3)]
        boosted = bundle_weather_clothing(recs, make_context(climate=Climate.COLD))
        assert all(rec.confidence == 0.5 for rec in boosted)

    def test_boosts_are_clamped_and_never_remove(self):
        recs = [
            _rec("charger", 0.95, tags=("charger", "hiking")),
            _rec("camera", 0.2, tags=("needs_charger",)),
        ]
        bundled = apply_bundling(recs, make_context(activities={Activity.HIKING}))

        assert _ids(bundled) == ["charger", "camera"]
        assert bundled[0].confidence == 1.0

    def test_inputs_are_not_mutated(self):
        rec = _rec("charger", 0.5, tags=("charger", "hiking"))
        apply_bundling([rec, _rec("lamp", 0.5, tags=("needs_charger",))], make_context(activities={Activity.HIKING}))
        assert rec.confidence == 0.5


def test_pipeline_runs_stages_in_order():
    calls = []

    def first(recs, context):
        calls.append("first")
        return recs[:1]

    def second(recs, context):
        calls.append("second")
        return recs + recs

    pipeline = PostProcessingPipeline([first, second])
    result = pipeline.run([_rec("a", 0.5), _rec("b", 0.5)], make_context())

    assert calls == ["first", "second"]
    assert _ids(result) == ["a", "a"]


def test_default_pipeline_stage_order():
    stages = create_default_pipeline().stages
    assert [stage.__name__ for stage in stages] == [
        "prune_short_trip",
        "cap_cardinality",
        "remove_redundant_alternatives",
        "apply_bundling",
    ]
