"""Packing engine tuning, single source for all scores, bounds and boosts."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ConditionScores:
    """Base score contributed by a matched condition, by condition type."""
    climate: float = 0.9
    activity: float = 0.8
    transport: float = 0.7
    accommodation: float = 0.6
    duration: float = 0.5
    season: float = 0.5
    group_size: float = 0.4
    temperature: float = 0.9
    business_focused: float = 0.9   # businessTrip matched on a business trip
    business_casual: float = 0.3    # businessTrip matched on a leisure trip


@dataclass(frozen=True)
class ScoringThresholds:
    """Inclusion and auto-selection cut-offs for the rule engine."""
    must_have_floor: float = 0.7     # essential/critical score floor
    min_confidence: float = 0.3      # below this non-essentials are rejected
    auto_select_above: float = 0.6
    numeric_tolerance: float = 0.1   # for `equals` on numeric conditions


@dataclass(frozen=True)
class QuantityBounds:
    """Global bounds and the conditional-formula heuristics."""
    global_min: int = 1
    global_max: int = 20
    daily_wear_cap: int = 7          # underwear/socks
    tops_min: int = 2
    tops_max: int = 5
    bottoms_long_trip: int = 3
    bottoms_default: int = 2
    busy_party_size: int = 2         # electronics double above this


@dataclass(frozen=True)
class TripShape:
    """Duration cut-offs for the derived trip flags."""
    short_trip_max_days: int = 3
    long_trip_min_days: int = 14


@dataclass(frozen=True)
class CardinalityCap:
    """Inputs of the max-items formula used by the cardinality cap."""
    base: int = 30
    long_trip_bonus: int = 15
    short_trip_penalty: int = 10
    outdoor_bonus: int = 10
    business_bonus: int = 8
    per_extra_person: int = 5
    floor: int = 15
    ceiling: int = 80


@dataclass(frozen=True)
class BundlingBoosts:
    """Confidence adjustments applied by contextual bundling."""
    short_trip_prune_at: float = 0.4
    charger_boost: float = 0.3
    activity_boost: float = 0.2
    climate_clothing_boost: float = 0.3
    climate_clothing_min_count: int = 3


CONDITION_SCORES = ConditionScores()
SCORING = ScoringThresholds()
QUANTITY = QuantityBounds()
TRIP_SHAPE = TripShape()
CARDINALITY = CardinalityCap()
BUNDLING = BundlingBoosts()
