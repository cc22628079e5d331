"""Condition evaluation against a derived trip context.

Every :class:`ConditionType` maps to exactly one evaluator in
``_EVALUATORS``; the table is checked at import time so a new condition type
cannot ship without an evaluator.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Sequence

from smart_packing.core.schemas import (
    Condition,
    ConditionOperator,
    ConditionType,
    ReasonType,
    RecommendationReason,
    TripContext,
)
from smart_packing.core.thresholds import CONDITION_SCORES, SCORING

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ConditionOutcome:
    """Result of evaluating a single condition."""

    matches: bool
    score: float = 0.0
    reason_type: ReasonType = ReasonType.ESSENTIAL
    description: str = ""

    def reason(self, weight: float) -> Optional[RecommendationReason]:
        if not self.matches:
            return None
        return RecommendationReason(type=self.reason_type, description=self.description, weight=weight)


NO_MATCH = ConditionOutcome(matches=False)


def _to_float(raw: str) -> Optional[float]:
    try:
        return float(raw)
    except (TypeError, ValueError):
        return None


def evaluate_numeric(value: float, values: Sequence[str], operator: ConditionOperator) -> bool:
    """Compare ``value`` with the condition's numeric operand(s)."""
    if not values:
        return False
    target = _to_float(values[0])
    if target is None:
        return False

    if operator is ConditionOperator.EQUALS:
        return abs(value - target) < SCORING.numeric_tolerance
    if operator is ConditionOperator.GREATER_THAN:
        return value > target
    if operator is ConditionOperator.LESS_THAN:
        return value < target
    if operator is ConditionOperator.BETWEEN:
        if len(values) != 2:
            return False
        upper = _to_float(values[1])
        if upper is None:
            return False
        return target <= value <= upper
    # contains / not carry no numeric meaning
    return False


def _transport(condition: Condition, context: TripContext) -> ConditionOutcome:
    trip_values = context.transport_values
    if not any(value in trip_values for value in condition.values):
        return NO_MATCH
    return ConditionOutcome(
        matches=True,
        score=CONDITION_SCORES.transport,
        reason_type=ReasonType.TRANSPORT,
        description=f"Needed for {', '.join(condition.values)} travel",
    )


def _accommodation(condition: Condition, context: TripContext) -> ConditionOutcome:
    accommodation = context.trip.accommodation.value
    if accommodation not in condition.values:
        return NO_MATCH
    return ConditionOutcome(
        matches=True,
        score=CONDITION_SCORES.accommodation,
        reason_type=ReasonType.ACCOMMODATION,
        description=f"Suitable for {accommodation} stay",
    )


def _activity(condition: Condition, context: TripContext) -> ConditionOutcome:
    trip_values = context.activity_values
    if not any(value in trip_values for value in condition.values):
        return NO_MATCH
    return ConditionOutcome(
        matches=True,
        score=CONDITION_SCORES.activity,
        reason_type=ReasonType.ACTIVITY,
        description="Essential for planned activities",
    )


def _climate(condition: Condition, context: TripContext) -> ConditionOutcome:
    climate = context.trip.climate
    if climate is None or climate.value not in condition.values:
        return NO_MATCH
    return ConditionOutcome(
        matches=True,
        score=CONDITION_SCORES.climate,
        reason_type=ReasonType.WEATHER,
        description=f"Perfect for {climate.value} weather",
    )


def _duration(condition: Condition, context: TripContext) -> ConditionOutcome:
    days = context.trip_duration
    if not evaluate_numeric(float(days), condition.values, condition.operator):
        return NO_MATCH
    return ConditionOutcome(
        matches=True,
        score=CONDITION_SCORES.duration,
        reason_type=ReasonType.DURATION,
        description=f"Appropriate for {days}-day trip",
    )


def _group_size(condition: Condition, context: TripContext) -> ConditionOutcome:
    people = context.number_of_people
    if not evaluate_numeric(float(people), condition.values, condition.operator):
        return NO_MATCH
    return ConditionOutcome(
        matches=True,
        score=CONDITION_SCORES.group_size,
        reason_type=ReasonType.ESSENTIAL,
        description=f"Needed for group of {people}",
    )


def _business_trip(condition: Condition, context: TripContext) -> ConditionOutcome:
    if not condition.values:
        return NO_MATCH
    wants_business = condition.values[0].strip().lower() == "true"
    if context.is_business_focused != wants_business:
        return NO_MATCH
    if context.is_business_focused:
        return ConditionOutcome(
            matches=True,
            score=CONDITION_SCORES.business_focused,
            description="Essential for business",
        )
    return ConditionOutcome(
        matches=True,
        score=CONDITION_SCORES.business_casual,
        description="Casual trip appropriate",
    )


def _season(condition: Condition, context: TripContext) -> ConditionOutcome:
    season = context.season_at_destination.value
    if season not in condition.values:
        return NO_MATCH
    return ConditionOutcome(
        matches=True,
        score=CONDITION_SCORES.season,
        reason_type=ReasonType.WEATHER,
        description=f"Perfect for {season} season",
    )


def _temperature(condition: Condition, context: TripContext) -> ConditionOutcome:
    if context.weather is None:
        return NO_MATCH
    bucket = context.weather.temperature_range.value
    if bucket not in condition.values:
        return NO_MATCH
    return ConditionOutcome(
        matches=True,
        score=CONDITION_SCORES.temperature,
        reason_type=ReasonType.WEATHER,
        description=f"Essential for {bucket} temperatures",
    )


def _unsupported(condition: Condition, context: TripContext) -> ConditionOutcome:
    logger.debug("Condition type %s is not evaluated; treating as no match", condition.type.value)
    return NO_MATCH


_EVALUATORS: Dict[ConditionType, Callable[[Condition, TripContext], ConditionOutcome]] = {
    ConditionType.TRANSPORT: _transport,
    ConditionType.ACCOMMODATION: _accommodation,
    ConditionType.ACTIVITY: _activity,
    ConditionType.CLIMATE: _climate,
    ConditionType.DURATION: _duration,
    ConditionType.GROUP_SIZE: _group_size,
    ConditionType.BUSINESS_TRIP: _business_trip,
    ConditionType.SEASON: _season,
    ConditionType.TEMPERATURE: _temperature,
    ConditionType.TIME_OF_DAY: _unsupported,
    ConditionType.DESTINATION: _unsupported,
}

_missing = set(ConditionType) - set(_EVALUATORS)
if _missing:
    raise RuntimeError(f"No evaluator registered for condition types: {sorted(t.value for t in _missing)}")


def evaluate_condition(condition: Condition, context: TripContext) -> ConditionOutcome:
    """Evaluate ``condition`` against ``context``."""
    return _EVALUATORS[condition.type](condition, context)


def condition_matches(condition: Condition, context: TripContext) -> bool:
    return evaluate_condition(condition, context).matches
