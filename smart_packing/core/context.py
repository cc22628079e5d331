"""Context Builder: derives a read-only TripContext from a trip snapshot."""
from __future__ import annotations

from datetime import date
from typing import Dict, List, Optional

from smart_packing.core.schemas import (
    Activity,
    Climate,
    Seasonality,
    TemperatureRange,
    TripContext,
    TripSnapshot,
    WeatherContext,
)
from smart_packing.core.thresholds import TRIP_SHAPE

_OUTDOOR_ACTIVITIES = frozenset({Activity.HIKING, Activity.BEACH, Activity.SPORTS, Activity.SKIING})
_EQUIPMENT_ACTIVITIES = frozenset({Activity.SKIING, Activity.HIKING, Activity.SPORTS, Activity.SWIMMING})

_SEASON_BY_MONTH: Dict[int, Seasonality] = {
    12: Seasonality.WINTER, 1: Seasonality.WINTER, 2: Seasonality.WINTER,
    3: Seasonality.SPRING, 4: Seasonality.SPRING, 5: Seasonality.SPRING,
    6: Seasonality.SUMMER, 7: Seasonality.SUMMER, 8: Seasonality.SUMMER,
    9: Seasonality.AUTUMN, 10: Seasonality.AUTUMN, 11: Seasonality.AUTUMN,
}

_TEMPERATURE_BY_CLIMATE: Dict[Climate, TemperatureRange] = {
    Climate.HOT: TemperatureRange.HOT,
    Climate.WARM: TemperatureRange.WARM,
    Climate.MODERATE: TemperatureRange.MILD,
    Climate.COOL: TemperatureRange.COOL,
    Climate.COLD: TemperatureRange.COLD,
}

_FRIDAY = 4


def season_for(day: date) -> Seasonality:
    """Return the meteorological season of ``day``'s month."""
    return _SEASON_BY_MONTH[day.month]


def temperature_range_for(climate: Climate) -> TemperatureRange:
    return _TEMPERATURE_BY_CLIMATE[climate]


def trip_duration(start: date, end: date) -> int:
    """Whole days between ``start`` and ``end``; anything below 1 becomes 1."""
    return max(1, (end - start).days)


def _weather_context(climate: Optional[Climate], season: Seasonality) -> Optional[WeatherContext]:
    if climate is None:
        return None
    return WeatherContext(temperature_range=temperature_range_for(climate), season=season)


def build_trip_context(trip: TripSnapshot) -> TripContext:
    """Map raw trip attributes to the derived context used by the rule engine.

    Pure function: no I/O and no side effects. Out-of-range inputs are
    normalised here (duration and party size never drop below 1) so the rule
    engine can rely on clamping instead of re-validating.
    """

    duration = trip_duration(trip.start_date, trip.end_date)
    season = season_for(trip.start_date)
    activities = trip.activities
    business = trip.is_business_trip or Activity.BUSINESS in activities
    short_trip = duration <= TRIP_SHAPE.short_trip_max_days

    return TripContext(
        trip=trip,
        trip_duration=duration,
        number_of_people=max(1, trip.number_of_people),
        is_weekend=short_trip and trip.start_date.weekday() == _FRIDAY,
        is_international=bool(trip.destination.strip()),
        is_short_trip=short_trip,
        is_long_trip=duration >= TRIP_SHAPE.long_trip_min_days,
        season_at_destination=season,
        is_business_focused=business,
        has_outdoor_activities=bool(activities & _OUTDOOR_ACTIVITIES),
        requires_formal_wear=business,
        requires_special_equipment=bool(activities & _EQUIPMENT_ACTIVITIES),
        weather=_weather_context(trip.climate, season),
    )


def describe_trip_type(context: TripContext) -> str:
    """Human readable trip type used in the trip analysis log."""
    types: List[str] = []
    if context.is_short_trip:
        types.append("Short")
    if context.is_long_trip:
        types.append("Long")
    if context.is_weekend:
        types.append("Weekend")
    if context.is_international:
        types.append("International")
    if context.has_outdoor_activities:
        types.append("Outdoor")
    if context.requires_formal_wear:
        types.append("Formal")
    return ", ".join(types) if types else "Standard"
