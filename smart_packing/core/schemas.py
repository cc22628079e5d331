"""Pydantic data models for the smart packing recommendation engine.

This module contains every data model that flows through the packing-list
pipeline: the closed vocabularies used by the catalog, the catalog entries
themselves, the trip snapshot supplied by callers, the derived trip context,
the scored recommendations and the packable items handed back to the caller.

Key model categories:
- Enumerations: categories, priority tiers, condition types/operators,
  quantity formulas and the trip vocabularies (transport, activity, climate)
- CatalogEntry / Condition / QuantityRule: immutable catalog definitions
- TripSnapshot: raw trip attributes consumed by the Context Builder
- TripContext / WeatherContext: derived, read-only view of a trip
- Recommendation: scored candidate flowing through post-processing
- PackItem / PackingListResult: final output of a generation run
"""
from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Dict, FrozenSet, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from smart_packing.core.types import (
    BaseQuantity,
    Confidence,
    ConditionWeight,
    ItemId,
    NameKey,
    Quantity,
    QuantityBound,
)


class ItemCategory(str, Enum):
    CLOTHING = "clothing"
    DOCUMENTS = "documents"
    TOILETRIES = "toiletries"
    ELECTRONICS = "electronics"
    ACCESSORIES = "accessories"
    MEDICATION = "medication"
    OTHER = "other"


class ItemPriority(str, Enum):
    """Five-level importance ranking, each tier carrying a fixed weight."""

    CRITICAL = "critical"
    ESSENTIAL = "essential"
    RECOMMENDED = "recommended"
    OPTIONAL = "optional"
    SITUATIONAL = "situational"

    @property
    def weight(self) -> float:
        return _PRIORITY_WEIGHTS[self]


_PRIORITY_WEIGHTS: Dict[ItemPriority, float] = {
    ItemPriority.CRITICAL: 1.0,
    ItemPriority.ESSENTIAL: 0.8,
    ItemPriority.RECOMMENDED: 0.6,
    ItemPriority.OPTIONAL: 0.4,
    ItemPriority.SITUATIONAL: 0.3,
}


class Seasonality(str, Enum):
    SPRING = "spring"
    SUMMER = "summer"
    AUTUMN = "autumn"
    WINTER = "winter"
    YEAR_ROUND = "yearRound"


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    UNISEX = "unisex"


class ConditionType(str, Enum):
    TRANSPORT = "transport"
    ACCOMMODATION = "accommodation"
    ACTIVITY = "activity"
    CLIMATE = "climate"
    DURATION = "duration"
    GROUP_SIZE = "groupSize"
    SEASON = "season"
    TIME_OF_DAY = "timeOfDay"
    BUSINESS_TRIP = "businessTrip"
    DESTINATION = "destination"
    TEMPERATURE = "temperature"


class ConditionOperator(str, Enum):
    EQUALS = "equals"
    CONTAINS = "contains"
    GREATER_THAN = "greaterThan"
    LESS_THAN = "lessThan"
    BETWEEN = "between"
    NOT = "not"


class QuantityFormula(str, Enum):
    FIXED = "fixed"
    PER_DAY = "perDay"
    PER_PERSON = "perPerson"
    PER_DAY_PER_PERSON = "perDayPerPerson"
    CONDITIONAL = "conditional"
    WEATHER_DEPENDENT = "weatherDependent"


class TransportType(str, Enum):
    PLANE = "plane"
    CAR = "car"
    TRAIN = "train"
    BUS = "bus"
    SHIP = "ship"
    BICYCLE = "bicycle"
    ON_FOOT = "onFoot"


class AccommodationType(str, Enum):
    HOTEL = "hotel"
    APARTMENT = "apartment"
    CAMPING = "camping"
    HOSTEL = "hostel"
    FRIENDS = "friends"
    AIRBNB = "airbnb"


class Activity(str, Enum):
    BUSINESS = "business"
    SWIMMING = "swimming"
    HIKING = "hiking"
    SKIING = "skiing"
    SIGHTSEEING = "sightseeing"
    BEACH = "beach"
    SPORTS = "sports"
    RELAXING = "relaxing"


class Climate(str, Enum):
    HOT = "hot"
    WARM = "warm"
    MODERATE = "moderate"
    COOL = "cool"
    COLD = "cold"


class TemperatureRange(str, Enum):
    FREEZING = "freezing"  # < 0°C
    COLD = "cold"  # 0-10°C
    COOL = "cool"  # 10-18°C
    MILD = "mild"  # 18-25°C
    WARM = "warm"  # 25-30°C
    HOT = "hot"  # > 30°C


class ReasonType(str, Enum):
    ESSENTIAL = "essential"
    WEATHER = "weather"
    ACTIVITY = "activity"
    DURATION = "duration"
    CULTURAL = "cultural"
    TRANSPORT = "transport"
    ACCOMMODATION = "accommodation"


class Condition(BaseModel):
    """Predicate over trip/context fields that gates or scores inclusion."""

    type: ConditionType
    values: Tuple[str, ...] = Field(default_factory=tuple)
    operator: ConditionOperator = Field(
        default=ConditionOperator.CONTAINS, alias="conOperator"
    )
    weight: ConditionWeight = 1.0

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    @field_validator("values", mode="before")
    @classmethod
    def stringify_values(cls, value):
        if value is None:
            return ()
        if isinstance(value, (str, int, float, bool)):
            value = [value]
        normalised = []
        for item in value:
            if isinstance(item, bool):
                normalised.append("true" if item else "false")
            else:
                normalised.append(str(item))
        return tuple(normalised)


class QuantityRule(BaseModel):
    """Formula plus clamp bounds, optionally guarded by a condition."""

    condition: Optional[Condition] = None
    formula: QuantityFormula = QuantityFormula.FIXED
    min_quantity: QuantityBound = Field(default=1, alias="minQuantity")
    max_quantity: QuantityBound = Field(default=20, alias="maxQuantity")

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    @model_validator(mode="after")
    def validate_bounds(self) -> "QuantityRule":
        if self.min_quantity > self.max_quantity:
            raise ValueError("minQuantity must be less than or equal to maxQuantity")
        return self


class CatalogEntry(BaseModel):
    """Reusable item definition with applicability conditions and quantity rules.

    Entries are immutable once loaded. Field aliases match the camelCase keys of
    the bundled ``smart_items.json`` dataset; snake_case names are accepted too.

    Attributes:
        id: Unique identifier, also used by other entries' ``alternatives``
        name_key: Localization key resolved to a display name on output
        category: Item category used by the conditional quantity heuristics
        tags: Free-text tags (e.g. ``underwear``, ``charger``, ``hiking``)
        base_quantity: Starting quantity before quantity rules apply
        is_essential: Force-includes the entry whenever it is a candidate
        priority: Priority tier contributing its weight to the score
        conditions: Predicates evaluated against the trip context
        quantity_rules: Ordered formulas; the last applicable one wins
        alternatives: Ids of entries that make this one redundant
        seasonality: Season the item is designed for, if any
        gender_specific: Gender affinity, if any
    """

    id: ItemId
    name_key: NameKey = Field(alias="nameKey")
    category: ItemCategory
    tags: Tuple[str, ...] = Field(default_factory=tuple)
    base_quantity: BaseQuantity = Field(default=1, alias="baseQuantity")
    is_essential: bool = Field(default=False, alias="isEssential")
    priority: ItemPriority = ItemPriority.RECOMMENDED
    conditions: Tuple[Condition, ...] = Field(default_factory=tuple)
    quantity_rules: Tuple[QuantityRule, ...] = Field(
        default_factory=tuple, alias="quantityRules"
    )
    alternatives: Tuple[str, ...] = Field(default_factory=tuple)
    seasonality: Optional[Seasonality] = None
    gender_specific: Optional[Gender] = Field(default=None, alias="genderSpecific")

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    @property
    def is_must_have(self) -> bool:
        """Whether the entry is essential or carries the critical tier."""
        return self.is_essential or self.priority is ItemPriority.CRITICAL

    def has_tag(self, *tags: str) -> bool:
        return any(tag in self.tags for tag in tags)


class TripSnapshot(BaseModel):
    """Raw trip attributes supplied by the caller.

    Numeric fields are not range-checked here: the Context Builder normalises
    non-positive durations and party sizes instead of rejecting them.
    """

    name: Optional[str] = None
    destination: str = ""
    start_date: date
    end_date: date
    transport_types: FrozenSet[TransportType] = Field(default_factory=frozenset)
    accommodation: AccommodationType = AccommodationType.HOTEL
    activities: FrozenSet[Activity] = Field(default_factory=frozenset)
    is_business_trip: bool = False
    number_of_people: int = 1
    climate: Optional[Climate] = None

    model_config = ConfigDict(extra="forbid", frozen=True)


class WeatherContext(BaseModel):
    """Weather view derived from the trip's climate."""

    temperature_range: TemperatureRange
    season: Seasonality
    average_temperature: Optional[float] = None
    precipitation_chance: Optional[Confidence] = None

    model_config = ConfigDict(extra="forbid", frozen=True)


class TripContext(BaseModel):
    """Derived, read-only snapshot of computed trip characteristics."""

    trip: TripSnapshot
    trip_duration: int = Field(ge=1)
    number_of_people: int = Field(ge=1)
    is_weekend: bool = False
    is_international: bool = False
    is_short_trip: bool = False
    is_long_trip: bool = False
    season_at_destination: Seasonality
    is_business_focused: bool = False
    has_outdoor_activities: bool = False
    requires_formal_wear: bool = False
    requires_special_equipment: bool = False
    weather: Optional[WeatherContext] = None

    model_config = ConfigDict(extra="forbid", frozen=True)

    @property
    def activity_values(self) -> FrozenSet[str]:
        return frozenset(activity.value for activity in self.trip.activities)

    @property
    def transport_values(self) -> FrozenSet[str]:
        return frozenset(transport.value for transport in self.trip.transport_types)


class RecommendationReason(BaseModel):
    """Explanation attached to a recommendation for each matched condition."""

    type: ReasonType
    description: str
    weight: ConditionWeight

    model_config = ConfigDict(extra="forbid", frozen=True)


class Recommendation(BaseModel):
    """Scored catalog entry flowing through the post-processing pipeline.

    Recommendations are immutable values: pipeline stages produce updated
    copies through :meth:`with_confidence` instead of mutating shared records.
    """

    entry: CatalogEntry
    recommended_quantity: Quantity
    confidence: Confidence
    reasons: Tuple[RecommendationReason, ...] = Field(default_factory=tuple)
    is_auto_selected: bool = False

    model_config = ConfigDict(extra="forbid", frozen=True)

    @property
    def item_id(self) -> str:
        return self.entry.id

    @property
    def priority(self) -> ItemPriority:
        return self.entry.priority

    def with_confidence(self, confidence: float) -> "Recommendation":
        """Return a copy carrying ``confidence`` clamped to [0, 1]."""
        clamped = min(1.0, max(0.0, confidence))
        return self.model_copy(update={"confidence": clamped})


class PackItem(BaseModel):
    """Concrete packable item returned to the caller."""

    name: str
    category: ItemCategory
    is_packed: bool = False
    is_essential: bool = False
    quantity: int = Field(default=1, ge=1)

    model_config = ConfigDict(extra="forbid")


class GenerationStats(BaseModel):
    """Summary of a generation run, used for logging and API responses."""

    total_recommendations: int = Field(ge=0)
    by_priority: Dict[ItemPriority, int] = Field(default_factory=dict)
    average_confidence: Confidence = 0.0
    auto_selected: int = Field(default=0, ge=0)
    max_items: int = Field(ge=0)


class PackingListResult(BaseModel):
    """Complete outcome of a generation run."""

    context: TripContext
    recommendations: List[Recommendation] = Field(default_factory=list)
    items: List[PackItem] = Field(default_factory=list)
    stats: GenerationStats


class CatalogStats(BaseModel):
    """Aggregate view of the loaded catalog."""

    total_items: int = Field(ge=0)
    items_by_category: Dict[ItemCategory, int] = Field(default_factory=dict)
    items_by_priority: Dict[ItemPriority, int] = Field(default_factory=dict)
    essential_items_count: int = Field(default=0, ge=0)
    most_common_tags: List[Tuple[str, int]] = Field(default_factory=list)


__all__ = [
    "AccommodationType",
    "Activity",
    "CatalogEntry",
    "CatalogStats",
    "Climate",
    "Condition",
    "ConditionOperator",
    "ConditionType",
    "Gender",
    "GenerationStats",
    "ItemCategory",
    "ItemPriority",
    "PackItem",
    "PackingListResult",
    "QuantityFormula",
    "QuantityRule",
    "ReasonType",
    "Recommendation",
    "RecommendationReason",
    "Seasonality",
    "TemperatureRange",
    "TransportType",
    "TripContext",
    "TripSnapshot",
    "WeatherContext",
]
