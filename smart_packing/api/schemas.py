from datetime import date
from typing import Dict, FrozenSet, List, Optional

from pydantic import BaseModel, Field

from smart_packing.core.schemas import (
    AccommodationType,
    Activity,
    CatalogEntry,
    Climate,
    GenerationStats,
    ItemCategory,
    PackItem,
    Seasonality,
    TransportType,
    TripContext,
    TripSnapshot,
)
from smart_packing.core.types import LocaleCode


class PackingListRequest(BaseModel):
    """Trip attributes used to generate a packing list."""

    name: Optional[str] = Field(default=None, description="Optional trip name used in logs.")
    destination: str = Field(default="", description="Destination; a non-empty value marks the trip as international.")
    start_date: date
    end_date: date
    transport_types: FrozenSet[TransportType] = Field(default_factory=frozenset)
    accommodation: AccommodationType = AccommodationType.HOTEL
    activities: FrozenSet[Activity] = Field(default_factory=frozenset)
    is_business_trip: bool = False
    number_of_people: int = Field(default=1, description="Party size; values below 1 are treated as 1.")
    climate: Optional[Climate] = None
    locale: Optional[LocaleCode] = Field(
        default=None,
        description="Language code for item names (e.g. \"de\"). Defaults to the server locale.",
    )

    def to_snapshot(self) -> TripSnapshot:
        return TripSnapshot(**self.model_dump(exclude={"locale"}))


class TripSummary(BaseModel):
    """Derived trip characteristics echoed back with the list."""

    trip_duration: int
    number_of_people: int
    season: Seasonality
    is_short_trip: bool
    is_long_trip: bool
    is_weekend: bool
    is_international: bool
    is_business_focused: bool
    has_outdoor_activities: bool

    @classmethod
    def from_context(cls, context: TripContext) -> "TripSummary":
        return cls(
            trip_duration=context.trip_duration,
            number_of_people=context.number_of_people,
            season=context.season_at_destination,
            is_short_trip=context.is_short_trip,
            is_long_trip=context.is_long_trip,
            is_weekend=context.is_weekend,
            is_international=context.is_international,
            is_business_focused=context.is_business_focused,
            has_outdoor_activities=context.has_outdoor_activities,
        )


class PackingListResponse(BaseModel):
    """Generated packing list plus the context and stats behind it."""

    items: List[PackItem] = Field(default_factory=list)
    trip: TripSummary
    stats: GenerationStats
    items_by_category: Dict[ItemCategory, int] = Field(default_factory=dict)


class CatalogItemsResponse(BaseModel):
    total: int
    items: List[CatalogEntry] = Field(default_factory=list)
