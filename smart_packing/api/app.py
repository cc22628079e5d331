"""FastAPI surface for the smart packing-list engine."""
from __future__ import annotations

# Load environment variables from .env file
from dotenv import load_dotenv

# Load .env file before any other imports that might need environment variables
load_dotenv()


import logging
from collections import Counter
from typing import Dict, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import ValidationError

from smart_packing.api.dependencies import (
    generator_for_locale,
    get_catalog,
    get_settings,
    lifespan,
)
from smart_packing.api.schemas import (
    CatalogItemsResponse,
    PackingListRequest,
    PackingListResponse,
    TripSummary,
)
from smart_packing.core.config import configure_logging
from smart_packing.core.schemas import CatalogEntry, CatalogStats, ItemCategory, ItemPriority

configure_logging(get_settings().log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="Smart Packing API", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.post("/packing-list", response_model=PackingListResponse)
async def create_packing_list(payload: PackingListRequest) -> PackingListResponse:
    """Generate a ranked packing list for a trip.

    The trip is analysed into a context (duration, party size, season, trip
    shape), every catalog entry is scored against it, and the surviving
    recommendations are pruned, capped, deduplicated and bundled before being
    mapped to packable items.

    Args:
        payload: Trip snapshot fields plus an optional ``locale`` for item names.

    Returns:
        PackingListResponse containing:
        - items: packable items in priority/confidence order
        - trip: the derived trip characteristics
        - stats: counts per priority tier, average confidence, auto-selected count

    Raises:
        HTTPException: 400 for invalid trip data, 500 for generation errors

    Example JSON payload:
        ```json
        {
            "destination": "Lisbon",
            "start_date": "2025-06-06",
            "end_date": "2025-06-09",
            "transport_types": ["plane"],
            "accommodation": "hotel",
            "activities": ["sightseeing", "beach"],
            "number_of_people": 2,
            "climate": "hot",
            "locale": "de"
        }
        ```
    """

    logger.info("Packing list request received")
    logger.debug("Trip: %s -> %s (%s)", payload.start_date, payload.end_date, payload.destination)

    try:
        generator = generator_for_locale(payload.locale or "")
        result = generator.generate_report(payload.to_snapshot())
    except ValidationError as exc:
        logger.error("Invalid trip data: %s", exc)
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except ValueError as exc:
        logger.error("Value error during generation: %s", exc)
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except Exception as exc:
        logger.error("Unexpected error during generation: %s", exc, exc_info=True)
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    return PackingListResponse(
        items=result.items,
        trip=TripSummary.from_context(result.context),
        stats=result.stats,
        items_by_category=dict(Counter(item.category for item in result.items)),
    )


@app.get("/catalog/items", response_model=CatalogItemsResponse)
async def list_catalog_items(
    category: Optional[ItemCategory] = None,
    tag: Optional[str] = None,
    priority: Optional[ItemPriority] = None,
    essential: Optional[bool] = None,
) -> CatalogItemsResponse:
    """List catalog entries, optionally filtered."""
    entries = get_catalog().search(
        categories=[category] if category is not None else None,
        tags=[tag] if tag else None,
        priorities=[priority] if priority is not None else None,
        essential=essential,
    )
    return CatalogItemsResponse(total=len(entries), items=entries)


@app.get("/catalog/items/{item_id}", response_model=CatalogEntry)
async def get_catalog_item(item_id: str) -> CatalogEntry:
    entry = get_catalog().get(item_id)
    if entry is None:
        raise HTTPException(status_code=404, detail=f"Unknown catalog item: {item_id}")
    return entry


@app.get("/catalog/stats", response_model=CatalogStats)
async def catalog_stats() -> CatalogStats:
    return get_catalog().stats()


@app.get("/health")
async def health_check() -> Dict[str, str]:
    """Simple health endpoint used for readiness probes."""

    return {"status": "healthy", "service": "smart-packing-api"}
