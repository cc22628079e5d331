"""Output mapper converting recommendations into packable items."""
from __future__ import annotations

from typing import Iterable, List

from smart_packing.core.localization import NameResolver, humanize_key
from smart_packing.core.schemas import PackItem, Recommendation


def to_pack_item(recommendation: Recommendation, resolve_name: NameResolver = humanize_key) -> PackItem:
    entry = recommendation.entry
    return PackItem(
        name=resolve_name(entry.name_key),
        category=entry.category,
        is_packed=False,
        is_essential=entry.is_essential,
        quantity=recommendation.recommended_quantity,
    )


def to_pack_items(
    recommendations: Iterable[Recommendation],
    resolve_name: NameResolver = humanize_key,
) -> List[PackItem]:
    """Map surviving recommendations to items, preserving their order."""
    return [to_pack_item(recommendation, resolve_name) for recommendation in recommendations]
