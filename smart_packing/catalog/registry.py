"""Read-only item catalog with category, tag and id indices."""
from __future__ import annotations

import logging
from collections import Counter
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from smart_packing.core.localization import NameResolver
from smart_packing.core.schemas import CatalogEntry, CatalogStats, ItemCategory, ItemPriority

logger = logging.getLogger(__name__)


class CatalogError(RuntimeError):
    """Raised when a set of entries cannot form a consistent catalog."""


class ItemCatalog:
    """Immutable collection of catalog entries.

    The catalog is built once per process and then shared by every generation
    call; none of its methods mutate state, so concurrent readers need no
    locking. Query methods return fresh lists.
    """

    def __init__(self, entries: Iterable[CatalogEntry]):
        items = tuple(entries)
        by_id: Dict[str, CatalogEntry] = {}
        by_category: Dict[ItemCategory, List[CatalogEntry]] = {}
        by_tag: Dict[str, List[CatalogEntry]] = {}

        for entry in items:
            if entry.id in by_id:
                raise CatalogError(f"Duplicate catalog id: {entry.id}")
            by_id[entry.id] = entry
            by_category.setdefault(entry.category, []).append(entry)
            for tag in dict.fromkeys(entry.tags):
                by_tag.setdefault(tag, []).append(entry)

        self._items = items
        self._by_id = by_id
        self._by_category = {category: tuple(group) for category, group in by_category.items()}
        self._by_tag = {tag: tuple(group) for tag, group in by_tag.items()}

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[CatalogEntry]:
        return iter(self._items)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._by_id

    @property
    def items(self) -> List[CatalogEntry]:
        return list(self._items)

    def by_category(self, category: ItemCategory) -> List[CatalogEntry]:
        return list(self._by_category.get(category, ()))

    def with_tag(self, tag: str) -> List[CatalogEntry]:
        return list(self._by_tag.get(tag, ()))

    def get(self, item_id: str) -> Optional[CatalogEntry]:
        return self._by_id.get(item_id)

    def search(
        self,
        categories: Optional[Sequence[ItemCategory]] = None,
        tags: Optional[Sequence[str]] = None,
        priorities: Optional[Sequence[ItemPriority]] = None,
        essential: Optional[bool] = None,
    ) -> List[CatalogEntry]:
        """Entries matching every given criterion; ``None`` criteria match all.

        ``tags`` matches entries carrying at least one of the requested tags.
        """

        def matches(entry: CatalogEntry) -> bool:
            if categories is not None and entry.category not in categories:
                return False
            if tags is not None and not entry.has_tag(*tags):
                return False
            if priorities is not None and entry.priority not in priorities:
                return False
            if essential is not None and entry.is_essential != essential:
                return False
            return True

        return [entry for entry in self._items if matches(entry)]

    def stats(self, top_tags: int = 10) -> CatalogStats:
        tag_counts = Counter(tag for entry in self._items for tag in dict.fromkeys(entry.tags))
        return CatalogStats(
            total_items=len(self._items),
            items_by_category=dict(Counter(entry.category for entry in self._items)),
            items_by_priority=dict(Counter(entry.priority for entry in self._items)),
            essential_items_count=sum(1 for entry in self._items if entry.is_essential),
            most_common_tags=tag_counts.most_common(top_tags),
        )

    def localized_names(self, resolve_name: NameResolver) -> List[Tuple[str, str]]:
        return [(entry.id, resolve_name(entry.name_key)) for entry in self._items]
