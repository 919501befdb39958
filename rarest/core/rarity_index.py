"""Name-keyed rarity index with type-aware disambiguation.

Display names collide across unrelated categories ("Heretic" is both an
emblem and a rocket launcher), so the index keeps every entry and
``resolve`` picks one using the item's type metadata:

1. A single candidate is returned as-is.
2. The weapon category implied by ``item_sub_type``.
3. The dedicated category of ``item_type`` (emblems for emblems).
4. Any weapon category when ``item_type`` is a weapon.
5. The first candidate in corpus order.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator, Mapping

from .categories import (
    WEAPON_CATEGORIES,
    Category,
    ItemType,
    preferred_category,
    subtype_category,
)
from .models import RarityEntry
from .normalize import normalize_name

logger = logging.getLogger(__name__)

RarityCorpus = Mapping[Any, Iterable[Any]]


class RarityIndex:
    """Read-only mapping of normalized name -> candidate entries."""

    def __init__(self, entries: Mapping[str, tuple[RarityEntry, ...]] | None = None) -> None:
        self._entries: dict[str, tuple[RarityEntry, ...]] = dict(entries or {})

    @classmethod
    def build(cls, corpus: RarityCorpus) -> "RarityIndex":
        """Index a corpus of ``category -> entries``.

        Entries may be ``RarityEntry`` objects or raw dicts as stored in the
        rarity files. Nothing is deduplicated.
        """
        lookup: dict[str, list[RarityEntry]] = {}
        for raw_category, items in corpus.items():
            category = Category.parse(raw_category)
            if category is None or category is Category.OTHER:
                logger.warning("[RarityIndex] Skipping unknown category: %s", raw_category)
                continue
            for item in items or ():
                entry = _as_entry(item, category)
                if entry is None:
                    continue
                key = normalize_name(entry.name)
                if not key:
                    continue
                lookup.setdefault(key, []).append(entry)
        return cls({key: tuple(values) for key, values in lookup.items()})

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        key = normalize_name(name)
        return bool(key) and key in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    @property
    def entry_count(self) -> int:
        return sum(len(values) for values in self._entries.values())

    def candidates(self, name: Any) -> tuple[RarityEntry, ...]:
        """All entries sharing the normalized ``name``, in corpus order."""
        key = normalize_name(name)
        if not key:
            return ()
        return self._entries.get(key, ())

    def resolve(
        self,
        name: Any,
        item_type: int | None = None,
        item_sub_type: int | None = None,
    ) -> RarityEntry | None:
        """Pick the single best entry for ``name`` or None when unknown."""
        entries = self.candidates(name)
        if not entries:
            return None
        if len(entries) == 1:
            return entries[0]

        wanted = subtype_category(item_sub_type)
        if wanted is not None:
            match = _first(entries, lambda e: e.category is wanted)
            if match is not None:
                return match

        wanted = preferred_category(item_type)
        if wanted is not None:
            match = _first(entries, lambda e: e.category is wanted)
            if match is not None:
                return match

        if item_type == ItemType.WEAPON:
            match = _first(entries, lambda e: e.category in WEAPON_CATEGORIES)
            if match is not None:
                return match

        return entries[0]


def _first(entries: Iterable[RarityEntry], predicate) -> RarityEntry | None:
    return next((entry for entry in entries if predicate(entry)), None)


def _as_entry(item: Any, category: Category) -> RarityEntry | None:
    if isinstance(item, RarityEntry):
        if item.category is category:
            return item
        return RarityEntry(
            name=item.name,
            category=category,
            total_redeemed=item.total_redeemed,
            global_rarity=item.global_rarity,
            adjusted_rarity=item.adjusted_rarity,
        )
    if isinstance(item, Mapping):
        return RarityEntry.from_dict(item, category)
    logger.debug("[RarityIndex] Skipping malformed %s entry: %r", category, item)
    return None


def build_index(corpus: RarityCorpus) -> RarityIndex:
    return RarityIndex.build(corpus)


def resolve_rarity(
    index: RarityIndex,
    name: Any,
    item_type: int | None = None,
    item_sub_type: int | None = None,
) -> RarityEntry | None:
    return index.resolve(name, item_type, item_sub_type)
