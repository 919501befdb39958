"""Cross-references a profile's collectibles and titles with rarity data.

Returns items grouped by category, sorted rarest-first.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from .categories import Category, is_category_valid
from .models import (
    DEFAULT_RARITY,
    CategorizedResults,
    Manifest,
    ManifestDefinition,
    ProfileSnapshot,
    RarityEntry,
    ResultItem,
)
from .rarity_index import RarityCorpus, RarityIndex
from .state import is_completed, is_owned

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchSummary:
    """Totals and the single rarest item across all buckets."""

    total_items: int
    category_count: int
    rarest: ResultItem | None = None
    rarest_category: Category | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalItems": self.total_items,
            "categoryCount": self.category_count,
            "rarest": self.rarest.to_dict() if self.rarest else None,
            "rarestCategory": str(self.rarest_category) if self.rarest_category else None,
        }


def _result_item(name: str, definition: ManifestDefinition | None, hash_value: int, rarity: RarityEntry | None) -> ResultItem:
    icon = definition.icon if definition else None
    if rarity is None:
        return ResultItem(name=name, icon=icon, hash=hash_value)
    return ResultItem(
        name=name,
        icon=icon,
        hash=hash_value,
        total_redeemed=rarity.total_redeemed,
        global_rarity=rarity.global_rarity,
        adjusted_rarity=rarity.adjusted_rarity,
    )


def _match_collectibles(profile: ProfileSnapshot, manifest: Manifest, index: RarityIndex, results: CategorizedResults) -> None:
    for hash_value, entry in profile.collectibles.items():
        if not is_owned(entry.state):
            continue

        definition = manifest.collectibles.get(hash_value)
        name = definition.name if definition else ""
        rarity = None
        if definition and name:
            rarity = index.resolve(name, definition.item_type, definition.item_sub_type)
            if rarity is not None and not is_category_valid(definition.item_type, rarity.category):
                logger.debug(
                    "[Matcher] Discarding %s match for %r (itemType=%s)",
                    rarity.category,
                    name,
                    definition.item_type,
                )
                rarity = None

        category = rarity.category if rarity else Category.OTHER
        results.setdefault(category, []).append(
            _result_item(name or f"Hash {hash_value}", definition, hash_value, rarity)
        )


def _match_titles(profile: ProfileSnapshot, manifest: Manifest, index: RarityIndex, results: CategorizedResults) -> None:
    for hash_value, entry in profile.records.items():
        if not is_completed(entry.state):
            continue

        definition = manifest.records.get(hash_value)
        if definition is None or definition.has_title is not True:
            continue

        rarity = index.resolve(definition.name) if definition.name else None
        results.setdefault(Category.TITLES, []).append(
            _result_item(definition.name or f"Record {hash_value}", definition, hash_value, rarity)
        )


def sort_buckets(results: CategorizedResults) -> CategorizedResults:
    """Sort every bucket ascending by global rarity (stable)."""
    for items in results.values():
        items.sort(key=lambda item: item.global_rarity)
    return results


def match_rarest_items(
    profile: ProfileSnapshot,
    manifest: Manifest,
    rarity: RarityIndex | RarityCorpus,
) -> CategorizedResults:
    """Bucket owned collectibles and earned titles by rarity category.

    ``rarity`` is either a prebuilt ``RarityIndex`` or the raw
    ``category -> entries`` corpus, which is indexed for this call only.
    Items without valid rarity data keep the defaults (global rarity 100)
    and sort to the end of their bucket.
    """
    index = rarity if isinstance(rarity, RarityIndex) else RarityIndex.build(rarity)
    results: CategorizedResults = {}

    _match_collectibles(profile, manifest, index, results)
    _match_titles(profile, manifest, index, results)

    logger.debug(
        "[Matcher] Matched %s items into %s categories",
        sum(len(items) for items in results.values()),
        len(results),
    )
    return sort_buckets(results)


def summarize(results: CategorizedResults) -> MatchSummary:
    """Count items and find the rarest one with known rarity."""
    rarest: ResultItem | None = None
    rarest_category: Category | None = None
    for category, items in results.items():
        if not items:
            continue
        head = items[0]
        if head.global_rarity >= DEFAULT_RARITY:
            continue
        if rarest is None or head.global_rarity < rarest.global_rarity:
            rarest = head
            rarest_category = category

    return MatchSummary(
        total_items=sum(len(items) for items in results.values()),
        category_count=sum(1 for items in results.values() if items),
        rarest=rarest,
        rarest_category=rarest_category,
    )
