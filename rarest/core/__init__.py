"""Rarity matching engine."""

from .categories import (
    ITEM_TYPE_ALLOWED_CATEGORIES,
    ITEM_TYPE_PREFERRED_CATEGORY,
    SUBTYPE_CATEGORIES,
    WEAPON_CATEGORIES,
    Category,
    ItemSubType,
    ItemType,
    is_category_valid,
)
from .matcher import MatchSummary, match_rarest_items, sort_buckets, summarize
from .models import (
    CategorizedResults,
    Manifest,
    ManifestDefinition,
    ManifestFormatError,
    ProfileFormatError,
    ProfileRecordEntry,
    ProfileSnapshot,
    RarityEntry,
    ResultItem,
)
from .normalize import normalize_name
from .rarity_index import RarityIndex, build_index, resolve_rarity
from .state import CollectibleState, RecordState, is_completed, is_owned

__all__ = [
    "ITEM_TYPE_ALLOWED_CATEGORIES",
    "ITEM_TYPE_PREFERRED_CATEGORY",
    "SUBTYPE_CATEGORIES",
    "WEAPON_CATEGORIES",
    "Category",
    "ItemSubType",
    "ItemType",
    "is_category_valid",
    "MatchSummary",
    "match_rarest_items",
    "sort_buckets",
    "summarize",
    "CategorizedResults",
    "Manifest",
    "ManifestDefinition",
    "ManifestFormatError",
    "ProfileFormatError",
    "ProfileRecordEntry",
    "ProfileSnapshot",
    "RarityEntry",
    "ResultItem",
    "normalize_name",
    "RarityIndex",
    "build_index",
    "resolve_rarity",
    "CollectibleState",
    "RecordState",
    "is_completed",
    "is_owned",
]
