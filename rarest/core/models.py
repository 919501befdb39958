"""Data model for profile snapshots, manifest definitions and results."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

from .categories import Category

logger = logging.getLogger(__name__)

DEFAULT_TOTAL_REDEEMED = 0
DEFAULT_RARITY = 100.0


class ProfileFormatError(ValueError):
    """Raised when a profile payload is not structurally usable."""


class ManifestFormatError(ValueError):
    """Raised when manifest data is not structurally usable."""


def optional_int(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _float(value: Any, default: float) -> float:
    if value is None or isinstance(value, bool):
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def parse_hash(key: Any, error: type[ValueError]) -> int:
    """Parse a stringified numeric hash key."""
    hash_value = optional_int(key)
    if hash_value is None:
        raise error(f"Invalid hash key: {key!r}")
    return hash_value


@dataclass(frozen=True)
class RarityEntry:
    """One row of the rarity corpus."""

    name: str
    category: Category
    total_redeemed: int = DEFAULT_TOTAL_REDEEMED
    global_rarity: float = DEFAULT_RARITY
    adjusted_rarity: float = DEFAULT_RARITY

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], category: Category) -> "RarityEntry":
        return cls(
            name=str(data.get("name") or ""),
            category=category,
            total_redeemed=optional_int(data.get("totalRedeemed")) or DEFAULT_TOTAL_REDEEMED,
            global_rarity=_float(data.get("globalRarity"), DEFAULT_RARITY),
            adjusted_rarity=_float(data.get("adjustedRarity"), DEFAULT_RARITY),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "totalRedeemed": self.total_redeemed,
            "globalRarity": self.global_rarity,
            "adjustedRarity": self.adjusted_rarity,
        }


@dataclass(frozen=True)
class ManifestDefinition:
    """Collectible or record definition looked up by hash."""

    hash: int
    name: str = ""
    icon: str | None = None
    item_type: int | None = None
    item_sub_type: int | None = None
    has_title: bool | None = None

    @classmethod
    def from_dict(cls, hash_value: int, data: Mapping[str, Any]) -> "ManifestDefinition":
        has_title = data.get("hasTitle")
        icon = data.get("icon")
        return cls(
            hash=hash_value,
            name=str(data.get("name") or ""),
            icon=str(icon) if icon else None,
            item_type=optional_int(data.get("itemType")),
            item_sub_type=optional_int(data.get("itemSubType")),
            has_title=has_title if isinstance(has_title, bool) else None,
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"hash": self.hash, "name": self.name}
        if self.icon:
            data["icon"] = self.icon
        if self.item_type is not None:
            data["itemType"] = self.item_type
        if self.item_sub_type is not None:
            data["itemSubType"] = self.item_sub_type
        if self.has_title is not None:
            data["hasTitle"] = self.has_title
        return data


def parse_definitions(raw: Any, section: str, *, strict: bool = True) -> dict[int, ManifestDefinition]:
    """Parse a hash-keyed definitions mapping.

    With ``strict`` a non-numeric hash key raises ManifestFormatError;
    otherwise the entry is logged and skipped.
    """
    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        raise ManifestFormatError(f"Manifest section '{section}' must be a mapping")
    definitions: dict[int, ManifestDefinition] = {}
    for key, data in raw.items():
        if not isinstance(data, Mapping):
            logger.debug("[Manifest] Skipping non-object %s definition %s", section, key)
            continue
        if strict:
            hash_value = parse_hash(key, ManifestFormatError)
        else:
            hash_value = optional_int(key)
            if hash_value is None:
                logger.debug("[Manifest] Skipping invalid hash %r in %s", key, section)
                continue
        definitions[hash_value] = ManifestDefinition.from_dict(hash_value, data)
    return definitions


@dataclass(frozen=True)
class Manifest:
    """Collectible and record definitions keyed by hash."""

    collectibles: dict[int, ManifestDefinition] = field(default_factory=dict)
    records: dict[int, ManifestDefinition] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Manifest":
        if not isinstance(data, Mapping):
            raise ManifestFormatError("Manifest must be a mapping")
        return cls(
            collectibles=parse_definitions(data.get("collectibles"), "collectibles"),
            records=parse_definitions(data.get("records"), "records"),
        )

    def to_dict(self) -> dict[str, dict[str, dict[str, Any]]]:
        return {
            "collectibles": {str(h): d.to_dict() for h, d in self.collectibles.items()},
            "records": {str(h): d.to_dict() for h, d in self.records.items()},
        }


@dataclass(frozen=True)
class ProfileRecordEntry:
    """Ownership or completion state of one collectible/record."""

    hash: int
    state: int | None = None


def _component_entries(payload: Mapping[str, Any], names: tuple[str, ...], inner: str) -> dict[int, ProfileRecordEntry]:
    component = None
    for name in names:
        if payload.get(name) is not None:
            component = payload[name]
            break
    if component is None:
        return {}
    if not isinstance(component, Mapping):
        raise ProfileFormatError(f"Profile component '{names[0]}' must be an object")

    data = component.get("data")
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ProfileFormatError(f"Profile component '{names[0]}.data' must be an object")

    records = data.get(inner)
    if records is None:
        return {}
    if not isinstance(records, Mapping):
        raise ProfileFormatError(f"Profile component '{names[0]}.data.{inner}' must be an object")

    entries: dict[int, ProfileRecordEntry] = {}
    for key, record in records.items():
        if not isinstance(record, Mapping):
            raise ProfileFormatError(f"Profile {inner} entry {key!r} must be an object")
        hash_value = parse_hash(key, ProfileFormatError)
        entries[hash_value] = ProfileRecordEntry(hash=hash_value, state=optional_int(record.get("state")))
    return entries


@dataclass(frozen=True)
class ProfileSnapshot:
    """Collectible and record states for one player."""

    collectibles: dict[int, ProfileRecordEntry] = field(default_factory=dict)
    records: dict[int, ProfileRecordEntry] = field(default_factory=dict)

    @classmethod
    def from_response(cls, payload: Any) -> "ProfileSnapshot":
        """Parse a Destiny2 GetProfile response (or its ``Response`` body).

        Absent components become empty record sets.
        """
        if not isinstance(payload, Mapping):
            raise ProfileFormatError("Profile payload must be an object")
        body = payload.get("Response")
        if isinstance(body, Mapping):
            payload = body
        return cls(
            collectibles=_component_entries(
                payload, ("profileCollectibles", "ProfileCollectibles"), "collectibles"
            ),
            records=_component_entries(payload, ("profileRecords", "ProfileRecords"), "records"),
        )


@dataclass(frozen=True)
class ResultItem:
    """A matched item in the response."""

    name: str
    icon: str | None
    hash: int
    total_redeemed: int = DEFAULT_TOTAL_REDEEMED
    global_rarity: float = DEFAULT_RARITY
    adjusted_rarity: float = DEFAULT_RARITY

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "icon": self.icon,
            "hash": self.hash,
            "totalRedeemed": self.total_redeemed,
            "globalRarity": self.global_rarity,
            "adjustedRarity": self.adjusted_rarity,
        }


CategorizedResults = dict[Category, list[ResultItem]]
