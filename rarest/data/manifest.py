"""Compact manifest extraction from Bungie world-content definitions.

Reduces the full ``jsonWorldContentPaths`` document (hundreds of MB) to the
two small files the reference corpus reads:

- ``collectibles.json``: name, icon and the collectible item's type/subtype
- ``records.json``: title name (gendered title preferred), icon, hasTitle
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping

from rarest.core.models import Manifest, ManifestDefinition, ManifestFormatError, optional_int

from .corpus import COLLECTIBLES_FILE, RECORDS_FILE

logger = logging.getLogger(__name__)

COLLECTIBLE_TABLE = "DestinyCollectibleDefinition"
RECORD_TABLE = "DestinyRecordDefinition"
INVENTORY_ITEM_TABLE = "DestinyInventoryItemDefinition"

_TITLE_GENDER_ORDER = ("Male", "Female")


def _table(world_content: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    table = world_content.get(name) or {}
    if not isinstance(table, Mapping):
        raise ManifestFormatError(f"World content table '{name}' must be an object")
    return table


def _display(definition: Mapping[str, Any]) -> tuple[str, str]:
    props = definition.get("displayProperties") or {}
    if not isinstance(props, Mapping):
        return "", ""
    return str(props.get("name") or ""), str(props.get("icon") or "")


def _hash_of(key: Any, definition: Mapping[str, Any]) -> int | None:
    hash_value = optional_int(definition.get("hash"))
    return hash_value if hash_value is not None else optional_int(key)


def title_name(definition: Mapping[str, Any]) -> str:
    """Record display name, preferring the gendered title text."""
    title_info = definition.get("titleInfo") or {}
    titles = title_info.get("titlesByGender") if isinstance(title_info, Mapping) else None
    if isinstance(titles, Mapping) and titles:
        for gender in _TITLE_GENDER_ORDER:
            if titles.get(gender):
                return str(titles[gender])
        first = next((value for value in titles.values() if value), None)
        if first:
            return str(first)
    name, _ = _display(definition)
    return name


def extract_collectibles(world_content: Mapping[str, Any]) -> dict[int, ManifestDefinition]:
    collectibles = _table(world_content, COLLECTIBLE_TABLE)
    items = _table(world_content, INVENTORY_ITEM_TABLE)

    definitions: dict[int, ManifestDefinition] = {}
    for key, raw in collectibles.items():
        if not isinstance(raw, Mapping):
            continue
        hash_value = _hash_of(key, raw)
        name, icon = _display(raw)
        if hash_value is None or not name:
            continue

        item = items.get(str(raw.get("itemHash"))) if raw.get("itemHash") is not None else None
        item_type = item_sub_type = None
        if isinstance(item, Mapping):
            item_type = optional_int(item.get("itemType"))
            item_sub_type = optional_int(item.get("itemSubType"))

        definitions[hash_value] = ManifestDefinition(
            hash=hash_value,
            name=name,
            icon=icon or None,
            item_type=item_type,
            item_sub_type=item_sub_type,
        )
    return definitions


def extract_records(world_content: Mapping[str, Any]) -> dict[int, ManifestDefinition]:
    records = _table(world_content, RECORD_TABLE)

    definitions: dict[int, ManifestDefinition] = {}
    for key, raw in records.items():
        if not isinstance(raw, Mapping):
            continue
        hash_value = _hash_of(key, raw)
        name = title_name(raw)
        if hash_value is None or not name:
            continue
        _, icon = _display(raw)
        title_info = raw.get("titleInfo")
        has_title = isinstance(title_info, Mapping) and title_info.get("hasTitle") is True

        definitions[hash_value] = ManifestDefinition(
            hash=hash_value,
            name=name,
            icon=icon or None,
            has_title=has_title,
        )
    return definitions


def extract_manifest(world_content: Mapping[str, Any]) -> Manifest:
    """Build the compact manifest from a world-content document."""
    if not isinstance(world_content, Mapping):
        raise ManifestFormatError("World content must be an object")
    manifest = Manifest(
        collectibles=extract_collectibles(world_content),
        records=extract_records(world_content),
    )
    logger.info(
        "[Manifest] Extracted %s collectibles, %s records (%s titles)",
        len(manifest.collectibles),
        len(manifest.records),
        sum(1 for d in manifest.records.values() if d.has_title),
    )
    return manifest


def load_world_content(path: Path) -> dict[str, Any]:
    """Read a downloaded world-content JSON file."""
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise ManifestFormatError(f"Failed to read world content {path}: {exc}") from exc
    if not isinstance(raw, dict):
        raise ManifestFormatError(f"World content {path} must be an object")
    return raw


def write_manifest(manifest: Manifest, manifest_dir: Path) -> tuple[Path, Path]:
    """Write collectibles.json and records.json; returns both paths."""
    manifest_dir.mkdir(parents=True, exist_ok=True)
    data = manifest.to_dict()

    collectibles_path = manifest_dir / COLLECTIBLES_FILE
    records_path = manifest_dir / RECORDS_FILE
    collectibles_path.write_text(json.dumps(data["collectibles"], separators=(",", ":")), encoding="utf-8")
    records_path.write_text(json.dumps(data["records"], separators=(",", ":")), encoding="utf-8")

    logger.info(
        "[Manifest] Saved %s collectibles and %s records to %s",
        len(manifest.collectibles),
        len(manifest.records),
        manifest_dir,
    )
    return collectibles_path, records_path
