"""Reference corpus provider.

Loads the compact manifest (data/manifest/*.json) and the rarity tables
(data/rarity/<category>.json) from disk, builds the rarity index once and
serves the same read-only snapshot until ``reload()``.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from threading import Lock
from typing import Any

from rarest.core.categories import CORPUS_CATEGORIES, Category
from rarest.core.models import Manifest, ManifestDefinition, RarityEntry, parse_definitions
from rarest.core.rarity_index import RarityIndex

from .config import CorpusConfig

logger = logging.getLogger(__name__)

COLLECTIBLES_FILE = "collectibles.json"
RECORDS_FILE = "records.json"


class CorpusUnavailableError(RuntimeError):
    """Raised when no usable manifest or rarity data has been loaded."""

    def __init__(self, message: str, *, status_code: int = 503) -> None:
        super().__init__(message)
        self.status_code = status_code


@dataclass(frozen=True)
class CorpusSnapshot:
    """Everything one match needs, loaded together."""

    manifest: Manifest = field(default_factory=Manifest)
    rarity: dict[Category, tuple[RarityEntry, ...]] = field(default_factory=dict)
    index: RarityIndex = field(default_factory=RarityIndex)

    @property
    def is_empty(self) -> bool:
        return not (self.manifest.collectibles or self.manifest.records) or not self.rarity

    def stats(self) -> dict[str, Any]:
        return {
            "collectibles": len(self.manifest.collectibles),
            "records": len(self.manifest.records),
            "categories": len(self.rarity),
            "rarity_entries": sum(len(entries) for entries in self.rarity.values()),
            "indexed_names": len(self.index),
        }


def _load_json(path: Path) -> Any | None:
    if not path.exists():
        logger.warning("[Corpus] File not found: %s", path)
        return None
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except Exception as exc:
        logger.error("[Corpus] Failed to load %s: %s", path, exc)
        return None


class ReferenceCorpus:
    """Lazily loaded, cached manifest + rarity corpus."""

    def __init__(self, data_dir: Path | None = None, icon_base_url: str | None = None) -> None:
        if data_dir is None or icon_base_url is None:
            config = CorpusConfig()
            data_dir = data_dir or config.data_dir
            icon_base_url = icon_base_url if icon_base_url is not None else config.icon_base_url
        self._data_dir = data_dir
        self._icon_base_url = icon_base_url.rstrip("/")
        self._snapshot: CorpusSnapshot | None = None
        self._lock = Lock()

    @classmethod
    def from_env(cls) -> "ReferenceCorpus":
        return cls()

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    def snapshot(self) -> CorpusSnapshot:
        """Return the cached snapshot, loading it on first use."""
        snapshot = self._snapshot
        if snapshot is not None:
            return snapshot
        with self._lock:
            if self._snapshot is None:
                self._snapshot = self._load()
            return self._snapshot

    def require(self) -> CorpusSnapshot:
        """Like ``snapshot`` but raise when the corpus is unusable."""
        snapshot = self.snapshot()
        if snapshot.is_empty:
            raise CorpusUnavailableError(
                f"Reference data not available in {self._data_dir}; "
                "extract the manifest and rarity tables first"
            )
        return snapshot

    def reload(self) -> CorpusSnapshot:
        """Re-read the data directory and replace the cached snapshot."""
        snapshot = self._load()
        with self._lock:
            self._snapshot = snapshot
        return snapshot

    @property
    def manifest(self) -> Manifest:
        return self.snapshot().manifest

    @property
    def rarity(self) -> dict[Category, tuple[RarityEntry, ...]]:
        return self.snapshot().rarity

    @property
    def index(self) -> RarityIndex:
        return self.snapshot().index

    # --- Loading ---

    def _load(self) -> CorpusSnapshot:
        manifest = self._load_manifest()
        rarity = self._load_rarity()
        index = RarityIndex.build(rarity)
        snapshot = CorpusSnapshot(manifest=manifest, rarity=rarity, index=index)
        logger.info(
            "[Corpus] Loaded %s collectibles, %s records, %s rarity entries in %s categories from %s",
            len(manifest.collectibles),
            len(manifest.records),
            snapshot.stats()["rarity_entries"],
            len(rarity),
            self._data_dir,
        )
        return snapshot

    def _load_manifest(self) -> Manifest:
        manifest_dir = self._data_dir / "manifest"
        return Manifest(
            collectibles=self._load_definitions(manifest_dir / COLLECTIBLES_FILE),
            records=self._load_definitions(manifest_dir / RECORDS_FILE),
        )

    def _load_definitions(self, path: Path) -> dict[int, ManifestDefinition]:
        raw = _load_json(path)
        if raw is None:
            return {}
        if not isinstance(raw, dict):
            logger.error("[Corpus] Expected an object in %s", path)
            return {}

        definitions = parse_definitions(raw, path.name, strict=False)
        for hash_value, definition in definitions.items():
            if definition.icon:
                definitions[hash_value] = replace(definition, icon=self._absolute_icon(definition.icon))
        return definitions

    def _absolute_icon(self, icon: str) -> str:
        if icon.startswith(("http://", "https://")) or not self._icon_base_url:
            return icon
        if not icon.startswith("/"):
            icon = f"/{icon}"
        return f"{self._icon_base_url}{icon}"

    def _load_rarity(self) -> dict[Category, tuple[RarityEntry, ...]]:
        rarity_dir = self._data_dir / "rarity"
        rarity: dict[Category, tuple[RarityEntry, ...]] = {}
        for category in CORPUS_CATEGORIES:
            raw = _load_json(rarity_dir / f"{category}.json")
            if not isinstance(raw, dict):
                continue
            items = raw.get("items")
            if not isinstance(items, list):
                continue
            rarity[category] = tuple(
                RarityEntry.from_dict(item, category) for item in items if isinstance(item, dict)
            )
        return rarity
