"""Configuration for the reference corpus (manifest + rarity tables)."""

from __future__ import annotations

from dataclasses import dataclass, field
import os
from pathlib import Path

DEFAULT_ICON_BASE_URL = "https://www.bungie.net"
_CWD_DATA_DIR = Path("data")
_PROJECT_DATA_DIR = Path(__file__).resolve().parents[2] / "data"


def _get_data_dir() -> Path:
    """Resolve the reference data directory.

    Priority:
    1. Explicit `RARITY_DATA_DIR` env override.
    2. `data/` under the working directory when present.
    3. `data/` at the project root when present.
    4. `data/` under the working directory.
    """
    explicit = os.getenv("RARITY_DATA_DIR")
    if explicit:
        return Path(explicit)
    if _CWD_DATA_DIR.exists():
        return _CWD_DATA_DIR
    if _PROJECT_DATA_DIR.exists():
        return _PROJECT_DATA_DIR
    return _CWD_DATA_DIR


@dataclass(frozen=True)
class CorpusConfig:
    data_dir: Path = field(default_factory=_get_data_dir)
    icon_base_url: str = field(
        default_factory=lambda: os.getenv("BUNGIE_ICON_BASE_URL", DEFAULT_ICON_BASE_URL).rstrip("/")
    )

    @property
    def manifest_dir(self) -> Path:
        return self.data_dir / "manifest"

    @property
    def rarity_dir(self) -> Path:
        return self.data_dir / "rarity"
