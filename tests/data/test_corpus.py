"""Tests for ReferenceCorpus loading and caching."""

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from rarest.core.categories import Category
from rarest.data.config import CorpusConfig
from rarest.data.corpus import CorpusUnavailableError, ReferenceCorpus


def _write(path: Path, data) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    _write(tmp_path / "manifest" / "collectibles.json", {
        "1001": {"hash": 1001, "name": "Heretic", "icon": "/common/heretic.png", "itemType": 3, "itemSubType": 9},
        "1002": {"hash": 1002, "name": "Shadow of Earth", "icon": "https://cdn.example/soe.png"},
        "bogus": {"name": "Skipped"},
    })
    _write(tmp_path / "manifest" / "records.json", {
        "2001": {"hash": 2001, "name": "Dredgen", "hasTitle": True},
    })
    _write(tmp_path / "rarity" / "emblems.json", {
        "category": "emblems",
        "items": [{"name": "Heretic", "totalRedeemed": 5, "globalRarity": 1.2, "adjustedRarity": 2.0}],
    })
    _write(tmp_path / "rarity" / "hand-cannons.json", {
        "category": "hand-cannons",
        "items": [{"name": "Heretic", "totalRedeemed": 9, "globalRarity": 3.4, "adjustedRarity": 4.0}],
    })
    (tmp_path / "rarity" / "shaders.json").write_text("{not json", encoding="utf-8")
    return tmp_path


def test_loads_manifest_and_rarity(data_dir: Path):
    corpus = ReferenceCorpus(data_dir=data_dir, icon_base_url="https://www.bungie.net")
    snapshot = corpus.snapshot()

    assert set(snapshot.manifest.collectibles) == {1001, 1002}
    assert snapshot.manifest.records[2001].has_title is True
    assert list(snapshot.rarity) == [Category.EMBLEMS, Category.HAND_CANNONS]
    assert snapshot.stats() == {
        "collectibles": 2,
        "records": 1,
        "categories": 2,
        "rarity_entries": 2,
        "indexed_names": 1,
    }


def test_icons_are_made_absolute(data_dir: Path):
    corpus = ReferenceCorpus(data_dir=data_dir, icon_base_url="https://www.bungie.net/")
    collectibles = corpus.manifest.collectibles
    assert collectibles[1001].icon == "https://www.bungie.net/common/heretic.png"
    assert collectibles[1002].icon == "https://cdn.example/soe.png"
    assert corpus.manifest.records[2001].icon is None


def test_empty_icon_base_keeps_relative_paths(data_dir: Path):
    corpus = ReferenceCorpus(data_dir=data_dir, icon_base_url="")
    assert corpus.manifest.collectibles[1001].icon == "/common/heretic.png"


def test_index_is_cached_until_reload(data_dir: Path):
    corpus = ReferenceCorpus(data_dir=data_dir)
    first = corpus.index
    assert corpus.index is first
    assert len(first.candidates("heretic")) == 2

    _write(data_dir / "rarity" / "bows.json", {"items": [{"name": "Heretic", "globalRarity": 0.1}]})
    assert corpus.index is first

    reloaded = corpus.reload()
    assert corpus.index is reloaded.index
    assert reloaded.index is not first
    assert len(corpus.index.candidates("heretic")) == 3


def test_require_raises_when_data_missing(tmp_path: Path):
    corpus = ReferenceCorpus(data_dir=tmp_path / "missing")
    assert corpus.snapshot().is_empty
    with pytest.raises(CorpusUnavailableError) as exc_info:
        corpus.require()
    assert exc_info.value.status_code == 503


def test_require_returns_snapshot(data_dir: Path):
    corpus = ReferenceCorpus(data_dir=data_dir)
    assert corpus.require() is corpus.snapshot()


def test_config_env_override(tmp_path: Path, monkeypatch):
    monkeypatch.setenv("RARITY_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("BUNGIE_ICON_BASE_URL", "https://icons.example/")
    config = CorpusConfig()
    assert config.data_dir == tmp_path
    assert config.manifest_dir == tmp_path / "manifest"
    assert config.rarity_dir == tmp_path / "rarity"
    assert config.icon_base_url == "https://icons.example"


def test_from_env_uses_config(tmp_path: Path, monkeypatch):
    monkeypatch.setenv("RARITY_DATA_DIR", str(tmp_path))
    assert ReferenceCorpus.from_env().data_dir == tmp_path


def test_explicit_arguments_skip_environment_config(tmp_path: Path):
    with patch("rarest.data.corpus.CorpusConfig") as config:
        corpus = ReferenceCorpus(data_dir=tmp_path, icon_base_url="https://icons.example/")
    config.assert_not_called()
    assert corpus.data_dir == tmp_path


def test_missing_argument_falls_back_to_environment(tmp_path: Path, monkeypatch):
    monkeypatch.setenv("BUNGIE_ICON_BASE_URL", "https://icons.example/")
    (tmp_path / "manifest").mkdir()
    (tmp_path / "manifest" / "collectibles.json").write_text(
        json.dumps({"7": {"name": "Heretic", "icon": "/h.png"}}), encoding="utf-8"
    )
    corpus = ReferenceCorpus(data_dir=tmp_path)
    assert corpus.manifest.collectibles[7].icon == "https://icons.example/h.png"
