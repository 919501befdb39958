"""Tests for profile and manifest parsing."""

import pytest

from rarest.core.categories import Category
from rarest.core.models import (
    Manifest,
    ManifestDefinition,
    ManifestFormatError,
    ProfileFormatError,
    ProfileSnapshot,
    RarityEntry,
    ResultItem,
    parse_definitions,
)


def test_profile_from_component_layout():
    payload = {
        "profileCollectibles": {"data": {"collectibles": {"1001": {"state": 0}, "1002": {"state": 1}}}},
        "profileRecords": {"data": {"records": {"2001": {"state": 67}}}},
    }
    profile = ProfileSnapshot.from_response(payload)
    assert set(profile.collectibles) == {1001, 1002}
    assert profile.collectibles[1002].state == 1
    assert profile.records[2001].hash == 2001
    assert profile.records[2001].state == 67


def test_profile_unwraps_response_envelope_and_pascal_case():
    payload = {
        "Response": {"ProfileCollectibles": {"data": {"collectibles": {"5": {"state": 0}}}}},
        "ErrorCode": 1,
    }
    profile = ProfileSnapshot.from_response(payload)
    assert list(profile.collectibles) == [5]
    assert profile.records == {}


def test_profile_absent_components_are_empty():
    profile = ProfileSnapshot.from_response({})
    assert profile.collectibles == {}
    assert profile.records == {}

    profile = ProfileSnapshot.from_response({"profileCollectibles": {"privacy": 2}})
    assert profile.collectibles == {}


def test_profile_missing_state_is_none():
    profile = ProfileSnapshot.from_response(
        {"profileCollectibles": {"data": {"collectibles": {"7": {}}}}}
    )
    assert profile.collectibles[7].state is None


@pytest.mark.parametrize("payload", [
    None,
    [],
    "profile",
    {"profileCollectibles": []},
    {"profileCollectibles": {"data": 5}},
    {"profileRecords": {"data": {"records": ["x"]}}},
    {"profileRecords": {"data": {"records": {"abc": {"state": 0}}}}},
    {"profileCollectibles": {"data": {"collectibles": {"1": 0}}}},
])
def test_profile_structural_errors(payload):
    with pytest.raises(ProfileFormatError):
        ProfileSnapshot.from_response(payload)


def test_manifest_from_dict_round_trip():
    raw = {
        "collectibles": {
            "1001": {"hash": 1001, "name": "Heretic", "icon": "/img/a.png", "itemType": 3, "itemSubType": 9},
        },
        "records": {"2001": {"hash": 2001, "name": "Dredgen", "hasTitle": True}},
    }
    manifest = Manifest.from_dict(raw)
    assert manifest.collectibles[1001] == ManifestDefinition(
        hash=1001, name="Heretic", icon="/img/a.png", item_type=3, item_sub_type=9
    )
    assert manifest.records[2001].has_title is True
    assert Manifest.from_dict(manifest.to_dict()) == manifest


def test_manifest_definition_ignores_non_bool_has_title():
    definition = ManifestDefinition.from_dict(1, {"name": "Rivensbane", "hasTitle": "true"})
    assert definition.has_title is None
    assert definition.icon is None


def test_manifest_structural_errors():
    with pytest.raises(ManifestFormatError):
        Manifest.from_dict([])
    with pytest.raises(ManifestFormatError):
        Manifest.from_dict({"collectibles": ["x"]})
    with pytest.raises(ManifestFormatError):
        Manifest.from_dict({"records": {"not-a-hash": {"name": "x"}}})


def test_parse_definitions_lenient_skips_invalid_hashes():
    raw = {"1": {"name": "Heretic"}, "not-a-hash": {"name": "x"}, "2": "junk"}
    definitions = parse_definitions(raw, "collectibles.json", strict=False)
    assert list(definitions) == [1]
    assert definitions[1].name == "Heretic"


def test_rarity_entry_defaults_for_missing_numbers():
    entry = RarityEntry.from_dict({"name": "Unknown"}, Category.EMBLEMS)
    assert entry.total_redeemed == 0
    assert entry.global_rarity == 100.0
    assert entry.adjusted_rarity == 100.0


def test_result_item_to_dict_uses_wire_names():
    item = ResultItem(name="Heretic", icon=None, hash=1, total_redeemed=5, global_rarity=3.4, adjusted_rarity=6.8)
    assert item.to_dict() == {
        "name": "Heretic",
        "icon": None,
        "hash": 1,
        "totalRedeemed": 5,
        "globalRarity": 3.4,
        "adjustedRarity": 6.8,
    }
