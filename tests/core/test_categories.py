"""Tests for category tables and validation."""

import pytest

from rarest.core.categories import (
    CORPUS_CATEGORIES,
    ITEM_TYPE_ALLOWED_CATEGORIES,
    SUBTYPE_CATEGORIES,
    WEAPON_CATEGORIES,
    Category,
    ItemSubType,
    ItemType,
    is_category_valid,
    preferred_category,
    subtype_category,
)


def test_corpus_categories_exclude_other():
    assert Category.OTHER not in CORPUS_CATEGORIES
    assert len(CORPUS_CATEGORIES) == 33
    assert CORPUS_CATEGORIES[0] is Category.EMBLEMS


@pytest.mark.parametrize("category,label", [
    (Category.EMBLEMS, "Emblems"),
    (Category.TRANSMAT_EFFECTS, "Transmat Effects"),
    (Category.LINEAR_FUSION_RIFLES, "Linear Fusion Rifles"),
    (Category.SUBMACHINE_GUNS, "Submachine Guns"),
    (Category.OTHER, "Other"),
])
def test_category_labels(category, label):
    assert category.label == label


def test_category_parse():
    assert Category.parse("hand-cannons") is Category.HAND_CANNONS
    assert Category.parse(Category.BOWS) is Category.BOWS
    assert Category.parse("hand cannons") is None


def test_weapon_categories_cover_every_subtype():
    assert len(WEAPON_CATEGORIES) == len(SUBTYPE_CATEGORIES) == 17
    assert Category.WEAPON_ORNAMENTS not in WEAPON_CATEGORIES


@pytest.mark.parametrize("sub_type,category", list(SUBTYPE_CATEGORIES.items()))
def test_subtype_category_table(sub_type, category):
    assert subtype_category(int(sub_type)) is category


@pytest.mark.parametrize("value", [None, 0, 5, 99, True])
def test_subtype_category_unknown(value):
    assert subtype_category(value) is None


def test_preferred_category():
    assert preferred_category(ItemType.EMBLEM) is Category.EMBLEMS
    assert preferred_category(14) is Category.EMBLEMS
    assert preferred_category(ItemType.WEAPON) is None
    assert preferred_category(None) is None
    assert preferred_category(999) is None


@pytest.mark.parametrize("item_type,allowed", list(ITEM_TYPE_ALLOWED_CATEGORIES.items()))
def test_allowed_categories_accept_members(item_type, allowed):
    for category in allowed:
        assert is_category_valid(int(item_type), category)
        assert is_category_valid(item_type, str(category))


@pytest.mark.parametrize("item_type", list(ITEM_TYPE_ALLOWED_CATEGORIES))
def test_allowed_categories_reject_cosmetics(item_type):
    assert is_category_valid(item_type, Category.SHADERS) is False


def test_mod_never_lands_in_emblems():
    assert is_category_valid(ItemType.MOD, Category.EMBLEMS) is False
    assert is_category_valid(ItemType.MOD, Category.ARMOR_MODS) is True


@pytest.mark.parametrize("item_type", [None, ItemType.NONE, ItemType.QUEST, 12345])
def test_unconstrained_item_types_always_pass(item_type):
    assert is_category_valid(item_type, Category.SHADERS) is True


def test_weapon_allows_weapon_ornaments():
    assert is_category_valid(ItemType.WEAPON, Category.WEAPON_ORNAMENTS)
    assert is_category_valid(ItemType.WEAPON, Category.HAND_CANNONS)
    assert not is_category_valid(ItemType.WEAPON, Category.EMBLEMS)


def test_subtype_enum_values():
    assert ItemSubType.HAND_CANNON == 9
    assert ItemSubType.GLAIVE == 33
