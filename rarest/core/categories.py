"""Rarity categories and Destiny item-type tables.

The numeric codes mirror Bungie's ``DestinyItemType`` and
``DestinyItemSubType`` enums. Only the codes that drive disambiguation or
category validation are declared.
"""

from __future__ import annotations

from enum import IntEnum, StrEnum


class Category(StrEnum):
    """Rarity corpus categories, in corpus load order."""

    EMBLEMS = "emblems"
    TITLES = "titles"
    SHADERS = "shaders"
    EMOTES = "emotes"
    FINISHERS = "finishers"
    TRANSMAT_EFFECTS = "transmat-effects"
    SHIPS = "ships"
    SPARROWS = "sparrows"
    GHOST_SHELLS = "ghost-shells"
    GHOST_PROJECTIONS = "ghost-projections"
    WEAPON_ORNAMENTS = "weapon-ornaments"
    ARMOR_ORNAMENTS = "armor-ornaments"
    WEAPON_MODS = "weapon-mods"
    ARMOR_MODS = "armor-mods"
    CONSUMABLES = "consumables"
    VEHICLES = "vehicles"
    AUTO_RIFLES = "auto-rifles"
    HAND_CANNONS = "hand-cannons"
    PULSE_RIFLES = "pulse-rifles"
    SCOUT_RIFLES = "scout-rifles"
    FUSION_RIFLES = "fusion-rifles"
    SNIPER_RIFLES = "sniper-rifles"
    SHOTGUNS = "shotguns"
    SIDEARMS = "sidearms"
    SUBMACHINE_GUNS = "submachine-guns"
    MACHINE_GUNS = "machine-guns"
    ROCKET_LAUNCHERS = "rocket-launchers"
    GRENADE_LAUNCHERS = "grenade-launchers"
    LINEAR_FUSION_RIFLES = "linear-fusion-rifles"
    TRACE_RIFLES = "trace-rifles"
    BOWS = "bows"
    GLAIVES = "glaives"
    SWORDS = "swords"
    OTHER = "other"  # Synthetic bucket for unmatched items

    @property
    def label(self) -> str:
        """Human-readable name ("Transmat Effects")."""
        return self.value.replace("-", " ").title()

    @classmethod
    def parse(cls, value: object) -> "Category | None":
        """Return the member for ``value`` or None when it is not a category."""
        try:
            return cls(value)
        except ValueError:
            return None


# Categories backed by a rarity file; OTHER is never loaded.
CORPUS_CATEGORIES: tuple[Category, ...] = tuple(c for c in Category if c is not Category.OTHER)


class ItemType(IntEnum):
    """Subset of DestinyItemType."""

    NONE = 0
    CURRENCY = 1
    ARMOR = 2
    WEAPON = 3
    MESSAGE = 7
    ENGRAM = 8
    CONSUMABLE = 9
    EXCHANGE_MATERIAL = 10
    MISSION_REWARD = 11
    QUEST_STEP = 12
    QUEST_STEP_COMPLETE = 13
    EMBLEM = 14
    QUEST = 15
    SUBCLASS = 16
    CLAN_BANNER = 17
    AURA = 18
    MOD = 19
    DUMMY = 20
    SHIP = 21
    VEHICLE = 22
    EMOTE = 23
    GHOST = 24
    PACKAGE = 25
    BOUNTY = 26
    WRAPPER = 27
    SEASONAL_ARTIFACT = 28
    FINISHER = 29
    PATTERN = 30


class ItemSubType(IntEnum):
    """Weapon members of DestinyItemSubType."""

    AUTO_RIFLE = 6
    SHOTGUN = 7
    MACHINEGUN = 8
    HAND_CANNON = 9
    ROCKET_LAUNCHER = 10
    FUSION_RIFLE = 11
    SNIPER_RIFLE = 12
    PULSE_RIFLE = 13
    SCOUT_RIFLE = 14
    SIDEARM = 17
    SWORD = 18
    FUSION_RIFLE_LINE = 22
    GRENADE_LAUNCHER = 23
    SUBMACHINE_GUN = 24
    TRACE_RIFLE = 25
    BOW = 31
    GLAIVE = 33


SUBTYPE_CATEGORIES: dict[ItemSubType, Category] = {
    ItemSubType.AUTO_RIFLE: Category.AUTO_RIFLES,
    ItemSubType.SHOTGUN: Category.SHOTGUNS,
    ItemSubType.MACHINEGUN: Category.MACHINE_GUNS,
    ItemSubType.HAND_CANNON: Category.HAND_CANNONS,
    ItemSubType.ROCKET_LAUNCHER: Category.ROCKET_LAUNCHERS,
    ItemSubType.FUSION_RIFLE: Category.FUSION_RIFLES,
    ItemSubType.SNIPER_RIFLE: Category.SNIPER_RIFLES,
    ItemSubType.PULSE_RIFLE: Category.PULSE_RIFLES,
    ItemSubType.SCOUT_RIFLE: Category.SCOUT_RIFLES,
    ItemSubType.SIDEARM: Category.SIDEARMS,
    ItemSubType.SWORD: Category.SWORDS,
    ItemSubType.FUSION_RIFLE_LINE: Category.LINEAR_FUSION_RIFLES,
    ItemSubType.GRENADE_LAUNCHER: Category.GRENADE_LAUNCHERS,
    ItemSubType.SUBMACHINE_GUN: Category.SUBMACHINE_GUNS,
    ItemSubType.TRACE_RIFLE: Category.TRACE_RIFLES,
    ItemSubType.BOW: Category.BOWS,
    ItemSubType.GLAIVE: Category.GLAIVES,
}

WEAPON_CATEGORIES: frozenset[Category] = frozenset(SUBTYPE_CATEGORIES.values())

# Item types that own exactly one rarity category and should prefer it
# when a name collides across categories. There is no title item type:
# titles come from records and always land in the titles bucket.
ITEM_TYPE_PREFERRED_CATEGORY: dict[ItemType, Category] = {
    ItemType.EMBLEM: Category.EMBLEMS,
}

# Categories an item type may legitimately resolve to (e.g. a mod never
# lands in emblems). Types absent here are unconstrained.
ITEM_TYPE_ALLOWED_CATEGORIES: dict[ItemType, frozenset[Category]] = {
    ItemType.ARMOR: frozenset({Category.ARMOR_ORNAMENTS}),
    ItemType.WEAPON: WEAPON_CATEGORIES | {Category.WEAPON_ORNAMENTS},
    ItemType.CONSUMABLE: frozenset({Category.CONSUMABLES}),
    ItemType.EMBLEM: frozenset({Category.EMBLEMS}),
    ItemType.MOD: frozenset({Category.WEAPON_MODS, Category.ARMOR_MODS}),
    ItemType.SHIP: frozenset({Category.SHIPS}),
    ItemType.VEHICLE: frozenset({Category.VEHICLES, Category.SPARROWS}),
    ItemType.EMOTE: frozenset({Category.EMOTES}),
    ItemType.GHOST: frozenset({Category.GHOST_SHELLS, Category.GHOST_PROJECTIONS}),
    ItemType.FINISHER: frozenset({Category.FINISHERS}),
}


def _as_item_type(value: int | None) -> ItemType | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        return ItemType(value)
    except ValueError:
        return None


def subtype_category(item_sub_type: int | None) -> Category | None:
    """Weapon category for a DestinyItemSubType code, if it is a weapon."""
    if item_sub_type is None or isinstance(item_sub_type, bool):
        return None
    try:
        return SUBTYPE_CATEGORIES.get(ItemSubType(item_sub_type))
    except ValueError:
        return None


def preferred_category(item_type: int | None) -> Category | None:
    item = _as_item_type(item_type)
    if item is None:
        return None
    return ITEM_TYPE_PREFERRED_CATEGORY.get(item)


def is_category_valid(item_type: int | None, category: Category | str) -> bool:
    """Return False when ``category`` is unreachable from ``item_type``."""
    item = _as_item_type(item_type)
    if item is None:
        return True
    allowed = ITEM_TYPE_ALLOWED_CATEGORIES.get(item)
    if allowed is None:
        return True
    return category in allowed
