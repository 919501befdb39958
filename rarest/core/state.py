"""Collectible ownership and record completion bitfields."""

from __future__ import annotations

from enum import IntFlag
from typing import Any


class CollectibleState(IntFlag):
    """DestinyCollectibleState."""

    NONE = 0
    NOT_ACQUIRED = 1
    OBSCURED = 2
    INVISIBLE = 4
    CANNOT_AFFORD_MATERIAL_REQUIREMENTS = 8
    INVENTORY_SPACE_UNAVAILABLE = 16
    UNIQUENESS_VIOLATION = 32
    PURCHASE_DISABLED = 64


class RecordState(IntFlag):
    """DestinyRecordState."""

    NONE = 0
    RECORD_REDEEMED = 1
    REWARD_UNAVAILABLE = 2
    OBJECTIVE_NOT_COMPLETED = 4
    OBSCURED = 8
    INVISIBLE = 16
    ENTITLEMENT_UNOWNED = 32
    CAN_EQUIP_TITLE = 64


def _state_bits(state: Any) -> int | None:
    if isinstance(state, bool) or not isinstance(state, int):
        return None
    return int(state)


def is_owned(state: Any) -> bool:
    """True when the collectible's NOT_ACQUIRED bit is clear."""
    bits = _state_bits(state)
    if bits is None:
        return False
    return not bits & CollectibleState.NOT_ACQUIRED


def is_completed(state: Any) -> bool:
    """True when the record's OBJECTIVE_NOT_COMPLETED bit is clear."""
    bits = _state_bits(state)
    if bits is None:
        return False
    return not bits & RecordState.OBJECTIVE_NOT_COMPLETED
