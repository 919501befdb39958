"""Display-name normalization for rarity lookups."""

from __future__ import annotations

import re
from typing import Any

_WHITESPACE_RE = re.compile(r"[\s\u00a0]+")


def normalize_name(name: Any) -> str:
    """Return the canonical lookup key for a display name.

    Lower-cases, collapses whitespace runs to a single space and trims.
    ``None`` and empty input normalize to ``""``, which is never a valid key.
    """
    if name is None:
        return ""
    if not isinstance(name, str):
        name = str(name)
    return _WHITESPACE_RE.sub(" ", name.lower()).strip()
