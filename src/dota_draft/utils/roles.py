"""Hero role tags and lane positions.

Role tags are an open set (OpenDota may add roles); ``KNOWN_ROLES`` is the
set the API accepts in a role filter today.
"""

from typing import Iterable, Optional

from dota_draft.models.hero import Hero

CARRY = "Carry"
SUPPORT = "Support"
INITIATOR = "Initiator"
DISABLER = "Disabler"
JUNGLER = "Jungler"
DURABLE = "Durable"
ESCAPE = "Escape"
PUSHER = "Pusher"
NUKER = "Nuker"

KNOWN_ROLES = frozenset({
    CARRY, SUPPORT, INITIATOR, DISABLER, JUNGLER, DURABLE, ESCAPE, PUSHER, NUKER,
})

SUPPORT_CLASS_ROLES = frozenset({SUPPORT, DISABLER})
CORE_CLASS_ROLES = frozenset({CARRY, NUKER, PUSHER})

POSITIONS = (1, 2, 3, 4, 5)
FALLBACK_POSITION = 4

# Canonical position for a role tag, in claim priority order
ROLE_POSITIONS: dict[str, int] = {
    CARRY: 1,
    NUKER: 2,
    INITIATOR: 3,
    SUPPORT: 5,
}

POSITION_NAMES: dict[int, str] = {
    1: "Carry",
    2: "Mid",
    3: "Offlane",
    4: "Soft Support",
    5: "Hard Support",
}

_ROLE_LOOKUP = {role.lower(): role for role in KNOWN_ROLES}


def normalize_role(role: Optional[str]) -> Optional[str]:
    """Normalize a role tag to its canonical capitalization.

    Unknown tags are returned stripped but otherwise unchanged so new
    roles keep working.
    """
    if not role:
        return None
    stripped = role.strip()
    if not stripped:
        return None
    return _ROLE_LOOKUP.get(stripped.lower(), stripped)


def is_known_role(role: str) -> bool:
    return normalize_role(role) in KNOWN_ROLES


def matches_role_filter(hero: Hero, role_filter: Optional[Iterable[str]]) -> bool:
    """True when the filter is empty or shares at least one role with the hero."""
    wanted = {normalize_role(r) for r in role_filter or ()} - {None}
    if not wanted:
        return True
    return any(role in wanted for role in hero.roles)


def canonical_positions(hero: Hero) -> list[int]:
    """Positions the hero's role tags claim, in priority order."""
    return [pos for role, pos in ROLE_POSITIONS.items() if hero.has_role(role)]


def is_support_class(hero: Hero) -> bool:
    return any(role in SUPPORT_CLASS_ROLES for role in hero.roles)


def is_core_class(hero: Hero) -> bool:
    return any(role in CORE_CLASS_ROLES for role in hero.roles)
