"""Utility modules for dota_draft."""

from dota_draft.utils.roles import (
    KNOWN_ROLES,
    POSITION_NAMES,
    POSITIONS,
    ROLE_POSITIONS,
    canonical_positions,
    is_known_role,
    matches_role_filter,
    normalize_role,
)

__all__ = [
    "KNOWN_ROLES",
    "POSITION_NAMES",
    "POSITIONS",
    "ROLE_POSITIONS",
    "canonical_positions",
    "is_known_role",
    "matches_role_filter",
    "normalize_role",
]
