"""Hero, statistics and matchup models."""

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Optional

BRACKETS = range(1, 9)  # Herald (1) .. Immortal (8)


class PrimaryAttribute(str, Enum):
    """Hero primary attribute (OpenDota short codes)."""

    STRENGTH = "str"
    AGILITY = "agi"
    INTELLIGENCE = "int"
    UNIVERSAL = "all"


class AttackType(str, Enum):
    """Hero attack type."""

    MELEE = "Melee"
    RANGED = "Ranged"


@dataclass(frozen=True)
class Hero:
    """A selectable hero. Never mutated after load."""

    id: int
    name: str  # Internal name, e.g. "antimage"
    localized_name: str
    primary_attr: PrimaryAttribute
    attack_type: AttackType
    roles: tuple[str, ...] = ()
    img: str = ""
    icon: str = ""

    def has_role(self, role: str) -> bool:
        return role in self.roles

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Hero":
        """Build a hero from an OpenDota hero record.

        The internal name is stored without the ``npc_dota_hero_`` prefix.
        """
        name = data.get("name") or ""
        if name.startswith("npc_dota_hero_"):
            name = name[len("npc_dota_hero_"):]
        return cls(
            id=int(data["id"]),
            name=name,
            localized_name=data.get("localized_name") or name,
            primary_attr=PrimaryAttribute(data.get("primary_attr", "all")),
            attack_type=AttackType(data.get("attack_type", "Melee")),
            roles=tuple(data.get("roles") or ()),
            img=data.get("img") or "",
            icon=data.get("icon") or "",
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "localized_name": self.localized_name,
            "primary_attr": self.primary_attr.value,
            "attack_type": self.attack_type.value,
            "roles": list(self.roles),
            "img": self.img,
            "icon": self.icon,
        }


def _as_int(value: Any) -> int:
    """Coerce a possibly missing/None/str count to int (0 on failure)."""
    try:
        return int(value or 0)
    except (TypeError, ValueError):
        return 0


def _as_int_list(value: Any) -> tuple[int, ...]:
    if not isinstance(value, (list, tuple)):
        return ()
    return tuple(_as_int(v) for v in value)


@dataclass(frozen=True)
class HeroStatistics:
    """Aggregate pick/win statistics for one hero (one snapshot)."""

    hero_id: int
    # Public matches
    pub_pick: int = 0
    pub_win: int = 0
    pub_pick_trend: tuple[int, ...] = ()
    pub_win_trend: tuple[int, ...] = ()
    # Professional matches
    pro_pick: int = 0
    pro_win: int = 0
    pro_ban: int = 0
    # Turbo matches
    turbo_picks: int = 0
    turbo_wins: int = 0
    turbo_picks_trend: tuple[int, ...] = ()
    turbo_wins_trend: tuple[int, ...] = ()
    # Skill brackets 1-8 -> count
    bracket_picks: dict[int, int] = field(default_factory=dict)
    bracket_wins: dict[int, int] = field(default_factory=dict)

    @property
    def total_picks(self) -> int:
        """Public + professional + all bracket picks (turbo excluded)."""
        return self.pub_pick + self.pro_pick + sum(self.bracket_picks.values())

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "HeroStatistics":
        """Build statistics from an OpenDota ``heroStats`` row.

        Missing or malformed counts become 0 rather than raising.
        """
        return cls(
            hero_id=int(data["id"]),
            pub_pick=_as_int(data.get("pub_pick")),
            pub_win=_as_int(data.get("pub_win")),
            pub_pick_trend=_as_int_list(data.get("pub_pick_trend")),
            pub_win_trend=_as_int_list(data.get("pub_win_trend")),
            pro_pick=_as_int(data.get("pro_pick")),
            pro_win=_as_int(data.get("pro_win")),
            pro_ban=_as_int(data.get("pro_ban")),
            turbo_picks=_as_int(data.get("turbo_picks")),
            turbo_wins=_as_int(data.get("turbo_wins")),
            turbo_picks_trend=_as_int_list(data.get("turbo_picks_trend")),
            turbo_wins_trend=_as_int_list(data.get("turbo_wins_trend")),
            bracket_picks={b: _as_int(data.get(f"{b}_pick")) for b in BRACKETS},
            bracket_wins={b: _as_int(data.get(f"{b}_win")) for b in BRACKETS},
        )


@dataclass(frozen=True)
class MatchupRecord:
    """Historical result of ``hero_id`` against ``opponent_id``."""

    hero_id: int
    opponent_id: int
    games_played: int
    wins: int

    @classmethod
    def from_opendota(cls, hero_id: int, row: dict[str, Any]) -> Optional["MatchupRecord"]:
        """Convert an OpenDota ``/heroes/{id}/matchups`` row.

        Rows without an opponent id are dropped (returns None).
        """
        opponent = row.get("hero_id")
        if opponent is None:
            return None
        return cls(
            hero_id=hero_id,
            opponent_id=int(opponent),
            games_played=_as_int(row.get("games_played", row.get("games"))),
            wins=_as_int(row.get("wins")),
        )
