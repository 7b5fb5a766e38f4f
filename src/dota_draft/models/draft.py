"""Draft state and game context models."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Literal, Optional

from dota_draft.models.hero import Hero

TEAM_SIZE = 5
TOTAL_PICKS = TEAM_SIZE * 2

Playstyle = Literal["aggressive", "defensive", "balanced"]
ItemStrategy = Literal["early", "scaling", "utility"]
TeamSide = Literal["your", "enemy"]


class DraftPhase(str, Enum):
    """Phases of an all-pick draft."""

    PICK = "pick"
    COMPLETED = "completed"


def _empty_team() -> list[Optional[Hero]]:
    return [None] * TEAM_SIZE


@dataclass
class DraftState:
    """Caller-owned draft state: 5 slots per team.

    The suggestion engine only reads this. Mutations happen between
    calls through ``add_hero`` / ``remove_hero``.
    """

    your_team: list[Optional[Hero]] = field(default_factory=_empty_team)
    enemy_team: list[Optional[Hero]] = field(default_factory=_empty_team)
    current_phase: DraftPhase = DraftPhase.PICK
    current_pick: int = 0  # 0-10

    @classmethod
    def empty(cls) -> "DraftState":
        return cls()

    @property
    def your_picks(self) -> list[Hero]:
        """Heroes picked by your team, in slot order."""
        return [h for h in self.your_team if h is not None]

    @property
    def enemy_picks(self) -> list[Hero]:
        """Heroes picked by the enemy team, in slot order."""
        return [h for h in self.enemy_team if h is not None]

    @property
    def picked_ids(self) -> set[int]:
        """Ids of every hero present in either team."""
        return {h.id for h in self.your_picks} | {h.id for h in self.enemy_picks}

    def _slots(self, team: TeamSide) -> list[Optional[Hero]]:
        if team == "your":
            return self.your_team
        if team == "enemy":
            return self.enemy_team
        raise ValueError(f"Unknown team: {team}")

    def add_hero(self, hero: Hero, team: TeamSide, slot: int) -> None:
        """Place a hero in a slot and advance the pick counter.

        Raises ValueError if the hero is already drafted elsewhere.
        """
        slots = self._slots(team)
        if not 0 <= slot < TEAM_SIZE:
            raise ValueError(f"Slot must be 0-{TEAM_SIZE - 1}, got {slot}")
        current = slots[slot]
        if hero.id in self.picked_ids and (current is None or current.id != hero.id):
            raise ValueError(f"Hero {hero.localized_name} is already drafted")

        slots[slot] = hero
        self.current_pick = min(self.current_pick + 1, TOTAL_PICKS)
        if len(self.your_picks) + len(self.enemy_picks) >= TOTAL_PICKS:
            self.current_phase = DraftPhase.COMPLETED

    def remove_hero(self, team: TeamSide, slot: int) -> None:
        """Clear a slot; the draft returns to the pick phase."""
        slots = self._slots(team)
        if not 0 <= slot < TEAM_SIZE:
            raise ValueError(f"Slot must be 0-{TEAM_SIZE - 1}, got {slot}")
        slots[slot] = None
        self.current_phase = DraftPhase.PICK

    def progress(self) -> dict:
        """Pick counts and completion percentage."""
        your_count = len(self.your_picks)
        enemy_count = len(self.enemy_picks)
        total = your_count + enemy_count
        return {
            "your_team_picks": your_count,
            "enemy_team_picks": enemy_count,
            "total_picks": total,
            "progress": total / TOTAL_PICKS * 100,
        }


@dataclass(frozen=True)
class GameContext:
    """Per-query preferences. ``None`` means no preference."""

    expected_duration: Optional[float] = None  # minutes
    preferred_lanes: Optional[tuple[int, ...]] = None  # 1-5
    playstyle: Optional[Playstyle] = None
    item_strategy: Optional[ItemStrategy] = None

    @property
    def is_aggressive(self) -> bool:
        return self.playstyle == "aggressive"
