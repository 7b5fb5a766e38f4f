"""Greedy lane assignment with conflict resolution by fallback."""
from dota_draft.models.hero import Hero, PrimaryAttribute
from dota_draft.models.recommendations import LaneAssignment
from dota_draft.utils.roles import (
    CARRY,
    FALLBACK_POSITION,
    INITIATOR,
    NUKER,
    POSITIONS,
    SUPPORT,
    canonical_positions,
)

BASE_CONFIDENCE = 0.5

# position -> (role that fits it, bonus)
ROLE_MATCH_BONUS: dict[int, tuple[str, float]] = {
    1: (CARRY, 0.4),
    2: (NUKER, 0.4),
    3: (INITIATOR, 0.4),
    4: (SUPPORT, 0.3),
    5: (SUPPORT, 0.4),
}

ATTRIBUTE_BONUS = 0.1
POSITION_ATTRIBUTES: dict[int, PrimaryAttribute] = {
    1: PrimaryAttribute.AGILITY,
    2: PrimaryAttribute.INTELLIGENCE,
    3: PrimaryAttribute.STRENGTH,
}

POSITION_REASONS: dict[int, str] = {
    1: "Strong late game scaling",
    2: "High burst damage potential",
    3: "Initiator and space creator",
    4: "Utility and roaming potential",
    5: "Strong support abilities",
}


class LaneOptimizer:
    """Assigns each hero of a team to a position 1-5.

    The assignment is order-sensitive: every hero first reserves the
    positions of its canonical roles (Carry 1, Nuker 2, Initiator 3,
    Support 5), then heroes are placed in input order. A hero takes its own
    canonical position unless an earlier hero already took it, otherwise
    the first position nobody reserved or took, otherwise position 4. Two
    heroes can therefore still share a fallback position.
    """

    def assign(self, heroes: list[Hero]) -> list[LaneAssignment]:
        reserved: set[int] = set()
        for hero in heroes:
            reserved.update(canonical_positions(hero))

        taken: set[int] = set()
        assignments = []
        for hero in heroes:
            position = self._choose_position(hero, reserved, taken)
            taken.add(position)
            assignments.append(LaneAssignment(
                position=position,
                hero=hero,
                confidence=self.position_confidence(hero, position),
                reasons=[POSITION_REASONS[position]],
            ))
        return assignments

    @staticmethod
    def _choose_position(hero: Hero, reserved: set[int], taken: set[int]) -> int:
        for position in canonical_positions(hero):
            if position not in taken:
                return position
        claimed = reserved | taken
        for position in POSITIONS:
            if position not in claimed:
                return position
        return FALLBACK_POSITION

    @staticmethod
    def position_confidence(hero: Hero, position: int) -> float:
        confidence = BASE_CONFIDENCE

        role, bonus = ROLE_MATCH_BONUS[position]
        if hero.has_role(role):
            confidence += bonus

        if POSITION_ATTRIBUTES.get(position) == hero.primary_attr:
            confidence += ATTRIBUTE_BONUS

        return min(1.0, confidence)

    def confidence_for(self, hero: Hero, team: list[Hero]) -> float:
        """Confidence of ``hero``'s assignment when appended to ``team``."""
        return self.assign([*team, hero])[-1].confidence
