"""Heuristic professional-scene patterns.

There is no professional match data source behind this; every field is
derived from the hero's role tags and the curated heuristics table.
"""
from typing import Optional

from dota_draft.models.hero import Hero
from dota_draft.models.recommendations import ProPattern
from dota_draft.services.hero_heuristics import HeroHeuristics
from dota_draft.utils.roles import SUPPORT

MAX_BAN_PRIORITY = 10
SUPPORT_FIRST_PICK_RATE = 0.3
CORE_FIRST_PICK_RATE = 0.1
BASE_SITUATIONAL_RATE = 0.4
SITUATIONAL_RATE_PER_ROLE = 0.1
COMPLEX_HERO_BONUS = 0.2
MAX_SITUATIONAL_RATE = 0.9


class ProSceneAnalyzer:
    """Builds a ``ProPattern`` proxy for a hero."""

    def __init__(self, heuristics: Optional[HeroHeuristics] = None):
        self.heuristics = heuristics or HeroHeuristics()

    def analyze(self, hero: Hero) -> ProPattern:
        return ProPattern(
            pick_order=self._role_count(hero),
            ban_priority=min(MAX_BAN_PRIORITY, self._role_count(hero) * 2),
            first_pick_rate=self.first_pick_rate(hero),
            situational_pick_rate=self.situational_rate(hero),
            pairings=self.heuristics.get_pairings(hero),
            counters=self.heuristics.get_counters(hero),
        )

    @staticmethod
    def _role_count(hero: Hero) -> int:
        return len(hero.roles) or 1

    @staticmethod
    def first_pick_rate(hero: Hero) -> float:
        # Supports are the safe blind picks
        return SUPPORT_FIRST_PICK_RATE if hero.has_role(SUPPORT) else CORE_FIRST_PICK_RATE

    def situational_rate(self, hero: Hero) -> float:
        """More roles and mechanically complex heroes are more situational."""
        rate = BASE_SITUATIONAL_RATE + self._role_count(hero) * SITUATIONAL_RATE_PER_ROLE
        if self.heuristics.in_category(hero, "complex"):
            rate += COMPLEX_HERO_BONUS
        return min(MAX_SITUATIONAL_RATE, rate)
