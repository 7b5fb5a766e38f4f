"""Four-factor draft analyzer (meta, counter, role synergy, pro popularity)."""
from typing import Iterable, Optional

from dota_draft.models.draft import DraftState
from dota_draft.models.hero import Hero
from dota_draft.models.recommendations import BasicSuggestion, ConfidenceLevel
from dota_draft.repositories.hero_repository import HeroRepository
from dota_draft.services.scorers import MatchupCalculator, MetaScorer
from dota_draft.services.synergy_service import SynergyService
from dota_draft.utils.roles import CARRY, INITIATOR, SUPPORT, matches_role_filter


class BasicDraftAnalyzer:
    """Lightweight alternative to the full suggestion engine."""

    WEIGHTS = {
        "meta": 0.20,
        "counter": 0.40,
        "synergy": 0.30,
        "pro": 0.10,
    }

    ROLE_REASONS = {
        CARRY: "Strong late-game potential",
        SUPPORT: "Provides team utility",
        INITIATOR: "Good team fight initiation",
    }

    def __init__(
        self,
        repository: HeroRepository,
        matchups: Optional[MatchupCalculator] = None,
        synergy: Optional[SynergyService] = None,
    ):
        self.repository = repository
        self.matchups = matchups if matchups is not None else MatchupCalculator()
        self.meta_scorer = MetaScorer(repository)
        self.synergy_service = synergy if synergy is not None else SynergyService()

    def suggest(
        self,
        draft_state: DraftState,
        role_filter: Optional[Iterable[str]] = None,
        limit: int = 10,
    ) -> list[BasicSuggestion]:
        """Rank undrafted heroes by the four-factor score."""
        if limit <= 0:
            return []

        picked = draft_state.picked_ids
        role_filter = list(role_filter or [])
        your_team = draft_state.your_picks
        enemy_team = draft_state.enemy_picks

        suggestions = [
            self._score_hero(hero, your_team, enemy_team)
            for hero in self.repository.heroes
            if hero.id not in picked and matches_role_filter(hero, role_filter)
        ]
        suggestions.sort(key=lambda s: (-s.score, s.hero.id))
        return suggestions[:limit]

    def _score_hero(self, hero: Hero, your_team: list[Hero], enemy_team: list[Hero]) -> BasicSuggestion:
        scores = {
            "meta": self.meta_scorer.get_meta_score(hero) / 100,
            "counter": self.matchups.get_counter_score(hero.id, enemy_team) / 100,
            "synergy": self.synergy_service.role_synergy(hero, your_team),
            "pro": self.repository.pick_share(hero.id) / 100,
        }
        final_score = sum(scores[name] * weight for name, weight in self.WEIGHTS.items())

        reasoning, counters, synergies = self._generate_reasoning(hero, your_team, enemy_team, scores)
        return BasicSuggestion(
            hero=hero,
            score=round(final_score, 3),
            win_rate=self.repository.hero_win_rate(hero.id),
            confidence=self.confidence_level(final_score, len(enemy_team)),
            reasoning=reasoning,
            counters=counters,
            synergies=synergies,
        )

    @staticmethod
    def confidence_level(score: float, enemy_pick_count: int) -> ConfidenceLevel:
        """More enemy picks means more matchup evidence behind the score."""
        if enemy_pick_count >= 4 and score > 0.7:
            return "high"
        if enemy_pick_count >= 2 and score > 0.6:
            return "medium"
        return "low"

    def _generate_reasoning(
        self,
        hero: Hero,
        your_team: list[Hero],
        enemy_team: list[Hero],
        scores: dict[str, float],
    ) -> tuple[list[str], list[str], list[str]]:
        reasoning: list[str] = []
        counters: list[str] = []
        synergies: list[str] = []

        if scores["meta"] > 0.7:
            reasoning.append("Strong in current meta")
        elif scores["meta"] < 0.4:
            reasoning.append("Below average meta performance")

        if scores["counter"] > 0.65:
            reasoning.append("Good matchups against enemy picks")
            counters.extend(f"Effective vs {enemy.localized_name}" for enemy in enemy_team)
        elif scores["counter"] < 0.45:
            reasoning.append("Difficult matchups against enemy team")

        if scores["synergy"] > 0.6:
            reasoning.append("Good synergy with team composition")
            synergies.extend(f"Synergizes with {mate.localized_name}" for mate in your_team)

        for role, text in self.ROLE_REASONS.items():
            if hero.has_role(role):
                reasoning.append(text)

        return reasoning, counters, synergies
