"""Suggestion engine combining all scoring components."""
import logging
from typing import Iterable, Optional

from dota_draft.models.draft import DraftState, GameContext
from dota_draft.models.hero import Hero
from dota_draft.models.recommendations import (
    HeroAnalysis,
    ProPattern,
    ScoreBreakdown,
    Suggestion,
)
from dota_draft.repositories.hero_repository import HeroRepository
from dota_draft.services.hero_heuristics import HeroHeuristics
from dota_draft.services.scorers import (
    ItemBuildAnalyzer,
    LaneOptimizer,
    MatchupCalculator,
    MetaScorer,
    ProSceneAnalyzer,
    TimingAnalyzer,
)
from dota_draft.services.scorers.timing_analyzer import phase_for_duration
from dota_draft.services.synergy_service import SynergyService
from dota_draft.utils.roles import CARRY, SUPPORT, matches_role_filter

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 10


class SuggestionEngine:
    """Ranks undrafted heroes with a weighted 8-factor score.

    Every factor is on the 0.0-1.0 scale (0.5 = neutral). Sub-analyzers
    that work in percentages (meta, counter) are converted at this
    boundary.
    """

    WEIGHTS = {
        "counter": 0.20,
        "synergy": 0.20,
        "meta": 0.15,
        "item_synergy": 0.15,
        "lane_optimization": 0.10,
        "timing": 0.10,
        "pro_pattern": 0.05,
        "ml_synergy": 0.05,
    }

    REASON_THRESHOLD = 0.7
    REASON_TEMPLATES = {
        "counter": "Strong counter to enemy heroes",
        "synergy": "Excellent synergy with team",
        "item_synergy": "Great item synergy potential",
        "timing": "Perfect timing window",
        "meta": "Currently meta",
    }
    DEGRADED_REASON = "Limited analysis available"

    ITEM_STRATEGY_BONUS = 0.1
    # item strategy -> role it favors
    ITEM_STRATEGY_ROLES = {"early": SUPPORT, "scaling": CARRY}

    DURATION_MATCH_BONUS = 0.1
    DURATION_MATCH_POWER = 0.7

    def __init__(
        self,
        repository: HeroRepository,
        matchups: Optional[MatchupCalculator] = None,
        heuristics: Optional[HeroHeuristics] = None,
    ):
        self.repository = repository
        self.matchups = matchups if matchups is not None else MatchupCalculator()
        self.heuristics = heuristics if heuristics is not None else HeroHeuristics()
        self.meta_scorer = MetaScorer(repository)
        self.synergy_service = SynergyService()
        self.item_analyzer = ItemBuildAnalyzer()
        self.lane_optimizer = LaneOptimizer()
        self.timing_analyzer = TimingAnalyzer()
        self.pro_analyzer = ProSceneAnalyzer(self.heuristics)

    def suggest(
        self,
        draft_state: DraftState,
        context: Optional[GameContext] = None,
        role_filter: Optional[Iterable[str]] = None,
        limit: int = DEFAULT_LIMIT,
    ) -> list[Suggestion]:
        """Generate ranked suggestions for the current draft.

        Args:
            draft_state: Current picks for both teams (read only)
            context: Game preferences; None means no preference
            role_filter: Keep only heroes sharing a role with the filter
            limit: Maximum suggestions to return

        Returns:
            Suggestions sorted by score descending. A candidate whose
            scoring fails is kept with a neutral breakdown.
        """
        context = context or GameContext()
        if limit <= 0:
            return []

        your_team = draft_state.your_picks
        enemy_team = draft_state.enemy_picks
        candidates = self.get_candidates(draft_state, role_filter)

        suggestions = []
        for hero in candidates:
            try:
                suggestion = self._build_suggestion(hero, your_team, enemy_team, context)
            except Exception:
                logger.exception(f"Scoring failed for {hero.localized_name} ({hero.id}), using neutral breakdown")
                suggestion = self._build_degraded_suggestion(hero)
            suggestions.append(suggestion)

        suggestions.sort(key=lambda s: (-s.score, s.hero.id))

        logger.info(
            f"Generated {min(len(suggestions), limit)} of {len(suggestions)} suggestions "
            f"(your team: {len(your_team)}, enemy team: {len(enemy_team)}, "
            f"role filter: {list(role_filter or [])})"
        )
        return suggestions[:limit]

    def get_candidates(
        self,
        draft_state: DraftState,
        role_filter: Optional[Iterable[str]] = None,
    ) -> list[Hero]:
        """Known heroes not in either team, restricted to the role filter.

        Picked heroes are filtered here even though callers should already
        prevent duplicates.
        """
        picked = draft_state.picked_ids
        role_filter = list(role_filter or [])
        return [
            hero
            for hero in self.repository.heroes
            if hero.id not in picked and matches_role_filter(hero, role_filter)
        ]

    def _build_suggestion(
        self,
        hero: Hero,
        your_team: list[Hero],
        enemy_team: list[Hero],
        context: GameContext,
    ) -> Suggestion:
        """Primary computation: full breakdown plus supporting artifacts."""
        breakdown = self.calculate_breakdown(hero, your_team, enemy_team, context)
        return Suggestion(
            hero=hero,
            score=self.total_score(breakdown),
            breakdown=breakdown,
            reasons=self.generate_reasons(breakdown),
            item_builds=self.item_analyzer.generate_builds(hero, context),
            lane_assignments=self.lane_optimizer.assign([*your_team, hero]),
            timing_windows=self.timing_analyzer.analyze(hero, context),
            pro_patterns=self.pro_analyzer.analyze(hero),
        )

    def _build_degraded_suggestion(self, hero: Hero) -> Suggestion:
        """Degraded computation: neutral breakdown, no artifacts."""
        breakdown = ScoreBreakdown.neutral()
        return Suggestion(
            hero=hero,
            score=self.total_score(breakdown),
            breakdown=breakdown,
            reasons=[self.DEGRADED_REASON],
            pro_patterns=ProPattern.empty(),
            degraded=True,
        )

    def calculate_breakdown(
        self,
        hero: Hero,
        your_team: list[Hero],
        enemy_team: list[Hero],
        context: GameContext,
    ) -> ScoreBreakdown:
        """Compute all 8 factors for one candidate."""
        return ScoreBreakdown(
            meta=self.meta_scorer.get_meta_score(hero) / 100,
            counter=self.matchups.get_counter_score(hero.id, enemy_team) / 100,
            synergy=self.synergy_service.role_synergy(hero, your_team),
            item_synergy=self._item_synergy_score(hero, your_team, context),
            lane_optimization=self.lane_optimizer.confidence_for(hero, your_team),
            timing=self._timing_score(hero, context),
            pro_pattern=self._pro_pattern_score(hero),
            ml_synergy=self.synergy_service.team_synergy([*your_team, hero]),
        )

    @classmethod
    def total_score(cls, breakdown: ScoreBreakdown) -> float:
        """Weighted sum of the breakdown factors."""
        values = breakdown.as_dict()
        return sum(values[name] * weight for name, weight in cls.WEIGHTS.items())

    def _item_synergy_score(self, hero: Hero, your_team: list[Hero], context: GameContext) -> float:
        score = self.item_analyzer.compute_synergy(hero, your_team)
        favored_role = self.ITEM_STRATEGY_ROLES.get(context.item_strategy)
        if favored_role and hero.has_role(favored_role):
            score += self.ITEM_STRATEGY_BONUS
        return min(1.0, score)

    def _timing_score(self, hero: Hero, context: GameContext) -> float:
        """Average window power, with a bonus when the hero peaks in the
        window an explicitly expected game length ends in."""
        windows = self.timing_analyzer.analyze(hero, context)
        score = sum(w.power_level for w in windows) / len(windows)

        if context.expected_duration is not None:
            target = self.timing_analyzer.find_window(
                windows, phase_for_duration(context.expected_duration)
            )
            if target is not None and target.power_level >= self.DURATION_MATCH_POWER:
                score += self.DURATION_MATCH_BONUS

        return min(1.0, score)

    def _pro_pattern_score(self, hero: Hero) -> float:
        pattern = self.pro_analyzer.analyze(hero)
        return (pattern.first_pick_rate + pattern.situational_pick_rate) / 2

    def generate_reasons(self, breakdown: ScoreBreakdown) -> list[str]:
        """Human-readable reasons for factors above the threshold."""
        values = breakdown.as_dict()
        return [
            text
            for factor, text in self.REASON_TEMPLATES.items()
            if values[factor] > self.REASON_THRESHOLD
        ]

    def analyze_hero(self, hero: Hero, context: Optional[GameContext] = None) -> HeroAnalysis:
        """In-depth analysis of one hero outside any draft."""
        context = context or GameContext()
        return HeroAnalysis(
            hero=hero,
            item_builds=self.item_analyzer.generate_builds(hero, context),
            lane_flexibility=self.lane_optimizer.assign([hero]),
            timing_windows=self.timing_analyzer.analyze(hero, context),
            pro_patterns=self.pro_analyzer.analyze(hero),
            ml_synergy_score=self.synergy_service.team_synergy([hero]),
            patch_trend=self._patch_trend(hero),
            meta_position=self._meta_position(hero),
            adaptability=(len(hero.roles) or 1) / 5,
        )

    def _patch_trend(self, hero: Hero) -> float:
        trend = 0.5
        if self.heuristics.in_category(hero, "popular"):
            trend += 0.2
        if self.heuristics.in_category(hero, "recently_updated"):
            trend += 0.3
        return min(1.0, trend)

    def _meta_position(self, hero: Hero) -> float:
        position = 0.5
        if self.heuristics.in_category(hero, "meta"):
            position += 0.3
        if hero.has_role(CARRY):
            position += 0.1
        if hero.has_role(SUPPORT):
            position += 0.05
        return min(1.0, position)
