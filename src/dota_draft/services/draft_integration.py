"""Scenario presets and post-filters on top of the suggestion engine."""
import dataclasses
import logging
from typing import Iterable, Literal, Optional

from dota_draft.models.draft import DraftState, GameContext
from dota_draft.models.hero import Hero
from dota_draft.models.recommendations import (
    GamePhase,
    HeroAnalysis,
    LaneAssignment,
    ProPattern,
    ScoreBreakdown,
    Suggestion,
    TimingWindow,
)
from dota_draft.services.suggestion_engine import SuggestionEngine
from dota_draft.utils.roles import POSITION_NAMES

logger = logging.getLogger(__name__)

Scenario = Literal["early_game", "late_game", "team_fight", "push_strategy", "defensive"]

SCENARIO_CONTEXTS: dict[str, GameContext] = {
    "early_game": GameContext(expected_duration=25, playstyle="aggressive", item_strategy="early"),
    "late_game": GameContext(expected_duration=60, playstyle="defensive", item_strategy="scaling"),
    "team_fight": GameContext(expected_duration=40, playstyle="aggressive", item_strategy="utility"),
    "push_strategy": GameContext(expected_duration=35, playstyle="aggressive", item_strategy="early"),
    "defensive": GameContext(expected_duration=50, playstyle="defensive", item_strategy="utility"),
}

PHASE_CONTEXTS: dict[str, GameContext] = {
    "early": GameContext(expected_duration=25, playstyle="aggressive", item_strategy="early"),
    "mid": GameContext(expected_duration=40, playstyle="balanced", item_strategy="utility"),
    "late": GameContext(expected_duration=60, playstyle="balanced", item_strategy="scaling"),
}

FOCUSED_LIMIT = 5
COUNTER_THRESHOLD = 0.6
SYNERGY_THRESHOLD = 0.6
LANE_CONFIDENCE_THRESHOLD = 0.6
WINDOW_POWER_THRESHOLD = 0.6


def context_for_scenario(scenario: str) -> GameContext:
    """Preset context for a canned scenario (no preference if unknown)."""
    return SCENARIO_CONTEXTS.get(scenario, GameContext())


class DraftIntegration:
    """Wraps the engine with option toggles, scenarios and focused views."""

    def __init__(self, engine: SuggestionEngine):
        self.engine = engine

    def get_enhanced_recommendations(
        self,
        draft_state: DraftState,
        context: Optional[GameContext] = None,
        role_filter: Optional[Iterable[str]] = None,
        limit: int = 10,
        include_item_builds: bool = True,
        include_lane_optimization: bool = True,
        include_timing_analysis: bool = True,
        include_pro_patterns: bool = True,
    ) -> list[Suggestion]:
        """Suggestions with unrequested artifacts stripped.

        Returns an empty list (logged) rather than raising.
        """
        try:
            suggestions = self.engine.suggest(draft_state, context, role_filter, limit)
        except Exception:
            logger.exception("Error generating enhanced recommendations")
            return []

        return [
            dataclasses.replace(
                s,
                item_builds=s.item_builds if include_item_builds else [],
                lane_assignments=s.lane_assignments if include_lane_optimization else [],
                timing_windows=s.timing_windows if include_timing_analysis else [],
                pro_patterns=s.pro_patterns if include_pro_patterns else ProPattern.empty(),
            )
            for s in suggestions
        ]

    def analyze_hero_in_depth(
        self,
        hero: Hero,
        context: Optional[GameContext] = None,
    ) -> Optional[HeroAnalysis]:
        try:
            return self.engine.analyze_hero(hero, context)
        except Exception:
            logger.exception(f"Error analyzing hero {hero.localized_name}")
            return None

    def get_scenario_recommendations(
        self,
        draft_state: DraftState,
        scenario: str,
        limit: int = 10,
    ) -> list[Suggestion]:
        """Suggestions under a preset scenario context (pro patterns skipped)."""
        return self.get_enhanced_recommendations(
            draft_state,
            context=context_for_scenario(scenario),
            limit=limit,
            include_pro_patterns=False,
        )

    def _full_pool(self, draft_state: DraftState, context: Optional[GameContext] = None) -> list[Suggestion]:
        """Every candidate, ranked, for the focused post-filters."""
        return self.get_enhanced_recommendations(
            draft_state,
            context=context,
            limit=len(self.engine.repository) or 1,
        )

    def get_counter_pick_recommendations(
        self,
        draft_state: DraftState,
        target_enemy: Hero,
    ) -> list[Suggestion]:
        """Heroes that counter ``target_enemy``, strongest counter first.

        Scored against the target alone, not the enemy team average. A
        reason naming the target only counts when there is no sampled
        matchup against it.
        """
        matchups = self.engine.matchups
        target_name = target_enemy.localized_name.lower()

        def target_counter(suggestion: Suggestion) -> float:
            return matchups.get_counter_score(suggestion.hero.id, [target_enemy]) / 100

        def is_counter(suggestion: Suggestion) -> bool:
            if target_counter(suggestion) > COUNTER_THRESHOLD:
                return True
            record = matchups.get_matchup(suggestion.hero.id, target_enemy.id)
            if record is not None and record.games_played >= matchups.min_games:
                return False
            return any(target_name in r.lower() for r in suggestion.reasons)

        pool = [s for s in self._full_pool(draft_state) if is_counter(s)]
        pool.sort(key=lambda s: -target_counter(s))
        return pool[:FOCUSED_LIMIT]

    def get_synergy_recommendations(
        self,
        draft_state: DraftState,
        focus_hero: Optional[Hero] = None,
    ) -> list[Suggestion]:
        """Heroes with high synergy factors, best combined synergy first."""

        def has_synergy(suggestion: Suggestion) -> bool:
            b = suggestion.breakdown
            if max(b.synergy, b.ml_synergy, b.item_synergy) > SYNERGY_THRESHOLD:
                return True
            if focus_hero is not None:
                return any("synerg" in r.lower() for r in suggestion.reasons)
            return False

        def combined(suggestion: Suggestion) -> float:
            b = suggestion.breakdown
            return b.synergy + b.ml_synergy + b.item_synergy

        pool = [s for s in self._full_pool(draft_state) if has_synergy(s)]
        pool.sort(key=lambda s: -combined(s))
        return pool[:FOCUSED_LIMIT]

    def get_lane_recommendations(self, draft_state: DraftState, lane: int) -> list[Suggestion]:
        """Heroes that would be confidently assigned to ``lane``."""
        if lane not in POSITION_NAMES:
            raise ValueError(f"Lane must be 1-5, got {lane}")

        def lane_confidence(suggestion: Suggestion) -> float:
            assignment = suggestion.lane_for_hero()
            return assignment.confidence if assignment else 0.0

        pool = []
        for suggestion in self._full_pool(draft_state):
            assignment = suggestion.lane_for_hero()
            if assignment and assignment.position == lane and assignment.confidence > LANE_CONFIDENCE_THRESHOLD:
                pool.append(suggestion)
        pool.sort(key=lambda s: -lane_confidence(s))
        return pool[:FOCUSED_LIMIT]

    def get_timing_recommendations(self, draft_state: DraftState, phase: GamePhase) -> list[Suggestion]:
        """Heroes strongest in the given game phase."""
        if phase not in PHASE_CONTEXTS:
            raise ValueError(f"Unknown phase: {phase}")

        def phase_power(suggestion: Suggestion) -> float:
            window = suggestion.window(phase)
            return window.power_level if window else 0.0

        pool = [
            s for s in self._full_pool(draft_state, PHASE_CONTEXTS[phase])
            if phase_power(s) > WINDOW_POWER_THRESHOLD
        ]
        pool.sort(key=lambda s: -phase_power(s))
        return pool[:FOCUSED_LIMIT]


def format_score_breakdown(breakdown: ScoreBreakdown) -> dict[str, int]:
    """Breakdown as whole percentages with display labels."""
    labels = {
        "meta": "Meta Score",
        "counter": "Counter Score",
        "synergy": "Synergy Score",
        "item_synergy": "Item Synergy",
        "lane_optimization": "Lane Optimization",
        "timing": "Timing Score",
        "pro_pattern": "Pro Pattern",
        "ml_synergy": "ML Synergy",
    }
    values = breakdown.as_dict()
    return {label: round(values[name] * 100) for name, label in labels.items()}


def format_timing_windows(windows: list[TimingWindow]) -> list[dict]:
    return [
        {
            "phase": w.phase.capitalize(),
            "timing": f"{w.start}-{w.end} min",
            "strength": round(w.power_level * 100),
            "key_items": ", ".join(w.key_items),
            "objectives": ", ".join(w.objectives),
        }
        for w in windows
    ]


def format_lane_assignments(assignments: list[LaneAssignment]) -> list[dict]:
    return [
        {
            "position": POSITION_NAMES[a.position],
            "hero": a.hero.localized_name,
            "confidence": round(a.confidence * 100),
            "reasons": ", ".join(a.reasons),
        }
        for a in assignments
    ]
