"""Data models for the Dota 2 Draft Advisor."""

from dota_draft.models.hero import (
    AttackType,
    Hero,
    HeroStatistics,
    MatchupRecord,
    PrimaryAttribute,
)
from dota_draft.models.draft import DraftPhase, DraftState, GameContext
from dota_draft.models.recommendations import (
    BasicSuggestion,
    HeroAnalysis,
    HeroCounter,
    HeroPairing,
    ItemBuild,
    LaneAssignment,
    ProPattern,
    ScoreBreakdown,
    Suggestion,
    TimingWindow,
)

__all__ = [
    "AttackType",
    "Hero",
    "HeroStatistics",
    "MatchupRecord",
    "PrimaryAttribute",
    "DraftPhase",
    "DraftState",
    "GameContext",
    "BasicSuggestion",
    "HeroAnalysis",
    "HeroCounter",
    "HeroPairing",
    "ItemBuild",
    "LaneAssignment",
    "ProPattern",
    "ScoreBreakdown",
    "Suggestion",
    "TimingWindow",
]
