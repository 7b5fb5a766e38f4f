"""Core scoring components for the suggestion engine."""
from dota_draft.services.scorers.meta_scorer import MetaScorer
from dota_draft.services.scorers.matchup_calculator import MatchupCalculator
from dota_draft.services.scorers.item_build_analyzer import ItemBuildAnalyzer
from dota_draft.services.scorers.lane_optimizer import LaneOptimizer
from dota_draft.services.scorers.timing_analyzer import TimingAnalyzer
from dota_draft.services.scorers.pro_scene_analyzer import ProSceneAnalyzer

__all__ = [
    "MetaScorer",
    "MatchupCalculator",
    "ItemBuildAnalyzer",
    "LaneOptimizer",
    "TimingAnalyzer",
    "ProSceneAnalyzer",
]
