"""Recommendation models for draft suggestions."""

from dataclasses import asdict, dataclass, field, fields
from typing import Literal, Optional

from dota_draft.models.hero import Hero

GamePhase = Literal["early", "mid", "late"]
ConfidenceLevel = Literal["high", "medium", "low"]

NEUTRAL_SCORE = 0.5


@dataclass
class ScoreBreakdown:
    """Per-factor scores, all on the 0.0 - 1.0 scale (0.5 = neutral)."""

    meta: float = NEUTRAL_SCORE
    counter: float = NEUTRAL_SCORE
    synergy: float = NEUTRAL_SCORE
    item_synergy: float = NEUTRAL_SCORE
    lane_optimization: float = NEUTRAL_SCORE
    timing: float = NEUTRAL_SCORE
    pro_pattern: float = NEUTRAL_SCORE
    ml_synergy: float = NEUTRAL_SCORE

    @classmethod
    def neutral(cls) -> "ScoreBreakdown":
        """All factors at the midpoint."""
        return cls()

    @classmethod
    def factor_names(cls) -> list[str]:
        return [f.name for f in fields(cls)]

    def as_dict(self) -> dict[str, float]:
        return asdict(self)


@dataclass
class ItemBuild:
    """A role-appropriate item build with timing milestones (minutes)."""

    name: str
    items: list[str]
    timing: list[int]
    effectiveness: float  # 0.0 - 1.0
    game_phase: GamePhase


@dataclass
class LaneAssignment:
    """A hero assigned to a position (1 carry .. 5 hard support)."""

    position: int
    hero: Hero
    confidence: float  # 0.0 - 1.0
    reasons: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "position": self.position,
            "hero": self.hero.to_dict(),
            "confidence": self.confidence,
            "reasons": list(self.reasons),
        }


@dataclass
class TimingWindow:
    """A game-time interval with the hero's relative power in it."""

    phase: GamePhase
    start: int
    end: int
    power_level: float  # 0.0 - 1.0
    key_items: list[str] = field(default_factory=list)
    objectives: list[str] = field(default_factory=list)


@dataclass
class HeroPairing:
    hero_id: int
    synergy: float


@dataclass
class HeroCounter:
    hero_id: int
    effectiveness: float


@dataclass
class ProPattern:
    """Heuristic proxy for professional pick/ban behaviour (not live data)."""

    pick_order: int = 0
    ban_priority: int = 0
    first_pick_rate: float = 0.0
    situational_pick_rate: float = 0.0
    pairings: list[HeroPairing] = field(default_factory=list)
    counters: list[HeroCounter] = field(default_factory=list)

    @classmethod
    def empty(cls) -> "ProPattern":
        return cls()


@dataclass
class Suggestion:
    """A ranked hero recommendation with its full score breakdown."""

    hero: Hero
    score: float
    breakdown: ScoreBreakdown
    reasons: list[str] = field(default_factory=list)
    item_builds: list[ItemBuild] = field(default_factory=list)
    lane_assignments: list[LaneAssignment] = field(default_factory=list)
    timing_windows: list[TimingWindow] = field(default_factory=list)
    pro_patterns: ProPattern = field(default_factory=ProPattern)
    degraded: bool = False  # True when the neutral fallback was used

    def lane_for_hero(self) -> Optional[LaneAssignment]:
        """The lane assignment of the suggested hero itself."""
        for assignment in self.lane_assignments:
            if assignment.hero.id == self.hero.id:
                return assignment
        return None

    def window(self, phase: GamePhase) -> Optional[TimingWindow]:
        for w in self.timing_windows:
            if w.phase == phase:
                return w
        return None

    def to_dict(self) -> dict:
        """Serialize to dictionary for JSON response."""
        return {
            "hero": self.hero.to_dict(),
            "score": self.score,
            "breakdown": self.breakdown.as_dict(),
            "reasons": list(self.reasons),
            "item_builds": [asdict(b) for b in self.item_builds],
            "lane_assignments": [a.to_dict() for a in self.lane_assignments],
            "timing_windows": [asdict(w) for w in self.timing_windows],
            "pro_patterns": asdict(self.pro_patterns),
            "degraded": self.degraded,
        }


@dataclass
class HeroAnalysis:
    """In-depth analysis of a single hero, independent of a draft."""

    hero: Hero
    item_builds: list[ItemBuild]
    lane_flexibility: list[LaneAssignment]
    timing_windows: list[TimingWindow]
    pro_patterns: ProPattern
    ml_synergy_score: float
    patch_trend: float
    meta_position: float
    adaptability: float

    def to_dict(self) -> dict:
        return {
            "hero": self.hero.to_dict(),
            "item_builds": [asdict(b) for b in self.item_builds],
            "lane_flexibility": [a.to_dict() for a in self.lane_flexibility],
            "timing_windows": [asdict(w) for w in self.timing_windows],
            "pro_patterns": asdict(self.pro_patterns),
            "ml_synergy_score": self.ml_synergy_score,
            "contextual_factors": {
                "patch_trend": self.patch_trend,
                "meta_position": self.meta_position,
                "adaptability": self.adaptability,
            },
        }


@dataclass
class BasicSuggestion:
    """Four-factor suggestion produced by the basic analyzer."""

    hero: Hero
    score: float  # 0.0 - 1.0
    win_rate: float  # percentage
    confidence: ConfidenceLevel
    reasoning: list[str] = field(default_factory=list)
    counters: list[str] = field(default_factory=list)
    synergies: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "hero": self.hero.to_dict(),
            "score": self.score,
            "win_rate": self.win_rate,
            "confidence": self.confidence,
            "reasoning": list(self.reasoning),
            "counters": list(self.counters),
            "synergies": list(self.synergies),
        }
