"""Early/mid/late power windows."""
from typing import Optional

from dota_draft.models.draft import GameContext
from dota_draft.models.hero import Hero, PrimaryAttribute
from dota_draft.models.recommendations import GamePhase, TimingWindow
from dota_draft.utils.roles import CARRY, DURABLE, INITIATOR, NUKER, PUSHER, SUPPORT

DEFAULT_EXPECTED_DURATION = 40
AGGRESSIVE_EARLY_END = 12
EARLY_END = 15
MID_START, MID_END = 15, 35
LATE_START = 35
MIN_LATE_END = 60

# Per-phase additive power tables: (base, {trait: bonus})
EARLY_POWER = (0.5, {PrimaryAttribute.STRENGTH: 0.2, SUPPORT: 0.1, NUKER: 0.15})
MID_POWER = (0.6, {INITIATOR: 0.2, NUKER: 0.15, PUSHER: 0.1})
LATE_POWER = (0.5, {CARRY: 0.3, PrimaryAttribute.AGILITY: 0.15, DURABLE: 0.1})


def _power(hero: Hero, table: tuple) -> float:
    base, bonuses = table
    power = base
    for trait, bonus in bonuses.items():
        if isinstance(trait, PrimaryAttribute):
            if hero.primary_attr == trait:
                power += bonus
        elif hero.has_role(trait):
            power += bonus
    return max(0.0, min(1.0, power))


def phase_for_duration(minutes: float) -> GamePhase:
    """The window phase a game of this length ends in."""
    if minutes <= EARLY_END:
        return "early"
    if minutes <= MID_END:
        return "mid"
    return "late"


class TimingAnalyzer:
    """Produces exactly three windows (early, mid, late) for a hero."""

    def analyze(self, hero: Hero, context: GameContext) -> list[TimingWindow]:
        expected_duration = context.expected_duration or DEFAULT_EXPECTED_DURATION
        is_aggressive = context.is_aggressive

        early = TimingWindow(
            phase="early",
            start=0,
            end=AGGRESSIVE_EARLY_END if is_aggressive else EARLY_END,
            power_level=_power(hero, EARLY_POWER),
            key_items=(
                ["boots", "magic_wand", "bracer"]
                if context.item_strategy == "early"
                else ["boots", "magic_wand"]
            ),
            objectives=(
                ["Laning", "Early fights", "Tower pressure"]
                if is_aggressive
                else ["Laning", "Last hitting"]
            ),
        )
        mid = TimingWindow(
            phase="mid",
            start=MID_START,
            end=MID_END,
            power_level=_power(hero, MID_POWER),
            key_items=["blink_dagger", "black_king_bar"],
            objectives=["Team fights", "Objectives"],
        )
        late = TimingWindow(
            phase="late",
            start=LATE_START,
            end=int(max(MIN_LATE_END, expected_duration)),
            power_level=_power(hero, LATE_POWER),
            key_items=["luxury_items"],
            objectives=["High ground", "Ancient"],
        )
        return [early, mid, late]

    @staticmethod
    def find_window(windows: list[TimingWindow], phase: GamePhase) -> Optional[TimingWindow]:
        for window in windows:
            if window.phase == phase:
                return window
        return None
