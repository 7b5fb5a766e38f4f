"""Tests for power windows."""
import pytest

from dota_draft.models.draft import GameContext
from dota_draft.services.scorers.timing_analyzer import TimingAnalyzer, phase_for_duration


@pytest.fixture
def analyzer():
    return TimingAnalyzer()


def test_three_windows_in_order(analyzer, anti_mage):
    windows = analyzer.analyze(anti_mage, GameContext())
    assert [w.phase for w in windows] == ["early", "mid", "late"]
    assert [(w.start, w.end) for w in windows] == [(0, 15), (15, 35), (35, 60)]


def test_power_levels_from_traits(analyzer, anti_mage, axe):
    am = [w.power_level for w in analyzer.analyze(anti_mage, GameContext())]
    assert am == pytest.approx([0.65, 0.75, 0.95])

    ax = [w.power_level for w in analyzer.analyze(axe, GameContext())]
    assert ax == pytest.approx([0.7, 0.8, 0.6])


def test_aggressive_shortens_early_window(analyzer, axe):
    early = analyzer.analyze(axe, GameContext(playstyle="aggressive"))[0]
    assert early.end == 12
    assert "Tower pressure" in early.objectives


def test_late_window_follows_long_games(analyzer, axe):
    late = analyzer.analyze(axe, GameContext(expected_duration=75))[2]
    assert late.end == 75


def test_early_item_strategy_adds_bracer(analyzer, axe):
    early = analyzer.analyze(axe, GameContext(item_strategy="early"))[0]
    assert early.key_items == ["boots", "magic_wand", "bracer"]


@pytest.mark.parametrize("minutes,phase", [
    (10, "early"),
    (15, "early"),
    (16, "mid"),
    (35, "mid"),
    (36, "late"),
])
def test_phase_for_duration(minutes, phase):
    assert phase_for_duration(minutes) == phase


def test_find_window(analyzer, axe):
    windows = analyzer.analyze(axe, GameContext())
    assert TimingAnalyzer.find_window(windows, "mid").start == 15
    assert TimingAnalyzer.find_window([], "mid") is None
