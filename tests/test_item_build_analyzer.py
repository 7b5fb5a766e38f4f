"""Tests for role-based item builds."""
import pytest

from dota_draft.models.draft import GameContext
from dota_draft.services.scorers.item_build_analyzer import ItemBuildAnalyzer


@pytest.fixture
def analyzer():
    return ItemBuildAnalyzer()


def test_carry_nuker_gets_one_build_per_role(analyzer, anti_mage):
    builds = analyzer.generate_builds(anti_mage, GameContext())
    assert [b.name for b in builds] == ["Carry Build", "Nuker Build"]
    assert builds[0].effectiveness == 0.85
    assert builds[0].game_phase == "mid"
    assert builds[1].game_phase == "mid"


def test_short_game_selects_early_carry_build(analyzer, anti_mage):
    builds = analyzer.generate_builds(anti_mage, GameContext(expected_duration=25))
    carry = builds[0]
    assert carry.name == "Early Game Carry"
    assert carry.timing == [6, 12, 20, 28]
    assert carry.game_phase == "early"


def test_aggressive_carry_is_more_effective(analyzer, sniper):
    builds = analyzer.generate_builds(sniper, GameContext(playstyle="aggressive"))
    assert builds[0].effectiveness == 0.9


def test_long_game_marks_nuker_late(analyzer, crystal_maiden):
    builds = analyzer.generate_builds(crystal_maiden, GameContext(expected_duration=50))
    assert [b.name for b in builds] == ["Support Build", "Nuker Build"]
    assert builds[1].game_phase == "late"


def test_unlisted_roles_get_no_builds(analyzer, hero_factory):
    escape_only = hero_factory(90, "slark", roles=["Escape", "Durable"])
    assert analyzer.generate_builds(escape_only, GameContext()) == []


def test_builds_are_deterministic(analyzer, axe):
    context = GameContext(expected_duration=40, playstyle="balanced")
    assert analyzer.generate_builds(axe, context) == analyzer.generate_builds(axe, context)


def test_support_synergy_with_carry(analyzer, crystal_maiden, anti_mage, axe):
    assert analyzer.compute_synergy(crystal_maiden, [anti_mage]) == pytest.approx(0.8)
    assert analyzer.compute_synergy(crystal_maiden, [axe]) == pytest.approx(0.5)
    assert analyzer.compute_synergy(anti_mage, [crystal_maiden]) == pytest.approx(0.5)
