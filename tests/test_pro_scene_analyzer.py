"""Tests for heuristic pro-scene patterns."""
import pytest

from dota_draft.models.recommendations import HeroCounter, HeroPairing
from dota_draft.services.scorers.pro_scene_analyzer import ProSceneAnalyzer


@pytest.fixture
def analyzer(heuristics):
    return ProSceneAnalyzer(heuristics)


def test_complex_hero_caps_situational_rate(analyzer, invoker):
    pattern = analyzer.analyze(invoker)
    assert pattern.pick_order == 5
    assert pattern.ban_priority == 10
    assert pattern.first_pick_rate == pytest.approx(0.1)
    assert pattern.situational_pick_rate == pytest.approx(0.9)


def test_support_pattern(analyzer, crystal_maiden):
    pattern = analyzer.analyze(crystal_maiden)
    assert pattern.pick_order == 3
    assert pattern.ban_priority == 6
    assert pattern.first_pick_rate == pytest.approx(0.3)
    assert pattern.situational_pick_rate == pytest.approx(0.7)
    assert pattern.pairings == [HeroPairing(hero_id=1, synergy=0.8)]
    assert pattern.counters == []


def test_counters_gated_by_attack_type(analyzer, axe):
    assert analyzer.analyze(axe).counters == [HeroCounter(hero_id=35, effectiveness=0.7)]


def test_roleless_hero_counts_as_one_role(analyzer, hero_factory):
    pattern = analyzer.analyze(hero_factory(90, "mystery", roles=[]))
    assert pattern.pick_order == 1
    assert pattern.ban_priority == 2
    assert pattern.situational_pick_rate == pytest.approx(0.5)
