"""Tests for synergy heuristics."""
import pytest

from dota_draft.services.synergy_service import SynergyService


@pytest.fixture
def service():
    return SynergyService()


def test_support_with_core_pair(service, crystal_maiden, anti_mage):
    assert service.pair_synergy(crystal_maiden, anti_mage) == pytest.approx(0.75)


def test_pair_synergy_is_directional(service, crystal_maiden, anti_mage):
    assert service.pair_synergy(anti_mage, crystal_maiden) == pytest.approx(0.55)


def test_same_attack_type_no_bonus(service, anti_mage, axe):
    assert service.pair_synergy(axe, anti_mage) == pytest.approx(0.7)


def test_team_synergy_needs_two_heroes(service, anti_mage):
    assert service.team_synergy([]) == 0.5
    assert service.team_synergy([anti_mage]) == 0.5


def test_team_synergy_averages_pairs(service, anti_mage, crystal_maiden, axe):
    # (am, cm) 0.55, (am, axe) 0.5, (cm, axe) 0.55
    expected = (0.55 + 0.5 + 0.55) / 3
    assert service.team_synergy([anti_mage, crystal_maiden, axe]) == pytest.approx(expected)


def test_team_synergy_bounded(service, all_heroes):
    assert 0.0 <= service.team_synergy(all_heroes) <= 1.0


def test_role_synergy_empty_team_neutral(service, crystal_maiden):
    assert service.role_synergy(crystal_maiden, []) == 0.5


def test_role_synergy_complements_and_overlap(service, crystal_maiden, anti_mage):
    # +10 support/carry, +6 disabler/carry, -5 shared Nuker
    assert service.role_synergy(crystal_maiden, [anti_mage]) == pytest.approx(0.61)


def test_role_synergy_overlap_penalty(service, sniper, anti_mage):
    # shares Carry and Nuker
    assert service.role_synergy(sniper, [anti_mage]) == pytest.approx(0.40)
