"""Tests for lane assignment."""
import pytest

from dota_draft.services.scorers.lane_optimizer import LaneOptimizer


@pytest.fixture
def optimizer():
    return LaneOptimizer()


@pytest.fixture
def core_four(hero_factory):
    return [
        hero_factory(101, "carry", "agi", roles=["Carry"]),
        hero_factory(102, "nuker", "int", roles=["Nuker"]),
        hero_factory(103, "initiator", "str", roles=["Initiator"]),
        hero_factory(104, "support", "int", roles=["Support"]),
    ]


def test_distinct_roles_get_distinct_positions(optimizer, core_four):
    assignments = optimizer.assign(core_four)
    assert [a.position for a in assignments] == [1, 2, 3, 5]
    assert [a.hero.id for a in assignments] == [101, 102, 103, 104]


def test_role_and_attribute_confidence(optimizer, core_four):
    confidences = [a.confidence for a in optimizer.assign(core_four)]
    # role bonus + attribute bonus on 1-3, support has no attribute bonus at 5
    assert confidences == pytest.approx([1.0, 1.0, 1.0, 0.9])


def test_collision_moves_later_hero_to_free_position(optimizer, hero_factory):
    first = hero_factory(101, "carry_a", "agi", roles=["Carry"])
    second = hero_factory(102, "carry_b", "agi", roles=["Carry"])

    assignments = optimizer.assign([first, second])

    assert [a.position for a in assignments] == [1, 2]
    assert assignments[1].confidence == pytest.approx(0.5)


def test_free_position_skips_reserved_ones(optimizer, hero_factory):
    carry_a = hero_factory(101, "carry_a", "agi", roles=["Carry"])
    carry_b = hero_factory(102, "carry_b", "agi", roles=["Carry"])
    nuker = hero_factory(103, "nuker", "int", roles=["Nuker"])

    assignments = optimizer.assign([carry_a, carry_b, nuker])

    # position 2 is reserved by the nuker placed later
    assert [a.position for a in assignments] == [1, 3, 2]


def test_no_role_uses_first_free_position(optimizer, hero_factory):
    hero = hero_factory(101, "flex", roles=["Escape"])
    assignment = optimizer.assign([hero])[0]
    assert assignment.position == 1
    assert assignment.reasons == ["Strong late game scaling"]


def test_overflow_falls_back_to_soft_support(optimizer, hero_factory):
    carries = [hero_factory(100 + i, f"carry_{i}", roles=["Carry"]) for i in range(6)]
    positions = [a.position for a in optimizer.assign(carries)]
    assert positions == [1, 2, 3, 4, 5, 4]


def test_confidence_for_appended_hero(optimizer, anti_mage, crystal_maiden):
    # Nuker tag claims mid before Support claims 5
    assert optimizer.confidence_for(crystal_maiden, [anti_mage]) == pytest.approx(1.0)
    assert optimizer.assign([anti_mage, crystal_maiden])[1].position == 2


def test_assignment_is_deterministic(optimizer, all_heroes):
    first = [(a.position, a.confidence) for a in optimizer.assign(all_heroes)]
    second = [(a.position, a.confidence) for a in optimizer.assign(all_heroes)]
    assert first == second
