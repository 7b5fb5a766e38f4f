"""Shared hero fixtures."""
import pytest

from dota_draft.models.hero import AttackType, Hero, HeroStatistics, PrimaryAttribute
from dota_draft.repositories.hero_repository import HeroRepository
from dota_draft.services.hero_heuristics import HeroHeuristics


def make_hero(hero_id, name, attr="agi", attack="Melee", roles=()):
    return Hero(
        id=hero_id,
        name=name,
        localized_name=name.replace("_", " ").title(),
        primary_attr=PrimaryAttribute(attr),
        attack_type=AttackType(attack),
        roles=tuple(roles),
    )


@pytest.fixture
def anti_mage():
    return make_hero(1, "antimage", "agi", "Melee", ["Carry", "Escape", "Nuker"])


@pytest.fixture
def axe():
    return make_hero(2, "axe", "str", "Melee", ["Initiator", "Durable", "Disabler"])


@pytest.fixture
def crystal_maiden():
    return make_hero(5, "crystal_maiden", "int", "Ranged", ["Support", "Disabler", "Nuker"])


@pytest.fixture
def pudge():
    return make_hero(14, "pudge", "str", "Melee", ["Disabler", "Initiator", "Durable", "Nuker"])


@pytest.fixture
def lion():
    return make_hero(26, "lion", "int", "Ranged", ["Support", "Disabler", "Nuker", "Initiator"])


@pytest.fixture
def sniper():
    return make_hero(35, "sniper", "agi", "Ranged", ["Carry", "Nuker"])


@pytest.fixture
def invoker():
    return make_hero(74, "invoker", "all", "Ranged", ["Carry", "Nuker", "Disabler", "Escape", "Pusher"])


@pytest.fixture
def all_heroes(anti_mage, axe, crystal_maiden, pudge, lion, sniper, invoker):
    return [anti_mage, axe, crystal_maiden, pudge, lion, sniper, invoker]


@pytest.fixture
def hero_stats():
    return [
        HeroStatistics(hero_id=1, pub_pick=1000, pub_win=530, pro_pick=50, turbo_picks=200),
        HeroStatistics(hero_id=5, pub_pick=800, pub_win=400, pro_pick=20, turbo_picks=100),
        HeroStatistics(hero_id=14, pub_pick=2000, pub_win=1000, pro_pick=10, turbo_picks=500),
    ]


@pytest.fixture
def repository(all_heroes, hero_stats):
    return HeroRepository(all_heroes, hero_stats)


@pytest.fixture
def heuristics():
    return HeroHeuristics.from_tables(
        categories={
            "meta": ["pudge", "invoker", "sniper"],
            "popular": ["pudge", "invoker"],
            "recently_updated": ["axe"],
            "complex": ["invoker"],
        },
        pairings={"Support": [{"hero_id": 1, "synergy": 0.8}]},
        counters={"Melee": [{"hero_id": 35, "effectiveness": 0.7}]},
    )


@pytest.fixture
def hero_factory():
    return make_hero
