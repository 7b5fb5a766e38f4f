"""Tests for the hero & statistics registry."""
import pytest

from dota_draft.repositories.hero_repository import HeroRepository


def test_lookup_by_id_and_name(repository):
    assert repository.get_hero(5).localized_name == "Crystal Maiden"
    assert repository.find_by_name("crystal maiden").id == 5
    assert repository.find_by_name("AXE").id == 2
    assert repository.get_hero(999) is None
    assert repository.find_by_name("nobody") is None


def test_heroes_keep_load_order(repository, all_heroes):
    assert [h.id for h in repository.heroes] == [h.id for h in all_heroes]
    assert len(repository) == len(all_heroes)


def test_duplicate_ids_keep_first(anti_mage, hero_factory):
    impostor = hero_factory(1, "impostor")
    repo = HeroRepository([anti_mage, impostor])
    assert len(repo) == 1
    assert repo.get_hero(1).name == "antimage"


@pytest.mark.parametrize("wins,games,expected", [
    (53, 100, 53.0),
    (1, 3, 33.33),
    (0, 0, 0.0),
    (5, 0, 0.0),
    (11, 10, 0.0),  # invalid: more wins than games
])
def test_win_rate(wins, games, expected):
    assert HeroRepository.win_rate(wins, games) == pytest.approx(expected)


def test_hero_win_rate_neutral_without_stats(repository):
    assert repository.hero_win_rate(1) == pytest.approx(53.0)
    assert repository.hero_win_rate(2) == 50.0


def test_pick_share(repository):
    # 1000 / (1000 + 50 + 200)
    assert repository.pick_share(1) == pytest.approx(80.0)
    assert repository.pick_share(2) == 50.0


def test_from_opendota_skips_malformed_rows():
    heroes = [
        {"id": 1, "name": "npc_dota_hero_antimage", "localized_name": "Anti-Mage",
         "primary_attr": "agi", "attack_type": "Melee", "roles": ["Carry"]},
        {"name": "no_id"},
        {"id": 2, "name": "npc_dota_hero_axe", "primary_attr": "bogus"},
    ]
    stats = [{"id": 1, "pub_pick": 10, "pub_win": 6}, {"pub_pick": 3}]

    repo = HeroRepository.from_opendota(heroes, stats)

    assert [h.id for h in repo.heroes] == [1]
    assert repo.get_stats(1).pub_win == 6
