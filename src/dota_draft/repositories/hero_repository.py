"""Read-only in-memory registry of heroes and hero statistics."""
import logging
from typing import Iterable, Optional

from dota_draft.models.hero import Hero, HeroStatistics

logger = logging.getLogger(__name__)

NEUTRAL_WIN_RATE = 50.0


class HeroRepository:
    """Hero roster and statistics keyed by hero id.

    Supplied once at construction from already-fetched arrays; never
    mutated afterwards.
    """

    def __init__(
        self,
        heroes: Iterable[Hero],
        stats: Iterable[HeroStatistics] = (),
    ):
        self._heroes: dict[int, Hero] = {}
        for hero in heroes:
            if hero.id in self._heroes:
                logger.warning(f"Duplicate hero id {hero.id} ({hero.localized_name}), keeping first")
                continue
            self._heroes[hero.id] = hero
        self._stats: dict[int, HeroStatistics] = {s.hero_id: s for s in stats}

    @classmethod
    def from_opendota(cls, heroes: list[dict], hero_stats: list[dict]) -> "HeroRepository":
        """Build from raw OpenDota ``/heroes`` and ``/heroStats`` payloads.

        Records that cannot be parsed are skipped with a warning.
        """
        parsed_heroes = []
        for row in heroes:
            try:
                parsed_heroes.append(Hero.from_dict(row))
            except (KeyError, TypeError, ValueError) as e:
                logger.warning(f"Skipping malformed hero record {row.get('id')!r}: {e}")
        parsed_stats = []
        for row in hero_stats:
            try:
                parsed_stats.append(HeroStatistics.from_dict(row))
            except (KeyError, TypeError, ValueError) as e:
                logger.warning(f"Skipping malformed stats record {row.get('id')!r}: {e}")
        return cls(parsed_heroes, parsed_stats)

    @property
    def heroes(self) -> list[Hero]:
        """All heroes in load order."""
        return list(self._heroes.values())

    def __len__(self) -> int:
        return len(self._heroes)

    def get_hero(self, hero_id: int) -> Optional[Hero]:
        return self._heroes.get(hero_id)

    def find_by_name(self, name: str) -> Optional[Hero]:
        """Look up a hero by internal or localized name (case-insensitive)."""
        needle = name.strip().lower()
        for hero in self._heroes.values():
            if hero.name.lower() == needle or hero.localized_name.lower() == needle:
                return hero
        return None

    @property
    def stats(self) -> list[HeroStatistics]:
        """All loaded statistics, in load order."""
        return list(self._stats.values())

    def get_stats(self, hero_id: int) -> Optional[HeroStatistics]:
        return self._stats.get(hero_id)

    @staticmethod
    def win_rate(wins: int, games: int) -> float:
        """Win percentage, 0 when there are no games or the record is invalid."""
        if not games or games <= 0:
            return 0.0
        if wins > games:
            logger.warning(f"Invalid data: wins ({wins}) > games ({games})")
            return 0.0
        return round(wins / games * 100, 2)

    def hero_win_rate(self, hero_id: int) -> float:
        """Public win rate for a hero, neutral 50 when statistics are absent."""
        stats = self._stats.get(hero_id)
        if stats is None:
            return NEUTRAL_WIN_RATE
        return self.win_rate(stats.pub_win, stats.pub_pick)

    def pick_share(self, hero_id: int) -> float:
        """Share of public picks among public + pro + turbo picks (percent).

        Neutral 50 when statistics are absent or there are no picks at all.
        """
        stats = self._stats.get(hero_id)
        if stats is None:
            return NEUTRAL_WIN_RATE
        total = stats.pub_pick + stats.pro_pick + stats.turbo_picks
        if total <= 0:
            return NEUTRAL_WIN_RATE
        return min(stats.pub_pick / total * 100, 100.0)
