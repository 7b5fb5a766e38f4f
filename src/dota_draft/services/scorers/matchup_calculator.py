"""Counter scoring from per-opponent matchup samples."""
from typing import Iterable, Optional

from dota_draft.models.hero import Hero, MatchupRecord
from dota_draft.repositories.hero_repository import HeroRepository

NEUTRAL_COUNTER_SCORE = 50.0
MIN_MATCHUP_GAMES = 10


class MatchupCalculator:
    """Mutable store of matchup samples, keyed by hero id.

    The caller populates it (typically after fetching matchups for every
    enemy hero) before a suggestion batch and must not mutate it while the
    batch is being scored.
    """

    def __init__(self, min_games: int = MIN_MATCHUP_GAMES):
        self.min_games = min_games
        self._matchups: dict[int, list[MatchupRecord]] = {}

    def set_matchups(self, hero_id: int, records: Iterable[MatchupRecord]) -> None:
        """Replace the matchup list for a hero."""
        self._matchups[hero_id] = list(records)

    def clear(self) -> None:
        self._matchups.clear()

    def __len__(self) -> int:
        return len(self._matchups)

    def _find(self, hero_id: int, opponent_id: int) -> Optional[MatchupRecord]:
        for record in self._matchups.get(hero_id, ()):
            if record.opponent_id == opponent_id:
                return record
        return None

    def get_matchup(self, hero_id: int, opponent_id: int) -> Optional[MatchupRecord]:
        """Matchup of ``hero_id`` against ``opponent_id``, from hero_id's perspective.

        1. DIRECT LOOKUP: samples stored under hero_id.
        2. REVERSE LOOKUP: samples stored under opponent_id, inverted.
           Matchup data is usually fetched per enemy hero, so the enemy's
           record "E beat H in w of g games" means H won g - w of them.
        """
        direct = self._find(hero_id, opponent_id)
        if direct is not None:
            return direct

        reverse = self._find(opponent_id, hero_id)
        if reverse is not None:
            return MatchupRecord(
                hero_id=hero_id,
                opponent_id=opponent_id,
                games_played=reverse.games_played,
                wins=max(reverse.games_played - reverse.wins, 0),
            )
        return None

    def get_counter_score(self, hero_id: int, enemy_heroes: list[Hero]) -> float:
        """Average win rate (0-100) of ``hero_id`` against the enemy heroes.

        Only matchups with at least ``min_games`` games count. Missing data
        never penalizes or rewards a hero: returns 50 when the enemy list is
        empty or no matchup meets the sample threshold.
        """
        if not enemy_heroes:
            return NEUTRAL_COUNTER_SCORE

        total = 0.0
        valid = 0
        for enemy in enemy_heroes:
            record = self.get_matchup(hero_id, enemy.id)
            if record is None or record.games_played < self.min_games:
                continue
            total += HeroRepository.win_rate(record.wins, record.games_played)
            valid += 1

        return total / valid if valid else NEUTRAL_COUNTER_SCORE
