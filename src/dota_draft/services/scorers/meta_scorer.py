"""Meta strength scorer based on public win rate and pick share."""
from dota_draft.models.hero import Hero
from dota_draft.repositories.hero_repository import HeroRepository

NEUTRAL_META_SCORE = 50.0
BASELINE_WIN_RATE = 45.0
WIN_RATE_SPAN = 10.0  # 45% -> 0, 55% -> 100


class MetaScorer:
    """Scores heroes on current meta strength (0-100)."""

    def __init__(self, repository: HeroRepository):
        self.repository = repository

    def get_meta_score(self, hero: Hero) -> float:
        """Blend of win-rate deviation from 45% and normalized public pick share.

        Returns 50 when the hero has no statistics.
        """
        stats = self.repository.get_stats(hero.id)
        if stats is None:
            return NEUTRAL_META_SCORE

        win_rate = self.repository.win_rate(stats.pub_win, stats.pub_pick)
        normalized_win_rate = (win_rate - BASELINE_WIN_RATE) / WIN_RATE_SPAN * 100
        normalized_pick_rate = min(stats.pub_pick / max(stats.total_picks, 1) * 100, 100.0)

        return max(0.0, min(100.0, (normalized_win_rate + normalized_pick_rate) / 2))
