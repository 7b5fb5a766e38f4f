"""Curated hero heuristics table (meta, popular, complex heroes, pairings)."""
import json
import logging
from pathlib import Path
from typing import Optional

from dota_draft.models.hero import Hero
from dota_draft.models.recommendations import HeroCounter, HeroPairing

logger = logging.getLogger(__name__)

HEURISTICS_FILE = "hero_heuristics.json"

# Used when the knowledge file is missing or unreadable
DEFAULT_CATEGORIES: dict[str, list[str]] = {
    "meta": ["pudge", "invoker", "phantom_assassin", "sniper"],
    "popular": ["pudge", "invoker", "phantom_assassin"],
    "recently_updated": ["dawnbreaker", "marci", "primal_beast"],
    "complex": ["invoker", "meepo", "chen", "visage"],
}

DEFAULT_PAIRINGS: dict[str, list[dict]] = {
    "Carry": [{"hero_id": 5, "synergy": 0.8}, {"hero_id": 50, "synergy": 0.7}],
    "Support": [{"hero_id": 1, "synergy": 0.8}, {"hero_id": 14, "synergy": 0.7}],
}

DEFAULT_COUNTERS: dict[str, list[dict]] = {
    "Melee": [{"hero_id": 35, "effectiveness": 0.7}, {"hero_id": 6, "effectiveness": 0.6}],
    "Carry": [{"hero_id": 27, "effectiveness": 0.8}, {"hero_id": 26, "effectiveness": 0.7}],
}


class HeroHeuristics:
    """Maps hero internal names to boost categories.

    Keeping these lists in a knowledge file lets the meta and pro-pattern
    heuristics be tuned without touching scoring code. Pairing and counter
    tables are keyed by role tag or attack type ("Melee"/"Ranged") and are
    illustrative, not computed from match data.
    """

    def __init__(self, knowledge_dir: Optional[Path] = None):
        if knowledge_dir is None:
            knowledge_dir = Path(__file__).parents[1] / "knowledge"
        self.knowledge_dir = Path(knowledge_dir)
        self._categories: dict[str, frozenset[str]] = {}
        self._pairings: dict[str, list[dict]] = {}
        self._counters: dict[str, list[dict]] = {}
        self._load_data()

    @classmethod
    def from_tables(
        cls,
        categories: dict[str, list[str]],
        pairings: Optional[dict[str, list[dict]]] = None,
        counters: Optional[dict[str, list[dict]]] = None,
    ) -> "HeroHeuristics":
        """Build a table in memory, bypassing the knowledge file."""
        instance = cls.__new__(cls)
        instance.knowledge_dir = None
        instance._categories = {k: frozenset(v) for k, v in categories.items()}
        instance._pairings = dict(pairings or {})
        instance._counters = dict(counters or {})
        return instance

    def _load_data(self) -> None:
        """Load heuristics from knowledge file, falling back to defaults."""
        data: dict = {}
        path = self.knowledge_dir / HEURISTICS_FILE
        if path.exists():
            try:
                with open(path) as f:
                    data = json.load(f)
            except (json.JSONDecodeError, OSError) as e:
                logger.warning(f"Failed to load {HEURISTICS_FILE}: {e}")
                data = {}
        else:
            logger.warning(f"{HEURISTICS_FILE} not found at {path}, using built-in defaults")

        categories = data.get("categories") or DEFAULT_CATEGORIES
        self._categories = {k: frozenset(v) for k, v in categories.items()}
        self._pairings = data.get("pairings") or DEFAULT_PAIRINGS
        self._counters = data.get("counters") or DEFAULT_COUNTERS

    def in_category(self, hero: Hero, category: str) -> bool:
        return hero.name in self._categories.get(category, frozenset())

    def category_members(self, category: str) -> frozenset[str]:
        return self._categories.get(category, frozenset())

    def get_pairings(self, hero: Hero) -> list[HeroPairing]:
        """Illustrative partner heroes, gated by the hero's role tags."""
        pairings = []
        for key, entries in self._pairings.items():
            if hero.has_role(key):
                pairings.extend(
                    HeroPairing(hero_id=int(e["hero_id"]), synergy=float(e["synergy"]))
                    for e in entries
                )
        return pairings

    def get_counters(self, hero: Hero) -> list[HeroCounter]:
        """Illustrative counter heroes, gated by attack type or role tags."""
        counters = []
        for key, entries in self._counters.items():
            if key == hero.attack_type.value or hero.has_role(key):
                counters.extend(
                    HeroCounter(hero_id=int(e["hero_id"]), effectiveness=float(e["effectiveness"]))
                    for e in entries
                )
        return counters
