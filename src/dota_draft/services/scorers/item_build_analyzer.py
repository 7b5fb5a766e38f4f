"""Role-based item builds and item synergy."""
from dota_draft.models.draft import GameContext
from dota_draft.models.hero import Hero
from dota_draft.models.recommendations import ItemBuild
from dota_draft.utils.roles import CARRY, INITIATOR, NUKER, SUPPORT

EARLY_GAME_DURATION = 30  # expected duration below this selects early variants
LATE_GAME_DURATION = 45  # expected duration above this marks late builds

AGGRESSIVE_CARRY_EFFECTIVENESS = 0.9
CARRY_EFFECTIVENESS = 0.85

BASE_ITEM_SYNERGY = 0.5
SUPPORT_WITH_CARRY_BONUS = 0.3


class ItemBuildAnalyzer:
    """Generates item builds from role tags and game context.

    Pure function of the hero's roles and the context: Carry, Support,
    Initiator and Nuker each contribute at most one build, in that order.
    """

    def generate_builds(self, hero: Hero, context: GameContext) -> list[ItemBuild]:
        duration = context.expected_duration
        is_early_game = duration is not None and duration < EARLY_GAME_DURATION
        is_late_game = duration is not None and duration > LATE_GAME_DURATION

        builds: list[ItemBuild] = []

        if hero.has_role(CARRY):
            if is_early_game:
                builds.append(ItemBuild(
                    name="Early Game Carry",
                    items=["power_treads", "drums", "black_king_bar", "desolator"],
                    timing=[6, 12, 20, 28],
                    effectiveness=self._carry_effectiveness(context),
                    game_phase="early",
                ))
            else:
                builds.append(ItemBuild(
                    name="Carry Build",
                    items=["power_treads", "battle_fury", "black_king_bar", "daedalus"],
                    timing=[8, 18, 25, 35],
                    effectiveness=self._carry_effectiveness(context),
                    game_phase="mid",
                ))

        if hero.has_role(SUPPORT):
            builds.append(ItemBuild(
                name="Support Build",
                items=["arcane_boots", "force_staff", "glimmer_cape", "aether_lens"],
                timing=[6, 15, 25, 35],
                effectiveness=0.8,
                game_phase="early",
            ))

        if hero.has_role(INITIATOR):
            builds.append(ItemBuild(
                name="Initiator Build",
                items=["blink_dagger", "black_king_bar", "pipe", "crimson_guard"],
                timing=[12, 20, 30, 40],
                effectiveness=0.75,
                game_phase="mid",
            ))

        if hero.has_role(NUKER):
            builds.append(ItemBuild(
                name="Nuker Build",
                items=["arcane_boots", "aether_lens", "aghanims_scepter", "refresher"],
                timing=[10, 18, 28, 45],
                effectiveness=0.9,
                game_phase="late" if is_late_game else "mid",
            ))

        return builds

    @staticmethod
    def _carry_effectiveness(context: GameContext) -> float:
        return AGGRESSIVE_CARRY_EFFECTIVENESS if context.is_aggressive else CARRY_EFFECTIVENESS

    def compute_synergy(self, hero: Hero, team_heroes: list[Hero]) -> float:
        """How well the hero's items fit the team (0.0-1.0)."""
        synergy = BASE_ITEM_SYNERGY
        if hero.has_role(SUPPORT) and any(h.has_role(CARRY) for h in team_heroes):
            synergy += SUPPORT_WITH_CARRY_BONUS
        return min(1.0, synergy)
