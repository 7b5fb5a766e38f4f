"""Team synergy heuristics: pairwise predictor and role-overlap score."""
from dota_draft.models.hero import Hero
from dota_draft.utils.roles import (
    CARRY,
    DISABLER,
    INITIATOR,
    NUKER,
    SUPPORT,
    is_core_class,
    is_support_class,
)

NEUTRAL_SYNERGY = 0.5
SUPPORT_CORE_BONUS = 0.2
ATTACK_DIVERSITY_BONUS = 0.05

# (candidate role, teammate role) -> bonus on the 0-100 role synergy scale
COMPLEMENTARY_ROLES: dict[tuple[str, str], float] = {
    (SUPPORT, CARRY): 10,
    (INITIATOR, NUKER): 8,
    (DISABLER, CARRY): 6,
}
ROLE_OVERLAP_PENALTY = 5


class SynergyService:
    """Scores hero synergies with fixed heuristics (no learned model)."""

    def pair_synergy(self, hero_a: Hero, hero_b: Hero) -> float:
        """Synergy of ``hero_a`` with ``hero_b`` (0.0-1.0).

        Not symmetric: the support bonus applies when ``hero_a`` is the
        support-class hero and ``hero_b`` the core.
        """
        synergy = NEUTRAL_SYNERGY
        if is_support_class(hero_a) and is_core_class(hero_b):
            synergy += SUPPORT_CORE_BONUS
        if hero_a.attack_type != hero_b.attack_type:
            synergy += ATTACK_DIVERSITY_BONUS
        return min(1.0, max(0.0, synergy))

    def team_synergy(self, heroes: list[Hero]) -> float:
        """Average pair synergy over all unordered pairs (0.5 below two heroes)."""
        if len(heroes) < 2:
            return NEUTRAL_SYNERGY

        scores = []
        for i, hero_a in enumerate(heroes):
            for hero_b in heroes[i + 1:]:
                scores.append(self.pair_synergy(hero_a, hero_b))

        return sum(scores) / len(scores) if scores else NEUTRAL_SYNERGY

    def role_synergy(self, hero: Hero, team: list[Hero]) -> float:
        """Role complementarity of ``hero`` with the team (0.0-1.0).

        Bonus for complementary role pairs, penalty per role tag the hero
        shares with the team. Neutral 0.5 for an empty team.
        """
        if not team:
            return NEUTRAL_SYNERGY

        team_roles = {role for teammate in team for role in teammate.roles}
        score = NEUTRAL_SYNERGY * 100

        for (hero_role, team_role), bonus in COMPLEMENTARY_ROLES.items():
            if hero.has_role(hero_role) and team_role in team_roles:
                score += bonus

        overlap = sum(1 for role in hero.roles if role in team_roles)
        score -= overlap * ROLE_OVERLAP_PENALTY

        return max(0.0, min(100.0, score)) / 100
