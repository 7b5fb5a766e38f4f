"""Tests for scenario presets and focused recommendation views."""
import logging
from unittest.mock import patch

import pytest

from dota_draft.models.draft import DraftState, GameContext
from dota_draft.models.hero import MatchupRecord
from dota_draft.models.recommendations import ProPattern, ScoreBreakdown
from dota_draft.services.draft_integration import (
    DraftIntegration,
    context_for_scenario,
    format_lane_assignments,
    format_score_breakdown,
    format_timing_windows,
)
from dota_draft.services.scorers import MatchupCalculator
from dota_draft.services.suggestion_engine import SuggestionEngine


@pytest.fixture
def matchups():
    return MatchupCalculator()


@pytest.fixture
def engine(repository, matchups, heuristics):
    return SuggestionEngine(repository, matchups, heuristics)


@pytest.fixture
def integration(engine):
    return DraftIntegration(engine)


class TestEnhancedRecommendations:
    def test_all_artifacts_by_default(self, integration):
        suggestions = integration.get_enhanced_recommendations(DraftState.empty(), limit=3)
        assert len(suggestions) == 3
        assert all(s.timing_windows for s in suggestions)

    def test_unrequested_artifacts_stripped(self, integration):
        suggestions = integration.get_enhanced_recommendations(
            DraftState.empty(),
            include_item_builds=False,
            include_lane_optimization=False,
            include_timing_analysis=False,
            include_pro_patterns=False,
        )
        for s in suggestions:
            assert s.item_builds == []
            assert s.lane_assignments == []
            assert s.timing_windows == []
            assert s.pro_patterns == ProPattern.empty()

    def test_scores_unchanged_by_flags(self, integration):
        full = integration.get_enhanced_recommendations(DraftState.empty())
        bare = integration.get_enhanced_recommendations(DraftState.empty(), include_item_builds=False)
        assert [(s.hero.id, s.score) for s in full] == [(s.hero.id, s.score) for s in bare]

    def test_engine_failure_returns_empty(self, integration, engine, caplog):
        with patch.object(engine, "suggest", side_effect=RuntimeError("down")):
            with caplog.at_level(logging.ERROR):
                assert integration.get_enhanced_recommendations(DraftState.empty()) == []
        assert "Error generating enhanced recommendations" in caplog.text

    def test_analyze_hero_in_depth(self, integration, engine, axe):
        assert integration.analyze_hero_in_depth(axe).hero == axe
        with patch.object(engine, "analyze_hero", side_effect=RuntimeError("down")):
            assert integration.analyze_hero_in_depth(axe) is None


class TestScenarios:
    @pytest.mark.parametrize("scenario,duration,playstyle,strategy", [
        ("early_game", 25, "aggressive", "early"),
        ("late_game", 60, "defensive", "scaling"),
        ("team_fight", 40, "aggressive", "utility"),
        ("push_strategy", 35, "aggressive", "early"),
        ("defensive", 50, "defensive", "utility"),
    ])
    def test_scenario_contexts(self, scenario, duration, playstyle, strategy):
        context = context_for_scenario(scenario)
        assert context == GameContext(
            expected_duration=duration, playstyle=playstyle, item_strategy=strategy
        )

    def test_unknown_scenario_has_no_preference(self):
        assert context_for_scenario("turtle") == GameContext()

    def test_scenario_recommendations_skip_pro_patterns(self, integration):
        suggestions = integration.get_scenario_recommendations(DraftState.empty(), "late_game", limit=4)
        assert len(suggestions) == 4
        assert all(s.pro_patterns == ProPattern.empty() for s in suggestions)
        assert all(s.timing_windows[2].end == 60 for s in suggestions)

    def test_scenarios_change_ranking_inputs(self, integration):
        early = integration.get_scenario_recommendations(DraftState.empty(), "early_game")
        late = integration.get_scenario_recommendations(DraftState.empty(), "late_game")
        early_scores = {s.hero.id: s.score for s in early}
        late_scores = {s.hero.id: s.score for s in late}
        assert early_scores != late_scores


class TestFocusedViews:
    def test_counter_picks(self, integration, matchups, anti_mage):
        matchups.set_matchups(1, [
            MatchupRecord(1, 5, games_played=100, wins=10),
            MatchupRecord(1, 2, games_played=100, wins=30),
        ])
        state = DraftState.empty()
        state.add_hero(anti_mage, "enemy", 0)

        picks = integration.get_counter_pick_recommendations(state, anti_mage)

        assert [s.hero.id for s in picks] == [5, 2]

    def test_counter_picks_score_against_target_only(self, integration, matchups, anti_mage, axe):
        # Crystal Maiden crushes Anti-Mage but loses to Axe; her team average is 0.65.
        matchups.set_matchups(1, [MatchupRecord(1, 5, games_played=100, wins=0)])
        matchups.set_matchups(2, [
            MatchupRecord(2, 5, games_played=100, wins=70),
            MatchupRecord(2, 14, games_played=100, wins=20),
        ])
        state = DraftState.empty()
        state.add_hero(anti_mage, "enemy", 0)
        state.add_hero(axe, "enemy", 1)

        vs_axe = integration.get_counter_pick_recommendations(state, axe)
        vs_anti_mage = integration.get_counter_pick_recommendations(state, anti_mage)

        assert [s.hero.id for s in vs_axe] == [14]
        assert [s.hero.id for s in vs_anti_mage] == [5]

    def test_synergy_picks(self, integration, anti_mage):
        state = DraftState.empty()
        state.add_hero(anti_mage, "your", 0)

        picks = integration.get_synergy_recommendations(state)

        assert 0 < len(picks) <= 5
        assert 5 in {s.hero.id for s in picks}
        for s in picks:
            b = s.breakdown
            assert max(b.synergy, b.ml_synergy, b.item_synergy) > 0.6
        combined = [s.breakdown.synergy + s.breakdown.ml_synergy + s.breakdown.item_synergy for s in picks]
        assert combined == sorted(combined, reverse=True)

    def test_no_synergy_on_empty_draft(self, integration):
        assert integration.get_synergy_recommendations(DraftState.empty()) == []

    def test_lane_picks(self, integration):
        carries = integration.get_lane_recommendations(DraftState.empty(), 1)
        assert {s.hero.id for s in carries} == {1, 35, 74}
        assert carries[-1].hero.id == 74

        offlane = integration.get_lane_recommendations(DraftState.empty(), 3)
        assert [s.hero.id for s in offlane] == [2]

    def test_lane_must_be_valid(self, integration):
        with pytest.raises(ValueError):
            integration.get_lane_recommendations(DraftState.empty(), 6)

    def test_timing_picks(self, integration):
        late = integration.get_timing_recommendations(DraftState.empty(), "late")
        assert {s.hero.id for s in late[:2]} == {1, 35}
        assert [s.hero.id for s in late][2:] == [74]

    def test_timing_phase_must_be_valid(self, integration):
        with pytest.raises(ValueError):
            integration.get_timing_recommendations(DraftState.empty(), "overtime")


class TestFormatting:
    def test_format_score_breakdown(self):
        formatted = format_score_breakdown(ScoreBreakdown(counter=0.734))
        assert formatted["Counter Score"] == 73
        assert formatted["Meta Score"] == 50
        assert len(formatted) == 8

    def test_format_timing_windows(self, engine, axe):
        windows = engine.analyze_hero(axe).timing_windows
        formatted = format_timing_windows(windows)
        assert formatted[0]["phase"] == "Early"
        assert formatted[0]["timing"] == "0-15 min"
        assert formatted[0]["strength"] == 70
        assert formatted[1]["key_items"] == "blink_dagger, black_king_bar"

    def test_format_lane_assignments(self, engine, axe):
        formatted = format_lane_assignments(engine.analyze_hero(axe).lane_flexibility)
        assert formatted == [{
            "position": "Offlane",
            "hero": "Axe",
            "confidence": 100,
            "reasons": "Initiator and space creator",
        }]
