"""REST endpoints for draft suggestions."""

import asyncio
import logging
from typing import Annotated, Literal, Optional

from fastapi import APIRouter, HTTPException, Path, Request
from pydantic import BaseModel, Field, model_validator

from dota_draft.api.routes.heroes import MAX_HERO_ID, MIN_HERO_ID
from dota_draft.api.state import get_heuristics, get_opendota_client, get_repository
from dota_draft.config import settings
from dota_draft.models.draft import (
    TEAM_SIZE,
    TOTAL_PICKS,
    DraftPhase,
    DraftState,
    GameContext,
    ItemStrategy,
    Playstyle,
)
from dota_draft.models.hero import Hero
from dota_draft.models.recommendations import GamePhase, Suggestion
from dota_draft.repositories.hero_repository import HeroRepository
from dota_draft.services.basic_draft_analyzer import BasicDraftAnalyzer
from dota_draft.services.draft_integration import (
    DraftIntegration,
    Scenario,
    format_lane_assignments,
    format_score_breakdown,
    format_timing_windows,
)
from dota_draft.services.opendota_client import OpenDotaClient
from dota_draft.services.scorers import MatchupCalculator
from dota_draft.services.suggestion_engine import SuggestionEngine
from dota_draft.utils.roles import KNOWN_ROLES, POSITION_NAMES, is_known_role, normalize_role

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/suggestions", tags=["suggestions"])

HeroId = Annotated[int, Field(ge=MIN_HERO_ID, le=MAX_HERO_ID)]
Lane = Annotated[int, Field(ge=1, le=5)]


class DraftStateModel(BaseModel):
    your_team: list[Optional[HeroId]] = Field(
        default_factory=lambda: [None] * TEAM_SIZE, min_length=TEAM_SIZE, max_length=TEAM_SIZE
    )
    enemy_team: list[Optional[HeroId]] = Field(
        default_factory=lambda: [None] * TEAM_SIZE, min_length=TEAM_SIZE, max_length=TEAM_SIZE
    )
    current_phase: Literal["pick", "completed"] = "pick"
    current_pick: int = Field(0, ge=0, le=TOTAL_PICKS)

    @model_validator(mode="after")
    def check_no_duplicates(self) -> "DraftStateModel":
        picked = [h for h in self.your_team + self.enemy_team if h is not None]
        if len(picked) != len(set(picked)):
            raise ValueError("A hero can only be drafted once")
        return self


class GameContextModel(BaseModel):
    expected_duration: Optional[float] = Field(None, gt=0)
    preferred_lanes: Optional[list[Lane]] = None
    playstyle: Optional[Playstyle] = None
    item_strategy: Optional[ItemStrategy] = None

    def to_context(self) -> GameContext:
        return GameContext(
            expected_duration=self.expected_duration,
            preferred_lanes=tuple(self.preferred_lanes) if self.preferred_lanes is not None else None,
            playstyle=self.playstyle,
            item_strategy=self.item_strategy,
        )


class SuggestionRequest(BaseModel):
    draft_state: DraftStateModel = Field(default_factory=DraftStateModel)
    role_filter: Optional[list[str]] = None
    game_context: Optional[GameContextModel] = None
    limit: Optional[int] = Field(None, ge=1)
    mode: Literal["advanced", "basic"] = "advanced"


class DraftRequest(BaseModel):
    draft_state: DraftStateModel = Field(default_factory=DraftStateModel)


class ScenarioRequest(DraftRequest):
    limit: Optional[int] = Field(None, ge=1)


class SynergyRequest(DraftRequest):
    focus_hero_id: Optional[HeroId] = None


def _resolve_team(repo: HeroRepository, hero_ids: list[Optional[int]]) -> list[Optional[Hero]]:
    team: list[Optional[Hero]] = []
    for hero_id in hero_ids:
        if hero_id is None:
            team.append(None)
            continue
        hero = repo.get_hero(hero_id)
        if hero is None:
            raise HTTPException(status_code=400, detail=f"Unknown hero id: {hero_id}")
        team.append(hero)
    return team


def _build_draft_state(repo: HeroRepository, model: DraftStateModel) -> DraftState:
    return DraftState(
        your_team=_resolve_team(repo, model.your_team),
        enemy_team=_resolve_team(repo, model.enemy_team),
        current_phase=DraftPhase(model.current_phase),
        current_pick=model.current_pick,
    )


def _validate_role_filter(role_filter: Optional[list[str]]) -> list[str]:
    roles = [normalize_role(r) for r in role_filter or []]
    unknown = [r for r in roles if r is not None and not is_known_role(r)]
    if unknown:
        raise HTTPException(
            status_code=400,
            detail=f"Unknown role(s): {', '.join(unknown)}. Valid roles: {', '.join(sorted(KNOWN_ROLES))}",
        )
    return [r for r in roles if r is not None]


def _resolve_limit(limit: Optional[int]) -> int:
    return min(limit or settings.suggestion_limit, settings.max_suggestion_limit)


async def _load_enemy_matchups(client: OpenDotaClient, enemies: list[Hero]) -> MatchupCalculator:
    """Fetch matchups for every enemy hero concurrently.

    An enemy whose fetch fails is scored as having no matchup data.
    """
    matchups = MatchupCalculator(settings.min_matchup_games)
    results = await asyncio.gather(
        *(client.get_hero_matchups(enemy.id) for enemy in enemies),
        return_exceptions=True,
    )
    for enemy, result in zip(enemies, results):
        if isinstance(result, Exception):
            logger.warning(f"No matchup data for {enemy.localized_name} ({enemy.id}): {result}")
            continue
        matchups.set_matchups(enemy.id, result)
    return matchups


async def _focused_view(
    request: Request,
    model: DraftStateModel,
    extra_enemies: tuple[Hero, ...] = (),
) -> tuple[DraftState, DraftIntegration]:
    repo = await get_repository(request)
    draft_state = _build_draft_state(repo, model)
    enemies = draft_state.enemy_picks
    enemies += [h for h in extra_enemies if h not in enemies]
    matchups = await _load_enemy_matchups(get_opendota_client(request), enemies)
    engine = SuggestionEngine(repo, matchups, heuristics=get_heuristics(request))
    return draft_state, DraftIntegration(engine)


def _with_display(suggestion: Suggestion) -> dict:
    """Suggestion payload plus display-ready percentages and labels."""
    data = suggestion.to_dict()
    data["display"] = {
        "breakdown": format_score_breakdown(suggestion.breakdown),
        "timing_windows": format_timing_windows(suggestion.timing_windows),
        "lane_assignments": format_lane_assignments(suggestion.lane_assignments),
    }
    return data


@router.post("")
async def get_suggestions(request: Request, body: SuggestionRequest):
    """Ranked hero suggestions for the current draft."""
    repo = await get_repository(request)
    draft_state = _build_draft_state(repo, body.draft_state)
    role_filter = _validate_role_filter(body.role_filter)
    limit = _resolve_limit(body.limit)
    matchups = await _load_enemy_matchups(get_opendota_client(request), draft_state.enemy_picks)

    if body.mode == "basic":
        analyzer = BasicDraftAnalyzer(repo, matchups)
        suggestions = analyzer.suggest(draft_state, role_filter, limit)
    else:
        engine = SuggestionEngine(repo, matchups, heuristics=get_heuristics(request))
        context = body.game_context.to_context() if body.game_context else None
        suggestions = engine.suggest(draft_state, context, role_filter, limit)

    return {
        "mode": body.mode,
        "suggestions": [s.to_dict() for s in suggestions],
        "draft_progress": draft_state.progress(),
    }


@router.post("/scenario/{scenario}")
async def get_scenario_suggestions(request: Request, scenario: Scenario, body: ScenarioRequest):
    """Suggestions under a canned game-plan scenario."""
    repo = await get_repository(request)
    draft_state = _build_draft_state(repo, body.draft_state)
    matchups = await _load_enemy_matchups(get_opendota_client(request), draft_state.enemy_picks)

    engine = SuggestionEngine(repo, matchups, heuristics=get_heuristics(request))
    suggestions = DraftIntegration(engine).get_scenario_recommendations(
        draft_state, scenario, limit=_resolve_limit(body.limit)
    )
    return {
        "scenario": scenario,
        "suggestions": [s.to_dict() for s in suggestions],
    }


@router.post("/counter/{hero_id}")
async def get_counter_suggestions(
    request: Request,
    body: DraftRequest,
    hero_id: int = Path(ge=MIN_HERO_ID, le=MAX_HERO_ID),
):
    """Heroes that counter one specific enemy hero."""
    repo = await get_repository(request)
    target = repo.get_hero(hero_id)
    if target is None:
        raise HTTPException(status_code=404, detail=f"Hero {hero_id} not found")

    draft_state, integration = await _focused_view(request, body.draft_state, (target,))
    suggestions = integration.get_counter_pick_recommendations(draft_state, target)
    return {
        "target": target.to_dict(),
        "suggestions": [_with_display(s) for s in suggestions],
    }


@router.post("/synergy")
async def get_synergy_suggestions(request: Request, body: SynergyRequest):
    """Heroes that combine well with the current team."""
    repo = await get_repository(request)
    focus_hero = None
    if body.focus_hero_id is not None:
        focus_hero = repo.get_hero(body.focus_hero_id)
        if focus_hero is None:
            raise HTTPException(status_code=400, detail=f"Unknown hero id: {body.focus_hero_id}")

    draft_state, integration = await _focused_view(request, body.draft_state)
    suggestions = integration.get_synergy_recommendations(draft_state, focus_hero)
    return {"suggestions": [_with_display(s) for s in suggestions]}


@router.post("/lane/{lane}")
async def get_lane_suggestions(
    request: Request,
    body: DraftRequest,
    lane: int = Path(ge=1, le=5),
):
    """Heroes confidently assigned to one lane position."""
    draft_state, integration = await _focused_view(request, body.draft_state)
    suggestions = integration.get_lane_recommendations(draft_state, lane)
    return {
        "lane": lane,
        "position": POSITION_NAMES[lane],
        "suggestions": [_with_display(s) for s in suggestions],
    }


@router.post("/timing/{phase}")
async def get_timing_suggestions(request: Request, phase: GamePhase, body: DraftRequest):
    """Heroes strongest in one game phase."""
    draft_state, integration = await _focused_view(request, body.draft_state)
    suggestions = integration.get_timing_recommendations(draft_state, phase)
    return {
        "phase": phase,
        "suggestions": [_with_display(s) for s in suggestions],
    }
