"""REST endpoints for the hero roster and single-hero analysis."""

from typing import Optional

from fastapi import APIRouter, HTTPException, Path, Query, Request

from dota_draft.api.state import get_heuristics, get_repository
from dota_draft.models.draft import GameContext, ItemStrategy, Playstyle
from dota_draft.services.draft_integration import DraftIntegration
from dota_draft.services.suggestion_engine import SuggestionEngine

MIN_HERO_ID = 1
MAX_HERO_ID = 199

router = APIRouter(prefix="/api/heroes", tags=["heroes"])


@router.get("")
async def list_heroes(request: Request):
    """Hero roster in load order."""
    repo = await get_repository(request)
    return {"heroes": [hero.to_dict() for hero in repo.heroes]}


@router.get("/search")
async def find_hero(request: Request, name: str = Query(min_length=1)):
    """Look up a hero by internal or localized name."""
    repo = await get_repository(request)
    hero = repo.find_by_name(name)
    if hero is None:
        raise HTTPException(status_code=404, detail=f"No hero named {name!r}")
    return hero.to_dict()


@router.get("/stats")
async def list_hero_stats(request: Request):
    """Loaded hero statistics with the derived public win rate."""
    repo = await get_repository(request)
    return {
        "hero_stats": [
            {**stats.to_dict(), "win_rate": repo.hero_win_rate(stats.hero_id)}
            for stats in repo.stats
        ]
    }


@router.get("/{hero_id}/analysis")
async def analyze_hero(
    request: Request,
    hero_id: int = Path(ge=MIN_HERO_ID, le=MAX_HERO_ID),
    expected_duration: Optional[float] = Query(None, gt=0),
    playstyle: Optional[Playstyle] = None,
    item_strategy: Optional[ItemStrategy] = None,
):
    """In-depth analysis of one hero outside any draft."""
    repo = await get_repository(request)
    hero = repo.get_hero(hero_id)
    if hero is None:
        raise HTTPException(status_code=404, detail=f"Hero {hero_id} not found")

    context = GameContext(
        expected_duration=expected_duration,
        playstyle=playstyle,
        item_strategy=item_strategy,
    )
    integration = DraftIntegration(SuggestionEngine(repo, heuristics=get_heuristics(request)))
    analysis = integration.analyze_hero_in_depth(hero, context)
    if analysis is None:
        raise HTTPException(status_code=500, detail=f"Analysis failed for hero {hero_id}")
    return analysis.to_dict()
