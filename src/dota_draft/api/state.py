"""Lazily created per-app services held on ``app.state``."""

import asyncio
import logging
from pathlib import Path

from fastapi import HTTPException, Request

from dota_draft.config import settings
from dota_draft.repositories.hero_repository import HeroRepository
from dota_draft.services.hero_heuristics import HeroHeuristics
from dota_draft.services.opendota_client import OpenDotaAPIError, OpenDotaClient

logger = logging.getLogger(__name__)


def get_opendota_client(request: Request) -> OpenDotaClient:
    """Client created at startup, or on first use when the lifespan did not run."""
    state = request.app.state
    if not hasattr(state, "opendota_client"):
        state.opendota_client = OpenDotaClient(
            base_url=settings.opendota_api_base,
            api_key=settings.opendota_api_key,
            timeout=settings.opendota_timeout,
        )
    return state.opendota_client


def get_heuristics(request: Request) -> HeroHeuristics:
    state = request.app.state
    if not hasattr(state, "heuristics"):
        knowledge_dir = Path(settings.knowledge_dir) if settings.knowledge_dir else None
        state.heuristics = HeroHeuristics(knowledge_dir)
    return state.heuristics


async def get_repository(request: Request) -> HeroRepository:
    """Hero roster and statistics, fetched once per app.

    Concurrent first requests share one fetch. Raises HTTPException(502)
    when the roster cannot be fetched.
    """
    state = request.app.state
    if hasattr(state, "repository"):
        return state.repository

    if not hasattr(state, "repository_lock"):
        state.repository_lock = asyncio.Lock()

    async with state.repository_lock:
        if hasattr(state, "repository"):
            return state.repository

        client = get_opendota_client(request)
        try:
            heroes, hero_stats = await asyncio.gather(client.get_heroes(), client.get_hero_stats())
        except OpenDotaAPIError as e:
            logger.error(f"Failed to load hero roster from {e.endpoint}: {e}")
            raise HTTPException(status_code=502, detail="Hero data provider unavailable")

        repository = HeroRepository.from_opendota(heroes, hero_stats)
        logger.info(f"Loaded {len(repository)} heroes from OpenDota")
        state.repository = repository
        return repository
