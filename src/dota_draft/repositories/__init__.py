"""Data access layer."""

from dota_draft.repositories.hero_repository import HeroRepository

__all__ = ["HeroRepository"]
