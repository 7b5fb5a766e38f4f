"""Business logic services."""

from dota_draft.services.hero_heuristics import HeroHeuristics
from dota_draft.services.synergy_service import SynergyService
from dota_draft.services.suggestion_engine import SuggestionEngine
from dota_draft.services.basic_draft_analyzer import BasicDraftAnalyzer
from dota_draft.services.draft_integration import DraftIntegration
from dota_draft.services.opendota_client import OpenDotaAPIError, OpenDotaClient

__all__ = [
    "HeroHeuristics",
    "SynergyService",
    "SuggestionEngine",
    "BasicDraftAnalyzer",
    "DraftIntegration",
    "OpenDotaAPIError",
    "OpenDotaClient",
]
