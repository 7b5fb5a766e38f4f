"""OpenDota API client for hero roster, statistics and matchups."""

import logging
from typing import Any, Optional

import httpx

from dota_draft.models.hero import MatchupRecord

logger = logging.getLogger(__name__)


class OpenDotaAPIError(Exception):
    """Raised when an OpenDota request fails."""

    def __init__(self, message: str, status_code: Optional[int] = None, endpoint: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.endpoint = endpoint


class OpenDotaClient:
    """Async OpenDota client.

    Requests are made once; there is no retry or caching layer.
    """

    DEFAULT_BASE_URL = "https://api.opendota.com/api"

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        api_key: str = "",
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the client.

        Args:
            base_url: API root, without trailing slash
            api_key: Optional bearer token
            timeout: Request timeout in seconds
            transport: Custom httpx transport (used by tests)
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            headers = {"Authorization": f"Bearer {self.api_key}"} if self.api_key else {}
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                headers=headers,
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._client

    async def close(self):
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()

    async def _request(self, endpoint: str) -> Any:
        try:
            client = await self._get_client()
            response = await client.get(endpoint)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.warning(f"OpenDota {endpoint} returned {status}")
            raise OpenDotaAPIError(
                f"OpenDota request failed: {status}", status_code=status, endpoint=endpoint
            ) from e
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"OpenDota {endpoint} failed: {e}")
            raise OpenDotaAPIError(f"OpenDota request failed: {e}", endpoint=endpoint) from e

    async def get_heroes(self) -> list[dict[str, Any]]:
        """Fetch raw hero records.

        Returned raw so the repository can skip malformed rows.
        """
        data = await self._request("/heroes")
        return data if isinstance(data, list) else []

    async def get_hero_stats(self) -> list[dict[str, Any]]:
        """Fetch raw heroStats rows (roster fields plus statistics)."""
        data = await self._request("/heroStats")
        return data if isinstance(data, list) else []

    async def get_hero_matchups(self, hero_id: int) -> list[MatchupRecord]:
        """Fetch matchup records for ``hero_id`` against every opponent."""
        data = await self._request(f"/heroes/{hero_id}/matchups")
        if not isinstance(data, list):
            return []
        records = (MatchupRecord.from_opendota(hero_id, row) for row in data)
        return [record for record in records if record is not None]
