"""
Gateway to the football-data.org v4 REST API.

One authenticated GET per call, no retries. Failures surface as
``GatewayError`` carrying the HTTP status (``None`` for network faults);
bodies that cannot be decoded or do not match the expected schema raise
``MalformedResponseError``.

Usage:
    client = FootballDataClient.from_env()
    teams = await client.list_teams(limit=100)
    matches = await client.get_team_matches(teams[0].id, status="FINISHED", limit=5)
"""

import json
import logging
import urllib.error
import urllib.parse
import urllib.request
from typing import Any, Dict, List, Optional, Type, TypeVar

import anyio.to_thread
from pydantic import BaseModel, ValidationError

from .config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, Settings, load_settings
from .schemas import (
    Competition,
    CompetitionsResponse,
    Match,
    MatchesResponse,
    Scorer,
    ScorersResponse,
    StandingsResponse,
    Team,
    TeamDetail,
    TeamsResponse,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class GatewayError(RuntimeError):
    """Raised when a request to the football API fails."""

    def __init__(self, message: str, *, status: Optional[int] = None, path: str = "") -> None:
        super().__init__(message)
        self.status = status
        self.path = path


class MalformedResponseError(GatewayError):
    """Raised when the API answers with a body we cannot use."""


class FootballDataClient:
    """Thin client for football-data.org. Holds no state beyond its settings."""

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> "FootballDataClient":
        return cls(settings.api_key, settings.base_url, settings.timeout)

    @classmethod
    def from_env(cls) -> "FootballDataClient":
        return cls.from_settings(load_settings())

    # =========================================================================
    # Raw transport
    # =========================================================================

    def build_url(self, path: str, params: Optional[Dict[str, Any]] = None) -> str:
        url = f"{self.base_url}/{path.lstrip('/')}"
        query = {k: v for k, v in (params or {}).items() if v is not None}
        if query:
            url = f"{url}?{urllib.parse.urlencode(query)}"
        return url

    def _request(self, path: str, url: str) -> Dict[str, Any]:
        """Make the blocking HTTP request and decode the JSON body."""
        headers = {"User-Agent": "matchday-mcp"}
        if self.api_key:
            headers["X-Auth-Token"] = self.api_key

        try:
            req = urllib.request.Request(url, headers=headers)
            with urllib.request.urlopen(req, timeout=self.timeout) as response:
                body = response.read().decode()
        except urllib.error.HTTPError as e:
            raise GatewayError(f"HTTP error: {e.code} {e.reason}", status=e.code, path=path) from e
        except urllib.error.URLError as e:
            raise GatewayError(f"Network error: {e.reason}", path=path) from e
        except OSError as e:
            raise GatewayError(f"Network error: {e}", path=path) from e

        try:
            data = json.loads(body)
        except json.JSONDecodeError as e:
            raise MalformedResponseError(f"Invalid JSON from {path}: {e}", path=path) from e
        if not isinstance(data, dict):
            raise MalformedResponseError(f"Expected a JSON object from {path}", path=path)
        return data

    async def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """GET ``path`` with query ``params`` and return the decoded body."""
        url = self.build_url(path, params)
        logger.debug("GET %s", url)
        return await anyio.to_thread.run_sync(self._request, path, url)

    async def _get_model(
        self,
        model: Type[ModelT],
        path: str,
        params: Optional[Dict[str, Any]] = None,
    ) -> ModelT:
        data = await self.get(path, params)
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise MalformedResponseError(
                f"Unexpected payload from {path}: {e.error_count()} validation error(s)",
                path=path,
            ) from e

    # =========================================================================
    # Typed endpoints
    # =========================================================================

    async def list_teams(self, limit: int) -> List[Team]:
        response = await self._get_model(TeamsResponse, "/teams", {"limit": limit})
        return response.teams

    async def get_team(self, team_id: int) -> TeamDetail:
        return await self._get_model(TeamDetail, f"/teams/{team_id}")

    async def get_team_matches(
        self,
        team_id: int,
        status: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> List[Match]:
        response = await self._get_model(
            MatchesResponse,
            f"/teams/{team_id}/matches",
            {"status": status, "limit": limit},
        )
        return response.matches

    async def get_matches(
        self,
        status: Optional[str] = None,
        date_from: Optional[str] = None,
        date_to: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> List[Match]:
        params = {"status": status, "dateFrom": date_from, "dateTo": date_to, "limit": limit}
        response = await self._get_model(MatchesResponse, "/matches", params)
        return response.matches

    async def get_standings(self, competition_code: str) -> StandingsResponse:
        return await self._get_model(
            StandingsResponse, f"/competitions/{competition_code}/standings"
        )

    async def get_scorers(self, competition_code: str, limit: int) -> List[Scorer]:
        response = await self._get_model(
            ScorersResponse,
            f"/competitions/{competition_code}/scorers",
            {"limit": limit},
        )
        return response.scorers

    async def list_competitions(self) -> List[Competition]:
        response = await self._get_model(CompetitionsResponse, "/competitions")
        return response.competitions
