from __future__ import annotations

import asyncio
import logging
from typing import Any, List, Optional

import requests
from pydantic import ValidationError

from app.core.config import settings
from app.schemas.league import LeagueRecord, RosterRecord, SeasonBundle, UserRecord
from app.services.sleeper.errors import LeagueDataError, NotFound, SeasonFetch, UpstreamError

logger = logging.getLogger(__name__)


def _raise_for_sleeper(resp: requests.Response, what: str) -> None:
    if resp.status_code == 404:
        raise NotFound(f"Sleeper API error ({what}): {resp.reason or 'Not Found'}")
    if not resp.ok:
        raise UpstreamError(f"Sleeper API error ({what}): {resp.reason or resp.status_code}")


class SleeperClient:
    """
    Read-only client for the Sleeper v1 API (league, users, rosters, matchups, drafts).
    Every call is a plain GET; nothing is cached between calls.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = (base_url or settings.SLEEPER_API_BASE).rstrip("/")
        self.timeout = timeout or settings.SLEEPER_TIMEOUT_SECONDS
        # only a session we opened ourselves is ours to close
        self._owns_session = session is None
        self.session = session or requests.Session()

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def get_json(self, path: str, what: str) -> Any:
        url = f"{self.base_url}/{path.lstrip('/')}"
        try:
            resp = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise UpstreamError(f"Sleeper API error ({what}): {e}") from e

        _raise_for_sleeper(resp, what)

        try:
            return resp.json()
        except ValueError as e:
            raise UpstreamError(f"Sleeper API error ({what}): invalid JSON from {url}") from e

    # ---------------- raw passthroughs ----------------

    def league_raw(self, league_id: str) -> Any:
        return self.get_json(f"/league/{league_id}", "league")

    def users_raw(self, league_id: str) -> Any:
        return self.get_json(f"/league/{league_id}/users", "users")

    def rosters_raw(self, league_id: str) -> Any:
        return self.get_json(f"/league/{league_id}/rosters", "rosters")

    def matchups_raw(self, league_id: str, week: int | str) -> Any:
        return self.get_json(f"/league/{league_id}/matchups/{week}", "matchups")

    def drafts_raw(self, league_id: str) -> Any:
        return self.get_json(f"/league/{league_id}/drafts", "drafts")

    # ---------------- typed reads ----------------

    def get_league(self, league_id: str) -> LeagueRecord:
        data = self.league_raw(league_id)
        # Sleeper answers unknown league ids with 200 + `null`
        if data is None:
            raise NotFound(f"Sleeper API error (league): no league {league_id!r}")
        try:
            return LeagueRecord.model_validate(data)
        except ValidationError as e:
            raise UpstreamError(f"Sleeper API error (league): unexpected shape: {e}") from e

    def get_users(self, league_id: str) -> List[UserRecord]:
        data = self.users_raw(league_id) or []
        try:
            return [UserRecord.model_validate(u) for u in data]
        except (ValidationError, TypeError) as e:
            raise UpstreamError(f"Sleeper API error (users): unexpected shape: {e}") from e

    def get_rosters(self, league_id: str) -> List[RosterRecord]:
        data = self.rosters_raw(league_id) or []
        try:
            return [RosterRecord.model_validate(r) for r in data]
        except (ValidationError, TypeError) as e:
            raise UpstreamError(f"Sleeper API error (rosters): unexpected shape: {e}") from e

    # ---------------- season batch ----------------

    async def fetch_season(self, league_id: str) -> SeasonBundle:
        """
        League, rosters and users for one season, requested concurrently.
        The first failure wins; there is no partial bundle.
        """
        league, rosters, users = await asyncio.gather(
            asyncio.to_thread(self.get_league, league_id),
            asyncio.to_thread(self.get_rosters, league_id),
            asyncio.to_thread(self.get_users, league_id),
        )
        return SeasonBundle(league=league, rosters=rosters, users=users)

    async def fetch_season_result(self, league_id: str) -> SeasonFetch:
        try:
            return SeasonFetch.ok(await self.fetch_season(league_id))
        except NotFound as e:
            return SeasonFetch.not_found(str(e))
        except LeagueDataError as e:
            return SeasonFetch.error(str(e))
