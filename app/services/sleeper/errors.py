from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict

from app.schemas.league import SeasonBundle


class LeagueDataError(Exception):
    """Base for anything that goes wrong reading from Sleeper."""


class NotFound(LeagueDataError):
    pass


class UpstreamError(LeagueDataError):
    pass


FetchStatus = Literal["ok", "not_found", "error"]


class SeasonFetch(BaseModel):
    """
    Tagged outcome of fetching one season:
      - ok:        bundle is set
      - not_found: the league id does not exist upstream
      - error:     anything else; message says what
    """
    model_config = ConfigDict(frozen=True)

    status: FetchStatus
    bundle: Optional[SeasonBundle] = None
    message: Optional[str] = None

    @classmethod
    def ok(cls, bundle: SeasonBundle) -> "SeasonFetch":
        return cls(status="ok", bundle=bundle)

    @classmethod
    def not_found(cls, message: str) -> "SeasonFetch":
        return cls(status="not_found", message=message)

    @classmethod
    def error(cls, message: str) -> "SeasonFetch":
        return cls(status="error", message=message)
