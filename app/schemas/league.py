from __future__ import annotations

from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator


class _Upstream(BaseModel):
    # Sleeper payloads carry far more than we read; records are read-only once built
    model_config = ConfigDict(extra="ignore", frozen=True)


class UserRecord(_Upstream):
    user_id: str
    display_name: Optional[str] = None
    username: Optional[str] = None


class RosterSettings(_Upstream):
    wins: Optional[int] = None
    losses: Optional[int] = None
    ties: Optional[int] = None
    # kept as sent; total_points joins them as text
    fpts: Union[int, float, str, None] = None
    fpts_decimal: Union[int, float, str, None] = None


class RosterRecord(_Upstream):
    roster_id: int
    owner_id: Optional[str] = None          # null for orphaned teams
    settings: RosterSettings = RosterSettings()

    @field_validator("settings", mode="before")
    @classmethod
    def _null_settings(cls, v):
        return {} if v is None else v


class LeagueRecord(_Upstream):
    league_id: str
    name: Optional[str] = None
    season: str
    total_rosters: Optional[int] = None
    previous_league_id: Optional[str] = None

    @field_validator("league_id", "season", "previous_league_id", mode="before")
    @classmethod
    def _ids_as_str(cls, v):
        return str(v) if v is not None else v


class SeasonBundle(BaseModel):
    """One season's league, rosters and users, fetched together."""
    model_config = ConfigDict(frozen=True)

    league: LeagueRecord
    rosters: List[RosterRecord] = []
    users: List[UserRecord] = []


class StandingsEntry(BaseModel):
    roster_id: int
    owner: str
    wins: int
    losses: int
    ties: int
    total_points: float


class StandingsResult(BaseModel):
    season: str
    league_name: Optional[str] = None
    standings: List[StandingsEntry]


class ChampionHistoryEntry(BaseModel):
    season: str
    league_id: str
    name: Optional[str] = None
    champion: str                       # owner label, "Unknown" when the season has no rosters
    total_rosters: Optional[int] = None


class LeagueHistory(BaseModel):
    league_id: str
    champions: List[ChampionHistoryEntry]
    standings_by_season: Dict[str, StandingsResult]


class ErrorBody(BaseModel):
    error: str
