# app/api/routes_league.py
from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.deps import get_league_client
from app.schemas.league import ErrorBody, LeagueHistory
from app.services.champions import walk
from app.services.history import league_history, season_standings
from app.services.sleeper import SleeperClient

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["league"])

RAW_TYPES = ("league", "users", "rosters", "matchups", "drafts")
DATA_TYPES = RAW_TYPES + ("standings", "champions")


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def _fetch(client: SleeperClient, data_type: str, league_id: str, week: Optional[str]) -> Any:
    if data_type == "league":
        return await asyncio.to_thread(client.league_raw, league_id)
    if data_type == "users":
        return await asyncio.to_thread(client.users_raw, league_id)
    if data_type == "rosters":
        return await asyncio.to_thread(client.rosters_raw, league_id)
    if data_type == "matchups":
        return await asyncio.to_thread(client.matchups_raw, league_id, week)
    if data_type == "drafts":
        return await asyncio.to_thread(client.drafts_raw, league_id)
    if data_type == "standings":
        return (await season_standings(client, league_id)).model_dump()
    # champions
    entries = await walk(league_id, client.fetch_season_result)
    return [e.model_dump() for e in entries]


# ---------------- PROXY / AGGREGATION ----------------
@router.get(
    "/league-data",
    responses={400: {"model": ErrorBody}, 500: {"model": ErrorBody}},
)
async def league_data(
    league_id: Optional[str] = Query(default=None, alias="leagueId"),
    data_type: Optional[str] = Query(
        default=None,
        alias="dataType",
        description="league | users | rosters | matchups | drafts | standings | champions",
    ),
    week: Optional[str] = Query(default=None, description="Required for matchups"),
    season: Optional[str] = Query(default=None, description="Required for matchups and standings"),
    client: SleeperClient = Depends(get_league_client),
):
    """
    Proxies the Sleeper read endpoints and serves the two aggregations
    (season standings, champion history).
    """
    league_id = (league_id or "").strip()
    if not league_id:
        return _error(400, "League ID is required.")

    if data_type not in DATA_TYPES:
        return _error(400, "Invalid data type requested.")
    if data_type == "matchups" and (not week or not season):
        return _error(400, "Week and season are required for matchups.")
    if data_type == "standings" and not season:
        return _error(400, "Season is required for standings.")

    try:
        data = await _fetch(client, data_type, league_id, week)
    except Exception as e:
        logger.exception("Error fetching Sleeper data for %s (league %s)", data_type, league_id)
        return _error(500, f"Failed to fetch data: {e}")

    return JSONResponse(status_code=200, content=data)


# ---------------- HISTORY (champions + standings per season) ----------------
@router.get(
    "/league-history",
    response_model=LeagueHistory,
    responses={400: {"model": ErrorBody}, 500: {"model": ErrorBody}},
)
async def league_history_route(
    league_id: Optional[str] = Query(
        default=None,
        alias="leagueId",
        description="Most recent season's league id; defaults to DEFAULT_LEAGUE_ID",
    ),
    client: SleeperClient = Depends(get_league_client),
):
    league_id = (league_id or settings.DEFAULT_LEAGUE_ID or "").strip()
    if not league_id:
        return _error(400, "League ID is required.")

    try:
        return await league_history(client, league_id)
    except Exception as e:
        logger.exception("Error building league history for %s", league_id)
        return _error(500, f"Failed to fetch data: {e}")
