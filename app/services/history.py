from __future__ import annotations

from typing import Dict

from app.schemas.league import LeagueHistory, SeasonBundle, StandingsResult
from app.services.champions import walk
from app.services.sleeper.client import SleeperClient
from app.services.sleeper.errors import SeasonFetch
from app.services.standings import aggregate


async def season_standings(client: SleeperClient, league_id: str) -> StandingsResult:
    bundle = await client.fetch_season(league_id)
    return aggregate(bundle.league, bundle.rosters, bundle.users)


async def league_history(client: SleeperClient, league_id: str) -> LeagueHistory:
    """
    Champions for every season reachable from `league_id`, plus the full standings
    of each of those seasons keyed by season. Both come from the same fetch of
    each season, so every season is read from Sleeper once.
    """
    bundles: Dict[str, SeasonBundle] = {}

    async def fetch_and_keep(season_league_id: str) -> SeasonFetch:
        result = await client.fetch_season_result(season_league_id)
        if result.status == "ok" and result.bundle is not None:
            bundles[season_league_id] = result.bundle
        return result

    champions = await walk(league_id, fetch_and_keep)

    by_season: Dict[str, StandingsResult] = {}
    for entry in champions:
        bundle = bundles.get(entry.league_id)
        if bundle is not None:
            by_season[entry.season] = aggregate(bundle.league, bundle.rosters, bundle.users)

    return LeagueHistory(league_id=league_id, champions=champions, standings_by_season=by_season)
