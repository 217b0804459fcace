from __future__ import annotations

import logging
from typing import Awaitable, Callable, List, Optional, Sequence, Set, Tuple

from app.core.config import settings
from app.schemas.league import ChampionHistoryEntry, RosterRecord, UserRecord
from app.services.sleeper.errors import SeasonFetch
from app.services.standings import rank_rosters

logger = logging.getLogger(__name__)

NO_CHAMPION = "Unknown"

FetchSeason = Callable[[str], Awaitable[SeasonFetch]]


def is_chain_end(league_id: Optional[str]) -> bool:
    """previous_league_id of the first season is null, "" or "0"."""
    if league_id is None:
        return True
    s = str(league_id).strip()
    return s == "" or s == "0"


def pick_champion(rosters: Sequence[RosterRecord], users: Sequence[UserRecord]) -> str:
    """
    Sleeper has no champion flag for past seasons, so the champion is the top of
    the standings (most wins, then most points; earlier roster on an exact tie).
    """
    ranked = rank_rosters(rosters, users)
    if not ranked:
        return NO_CHAMPION
    return ranked[0].owner


def _season_sort_key(entry: ChampionHistoryEntry) -> Tuple[int, int]:
    try:
        return (1, int(entry.season))
    except (TypeError, ValueError):
        return (0, 0)


def sort_by_season_desc(entries: Sequence[ChampionHistoryEntry]) -> List[ChampionHistoryEntry]:
    # non-numeric seasons end up last
    return sorted(entries, key=_season_sort_key, reverse=True)


async def walk(
    start_league_id: Optional[str],
    fetch_season: FetchSeason,
    *,
    max_hops: Optional[int] = None,
) -> List[ChampionHistoryEntry]:
    """
    Follow previous_league_id back from `start_league_id`, one season per hop,
    collecting the champion of each season. Best effort: a missing league or any
    fetch error ends the walk and what was collected so far is returned.
    A league id seen twice, or more than `max_hops` hops, also ends the walk.
    """
    limit = max_hops if max_hops is not None else settings.CHAMPION_HISTORY_MAX_HOPS
    history: List[ChampionHistoryEntry] = []
    seen: Set[str] = set()
    current = start_league_id

    while not is_chain_end(current):
        current = str(current).strip()
        if current in seen:
            logger.warning("League chain loops back to %s; stopping after %d seasons", current, len(history))
            break
        if len(seen) >= limit:
            logger.warning("League chain longer than %d hops; stopping at %s", limit, current)
            break
        seen.add(current)

        try:
            result = await fetch_season(current)
        except Exception:
            logger.exception("Fetching season %s failed; keeping %d seasons", current, len(history))
            break

        if result.status == "not_found":
            logger.info("League %s not found; history ends here (%s)", current, result.message)
            break
        if result.status != "ok" or result.bundle is None:
            logger.warning("Error fetching historical league data for %s: %s", current, result.message)
            break

        bundle = result.bundle
        league = bundle.league
        history.append(
            ChampionHistoryEntry(
                season=league.season,
                league_id=league.league_id,
                name=league.name,
                champion=pick_champion(bundle.rosters, bundle.users),
                total_rosters=league.total_rosters,
            )
        )
        current = league.previous_league_id

    return sort_by_season_desc(history)
