from __future__ import annotations

import re
from typing import Any, Dict, Iterable, List, Sequence, Tuple

from app.schemas.league import (
    LeagueRecord,
    RosterRecord,
    StandingsEntry,
    StandingsResult,
    UserRecord,
)

UNKNOWN_OWNER = "Unknown Owner"

# Leading decimal number, the way a lenient float parser reads "1234.56", "1234.5.7" or "12abc"
_NUMBER_PREFIX = re.compile(r"\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")


def _as_text(v: Any) -> str:
    # 56.0 should print as "56", not "56.0"
    if isinstance(v, float) and v.is_integer():
        return str(int(v))
    return str(v)


def total_points(fpts: Any = None, fpts_decimal: Any = None) -> float:
    """
    Sleeper splits season points into `fpts` and `fpts_decimal`, the digits printed
    after the decimal point. They are joined as text, not added:
        (1234, 56) -> 1234.56
        (1234, 5)  -> 1234.5
        (1234, None) -> 1234.0
    Missing/null/0 parts count as 0.
    """
    whole = _as_text(fpts or 0)
    frac = _as_text(fpts_decimal or 0)
    m = _NUMBER_PREFIX.match(f"{whole}.{frac}")
    if not m:
        return 0.0
    return float(m.group(1))


def owner_labels(users: Iterable[UserRecord]) -> Dict[str, str]:
    """user_id -> display_name, falling back to username."""
    out: Dict[str, str] = {}
    for u in users:
        label = u.display_name or u.username
        if label:
            out[u.user_id] = label
    return out


def owner_label(labels: Dict[str, str], owner_id: str | None) -> str:
    if owner_id is None:
        return UNKNOWN_OWNER
    return labels.get(owner_id) or UNKNOWN_OWNER


def rank_key(entry: StandingsEntry) -> Tuple[int, float]:
    # sorted() is stable, so exact ties stay in upstream order
    return (-entry.wins, -entry.total_points)


def build_entry(roster: RosterRecord, labels: Dict[str, str]) -> StandingsEntry:
    s = roster.settings
    return StandingsEntry(
        roster_id=roster.roster_id,
        owner=owner_label(labels, roster.owner_id),
        wins=s.wins or 0,
        losses=s.losses or 0,
        ties=s.ties or 0,
        total_points=total_points(s.fpts, s.fpts_decimal),
    )


def rank_rosters(rosters: Sequence[RosterRecord], users: Sequence[UserRecord]) -> List[StandingsEntry]:
    labels = owner_labels(users)
    return sorted((build_entry(r, labels) for r in rosters), key=rank_key)


def aggregate(
    league: LeagueRecord,
    rosters: Sequence[RosterRecord],
    users: Sequence[UserRecord],
) -> StandingsResult:
    """
    One season's standings: wins desc, then total_points desc.
    Empty rosters give an empty table, not an error.
    """
    return StandingsResult(
        season=league.season,
        league_name=league.name,
        standings=rank_rosters(rosters, users),
    )
