"""Small builders for Sleeper-shaped JSON payloads."""
from __future__ import annotations

from typing import Any, Dict


def league(league_id, season, previous=None, name="Dynasty Bros", total_rosters=2):
    return {
        "league_id": league_id,
        "name": name,
        "season": season,
        "total_rosters": total_rosters,
        "previous_league_id": previous,
        "status": "complete",
        "sport": "nfl",
    }


def roster(roster_id, owner_id, wins=0, losses=0, ties=0, fpts=0, fpts_decimal=0):
    return {
        "roster_id": roster_id,
        "owner_id": owner_id,
        "players": [],
        "settings": {"wins": wins, "losses": losses, "ties": ties, "fpts": fpts, "fpts_decimal": fpts_decimal},
    }


def user(user_id, display_name=None, username=None):
    return {"user_id": user_id, "display_name": display_name, "username": username, "avatar": None}


def season_routes(league_payload, rosters, users) -> Dict[str, Any]:
    lid = league_payload["league_id"]
    return {
        f"/league/{lid}": league_payload,
        f"/league/{lid}/rosters": rosters,
        f"/league/{lid}/users": users,
    }

