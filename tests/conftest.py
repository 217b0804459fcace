from __future__ import annotations

from typing import Any, Dict

import pytest

from app.services.sleeper import NotFound, SleeperClient
from tests.factories import league, roster, season_routes, user


class FakeSleeper(SleeperClient):
    """SleeperClient whose GETs are answered from a dict of path -> payload (or exception)."""

    def __init__(self, routes: Dict[str, Any]):
        super().__init__(base_url="https://sleeper.test/v1", timeout=1)
        self.routes = routes
        self.calls: list[str] = []

    def get_json(self, path: str, what: str) -> Any:
        path = "/" + path.lstrip("/")
        self.calls.append(path)
        if path not in self.routes:
            raise NotFound(f"Sleeper API error ({what}): Not Found")
        payload = self.routes[path]
        if isinstance(payload, Exception):
            raise payload
        return payload


@pytest.fixture
def three_season_routes() -> Dict[str, Any]:
    """2024 -> 2023 -> 2022, each with its own champion."""
    routes: Dict[str, Any] = {}
    routes.update(season_routes(
        league("L2024", "2024", previous="L2023"),
        [roster(1, "u1", wins=9, fpts=1500, fpts_decimal=12), roster(2, "u2", wins=11, fpts=1400, fpts_decimal=3)],
        [user("u1", "Alice"), user("u2", "Bob")],
    ))
    routes.update(season_routes(
        league("L2023", "2023", previous="L2022"),
        [roster(1, "u1", wins=10, fpts=1600), roster(2, "u2", wins=10, fpts=1599, fpts_decimal=99)],
        [user("u1", "Alice"), user("u2", "Bob")],
    ))
    routes.update(season_routes(
        league("L2022", "2022", previous=None),
        [roster(1, "u3", wins=12, fpts=1700, fpts_decimal=50)],
        [user("u3", None, "carol_uname")],
    ))
    return routes


@pytest.fixture
def fake_sleeper(three_season_routes) -> FakeSleeper:
    return FakeSleeper(three_season_routes)
