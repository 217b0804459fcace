from __future__ import annotations

import pytest
from pydantic import ValidationError

from app.core.config import Settings


def test_defaults_point_at_sleeper():
    s = Settings(_env_file=None)
    assert s.SLEEPER_API_BASE == "https://api.sleeper.app/v1"
    assert s.CHAMPION_HISTORY_MAX_HOPS == 50
    assert s.DEFAULT_LEAGUE_ID is None


def test_cors_accepts_json_or_csv():
    assert Settings(_env_file=None, CORS_ORIGINS='["https://a.test"]').CORS_ORIGINS == ["https://a.test"]
    assert Settings(_env_file=None, CORS_ORIGINS="https://a.test, https://b.test").CORS_ORIGINS == [
        "https://a.test",
        "https://b.test",
    ]


def test_default_league_from_env(monkeypatch):
    monkeypatch.setenv("DEFAULT_LEAGUE_ID", '"1181984921049018368"')
    assert Settings(_env_file=None).DEFAULT_LEAGUE_ID == "1181984921049018368"
    monkeypatch.setenv("DEFAULT_LEAGUE_ID", "  ")
    assert Settings(_env_file=None).DEFAULT_LEAGUE_ID is None


def test_hops_must_be_positive():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, CHAMPION_HISTORY_MAX_HOPS=0)


def test_startup_validation():
    Settings(_env_file=None).validate_at_startup()

    with pytest.raises(RuntimeError, match="CORS_ORIGINS"):
        Settings(_env_file=None, APP_ENV="prod", CORS_ORIGINS="").validate_at_startup()

    with pytest.raises(RuntimeError, match="SLEEPER_API_BASE"):
        Settings(_env_file=None, SLEEPER_API_BASE="ftp://sleeper").validate_at_startup()
