# app/core/config.py
from __future__ import annotations

import json
from typing import List, Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


EnvType = Literal["local", "dev", "staging", "prod"]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # App
    APP_NAME: str = "SleeperLeagueHistory"
    APP_ENV: EnvType = "local"
    LOG_LEVEL: str = "INFO"

    # CORS
    CORS_ORIGINS: str | List[str] = Field(
        default='["http://localhost:3000","http://127.0.0.1:3000"]',
        description='JSON list or comma-separated origins',
    )

    # Sleeper
    SLEEPER_API_BASE: str = "https://api.sleeper.app/v1"
    SLEEPER_TIMEOUT_SECONDS: float = 30

    # League shown by /api/league-history when no leagueId is passed
    DEFAULT_LEAGUE_ID: Optional[str] = None

    # Upper bound on previous_league_id hops in one champion walk
    CHAMPION_HISTORY_MAX_HOPS: int = 50

    @property
    def IS_LOCAL(self) -> bool:
        return self.APP_ENV == "local"

    # ---------- Validators ----------

    @field_validator("CORS_ORIGINS")
    @classmethod
    def _parse_cors(cls, v):
        # Accept JSON list or comma-separated string
        if isinstance(v, list):
            return v
        s = str(v).strip()
        if not s:
            return []
        try:
            parsed = json.loads(s)
            if isinstance(parsed, list):
                return parsed
        except ValueError:
            pass
        # fallback: comma-separated
        return [p.strip() for p in s.split(",") if p.strip()]

    @field_validator("DEFAULT_LEAGUE_ID")
    @classmethod
    def _blank_league_is_none(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        v = v.strip().strip('"').strip("'")
        return v or None

    @field_validator("CHAMPION_HISTORY_MAX_HOPS")
    @classmethod
    def _positive_hops(cls, v: int) -> int:
        if v < 1:
            raise ValueError("CHAMPION_HISTORY_MAX_HOPS must be >= 1")
        return v

    @field_validator("SLEEPER_TIMEOUT_SECONDS")
    @classmethod
    def _positive_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("SLEEPER_TIMEOUT_SECONDS must be > 0")
        return v

    # ---------- Runtime validations ----------

    def validate_at_startup(self) -> None:
        """Fail fast with clear messages for misconfigurations."""
        problems: list[str] = []

        if not self.SLEEPER_API_BASE.startswith(("http://", "https://")):
            problems.append("SLEEPER_API_BASE must be an http(s) URL.")

        # CORS must not be empty outside local
        if not self.IS_LOCAL and not self.CORS_ORIGINS:
            problems.append("CORS_ORIGINS must contain at least one allowed origin in non-local env.")

        if problems:
            # Collapse to one helpful error line
            raise RuntimeError("Config validation failed: " + " ".join(problems))


settings = Settings()
