"""
Sleeper service package: HTTP client plus the error types callers branch on.
"""

from .client import SleeperClient
from .errors import LeagueDataError, NotFound, SeasonFetch, UpstreamError

__all__ = [
    "SleeperClient",
    "LeagueDataError",
    "NotFound",
    "UpstreamError",
    "SeasonFetch",
]
