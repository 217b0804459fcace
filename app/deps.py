from typing import Iterator

from app.core.config import settings
from app.services.sleeper import SleeperClient


def get_league_client() -> Iterator[SleeperClient]:
    """
    One client per request, closed once the response is sent.
    Tests override this with app.dependency_overrides.
    """
    client = SleeperClient(base_url=settings.SLEEPER_API_BASE, timeout=settings.SLEEPER_TIMEOUT_SECONDS)
    try:
        yield client
    finally:
        client.close()
