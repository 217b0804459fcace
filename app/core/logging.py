# app/core/logging.py
from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Root logger setup; safe to call more than once (uvicorn reload, tests)."""
    resolved = logging.getLevelName(str(level).upper())
    if not isinstance(resolved, int):
        resolved = logging.INFO
    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    logging.getLogger().setLevel(resolved)
    # requests' connection pool chatter is noise at INFO
    logging.getLogger("urllib3").setLevel(max(resolved, logging.WARNING))
