# app/main.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api import routes_league
from app.core.config import settings
from app.core.logging import configure_logging
from app.middleware.request_log import RequestLogMiddleware

configure_logging(settings.LOG_LEVEL)
settings.validate_at_startup()

logger = logging.getLogger(__name__)

app = FastAPI(title=settings.APP_NAME)
app.add_middleware(RequestLogMiddleware)

ALLOWED_ORIGINS = settings.CORS_ORIGINS
logger.info("CORS allow_origins = %s", ALLOWED_ORIGINS)

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_origin_regex=r"^https?://(localhost|127\.0\.0\.1)(:\d+)?$" if settings.IS_LOCAL else None,
    allow_credentials=False,
    allow_methods=["GET"],
    allow_headers=["*"],
    max_age=600,
)

# Routers
app.include_router(routes_league.router)


@app.get("/health")
def health():
    return {"ok": True, "env": settings.APP_ENV}
