# app/middleware/request_log.py
import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

logger = logging.getLogger("app.access")


class RequestLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        query = f"?{request.url.query}" if request.url.query else ""
        logger.info("%s %s%s -> %s (%.0f ms)", request.method, request.url.path, query, response.status_code, elapsed_ms)
        return response
