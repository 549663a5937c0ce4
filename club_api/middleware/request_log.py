"""
Request logging middleware.

Logs one line per request with method, path, status and duration, and
reports the duration back to the client in ``X-Process-Time``.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware
from fastapi import Request

logger = logging.getLogger(__name__)


class RequestLogMiddleware(BaseHTTPMiddleware):
    """
    Log every request handled by the application.

    Server errors are logged at ERROR, client errors at WARNING, the rest
    at INFO.
    """

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        response.headers["X-Process-Time"] = f"{elapsed_ms:.2f}ms"

        if response.status_code >= 500:
            level = logging.ERROR
        elif response.status_code >= 400:
            level = logging.WARNING
        else:
            level = logging.INFO

        logger.log(
            level,
            "%s %s -> %d (%.2fms)",
            request.method, request.url.path, response.status_code, elapsed_ms
        )
        return response
