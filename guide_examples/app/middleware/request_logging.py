"""Middleware logging every request and the status of its response."""

import logging
import time
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware


logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log ``Request: METHOD PATH`` before and ``Response: STATUS`` after."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        logger.info("Request: %s %s", request.method, request.url.path)
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info("Response: %s (%.1f ms)", response.status_code, elapsed_ms)
        return response
