"""
Middleware converting unhandled errors into a 500 response.

HTTP errors raised on purpose (``HTTPException``) are answered by the
application's exception handler further in and never reach this link.
Anything else, including a failure while releasing the request's
services, is logged with its traceback and the client receives a fixed
body, so internal details never leak into responses.
"""

import logging
from typing import Callable

from fastapi import Request, Response, status
from fastapi.responses import PlainTextResponse
from starlette.middleware.base import BaseHTTPMiddleware


logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "An internal server error occurred"


class ExceptionHandlingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            logger.exception("Unhandled exception: %s", exc)
            return PlainTextResponse(
                INTERNAL_ERROR_MESSAGE,
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
