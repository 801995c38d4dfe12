"""
Middleware opening one service scope per request.

The scope is stored on ``request.state.services`` for the dependencies in
``app.api.deps`` and closed once the response has been produced.  This
link sits inside the exception handling link, so a service whose
``close()`` fails still turns into a 500 response.
"""

from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from guide_examples.app.core.container import ServiceRegistry


class ServiceScopeMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: ASGIApp, registry: ServiceRegistry) -> None:
        super().__init__(app)
        self.registry = registry

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        with self.registry.create_scope() as scope:
            request.state.services = scope
            return await call_next(request)
