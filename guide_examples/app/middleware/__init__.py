"""
Middleware installed by ``main.build_middleware``.

Order matters: the first link runs first on the way in and last on the
way out.
"""

from .exception_handling import ExceptionHandlingMiddleware
from .request_logging import RequestLoggingMiddleware
from .service_scope import ServiceScopeMiddleware

__all__ = ["ExceptionHandlingMiddleware", "RequestLoggingMiddleware", "ServiceScopeMiddleware"]
