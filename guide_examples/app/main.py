"""
Main entrypoint for the middleware and dependency injection example.

This module wires the application together:

* ``configure_services`` registers every service with its lifetime,
* ``create_registry`` builds and freezes the service registry,
* ``create_app`` installs the middleware in declared order, includes the
  routers and closes the singletons on shutdown.

The application is instantiated at import time as ``app`` so it can be
served directly, e.g.::

    uvicorn guide_examples.app.main:app --reload
"""

from contextlib import asynccontextmanager
from typing import Iterable, List, Optional

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware import Middleware

from .api.router import router as api_router
from .core.config import Settings, settings
from .core.container import Capability, Lifetime, ServiceRegistry
from .core.logging_config import setup_logging
from .core.routing import prioritise_literal_routes
from .middleware import ExceptionHandlingMiddleware, RequestLoggingMiddleware, ServiceScopeMiddleware
from .schemas.product import DEFAULT_PRODUCTS, ProductRead
from .services.greeting_service import GreetingService
from .services.product_service import ProductCatalogue, ProductRepository


def configure_services(
    registry: ServiceRegistry,
    app_settings: Settings,
    products: Iterable[ProductRead],
) -> None:
    """Register the example services.

    The greeting service is created on every resolution, the product
    repository once per request, and the settings and catalogue once for
    the lifetime of the registry.
    """
    catalogue_items = tuple(products)
    registry.register(Capability.SETTINGS, lambda _: app_settings, Lifetime.SINGLETON)
    registry.register(
        Capability.GREETING,
        lambda scope: GreetingService(scope.resolve(Capability.SETTINGS).greeting_template),
        Lifetime.PER_CALL,
    )
    registry.register(
        Capability.CATALOGUE,
        lambda _: ProductCatalogue(catalogue_items),
        Lifetime.SINGLETON,
    )
    registry.register(
        Capability.PRODUCTS,
        lambda scope: ProductRepository(scope.resolve(Capability.CATALOGUE)),
        Lifetime.PER_REQUEST,
    )


def create_registry(
    app_settings: Optional[Settings] = None,
    products: Iterable[ProductRead] = DEFAULT_PRODUCTS,
) -> ServiceRegistry:
    """Return a frozen registry holding the example services."""
    registry = ServiceRegistry()
    configure_services(registry, app_settings or settings, products)
    registry.freeze()
    return registry


def build_middleware(registry: ServiceRegistry) -> List[Middleware]:
    """Return the middleware stack, outermost first.

    Request logging is the outermost link so it also reports the 500
    responses produced by the exception handling link right inside it.
    The service scope is innermost, so errors raised while closing it are
    still converted.
    """
    return [
        Middleware(RequestLoggingMiddleware),
        Middleware(ExceptionHandlingMiddleware),
        Middleware(ServiceScopeMiddleware, registry=registry),
    ]


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    """Answer HTTP errors with their detail as plain text."""
    return PlainTextResponse(
        str(exc.detail),
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


def create_app(
    app_settings: Optional[Settings] = None,
    registry: Optional[ServiceRegistry] = None,
) -> FastAPI:
    """Create and configure a FastAPI application instance.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use instead of the module-level ``settings``.
    registry : Optional[ServiceRegistry]
        A prebuilt registry, mainly useful in tests.  Built from
        ``app_settings`` when omitted.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    app_settings = app_settings or settings
    setup_logging(app_settings.log_level, app_settings.log_file)
    registry = registry or create_registry(app_settings)

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        yield
        registry.close()

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.api_version,
        debug=app_settings.debug,
        middleware=build_middleware(registry),
        lifespan=lifespan,
    )
    app.state.registry = registry
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.include_router(api_router)
    prioritise_literal_routes(app.router)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
