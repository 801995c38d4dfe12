"""
Dependencies injected into route handlers via ``Depends``.

Each request carries the service scope opened by
``ServiceScopeMiddleware``; the providers below resolve the services a
handler needs from that scope.
"""

from fastapi import Depends, Request

from guide_examples.app.core.config import Settings
from guide_examples.app.core.container import Capability, ServiceScope
from guide_examples.app.services.greeting_service import GreetingService
from guide_examples.app.services.product_service import ProductRepository


def get_services(request: Request) -> ServiceScope:
    return request.state.services


def get_settings(services: ServiceScope = Depends(get_services)) -> Settings:
    return services.resolve(Capability.SETTINGS)


def get_greeting_service(services: ServiceScope = Depends(get_services)) -> GreetingService:
    return services.resolve(Capability.GREETING)


def get_product_repository(services: ServiceScope = Depends(get_services)) -> ProductRepository:
    return services.resolve(Capability.PRODUCTS)
