"""
Service registry with per-call, per-request and singleton lifetimes.

Services are registered against a :class:`Capability` tag together with a
factory and a :class:`Lifetime`.  Factories receive the scope that is
resolving them, so a service can resolve its own dependencies::

    registry = ServiceRegistry()
    registry.register(Capability.CATALOGUE, lambda _: ProductCatalogue(items), Lifetime.SINGLETON)
    registry.register(
        Capability.PRODUCTS,
        lambda scope: ProductRepository(scope.resolve(Capability.CATALOGUE)),
        Lifetime.PER_REQUEST,
    )
    registry.freeze()

    with registry.create_scope() as scope:
        repository = scope.resolve(Capability.PRODUCTS)

Singletons are created lazily on first resolution and always from the
registry's root scope, so they never capture a per-request instance.
Instances exposing a ``close()`` method are closed together with the
scope that created them.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List

from .exceptions import (
    MissingDependencyError,
    RegistryFrozenError,
    ScopeClosedError,
    ScopeDisposalError,
    ScopeRequiredError,
)


logger = logging.getLogger(__name__)


class Capability(str, Enum):
    """Capabilities the example application can resolve."""

    SETTINGS = "settings"
    GREETING = "greeting"
    CATALOGUE = "catalogue"
    PRODUCTS = "products"


class Lifetime(str, Enum):
    """How long a resolved instance is reused."""

    PER_CALL = "per-call"
    PER_REQUEST = "per-request"
    SINGLETON = "singleton"


ServiceFactory = Callable[["ServiceScope"], Any]


@dataclass(frozen=True)
class ServiceRegistration:
    """A provider for one capability."""

    capability: Capability
    factory: ServiceFactory
    lifetime: Lifetime


class ServiceScope:
    """Resolution scope.

    A request scope caches per-request instances for its own duration.
    The registry's root scope refuses per-request services and does not
    track per-call instances: whoever resolves one from the root owns it.
    """

    def __init__(self, registry: "ServiceRegistry", *, root: bool = False) -> None:
        self._registry = registry
        self._root = root
        self._instances: Dict[Capability, Any] = {}
        self._disposables: List[Any] = []
        self._closed = False

    @property
    def is_root(self) -> bool:
        return self._root

    @property
    def closed(self) -> bool:
        return self._closed

    def resolve(self, capability: Capability) -> Any:
        """Return an instance for ``capability`` according to its lifetime."""
        if self._closed:
            raise ScopeClosedError(f"Cannot resolve '{capability.value}' from a closed scope")
        registration = self._registry.get_registration(capability)
        if registration.lifetime is Lifetime.SINGLETON:
            return self._registry._get_singleton(registration)
        if registration.lifetime is Lifetime.PER_REQUEST:
            if self._root:
                raise ScopeRequiredError(capability)
            if capability not in self._instances:
                self._instances[capability] = self._create(registration)
            return self._instances[capability]
        return self._create(registration, owned=not self._root)

    def _create(self, registration: ServiceRegistration, owned: bool = True) -> Any:
        instance = registration.factory(self)
        if owned and callable(getattr(instance, "close", None)):
            self._disposables.append(instance)
        return instance

    def close(self) -> None:
        """Close owned instances in reverse creation order.

        Every instance is closed even if an earlier ``close()`` fails; the
        failures are logged and raised together as :class:`ScopeDisposalError`.
        """
        if self._closed:
            return
        self._closed = True
        disposables, self._disposables = self._disposables, []
        self._instances.clear()
        errors: List[Exception] = []
        for instance in reversed(disposables):
            try:
                instance.close()
            except Exception as exc:
                logger.exception("Failed to close %s", type(instance).__name__)
                errors.append(exc)
        if errors:
            raise ScopeDisposalError(errors) from errors[0]

    def __enter__(self) -> "ServiceScope":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class ServiceRegistry:
    """Associates capabilities with factories and lifetimes."""

    def __init__(self) -> None:
        self._registrations: Dict[Capability, ServiceRegistration] = {}
        self._singletons: Dict[Capability, Any] = {}
        # Reentrant: a singleton factory may resolve another singleton.
        self._singleton_lock = threading.RLock()
        self._frozen = False
        self._root = ServiceScope(self, root=True)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def register(
        self,
        capability: Capability,
        factory: ServiceFactory,
        lifetime: Lifetime = Lifetime.PER_CALL,
    ) -> None:
        """Register or overwrite the provider for ``capability``."""
        if self._frozen:
            raise RegistryFrozenError(
                f"Cannot register '{capability.value}': the registry is frozen"
            )
        if capability in self._registrations:
            logger.debug("Overwriting registration for %s", capability.value)
        self._registrations[capability] = ServiceRegistration(
            capability=capability, factory=factory, lifetime=Lifetime(lifetime)
        )

    def freeze(self) -> None:
        """Refuse further registrations."""
        self._frozen = True

    def get_registration(self, capability: Capability) -> ServiceRegistration:
        try:
            return self._registrations[capability]
        except KeyError:
            raise MissingDependencyError(capability) from None

    def __contains__(self, capability: object) -> bool:
        return capability in self._registrations

    def create_scope(self) -> ServiceScope:
        """Open a new request scope."""
        return ServiceScope(self)

    def resolve(self, capability: Capability) -> Any:
        """Resolve from the root scope (per-call and singleton services only)."""
        return self._root.resolve(capability)

    def _get_singleton(self, registration: ServiceRegistration) -> Any:
        capability = registration.capability
        if capability in self._singletons:
            return self._singletons[capability]
        with self._singleton_lock:
            if capability not in self._singletons:
                logger.debug("Creating singleton %s", capability.value)
                self._singletons[capability] = self._root._create(registration)
            return self._singletons[capability]

    def close(self) -> None:
        """Close singletons and root-owned instances."""
        try:
            self._root.close()
        finally:
            self._singletons.clear()
