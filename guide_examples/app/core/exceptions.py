"""
Exception types raised by the service registry.

Handler errors are not wrapped: they propagate as raised until the
exception handling middleware turns them into a 500 response.  The types
below signal registry misuse, which should surface at startup rather than
per request, and failures while releasing scoped services.
"""

from typing import List


class ServiceRegistryError(Exception):
    """Base class for service registry errors."""


class MissingDependencyError(ServiceRegistryError, LookupError):
    """Raised when resolving a capability that was never registered."""

    def __init__(self, capability) -> None:
        super().__init__(f"No service registered for capability '{capability.value}'")
        self.capability = capability


class ScopeRequiredError(ServiceRegistryError):
    """Raised when a per-request service is resolved outside a request scope."""

    def __init__(self, capability) -> None:
        super().__init__(
            f"Capability '{capability.value}' is registered per request and must be "
            "resolved from a request scope"
        )
        self.capability = capability


class ScopeClosedError(ServiceRegistryError):
    """Raised when resolving from a scope that has already been closed."""


class RegistryFrozenError(ServiceRegistryError):
    """Raised when registering a service after the registry was frozen."""


class ScopeDisposalError(ServiceRegistryError):
    """Raised after a scope has closed everything it owns, if any ``close()`` failed.

    ``errors`` holds the exceptions in the order they were raised.
    """

    def __init__(self, errors: List[Exception]) -> None:
        super().__init__(f"{len(errors)} service(s) failed to close: {errors[0]}")
        self.errors = errors
