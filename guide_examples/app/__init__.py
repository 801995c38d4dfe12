"""
Middleware and dependency injection example.

The package is organised like a small web service: ``core`` holds
configuration, logging, the service registry and route ordering,
``middleware`` the request interceptors, ``services`` and ``schemas`` the
domain pieces, and ``api/endpoints`` the route handlers.  ``main``
assembles them.
"""

from .main import app  # noqa: F401
