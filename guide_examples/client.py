"""Client for the example web surface.

This module wraps the four routes served by ``guide_examples.app``:

* :meth:`GuideApiClient.get_status` – ``GET /``.
* :meth:`GuideApiClient.greet` – ``GET /greet/{name}``.
* :meth:`GuideApiClient.list_products` – ``GET /products``.
* :meth:`GuideApiClient.get_product` – ``GET /products/{id}``.

Every method returns a tuple ``(data, error)``.  On success ``error`` is
``None``; on failure ``data`` is ``None`` (or empty) and ``error`` is a
dictionary with the keys ``status_code`` and ``message``.  Network
failures are reported the same way with ``status_code`` set to ``None``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

import requests

from guide_examples.app.core.config import settings


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class GuideApiClient:
    """Thin ``requests`` wrapper around the example API."""

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API.  Defaults to
                ``settings.api_base_url``.
            session: Optional requests session.  If not supplied a session
                will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(self, method: str, path: str) -> Tuple[Optional[requests.Response], Optional[Error]]:
        """Perform an HTTP request and translate failures into an error dict."""
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(method=method, url=url, timeout=self.timeout)
            response.raise_for_status()
            return response, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = exc.response.text if exc.response is not None else ""
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def get_status(self) -> Tuple[Optional[str], Optional[Error]]:
        """Return the welcome text served at ``/``."""
        response, error = self._request("GET", "/")
        if error:
            return None, error
        return response.text, None

    def greet(self, name: str) -> Tuple[Optional[str], Optional[Error]]:
        """Return the greeting for ``name``.

        The server decodes the path before routing, so a ``/`` inside the
        name would split the segment; such names are rejected here without
        a request.  Other characters are percent-encoded.
        """
        if "/" in name:
            logger.warning("Cannot greet %r: names must not contain '/'", name)
            return None, {"status_code": None, "message": "Name must not contain '/'"}
        response, error = self._request("GET", f"/greet/{quote(name, safe='')}")
        if error:
            return None, error
        return response.text, None

    def list_products(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Return every product, or an empty list on failure."""
        response, error = self._request("GET", "/products")
        if error:
            return [], error
        data = response.json()
        if isinstance(data, list):
            return data, None
        return [], {"status_code": response.status_code, "message": "Unexpected payload"}

    def get_product(self, product_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Return a single product.  Unknown ids yield a 404 error."""
        response, error = self._request("GET", f"/products/{product_id}")
        if error:
            return None, error
        return response.json(), None
