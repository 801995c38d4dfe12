# tests/test_middleware.py
import logging

import pytest
from fastapi import Depends, FastAPI
from fastapi.responses import PlainTextResponse
from fastapi.testclient import TestClient
from starlette.middleware import Middleware
from starlette.middleware.base import BaseHTTPMiddleware

from guide_examples.app.api.deps import get_services
from guide_examples.app.core.container import Capability, Lifetime, ServiceRegistry
from guide_examples.app.middleware import (
    ExceptionHandlingMiddleware,
    RequestLoggingMiddleware,
    ServiceScopeMiddleware,
)


class Tracing(BaseHTTPMiddleware):
    def __init__(self, app, name, trace):
        super().__init__(app)
        self.name = name
        self.trace = trace

    async def dispatch(self, request, call_next):
        self.trace.append(f"{self.name}:in")
        response = await call_next(request)
        self.trace.append(f"{self.name}:out")
        return response


class Deny(BaseHTTPMiddleware):
    async def dispatch(self, request, call_next):
        return PlainTextResponse("denied", status_code=403)


class Stamp(BaseHTTPMiddleware):
    async def dispatch(self, request, call_next):
        response = await call_next(request)
        response.headers["X-Stamp"] = "yes"
        return response


class Tracker:
    def __init__(self):
        self.closed = False

    def close(self):
        self.closed = True


class FailingTracker(Tracker):
    def close(self):
        super().close()
        raise RuntimeError("close failed")


def _app(middleware, registry=None):
    registry = registry or ServiceRegistry()
    app = FastAPI(middleware=[*middleware, Middleware(ServiceScopeMiddleware, registry=registry)])

    @app.get("/", response_class=PlainTextResponse)
    async def index():
        return "home"

    @app.get("/boom")
    async def boom():
        raise RuntimeError("kaboom")

    return app


def test_links_run_in_declared_order_and_unwind_in_reverse():
    trace = []
    app = _app([Middleware(Tracing, name="a", trace=trace), Middleware(Tracing, name="b", trace=trace)])
    resp = TestClient(app).get("/")
    assert resp.text == "home"
    assert trace == ["a:in", "b:in", "b:out", "a:out"]


def test_link_can_short_circuit():
    trace = []
    app = _app([Middleware(Deny), Middleware(Tracing, name="inner", trace=trace)])
    resp = TestClient(app).get("/")
    assert resp.status_code == 403
    assert trace == []


def test_link_can_modify_the_response():
    resp = TestClient(_app([Middleware(Stamp)])).get("/")
    assert resp.headers["x-stamp"] == "yes"


def test_exception_middleware_converts_errors_to_500(caplog):
    app = _app([Middleware(ExceptionHandlingMiddleware)])
    with caplog.at_level(logging.ERROR):
        resp = TestClient(app).get("/boom")
    assert resp.status_code == 500
    assert resp.text == "An internal server error occurred"
    assert "Unhandled exception: kaboom" in caplog.text


def test_errors_propagate_without_exception_middleware():
    with pytest.raises(RuntimeError):
        TestClient(_app([])).get("/boom")


def test_request_logging_reports_request_and_status(caplog):
    app = _app([Middleware(RequestLoggingMiddleware), Middleware(ExceptionHandlingMiddleware)])
    with caplog.at_level(logging.INFO):
        TestClient(app).get("/boom")
    messages = [record.getMessage() for record in caplog.records]
    assert "Request: GET /boom" in messages
    assert any(message.startswith("Response: 500") for message in messages)


def test_each_request_gets_its_own_scope():
    seen = []
    registry = ServiceRegistry()
    registry.register(Capability.PRODUCTS, lambda _: Tracker(), Lifetime.PER_REQUEST)
    app = _app([], registry)

    @app.get("/tracked", response_class=PlainTextResponse)
    async def tracked(services=Depends(get_services)):
        first = services.resolve(Capability.PRODUCTS)
        assert services.resolve(Capability.PRODUCTS) is first
        seen.append(first)
        return "ok"

    client = TestClient(app)
    client.get("/tracked")
    client.get("/tracked")

    assert len(seen) == 2
    assert seen[0] is not seen[1]
    assert all(tracker.closed for tracker in seen)


def test_failing_close_becomes_500_and_other_services_are_still_closed(caplog):
    created = []

    def factory(tracker_class):
        def create(_):
            created.append(tracker_class())
            return created[-1]

        return create

    registry = ServiceRegistry()
    registry.register(Capability.CATALOGUE, factory(Tracker), Lifetime.PER_REQUEST)
    registry.register(Capability.PRODUCTS, factory(FailingTracker), Lifetime.PER_REQUEST)
    app = _app([Middleware(ExceptionHandlingMiddleware)], registry)

    @app.get("/tracked", response_class=PlainTextResponse)
    async def tracked(services=Depends(get_services)):
        services.resolve(Capability.CATALOGUE)
        services.resolve(Capability.PRODUCTS)
        return "ok"

    with caplog.at_level(logging.ERROR):
        resp = TestClient(app).get("/tracked")

    assert resp.status_code == 500
    assert resp.text == "An internal server error occurred"
    assert all(tracker.closed for tracker in created)
    assert "close failed" in caplog.text
