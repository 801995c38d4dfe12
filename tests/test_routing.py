# tests/test_routing.py
from fastapi import APIRouter, FastAPI
from fastapi.responses import PlainTextResponse
from fastapi.testclient import TestClient

from guide_examples.app.core.routing import literal_segment_count, match_route, prioritise_literal_routes
from guide_examples.app.main import create_app


def _greeting_app():
    router = APIRouter()

    @router.get("/{name}", response_class=PlainTextResponse)
    async def greet(name: str):
        return f"hi {name}"

    @router.get("/everyone", response_class=PlainTextResponse)
    async def greet_everyone():
        return "hi all"

    @router.get("/{first}/{second}", response_class=PlainTextResponse)
    async def greet_pair(first: str, second: str):
        return f"hi {first} and {second}"

    app = FastAPI()
    app.include_router(router, prefix="/greet")
    prioritise_literal_routes(app.router)
    return app


def test_literal_segments_are_counted_per_route():
    app = _greeting_app()
    counts = {route.path: literal_segment_count(route) for route in app.router.routes if route.path.startswith("/greet")}
    assert counts == {"/greet/{name}": 1, "/greet/everyone": 2, "/greet/{first}/{second}": 1}


def test_most_literal_segments_win_over_registration_order():
    app = _greeting_app()
    match = match_route(app.router.routes, "GET", "/greet/everyone")
    assert match.route.path == "/greet/everyone"
    assert match_route(app.router.routes, "get", "/greet/Ada").path_params == {"name": "Ada"}
    client = TestClient(app)
    assert client.get("/greet/everyone").text == "hi all"
    assert client.get("/greet/Ada").text == "hi Ada"


def test_equally_specific_routes_keep_registration_order():
    app = _greeting_app()
    paths = [route.path for route in app.router.routes if route.path.startswith("/greet")]
    assert paths == ["/greet/everyone", "/greet/{name}", "/greet/{first}/{second}"]


def test_match_returns_none_when_nothing_fits():
    routes = create_app().router.routes
    assert match_route(routes, "GET", "/products/2/reviews") is None
    assert match_route(routes, "POST", "/products/2") is None
    assert match_route(routes, "GET", "/nowhere") is None


def test_application_routes_capture_parameters():
    routes = create_app().router.routes
    assert match_route(routes, "GET", "/products").route.path == "/products"
    assert match_route(routes, "GET", "/products/2").path_params == {"product_id": "2"}
    assert match_route(routes, "GET", "/greet/Ada").path_params == {"name": "Ada"}
    assert match_route(routes, "GET", "/").route.path == "/"
