# tests/test_app.py
import pytest
from fastapi.testclient import TestClient

from guide_examples.app.core.container import Capability, Lifetime, ServiceRegistry
from guide_examples.app.core.exceptions import ScopeClosedError
from guide_examples.app.main import configure_services, create_app, create_registry
from guide_examples.app.schemas.product import DEFAULT_PRODUCTS, ProductRead
from guide_examples.app.services.product_service import ProductRepository


def test_root_returns_welcome_text(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.text == "ASP.NET Core is running!"
    assert resp.headers["content-type"].startswith("text/plain")


def test_greet_substitutes_path_parameter(client):
    resp = client.get("/greet/Ada")
    assert resp.status_code == 200
    assert resp.text == "Hello, Ada! Welcome to ASP.NET Core."


def test_list_products_returns_catalogue(client):
    resp = client.get("/products")
    assert resp.status_code == 200
    assert resp.headers["content-type"] == "application/json"
    assert resp.json() == [
        {"id": 1, "name": "Laptop", "price": 999.99},
        {"id": 2, "name": "Mouse", "price": 29.99},
        {"id": 3, "name": "Keyboard", "price": 79.99},
    ]


def test_get_product_by_id(client):
    resp = client.get("/products/2")
    assert resp.status_code == 200
    assert resp.json() == {"id": 2, "name": "Mouse", "price": 29.99}


def test_unknown_product_is_404(client):
    resp = client.get("/products/999")
    assert resp.status_code == 404
    assert resp.text == "Product not found"


def test_non_numeric_product_id_is_500(client):
    resp = client.get("/products/abc")
    assert resp.status_code == 500
    assert resp.text == "An internal server error occurred"


def test_unknown_route_and_wrong_method(client):
    missing = client.get("/nowhere")
    assert missing.status_code == 404
    assert missing.text == "Not Found"
    resp = client.post("/products")
    assert resp.status_code == 405
    assert "GET" in resp.headers["allow"].split(", ")


def test_settings_drive_greeting_and_welcome(app_settings):
    app_settings.greeting_template = "Hey {name}!"
    app_settings.welcome_message = "Up"
    with TestClient(create_app(app_settings)) as client:
        assert client.get("/").text == "Up"
        assert client.get("/greet/Bob").text == "Hey Bob!"


def test_custom_catalogue_is_served(app_settings):
    registry = create_registry(app_settings, products=[ProductRead(id=7, name="Monitor", price=199.0)])
    with TestClient(create_app(app_settings, registry=registry)) as client:
        assert client.get("/products").json() == [{"id": 7, "name": "Monitor", "price": 199.0}]
        assert client.get("/products/1").status_code == 404


def test_shutdown_closes_the_registry(app_settings, app_registry):
    with TestClient(create_app(app_settings, registry=app_registry)) as client:
        client.get("/products")
        assert app_registry.resolve(Capability.CATALOGUE) is not None
    with pytest.raises(ScopeClosedError):
        app_registry.resolve(Capability.CATALOGUE)


class LeakyRepository(ProductRepository):
    def close(self):
        raise RuntimeError("connection already gone")


def test_failure_while_closing_request_services_is_a_500(app_settings):
    registry = ServiceRegistry()
    configure_services(registry, app_settings, DEFAULT_PRODUCTS)
    registry.register(
        Capability.PRODUCTS,
        lambda scope: LeakyRepository(scope.resolve(Capability.CATALOGUE)),
        Lifetime.PER_REQUEST,
    )
    with TestClient(create_app(app_settings, registry=registry)) as client:
        resp = client.get("/products")
        assert resp.status_code == 500
        assert resp.text == "An internal server error occurred"
        # The app keeps serving after the failed teardown.
        assert client.get("/").status_code == 200


def test_registry_is_frozen_and_exposed_on_app_state(app_settings, app_registry):
    app = create_app(app_settings, registry=app_registry)
    assert app.state.registry is app_registry
    assert app_registry.frozen
