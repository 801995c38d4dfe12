# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from guide_examples.app.core.config import Settings
from guide_examples.app.core.container import Capability, Lifetime, ServiceRegistry
from guide_examples.app.main import create_app, create_registry


@pytest.fixture
def app_settings():
    """Settings with the documented defaults, independent of the environment."""
    return Settings(
        project_name="Guide Examples (tests)",
        log_level="DEBUG",
        log_file=None,
        welcome_message="ASP.NET Core is running!",
        greeting_template="Hello, {name}! Welcome to ASP.NET Core.",
        api_base_url="http://testserver",
    )


@pytest.fixture
def app_registry(app_settings):
    return create_registry(app_settings)


@pytest.fixture
def client(app_settings, app_registry):
    app = create_app(app_settings, registry=app_registry)
    with TestClient(app) as test_client:
        yield test_client


class Recorder:
    """Service that remembers whether it was closed."""

    instances = 0

    def __init__(self):
        Recorder.instances += 1
        self.number = Recorder.instances
        self.closed = False

    def close(self):
        self.closed = True


@pytest.fixture
def registry():
    Recorder.instances = 0
    registry = ServiceRegistry()
    registry.register(Capability.GREETING, lambda _: Recorder(), Lifetime.PER_CALL)
    registry.register(Capability.PRODUCTS, lambda _: Recorder(), Lifetime.PER_REQUEST)
    registry.register(Capability.CATALOGUE, lambda _: Recorder(), Lifetime.SINGLETON)
    return registry
