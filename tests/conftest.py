"""Shared fixtures for the pet clinic tests."""
import pytest

from petclinic import create_app
from petclinic.config.settings import TestingConfig
from petclinic.infrastructure.service_container import ServiceContainer


@pytest.fixture
def app():
    ServiceContainer.reset()
    app = create_app(TestingConfig)
    yield app
    ServiceContainer.reset()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def container(app):
    return app.config['service_container']


@pytest.fixture
def request_context(app):
    """Request context needed to build Flask-WTF forms outside a view."""
    with app.test_request_context():
        yield
