"""Tests for CSRF validation on the pet forms."""
import pytest

from petclinic import create_app
from petclinic.config.settings import TestingConfig
from petclinic.infrastructure.service_container import ServiceContainer


class FormCsrfConfig(TestingConfig):
    """CSRF checked by the form itself rather than the global CSRFProtect hook."""
    WTF_CSRF_ENABLED = True
    WTF_CSRF_CHECK_DEFAULT = False


@pytest.fixture
def csrf_client():
    ServiceContainer.reset()
    app = create_app(FormCsrfConfig)
    yield app.test_client()
    ServiceContainer.reset()


def test_missing_csrf_token_is_shown_on_form(csrf_client):
    response = csrf_client.post("/owners/1/pets/new", data={
        "name": "Max",
        "birth_date": "2021-05-01",
        "type": "dog",
    })

    assert response.status_code == 200
    assert b"The CSRF token is missing." in response.data
    assert b'value="Max"' in response.data


def test_creation_form_renders_csrf_token(csrf_client):
    response = csrf_client.get("/owners/1/pets/new")

    assert b'name="csrf_token"' in response.data
