"""Integration tests for the language catalog endpoint."""

from http import HTTPStatus

from flask.testing import FlaskClient

from unitrans.backend.app.routes import languages as languages_routes
from unitrans.backend.config.language_catalog import get_languages
from unitrans.backend.config.schema import ConfigurationError


def test_languages_endpoint_returns_catalog(client: FlaskClient) -> None:
    response = client.get("/api/languages")

    assert response.status_code == HTTPStatus.OK
    payload = response.get_json()
    assert payload == dict(get_languages())
    assert payload["en"] == "English"
    assert payload["zh-tw"] == "Chinese (Traditional)"


def test_languages_endpoint_preserves_catalog_order(client: FlaskClient) -> None:
    """``auto`` leads the list so source pickers default to it."""

    response = client.get("/api/languages")

    body = response.get_data(as_text=True)
    assert body.index('"auto"') < body.index('"en"') < body.index('"af"')
    assert list(response.get_json())[0] == "auto"


def test_languages_endpoint_rejects_post(client: FlaskClient) -> None:
    response = client.post("/api/languages", json={})

    assert response.status_code == HTTPStatus.METHOD_NOT_ALLOWED


def test_broken_catalog_is_a_server_error(client: FlaskClient, monkeypatch) -> None:
    def broken_catalog():
        raise ConfigurationError("broken catalog")

    monkeypatch.setattr(languages_routes, "get_languages", broken_catalog)

    response = client.get("/api/languages")

    assert response.status_code == HTTPStatus.INTERNAL_SERVER_ERROR
    assert response.get_json() == {"error": "configuration_error", "message": "broken catalog"}
