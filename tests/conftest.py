"""Test configuration utilities and shared fixtures."""

import sys
from pathlib import Path

# Ensure the ``src`` directory is importable when tests are executed without an
# editable install.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from typing import Any  # noqa: E402

import pytest  # noqa: E402
from flask import Flask  # noqa: E402
from flask.testing import FlaskClient  # noqa: E402

from unitrans.backend.app import create_app  # noqa: E402
from unitrans.backend.app.services.upstream import (  # noqa: E402
    UpstreamError,
    UpstreamResponse,
)
from unitrans.backend.config.settings import ProxySettings  # noqa: E402

BASE_URL = "http://proxy.test"


class FakeUpstream:
    """Stand-in for :class:`MyMemoryClient` that records every call."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []
        self.response = UpstreamResponse(translated_text="Hola", quality=0.98)
        self.error: UpstreamError | None = None

    def translate(self, text: str, langpair: str) -> UpstreamResponse:
        self.calls.append((text, langpair))
        if self.error is not None:
            raise self.error
        return self.response


class FlaskTestResponse:
    """Expose the parts of ``requests.Response`` the controller reads."""

    def __init__(self, response: Any) -> None:
        self._response = response
        self.status_code = response.status_code

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    def json(self) -> Any:
        payload = self._response.get_json(silent=True)
        if payload is None:
            raise ValueError("Response body is not JSON")
        return payload


class FlaskClientSession:
    """Route controller HTTP calls into a Flask test client."""

    def __init__(self, client: FlaskClient, base_url: str = BASE_URL) -> None:
        self._client = client
        self._base_url = base_url
        self.requests: list[tuple[str, str]] = []

    def _path(self, url: str) -> str:
        assert url.startswith(self._base_url), url
        return url[len(self._base_url):]

    def get(self, url: str, **kwargs: Any) -> FlaskTestResponse:
        path = self._path(url)
        self.requests.append(("GET", path))
        return FlaskTestResponse(self._client.get(path))

    def post(self, url: str, json: Any = None, **kwargs: Any) -> FlaskTestResponse:
        path = self._path(url)
        self.requests.append(("POST", path))
        return FlaskTestResponse(self._client.post(path, json=json))


@pytest.fixture()
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture()
def settings() -> ProxySettings:
    return ProxySettings(allowed_origins=frozenset({"https://allowed.test"}))


@pytest.fixture()
def app(settings: ProxySettings, upstream: FakeUpstream) -> Flask:
    """Return a configured Flask application for integration tests."""

    application = create_app(settings, upstream=upstream)
    application.config.update(TESTING=True)
    return application


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    """Provide a test client bound to the configured Flask app."""

    return app.test_client()


@pytest.fixture()
def proxy_session(client: FlaskClient) -> FlaskClientSession:
    """A controller session backed by the in-process proxy."""

    return FlaskClientSession(client)
