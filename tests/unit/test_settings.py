"""Unit tests for environment-driven proxy settings."""

from __future__ import annotations

import logging

from unitrans.backend.config.settings import (
    DEFAULT_CONTACT_EMAIL,
    DEFAULT_PORT,
    MYMEMORY_URL,
    ProxySettings,
)


def test_defaults_when_environment_is_empty() -> None:
    settings = ProxySettings.from_env({})

    assert settings.allowed_origins == frozenset()
    assert settings.upstream_url == MYMEMORY_URL
    assert settings.contact_email == DEFAULT_CONTACT_EMAIL
    assert settings.upstream_timeout is None
    assert settings.upstream_autodetect is False
    assert settings.port == DEFAULT_PORT


def test_values_are_read_from_environment() -> None:
    settings = ProxySettings.from_env(
        {
            "UNITRANS_ALLOWED_ORIGINS": " https://a.test, ,https://b.test ",
            "UNITRANS_UPSTREAM_URL": "https://mirror.test/get",
            "UNITRANS_CONTACT_EMAIL": "ops@example.com",
            "UNITRANS_UPSTREAM_TIMEOUT": "2.5",
            "UNITRANS_UPSTREAM_AUTODETECT": "yes",
            "UNITRANS_HOST": "0.0.0.0",
            "UNITRANS_PORT": "8080",
        }
    )

    assert settings.allowed_origins == frozenset({"https://a.test", "https://b.test"})
    assert settings.upstream_url == "https://mirror.test/get"
    assert settings.contact_email == "ops@example.com"
    assert settings.upstream_timeout == 2.5
    assert settings.upstream_autodetect is True
    assert settings.host == "0.0.0.0"
    assert settings.port == 8080


def test_blank_contact_email_disables_parameter() -> None:
    assert ProxySettings.from_env({"UNITRANS_CONTACT_EMAIL": " "}).contact_email is None


def test_invalid_numbers_are_ignored_with_warning(caplog) -> None:
    with caplog.at_level(logging.WARNING):
        settings = ProxySettings.from_env(
            {"UNITRANS_UPSTREAM_TIMEOUT": "soon", "UNITRANS_PORT": "99999"}
        )

    assert settings.upstream_timeout is None
    assert settings.port == DEFAULT_PORT
    assert "UNITRANS_UPSTREAM_TIMEOUT" in caplog.text
    assert "UNITRANS_PORT" in caplog.text


def test_non_positive_timeout_is_ignored() -> None:
    assert ProxySettings.from_env({"UNITRANS_UPSTREAM_TIMEOUT": "0"}).upstream_timeout is None
