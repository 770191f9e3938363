"""Tests for environment-driven settings."""

import pytest

from orderdesk.infrastructure.config import (
    DEFAULT_API_URL,
    DEFAULT_TIMEOUT,
    load_settings,
)

_VARS = ("ORDERDESK_API_URL", "ORDERDESK_TIMEOUT", "ORDERDESK_LOG_LEVEL")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in _VARS:
        # setenv first so that teardown also removes values load_dotenv adds.
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    # Keep any .env of the developer out of the way.
    monkeypatch.chdir(tmp_path)


def test_defaults():
    settings = load_settings()
    assert settings.api_url == DEFAULT_API_URL
    assert settings.timeout == DEFAULT_TIMEOUT
    assert settings.log_level == "WARNING"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("ORDERDESK_API_URL", "https://orders.example/api")
    monkeypatch.setenv("ORDERDESK_TIMEOUT", "2.5")
    monkeypatch.setenv("ORDERDESK_LOG_LEVEL", "debug")
    settings = load_settings()
    assert settings.api_url == "https://orders.example/api"
    assert settings.timeout == 2.5
    assert settings.log_level == "DEBUG"


def test_dotenv_file(monkeypatch, tmp_path):
    env_file = tmp_path / "custom.env"
    env_file.write_text("ORDERDESK_API_URL=http://from-dotenv:8080\n", encoding="utf-8")
    settings = load_settings(str(env_file))
    assert settings.api_url == "http://from-dotenv:8080"


@pytest.mark.parametrize("value", ["soon", "0", "-1"])
def test_bad_timeout(monkeypatch, value):
    monkeypatch.setenv("ORDERDESK_TIMEOUT", value)
    with pytest.raises(ValueError, match="ORDERDESK_TIMEOUT"):
        load_settings()


def test_bad_log_level(monkeypatch):
    monkeypatch.setenv("ORDERDESK_LOG_LEVEL", "chatty")
    with pytest.raises(ValueError, match="ORDERDESK_LOG_LEVEL"):
        load_settings()
