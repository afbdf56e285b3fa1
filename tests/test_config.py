import logging

import pytest

from src.config import DEFAULT_IMAGE_MODEL, DEFAULT_SCRIPT_MODEL, Settings, configure_logging
from src.errors import MissingCredential
from src.generation.gemini_client import make_client

ENV_NAMES = (
    "GEMINI_API_KEY", "API_KEY", "GOOGLE_API_KEY", "IMAGE_MODEL", "SCRIPT_MODEL", "LOG_LEVEL", "SESSION_TTL", "CORS_ORIGINS",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_NAMES:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = Settings.from_env(dotenv=False)
    assert settings.api_key is None
    assert settings.image_model == DEFAULT_IMAGE_MODEL
    assert settings.script_model == DEFAULT_SCRIPT_MODEL
    assert settings.log_level == "INFO"
    assert settings.session_ttl == 3600


def test_key_fallback_order(monkeypatch):
    monkeypatch.setenv("GOOGLE_API_KEY", "google")
    assert Settings.from_env(dotenv=False).api_key == "google"
    monkeypatch.setenv("API_KEY", "generic")
    assert Settings.from_env(dotenv=False).api_key == "generic"
    monkeypatch.setenv("GEMINI_API_KEY", "gemini")
    assert Settings.from_env(dotenv=False).api_key == "gemini"


def test_blank_key_counts_as_missing(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "   ")
    assert Settings.from_env(dotenv=False).api_key is None


def test_overrides(monkeypatch):
    monkeypatch.setenv("SCRIPT_MODEL", "gemini-2.5-pro")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("SESSION_TTL", "60")
    settings = Settings.from_env(dotenv=False)
    assert settings.script_model == "gemini-2.5-pro"
    assert settings.log_level == "DEBUG"
    assert settings.session_ttl == 60


def test_make_client_requires_key():
    with pytest.raises(MissingCredential) as info:
        make_client(Settings(api_key=None))
    assert "GEMINI_API_KEY" in info.value.message


def test_configure_logging_accepts_unknown_level():
    configure_logging("not-a-level")
    assert logging.getLogger().handlers


def test_cors_origins_default_to_none(monkeypatch):
    assert Settings.from_env(dotenv=False).cors_origins == []
    monkeypatch.setenv("CORS_ORIGINS", "http://localhost:5500, https://studio.example.com,")
    assert Settings.from_env(dotenv=False).cors_origins == ["http://localhost:5500", "https://studio.example.com"]
