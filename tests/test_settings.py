from unittest.mock import patch

import pytest

from chatproxy.settings import DEFAULT_MODEL, GEMINI_OPENAI_BASE_URL, load_settings

_VARS = [
    "GEMINI_API_KEY", "GOOGLE_API_KEY", "GEMINI_MODEL", "GEMINI_BASE_URL", "UPSTREAM_TIMEOUT",
    "HOST", "PORT", "CORS_ORIGINS", "CHAT_TRACING", "CHAT_API_URL", "CHAT_CLIENT_TIMEOUT",
]


@pytest.fixture
def clean_env(monkeypatch):
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)
    with patch("chatproxy.settings.load_dotenv"):
        yield monkeypatch


def test_defaults(clean_env):
    s = load_settings()
    assert s.api_key == ""
    assert s.model == DEFAULT_MODEL == "gemini-3-flash-preview"
    assert s.base_url == GEMINI_OPENAI_BASE_URL
    assert s.port == 3000
    assert s.cors_origins == ["*"]
    assert s.tracing_enabled is False
    assert s.api_url == "http://localhost:3000"


def test_reads_gemini_api_key(clean_env):
    clean_env.setenv("GEMINI_API_KEY", "gem-key")
    clean_env.setenv("GOOGLE_API_KEY", "google-key")
    assert load_settings().api_key == "gem-key"


def test_falls_back_to_google_api_key(clean_env):
    clean_env.setenv("GOOGLE_API_KEY", "google-key")
    assert load_settings().api_key == "google-key"


def test_port_and_timeouts_are_parsed(clean_env):
    clean_env.setenv("PORT", "8080")
    clean_env.setenv("UPSTREAM_TIMEOUT", "12.5")
    clean_env.setenv("CHAT_CLIENT_TIMEOUT", "30")
    s = load_settings()
    assert s.port == 8080
    assert s.upstream_timeout == 12.5
    assert s.client_timeout == 30.0


def test_cors_origins_are_split(clean_env):
    clean_env.setenv("CORS_ORIGINS", "http://a.test, http://b.test,")
    assert load_settings().cors_origins == ["http://a.test", "http://b.test"]


def test_tracing_flag(clean_env):
    clean_env.setenv("CHAT_TRACING", "true")
    assert load_settings().tracing_enabled is True


def test_model_override(clean_env):
    clean_env.setenv("GEMINI_MODEL", "gemini-2.5-pro")
    assert load_settings().model == "gemini-2.5-pro"
