import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

GEMINI_OPENAI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/openai/"
DEFAULT_MODEL = "gemini-3-flash-preview"


def _split(raw: str) -> list[str]:
    return [s.strip() for s in raw.split(",") if s.strip()]


@dataclass
class Settings:
    """Process-wide configuration, read once at startup."""

    api_key: str = ""
    model: str = DEFAULT_MODEL
    base_url: str = GEMINI_OPENAI_BASE_URL
    upstream_timeout: float = 60.0
    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: list[str] = field(default_factory=lambda: ["*"])
    tracing_enabled: bool = False
    api_url: str = "http://localhost:3000"
    client_timeout: float = 120.0


def load_settings() -> Settings:
    load_dotenv(override=True)
    env = os.environ
    return Settings(
        api_key=env.get("GEMINI_API_KEY") or env.get("GOOGLE_API_KEY", ""),
        model=env.get("GEMINI_MODEL") or DEFAULT_MODEL,
        base_url=env.get("GEMINI_BASE_URL") or GEMINI_OPENAI_BASE_URL,
        upstream_timeout=float(env.get("UPSTREAM_TIMEOUT", 60)),
        host=env.get("HOST", "0.0.0.0"),
        port=int(env.get("PORT", 3000)),
        cors_origins=_split(env.get("CORS_ORIGINS", "*")) or ["*"],
        tracing_enabled=env.get("CHAT_TRACING", "").lower() in {"1", "true", "yes", "on"},
        api_url=env.get("CHAT_API_URL", "http://localhost:3000"),
        client_timeout=float(env.get("CHAT_CLIENT_TIMEOUT", 120)),
    )
