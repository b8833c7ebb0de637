import logging
from typing import Protocol

from openai import OpenAI

from chatproxy.settings import Settings

logger = logging.getLogger(__name__)


class ProviderError(Exception):
    pass


class EmptyReplyError(ProviderError):
    pass


class TextGenerator(Protocol):
    model: str

    def generate(self, prompt: str) -> str: ...


class GeminiGenerator:
    """Gemini text generation through its OpenAI-compatible endpoint."""

    def __init__(self, settings: Settings) -> None:
        if not settings.api_key:
            raise RuntimeError(
                "GEMINI_API_KEY not set. Please configure it in environment or .env"
            )
        self.model = settings.model
        self.openai = OpenAI(
            api_key=settings.api_key,
            base_url=settings.base_url,
            timeout=settings.upstream_timeout,
            max_retries=0,
        )

    def generate(self, prompt: str) -> str:
        response = self.openai.chat.completions.create(
            model=self.model,
            messages=[{"role": "user", "content": prompt}],
        )
        if not response.choices:
            raise EmptyReplyError(f"model {self.model} returned no choices")
        content = response.choices[0].message.content
        if not content:
            finish_reason = response.choices[0].finish_reason
            raise EmptyReplyError(f"model {self.model} returned no text (finish_reason={finish_reason})")
        return content
