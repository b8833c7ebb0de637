import logging
from typing import Callable

import openai
from agents import trace
from agents.tracing import generation_span

from chatproxy.alerts import push
from chatproxy.provider import GeminiGenerator, ProviderError, TextGenerator
from chatproxy.settings import Settings

logger = logging.getLogger(__name__)


class ExchangeService:
    """Forwards one prompt to the upstream generator and returns its text.

    ``exchange`` never raises: any upstream failure is turned into a short
    error text that the caller relays in place of a reply.
    """

    def __init__(self, generator: TextGenerator, alert: Callable[[str], None] = push) -> None:
        self.generator = generator
        self.alert = alert

    @classmethod
    def from_settings(cls, settings: Settings) -> "ExchangeService":
        return cls(GeminiGenerator(settings))

    def _fail(self, message: str, alert: str) -> str:
        logger.warning(message, exc_info=True)
        self.alert(alert)
        return message

    def exchange(self, prompt: str) -> str:
        model = getattr(self.generator, "model", None)
        try:
            with trace("Chat Exchange"):
                with generation_span(input=[{"role": "user", "content": prompt}], model=model) as gen_span:
                    reply = self.generator.generate(prompt)
                    gen_span.span_data.output = [{"role": "assistant", "content": reply}]
            logger.info("Upstream reply: %s", reply)
            return reply

        except openai.RateLimitError as e:
            return self._fail(
                f"Upstream rate limit exceeded: {e}",
                "WARNING: upstream rate limit or quota exceeded",
            )
        except openai.AuthenticationError as e:
            return self._fail(
                f"Upstream authentication failed: {e}",
                "WARNING: upstream authentication error, check API key",
            )
        except openai.APITimeoutError as e:
            return self._fail(
                f"Upstream request timed out: {e}",
                "WARNING: upstream request timed out",
            )
        except openai.APIConnectionError as e:
            return self._fail(
                f"Could not reach upstream provider: {e}",
                "WARNING: upstream connection error",
            )
        except openai.APIStatusError as e:
            return self._fail(
                f"Upstream provider error ({e.status_code}): {e}",
                f"WARNING: upstream returned status {e.status_code}",
            )
        except ProviderError as e:
            return self._fail(
                f"Upstream returned no text: {e}",
                "WARNING: upstream returned an empty reply",
            )
        except Exception as e:
            return self._fail(
                f"Unexpected error: {type(e).__name__}: {e}",
                f"WARNING: unexpected error in exchange, {type(e).__name__}: {e}",
            )
