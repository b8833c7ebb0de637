import requests

from chatproxy.models import Message

GREETING = "Hello! I'm your AI assistant. How can I help you today?"


class ExchangeClientError(Exception):
    pass


class ExchangeClient:
    def __init__(self, base_url: str, timeout: float | None = None, session: requests.Session | None = None) -> None:
        self.url = base_url.rstrip("/") + "/api/content"
        self.timeout = timeout
        self.session = session or requests.Session()

    def send(self, text: str) -> str:
        try:
            response = self.session.post(self.url, json={"questions": text}, timeout=self.timeout)
            response.raise_for_status()
            return response.json()["response"]
        except (requests.RequestException, ValueError, KeyError, TypeError) as e:
            raise ExchangeClientError(f"Exchange with {self.url} failed: {e}") from e


class ChatSession:
    """Message history and busy flag for one chat session.

    Only one exchange may be outstanding at a time: ``submit`` is a no-op
    while busy, and the flag is cleared whether the exchange succeeds or not.
    """

    def __init__(self, client: ExchangeClient, greeting: str | None = GREETING) -> None:
        self.client = client
        self.messages: list[Message] = []
        if greeting:
            self.messages.append(Message(role="assistant", content=greeting))
        self.busy = False

    def submit(self, text: str) -> Message | None:
        if self.busy or not text.strip():
            return None
        self.messages.append(Message(role="user", content=text))
        self.busy = True
        try:
            reply = self.client.send(text)
        finally:
            self.busy = False
        message = Message(role="assistant", content=reply)
        self.messages.append(message)
        return message
