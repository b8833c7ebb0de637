from typing import Callable

from chatproxy.client import ChatSession, ExchangeClient, ExchangeClientError
from chatproxy.models import Message
from chatproxy.settings import load_settings

QUIT = "/quit"


def format_message(message: Message) -> str:
    who = "You" if message.role == "user" else "Assistant"
    return f"[{message.timestamp:%H:%M}] {who}: {message.content}"


def run(
    session: ChatSession,
    input_fn: Callable[[str], str] = input,
    print_fn: Callable[[str], None] = print,
) -> None:
    for message in session.messages:
        print_fn(format_message(message))
    while True:
        try:
            text = input_fn("> ")
        except (EOFError, KeyboardInterrupt):
            break
        if text.strip() == QUIT:
            break
        try:
            reply = session.submit(text)
        except ExchangeClientError as e:
            print_fn(f"Error: {e}")
            continue
        except KeyboardInterrupt:
            break
        if reply is not None:
            print_fn(format_message(reply))


def main() -> None:
    settings = load_settings()
    client = ExchangeClient(settings.api_url, timeout=settings.client_timeout)
    print(f"Chatting with {settings.api_url}. Type {QUIT} to exit.")
    run(ChatSession(client))


if __name__ == "__main__":
    main()
