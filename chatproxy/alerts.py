import logging
import os

import requests

logger = logging.getLogger(__name__)

PUSHOVER_URL = "https://api.pushover.net/1/messages.json"


def push(text: str) -> None:
    """Send a Pushover notification; silently skipped when credentials are unset."""
    token = os.getenv("PUSHOVER_TOKEN")
    user = os.getenv("PUSHOVER_USER")
    if not token or not user:
        logger.debug("Pushover not configured, dropping alert: %s", text)
        return
    try:
        requests.post(
            PUSHOVER_URL,
            data={
                "token": token,
                "user": user,
                "title": "Chat Proxy - Alert",
                "message": text,
            },
            timeout=10,
        )
    except requests.RequestException as e:
        logger.warning("Failed to deliver alert: %s", e)
