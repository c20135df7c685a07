"""Notification sinks (console, in-memory, Telegram)."""

import logging
from typing import Callable, List, Optional

import httpx

from market_demo.config import settings

logger = logging.getLogger(__name__)

MessageSink = Callable[[str], None]


def console_sink(message: str) -> None:
    """Print one line to stdout."""
    print(message)


class CollectingSink:
    """Sink that keeps every line it receives, in order."""

    def __init__(self):
        self.messages: List[str] = []

    def __call__(self, message: str) -> None:
        self.messages.append(message)

    def clear(self) -> None:
        self.messages.clear()


def fan_out(*sinks: MessageSink) -> MessageSink:
    """Combine sinks so each message reaches all of them in order."""

    def _emit(message: str) -> None:
        for sink in sinks:
            sink(message)

    return _emit


def send_telegram_message(text: str, client: Optional[httpx.Client] = None) -> bool:
    """Send a Telegram message if bot token + chat ID are configured."""
    token = settings.TELEGRAM_BOT_TOKEN
    chat_id = settings.TELEGRAM_CHAT_ID

    if not token or not chat_id:
        logger.info("Telegram alert skipped (missing TELEGRAM_BOT_TOKEN or TELEGRAM_CHAT_ID)")
        return False

    url = f"https://api.telegram.org/bot{token}/sendMessage"
    payload = {"chat_id": chat_id, "text": text}

    try:
        if client is None:
            with httpx.Client(timeout=settings.TELEGRAM_TIMEOUT_SECONDS) as owned:
                resp = owned.post(url, json=payload)
        else:
            resp = client.post(url, json=payload)
        resp.raise_for_status()
        return True
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        logger.error(f"Telegram alert failed: {exc}")
        return False


def telegram_sink(client: Optional[httpx.Client] = None) -> MessageSink:
    """Adapt :func:`send_telegram_message` to the sink signature."""

    def _emit(message: str) -> None:
        send_telegram_message(message, client=client)

    return _emit
