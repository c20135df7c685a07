import pytest

from market_demo.config import settings
from market_demo.utils.notifications import CollectingSink


@pytest.fixture(autouse=True)
def telegram_disabled(monkeypatch):
    """Keep a local .env or environment from sending real Telegram messages"""
    monkeypatch.setattr(settings, "TELEGRAM_ENABLED", False)
    monkeypatch.setattr(settings, "TELEGRAM_BOT_TOKEN", None)
    monkeypatch.setattr(settings, "TELEGRAM_CHAT_ID", None)


@pytest.fixture()
def sink() -> CollectingSink:
    """Sink that records every emitted console line"""
    return CollectingSink()
