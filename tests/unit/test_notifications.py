import json

import httpx
import pytest

from market_demo.config import settings
from market_demo.utils.notifications import (
    CollectingSink,
    fan_out,
    send_telegram_message,
    telegram_sink,
)


@pytest.fixture
def telegram_configured(monkeypatch):
    monkeypatch.setattr(settings, "TELEGRAM_BOT_TOKEN", "123456:ABCDEFGHIJKLMNOPQRSTUVWXYZ")
    monkeypatch.setattr(settings, "TELEGRAM_CHAT_ID", "42")


def test_collecting_sink_keeps_order():
    sink = CollectingSink()
    sink("a")
    sink("b")
    assert sink.messages == ["a", "b"]
    sink.clear()
    assert sink.messages == []


def test_fan_out_reaches_every_sink():
    first, second = CollectingSink(), CollectingSink()
    fan_out(first, second)("hello")
    assert first.messages == ["hello"]
    assert second.messages == ["hello"]


def test_telegram_skipped_without_credentials(monkeypatch):
    monkeypatch.setattr(settings, "TELEGRAM_BOT_TOKEN", None)
    monkeypatch.setattr(settings, "TELEGRAM_CHAT_ID", None)
    assert send_telegram_message("hi") is False


def test_telegram_posts_message(telegram_configured):
    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json={"ok": True})

    with httpx.Client(transport=httpx.MockTransport(handler)) as client:
        assert send_telegram_message("Satyendra is no longer handling clients.", client=client) is True

    assert len(requests) == 1
    assert requests[0].url.path == "/bot123456:ABCDEFGHIJKLMNOPQRSTUVWXYZ/sendMessage"
    assert json.loads(requests[0].content) == {
        "chat_id": "42",
        "text": "Satyendra is no longer handling clients.",
    }


def test_telegram_failure_returns_false(telegram_configured):
    transport = httpx.MockTransport(lambda request: httpx.Response(500))
    with httpx.Client(transport=transport) as client:
        assert send_telegram_message("hi", client=client) is False


def test_telegram_sink_swallows_delivery_result(telegram_configured):
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(json.loads(request.content)["text"])
        return httpx.Response(200)

    with httpx.Client(transport=httpx.MockTransport(handler)) as client:
        telegram_sink(client)("broker closed")

    assert seen == ["broker closed"]


def test_telegram_invalid_url_returns_false(monkeypatch):
    monkeypatch.setattr(settings, "TELEGRAM_BOT_TOKEN", "123:abc\x01def")
    monkeypatch.setattr(settings, "TELEGRAM_CHAT_ID", "42")

    transport = httpx.MockTransport(lambda request: httpx.Response(200))
    with httpx.Client(transport=transport) as client:
        assert send_telegram_message("hi", client=client) is False
