from __future__ import annotations

import asyncio
import logging

from fakes import FakeSender, make_config
from core.models import Action, RelayEvent
from core.router import MessageRouter, decide


def _event(sender, chat_id="-100111", text="hello world", message_id=1) -> RelayEvent:
    return RelayEvent(chat_id=chat_id, text=text, sender=sender, message_id=message_id)


def test_decide_forwards_original_text(config, sender) -> None:
    decision = decide(_event(sender, text="Hello World"), config)
    assert decision.action is Action.FORWARD
    assert decision.target == "-100222"
    assert decision.text == "Hello World"


def test_decide_flags_malformed_events(config, sender) -> None:
    assert decide(_event(None), config).reason == "malformed"
    assert decide(_event(sender, chat_id=None), config).reason == "malformed"


def test_decide_ignores_other_sources(config, sender) -> None:
    decision = decide(_event(sender, chat_id="-100999"), config)
    assert decision.action is Action.DROP
    assert decision.reason == "other_source"


def test_handle_sends_once_for_qualifying_event(sender) -> None:
    config = make_config(required_keywords=frozenset({"go"}))
    router = MessageRouter(config)

    asyncio.run(router.handle(_event(sender, text="Go Go GO")))

    assert sender.sent == [("-100222", "Go Go GO")]


def test_handle_does_not_send_for_other_channel(sender) -> None:
    router = MessageRouter(make_config())

    asyncio.run(router.handle(_event(sender, chat_id="-100333", text="would pass")))

    assert sender.sent == []


def test_handle_logs_filtered_preview(sender, caplog) -> None:
    router = MessageRouter(make_config(min_message_length=500))
    text = "x" * 80

    with caplog.at_level(logging.INFO, logger="core.router"):
        asyncio.run(router.handle(_event(sender, text=text)))

    assert sender.sent == []
    assert f"Message filtered out: {'x' * 50}..." in caplog.text


def test_handle_logs_malformed_event(caplog) -> None:
    router = MessageRouter(make_config())

    with caplog.at_level(logging.INFO, logger="core.router"):
        asyncio.run(router.handle(_event(None)))

    assert "Missing required message data" in caplog.text


def test_handle_swallows_send_errors(caplog) -> None:
    sender = FakeSender(error=ConnectionError("network down"))
    router = MessageRouter(make_config())

    with caplog.at_level(logging.ERROR, logger="core.router"):
        asyncio.run(router.handle(_event(sender)))

    # Attempted once, never retried.
    assert len(sender.sent) == 1
    assert "Error forwarding message" in caplog.text
