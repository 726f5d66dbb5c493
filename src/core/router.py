"""Core message routing.

This module is integration-agnostic. The decision step is pure and the only
side effect, the send, goes through the SenderPort carried by the event.
"""

from __future__ import annotations

import logging

from core.channel_ids import same_channel
from core.config import RelayConfig
from core.filters import matched_keywords, should_forward
from core.models import Action, ForwardDecision, RelayEvent

LOGGER = logging.getLogger(__name__)

PREVIEW_CHARS = 50

REASON_FORWARD = "forward"
REASON_MALFORMED = "malformed"
REASON_OTHER_SOURCE = "other_source"
REASON_FILTERED = "filtered"


def preview(text: str, limit: int = PREVIEW_CHARS) -> str:
    """Clip text for log lines."""

    return f"{text[:limit]}..."


def decide(event: RelayEvent, config: RelayConfig) -> ForwardDecision:
    """Decide whether one event is forwarded, without any I/O."""

    if event.sender is None or event.chat_id is None:
        return ForwardDecision(action=Action.DROP, reason=REASON_MALFORMED)

    if not same_channel(event.chat_id, config.source_channel_id):
        return ForwardDecision(action=Action.DROP, reason=REASON_OTHER_SOURCE)

    text = event.text or ""
    if not should_forward(text, config):
        return ForwardDecision(action=Action.DROP, reason=REASON_FILTERED, text=text)

    return ForwardDecision(
        action=Action.FORWARD,
        reason=REASON_FORWARD,
        text=text,
        target=config.target_channel_id,
    )


class MessageRouter:
    """Applies routing decisions and performs the single best-effort send."""

    def __init__(self, config: RelayConfig) -> None:
        self._config = config

    async def handle(self, event: RelayEvent) -> None:
        """Process one inbound event. Never raises."""

        decision = decide(event, self._config)

        if decision.reason == REASON_MALFORMED:
            LOGGER.info("Missing required message data")
            return

        # Messages from other chats are the normal case, not worth a log line.
        if decision.reason == REASON_OTHER_SOURCE:
            return

        if not decision.should_send:
            LOGGER.info("Message filtered out: %s", preview(decision.text))
            return

        if LOGGER.isEnabledFor(logging.DEBUG):
            required, optional = matched_keywords(decision.text, self._config)
            LOGGER.debug(
                "Message %s matched required=%s optional=%s",
                event.message_id,
                required,
                optional,
            )

        try:
            await event.sender.send(decision.target, decision.text)
        except Exception:
            # At-most-once delivery: the message is dropped, never retried.
            LOGGER.exception("Error forwarding message %s", event.message_id)
            return

        LOGGER.info("Message %s forwarded to %s", event.message_id, decision.target)
