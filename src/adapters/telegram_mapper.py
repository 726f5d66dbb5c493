"""Telegram-to-core event mapping adapter.

This keeps Telethon-specific details out of the core router.
"""

from __future__ import annotations

from typing import Any, Optional

from adapters.telegram_sender import TelegramChannelSender
from core.channel_ids import normalize_channel_id
from core.models import RelayEvent


def extract_text(message: Any) -> str:
    """Prefer the formatted text, fall back to the raw message field."""

    if message is None:
        return ""
    text = getattr(message, "text", None) or getattr(message, "message", None)
    if isinstance(text, str):
        return text
    return ""


def _chat_id_from_message(message: Any) -> Optional[str]:
    if message is None:
        return None
    return normalize_channel_id(getattr(message, "chat_id", None))


def build_event(event: Any) -> RelayEvent:
    """Build a core RelayEvent from a Telethon NewMessage event.

    Missing pieces are mapped to None rather than raising so the router can
    treat them as malformed input.
    """

    message = getattr(event, "message", None)
    client = getattr(event, "client", None)

    sender = TelegramChannelSender(client) if client is not None else None
    message_id = getattr(message, "id", None)

    return RelayEvent(
        chat_id=_chat_id_from_message(message),
        text=extract_text(message),
        sender=sender,
        message_id=message_id if isinstance(message_id, int) else None,
    )
