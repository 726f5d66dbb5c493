"""Telegram send adapter.

Re-publishes message text to a channel through the same Telethon client that
receives updates.
"""

from __future__ import annotations

from core.channel_ids import to_peer


class TelegramChannelSender:
    """SenderPort implementation backed by a Telethon client."""

    def __init__(self, client) -> None:
        self._client = client

    async def send(self, target_channel_id: str, text: str) -> None:
        """Send text as a new message to the target channel."""

        await self._client.send_message(to_peer(target_channel_id), text)
