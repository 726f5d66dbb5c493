"""Telegram client factory for relay.

We explicitly manage the client's lifecycle (connect/run_until_disconnected)
in app.py so it is obvious when the session is created and when it ends.
"""

from __future__ import annotations

import logging

from telethon import TelegramClient
from telethon.sessions import StringSession

from core.config import RelayConfig

CONNECTION_RETRIES = 5


def build_client(config: RelayConfig) -> TelegramClient:
    """Create a Telethon client from the relay configuration.

    A SOURCE_SESSION_STRING wins over SESSION_NAME. With neither set an empty
    string session is used, so a fresh login produces a string to save.
    """

    if config.session_string or not config.session_name:
        session = StringSession(config.session_string or "")
        kind = "string"
    else:
        session = config.session_name
        kind = "file"

    logging.getLogger(__name__).info("Initializing Telegram client (%s session)", kind)

    return TelegramClient(
        session,
        config.api_id,
        config.api_hash,
        connection_retries=CONNECTION_RETRIES,
    )
