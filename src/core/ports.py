"""Ports (interfaces) used by the core.

Ports define the minimal contracts for sending and credential prompting so
the core never depends on Telethon or console I/O directly.
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class CredentialKind(str, Enum):
    PHONE = "phone"
    CODE = "code"
    PASSWORD = "password"


class SenderPort(Protocol):
    """Send operation required by the router."""

    async def send(self, target_channel_id: str, text: str) -> None:
        ...


class CredentialPrompt(Protocol):
    """Line-based question/answer used only during first-time login."""

    def prompt(self, kind: CredentialKind) -> str:
        ...
