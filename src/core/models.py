"""Relay event and forwarding decision models.

A RelayEvent is what adapters hand to the router for one inbound message; a
ForwardDecision is what the router decided to do with it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from core.ports import SenderPort


@dataclass(frozen=True)
class RelayEvent:
    """Minimal view of one inbound message used by the router."""

    chat_id: Optional[str]
    text: str
    sender: Optional[SenderPort]
    message_id: Optional[int] = None


class Action(str, Enum):
    FORWARD = "forward"
    DROP = "drop"


@dataclass(frozen=True)
class ForwardDecision:
    """Outcome of routing one event, plus what to send if anything."""

    action: Action
    reason: str
    text: str = ""
    target: Optional[str] = None

    @property
    def should_send(self) -> bool:
        return self.action is Action.FORWARD
