"""Forwarding filter (core domain)."""

from __future__ import annotations

from typing import List, Tuple

from core.config import RelayConfig


def should_forward(text: str, config: RelayConfig) -> bool:
    """Return True if a message text qualifies for forwarding.

    Filter logic:
    - Empty text and text shorter than min_message_length never qualify.
    - Every required keyword must appear (AND).
    - At least one optional keyword must appear (OR), when any are set.
    - Keywords are matched as substrings of the lower-cased text, so a
      keyword embedded inside a longer word still counts.
    """

    if not text:
        return False

    if len(text) < config.min_message_length:
        return False

    lowered = text.lower()

    if config.required_keywords:
        if not all(k in lowered for k in config.required_keywords):
            return False

    if config.optional_keywords:
        if not any(k in lowered for k in config.optional_keywords):
            return False

    return True


def matched_keywords(text: str, config: RelayConfig) -> Tuple[List[str], List[str]]:
    """Return (required, optional) keywords found in the text, sorted."""

    lowered = text.lower()
    required = sorted(k for k in config.required_keywords if k in lowered)
    optional = sorted(k for k in config.optional_keywords if k in lowered)
    return required, optional
