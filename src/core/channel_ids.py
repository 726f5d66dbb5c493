"""Helpers for comparing and resolving channel identifiers."""

from __future__ import annotations

from typing import Optional, Union


def _is_int(value: str) -> bool:
    try:
        int(value)
    except ValueError:
        return False
    return True


def normalize_channel_id(value: object) -> Optional[str]:
    """Return a canonical string form of a channel id, or None if blank.

    Telethon reports marked integer ids (-100<channel_id> for channels) while
    the environment always yields strings, so both sides go through here
    before comparison.
    """

    if value is None:
        return None
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return str(value)

    text = str(value).strip()
    if not text:
        return None
    if _is_int(text):
        return str(int(text))
    if text.startswith("@"):
        return text.lower()
    return text


def same_channel(left: object, right: object) -> bool:
    """True when both ids normalize to the same non-empty value."""

    normalized = normalize_channel_id(left)
    return normalized is not None and normalized == normalize_channel_id(right)


def to_peer(channel_id: str) -> Union[int, str]:
    """Convert a configured id into something Telethon can resolve.

    Numeric strings must be passed as integers, otherwise Telethon treats
    them as usernames or phone numbers.
    """

    normalized = normalize_channel_id(channel_id)
    if normalized is None:
        raise ValueError("Channel id is empty")
    if _is_int(normalized):
        return int(normalized)
    return normalized
