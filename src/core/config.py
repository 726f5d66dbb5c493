"""Core configuration dataclasses.

Environment parsing lives in settings.py, but these dataclasses and helpers
define the shape the core expects so adapters and the app layer build it the
same way.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional


class ConfigError(ValueError):
    """Raised when required configuration is missing or malformed."""


@dataclass(frozen=True)
class RelayConfig:
    """Immutable relay settings, built once at startup."""

    api_id: int
    api_hash: str
    source_channel_id: str
    target_channel_id: str
    required_keywords: frozenset[str] = frozenset()
    optional_keywords: frozenset[str] = frozenset()
    min_message_length: int = 0
    session_string: Optional[str] = None
    session_name: Optional[str] = None


def parse_keywords(raw: Optional[str]) -> frozenset[str]:
    """Split a comma-separated keyword list into lowercase terms.

    Blank entries are dropped: an empty keyword would be a substring of every
    message and silently disable the filter.
    """

    if not raw:
        return frozenset()
    return normalize_keywords(raw.split(","))


def normalize_keywords(keywords: Iterable[str]) -> frozenset[str]:
    return frozenset(k.strip().lower() for k in keywords if k and k.strip())


def parse_min_length(raw: Optional[str], default: int = 0) -> int:
    """Parse MIN_MESSAGE_LENGTH, rejecting negatives and non-integers."""

    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError as e:
        raise ConfigError(f"MIN_MESSAGE_LENGTH must be an integer, got {raw!r}") from e
    if value < 0:
        raise ConfigError(f"MIN_MESSAGE_LENGTH must be >= 0, got {value}")
    return value
