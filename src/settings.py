"""Environment configuration for relay.

All user-editable settings live in environment variables, optionally loaded
from a .env file via python-dotenv, so secrets stay out of the repo.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from core.config import ConfigError, RelayConfig, parse_keywords, parse_min_length

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

REQUIRED_VARS = (
    "SOURCE_API_ID",
    "SOURCE_API_HASH",
    "SOURCE_CHANNEL_ID",
    "TARGET_CHANNEL_ID",
)

# Secrets masked in every log line when redaction is enabled.
REDACTED_VARS = ("SOURCE_API_HASH", "SOURCE_SESSION_STRING", "2FA")


@dataclass(frozen=True)
class LoggingSettings:
    """Logging switches read from LOG_* variables."""

    level: str = "INFO"
    file_path: Optional[str] = None
    max_bytes: int = 5 * 1024 * 1024
    backup_count: int = 5
    redact: bool = True


def _environ(environ: Optional[Mapping[str, str]]) -> Mapping[str, str]:
    if environ is not None:
        return environ
    load_dotenv()
    return os.environ


def _parse_bool(raw: Optional[str], default: bool) -> bool:
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _parse_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from e


def load_config(environ: Optional[Mapping[str, str]] = None) -> RelayConfig:
    """Build the RelayConfig, failing fast on missing required variables.

    Passing an explicit mapping skips .env loading, which keeps tests away
    from the developer's real environment.
    """

    env = _environ(environ)

    for name in REQUIRED_VARS:
        if not env.get(name):
            raise ConfigError(f"Missing required environment variable: {name}")

    try:
        api_id = int(env["SOURCE_API_ID"])
    except ValueError as e:
        raise ConfigError(f"SOURCE_API_ID must be an integer, got {env['SOURCE_API_ID']!r}") from e

    return RelayConfig(
        api_id=api_id,
        api_hash=env["SOURCE_API_HASH"],
        source_channel_id=env["SOURCE_CHANNEL_ID"].strip(),
        target_channel_id=env["TARGET_CHANNEL_ID"].strip(),
        required_keywords=parse_keywords(env.get("REQUIRED_KEYWORDS")),
        optional_keywords=parse_keywords(env.get("OPTIONAL_KEYWORDS")),
        min_message_length=parse_min_length(env.get("MIN_MESSAGE_LENGTH")),
        session_string=env.get("SOURCE_SESSION_STRING") or None,
        session_name=env.get("SESSION_NAME") or None,
    )


def load_logging_settings(environ: Optional[Mapping[str, str]] = None) -> LoggingSettings:
    env = _environ(environ)

    file_path = env.get("LOG_FILE") or None
    if file_path and not os.path.isabs(file_path):
        file_path = os.path.join(PROJECT_ROOT, file_path)

    return LoggingSettings(
        level=(env.get("LOG_LEVEL") or "INFO").upper(),
        file_path=file_path,
        max_bytes=_parse_int(env, "LOG_MAX_BYTES", 5 * 1024 * 1024),
        backup_count=_parse_int(env, "LOG_BACKUP_COUNT", 5),
        redact=_parse_bool(env.get("LOG_REDACT"), True),
    )


def redaction_values(environ: Optional[Mapping[str, str]] = None) -> list[str]:
    """Secret values to mask, longest first so overlaps are fully hidden."""

    env = _environ(environ)
    values = {env.get(name) for name in REDACTED_VARS}
    return sorted((v for v in values if v), key=len, reverse=True)
