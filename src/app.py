"""Application entry point for the relay."""

from __future__ import annotations

import argparse
import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Awaitable, Callable, Optional

from art import tprint
from telethon import events

import settings
from adapters.console_prompt import ConsolePrompt
from adapters.telegram_mapper import build_event
from client import build_client
from core.config import ConfigError, RelayConfig
from core.router import MessageRouter
from login import authorize, print_session_string

NAME = "RELAY"
FONT = "tarty-1"

LOGGER = logging.getLogger(__name__)


def _print_banner() -> None:
    tprint(NAME, FONT, space=1)


class _RedactingFormatter(logging.Formatter):
    def __init__(self, secrets: list[str], fmt: str, datefmt: Optional[str] = None) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)
        self._secrets = [secret for secret in secrets if secret]

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        for secret in self._secrets:
            message = message.replace(secret, "***")
        return message


def _configure_logging(config: settings.LoggingSettings) -> None:
    level = getattr(logging, config.level, logging.INFO)

    fmt = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    datefmt = "%Y-%m-%d %H:%M:%S"
    secrets = settings.redaction_values() if config.redact else []
    formatter = _RedactingFormatter(secrets, fmt=fmt, datefmt=datefmt)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    handlers: list[logging.Handler] = [console_handler]

    if config.file_path:
        directory = os.path.dirname(config.file_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        file_handler = RotatingFileHandler(
            config.file_path,
            maxBytes=config.max_bytes,
            backupCount=config.backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    logging.basicConfig(level=level, handlers=handlers, force=True)

    # Telethon is chatty at INFO about reconnects and update gaps.
    logging.getLogger("telethon").setLevel(max(level, logging.WARNING))


def _load_settings() -> RelayConfig:
    """Configure logging and load the relay config, exiting on bad input."""

    try:
        _configure_logging(settings.load_logging_settings())
        return settings.load_config()
    except ConfigError as e:
        if not logging.getLogger().handlers:
            logging.basicConfig(level=logging.INFO)
        LOGGER.error("Configuration error: %s", e)
        raise SystemExit(1) from None


def _log_startup(config: RelayConfig) -> None:
    LOGGER.info("Monitoring channel: %s", config.source_channel_id)
    LOGGER.info("Will forward to channel: %s", config.target_channel_id)
    if config.required_keywords or config.optional_keywords:
        LOGGER.info(
            "Filtering for keywords: required=[%s] optional=[%s]",
            ", ".join(sorted(config.required_keywords)),
            ", ".join(sorted(config.optional_keywords)),
        )
    if config.min_message_length > 0:
        LOGGER.info("Minimum message length: %s", config.min_message_length)


def build_handler(router: MessageRouter) -> Callable[[object], Awaitable[None]]:
    """Wrap the router as a Telethon event handler that never raises."""

    async def handler(event) -> None:
        try:
            await router.handle(build_event(event))
        except Exception:
            LOGGER.exception("Error while processing message")

    return handler


def _connect_and_authorize(client) -> bool:
    try:
        client.loop.run_until_complete(client.connect())
        return client.loop.run_until_complete(authorize(client, ConsolePrompt()))
    except (KeyboardInterrupt, SystemExit):
        raise
    except Exception:
        LOGGER.exception("Error starting client")
        raise SystemExit(1) from None


def _run() -> None:
    _print_banner()
    config = _load_settings()

    LOGGER.info("Starting relay")
    client = build_client(config)
    _connect_and_authorize(client)
    LOGGER.info("Client started successfully")

    router = MessageRouter(config)
    # Every new message is delivered; the router decides what to forward.
    client.add_event_handler(build_handler(router), events.NewMessage())
    _log_startup(config)

    LOGGER.info("Listening for new messages...")
    client.run_until_disconnected()


def _login() -> None:
    _print_banner()
    config = _load_settings()

    client = build_client(config)
    logged_in = _connect_and_authorize(client)
    if not logged_in:
        LOGGER.info("Session is already authorized")
        print_session_string(client)
    client.loop.run_until_complete(client.disconnect())


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(prog="relay")
    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("run", help="Start relaying messages")
    subparsers.add_parser(
        "login",
        help="Authorize the account and print a session string, then exit.",
    )

    args = parser.parse_args(argv)
    if args.command == "login":
        _login()
        return
    _run()


if __name__ == "__main__":
    main()
