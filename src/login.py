"""Interactive first-time authorization for relay.

Only used when the session is not yet authorized. Answers come from a
CredentialPrompt so the rest of the app never touches console I/O.
"""

from __future__ import annotations

import logging
import os

import qrcode
from telethon import TelegramClient, errors
from telethon.sessions import StringSession

from core.ports import CredentialKind, CredentialPrompt

LOGGER = logging.getLogger(__name__)

QR_TIMEOUT_SECONDS = 120


def _print_qr(url: str) -> None:
    qr = qrcode.QRCode(border=1)
    qr.add_data(url)
    qr.make(fit=True)
    qr.print_ascii(invert=True)


async def _authorize_with_qr(client: TelegramClient, prompt: CredentialPrompt) -> None:
    qr = await client.qr_login()
    _print_qr(qr.url)
    try:
        await qr.wait(timeout=QR_TIMEOUT_SECONDS)
    except errors.SessionPasswordNeededError:
        await client.sign_in(password=prompt.prompt(CredentialKind.PASSWORD))


async def _authorize_with_phone(client: TelegramClient, prompt: CredentialPrompt) -> None:
    phone = prompt.prompt(CredentialKind.PHONE)
    await client.send_code_request(phone)
    code = prompt.prompt(CredentialKind.CODE)
    try:
        await client.sign_in(phone=phone, code=code)
    except errors.SessionPasswordNeededError:
        await client.sign_in(password=prompt.prompt(CredentialKind.PASSWORD))


def pick_login_method() -> str:
    """Choose phone or QR login from LOGIN_METHOD or a console menu.

    The menu choice is not a credential, so it is read here directly rather
    than through a CredentialPrompt.
    """

    method = (os.getenv("LOGIN_METHOD") or "").strip().lower()
    if method in {"qr", "phone"}:
        return method
    while True:
        print("")
        print("Login methods:")
        print("[1] Phone code")
        print("[2] QR code")
        print("[3] Exit")
        choice = input("relay > ").strip()
        if choice == "1":
            return "phone"
        elif choice == "2":
            return "qr"
        elif choice == "3":
            raise SystemExit(0)
        else:
            print("Invalid option. Please choose 1, 2, or 3.")


def print_session_string(client: TelegramClient) -> None:
    """Show the new session string so it can be stored in .env."""

    if not isinstance(client.session, StringSession):
        return
    print("\n=== IMPORTANT ===")
    print("Please save this session string in your .env file as SOURCE_SESSION_STRING:")
    print(client.session.save())
    print("=== END ===\n")


async def authorize(client: TelegramClient, prompt: CredentialPrompt, method: str = "") -> bool:
    """Log in interactively if needed.

    Returns True when a new login happened, False when the session was
    already authorized.
    """

    if await client.is_user_authorized():
        return False

    LOGGER.info("You need to login first")
    method = method or pick_login_method()
    if method == "qr":
        await _authorize_with_qr(client, prompt)
    else:
        await _authorize_with_phone(client, prompt)

    me = await client.get_me()
    LOGGER.info("Logged in as: %s", getattr(me, "first_name", None) or getattr(me, "id", "?"))
    print_session_string(client)
    return True
