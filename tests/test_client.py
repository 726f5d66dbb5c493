from __future__ import annotations

import asyncio

from telethon.crypto import AuthKey
from telethon.sessions import SQLiteSession, StringSession

from client import build_client
from fakes import make_config


def _saved_session_string() -> str:
    session = StringSession()
    session.set_dc(2, "149.154.167.40", 443)
    session.auth_key = AuthKey(bytes(256))
    return session.save()


def _build(config):
    async def _inner():
        return build_client(config)

    return asyncio.run(_inner())


def test_defaults_to_empty_string_session() -> None:
    client = _build(make_config())

    assert isinstance(client.session, StringSession)
    assert client.session.save() == ""


def test_session_string_wins_over_session_name(tmp_path) -> None:
    session_string = _saved_session_string()
    client = _build(
        make_config(session_string=session_string, session_name=str(tmp_path / "relay"))
    )

    assert isinstance(client.session, StringSession)
    assert client.session.save() == session_string
    assert not (tmp_path / "relay.session").exists()


def test_session_name_alone_selects_file_session(tmp_path) -> None:
    client = _build(make_config(session_name=str(tmp_path / "relay")))

    try:
        assert isinstance(client.session, SQLiteSession)
        assert not isinstance(client.session, StringSession)
        assert (tmp_path / "relay.session").exists()
    finally:
        client.session.close()
