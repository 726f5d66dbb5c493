"""Console credential prompt adapter."""

from __future__ import annotations

import os
from getpass import getpass

from core.ports import CredentialKind

QUESTIONS = {
    CredentialKind.PHONE: "Please enter your phone number (international format): ",
    CredentialKind.CODE: "Please enter the code you received: ",
    CredentialKind.PASSWORD: "Please enter your 2FA password (if any): ",
}

# Values already present in the environment skip the question entirely.
ENV_OVERRIDES = {
    CredentialKind.PHONE: "PHONE",
    CredentialKind.PASSWORD: "2FA",
}


class ConsolePrompt:
    """CredentialPrompt that reads answers from stdin.

    The 2FA password is read with getpass so it is not echoed.
    """

    def __init__(self, use_env: bool = True) -> None:
        self._use_env = use_env

    def prompt(self, kind: CredentialKind) -> str:
        env_name = ENV_OVERRIDES.get(kind)
        if self._use_env and env_name:
            value = os.getenv(env_name)
            if value:
                return value.strip()

        question = QUESTIONS[kind]
        if kind is CredentialKind.PASSWORD:
            return getpass(question)
        return input(question).strip()
