from __future__ import annotations

import pytest

from core.config import RelayConfig
from fakes import FakeSender, make_config


@pytest.fixture
def config() -> RelayConfig:
    return make_config()


@pytest.fixture
def sender() -> FakeSender:
    return FakeSender()
