"""Shared fixtures: reset process-wide settings and client caches around every test."""

import pytest

from elixir_leaderboard import client
from elixir_leaderboard.settings import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings_and_clients():
    get_settings.cache_clear()
    client._clients.clear()
    yield
    get_settings.cache_clear()
    client._clients.clear()
