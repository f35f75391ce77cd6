"""Shared test fixtures for the wowbehave service."""

import re

import pytest

from wowbehave.config import AppSettings, ServerSettings, StoreSettings
from wowbehave.store.client import KeyStore


class FakeKeyStore(KeyStore):
    """In-memory KeyStore holding a fixed list of key names."""

    def __init__(self, keys: list[str] | None = None) -> None:
        self.keys = list(keys or [])
        self.patterns: list[str] = []
        self.closed = False

    async def scan_keys(self, pattern: str) -> list[str]:
        self.patterns.append(pattern)
        # Only trailing-wildcard prefix patterns are issued by the service
        prefix = re.sub(r"\\(.)", r"\1", pattern[:-1])
        return [key for key in self.keys if key.startswith(prefix)]

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def mock_settings() -> AppSettings:
    """Return AppSettings with test defaults (dummy store credentials)."""
    return AppSettings(
        log_level="DEBUG",
        store=StoreSettings(
            url="https://test-store.upstash.io",
            token="test-token",  # type: ignore[arg-type]
            scan_count=2,
        ),
        server=ServerSettings(port=3001),
    )


@pytest.fixture
def player_keys() -> list[str]:
    """Behavior and rejoin keys for Foo-Bar plus noise for another player."""
    return [
        "wowbehave:behavior:Foo:Bar:damage:1",
        "wowbehave:behavior:Foo:Bar:defense:1",
        "wowbehave:behavior:Foo:Bar:healing:1",
        "wowbehave:behavior:Foo:Bar:communication:1",
        "wowbehave:rejoin:Foo:Bar:yes",
        "wowbehave:rejoin:Foo:Bar:no",
        "wowbehave:behavior:Other:Bar:damage:-1",
    ]


@pytest.fixture
def fake_store(player_keys: list[str]) -> FakeKeyStore:
    """FakeKeyStore preloaded with player_keys."""
    return FakeKeyStore(player_keys)
