from __future__ import annotations

import pytest

from appseed.core.config import AppSettings


class FakeVersionSource:
    """Version source with a canned answer that records how often it ran."""

    def __init__(self, answer: str | None, *, shows_progress: bool = False, description: str = "fake") -> None:
        self.answer = answer
        self.shows_progress = shows_progress
        self.description = description
        self.calls = 0

    async def fetch_latest(self) -> str | None:
        self.calls += 1
        return self.answer


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(
        registry_url="https://registry.test",
        package_name="appseed",
        http_timeout_seconds=2.0,
        release_notes_url="https://docs.test/getting-started/",
    )
