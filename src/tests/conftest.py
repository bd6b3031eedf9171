"""Shared fixtures."""

import pytest
from sinks import RecordingSink


@pytest.fixture
def recording_sink():
    return RecordingSink()


@pytest.fixture
def make_lines():
    def _make(count: int, prefix: str = "line") -> list[str]:
        return [f"{prefix} {n}" for n in range(1, count + 1)]

    return _make
