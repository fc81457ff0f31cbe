"""
Shared pytest fixtures for hours_tracker tests.
"""

import pytest

from hours_tracker.session import TrackerSession
from hours_tracker.storage import MemoryStorage
from hours_tracker.store import EntryStore


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, now: int = 1_700_000_000_000):
        self.now = now

    def __call__(self) -> int:
        return self.now


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(storage, clock):
    entry_store = EntryStore(storage, clock=clock)
    entry_store.load()
    return entry_store


@pytest.fixture
def session(store):
    return TrackerSession(store, clock=lambda: '2024-01-10')
