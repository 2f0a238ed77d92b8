"""
Shared fixtures: in-memory storage, scripted solution fetchers and a fixed day.
"""

import os
import tempfile

# Keep test log files out of the working tree; must run before dailyword is imported
os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='dailyword-logs-'))

import pytest

from dailyword.exceptions import PersistenceUnavailable, ProviderUnavailable
from dailyword.services.game_session import GameSession
from dailyword.services.solution_provider import SolutionProvider
from dailyword.storage import BestEffortStorage, KeyValueStorage, MemoryStorage

DAY = "2026-10-18"
OTHER_DAY = "2026-10-19"


class BrokenStorage(KeyValueStorage):
    """Backend whose every operation fails, like a full or disabled store."""

    def get(self, key):
        raise PersistenceUnavailable("storage disabled")

    def set(self, key, value):
        raise PersistenceUnavailable("quota exceeded")

    def remove(self, key):
        raise PersistenceUnavailable("storage disabled")


def fixed_fetcher(word):
    def fetch(day):
        return word
    return fetch


def failing_fetcher(day):
    raise ProviderUnavailable("network down")


@pytest.fixture
def backend():
    return MemoryStorage()


@pytest.fixture
def storage(backend):
    return BestEffortStorage(backend)


@pytest.fixture
def make_session(storage):
    """Build a session the way the service does, with a fixed solution."""
    def _make(solution="crane", day=DAY, fetcher=None, store=None):
        provider = SolutionProvider(fetcher or fixed_fetcher(solution), store or storage)
        return GameSession.start(store or storage, provider, day)
    return _make
