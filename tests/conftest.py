import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from flappy.simulation import Simulation
from flappy.storage import HighScoreStore


class MemoryStore:
    """In-process key/value store with the same interface as JsonKeyValueStore."""

    def __init__(self, data=None):
        self.data = dict(data or {})

    def get(self, key, default=None):
        return self.data.get(key, default)

    def set(self, key, value):
        self.data[key] = value

    def remove(self, key):
        self.data.pop(key, None)

    def __contains__(self, key):
        return key in self.data


class FixedRng:
    """Stands in for random.Random: every gap lands at the same height."""

    def __init__(self, value):
        self.value = value
        self.calls = []

    def uniform(self, a, b):
        self.calls.append((a, b))
        return self.value

    def random(self):
        return 0.5


@pytest.fixture
def kv():
    return MemoryStore()


@pytest.fixture
def store(kv):
    return HighScoreStore(kv)


@pytest.fixture
def sim(store):
    return Simulation(store=store, rng=FixedRng(300.0))


@pytest.fixture
def fixed_rng():
    return FixedRng


@pytest.fixture
def memory_store():
    return MemoryStore
