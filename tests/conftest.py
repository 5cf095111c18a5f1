import pytest

from engine.randomness import RandomSource


class ScriptedRandomSource(RandomSource):
    """Replays a fixed list of draws and records every randbelow() call."""

    def __init__(self, draws):
        self.draws = list(draws)
        self.calls = []

    def randbelow(self, n):
        value = self.draws.pop(0) if self.draws else 0
        assert 0 <= value < n, f"scripted draw {value} out of range for n={n}"
        self.calls.append((n, value))
        return value


class RecordingRandomSource(RandomSource):
    """Wraps another source and keeps the draws it made."""

    def __init__(self, inner):
        self.inner = inner
        self.draws = []

    def randbelow(self, n):
        value = self.inner.randbelow(n)
        self.draws.append(value)
        return value


@pytest.fixture
def scripted():
    return ScriptedRandomSource


@pytest.fixture
def recording():
    return RecordingRandomSource
