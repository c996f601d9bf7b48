import pytest

from fruitsnake.config import Config


class ScriptedRng:
    """Stands in for numpy's Generator: hands out queued integers, then zeros."""

    def __init__(self, *values):
        self.values = list(values)

    def integers(self, high):
        v = self.values.pop(0) if self.values else 0
        assert 0 <= v < high
        return v


class FakeClock:
    def __init__(self, now: int = 0):
        self.now = now

    def __call__(self) -> int:
        return self.now


@pytest.fixture
def cfg():
    return Config(grid_w=30, grid_h=20)


@pytest.fixture
def rng():
    return ScriptedRng()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def scripted_rng():
    return ScriptedRng
