from collections import deque

import pytest

from custom_bgv import RandomSource


class ScriptedRandomSource(RandomSource):
    """Replays fixed draws: `uniform` and `small` are queues of coefficient lists."""

    def __init__(self, uniform=(), small=()):
        self.uniform_draws = deque(uniform)
        self.small_draws = deque(small)

    def uniform(self, count, bound):
        values = list(self.uniform_draws.popleft())
        assert len(values) == count
        assert all(0 <= v < bound for v in values)
        return values

    def choice(self, support, count):
        values = list(self.small_draws.popleft())
        assert len(values) == count
        assert all(v in support for v in values)
        return values


class FailingRandomSource(RandomSource):
    def uniform(self, count, bound):
        raise OSError("entropy pool exhausted")

    def choice(self, support, count):
        raise OSError("entropy pool exhausted")


@pytest.fixture
def scripted():
    return ScriptedRandomSource


@pytest.fixture
def failing_rng():
    return FailingRandomSource()
