import random

import pytest


class SequenceRng:
    """Randomness source that replays a fixed list of floats in [0, 1)."""

    def __init__(self, values):
        self._values = list(values)
        self.calls = 0

    def random(self) -> float:
        value = self._values[self.calls % len(self._values)]
        self.calls += 1
        return value


@pytest.fixture
def rng():
    return random.Random(20240601)


@pytest.fixture
def sequence_rng():
    return SequenceRng
