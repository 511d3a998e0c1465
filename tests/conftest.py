"""
Pytest configuration and shared fixtures.
"""
from typing import List

import matplotlib
import pytest

from src.odds.random_source import SeededRandomSource

# No display in test runs.
matplotlib.use("Agg")


class ScriptedRandomSource:
    """
    RandomSource stub that replays a fixed list of draws.

    Fails loudly if the script runs out or a value is out of range for the
    requested bound.
    """

    def __init__(self, script: List[int]):
        self.script = list(script)
        self.calls = 0

    def next_uniform_int(self, bound: int) -> int:
        if self.calls >= len(self.script):
            raise AssertionError("scripted source exhausted")
        value = self.script[self.calls]
        assert 0 <= value < bound, f"scripted value {value} out of range for bound {bound}"
        self.calls += 1
        return value


@pytest.fixture
def scripted():
    """Factory for scripted sources: scripted([1, 2, 3])."""
    return ScriptedRandomSource


@pytest.fixture
def source():
    """Seeded source for property checks that need many draws."""
    return SeededRandomSource(seed=1234)
