"""Shared fixtures for conlangkit tests."""

import sys
from pathlib import Path

import pytest

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from conlangkit.config import WordgenConfig


class ScriptedRandom:
    """Randomness source that replays fixed values (the last one repeats)."""

    def __init__(self, *values):
        self.values = list(values) or [0.0]
        self.calls = 0

    def random(self) -> float:
        value = self.values[min(self.calls, len(self.values) - 1)]
        self.calls += 1
        return value


@pytest.fixture
def config():
    """Depth 3, lengths 3..10, 20 retries."""
    return WordgenConfig(depth=3, min_length=3, max_length=10, retry_count=20)


@pytest.fixture
def first_choice():
    """Randomness that always picks the first candidate with weight."""
    return ScriptedRandom(0.0)


@pytest.fixture
def corpus():
    """A small corpus of invented words."""
    return [
        "kalita", "moruna", "tesavi", "kaloru", "mirata", "sonava",
        "telika", "rumano", "vasoki", "lorima", "kamesu", "nitalo",
    ]


@pytest.fixture
def scripted():
    """Factory for ScriptedRandom sources."""
    return ScriptedRandom
