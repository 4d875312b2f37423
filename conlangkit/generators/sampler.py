#!/usr/bin/env python3
"""
Weighted Sampler
================
Draws one key from (key, weight) pairs with probability weight / total.

Any object with a ``random()`` method returning a float in [0.0, 1.0) can
serve as the randomness source; ``random.Random`` is used by default so a
seed makes every draw reproducible.
"""

import random
from typing import Iterable, Optional, Protocol, Tuple


class RandomSource(Protocol):
    """Anything with random() -> float in [0.0, 1.0)."""

    def random(self) -> float: ...


# Returned when nothing can be drawn; shorter than any depth, so it ends a walk
EMPTY = ""


class WeightedSampler:
    """Cumulative-weight sampler over (key, weight) pairs."""

    def __init__(self, rng: Optional[RandomSource] = None, seed: Optional[int] = None):
        self._rng = rng if rng is not None else random.Random(seed)

    @property
    def rng(self) -> RandomSource:
        return self._rng

    def random(self) -> float:
        """Return a uniform float in [0.0, 1.0) from the underlying source."""
        return self._rng.random()

    def sample(self, items: Iterable[Tuple[str, float]]) -> str:
        """
        Choose a key from items with weights.

        Args:
            items: (key, weight) pairs, all weights >= 0

        Returns:
            The first key whose cumulative weight exceeds the draw, or the
            empty string when there is nothing to draw from
        """
        items = list(items)
        total = sum(w for _, w in items)
        if not items or total <= 0:
            return EMPTY

        r = self.random() * total

        cumulative = 0
        for key, weight in items:
            cumulative += weight
            if r < cumulative:
                return key

        return EMPTY
