#!/usr/bin/env python3
"""
Word Generator
==============
Builds a transition table once and generates words from it.

Each word is the first of up to ``retry_count`` walks whose length falls in
[min_length, max_length]. When every walk misses the range the last one is
returned anyway; generation never fails, and the caller flags out-of-range
words (see conlangkit.quality).

Usage:
    from conlangkit.generators import build_model, generate_batch

    model = build_model(["kalita", "moruna", "tesavi"], seed=7)
    words = generate_batch(model, 20)

The normal strategy records a head table but never draws from it; every
random number it consumes shapes the word. Word openings drive the start of
a walk only in the headplus strategy.
"""

import logging
from typing import Iterable, List, Optional

from conlangkit.config import WordgenConfig
from conlangkit.generators.sampler import RandomSource, WeightedSampler
from conlangkit.generators.tables import Strategy, TransitionTable, build_table
from conlangkit.generators.walker import ChainWalker

logger = logging.getLogger(__name__)


class WordGenerator:
    """Generates words from a transition table built with one strategy."""

    def __init__(self,
                 config: Optional[WordgenConfig] = None,
                 strategy: Strategy = Strategy.APPEND,
                 rng: Optional[RandomSource] = None,
                 seed: Optional[int] = None):
        """
        Initialize an empty generator.

        Args:
            config: Generation settings (defaults from app.yaml)
            strategy: Table-building strategy
            rng: Randomness source with a random() method
            seed: Seed for the default random.Random (ignored with rng)
        """
        self.config = config if config is not None else WordgenConfig()
        self.config.validate()
        self.strategy = strategy
        self.sampler = WeightedSampler(rng=rng, seed=seed)
        self.table = TransitionTable(depth=self.config.depth, strategy=strategy)
        self.attempts = 0  # Walks used by the most recent generate()

    def build(self, words: Iterable[str]) -> 'WordGenerator':
        """Replace the model with a table built from words."""
        self.table = build_table(self.strategy, words, self.config)
        return self

    def _walker(self) -> ChainWalker:
        return ChainWalker(self.table, self.sampler, self.config.chain_limit)

    def generate(self) -> str:
        """
        Generate a single word.

        Returns:
            The first walk within the length range, or the last walk if
            retry_count walks all missed it
        """
        walker = self._walker()
        word = ""
        self.attempts = 0

        while self.attempts < self.config.retry_count:
            word = walker.walk()
            self.attempts += 1

            if not walker.truncated and self.config.is_valid_length(word):
                break
        else:
            logger.debug(
                "No word within [%d, %d] after %d walks, returning %r",
                self.config.min_length, self.config.max_length, self.attempts, word,
            )

        return word

    def generate_batch(self, count: int) -> List[str]:
        """Generate count words; duplicates and invalid words are kept."""
        return [self.generate() for _ in range(count)]


# =============================================================================
# Functional Interface
# =============================================================================

def build_model(words: Iterable[str],
                config: Optional[WordgenConfig] = None,
                strategy: Strategy = Strategy.APPEND,
                rng: Optional[RandomSource] = None,
                seed: Optional[int] = None) -> WordGenerator:
    """
    Build a generator from training words.

    Raises:
        ConfigError: If config violates one of its invariants
    """
    return WordGenerator(config, strategy=strategy, rng=rng, seed=seed).build(words)


def generate_word(model: WordGenerator) -> str:
    return model.generate()


def generate_batch(model: WordGenerator, count: int) -> List[str]:
    return model.generate_batch(count)
