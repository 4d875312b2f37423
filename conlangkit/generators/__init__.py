#!/usr/bin/env python3
"""
Word Generators
===============
n-gram transition-table word generation:
- tables:  k-gram table builders (normal, headplus, pruned, reverse)
- sampler: weighted random draws
- walker:  random walk over a table
- wordgen: build-once / generate-many facade with the retry policy
"""

from .sampler import (
    EMPTY,
    RandomSource,
    WeightedSampler,
)
from .tables import (
    Strategy,
    STRATEGY_DESCRIPTIONS,
    TransitionTable,
    build_table,
    build_append,
    build_head_weighted,
    build_pruned,
    build_reverse_frequency,
    sliding_keys,
)
from .walker import ChainWalker
from .wordgen import (
    WordGenerator,
    build_model,
    generate_word,
    generate_batch,
)

__all__ = [
    # Sampling
    'EMPTY',
    'RandomSource',
    'WeightedSampler',
    # Tables
    'Strategy',
    'STRATEGY_DESCRIPTIONS',
    'TransitionTable',
    'build_table',
    'build_append',
    'build_head_weighted',
    'build_pruned',
    'build_reverse_frequency',
    'sliding_keys',
    # Walking
    'ChainWalker',
    # Facade
    'WordGenerator',
    'build_model',
    'generate_word',
    'generate_batch',
]
