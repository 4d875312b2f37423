#!/usr/bin/env python3
"""
Transition Table Builders
=========================
Builds weighted k-gram tables from a list of training words.

Every word of length L >= k contributes the sliding windows w[i:i+k] for
i = 0 .. L-k+1. The last window is one character short; that terminal
fragment is what lets a walk end where training words end.

Strategies:
- normal:   raw occurrence counts, plus a table of word openings
- headplus: normal counts, with word-initial k-grams boosted as start points
- pruned:   counts with a bonus for k-grams behind the most frequent 2-gram
- reverse:  counts inverted so that rare k-grams are favored

Example (k=3, words ["aba", "abc", "aab"]):
    aba: 1, ba: 1, abc: 1, bc: 1, aab: 1, ab: 1
"""

import logging
import math
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from functools import cached_property
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Tuple

from conlangkit.config import WordgenConfig

logger = logging.getLogger(__name__)


# =============================================================================
# Strategies
# =============================================================================

class Strategy(Enum):
    """Closed set of table-building strategies."""
    APPEND = "normal"
    HEAD_WEIGHTED = "headplus"
    PRUNED = "pruned"
    REVERSE_FREQUENCY = "reverse"

    @property
    def description(self) -> str:
        return STRATEGY_DESCRIPTIONS[self]

    @classmethod
    def from_name(cls, name: str) -> 'Strategy':
        """Resolve a strategy from its value or member name (case-insensitive)."""
        key = name.strip().lower()
        for strategy in cls:
            if key in (strategy.value, strategy.name.lower()):
                return strategy
        available = ', '.join(s.value for s in cls)
        raise ValueError(f"Unknown strategy '{name}'. Available strategies: {available}")


STRATEGY_DESCRIPTIONS = {
    Strategy.APPEND: "Raw k-gram frequencies",
    Strategy.HEAD_WEIGHTED: "Raw frequencies, starts boosted by common word openings",
    Strategy.PRUNED: "Bonus for k-grams behind the most frequent 2-gram",
    Strategy.REVERSE_FREQUENCY: "Inverted frequencies, rare k-grams favored",
}


# =============================================================================
# Transition Table
# =============================================================================

@dataclass
class TransitionTable:
    """Weighted k-gram table plus the optional start distributions."""
    depth: int
    strategy: Strategy = Strategy.APPEND
    weights: Dict[str, int] = field(default_factory=dict)
    heads: Dict[str, int] = field(default_factory=dict)
    starts: Optional[Dict[str, float]] = None

    def __len__(self) -> int:
        return len(self.weights)

    def __contains__(self, key: str) -> bool:
        return key in self.weights

    def __getitem__(self, key: str) -> int:
        return self.weights[key]

    def items(self) -> Iterator[Tuple[str, int]]:
        return iter(self.weights.items())

    @property
    def is_empty(self) -> bool:
        return not self.weights

    def start_items(self) -> List[Tuple[str, float]]:
        """Candidates for the first k-gram of a walk."""
        if self.starts is not None:
            return list(self.starts.items())
        return [(k, w) for k, w in self.weights.items() if len(k) == self.depth]

    def continuations(self, suffix: str) -> List[Tuple[str, int]]:
        """Keys starting with suffix, in insertion order."""
        if len(suffix) == self.depth - 1:
            return self._index.get(suffix, [])
        return [(k, w) for k, w in self.weights.items() if k.startswith(suffix)]

    @cached_property
    def _index(self) -> Dict[str, List[Tuple[str, int]]]:
        # Every key has length depth or depth - 1, so its first depth - 1
        # characters fully decide whether it continues a given suffix.
        index: Dict[str, List[Tuple[str, int]]] = {}
        for key, weight in self.weights.items():
            index.setdefault(key[:self.depth - 1], []).append((key, weight))
        return index

    def top(self, limit: Optional[int] = None) -> List[Tuple[str, int]]:
        """Heaviest entries first; ties keep insertion order."""
        ranked = sorted(self.weights.items(), key=lambda kv: -kv[1])
        return ranked if limit is None else ranked[:limit]


# =============================================================================
# Sliding Window Helpers
# =============================================================================

def sliding_keys(word: str, depth: int) -> Iterator[str]:
    """Yield every k-gram of word followed by its terminal fragment."""
    for i in range(len(word) - depth + 2):
        yield word[i:i + depth]


def count_kgrams(words: Iterable[str], depth: int, min_word_length: int) -> Counter:
    """Raw k-gram counts over every word at least min_word_length long."""
    counts = Counter()
    skipped = 0
    for word in words:
        if len(word) < min_word_length:
            skipped += 1
            continue
        counts.update(sliding_keys(word, depth))
    if skipped:
        logger.debug("Skipped %d words shorter than %d", skipped, min_word_length)
    return counts


def count_heads(words: Iterable[str], config: WordgenConfig) -> Counter:
    """Occurrences of each word opening of length max(2, k-1)."""
    min_word_length = max(3, config.depth)
    return Counter(
        word[:config.head_length] for word in words if len(word) >= min_word_length
    )


# =============================================================================
# Builders
# =============================================================================

def build_append(words: List[str], config: WordgenConfig) -> TransitionTable:
    """Raw occurrence counts; words shorter than max(3, k) add nothing."""
    counts = count_kgrams(words, config.depth, max(3, config.depth))
    return TransitionTable(
        depth=config.depth,
        strategy=Strategy.APPEND,
        weights=dict(counts),
        heads=dict(count_heads(words, config)),
    )


def build_head_weighted(words: List[str], config: WordgenConfig) -> TransitionTable:
    """
    Normal table whose start distribution favors common word openings.

    Each distinct word-initial k-gram gets head_boost times the number of
    words sharing its opening on top of its normal weight.
    """
    table = build_append(words, config)
    table.strategy = Strategy.HEAD_WEIGHTED

    starts = {k: w for k, w in table.weights.items() if len(k) == config.depth}
    boosted = set()
    for word in words:
        if len(word) < max(3, config.depth):
            continue
        first = word[:config.depth]
        if first in boosted:
            continue
        boosted.add(first)
        starts[first] += config.head_boost * table.heads[word[:config.head_length]]

    table.starts = starts
    return table


def build_pruned(words: List[str], config: WordgenConfig) -> TransitionTable:
    """
    Counts with a one-time bonus for k-grams behind the most frequent 2-gram.

    Prefixes at the minimum 2-gram frequency are only recorded, unless
    prune_rare_prefixes is set, in which case the occurrence that first
    discovers such a prefix is dropped.
    """
    depth = config.depth
    bigrams = Counter()
    for word in words:
        for i in range(len(word) - 1):
            bigrams[word[i:i + 2]] += 1

    low = min(bigrams.values()) if bigrams else None
    high = max(bigrams.values()) if bigrams else None

    min_prefixes = set()
    max_prefixes = set()
    weights: Dict[str, int] = {}

    for word in words:
        if len(word) < depth:
            continue
        for key in sliding_keys(word, depth):
            prefix = key[:2]
            frequency = bigrams.get(prefix) if len(prefix) == 2 else None

            if frequency is not None and frequency == high:
                max_prefixes.add(prefix)
            if frequency is not None and frequency == low and prefix not in min_prefixes:
                min_prefixes.add(prefix)
                if config.prune_rare_prefixes:
                    continue

            weights[key] = weights.get(key, 0) + 1

    for key in weights:
        if key[:2] in max_prefixes:
            weights[key] += 1

    logger.debug(
        "Pruned table: %d keys, %d max prefixes, %d min prefixes",
        len(weights), len(max_prefixes), len(min_prefixes),
    )
    return TransitionTable(depth=depth, strategy=Strategy.PRUNED, weights=weights)


def build_reverse_frequency(words: List[str], config: WordgenConfig) -> TransitionTable:
    """Counts inverted to ceil(peak - count) with peak = max(count) + 1."""
    counts = count_kgrams(words, config.depth, max(3, config.depth))
    weights: Dict[str, int] = {}
    if counts:
        peak = max(counts.values()) + 1
        weights = {key: math.ceil(peak - count) for key, count in counts.items()}
    return TransitionTable(
        depth=config.depth,
        strategy=Strategy.REVERSE_FREQUENCY,
        weights=weights,
    )


BUILDERS: Dict[Strategy, Callable[[List[str], WordgenConfig], TransitionTable]] = {
    Strategy.APPEND: build_append,
    Strategy.HEAD_WEIGHTED: build_head_weighted,
    Strategy.PRUNED: build_pruned,
    Strategy.REVERSE_FREQUENCY: build_reverse_frequency,
}


def build_table(strategy: Strategy, words: Iterable[str], config: WordgenConfig) -> TransitionTable:
    """Build a fresh table for strategy from the training words."""
    words = list(words)
    table = BUILDERS[strategy](words, config)
    logger.debug(
        "Built %s table from %d words: %d keys",
        strategy.value, len(words), len(table),
    )
    return table
