#!/usr/bin/env python3
"""
Classification of generated batches against the training words.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Iterable, List

from conlangkit.config import WordgenConfig


@dataclass
class CreatedWord:
    """A generated word with its batch flags."""
    word: str
    has_original: bool = False    # Equals a training word
    is_duplicated: bool = False   # Equals an earlier word of the same batch
    is_invalid: bool = False      # Length outside [min_length, max_length]

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class BatchSummary:
    """Flag counts for a batch, with percentages of the batch size."""
    total: int
    has_original_count: int
    duplication_count: int
    invalid_count: int

    def _percent(self, count: int) -> float:
        if not self.total:
            return 0.0
        return round(count / self.total * 100, 2)

    @property
    def has_original_percent(self) -> float:
        return self._percent(self.has_original_count)

    @property
    def duplication_percent(self) -> float:
        return self._percent(self.duplication_count)

    @property
    def invalid_percent(self) -> float:
        return self._percent(self.invalid_count)

    def to_dict(self) -> dict:
        data = asdict(self)
        data.update(
            has_original_percent=self.has_original_percent,
            duplication_percent=self.duplication_percent,
            invalid_percent=self.invalid_percent,
        )
        return data


def classify(words: Iterable[str],
             originals: Iterable[str],
             config: WordgenConfig) -> List[CreatedWord]:
    """
    Flag each generated word.

    Only repeats are flagged as duplicated; the first occurrence of a word
    is not.
    """
    original_set = set(originals)
    seen = set()
    created = []
    for word in words:
        created.append(
            CreatedWord(
                word=word,
                has_original=word in original_set,
                is_duplicated=word in seen,
                is_invalid=not config.is_valid_length(word),
            )
        )
        seen.add(word)
    return created


def summarize(created: List[CreatedWord]) -> BatchSummary:
    return BatchSummary(
        total=len(created),
        has_original_count=sum(1 for c in created if c.has_original),
        duplication_count=sum(1 for c in created if c.is_duplicated),
        invalid_count=sum(1 for c in created if c.is_invalid),
    )


def novel_words(created: Iterable[CreatedWord]) -> List[str]:
    """Words carrying none of the three flags, in batch order."""
    return [
        c.word for c in created
        if not (c.has_original or c.is_duplicated or c.is_invalid)
    ]
