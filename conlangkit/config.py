#!/usr/bin/env python3
"""
Configuration Management
========================
Word generator settings, filled from the ``wordgen`` section of app.yaml.

Explicit values always win; anything left as ``None`` is read from settings.
Invariants are checked on construction so a bad config never reaches a model.
"""

from dataclasses import dataclass, asdict
from typing import Optional

from conlangkit.settings import get_setting


class ConfigError(ValueError):
    """Raised when a WordgenConfig violates one of its invariants."""


# =============================================================================
# Word Generator Configuration
# =============================================================================

@dataclass
class WordgenConfig:
    """Configuration shared by every word generator strategy."""
    depth: Optional[int] = None               # k-gram length
    min_length: Optional[int] = None          # Minimal accepted word length
    max_length: Optional[int] = None          # Maximal accepted word length
    retry_count: Optional[int] = None         # Walks per generated word

    # Strategy tuning
    head_boost: Optional[float] = None        # Head-weighted start bonus multiplier
    prune_rare_prefixes: Optional[bool] = None

    def __post_init__(self):
        cfg = get_setting("wordgen", {}) or {}
        if self.depth is None:
            self.depth = cfg.get("depth")
        if self.min_length is None:
            self.min_length = cfg.get("min_length")
        if self.max_length is None:
            self.max_length = cfg.get("max_length")
        if self.retry_count is None:
            self.retry_count = cfg.get("retry_count")
        if self.head_boost is None:
            self.head_boost = cfg.get("head_boost", 1)
        if self.prune_rare_prefixes is None:
            self.prune_rare_prefixes = bool(cfg.get("prune_rare_prefixes", False))

        missing = [
            name for name, value in (
                ("depth", self.depth),
                ("min_length", self.min_length),
                ("max_length", self.max_length),
                ("retry_count", self.retry_count),
            )
            if value is None
        ]
        if missing:
            raise ConfigError(f"wordgen settings missing in app.yaml: {', '.join(missing)}")

        self.validate()

    def validate(self) -> None:
        """Check the config invariants, raising ConfigError on the first violation."""
        if self.depth < 2:
            raise ConfigError(f"depth must be >= 2 (got {self.depth})")
        if self.min_length > self.max_length:
            raise ConfigError(
                f"min_length must not exceed max_length "
                f"(got {self.min_length} > {self.max_length})"
            )
        if self.retry_count < 1:
            raise ConfigError(f"retry_count must be >= 1 (got {self.retry_count})")
        if self.head_boost < 0:
            raise ConfigError(f"head_boost must be >= 0 (got {self.head_boost})")

    @property
    def head_length(self) -> int:
        """Length of the word opening recorded in a head table."""
        return max(2, self.depth - 1)

    @property
    def chain_limit(self) -> int:
        """Length at which a walk is cut; always above max_length."""
        return self.max_length + self.depth

    def is_valid_length(self, word: str) -> bool:
        return self.min_length <= len(word) <= self.max_length

    def to_dict(self) -> dict:
        return asdict(self)


def get_wordgen_config(**overrides) -> WordgenConfig:
    """Build a WordgenConfig, dropping overrides that were left unset."""
    return WordgenConfig(**{k: v for k, v in overrides.items() if v is not None})
