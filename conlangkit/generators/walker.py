#!/usr/bin/env python3
"""
Chain Walker
============
Random walk over a transition table.

A walk starts from a full-length k-gram, then keeps drawing a key that
begins with the last k-1 characters of the chain and appends whatever that
key adds beyond the overlap. It stops as soon as the drawn key is shorter
than k: either a terminal fragment recorded at the end of a training word,
or the empty string the sampler returns when nothing matches.

A walk that grows past the caller's limit without reaching either stop is
cut there and marked ``truncated``; such a chain is never a finished word.
"""

import logging
from typing import Optional

from conlangkit.generators.sampler import WeightedSampler
from conlangkit.generators.tables import TransitionTable

logger = logging.getLogger(__name__)


class ChainWalker:
    """Generates one candidate chain per call to walk()."""

    def __init__(self,
                 table: TransitionTable,
                 sampler: WeightedSampler,
                 max_chain_length: Optional[int] = None):
        """
        Args:
            table: Built transition table (read only)
            sampler: Weighted sampler used for every draw
            max_chain_length: Cut a walk once the chain is longer than this;
                None walks until a terminal key is drawn
        """
        self.table = table
        self.sampler = sampler
        self.max_chain_length = max_chain_length
        self.truncated = False  # Whether the last walk was cut

    def walk(self) -> str:
        depth = self.table.depth
        overlap = depth - 1
        self.truncated = False

        chain = self.sampler.sample(self.table.start_items())
        if len(chain) < depth:
            return chain

        while True:
            key = self.sampler.sample(self.table.continuations(chain[-overlap:]))
            chain += key[overlap:]
            if len(key) < depth:
                break

            if self.max_chain_length is not None and len(chain) > self.max_chain_length:
                logger.debug("Walk cut at %d characters: %s", len(chain), chain)
                self.truncated = True
                break

        return chain
