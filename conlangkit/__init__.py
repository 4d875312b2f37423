#!/usr/bin/env python3
"""
conlangkit - Word Generator for Constructed Languages
=====================================================

Builds weighted k-gram tables from example words and generates new,
phonotactically plausible words by random walks over them.

Quick Start
-----------
    from conlangkit import build_model, generate_batch, classify, summarize

    words = ["kalita", "moruna", "tesavi", "kaloru"]
    model = build_model(words, seed=42)
    batch = generate_batch(model, 20)

    created = classify(batch, words, model.config)
    print(summarize(created).to_dict())

Modules
-------
    conlangkit.generators - Table builders, sampler, walker, generator facade
    conlangkit.quality    - Batch classification and summary counts
    conlangkit.dictionary - OTM-JSON and word list loading
    conlangkit.config     - WordgenConfig and ConfigError

CLI Usage
---------
    python -m conlangkit generate lexicon.json -n 50 --strategy headplus
    python -m conlangkit table lexicon.json --top 20
"""

__version__ = "0.1.0"

# =============================================================================
# Submodule Imports
# =============================================================================

from . import generators
from . import config
from . import quality
from . import dictionary

# =============================================================================
# Generator Imports
# =============================================================================

from .generators import (
    Strategy,
    TransitionTable,
    WeightedSampler,
    ChainWalker,
    WordGenerator,
    build_table,
    build_model,
    generate_word,
    generate_batch,
)

# =============================================================================
# Config, Quality and Dictionary Imports
# =============================================================================

from .config import (
    ConfigError,
    WordgenConfig,
    get_wordgen_config,
)
from .quality import (
    BatchSummary,
    CreatedWord,
    classify,
    summarize,
    novel_words,
)
from .dictionary import (
    DictionaryError,
    load_dictionary,
    load_word_list,
    load_words,
)

__all__ = [
    '__version__',
    # Generators
    'Strategy',
    'TransitionTable',
    'WeightedSampler',
    'ChainWalker',
    'WordGenerator',
    'build_table',
    'build_model',
    'generate_word',
    'generate_batch',
    # Config
    'ConfigError',
    'WordgenConfig',
    'get_wordgen_config',
    # Quality
    'BatchSummary',
    'CreatedWord',
    'classify',
    'summarize',
    'novel_words',
    # Dictionary
    'DictionaryError',
    'load_dictionary',
    'load_word_list',
    'load_words',
]
