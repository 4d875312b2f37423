#!/usr/bin/env python3
"""
Dictionary Loading
==================
Reads training words from dictionary files.

Supported formats:
- OTM-JSON dictionaries: {"words": [{"entry": {"form": "..."}, ...}, ...]}
  Multi-word forms (containing a space) are skipped.
- Plain word lists: one word per line, blank lines ignored.

Usage:
    from conlangkit.dictionary import load_words

    words = load_words(["lexicon.json", "extra.txt"])
    words = load_words(["more.json"], existing=words, append=True)
"""

import json
import logging
from pathlib import Path
from typing import Iterable, List, Sequence, Union

from conlangkit.settings import resolve_path

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class DictionaryError(ValueError):
    """Raised when a dictionary file does not have the expected structure."""


def parse_dictionary(data: dict, source: str = "<dictionary>") -> List[str]:
    """Extract single-word forms from a parsed OTM-JSON document."""
    if not isinstance(data, dict) or not isinstance(data.get('words'), list):
        raise DictionaryError(f"{source}: expected an object with a 'words' list")

    forms = []
    for position, word in enumerate(data['words']):
        try:
            form = word['entry']['form']
        except (KeyError, TypeError):
            raise DictionaryError(f"{source}: word #{position} has no entry.form") from None
        if not isinstance(form, str):
            raise DictionaryError(f"{source}: word #{position} form is not a string")
        if ' ' in form:
            continue
        forms.append(form)
    return forms


def load_dictionary(path: PathLike) -> List[str]:
    """Load the single-word forms of an OTM-JSON dictionary file."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding='utf-8'))
    except json.JSONDecodeError as e:
        raise DictionaryError(f"{path}: invalid JSON ({e})") from e
    forms = parse_dictionary(data, source=str(path))
    logger.debug("Loaded %d forms from %s", len(forms), path)
    return forms


def load_word_list(path: PathLike) -> List[str]:
    """Load a plain text word list, one word per line."""
    path = Path(path)
    words = [line.strip() for line in path.read_text(encoding='utf-8').splitlines()]
    words = [w for w in words if w]
    logger.debug("Loaded %d words from %s", len(words), path)
    return words


def load_words(paths: Iterable[PathLike],
               existing: Sequence[str] = (),
               append: bool = False) -> List[str]:
    """
    Load training words from several files, in order.

    Args:
        paths: Dictionary (.json) or word list files
        existing: Previously loaded words
        append: Keep existing words in front of the new ones

    Returns:
        The combined word list
    """
    words: List[str] = list(existing) if append else []
    for value in paths:
        path = resolve_path(value)
        if not path.exists():
            raise FileNotFoundError(f"No such dictionary: {path}")
        if path.suffix.lower() == '.json':
            words.extend(load_dictionary(path))
        else:
            words.extend(load_word_list(path))
    return words
