"""
Shared English word list used to recognize correctly spelled words.

Backed by pyspellchecker's English frequency dictionary. Loading it
takes a noticeable fraction of a second, so a single SpellChecker is
built on first use and shared read-only by every engine.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from spellchecker import SpellChecker

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_spellchecker() -> SpellChecker:
    """Return the shared English SpellChecker."""
    spell = SpellChecker(language="en")
    logger.debug("Loaded English word list")
    return spell


def is_known_word(word: str) -> bool:
    """
    Check if a word is a known English word (case-insensitive).

    Example:
        >>> is_known_word("philosophy")
        True
        >>> is_known_word("asdfghjkl")
        False
    """
    if not word:
        return False
    return word.lower() in get_spellchecker()
