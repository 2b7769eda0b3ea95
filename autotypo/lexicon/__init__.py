"""
Lexicon layers for typo correction.

- BUILTIN_LEXICON: shared read-only misspelling, transposition and
  contraction tables
- LexiconStore: per-engine custom and learned overlays on top of them
- is_known_word: English word list lookup (pyspellchecker)
"""

from autotypo.lexicon.data import (
    BUILTIN_LEXICON,
    COMMON_CONTRACTIONS,
    COMMON_MISSPELLINGS,
    COMMON_TRANSPOSITIONS,
    KEYBOARD_ADJACENCY,
)
from autotypo.lexicon.known_words import get_spellchecker, is_known_word
from autotypo.lexicon.store import LexiconStore

__all__ = [
    # Store
    "LexiconStore",
    # Static data
    "BUILTIN_LEXICON",
    "COMMON_MISSPELLINGS",
    "COMMON_TRANSPOSITIONS",
    "COMMON_CONTRACTIONS",
    "KEYBOARD_ADJACENCY",
    # Word list
    "get_spellchecker",
    "is_known_word",
]
