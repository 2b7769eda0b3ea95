"""
Layered misspelling -> correction store.

Three layers are consulted on lookup:
1. Static layer: built-in tables with the custom overlay on top
2. Learned layer: entries recorded at runtime via ``add_learned``

The built-in tables are shared read-only data; the custom and learned
overlays belong to a single store and shadow built-ins without
mutating them.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping

from autotypo.lexicon.data import BUILTIN_LEXICON

logger = logging.getLogger(__name__)

_BUILTIN_VALUES = frozenset(value.lower() for value in BUILTIN_LEXICON.values())


class LexiconStore:
    """
    Misspelling lexicon with a custom overlay and a learned dictionary.

    Lookup precedence is static (built-in + custom, custom wins) first,
    learned second. In case-insensitive mode keys are lowercased on
    insert and lookup; restoring output casing is the caller's job.

    Attributes:
        case_sensitive: Whether keys keep their case.

    Example:
        >>> store = LexiconStore(custom={"pyhton": "python"})
        >>> store.lookup("Teh")
        'the'
        >>> store.add_learned("foo", "bar")
        >>> store.lookup("foo")
        'bar'
    """

    def __init__(
        self,
        custom: Mapping[str, str] | None = None,
        case_sensitive: bool = False,
        builtin: Mapping[str, str] = BUILTIN_LEXICON,
    ):
        self.case_sensitive = case_sensitive
        self._builtin = builtin
        self._builtin_values = (
            _BUILTIN_VALUES
            if builtin is BUILTIN_LEXICON
            else frozenset(v.lower() for v in builtin.values())
        )
        self._custom: dict[str, str] = {}
        self._learned: dict[str, str] = {}
        if custom:
            self.import_bulk(custom)

    def normalize(self, word: str) -> str:
        """Apply the store's case policy to a key."""
        return word if self.case_sensitive else word.lower()

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def lookup_static(self, word: str) -> str | None:
        """Look up the built-in + custom layer only."""
        key = self.normalize(word)
        if key in self._custom:
            return self._custom[key]
        return self._builtin.get(key)

    def lookup_learned(self, word: str) -> str | None:
        """Look up the learned layer only."""
        return self._learned.get(self.normalize(word))

    def lookup(self, word: str) -> str | None:
        """Look up a word: static layer first, learned layer second."""
        correction = self.lookup_static(word)
        if correction is None:
            correction = self.lookup_learned(word)
        return correction

    def contains(self, word: str) -> bool:
        """True if the word is a key in any layer."""
        return self.lookup(word) is not None

    __contains__ = contains

    def is_correction_value(self, word: str) -> bool:
        """
        True if the word is the correction target of any entry.

        Compared case-insensitively. Correction targets are correctly
        spelled by construction.
        """
        w = word.lower()
        if w in self._builtin_values:
            return True
        return any(v.lower() == w for v in self._custom.values()) or any(
            v.lower() == w for v in self._learned.values()
        )

    def iter_entries(self) -> Iterator[tuple[str, str]]:
        """
        Yield (misspelling, correction) pairs across all layers.

        Order is deterministic: built-in keys in table order with custom
        overrides applied in place, then custom-only keys, then learned
        keys, each in insertion order.
        """
        for key, value in self._builtin.items():
            yield key, self._custom.get(key, value)
        for key, value in self._custom.items():
            if key not in self._builtin:
                yield key, value
        yield from self._learned.items()

    def __len__(self) -> int:
        return len(self._builtin.keys() | self._custom.keys()) + len(self._learned)

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def add_entry(self, misspelling: str, correction: str) -> bool:
        """
        Add an entry to the custom overlay.

        Returns:
            True if stored, False if either string was empty.
        """
        if not misspelling or not correction:
            return False
        self._custom[self.normalize(misspelling)] = correction
        logger.debug("Added dictionary entry '%s' -> '%s'", misspelling, correction)
        return True

    def add_learned(self, misspelling: str, correction: str) -> bool:
        """
        Record a learned correction.

        Returns:
            True if stored, False if either string was empty.
        """
        if not misspelling or not correction:
            return False
        self._learned[self.normalize(misspelling)] = correction
        logger.debug("Learned correction '%s' -> '%s'", misspelling, correction)
        return True

    def import_bulk(self, mapping: Mapping[str, str]) -> int:
        """
        Merge a mapping into the custom overlay.

        Returns:
            Number of entries stored.
        """
        stored = sum(1 for k, v in mapping.items() if self.add_entry(k, v))
        logger.info("Imported %d dictionary entries", stored)
        return stored

    def export_all(self) -> dict[str, str]:
        """Return a copy of the static layer (built-ins merged with custom)."""
        return {**self._builtin, **self._custom}

    def export_learned(self) -> dict[str, str]:
        """Return a copy of the learned layer."""
        return dict(self._learned)

    def clear_learned(self) -> None:
        """Clear all learned corrections."""
        self._learned.clear()
        logger.info("Cleared learned dictionary")

    def reset_to_defaults(self) -> None:
        """Drop custom and learned entries, leaving the built-in tables."""
        self._custom.clear()
        self._learned.clear()
        logger.info("Reset lexicon to built-in defaults")
