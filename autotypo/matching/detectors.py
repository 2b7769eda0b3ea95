"""
Typo-pattern detectors.

Each detector inspects one token for one known defect class and
returns a direct correction or None. Detectors run in registration
order and the first non-None result wins.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from autotypo.lexicon.data import KEYBOARD_ADJACENCY

if TYPE_CHECKING:
    from autotypo.lexicon.store import LexiconStore

logger = logging.getLogger(__name__)

# Three or more of the same character in a row
REPEATED_LETTER_PATTERN = re.compile(r"(.)\1{2,}")


@runtime_checkable
class Detector(Protocol):
    """A single-token typo detector."""

    name: str

    def detect(self, token: str) -> str | None: ...


class RepeatedLetterDetector:
    """
    Collapses runs of 3+ identical characters to exactly two.

    A direct string transform: the result is not checked against any
    dictionary, so "aaaaa" becomes "aa".

    Example:
        >>> RepeatedLetterDetector().detect("helllo")
        'hello'
    """

    name = "repeated_letters"

    def detect(self, token: str) -> str | None:
        if not REPEATED_LETTER_PATTERN.search(token):
            return None
        return REPEATED_LETTER_PATTERN.sub(r"\1\1", token)


class KeyboardAdjacencyDetector:
    """
    Models a single slipped key on a QWERTY keyboard.

    For each position (left to right) and each neighbouring key (table
    order), substitutes that one character and checks the result
    against the lexicon. The first hit returns that entry's correction.

    Example:
        >>> from autotypo.lexicon import LexiconStore
        >>> KeyboardAdjacencyDetector(LexiconStore()).detect("tej")
        'the'
    """

    name = "keyboard_adjacency"

    def __init__(
        self,
        lexicon: LexiconStore,
        adjacency: Mapping[str, Sequence[str]] = KEYBOARD_ADJACENCY,
    ):
        self.lexicon = lexicon
        self.adjacency = adjacency

    def detect(self, token: str) -> str | None:
        for i, char in enumerate(token):
            for neighbour in self.adjacency.get(char.lower(), ()):
                candidate = token[:i] + neighbour + token[i + 1 :]
                correction = self.lexicon.lookup(candidate)
                if correction is not None:
                    logger.debug(
                        "Adjacent-key slip '%s' -> '%s' (via '%s')", token, correction, candidate
                    )
                    return correction
        return None


def default_detectors(lexicon: LexiconStore) -> list[Detector]:
    """Built-in detectors in their fixed registration order."""
    return [RepeatedLetterDetector(), KeyboardAdjacencyDetector(lexicon)]
