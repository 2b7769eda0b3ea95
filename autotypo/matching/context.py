"""
Shallow context rules for multi-word slips.

Resolves a small table of idiom errors ("should of" -> "should have")
by looking at the nearest word on each side of a token. Anything the
table does not cover falls back to plain edit-distance suggestions.

Known simplification: the fallback suggestions are NOT re-ranked by
context. The wider window is collected but only the adjacent words
take part in matching.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from types import MappingProxyType

from autotypo.matching.distance import EditDistanceMatcher

logger = logging.getLogger(__name__)

# (previous word, current word) -> replacements for the current word
PRECEDING_WORD_RULES: Mapping[tuple[str, str], tuple[str, ...]] = MappingProxyType(
    {
        ("should", "of"): ("have",),
        ("could", "of"): ("have",),
        ("would", "of"): ("have",),
        ("must", "of"): ("have",),
        ("might", "of"): ("have",),
        ("per", "say"): ("se",),
    }
)

# (current word, next word) -> replacements for the current word
FOLLOWING_WORD_RULES: Mapping[tuple[str, str], tuple[str, ...]] = MappingProxyType(
    {
        ("intensive", "purposes"): ("intents and",),
        ("mute", "point"): ("moot",),
    }
)


class ContextHeuristics:
    """
    Bigram idiom rules with an edit-distance fallback.

    Attributes:
        matcher: EditDistanceMatcher used when no rule matches.
        preceding_rules: Rules keyed by (previous word, token).
        following_rules: Rules keyed by (token, next word).

    Example:
        >>> ctx = ContextHeuristics()
        >>> ctx.bigram_suggestions("of", previous_word="should")
        ['have']
    """

    def __init__(
        self,
        matcher: EditDistanceMatcher | None = None,
        preceding_rules: Mapping[tuple[str, str], Sequence[str]] = PRECEDING_WORD_RULES,
        following_rules: Mapping[tuple[str, str], Sequence[str]] = FOLLOWING_WORD_RULES,
    ):
        self.matcher = matcher or EditDistanceMatcher()
        self.preceding_rules = preceding_rules
        self.following_rules = following_rules

    def bigram_suggestions(
        self,
        token: str,
        previous_word: str | None = None,
        next_word: str | None = None,
    ) -> list[str]:
        """Replacements from the rule tables, or an empty list."""
        word = token.lower()
        if previous_word:
            replacements = self.preceding_rules.get((previous_word.lower(), word))
            if replacements:
                return list(replacements)
        if next_word:
            replacements = self.following_rules.get((word, next_word.lower()))
            if replacements:
                return list(replacements)
        return []

    def suggest(
        self,
        token: str,
        preceding_words: Sequence[str],
        following_words: Sequence[str],
        entries: Iterable[tuple[str, str]],
        max_suggestions: int | None = None,
    ) -> list[str]:
        """
        Suggest corrections for a token given its neighbours.

        Args:
            token: Normalized token.
            preceding_words: Words before the token, in text order.
            following_words: Words after the token, in text order.
            entries: Lexicon (misspelling, correction) pairs for the fallback.
            max_suggestions: Cap on returned suggestions.

        Returns:
            Rule replacements if a bigram matches, else edit-distance suggestions.
        """
        previous_word = preceding_words[-1] if preceding_words else None
        next_word = following_words[0] if following_words else None

        suggestions = self.bigram_suggestions(token, previous_word, next_word)
        if suggestions:
            logger.debug(
                "Context rule for '%s' (prev=%r, next=%r): %s",
                token,
                previous_word,
                next_word,
                suggestions,
            )
            if max_suggestions is not None:
                suggestions = suggestions[: max(0, max_suggestions)]
            return suggestions

        return self.matcher.suggest(token, entries, max_suggestions)
