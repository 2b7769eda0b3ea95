"""
Edit-distance suggestions against the lexicon.

Classic Levenshtein distance (insert, delete, substitute all cost 1).
The allowed distance depends on token length: short words are easy to
turn into other short words, so they get a tighter bound.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

logger = logging.getLogger(__name__)

SHORT_WORD_LENGTH = 4
SHORT_WORD_MAX_DISTANCE = 1
LONG_WORD_MAX_DISTANCE = 2
DEFAULT_MAX_SUGGESTIONS = 5


def levenshtein_distance(s1: str, s2: str) -> int:
    """Calculate Levenshtein edit distance between two strings."""
    if s1 == s2:
        return 0
    if len(s1) < len(s2):
        return levenshtein_distance(s2, s1)

    if len(s2) == 0:
        return len(s1)

    previous_row = list(range(len(s2) + 1))
    for i, c1 in enumerate(s1):
        current_row = [i + 1]
        for j, c2 in enumerate(s2):
            insertions = previous_row[j + 1] + 1
            deletions = current_row[j] + 1
            substitutions = previous_row[j] + (c1 != c2)
            current_row.append(min(insertions, deletions, substitutions))
        previous_row = current_row

    return previous_row[-1]


def threshold_for(token: str) -> int:
    """Maximum edit distance allowed for a token."""
    if len(token) <= SHORT_WORD_LENGTH:
        return SHORT_WORD_MAX_DISTANCE
    return LONG_WORD_MAX_DISTANCE


class EditDistanceMatcher:
    """
    Suggests corrections whose misspelling key is close to a token.

    Candidates are the corrections of every lexicon key within the
    token's distance threshold. They are deduplicated and kept in the
    order the keys were visited; there is no ranking inside the
    threshold band.

    Example:
        >>> matcher = EditDistanceMatcher()
        >>> matcher.suggest("beleive", [("belive", "believe")])
        ['believe']
    """

    def __init__(self, max_suggestions: int = DEFAULT_MAX_SUGGESTIONS):
        self.max_suggestions = max_suggestions

    def suggest(
        self,
        token: str,
        entries: Iterable[tuple[str, str]],
        max_suggestions: int | None = None,
    ) -> list[str]:
        """
        Return corrections reachable from the token.

        Args:
            token: Normalized token to match.
            entries: (misspelling, correction) pairs to search.
            max_suggestions: Cap on returned suggestions (default: instance cap).

        Returns:
            Ordered list of distinct corrections, at most max_suggestions long.
        """
        limit = self.max_suggestions if max_suggestions is None else max_suggestions
        limit = max(0, limit)
        if limit == 0 or not token:
            return []

        max_distance = threshold_for(token)
        candidates: dict[str, None] = {}

        for key, correction in entries:
            # Cheap length pre-filter before running the DP
            if abs(len(key) - len(token)) > max_distance:
                continue
            if correction in candidates:
                continue
            if levenshtein_distance(token, key) <= max_distance:
                candidates[correction] = None
                if len(candidates) >= limit:
                    break

        suggestions = list(candidates)
        if suggestions:
            logger.debug("Edit-distance suggestions for '%s': %s", token, suggestions)
        return suggestions
