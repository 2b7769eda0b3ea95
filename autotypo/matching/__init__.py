"""
Matching strategies used by the correction engine.

- EditDistanceMatcher: Levenshtein search over lexicon keys
- Detector, RepeatedLetterDetector, KeyboardAdjacencyDetector: single-token patterns
- ContextHeuristics: bigram idiom rules with edit-distance fallback
"""

from autotypo.matching.context import (
    FOLLOWING_WORD_RULES,
    PRECEDING_WORD_RULES,
    ContextHeuristics,
)
from autotypo.matching.detectors import (
    Detector,
    KeyboardAdjacencyDetector,
    RepeatedLetterDetector,
    default_detectors,
)
from autotypo.matching.distance import (
    EditDistanceMatcher,
    levenshtein_distance,
    threshold_for,
)

__all__ = [
    # Edit distance
    "EditDistanceMatcher",
    "levenshtein_distance",
    "threshold_for",
    # Detectors
    "Detector",
    "RepeatedLetterDetector",
    "KeyboardAdjacencyDetector",
    "default_detectors",
    # Context
    "ContextHeuristics",
    "PRECEDING_WORD_RULES",
    "FOLLOWING_WORD_RULES",
]
