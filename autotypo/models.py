"""
Data models for autotypo.

These models represent the input tokens and the output of a
correction run. Records are immutable once returned.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class TokenKind(Enum):
    """Classification of a token produced by the tokenizer."""

    WORD = "word"
    SEPARATOR = "separator"  # whitespace or punctuation, passed through verbatim


class Strategy(Enum):
    """Pipeline stage that produced a correction."""

    DICTIONARY = "dictionary"
    LEARNED = "learned"
    PATTERN = "pattern"
    CONTEXT = "context"
    EDIT_DISTANCE = "edit_distance"


# Fixed per-stage confidence scores
CONFIDENCE = {
    Strategy.DICTIONARY: 0.95,
    Strategy.LEARNED: 0.90,
    Strategy.PATTERN: 0.85,
    Strategy.CONTEXT: 0.70,
    Strategy.EDIT_DISTANCE: 0.70,
}
NO_CORRECTION_CONFIDENCE = 1.0


@dataclass(frozen=True)
class Token:
    """A maximal run of characters classified as word or separator."""

    text: str
    kind: TokenKind
    start: int  # Character offset in the source text

    @property
    def end(self) -> int:
        return self.start + len(self.text)

    @property
    def is_word(self) -> bool:
        return self.kind is TokenKind.WORD


@dataclass(frozen=True)
class CorrectionRecord:
    """
    A single flagged token and its correction.

    Attributes:
        original: The token as it appeared in the text.
        corrected: Replacement, with the original's letter case restored.
        start: Offset of the token in the source text.
        end: Offset just past the token.
        confidence: Fixed score of the stage that produced the correction.
        suggestions: Candidate corrections, best first.
        strategy: Pipeline stage that produced the correction.
    """

    original: str
    corrected: str
    start: int
    end: int
    confidence: float
    suggestions: tuple[str, ...] = ()
    strategy: Strategy = Strategy.DICTIONARY

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "original": self.original,
            "corrected": self.corrected,
            "position": {"start": self.start, "end": self.end},
            "confidence": self.confidence,
            "suggestions": list(self.suggestions),
            "strategy": self.strategy.value,
        }


@dataclass
class CorrectionReport:
    """Result of ``CorrectionEngine.correct_text``."""

    original_text: str
    corrected: str
    corrections: list[CorrectionRecord] = field(default_factory=list)

    @property
    def change_count(self) -> int:
        """Number of corrections found."""
        return len(self.corrections)

    @property
    def was_modified(self) -> bool:
        """Whether the returned text differs from the input."""
        return self.original_text != self.corrected

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "corrected": self.corrected,
            "corrections": [record.to_dict() for record in self.corrections],
        }
