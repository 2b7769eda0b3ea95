"""
autotypo: Lightweight automatic typo correction for short text.

Flags and optionally fixes common typing mistakes using a layered
misspelling dictionary, a runtime-learned dictionary, typo-pattern
detectors, context rules and edit-distance fallback.

Example:
    >>> import autotypo
    >>> engine = autotypo.create_engine(auto_apply_corrections=True)
    >>> report = engine.correct_text("I beleive teh cat is sleeping.")
    >>> print(report.corrected)
    I believe the cat is sleeping.

    >>> # Inspect what changed
    >>> for record in report.corrections:
    ...     print(record.original, "->", record.corrected, record.confidence)
"""

from autotypo.binding import (
    EditableSurface,
    InputBinding,
    SuggestionView,
    WordSpan,
    bind_all,
    word_at,
)
from autotypo.config import BindingConfig, EngineConfig
from autotypo.engine import CorrectionEngine, create_engine, restore_case
from autotypo.exceptions import (
    AutoTypoError,
    BindingError,
    ConfigurationError,
)
from autotypo.lexicon import LexiconStore
from autotypo.matching import (
    ContextHeuristics,
    Detector,
    EditDistanceMatcher,
    KeyboardAdjacencyDetector,
    RepeatedLetterDetector,
)
from autotypo.models import (
    CorrectionRecord,
    CorrectionReport,
    Strategy,
    Token,
    TokenKind,
)
from autotypo.tokenizer import tokenize

__version__ = "0.1.0"
__all__ = [
    # Main API
    "CorrectionEngine",
    "create_engine",
    "restore_case",
    "tokenize",
    # Configuration
    "EngineConfig",
    "BindingConfig",
    # Results
    "CorrectionRecord",
    "CorrectionReport",
    "Strategy",
    "Token",
    "TokenKind",
    # Components
    "LexiconStore",
    "EditDistanceMatcher",
    "ContextHeuristics",
    "Detector",
    "RepeatedLetterDetector",
    "KeyboardAdjacencyDetector",
    # Input binding
    "InputBinding",
    "EditableSurface",
    "SuggestionView",
    "WordSpan",
    "bind_all",
    "word_at",
    # Exceptions
    "AutoTypoError",
    "ConfigurationError",
    "BindingError",
]
