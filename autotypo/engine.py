"""
Correction engine: the orchestrator of the typo pipeline.

Per word, strategies are tried in a fixed priority order and the
first hit wins:

1. Static dictionary (built-in + custom)  confidence 0.95
2. Learned dictionary                     confidence 0.90
3. Typo-pattern detectors                 confidence 0.85
4. Context rules, else edit distance      confidence 0.70
5. Nothing found: the word is correct     confidence 1.0, no record

The engine is a pure synchronous computation over in-memory data.
An internal re-entrant lock serializes correction runs and mutations,
so one engine can be shared between threads.

Example:
    >>> from autotypo import CorrectionEngine
    >>> engine = CorrectionEngine(auto_apply_corrections=True)
    >>> report = engine.correct_text("I beleive teh cat is sleeping.")
    >>> report.corrected
    'I believe the cat is sleeping.'
    >>> [(c.original, c.corrected) for c in report.corrections]
    [('beleive', 'believe'), ('teh', 'the')]
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from autotypo.config import EngineConfig
from autotypo.exceptions import ConfigurationError
from autotypo.lexicon.known_words import is_known_word
from autotypo.lexicon.store import LexiconStore
from autotypo.matching.context import ContextHeuristics
from autotypo.matching.detectors import Detector, default_detectors
from autotypo.matching.distance import EditDistanceMatcher
from autotypo.models import (
    CONFIDENCE,
    CorrectionRecord,
    CorrectionReport,
    Strategy,
    Token,
)
from autotypo.tokenizer import context_window, tokenize

logger = logging.getLogger(__name__)


# =============================================================================
# HELPERS
# =============================================================================


def restore_case(original: str, correction: str) -> str:
    """
    Carry the letter case of the original token over to a correction.

    - ALL CAPS original -> ALL CAPS correction
    - Leading capital (length > 1) -> first letter of correction capitalized
    - Anything else -> correction unchanged

    Example:
        >>> restore_case("TEH", "the")
        'THE'
        >>> restore_case("Teh", "the")
        'The'
    """
    if not correction:
        return correction
    if original.isupper():
        return correction.upper()
    if len(original) > 1 and original[0].isupper():
        return correction[0].upper() + correction[1:]
    return correction


@dataclass
class _Resolution:
    """Outcome of the lookup chain for one word."""

    corrected: str
    strategy: Strategy
    suggestions: list[str] = field(default_factory=list)

    @property
    def confidence(self) -> float:
        return CONFIDENCE[self.strategy]


# =============================================================================
# CORRECTION ENGINE
# =============================================================================


class CorrectionEngine:
    """
    Tokenizes text, flags likely typos and optionally rewrites them.

    Attributes:
        config: Current EngineConfig snapshot (replaced, never mutated).
        lexicon: LexiconStore with this engine's custom and learned entries.
        matcher: EditDistanceMatcher for the fuzzy fallback.
        context: ContextHeuristics for bigram idiom rules.

    Example:
        >>> engine = CorrectionEngine(custom_dictionary={"pyhton": "python"})
        >>> report = engine.correct_text("I like Pyhton")
        >>> report.corrections[0].corrected
        'Python'
        >>> report.corrected  # auto-apply is off by default
        'I like Pyhton'
    """

    def __init__(self, config: EngineConfig | None = None, **options: Any):
        """
        Initialize the engine.

        Args:
            config: Base configuration (defaults to EngineConfig()).
            **options: Overrides applied on top of the base configuration.

        Raises:
            ConfigurationError: If an option name is unknown.
        """
        self._lock = threading.RLock()
        self.config = (config or EngineConfig()).merged(**options)

        self.lexicon = LexiconStore(
            custom=self.config.custom_dictionary,
            case_sensitive=self.config.case_sensitive,
        )
        self._ignored: set[str] = set()
        for word in self.config.ignored_words:
            self._add_ignored(word)

        self.matcher = EditDistanceMatcher(self.config.max_suggestions)
        self.context = ContextHeuristics(self.matcher)
        self._detectors: list[Detector] = default_detectors(self.lexicon)

        logger.debug(
            "CorrectionEngine ready: %d lexicon entries, %d ignored words",
            len(self.lexicon),
            len(self._ignored),
        )

    # -------------------------------------------------------------------------
    # Correction
    # -------------------------------------------------------------------------

    def correct_text(self, text: str | None) -> CorrectionReport:
        """
        Check text and report corrections.

        The returned text differs from the input only when
        ``auto_apply_corrections`` is enabled.

        Args:
            text: Text to check. None is treated as empty text.

        Returns:
            CorrectionReport with the (possibly rewritten) text and one
            record per corrected word, in text order.
        """
        text = text or ""
        with self._lock:
            config = self.config
            if not config.enabled or not text:
                return CorrectionReport(original_text=text, corrected=text)

            tokens = tokenize(text)
            fuzzy_cache: dict[str, list[str]] = {}
            corrections: list[CorrectionRecord] = []
            pieces: list[str] = []

            for index, token in enumerate(tokens):
                record = None
                if token.is_word and not self._should_skip(token.text, config):
                    record = self._correct_token(tokens, index, config, fuzzy_cache)

                if record is None:
                    pieces.append(token.text)
                    continue

                corrections.append(record)
                pieces.append(record.corrected)
                self._notify(record, config)

            # Splicing per token is equivalent to applying the records
            # right to left, so no offset ever shifts.
            corrected = "".join(pieces) if config.auto_apply_corrections else text

        if corrections:
            logger.debug("Found %d corrections in %d tokens", len(corrections), len(tokens))
        return CorrectionReport(original_text=text, corrected=corrected, corrections=corrections)

    def _should_skip(self, word: str, config: EngineConfig) -> bool:
        """Per-word filter applied before any lookup."""
        if len(word) < config.min_word_length and not self.lexicon.contains(word):
            return True
        return self.lexicon.normalize(word) in self._ignored

    def _correct_token(
        self,
        tokens: list[Token],
        index: int,
        config: EngineConfig,
        fuzzy_cache: dict[str, list[str]],
    ) -> CorrectionRecord | None:
        token = tokens[index]
        word = token.text
        key = self.lexicon.normalize(word)

        resolution = self._resolve(key, tokens, index, config, fuzzy_cache)
        # A correction equal to the lookup key means "already correct"
        if resolution is None or resolution.corrected == key:
            return None

        corrected = resolution.corrected
        suggestions = resolution.suggestions[: config.max_suggestions]
        if not config.case_sensitive:
            corrected = restore_case(word, corrected)
            suggestions = [restore_case(word, s) for s in suggestions]

        if corrected == word:
            return None

        logger.debug(
            "Corrected '%s' -> '%s' (%s, %.2f)",
            word,
            corrected,
            resolution.strategy.value,
            resolution.confidence,
        )
        return CorrectionRecord(
            original=word,
            corrected=corrected,
            start=token.start,
            end=token.end,
            confidence=resolution.confidence,
            suggestions=tuple(suggestions),
            strategy=resolution.strategy,
        )

    def _resolve(
        self,
        key: str,
        tokens: list[Token],
        index: int,
        config: EngineConfig,
        fuzzy_cache: dict[str, list[str]],
    ) -> _Resolution | None:
        """Run the lookup chain for one normalized word."""
        static = self.lexicon.lookup_static(key)
        if static is not None:
            return _Resolution(static, Strategy.DICTIONARY, [static])

        learned = self.lexicon.lookup_learned(key)
        if learned is not None:
            return _Resolution(learned, Strategy.LEARNED, [learned])

        if self.lexicon.is_correction_value(key):
            return None

        # Real words skip the detectors and the fuzzy fallback, but a
        # context rule can still replace them ("should of")
        known = config.skip_known_words and is_known_word(key)

        if not known:
            for detector in self._detectors:
                pattern = detector.detect(key)
                if pattern is not None:
                    return _Resolution(pattern, Strategy.PATTERN, [pattern])

        if config.context_aware:
            preceding, following = context_window(tokens, index, config.context_window_size)
            suggestions = self.context.bigram_suggestions(
                key,
                preceding[-1] if preceding else None,
                following[0] if following else None,
            )
            if suggestions:
                return _Resolution(suggestions[0], Strategy.CONTEXT, suggestions)

        if known:
            return None

        if key not in fuzzy_cache:
            fuzzy_cache[key] = self.matcher.suggest(
                key, self.lexicon.iter_entries(), config.max_suggestions
            )
        suggestions = fuzzy_cache[key]
        if suggestions:
            return _Resolution(suggestions[0], Strategy.EDIT_DISTANCE, list(suggestions))

        return None

    def _notify(self, record: CorrectionRecord, config: EngineConfig) -> None:
        """Invoke the caller's hooks; they must not touch engine state."""
        if config.on_suggestion and record.suggestions:
            config.on_suggestion(record.original, list(record.suggestions))
        if config.on_correction:
            config.on_correction(record.original, record.corrected)

    # -------------------------------------------------------------------------
    # Dictionary management
    # -------------------------------------------------------------------------

    def add_word_to_dictionary(self, misspelling: str, correction: str) -> None:
        """Add a misspelling -> correction entry to the custom dictionary."""
        with self._lock:
            self.lexicon.add_entry(misspelling, correction)

    def learn_word_correction(self, misspelling: str, correction: str) -> None:
        """
        Record a correction the user accepted.

        Does nothing when ``learn_from_corrections`` is disabled.
        """
        with self._lock:
            if not self.config.learn_from_corrections:
                logger.debug("Learning disabled; ignoring '%s' -> '%s'", misspelling, correction)
                return
            self.lexicon.add_learned(misspelling, correction)

    def import_dictionary(self, dictionary: Mapping[str, str]) -> None:
        """Merge entries into the custom dictionary."""
        with self._lock:
            self.lexicon.import_bulk(dictionary)

    def export_dictionary(self) -> dict[str, str]:
        """Return a copy of the static dictionary (built-in + custom)."""
        with self._lock:
            return self.lexicon.export_all()

    def export_learning_dictionary(self) -> dict[str, str]:
        """Return a copy of the learned dictionary."""
        with self._lock:
            return self.lexicon.export_learned()

    def clear_learning_dictionary(self) -> None:
        """Forget all learned corrections."""
        with self._lock:
            self.lexicon.clear_learned()

    def reset_to_default_dictionary(self) -> None:
        """Drop custom and learned entries."""
        with self._lock:
            self.lexicon.reset_to_defaults()

    # -------------------------------------------------------------------------
    # Ignore list
    # -------------------------------------------------------------------------

    @property
    def ignored_words(self) -> frozenset[str]:
        """Normalized words that are never corrected."""
        with self._lock:
            return frozenset(self._ignored)

    def _add_ignored(self, word: str) -> None:
        if word:
            self._ignored.add(self.lexicon.normalize(word))

    def add_to_ignored_words(self, word: str) -> None:
        """Never correct this word."""
        with self._lock:
            self._add_ignored(word)

    def remove_from_ignored_words(self, word: str) -> None:
        """Allow this word to be corrected again."""
        with self._lock:
            if word:
                self._ignored.discard(self.lexicon.normalize(word))

    # -------------------------------------------------------------------------
    # Options and extension
    # -------------------------------------------------------------------------

    def update_options(self, **options: Any) -> None:
        """
        Merge option overrides into the current configuration.

        ``custom_dictionary`` entries are imported and ``ignored_words``
        are added to the ignore list; other options take effect on the
        next ``correct_text`` call.

        Raises:
            ConfigurationError: If an option name is unknown.
        """
        with self._lock:
            self.config = self.config.merged(**options)
            self.lexicon.case_sensitive = self.config.case_sensitive
            self.matcher.max_suggestions = self.config.max_suggestions
            if "custom_dictionary" in options:
                self.lexicon.import_bulk(self.config.custom_dictionary)
            if "ignored_words" in options:
                for word in self.config.ignored_words:
                    self._add_ignored(word)
            logger.debug("Updated options: %s", sorted(options))

    @property
    def detectors(self) -> tuple[Detector, ...]:
        """Registered detectors in evaluation order."""
        with self._lock:
            return tuple(self._detectors)

    def register_detector(self, detector: Detector) -> None:
        """
        Append a detector after the built-in ones.

        Raises:
            ConfigurationError: If the object has no ``name``/``detect``.
        """
        if not isinstance(detector, Detector):
            raise ConfigurationError(
                f"Detector must have a 'name' and a 'detect(token)' method, got {detector!r}"
            )
        with self._lock:
            self._detectors.append(detector)
        logger.debug("Registered detector '%s'", detector.name)


def create_engine(**options: Any) -> CorrectionEngine:
    """
    Create a standalone engine for text processing.

    Example:
        >>> engine = create_engine(auto_apply_corrections=True)
        >>> engine.correct_text("teh end").corrected
        'the end'
    """
    return CorrectionEngine(**options)
