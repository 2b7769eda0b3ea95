"""
Headless input binding.

Connects a CorrectionEngine to an editable text surface: checks the
word under the cursor after a quiet period, offers suggestions, and
handles keyboard navigation and acceptance. Rendering is left to an
optional SuggestionView supplied by the caller.

Example:
    >>> binding = InputBinding(text_box, view=popup, suggestion_delay=0.3)
    >>> binding.on_input()          # call from the surface's change event
    >>> binding.handle_key("ArrowDown")
    >>> binding.handle_key("Enter")  # replaces the word, learns the fix
    >>> binding.close()
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from autotypo.config import BindingConfig, EngineConfig, split_options
from autotypo.engine import CorrectionEngine
from autotypo.exceptions import BindingError
from autotypo.models import CorrectionReport
from autotypo.tokenizer import tokenize

logger = logging.getLogger(__name__)

# Auto-apply from the binding only fires above this confidence
AUTO_APPLY_THRESHOLD = 0.9


# =============================================================================
# SURFACE PROTOCOLS
# =============================================================================


@runtime_checkable
class EditableSurface(Protocol):
    """A text field the binding can read and rewrite."""

    def get_text(self) -> str: ...

    def set_text(self, text: str) -> None: ...

    def get_cursor(self) -> int: ...

    def set_cursor(self, position: int) -> None: ...


@dataclass(frozen=True)
class WordSpan:
    """A word and its character range within a text."""

    word: str
    start: int
    end: int


@runtime_checkable
class SuggestionView(Protocol):
    """Renders a suggestion list next to a word."""

    def show(self, suggestions: list[str], active_index: int, span: WordSpan) -> None: ...

    def hide(self) -> None: ...


def word_at(text: str, position: int) -> WordSpan | None:
    """
    Find the word touching a cursor position.

    A cursor right after the last letter of a word counts as inside it.

    Example:
        >>> word_at("hello wrold", 11)
        WordSpan(word='wrold', start=6, end=11)
    """
    if not text or position < 0 or position > len(text):
        return None
    for token in tokenize(text):
        if token.is_word and token.start <= position <= token.end:
            return WordSpan(token.text, token.start, token.end)
        if token.start > position:
            break
    return None


# =============================================================================
# INPUT BINDING
# =============================================================================


class InputBinding:
    """
    Auto-correct controller for one editable surface.

    Accepts the same flat options as the engine plus the presentation
    options of BindingConfig. Callback hooks are invoked by the
    binding, once per check.

    Attributes:
        surface: The bound EditableSurface.
        view: Optional SuggestionView.
        engine: CorrectionEngine used for checks.
        binding_config: Current BindingConfig.
    """

    def __init__(
        self,
        surface: EditableSurface,
        view: SuggestionView | None = None,
        engine: CorrectionEngine | None = None,
        **options: Any,
    ):
        """
        Bind a surface.

        Args:
            surface: Object implementing EditableSurface.
            view: Optional SuggestionView for rendering suggestions.
            engine: Existing engine to share; a new one is built if None.
            **options: Engine and binding options.

        Raises:
            BindingError: If surface or view do not implement their protocol.
            ConfigurationError: If an option name is unknown.
        """
        if not isinstance(surface, EditableSurface):
            raise BindingError(
                f"{type(surface).__name__} does not implement get_text/set_text/"
                "get_cursor/set_cursor"
            )
        if view is not None and not isinstance(view, SuggestionView):
            raise BindingError(f"{type(view).__name__} does not implement show/hide")

        engine_opts, binding_opts = split_options(options)
        self.surface = surface
        self.view = view
        self.binding_config = BindingConfig().merged(**binding_opts)

        # The binding fires the hooks itself, so the engine gets none
        self._on_correction = engine_opts.pop("on_correction", None)
        self._on_suggestion = engine_opts.pop("on_suggestion", None)
        if engine is None:
            engine = CorrectionEngine(EngineConfig(), **engine_opts)
        elif engine_opts:
            engine.update_options(**engine_opts)
        self.engine = engine

        self._lock = threading.RLock()
        self._timer: threading.Timer | None = None
        self._suggestions: list[str] = []
        self._active_index = -1
        self._span: WordSpan | None = None
        self._closed = False

        logger.debug("Bound %s", type(surface).__name__)

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def suggestions(self) -> list[str]:
        """Suggestions currently offered (empty when hidden)."""
        return list(self._suggestions)

    @property
    def active_index(self) -> int:
        """Index of the highlighted suggestion, -1 if none."""
        return self._active_index

    @property
    def suggestions_visible(self) -> bool:
        return bool(self._suggestions)

    # -------------------------------------------------------------------------
    # Checking
    # -------------------------------------------------------------------------

    def on_input(self) -> None:
        """Schedule a check once input has been quiet for ``suggestion_delay``."""
        with self._lock:
            if self._closed:
                return
            self._cancel_timer()
            self._timer = threading.Timer(self.binding_config.suggestion_delay, self.check_now)
            self._timer.daemon = True
            self._timer.start()

    def check_now(self) -> None:
        """Check the word under the cursor immediately."""
        with self._lock:
            config = self.engine.config
            if self._closed or not config.enabled:
                return

            text = self.surface.get_text()
            span = word_at(text, self.surface.get_cursor()) if text else None
            if span is None or len(span.word) < config.min_word_length:
                self.hide_suggestions()
                return

            report = self.engine.correct_text(span.word)
            if not report.corrections:
                self.hide_suggestions()
                return

            correction = report.corrections[0]
            if self.binding_config.show_suggestions:
                self._show(list(correction.suggestions), span)
                if self._on_suggestion and correction.suggestions:
                    self._on_suggestion(span.word, list(correction.suggestions))

            if config.auto_apply_corrections and correction.confidence > AUTO_APPLY_THRESHOLD:
                self._replace(span, correction.corrected)

            if self._on_correction:
                self._on_correction(span.word, correction.corrected)

    def check_current_text(self) -> CorrectionReport:
        """Run the engine over the whole surface text without changing it."""
        return self.engine.correct_text(self.surface.get_text())

    # -------------------------------------------------------------------------
    # Suggestions
    # -------------------------------------------------------------------------

    def _show(self, suggestions: list[str], span: WordSpan) -> None:
        self._suggestions = suggestions
        self._active_index = -1
        self._span = span
        if self.view is not None and suggestions:
            self.view.show(list(suggestions), self._active_index, span)

    def hide_suggestions(self) -> None:
        """Clear the suggestion list and hide the view."""
        with self._lock:
            was_visible = bool(self._suggestions)
            self._suggestions = []
            self._active_index = -1
            self._span = None
            if self.view is not None and was_visible:
                self.view.hide()

    def navigate(self, direction: int) -> None:
        """Move the highlight by ``direction``, wrapping at both ends."""
        with self._lock:
            if not self._suggestions:
                return
            index = self._active_index + direction
            if index < 0:
                index = len(self._suggestions) - 1
            elif index >= len(self._suggestions):
                index = 0
            self._active_index = index
            if self.view is not None and self._span is not None:
                self.view.show(list(self._suggestions), self._active_index, self._span)

    def handle_key(self, key: str) -> bool:
        """
        Handle a navigation key while suggestions are visible.

        Args:
            key: One of "ArrowDown", "ArrowUp", "Enter", "Escape".

        Returns:
            True if the key was consumed.
        """
        with self._lock:
            if not self._suggestions:
                return False
            if key in ("ArrowDown", "ArrowUp"):
                self.navigate(1 if key == "ArrowDown" else -1)
                return True
            if key == "Enter":
                if self._active_index < 0:
                    return False
                self.apply_suggestion(self._suggestions[self._active_index])
                return True
            if key == "Escape":
                self.hide_suggestions()
                return True
            return False

    def apply_suggestion(self, suggestion: str) -> None:
        """Replace the word under the cursor with a suggestion."""
        with self._lock:
            text = self.surface.get_text()
            span = word_at(text, self.surface.get_cursor())
            if span is None:
                self.hide_suggestions()
                return
            self._replace(span, suggestion)

    def _replace(self, span: WordSpan, replacement: str) -> None:
        text = self.surface.get_text()
        self.surface.set_text(text[: span.start] + replacement + text[span.end :])
        self.surface.set_cursor(span.start + len(replacement))
        self.hide_suggestions()
        # No-op when learning is disabled
        self.engine.learn_word_correction(span.word, replacement)
        logger.debug("Replaced '%s' with '%s'", span.word, replacement)

    # -------------------------------------------------------------------------
    # Dictionary shortcuts
    # -------------------------------------------------------------------------

    def ignore_current_word(self) -> None:
        """Add the word under the cursor to the ignore list."""
        with self._lock:
            span = word_at(self.surface.get_text(), self.surface.get_cursor())
            if span is not None:
                self.engine.add_to_ignored_words(span.word)
            self.hide_suggestions()

    def add_to_dictionary(self, misspelling: str, correction: str) -> None:
        self.engine.add_word_to_dictionary(misspelling, correction)

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def update_options(self, **options: Any) -> None:
        """
        Update engine and presentation options.

        Raises:
            ConfigurationError: If an option name is unknown.
        """
        engine_opts, binding_opts = split_options(options)
        with self._lock:
            if binding_opts:
                self.binding_config = self.binding_config.merged(**binding_opts)
            if "on_correction" in engine_opts:
                self._on_correction = engine_opts.pop("on_correction")
            if "on_suggestion" in engine_opts:
                self._on_suggestion = engine_opts.pop("on_suggestion")
            if engine_opts:
                self.engine.update_options(**engine_opts)

    def enable(self) -> None:
        self.update_options(enabled=True)

    def disable(self) -> None:
        self.update_options(enabled=False)
        self.hide_suggestions()

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def close(self) -> None:
        """Cancel any pending check and hide suggestions."""
        with self._lock:
            self._cancel_timer()
            self.hide_suggestions()
            self._closed = True
        logger.debug("Unbound %s", type(self.surface).__name__)

    def __enter__(self) -> InputBinding:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def bind_all(surfaces: Iterable[EditableSurface], **options: Any) -> list[InputBinding]:
    """
    Bind every surface in a collection with the same options.

    Surfaces that fail validation are logged and skipped.

    Returns:
        Bindings for the surfaces that were accepted.
    """
    bindings = []
    for surface in surfaces:
        try:
            bindings.append(InputBinding(surface, **options))
        except BindingError as e:
            logger.warning("Skipping surface: %s", e)
    logger.info("Bound %d surfaces", len(bindings))
    return bindings
