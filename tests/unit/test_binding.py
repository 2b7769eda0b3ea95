"""
Tests for the headless input binding.

Uses in-memory fakes for the editable surface and suggestion view.
"""

import logging

import pytest

from autotypo import CorrectionEngine
from autotypo.binding import InputBinding, WordSpan, bind_all, word_at
from autotypo.exceptions import BindingError, ConfigurationError


class FakeSurface:
    """Minimal EditableSurface backed by a string."""

    def __init__(self, text="", cursor=None):
        self.text = text
        self.cursor = len(text) if cursor is None else cursor

    def get_text(self):
        return self.text

    def set_text(self, text):
        self.text = text

    def get_cursor(self):
        return self.cursor

    def set_cursor(self, position):
        self.cursor = position


class FakeView:
    """SuggestionView that records calls."""

    def __init__(self):
        self.shown = []
        self.hidden = 0

    def show(self, suggestions, active_index, span):
        self.shown.append((suggestions, active_index, span))

    def hide(self):
        self.hidden += 1


# Two fuzzy suggestions for "qwertz", neither reachable by one slipped key
FUZZY_DICTIONARY = {"qwertzab": "alpha", "qwrtz": "beta"}


@pytest.fixture
def surface():
    return FakeSurface("I like teh")


@pytest.fixture
def view():
    return FakeView()


class TestWordAt:
    """Tests for finding the word under the cursor."""

    def test_cursor_after_word(self):
        assert word_at("hello wrold", 11) == WordSpan("wrold", 6, 11)

    def test_cursor_at_start(self):
        assert word_at("hello wrold", 0) == WordSpan("hello", 0, 5)

    def test_cursor_inside_word(self):
        assert word_at("hello wrold", 8) == WordSpan("wrold", 6, 11)

    def test_cursor_in_whitespace(self):
        assert word_at("hello  world", 6) is None

    def test_contraction_is_one_word(self):
        assert word_at("I dont't", 4).word == "dont't"

    def test_out_of_range(self):
        assert word_at("hello", 9) is None
        assert word_at("", 0) is None


class TestConstruction:
    """Tests for surface validation and option routing."""

    def test_rejects_non_surface(self):
        with pytest.raises(BindingError):
            InputBinding(object())

    def test_rejects_bad_view(self, surface):
        with pytest.raises(BindingError):
            InputBinding(surface, view=object())

    def test_unknown_option(self, surface):
        with pytest.raises(ConfigurationError):
            InputBinding(surface, colour="red")

    def test_options_routed(self, surface):
        binding = InputBinding(surface, suggestion_delay=0.1, max_suggestions=2)
        assert binding.binding_config.suggestion_delay == 0.1
        assert binding.engine.config.max_suggestions == 2

    def test_shared_engine(self, surface):
        engine = CorrectionEngine()
        binding = InputBinding(surface, engine=engine, min_word_length=4)
        assert binding.engine is engine
        assert engine.config.min_word_length == 4


class TestChecking:
    """Tests for checking the word under the cursor."""

    def test_shows_suggestions(self, surface, view):
        binding = InputBinding(surface, view=view)
        binding.check_now()
        assert binding.suggestions == ["the"]
        assert view.shown == [(["the"], -1, WordSpan("teh", 7, 10))]
        assert surface.text == "I like teh"

    def test_correct_word_hides(self, view):
        binding = InputBinding(FakeSurface("I like the"), view=view)
        binding.check_now()
        assert not binding.suggestions_visible
        assert view.shown == []

    def test_short_word_ignored(self, view):
        binding = InputBinding(FakeSurface("I id"), view=view)
        binding.check_now()
        assert binding.suggestions == []

    def test_show_suggestions_disabled(self, surface, view):
        binding = InputBinding(surface, view=view, show_suggestions=False)
        binding.check_now()
        assert view.shown == []

    def test_auto_apply_high_confidence(self, surface):
        binding = InputBinding(surface, auto_apply_corrections=True)
        binding.check_now()
        assert surface.text == "I like the"
        assert surface.cursor == 10
        assert binding.engine.export_learning_dictionary() == {"teh": "the"}

    def test_auto_apply_skips_fuzzy(self):
        surface = FakeSurface("qwertz")
        binding = InputBinding(
            surface,
            auto_apply_corrections=True,
            custom_dictionary=FUZZY_DICTIONARY,
            skip_known_words=False,
        )
        binding.check_now()
        assert surface.text == "qwertz"
        assert binding.suggestions == ["alpha", "beta"]

    def test_hooks_called_once(self, surface):
        calls = []
        binding = InputBinding(
            surface,
            on_correction=lambda original, corrected: calls.append(("correction", original)),
            on_suggestion=lambda word, options: calls.append(("suggestion", word)),
        )
        binding.check_now()
        assert calls == [("suggestion", "teh"), ("correction", "teh")]

    def test_disabled_does_nothing(self, surface, view):
        binding = InputBinding(surface, view=view)
        binding.disable()
        binding.check_now()
        assert view.shown == []
        binding.enable()
        binding.check_now()
        assert binding.suggestions == ["the"]

    def test_check_current_text(self):
        binding = InputBinding(FakeSurface("teh adn"))
        report = binding.check_current_text()
        assert report.change_count == 2


class TestDebounce:
    """Tests for the delayed check."""

    def test_on_input_runs_check(self, surface):
        binding = InputBinding(surface, suggestion_delay=0.01)
        binding.on_input()
        binding._timer.join(timeout=2)
        assert binding.suggestions == ["the"]

    def test_on_input_restarts_timer(self, surface):
        binding = InputBinding(surface, suggestion_delay=5)
        binding.on_input()
        first = binding._timer
        binding.on_input()
        assert binding._timer is not first
        assert first.finished.is_set()
        binding.close()

    def test_close_cancels(self, surface):
        binding = InputBinding(surface, suggestion_delay=5)
        binding.on_input()
        timer = binding._timer
        binding.close()
        assert timer.finished.is_set()
        binding.on_input()
        assert binding._timer is None


class TestKeyboard:
    """Tests for keyboard navigation and acceptance."""

    @pytest.fixture
    def binding(self, view):
        surface = FakeSurface("say qwertz")
        binding = InputBinding(
            surface, view=view, custom_dictionary=FUZZY_DICTIONARY, skip_known_words=False
        )
        binding.check_now()
        return binding

    def test_keys_ignored_when_hidden(self, surface):
        binding = InputBinding(surface)
        assert binding.handle_key("ArrowDown") is False

    def test_navigation_wraps(self, binding):
        assert binding.suggestions == ["alpha", "beta"]
        binding.handle_key("ArrowDown")
        assert binding.active_index == 0
        binding.handle_key("ArrowDown")
        assert binding.active_index == 1
        binding.handle_key("ArrowDown")
        assert binding.active_index == 0
        binding.handle_key("ArrowUp")
        assert binding.active_index == 1

    def test_navigation_updates_view(self, binding, view):
        binding.handle_key("ArrowDown")
        assert view.shown[-1][1] == 0

    def test_enter_applies_active(self, binding):
        binding.handle_key("ArrowUp")
        assert binding.handle_key("Enter") is True
        surface = binding.surface
        assert surface.text == "say beta"
        assert surface.cursor == 8
        assert not binding.suggestions_visible
        assert binding.engine.export_learning_dictionary() == {"qwertz": "beta"}

    def test_enter_without_highlight(self, binding):
        assert binding.handle_key("Enter") is False
        assert binding.surface.text == "say qwertz"

    def test_escape_hides(self, binding, view):
        assert binding.handle_key("Escape") is True
        assert not binding.suggestions_visible
        assert view.hidden == 1

    def test_other_keys_not_consumed(self, binding):
        assert binding.handle_key("Tab") is False


class TestShortcuts:
    """Tests for dictionary shortcuts on the binding."""

    def test_apply_suggestion(self, surface):
        binding = InputBinding(surface)
        binding.apply_suggestion("tea")
        assert surface.text == "I like tea"
        assert binding.engine.export_learning_dictionary() == {"teh": "tea"}

    def test_apply_suggestion_without_learning(self, surface):
        binding = InputBinding(surface, learn_from_corrections=False)
        binding.apply_suggestion("tea")
        assert surface.text == "I like tea"
        assert binding.engine.export_learning_dictionary() == {}

    def test_ignore_current_word(self, surface):
        binding = InputBinding(surface)
        binding.ignore_current_word()
        binding.check_now()
        assert binding.suggestions == []

    def test_add_to_dictionary(self):
        binding = InputBinding(FakeSurface("pyhton"))
        binding.add_to_dictionary("pyhton", "python")
        binding.check_now()
        assert binding.suggestions == ["python"]

    def test_update_options(self, surface):
        binding = InputBinding(surface)
        binding.update_options(suggestion_placement="above", max_suggestions=1)
        assert binding.binding_config.suggestion_placement == "above"
        assert binding.engine.config.max_suggestions == 1

    def test_context_manager_closes(self, surface):
        with InputBinding(surface, suggestion_delay=5) as binding:
            binding.on_input()
        assert binding._timer is None


class TestBindAll:
    """Tests for binding many surfaces at once."""

    def test_skips_invalid(self, caplog):
        with caplog.at_level(logging.WARNING, logger="autotypo.binding"):
            bindings = bind_all([FakeSurface("a"), object(), FakeSurface("b")])
        assert len(bindings) == 2
        assert "Skipping surface" in caplog.text

    def test_options_applied(self):
        bindings = bind_all([FakeSurface(), FakeSurface()], max_suggestions=1)
        assert all(b.engine.config.max_suggestions == 1 for b in bindings)
        assert bindings[0].engine is not bindings[1].engine
