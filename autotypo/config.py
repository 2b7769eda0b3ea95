"""
Configuration for autotypo correction engines and input bindings.

Options are plain dataclasses. A config object is a snapshot: the engine
never mutates it in place, it swaps in a new one built by ``merged()``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import asdict, dataclass, field, fields, replace
from typing import Any, Literal

from autotypo.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Numeric options that are clamped to >= 0 instead of rejected
_NON_NEGATIVE_OPTIONS = ("max_suggestions", "min_word_length", "context_window_size")

VALID_PLACEMENTS = ("below", "above", "inline")


def _check_known(cls: type, overrides: Mapping[str, Any]) -> None:
    known = {f.name for f in fields(cls)}
    unknown = sorted(set(overrides) - known)
    if unknown:
        raise ConfigurationError(
            f"Unknown option {unknown[0]!r} for {cls.__name__}; valid options: {sorted(known)}"
        )


@dataclass
class EngineConfig:
    """
    Configuration for a CorrectionEngine.

    All options have sensible defaults. Create a config only
    if you need to customize behavior.

    Example:
        >>> config = EngineConfig(
        ...     auto_apply_corrections=True,
        ...     custom_dictionary={"pyhton": "python"},
        ... )
        >>> engine = CorrectionEngine(config)
    """

    # Master switch
    enabled: bool = True
    language: str = "en-US"  # Informational only

    # Dictionaries
    custom_dictionary: dict[str, str] = field(default_factory=dict)
    ignored_words: list[str] = field(default_factory=list)

    # Detection
    max_suggestions: int = 5
    min_word_length: int = 3
    case_sensitive: bool = False
    context_aware: bool = True
    context_window_size: int = 3
    skip_known_words: bool = True  # Real English words skip the fuzzy stages

    # Behavior
    learn_from_corrections: bool = True
    auto_apply_corrections: bool = False

    # Hooks, called synchronously after a correction is produced
    on_correction: Callable[[str, str], None] | None = None
    on_suggestion: Callable[[str, list[str]], None] | None = None

    def __post_init__(self):
        """Clamp numeric options to sane minimums."""
        for name in _NON_NEGATIVE_OPTIONS:
            value = getattr(self, name)
            if value < 0:
                logger.warning("%s must be >= 0, got %d; clamping to 0", name, value)
                setattr(self, name, 0)
        self.custom_dictionary = dict(self.custom_dictionary or {})
        self.ignored_words = list(self.ignored_words or [])

    @classmethod
    def option_names(cls) -> frozenset[str]:
        """Names accepted by ``merged()`` and ``update_options()``."""
        return frozenset(f.name for f in fields(cls))

    @classmethod
    def conservative(cls, **overrides: Any) -> EngineConfig:
        """Very cautious - only dictionary hits and short suggestion lists."""
        base = cls(
            max_suggestions=3,
            min_word_length=4,
            context_aware=False,
            skip_known_words=True,
        )
        return base.merged(**overrides)

    @classmethod
    def balanced(cls, **overrides: Any) -> EngineConfig:
        """Default balanced settings."""
        return cls().merged(**overrides)

    @classmethod
    def aggressive(cls, **overrides: Any) -> EngineConfig:
        """Correct everything the pipeline can reach - use with caution."""
        base = cls(
            min_word_length=2,
            skip_known_words=False,
            auto_apply_corrections=True,
        )
        return base.merged(**overrides)

    def merged(self, **overrides: Any) -> EngineConfig:
        """
        Return a new config with overrides applied.

        Raises:
            ConfigurationError: If an override names an unknown option.
        """
        _check_known(type(self), overrides)
        return replace(self, **overrides)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dict, leaving out the callback hooks."""
        data = asdict(self)
        data.pop("on_correction", None)
        data.pop("on_suggestion", None)
        return data


@dataclass
class BindingConfig:
    """
    Presentation options for an InputBinding.

    Example:
        >>> BindingConfig(suggestion_delay=0.2, suggestion_placement="above")
    """

    show_suggestions: bool = True
    suggestion_delay: float = 0.5  # Seconds of input quiet before checking
    suggestion_placement: Literal["below", "above", "inline"] = "below"

    def __post_init__(self):
        """Validate configuration."""
        if self.suggestion_placement not in VALID_PLACEMENTS:
            raise ConfigurationError(
                f"suggestion_placement must be one of {VALID_PLACEMENTS}, "
                f"got {self.suggestion_placement!r}"
            )
        if self.suggestion_delay < 0:
            logger.warning(
                "suggestion_delay must be >= 0, got %s; clamping to 0", self.suggestion_delay
            )
            self.suggestion_delay = 0.0

    @classmethod
    def option_names(cls) -> frozenset[str]:
        return frozenset(f.name for f in fields(cls))

    def merged(self, **overrides: Any) -> BindingConfig:
        _check_known(type(self), overrides)
        return replace(self, **overrides)


def split_options(options: Mapping[str, Any]) -> tuple[dict[str, Any], dict[str, Any]]:
    """
    Split a flat option mapping into (engine options, binding options).

    Raises:
        ConfigurationError: If an option belongs to neither config.
    """
    engine_opts: dict[str, Any] = {}
    binding_opts: dict[str, Any] = {}
    for name, value in options.items():
        if name in BindingConfig.option_names():
            binding_opts[name] = value
        elif name in EngineConfig.option_names():
            engine_opts[name] = value
        else:
            raise ConfigurationError(f"Unknown option {name!r}")
    return engine_opts, binding_opts
