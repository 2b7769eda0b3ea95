"""
Exception classes for autotypo.

All autotypo exceptions inherit from AutoTypoError,
making it easy to catch all library errors.

Text that cannot be corrected is never an error: the engine reports
it as "no correction" instead. Exceptions are reserved for caller
mistakes in configuration and wiring.

Example:
    >>> try:
    ...     engine.update_options(max_sugestions=3)
    ... except autotypo.ConfigurationError as e:
    ...     print(f"Bad option: {e}")
"""


class AutoTypoError(Exception):
    """
    Base exception for all autotypo errors.

    Catch this to handle any autotypo-specific error.
    """

    pass


class ConfigurationError(AutoTypoError):
    """
    Raised for invalid configuration.

    Example:
        >>> EngineConfig().merged(max_sugestions=3)
        ConfigurationError: Unknown option 'max_sugestions'
    """

    pass


class BindingError(AutoTypoError):
    """
    Raised when an input binding cannot be attached to a surface.

    Example:
        >>> InputBinding(object())
        BindingError: object does not implement get_text/set_text/get_cursor/set_cursor
    """

    pass
