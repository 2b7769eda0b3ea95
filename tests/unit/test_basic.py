"""
Basic tests for autotypo package structure.

These tests verify the public API is importable and
basic configuration works correctly.
"""


class TestImports:
    """Test that the public API is importable."""

    def test_import_package(self):
        """Can import the main package."""
        import autotypo

        assert autotypo.__version__ == "0.1.0"

    def test_import_engine(self):
        """Can import the engine and its factory."""
        from autotypo import CorrectionEngine, create_engine

        assert callable(create_engine)
        assert isinstance(create_engine(), CorrectionEngine)

    def test_import_config(self):
        """Can import configuration classes."""
        from autotypo import BindingConfig, EngineConfig

        assert EngineConfig().max_suggestions == 5
        assert BindingConfig().suggestion_placement == "below"

    def test_import_models(self):
        """Can import result types."""
        from autotypo import CorrectionRecord, Strategy

        record = CorrectionRecord("teh", "the", 0, 3, 0.95)
        assert record.strategy is Strategy.DICTIONARY

    def test_import_exceptions(self):
        """Can import exception classes."""
        from autotypo import AutoTypoError, BindingError, ConfigurationError

        assert issubclass(ConfigurationError, AutoTypoError)
        assert issubclass(BindingError, AutoTypoError)

    def test_all_exports_resolve(self):
        """Everything in __all__ is an attribute of the package."""
        import autotypo

        for name in autotypo.__all__:
            assert hasattr(autotypo, name), name
