"""
Pytest configuration and fixtures for autotypo tests.
"""

import pytest


@pytest.fixture
def engine():
    """Return a CorrectionEngine with default options."""
    from autotypo import CorrectionEngine

    return CorrectionEngine()


@pytest.fixture
def applying_engine():
    """Return a CorrectionEngine that rewrites the text it checks."""
    from autotypo import CorrectionEngine

    return CorrectionEngine(auto_apply_corrections=True)


@pytest.fixture
def lexicon():
    """Return an empty LexiconStore over the built-in tables."""
    from autotypo.lexicon import LexiconStore

    return LexiconStore()
