"""
Test package for propgen.

Unit tests live in ``unit``, Hypothesis-driven property tests in
``property`` and deterministic fake random sources in ``mocks``.
"""

__all__ = [
    "conftest",  # Pytest configuration and fixtures
    "mocks",  # Scripted random sources
    "property",  # Property-based test suite
    "unit",  # Unit test suite
]
