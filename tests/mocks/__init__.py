"""
Mock random sources for deterministic tests.
"""

from .rng_mocks import FixedRng, ScriptedRng

__all__ = ["FixedRng", "ScriptedRng"]
