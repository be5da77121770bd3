"""
Core building blocks: the random-source contract, primitive draws,
sequencer combinators and the State sequencer.
"""

from .exceptions import (
    EmptyChoiceError,
    EmptyFrequencyError,
    InvalidRangeError,
    MissingSizeError,
    PropGenError,
    UnsupportedTypeError,
)
from .random_source import StdRng, XorShiftRng
from .state import State
from .types import PrimitiveKind, RandomSource

__all__ = [
    "EmptyChoiceError",
    "EmptyFrequencyError",
    "InvalidRangeError",
    "MissingSizeError",
    "PrimitiveKind",
    "PropGenError",
    "RandomSource",
    "State",
    "StdRng",
    "UnsupportedTypeError",
    "XorShiftRng",
]
