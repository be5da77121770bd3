"""
propgen - composable, seed-reproducible value generators for property-based testing.

This package provides:
- Gen, a composable generator with map, flat_map and and_then
- Gens, constructors for constants, weighted and uniform choice, ranges,
  repetition and optional/either wrapping
- SGen, generators parameterized by an external size
- choose(), range dispatch over ints, floats and characters
- StdRng and XorShiftRng random sources

Every generator is a pure value: running it from equal random states gives
equal results, so any run can be replayed from its seed.
"""

import logging

__version__ = "1.0.0"
__description__ = "Composable generator engine for property-based testing"

from .config import GenerationConfig, get_config, set_config
from .core import (
    EmptyChoiceError,
    EmptyFrequencyError,
    InvalidRangeError,
    MissingSizeError,
    PrimitiveKind,
    PropGenError,
    RandomSource,
    State,
    StdRng,
    UnsupportedTypeError,
    XorShiftRng,
)
from .generators import (
    Either,
    Gen,
    Gens,
    Left,
    Right,
    SGen,
    Some,
    choose,
    register_choosable,
)
from .utilities.sampling import sample, sample_sized

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Either",
    "EmptyChoiceError",
    "EmptyFrequencyError",
    "Gen",
    "GenerationConfig",
    "Gens",
    "InvalidRangeError",
    "Left",
    "MissingSizeError",
    "PrimitiveKind",
    "PropGenError",
    "RandomSource",
    "Right",
    "SGen",
    "Some",
    "State",
    "StdRng",
    "UnsupportedTypeError",
    "XorShiftRng",
    "choose",
    "get_config",
    "register_choosable",
    "sample",
    "sample_sized",
    "set_config",
]
