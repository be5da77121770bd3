"""
Exception types raised by the generator engine.

Every error here signals a contract violation by the caller. Nothing in the
engine catches or retries them.
"""


class PropGenError(Exception):
    """Base class for all propgen errors."""


class EmptyFrequencyError(PropGenError, ValueError):
    """Raised when a weighted choice has no entry with a positive weight."""


class EmptyChoiceError(PropGenError, ValueError):
    """Raised when a uniform choice is built from an empty collection."""


class MissingSizeError(PropGenError, ValueError):
    """Raised when a size-aware generator is run without a size."""


class InvalidRangeError(PropGenError, ValueError):
    """Raised for empty, inverted or non-finite ranges."""


class UnsupportedTypeError(PropGenError, TypeError):
    """Raised when range dispatch has no entry for a type."""
