"""
Shared protocol types for the random-source contract.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any, Protocol, TypeVar, runtime_checkable


@runtime_checkable
class RandomSource(Protocol):
    """Minimal contract every random source must satisfy.

    A source is a mutable object, but the engine only ever mutates a fresh
    clone: sequencers clone the state they receive, draw from the clone and
    hand the clone back as the next state. Sources must compare equal when
    their internal states are equal so that runs can be replayed and checked.
    """

    def clone(self) -> RandomSource: ...

    def next_bits(self, bits: int) -> int: ...

    def next_below(self, bound: int) -> int: ...

    def next_float(self) -> float: ...


S = TypeVar("S", bound=RandomSource)
A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")

# A sequencer step: state in, (value, next state) out.
Rand = Callable[[S], tuple[A, S]]


class PrimitiveKind(Enum):
    """Primitive value kinds a source can produce over their full range."""

    I8 = ("i8", 8, True)
    I16 = ("i16", 16, True)
    I32 = ("i32", 32, True)
    I64 = ("i64", 64, True)
    U8 = ("u8", 8, False)
    U16 = ("u16", 16, False)
    U32 = ("u32", 32, False)
    U64 = ("u64", 64, False)
    F32 = ("f32", 24, False)
    F64 = ("f64", 53, False)
    BOOL = ("bool", 1, False)
    CHAR = ("char", 21, False)

    def __init__(self, label: str, bits: int, signed: bool) -> None:
        self.label = label
        self.bits = bits
        self.signed = signed

    def is_integer(self) -> bool:
        """Check if this kind is a fixed-width integer."""
        return self.label[0] in ("i", "u")

    def is_float(self) -> bool:
        """Check if this kind is a floating point kind."""
        return self.label[0] == "f"

    @property
    def min_value(self) -> int:
        """Smallest representable value of an integer kind."""
        if not self.is_integer():
            raise ValueError(f"{self.label} has no integer range")
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        """Largest representable value of an integer kind."""
        if not self.is_integer():
            raise ValueError(f"{self.label} has no integer range")
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    @classmethod
    def from_python_type(cls, tp: Any) -> PrimitiveKind:
        """Map a builtin Python type to its default primitive kind."""
        if isinstance(tp, cls):
            return tp
        # bool before int: bool is an int subclass
        mapping = {bool: cls.BOOL, int: cls.I64, float: cls.F64, str: cls.CHAR}
        try:
            return mapping[tp]
        except (KeyError, TypeError):
            raise TypeError(f"No primitive kind for type: {tp!r}") from None
