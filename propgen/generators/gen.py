"""
Gen value object and the tagged wrappers generators produce.

A Gen owns exactly one State. Because both are immutable, copies of a Gen
share the same underlying closure and running one never affects another.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic

from ..core.state import State
from ..core.types import A, B, C, S


@dataclass(frozen=True)
class Some(Generic[A]):
    """Present-value marker; absence is represented by ``None``."""

    value: A


@dataclass(frozen=True)
class Left(Generic[A]):
    """Left branch of a two-way choice."""

    value: A


@dataclass(frozen=True)
class Right(Generic[B]):
    """Right branch of a two-way choice."""

    value: B


Either = Left[Any] | Right[Any]


@dataclass(frozen=True)
class Gen(Generic[A]):
    """
    Generator of values of type ``A``.

    ``run`` is referentially transparent: two runs from equal states give
    equal ``(value, next_state)`` pairs.
    """

    sample: State[Any, A]

    @staticmethod
    def new(state: State[S, B]) -> Gen[B]:
        """Build a Gen around an existing State."""
        return Gen(state)

    def run(self, rng: S) -> tuple[A, S]:
        """Produce a value and the advanced random source."""
        return self.sample.run(rng)

    def map(self, f: Callable[[A], B]) -> Gen[B]:
        """Apply ``f`` to every generated value."""
        return Gen(self.sample.map(f))

    def flat_map(self, f: Callable[[A], Gen[B]]) -> Gen[B]:
        """Run this Gen, then the Gen ``f`` returns for its value."""
        return Gen(self.sample.flat_map(lambda a: f(a).sample))

    def and_then(self, other: Gen[B], f: Callable[[A, B], C]) -> Gen[C]:
        """Run this Gen, then ``other``, and combine both values with ``f``."""
        return Gen(self.sample.and_then(other.sample).map(lambda ab: f(ab[0], ab[1])))
