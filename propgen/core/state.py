"""
State value object: the sequencer underneath every generator.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Generic

from . import combinators
from .types import A, B, C, S


@dataclass(frozen=True)
class State(Generic[S, A]):
    """
    Immutable wrapper around a sequencer function ``rng -> (value, next_rng)``.

    Composition always builds a new State; existing ones are never altered.
    """

    run_fn: Callable[[S], tuple[A, S]]

    @classmethod
    def new(cls, run_fn: Callable[[S], tuple[A, S]]) -> State[S, A]:
        return cls(run_fn)

    @classmethod
    def value(cls, a: A) -> State[S, A]:
        """State that yields ``a`` without touching the random source."""
        return cls(combinators.unit(a))

    @classmethod
    def sequence(cls, states: Iterable[State[S, Any]]) -> State[S, list[Any]]:
        """Run states left to right, collecting their values in order."""
        return cls(combinators.sequence(state.run_fn for state in states))

    def run(self, rng: S) -> tuple[A, S]:
        return self.run_fn(rng)

    def map(self, f: Callable[[A], B]) -> State[S, B]:
        return State(combinators.map(self.run_fn, f))

    def flat_map(self, f: Callable[[A], State[S, B]]) -> State[S, B]:
        return State(combinators.flat_map(self.run_fn, lambda a: f(a).run_fn))

    def and_then(self, other: State[S, B]) -> State[S, tuple[A, B]]:
        """Run this state, then ``other``, pairing the results."""
        return State(combinators.both(self.run_fn, other.run_fn))

    def map2(self, other: State[S, B], f: Callable[[A, B], C]) -> State[S, C]:
        return State(combinators.map2(self.run_fn, other.run_fn, f))
