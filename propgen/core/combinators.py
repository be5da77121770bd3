"""
Free combinators over sequencer functions.

A sequencer function takes a random source and returns ``(value, next
source)``. Everything here is built purely from that shape and the
RandomSource contract; ``flat_map`` is the primitive the rest reduce to.
The order in which combinators run their inputs fixes how many draws precede
others, so it must not change.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from . import primitives
from .types import A, B, C, PrimitiveKind, Rand, S


def unit(a: A) -> Rand[S, A]:
    """Sequencer that returns ``a`` and leaves the state untouched."""

    def run(rng: S) -> tuple[A, S]:
        return a, rng

    return run


def flat_map(f: Rand[S, A], g: Callable[[A], Rand[S, B]]) -> Rand[S, B]:
    """Run ``f``, then run ``g(value)`` on the leftover state."""

    def run(rng: S) -> tuple[B, S]:
        a, r1 = f(rng)
        return g(a)(r1)

    return run


def map(s: Rand[S, A], f: Callable[[A], B]) -> Rand[S, B]:  # noqa: A001
    """Apply ``f`` to the value produced by ``s``."""
    return flat_map(s, lambda a: unit(f(a)))


def map2(ra: Rand[S, A], rb: Rand[S, B], f: Callable[[A, B], C]) -> Rand[S, C]:
    """Run ``ra`` then ``rb`` on the advanced state and combine with ``f``."""
    return flat_map(ra, lambda a: map(rb, lambda b: f(a, b)))


def both(ra: Rand[S, A], rb: Rand[S, B]) -> Rand[S, tuple[A, B]]:
    """Run ``ra`` then ``rb`` and pair the results."""
    return map2(ra, rb, lambda a, b: (a, b))


def sequence(rands: Iterable[Rand[S, A]]) -> Rand[S, list[A]]:
    """
    Run every sequencer left to right, collecting results in input order.

    Equivalent to folding ``map2`` with append over the inputs, but threads
    the state in a loop so long sequences do not nest closures.
    """
    steps = list(rands)

    def run(rng: S) -> tuple[list[A], S]:
        results: list[A] = []
        for step in steps:
            value, rng = step(rng)
            results.append(value)
        return results, rng

    return run


def unfold(kind: PrimitiveKind) -> Rand[S, object]:
    """Sequencer drawing one full-range value of ``kind`` from a clone of the state."""

    def run(rng: S) -> tuple[object, S]:
        next_rng = rng.clone()
        return primitives.draw(next_rng, kind), next_rng

    return run


def int_value() -> Rand[S, int]:
    """Full-range 32-bit signed integer."""
    return unfold(PrimitiveKind.I32)


def double_value() -> Rand[S, float]:
    """Single-precision float in ``[0, 1)``."""
    return unfold(PrimitiveKind.F32)


def rand_int_double() -> Rand[S, tuple[int, float]]:
    return both(int_value(), double_value())


def rand_double_int() -> Rand[S, tuple[float, int]]:
    return both(double_value(), int_value())
