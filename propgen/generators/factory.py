"""
Factory of Gen constructors.

Gens is stateless: every constructor returns a new immutable Gen. Argument
problems (no positive weight, empty choices, empty ranges) are raised when
the generator is built, not when it is run.
"""

from __future__ import annotations

import logging
from bisect import bisect_left
from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from ..core import combinators, primitives
from ..core.exceptions import EmptyChoiceError, EmptyFrequencyError
from ..core.state import State
from ..core.types import PrimitiveKind
from ..utilities.constants import OPTION_ABSENT_WEIGHT, OPTION_PRESENT_WEIGHT
from ..utilities.validators import validate_non_negative
from .gen import Either, Gen, Left, Right, Some
from .sized import SGen

logger = logging.getLogger(__name__)

T = TypeVar("T")
E = TypeVar("E")


def _gen_from(run_fn: Callable[[Any], tuple[T, Any]]) -> Gen[T]:
    return Gen(State(run_fn))


class Gens:
    """Constructors for generators."""

    @staticmethod
    def unit() -> Gen[None]:
        """Gen that always returns ``None``."""
        return Gens.pure(None)

    @staticmethod
    def pure(value: T) -> Gen[T]:
        """Gen that always returns ``value`` and never consumes randomness."""
        return Gen(State.value(value))

    @staticmethod
    def pure_lazy(f: Callable[[], T]) -> Gen[T]:
        """Gen whose constant value is computed by calling ``f`` on every run."""
        return Gens.pure(None).map(lambda _: f())

    @staticmethod
    def deferred(thunk: Callable[[], Gen[T]]) -> Gen[T]:
        """
        Gen that obtains the Gen to run from ``thunk`` at run time.

        Lets a generator refer to itself, which recursive data needs:

            tree = Gens.deferred(lambda: Gens.frequency([(3, leaf), (1, node(tree))]))
        """
        return Gens.unit().flat_map(lambda _: thunk())

    @staticmethod
    def some(gen: Gen[T]) -> Gen[Some[T]]:
        """Wrap every value of ``gen`` in ``Some``."""
        return gen.map(Some)

    @staticmethod
    def option(gen: Gen[T]) -> Gen[Some[T] | None]:
        """``Some`` of a value from ``gen`` nine times in ten, otherwise ``None``."""
        return Gens.frequency(
            [
                (OPTION_ABSENT_WEIGHT, Gens.pure(None)),
                (OPTION_PRESENT_WEIGHT, Gens.some(gen)),
            ]
        )

    @staticmethod
    def either(left: Gen[T], right: Gen[E]) -> Gen[Either]:
        """Uniformly pick ``left`` or ``right``, tagging the value with its side."""
        return Gens.one_of([left.map(Left), right.map(Right)])

    @staticmethod
    def frequency_values(values: Iterable[tuple[int, T]]) -> Gen[T]:
        """Weighted choice among constant values."""
        return Gens.frequency((weight, Gens.pure(value)) for weight, value in values)

    @staticmethod
    def frequency(values: Iterable[tuple[int, Gen[T]]]) -> Gen[T]:
        """
        Weighted choice among generators.

        Entries with a weight of zero or less are dropped. A number is drawn
        uniformly from ``[1, total]`` and the first entry whose cumulative
        weight is at least that number is run.

        Raises:
            EmptyFrequencyError: If no entry has a positive weight
        """
        boundaries: list[int] = []
        gens: list[Gen[T]] = []
        total = 0
        dropped = 0
        for weight, gen in values:
            if weight <= 0:
                dropped += 1
                continue
            total += weight
            boundaries.append(total)
            gens.append(gen)

        if dropped:
            logger.warning(f"Dropped {dropped} frequency entries with non-positive weight")
        if not gens:
            raise EmptyFrequencyError("frequency needs at least one entry with a positive weight")

        logger.debug(f"Built frequency table: {len(gens)} entries, total weight {total}")
        return Gens.choose_int(1, total + 1).flat_map(
            lambda n: gens[bisect_left(boundaries, n)]
        )

    @staticmethod
    def list_of_n(n: int, gen: Gen[T]) -> Gen[list[T]]:
        """Gen of lists of exactly ``n`` independently drawn values."""
        validate_non_negative(n, "List length")
        return Gen(State.sequence(gen.sample for _ in range(n)))

    @staticmethod
    def list_of(gen: Gen[T]) -> SGen[list[T]]:
        """Sized Gen of lists whose length is the supplied size."""
        return SGen.of_sized(lambda size: Gens.list_of_n(size, gen))

    @staticmethod
    def list_of_1(gen: Gen[T]) -> SGen[list[T]]:
        """Sized Gen of non-empty lists; a size of zero still yields one element."""
        return SGen.of_sized(lambda size: Gens.list_of_n(max(size, 1), gen))

    @staticmethod
    def one(kind: PrimitiveKind | type = int) -> Gen[Any]:
        """
        Gen of one value over the full range of a primitive kind.

        Accepts a PrimitiveKind or one of the builtin types ``int`` (i64),
        ``float`` (f64), ``bool`` and ``str`` (a single character). Float
        kinds produce values in ``[0, 1)``.
        """
        return _gen_from(combinators.unfold(PrimitiveKind.from_python_type(kind)))

    @staticmethod
    def one_of(gens: Iterable[Gen[T]]) -> Gen[T]:
        """
        Uniformly pick one of ``gens`` and run it.

        Raises:
            EmptyChoiceError: If ``gens`` is empty
        """
        choices = list(gens)
        if not choices:
            raise EmptyChoiceError("one_of needs at least one generator")
        return Gens.choose_int(0, len(choices)).flat_map(lambda idx: choices[idx])

    @staticmethod
    def one_of_values(values: Iterable[T]) -> Gen[T]:
        """Uniformly pick one of ``values``."""
        return Gens.one_of(Gens.pure(value) for value in values)

    @staticmethod
    def choose(min_value: T, max_value: T) -> Gen[T]:
        """
        Gen of values in the half-open range ``[min_value, max_value)``.

        Routed through range dispatch on the type of ``min_value``; ``max_value``
        is never produced.
        """
        from .choose import choose

        return choose(min_value, max_value)

    @staticmethod
    def choose_int(min_value: int, max_value: int) -> Gen[int]:
        """Gen of integers in ``[min_value, max_value)``."""
        primitives.validate_int_range(min_value, max_value)

        def run(rng):
            next_rng = rng.clone()
            return primitives.draw_int_range(next_rng, min_value, max_value), next_rng

        return _gen_from(run)

    @staticmethod
    def choose_float(min_value: float, max_value: float) -> Gen[float]:
        """Gen of floats in ``[min_value, max_value)``."""
        primitives.validate_float_range(min_value, max_value)

        def run(rng):
            next_rng = rng.clone()
            return primitives.draw_float_range(next_rng, min_value, max_value), next_rng

        return _gen_from(run)

    @staticmethod
    def choose_char(min_value: str, max_value: str) -> Gen[str]:
        """Gen of characters with code points in ``[ord(min_value), ord(max_value))``."""
        primitives.validate_char_range(min_value, max_value)

        def run(rng):
            next_rng = rng.clone()
            return primitives.draw_char_range(next_rng, min_value, max_value), next_rng

        return _gen_from(run)
