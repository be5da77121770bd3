"""
Sampling helpers for inspecting generators.

These draw values by threading the random source through repeated runs of a
generator. They exist for exploration and debugging; running properties
against the values is left to a test runner.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Hashable, Iterable, Iterator
from typing import Any, TypeVar

from ..config import get_config
from ..core.types import RandomSource
from ..generators.gen import Gen
from ..generators.sized import SGen
from .validators import validate_non_negative

logger = logging.getLogger(__name__)

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)


def iterate(gen: Gen[T], rng: RandomSource) -> Iterator[T]:
    """Yield an endless stream of values, each run on the state the previous one left."""
    state = rng
    while True:
        value, state = gen.run(state)
        yield value


def sample_with_state(gen: Gen[T], rng: RandomSource, count: int | None = None) -> tuple[list[T], Any]:
    """
    Draw ``count`` values and return them with the final random source.

    ``count`` defaults to the configured sample count.
    """
    if count is None:
        count = get_config().sample_count
    validate_non_negative(count, "Sample count")

    values: list[T] = []
    state = rng
    for _ in range(count):
        value, state = gen.run(state)
        values.append(value)
    logger.debug(f"Sampled {count} values")
    return values, state


def sample(gen: Gen[T], rng: RandomSource, count: int | None = None) -> list[T]:
    """Draw ``count`` values from ``gen``."""
    values, _ = sample_with_state(gen, rng, count)
    return values


def sample_sized(
    sgen: SGen[T], rng: RandomSource, count: int | None = None, size: int | None = None
) -> list[T]:
    """Draw ``count`` values from ``sgen`` at ``size`` (default: the configured size)."""
    if size is None:
        size = get_config().default_size
    return sample(sgen.run(size), rng, count)


def frequencies(values: Iterable[H]) -> Counter[H]:
    """Count occurrences of each value."""
    return Counter(values)
