"""
Size-aware generators.

An SGen either builds its Gen from a size supplied at run time, or wraps a
Gen that does not care about size at all.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic

from ..core.exceptions import MissingSizeError
from ..core.types import A, B
from ..utilities.validators import validate_non_negative
from .gen import Gen

logger = logging.getLogger(__name__)


class SGen(ABC, Generic[A]):
    """Generator parameterized by an external size hint."""

    @staticmethod
    def of_sized(f: Callable[[int], Gen[A]]) -> SGen[A]:
        """
        Wrap a size-aware constructor.

        ``f`` is kept, not consumed: it is called again on every ``run`` and
        shared by every copy of the SGen, so it must not depend on mutable
        external state.
        """
        return SizedGen(f)

    @staticmethod
    def of_unsized(gen: Gen[A]) -> SGen[A]:
        """Wrap a Gen that ignores size."""
        return UnsizedGen(gen)

    @abstractmethod
    def run(self, size: int | None = None) -> Gen[A]:
        """Return the Gen for ``size``."""

    @abstractmethod
    def map(self, f: Callable[[A], B]) -> SGen[B]:
        """Apply ``f`` to every generated value, keeping the variant."""

    def is_sized(self) -> bool:
        return isinstance(self, SizedGen)


@dataclass(frozen=True)
class SizedGen(SGen[A]):
    """SGen whose Gen depends on the size."""

    f: Callable[[int], Gen[A]]

    def run(self, size: int | None = None) -> Gen[A]:
        """
        Build the Gen for ``size``.

        Raises:
            MissingSizeError: If ``size`` is None
            ValueError: If ``size`` is negative
        """
        if size is None:
            raise MissingSizeError("A sized generator needs a size to run")
        validate_non_negative(size, "Size")
        logger.debug(f"Building sized generator for size {size}")
        return self.f(size)

    def map(self, f: Callable[[A], B]) -> SGen[B]:
        build = self.f
        return SizedGen(lambda size: build(size).map(f))


@dataclass(frozen=True)
class UnsizedGen(SGen[A]):
    """SGen wrapping a size-independent Gen."""

    gen: Gen[A]

    def run(self, size: int | None = None) -> Gen[A]:
        """Return the wrapped Gen; ``size`` is ignored."""
        return self.gen

    def map(self, f: Callable[[A], B]) -> SGen[B]:
        return UnsizedGen(self.gen.map(f))
