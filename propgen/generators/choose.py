"""
Range dispatch: ``choose(min, max)`` for any supported value type.

Each supported type is bound once to the factory constructor that samples
it. Generic code calls ``choose`` and never inspects types itself; new types
are added with ``register_choosable``.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import singledispatch
from typing import Any, TypeVar

from ..core.exceptions import UnsupportedTypeError
from .factory import Gens
from .gen import Gen

T = TypeVar("T")


@singledispatch
def _dispatch(min_value: Any, max_value: Any) -> Gen[Any]:
    raise UnsupportedTypeError(f"No range sampling for type: {type(min_value).__name__}")


@_dispatch.register
def _(min_value: bool, max_value: bool) -> Gen[Any]:
    raise UnsupportedTypeError("bool has no orderable range; use Gens.one(bool)")


@_dispatch.register
def _(min_value: int, max_value: int) -> Gen[int]:
    return Gens.choose_int(min_value, max_value)


@_dispatch.register
def _(min_value: float, max_value: float) -> Gen[float]:
    return Gens.choose_float(min_value, max_value)


@_dispatch.register
def _(min_value: str, max_value: str) -> Gen[str]:
    return Gens.choose_char(min_value, max_value)


def choose(min_value: T, max_value: T) -> Gen[T]:
    """
    Gen of values in ``[min_value, max_value)`` for a supported type.

    Supported out of the box: ``int``, ``float`` and single-character ``str``.

    Raises:
        TypeError: If the bounds have different types
        UnsupportedTypeError: If no sampler is registered for the type
        InvalidRangeError: If the range is empty or inverted
    """
    if type(min_value) is not type(max_value):
        raise TypeError(
            f"Range bounds must share a type, got: "
            f"{type(min_value).__name__} and {type(max_value).__name__}"
        )
    return _dispatch(min_value, max_value)


def register_choosable(tp: type, sampler: Callable[[Any, Any], Gen[Any]]) -> None:
    """Bind ``tp`` to ``sampler(min_value, max_value) -> Gen``."""
    _dispatch.register(tp, sampler)


def is_choosable(tp: type) -> bool:
    """Check if ``choose`` has a sampler for ``tp``."""
    return tp is not bool and _dispatch.dispatch(tp) is not _dispatch.dispatch(object)
