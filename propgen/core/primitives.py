"""
Primitive draws built on the RandomSource contract.

These functions advance the source they are given. Callers that need purity
(every sequencer in the engine) pass a fresh clone.
"""

from __future__ import annotations

import math

from .exceptions import InvalidRangeError
from .types import PrimitiveKind, RandomSource

# Unicode scalar values exclude the UTF-16 surrogate block.
SURROGATE_START = 0xD800
SURROGATE_END = 0xE000
SURROGATE_GAP = SURROGATE_END - SURROGATE_START
MAX_CODE_POINT = 0x110000


def draw(rng: RandomSource, kind: PrimitiveKind) -> int | float | bool | str:
    """Draw one value of ``kind`` over its full range."""
    if kind is PrimitiveKind.BOOL:
        return rng.next_bits(1) == 1
    if kind is PrimitiveKind.CHAR:
        compact = rng.next_below(MAX_CODE_POINT - SURROGATE_GAP)
        return chr(_expand_code_point(compact))
    if kind.is_float():
        # Standard float convention: uniform in [0, 1) at the kind's precision
        return rng.next_bits(kind.bits) / float(1 << kind.bits)

    raw = rng.next_bits(kind.bits)
    if kind.signed and raw >= 1 << (kind.bits - 1):
        raw -= 1 << kind.bits
    return raw


def draw_int_range(rng: RandomSource, low: int, high: int) -> int:
    """Draw an integer in the half-open range ``[low, high)``."""
    validate_int_range(low, high)
    return low + rng.next_below(high - low)


def draw_float_range(rng: RandomSource, low: float, high: float) -> float:
    """Draw a float in the half-open range ``[low, high)``."""
    validate_float_range(low, high)
    u = rng.next_float()
    span = high - low
    if math.isinf(span):
        value = low * (1.0 - u) + high * u
    else:
        value = low + span * u
    # Rounding can land exactly on high, or just below low for huge bounds
    if value >= high:
        value = math.nextafter(high, low)
    return max(value, low)


def draw_char_range(rng: RandomSource, low: str, high: str) -> str:
    """Draw a character with code point in ``[ord(low), ord(high))``, skipping surrogates."""
    lo, hi = validate_char_range(low, high)
    compact = lo + rng.next_below(hi - lo)
    return chr(_expand_code_point(compact))


def validate_int_range(low: int, high: int) -> None:
    """Reject empty or inverted integer ranges."""
    if low >= high:
        raise InvalidRangeError(f"Empty range: [{low}, {high})")


def validate_float_range(low: float, high: float) -> None:
    """Reject empty, inverted or non-finite float ranges."""
    if not (math.isfinite(low) and math.isfinite(high)):
        raise InvalidRangeError(f"Range bounds must be finite, got: [{low}, {high})")
    if low >= high:
        raise InvalidRangeError(f"Empty range: [{low}, {high})")


def validate_char_range(low: str, high: str) -> tuple[int, int]:
    """
    Validate a character range and return its bounds as compact indices.

    Compact indices number the valid scalar values consecutively, so the
    surrogate block takes up no room in the range.
    """
    for bound in (low, high):
        if not isinstance(bound, str) or len(bound) != 1:
            raise InvalidRangeError(f"Character bounds must be single characters, got: {bound!r}")
        if SURROGATE_START <= ord(bound) < SURROGATE_END:
            raise InvalidRangeError(f"Surrogate code point is not a character: {ord(bound):#x}")

    lo = _compact_code_point(ord(low))
    hi = _compact_code_point(ord(high))
    if lo >= hi:
        raise InvalidRangeError(f"Empty range: [{low!r}, {high!r})")
    return lo, hi


def _compact_code_point(code_point: int) -> int:
    if code_point >= SURROGATE_END:
        return code_point - SURROGATE_GAP
    return code_point


def _expand_code_point(compact: int) -> int:
    if compact >= SURROGATE_START:
        return compact + SURROGATE_GAP
    return compact
