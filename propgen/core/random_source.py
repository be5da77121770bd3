"""
Concrete random sources implementing the RandomSource contract.

``StdRng`` is the default source backed by the Mersenne Twister in the
standard ``random`` module. ``XorShiftRng`` is a tiny xorshift32 generator
whose whole state is a single integer, handy for replaying runs by hand.
"""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..config import GenerationConfig

logger = logging.getLogger(__name__)

UINT32_MAX = 0xFFFFFFFF
XORSHIFT_DEFAULT_STATE = 0xA5366B4D


class StdRng:
    """Random source wrapping ``random.Random``."""

    __slots__ = ("_random",)

    def __init__(self, seed: int | None = None) -> None:
        self._random = random.Random(seed)

    @classmethod
    def seed_from(cls, seed: int) -> StdRng:
        """Create a source deterministically seeded from an integer."""
        return cls(seed)

    @classmethod
    def from_entropy(cls) -> StdRng:
        """Create a source seeded from operating system entropy."""
        seed = random.SystemRandom().getrandbits(64)
        logger.debug(f"Seeding StdRng from entropy: {seed}")
        return cls(seed)

    @classmethod
    def from_config(cls, config: GenerationConfig | None = None) -> StdRng:
        """Create a source from the configured seed, or from entropy when unset."""
        if config is None:
            from ..config import get_config

            config = get_config()
        if config.seed is None:
            return cls.from_entropy()
        return cls.seed_from(config.seed)

    def clone(self) -> StdRng:
        """Return an independent copy that replays the same future output."""
        copy = StdRng.__new__(StdRng)
        copy._random = random.Random()
        copy._random.setstate(self._random.getstate())
        return copy

    def next_bits(self, bits: int) -> int:
        """Return a uniform unsigned integer of ``bits`` bits."""
        if bits <= 0:
            raise ValueError(f"Bit count must be positive, got: {bits}")
        return self._random.getrandbits(bits)

    def next_below(self, bound: int) -> int:
        """Return a uniform integer in ``[0, bound)``."""
        if bound <= 0:
            raise ValueError(f"Upper bound must be positive, got: {bound}")
        return self._random.randrange(bound)

    def next_float(self) -> float:
        """Return a uniform float in ``[0, 1)``."""
        return self._random.random()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StdRng):
            return NotImplemented
        return self._random.getstate() == other._random.getstate()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"StdRng(state_hash={hash(self._random.getstate()):#x})"


class XorShiftRng:
    """
    xorshift32 random source.

    The state is a single 32-bit integer; zero is a fixed point of the
    recurrence, so a zero seed is replaced by a fixed non-zero default.
    """

    __slots__ = ("state",)

    def __init__(self, seed: int) -> None:
        state = seed & UINT32_MAX
        if state == 0:
            state = XORSHIFT_DEFAULT_STATE
        self.state = state

    def clone(self) -> XorShiftRng:
        """Return a copy with the same state."""
        return XorShiftRng(self.state)

    def next_u32(self) -> int:
        """Advance the recurrence and return the new 32-bit state."""
        x = self.state
        x ^= (x << 13) & UINT32_MAX
        x ^= x >> 17
        x ^= (x << 5) & UINT32_MAX
        self.state = x & UINT32_MAX
        return self.state

    def next_bits(self, bits: int) -> int:
        """Return a uniform unsigned integer of ``bits`` bits."""
        if bits <= 0:
            raise ValueError(f"Bit count must be positive, got: {bits}")
        result = 0
        produced = 0
        while produced < bits:
            result = (result << 32) | self.next_u32()
            produced += 32
        return result >> (produced - bits)

    def next_below(self, bound: int) -> int:
        """Return a uniform integer in ``[0, bound)`` by rejection sampling."""
        if bound <= 0:
            raise ValueError(f"Upper bound must be positive, got: {bound}")
        bits = bound.bit_length()
        while True:
            candidate = self.next_bits(bits)
            if candidate < bound:
                return candidate

    def next_float(self) -> float:
        """Return a uniform float in ``[0, 1)`` with 53 bits of precision."""
        return self.next_bits(53) / float(1 << 53)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, XorShiftRng):
            return NotImplemented
        return self.state == other.state

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"XorShiftRng({self.state:#010x})"
