"""
Unit tests for the sequencer combinators and the State value object.
"""

from propgen.core import combinators, primitives
from propgen.core.random_source import StdRng
from propgen.core.state import State
from propgen.core.types import PrimitiveKind


def manual_draws(rng, kind, count):
    """Draw ``count`` values one after another from a single clone."""
    source = rng.clone()
    return [primitives.draw(source, kind) for _ in range(count)], source


class TestCombinators:
    """Test cases for the free combinator functions."""

    def test_unit_leaves_state(self, rng):
        """unit returns its value and the very same state."""
        value, next_rng = combinators.unit("x")(rng)
        assert value == "x"
        assert next_rng is rng

    def test_unfold_does_not_mutate_input(self, rng):
        """Sequencers draw from a clone, never from the state they receive."""
        before = rng.clone()
        combinators.unfold(PrimitiveKind.U32)(rng)
        assert rng == before

    def test_map_applies_function(self, rng):
        """map transforms the value and advances the state exactly once."""
        (expected,), expected_rng = manual_draws(rng, PrimitiveKind.U8, 1)
        value, next_rng = combinators.map(combinators.unfold(PrimitiveKind.U8), lambda x: x + 1000)(rng)
        assert value == expected + 1000
        assert next_rng == expected_rng

    def test_map2_runs_in_order(self, rng):
        """map2 runs the first sequencer before the second."""
        (first, second), expected_rng = manual_draws(rng, PrimitiveKind.U32, 2)
        ra = combinators.unfold(PrimitiveKind.U32)
        rb = combinators.map(combinators.unfold(PrimitiveKind.U32), lambda x: -x)
        value, next_rng = combinators.map2(ra, rb, lambda a, b: (a, b))(rng)
        assert value == (first, -second)
        assert next_rng == expected_rng

    def test_both_pairs(self, rng):
        """both pairs the two values."""
        (first, second), _ = manual_draws(rng, PrimitiveKind.I16, 2)
        value, _ = combinators.both(
            combinators.unfold(PrimitiveKind.I16), combinators.unfold(PrimitiveKind.I16)
        )(rng)
        assert value == (first, second)

    def test_sequence_preserves_order(self, rng):
        """sequence collects values in input order, threading the state."""
        expected, expected_rng = manual_draws(rng, PrimitiveKind.U16, 5)
        value, next_rng = combinators.sequence([combinators.unfold(PrimitiveKind.U16)] * 5)(rng)
        assert value == expected
        assert next_rng == expected_rng

    def test_sequence_empty(self, rng):
        """An empty sequence yields an empty list and leaves the state alone."""
        value, next_rng = combinators.sequence([])(rng)
        assert value == []
        assert next_rng == rng

    def test_sequence_long(self, rng):
        """Long sequences do not hit the recursion limit."""
        value, _ = combinators.sequence([combinators.unit(1)] * 20000)(rng)
        assert len(value) == 20000

    def test_flat_map_dependent(self, rng):
        """flat_map feeds the first value into the choice of the second sequencer."""
        rand = combinators.flat_map(
            combinators.unit(3),
            lambda n: combinators.sequence([combinators.unfold(PrimitiveKind.BOOL)] * n),
        )
        value, _ = rand(rng)
        assert len(value) == 3
        assert all(isinstance(v, bool) for v in value)

    def test_int_and_double_values(self, rng):
        """The canned sequencers produce i32 and [0, 1) floats in the stated order."""
        (i, d), _ = combinators.rand_int_double()(rng)
        (d2, i2), _ = combinators.rand_double_int()(rng)
        assert PrimitiveKind.I32.min_value <= i <= PrimitiveKind.I32.max_value
        assert 0.0 <= d < 1.0
        assert 0.0 <= d2 < 1.0
        assert isinstance(i2, int)


class TestState:
    """Test cases for the State sequencer wrapper."""

    def test_value(self, rng):
        """State.value never consumes randomness."""
        assert State.value(10).run(rng) == (10, rng)

    def test_map(self, rng):
        """map composes a function onto the value."""
        assert State.value(10).map(str).run(rng) == ("10", rng)

    def test_flat_map(self, rng):
        """flat_map threads the leftover state into the next State."""
        state = State(combinators.unfold(PrimitiveKind.U8)).flat_map(
            lambda x: State.value(x * 2)
        )
        (expected,), expected_rng = manual_draws(rng, PrimitiveKind.U8, 1)
        assert state.run(rng) == (expected * 2, expected_rng)

    def test_and_then_and_map2(self, rng):
        """and_then pairs, map2 combines, both in order."""
        a = State(combinators.unfold(PrimitiveKind.U8))
        b = State(combinators.unfold(PrimitiveKind.U8))
        (first, second), _ = manual_draws(rng, PrimitiveKind.U8, 2)
        assert a.and_then(b).run(rng)[0] == (first, second)
        assert a.map2(b, lambda x, y: x - y).run(rng)[0] == first - second

    def test_sequence(self, rng):
        """State.sequence is the State form of the sequence combinator."""
        states = [State.value(i) for i in range(4)]
        assert State.sequence(states).run(rng) == ([0, 1, 2, 3], rng)

    def test_immutable(self):
        """Composition returns new objects."""
        base = State.value(1)
        mapped = base.map(lambda x: x + 1)
        assert mapped is not base
        assert base.run(StdRng.seed_from(0))[0] == 1
