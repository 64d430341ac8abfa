"""
Tests for the random stream and value helpers.

Covers the Lehmer recurrence, seeking, row alignment and the draw counts of
the value helpers.
"""

import pytest

from dsgen.errors import StreamOverflowError
from dsgen.random import ALPHA_NUMERIC, RngStream, random_charset, uniform_int, uniform_key
from dsgen.random.stream import MAX_SEEK_STEPS, MODULUS, MULTIPLIER, SEED_BASE, initial_seed_for
from dsgen.types import Decimal


@pytest.fixture
def stream():
    """Stream bound to the ship mode contract column."""
    return RngStream(global_column_number=256, seeds_per_row=21, label="sm_contract")


class TestRecurrence:
    """Tests for raw draws."""

    def test_initial_seed_depends_only_on_column(self):
        """Seeds are spaced by MODULUS // 799 per column."""
        assert initial_seed_for(0) == SEED_BASE
        assert initial_seed_for(1) - initial_seed_for(0) == MODULUS // 799
        assert RngStream(7, 1).initial_seed == RngStream(7, 5).initial_seed

    def test_next_matches_direct_product(self, stream):
        """Schrage's method gives the same result as the 64-bit product."""
        expected = stream.seed
        for _ in range(1000):
            expected = expected * MULTIPLIER % MODULUS
            assert stream.next() == expected

    def test_draws_stay_in_range(self, stream):
        for _ in range(1000):
            assert 1 <= stream.next() < MODULUS

    def test_uniform_int_uses_modulo_mapping(self, stream):
        """uniform_int(low, high) is next % width + low, bias included."""
        twin = RngStream(256, 21)
        for _ in range(100):
            raw = twin.next()
            assert stream.next_uniform_int(5, 9) == raw % 5 + 5

    def test_uniform_key_full_range(self, stream):
        twin = RngStream(256, 21)
        raw = twin.next()
        assert uniform_key(1, MODULUS, stream) == raw % MODULUS + 1

    def test_uniform_key_wraps_width_to_32_bits(self, stream):
        """A width of 2^32 + 10 folds to 10."""
        twin = RngStream(256, 21)
        for _ in range(20):
            assert uniform_key(1, 2**32 + 10, stream) == twin.next() % 10 + 1

    def test_next_decimal_keeps_smaller_precision(self, stream):
        value = stream.next_decimal(Decimal(100, 2), Decimal(10000, 2))
        assert value.precision == 2
        assert 100 <= value.number <= 10000

    def test_seeds_used_counts_draws(self, stream):
        for _ in range(3):
            stream.next()
        assert stream.seeds_used == 3


class TestSeeking:
    """Tests for seek and skip_rows."""

    def test_seek_equals_sequential_draws(self):
        """seek(n) lands on the same state as n calls to next()."""
        sequential = RngStream(42, 3)
        for _ in range(12345):
            sequential.next()

        jumped = RngStream(42, 3)
        jumped.seek(12345)

        assert jumped.seed == sequential.seed
        assert jumped.next() == sequential.next()

    def test_seek_is_relative(self):
        stream = RngStream(42, 3)
        stream.seek(10)
        stream.seek(5)

        reference = RngStream(42, 3)
        reference.seek(15)
        assert stream.seed == reference.seed

    def test_skip_rows_is_absolute(self):
        """skip_rows ignores the current position and zeroes seeds_used."""
        stream = RngStream(42, 3)
        for _ in range(7):
            stream.next()
        stream.skip_rows(10)

        reference = RngStream(42, 3)
        reference.seek(30)

        assert stream.seed == reference.seed
        assert stream.seeds_used == 0

    def test_skip_rows_matches_row_by_row_generation(self, stream):
        """Skipping N rows equals generating N rows and closing each one."""
        for _ in range(50):
            stream.next_uniform_int(1, 20)
            stream.consume_remaining()

        skipped = RngStream(256, 21)
        skipped.skip_rows(50)
        assert skipped.seed == stream.seed

    def test_skip_zero_rows_is_initial_state(self, stream):
        stream.next()
        stream.skip_rows(0)
        assert stream.seed == stream.initial_seed

    def test_skip_zero_rows_keeps_unreduced_seed(self):
        """Columns past 791 start above MODULUS and stay there until drawn."""
        high = RngStream(800, 3)
        assert high.initial_seed > MODULUS
        high.next()
        high.skip_rows(0)
        assert high.seed == high.initial_seed

    def test_negative_seek_raises(self, stream):
        with pytest.raises(StreamOverflowError):
            stream.seek(-1)

    def test_seek_beyond_64_bits_raises(self, stream):
        with pytest.raises(StreamOverflowError) as exc_info:
            stream.seek(MAX_SEEK_STEPS + 1)
        assert exc_info.value.column == "sm_contract"

    def test_skip_rows_overflow_raises(self, stream):
        """Row count times seeds per row is checked before seeking."""
        with pytest.raises(StreamOverflowError):
            stream.skip_rows(MAX_SEEK_STEPS // 21 + 1)

    def test_reset(self, stream):
        stream.seek(99)
        stream.reset()
        assert stream.seed == stream.initial_seed
        assert stream.seeds_used == 0


class TestRowAlignment:
    """Tests for consume_remaining."""

    def test_consume_remaining_tops_up_to_seeds_per_row(self):
        stream = RngStream(11, 4)
        stream.next()
        stream.consume_remaining()

        reference = RngStream(11, 4)
        reference.seek(4)
        assert stream.seed == reference.seed
        assert stream.seeds_used == 0

    def test_consume_remaining_on_overdrawn_stream(self):
        """A row that drew more than its budget is not rewound."""
        stream = RngStream(11, 1)
        stream.next()
        stream.next()
        seed = stream.seed
        stream.consume_remaining()
        assert stream.seed == seed
        assert stream.seeds_used == 0

    def test_zero_seed_column_never_moves(self):
        stream = RngStream(159, 0)
        stream.consume_remaining()
        stream.skip_rows(1000)
        assert stream.seed == stream.initial_seed


class TestRandomCharset:
    """Tests for random_charset."""

    def test_always_draws_max_length(self, stream):
        """One length draw plus max_length character draws, whatever the length."""
        random_charset(ALPHA_NUMERIC, 1, 20, stream)
        assert stream.seeds_used == 21

    def test_length_and_characters(self, stream):
        for _ in range(200):
            value = random_charset(ALPHA_NUMERIC, 1, 20, stream)
            assert 1 <= len(value) <= 20
            assert set(value) <= set(ALPHA_NUMERIC)

    def test_same_stream_same_strings(self):
        first = RngStream(256, 21)
        second = RngStream(256, 21)
        assert [random_charset(ALPHA_NUMERIC, 1, 20, first) for _ in range(5)] == [
            random_charset(ALPHA_NUMERIC, 1, 20, second) for _ in range(5)
        ]

    def test_alphabet_has_no_w(self):
        assert "w" not in ALPHA_NUMERIC
        assert "W" not in ALPHA_NUMERIC
        assert len(ALPHA_NUMERIC) == 60

    def test_uniform_int_helper_matches_stream_method(self):
        assert uniform_int(1, 6, RngStream(3, 1)) == RngStream(3, 1).next_uniform_int(1, 6)
