"""
Tests for the weighted anti-repetition sampler.

The statistical tests use a seeded random.Random so they are deterministic.
"""
import random
from collections import Counter

import pytest

from soroban.engine.beads import MINUS, PLUS, valid_moves
from soroban.engine.sampler import (
    MAX_PICK_ATTEMPTS,
    build_candidate_pool,
    pick_weighted_move,
)


class TestCandidatePool:
    def test_hard_digits_get_three_tickets(self):
        pool = build_candidate_pool([1, 5, 6, 9])
        counts = Counter(pool)
        assert counts == {1: 1, 5: 1, 6: 3, 9: 3}

    def test_negative_hard_digits_weighted_too(self):
        counts = Counter(build_candidate_pool([-7, -2]))
        assert counts == {-7: 3, -2: 1}

    def test_empty(self):
        assert build_candidate_pool([]) == []


class TestPickWeightedMove:
    def test_empty_raises(self, rng):
        with pytest.raises(ValueError):
            pick_weighted_move([], 0, rng)

    def test_result_is_valid(self, rng):
        moves = valid_moves(7, MINUS)
        for _ in range(500):
            assert pick_weighted_move(moves, 3, rng) in moves

    def test_single_choice_accepted_even_if_reversal(self, sequence_rng):
        fake = sequence_rng([0.0])
        assert pick_weighted_move([-5], 5, fake) == -5
        assert fake.calls == 1

    def test_reversal_redrawn(self, sequence_rng):
        # pool for [-7, -1] is [-7, -7, -7, -1]; 0.0 hits -7, 0.9 hits -1
        fake = sequence_rng([0.0, 0.0, 0.9])
        assert pick_weighted_move([-7, -1], 7, fake) == -1
        assert fake.calls == 3

    def test_release_valve_after_max_attempts(self, sequence_rng):
        # every draw lands on the reversal: one extra draw is accepted anyway
        fake = sequence_rng([0.0])
        assert pick_weighted_move([-7, -1], 7, fake) == -7
        assert fake.calls == MAX_PICK_ATTEMPTS + 1

    def test_no_previous_move(self, sequence_rng):
        fake = sequence_rng([0.5])
        assert pick_weighted_move([1, 2, 3], 0, fake) == 2


class TestSamplerStatistics:
    def test_hard_digits_drawn_three_times_as_often(self):
        rng = random.Random(1234)
        moves = valid_moves(0, PLUS)
        assert moves == [1, 2, 3, 4, 5, 6, 7, 8, 9]

        n = 20000
        counts = Counter(pick_weighted_move(moves, 0, rng) for _ in range(n))

        soft = sum(counts[d] for d in range(1, 6)) / 5
        hard = sum(counts[d] for d in range(6, 10)) / 4
        assert 2.7 < hard / soft < 3.3

        for d in range(1, 6):
            assert abs(counts[d] / n - 1 / 17) < 0.01
        for d in range(6, 10):
            assert abs(counts[d] / n - 3 / 17) < 0.015

    def test_reversal_rate_is_low_but_possible(self):
        rng = random.Random(99)
        moves = valid_moves(7, MINUS)
        n = 10000
        reversals = sum(1 for _ in range(n) if pick_weighted_move(moves, 7, rng) == -7)
        # -7 holds 3 of 10 tickets; without the re-draw it would be ~30%
        assert reversals / n < 0.005
