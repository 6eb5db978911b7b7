"""
Tests for DrillAttempt — the per-attempt round/sign coordinator.
"""
import random

from soroban.engine.beads import MINUS, PLUS
from soroban.engine.coordinator import DEADLOCK, STEP0_INFEASIBLE, DrillAttempt


class TestChooseSign:
    def test_round_zero_is_plus(self, rng):
        state = DrillAttempt([100, 10, 1], rng)
        assert state.choose_sign(0) == PLUS

    def test_round_zero_infeasible(self, rng):
        state = DrillAttempt([10, 1], rng)
        state.values = [9, 3]
        assert state.choose_sign(0) is None
        assert state.failure == STEP0_INFEASIBLE

    def test_deadlock(self, rng):
        # tens cannot add, units cannot subtract
        state = DrillAttempt([10, 1], rng)
        state.values = [9, 0]
        assert state.choose_sign(3) is None
        assert state.failure == DEADLOCK

    def test_only_minus_feasible(self, rng):
        state = DrillAttempt([10, 1], rng)
        state.values = [9, 9]
        assert state.choose_sign(1) == MINUS

    def test_only_plus_feasible(self, rng):
        state = DrillAttempt([10, 1], rng)
        state.values = [0, 3]
        assert state.choose_sign(1) == PLUS

    def test_coin_flip(self, sequence_rng):
        state = DrillAttempt([1], sequence_rng([0.1]))
        state.values = [3]
        assert state.choose_sign(2) == PLUS

        state = DrillAttempt([1], sequence_rng([0.7]))
        state.values = [3]
        assert state.choose_sign(2) == MINUS


class TestStep:
    def test_first_step_positive(self):
        for seed in range(50):
            state = DrillAttempt([1000, 100, 10, 1], random.Random(seed))
            value = state.step(0)
            assert value is not None and value > 0

    def test_step_updates_state(self, rng):
        state = DrillAttempt([10, 1], rng)
        value = state.step(0)
        tens, units = state.values
        assert value == tens * 10 + units
        assert state.last_moves == [tens, units]
        assert state.numbers == [value]
        assert state.answer == value

    def test_moves_share_sign(self):
        for seed in range(30):
            state = DrillAttempt([100, 10, 1], random.Random(seed))
            for r in range(8):
                before = list(state.values)
                if state.step(r) is None:
                    break
                deltas = [a - b for a, b in zip(state.values, before)]
                assert all(d > 0 for d in deltas) or all(d < 0 for d in deltas)

    def test_failed_step_leaves_numbers(self, rng):
        state = DrillAttempt([10, 1], rng)
        state.values = [9, 0]
        state.numbers = [90]
        assert state.step(1) is None
        assert state.numbers == [90]

    def test_run_single_column_completes(self, rng):
        state = DrillAttempt([1], rng)
        assert state.run(20)
        assert len(state.numbers) == 20
        assert sum(state.numbers) == state.answer
