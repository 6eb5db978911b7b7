"""Round/sign coordination across the active columns of one drill attempt.

Every round moves all columns in the same direction. Round 0 must add;
later rounds pick a direction both feasible for every column, flipping a
coin when both are.
"""

import logging
import random

from .beads import MINUS, PLUS, valid_moves
from .sampler import pick_weighted_move

logger = logging.getLogger("soroban.engine")

STEP0_INFEASIBLE = "step0_infeasible"
DEADLOCK = "deadlock"


class DrillAttempt:
    """Column state for a single attempt at building one drill set.

    ``place_values`` is ordered most significant first, e.g. [100, 10, 1].
    """

    def __init__(self, place_values: list[int], rng: random.Random):
        self.place_values = list(place_values)
        self.rng = rng
        self.values = [0] * len(self.place_values)
        self.last_moves = [0] * len(self.place_values)
        self.numbers: list[int] = []
        self.failure: str | None = None

    @property
    def answer(self) -> int:
        return sum(v * pv for v, pv in zip(self.values, self.place_values))

    def _feasible(self, sign: int) -> bool:
        return all(valid_moves(v, sign) for v in self.values)

    def choose_sign(self, r: int) -> int | None:
        can_plus = self._feasible(PLUS)
        can_minus = self._feasible(MINUS)

        if r == 0:
            if not can_plus:
                self.failure = STEP0_INFEASIBLE
                return None
            return PLUS

        if can_plus and can_minus:
            return PLUS if self.rng.random() < 0.5 else MINUS
        if can_plus:
            return PLUS
        if can_minus:
            return MINUS

        self.failure = DEADLOCK
        return None

    def step(self, r: int) -> int | None:
        """Run round ``r``; return the combined step value or None on failure."""
        sign = self.choose_sign(r)
        if sign is None:
            logger.debug("attempt failed at round %d: %s (values=%s)", r, self.failure, self.values)
            return None

        moves = [
            pick_weighted_move(valid_moves(value, sign), last, self.rng)
            for value, last in zip(self.values, self.last_moves)
        ]

        combined = sum(m * pv for m, pv in zip(moves, self.place_values))
        self.values = [v + m for v, m in zip(self.values, moves)]
        self.last_moves = moves
        self.numbers.append(combined)
        return combined

    def run(self, rows: int) -> bool:
        for r in range(rows):
            if self.step(r) is None:
                return False
        return True
