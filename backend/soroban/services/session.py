"""
Session planning — turns "N rounds of R rows at magnitude M" into drill sets.

Generation may drop sets it could not complete, so a session always asks
for SPARE_SETS more than it needs and keeps the first ``total_rounds``.
A shortfall is only reported when more sets were dropped than the spare
covers.
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field

from soroban.drills.registry import contract_for
from soroban.engine.assembler import DEFAULT_MODE, DrillSet

logger = logging.getLogger(__name__)

SPARE_SETS = 5
MIN_ROWS = 1
MAX_ROWS = 50
MIN_ROUNDS = 1
MAX_ROUNDS = 50


def clamp_rows(rows: int) -> int:
    return max(MIN_ROWS, min(rows, MAX_ROWS))


def clamp_rounds(total_rounds: int) -> int:
    return max(MIN_ROUNDS, min(total_rounds, MAX_ROUNDS))


@dataclass
class SessionPlan:
    magnitude: str
    rows: int
    total_rounds: int
    sets: list[DrillSet] = field(default_factory=list)
    dropped: int = 0

    @property
    def shortfall(self) -> int:
        return max(0, self.total_rounds - len(self.sets))


def plan_session(
    total_rounds: int,
    rows: int,
    magnitude: str,
    rng: random.Random,
    mode: str = DEFAULT_MODE,
) -> SessionPlan:
    """Generate the drill sets for one practice session.

    Raises KeyError for an unknown magnitude.
    """
    contract = contract_for(magnitude)
    total_rounds = clamp_rounds(total_rounds)
    rows = clamp_rows(rows)

    report = contract.generate(total_rounds + SPARE_SETS, rows, rng, mode)
    plan = SessionPlan(
        magnitude=magnitude,
        rows=rows,
        total_rounds=total_rounds,
        sets=report.sets[:total_rounds],
        dropped=report.dropped,
    )
    if plan.shortfall:
        logger.warning(
            "session short by %d sets (magnitude=%s rows=%d dropped=%d)",
            plan.shortfall, magnitude, rows, report.dropped,
        )
    return plan
