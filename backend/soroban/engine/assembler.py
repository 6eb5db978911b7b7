"""Drill-set assembly with bounded whole-set retries.

Generation never raises for a dead end: a set that cannot be completed is
left out of the result, and callers that need an exact count over-request.
"""

import logging
import random
from dataclasses import dataclass, field

from .coordinator import DrillAttempt

logger = logging.getLogger("soroban.engine")

MIN_COLUMNS = 1
MAX_COLUMNS = 6
MAX_SET_ATTEMPTS = 50
DEFAULT_MODE = "Mixed"


@dataclass(frozen=True)
class DrillSet:
    numbers: list[int]
    answer: int

    def to_dict(self) -> dict:
        return {"numbers": list(self.numbers), "answer": self.answer}


@dataclass
class SetOutcome:
    drill: DrillSet | None
    attempts: int
    failure: str | None = None

    @property
    def ok(self) -> bool:
        return self.drill is not None


@dataclass
class GenerationReport:
    requested: int
    sets: list[DrillSet] = field(default_factory=list)
    attempts: list[int] = field(default_factory=list)
    failures: dict[str, int] = field(default_factory=dict)

    @property
    def dropped(self) -> int:
        return self.requested - len(self.sets)


def place_values_for(column_count: int) -> list[int]:
    if not MIN_COLUMNS <= column_count <= MAX_COLUMNS:
        raise ValueError(f"column_count must be in [{MIN_COLUMNS}, {MAX_COLUMNS}], got {column_count}")
    return [10 ** k for k in range(column_count - 1, -1, -1)]


def max_attempts_for(column_count: int) -> int:
    # A lone column almost never deadlocks, so it gets a single shot.
    return 1 if column_count == 1 else MAX_SET_ATTEMPTS


def generate_set(rows: int, column_count: int, rng: random.Random) -> SetOutcome:
    """Build one drill set, restarting from zero on any dead end."""
    if rows < 1:
        raise ValueError(f"rows must be >= 1, got {rows}")
    place_values = place_values_for(column_count)

    failure = None
    limit = max_attempts_for(column_count)
    for attempt in range(1, limit + 1):
        state = DrillAttempt(place_values, rng)
        if state.run(rows):
            drill = DrillSet(numbers=list(state.numbers), answer=state.answer)
            return SetOutcome(drill=drill, attempts=attempt)
        failure = state.failure

    return SetOutcome(drill=None, attempts=limit, failure=failure)


def generate_with_report(
    set_count: int,
    rows: int,
    column_count: int,
    rng: random.Random,
    mode: str = DEFAULT_MODE,
) -> GenerationReport:
    """Generate up to ``set_count`` sets and report what was dropped.

    ``mode`` is accepted for compatibility with existing callers and has no
    effect on the output.
    """
    if set_count < 0:
        raise ValueError(f"set_count must be >= 0, got {set_count}")

    report = GenerationReport(requested=set_count)
    for _ in range(set_count):
        outcome = generate_set(rows, column_count, rng)
        if outcome.ok:
            report.sets.append(outcome.drill)
            report.attempts.append(outcome.attempts)
            continue
        report.failures[outcome.failure] = report.failures.get(outcome.failure, 0) + 1
        if column_count > 1:
            logger.warning(
                "dropping drill set after %d attempts (columns=%d rows=%d last_failure=%s)",
                outcome.attempts, column_count, rows, outcome.failure,
            )
        else:
            logger.debug("dropping single-column drill set: %s", outcome.failure)

    logger.info(
        "generated %d/%d sets (columns=%d rows=%d mode=%s dropped=%d)",
        len(report.sets), set_count, column_count, rows, mode, report.dropped,
    )
    return report


def generate_many(
    set_count: int,
    rows: int,
    column_count: int,
    rng: random.Random,
    mode: str = DEFAULT_MODE,
) -> list[DrillSet]:
    """Return the sets that could be built; the list may be short."""
    return generate_with_report(set_count, rows, column_count, rng, mode).sets
