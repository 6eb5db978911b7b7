"""drill_checker.py — check a drill set against soroban column state.

Used by the magnitude contracts, the CLI and the tests. Operates in
report-only mode: returns issue codes, never raises.

Issue codes:
  bad_column_count         → column_count outside the supported range
  empty_numbers            → set has no steps
  wrong_length             → len(numbers) != rows (only when rows is given)
  zero_step                → a step value of 0
  first_step_not_positive  → numbers[0] <= 0
  step_too_wide            → a step has more digits than active columns
  zero_column_move         → a step leaves some column unmoved
  column_out_of_range      → a column leaves [0, 9]
  illegal_bead_move        → a column move is not a direct bead move
  answer_mismatch          → answer != sum(numbers) or != final column value
"""
from soroban.engine.assembler import MAX_COLUMNS, MIN_COLUMNS, place_values_for
from soroban.engine.beads import MAX_VALUE, MIN_VALUE, is_legal_move


def split_step(n: int, place_values: list[int]) -> list[int] | None:
    """Split a combined step value into signed per-column moves.

    All columns in a round share the step's sign, so the digits of |n| are
    the move magnitudes. Returns None if |n| does not fit the columns.
    """
    sign = 1 if n > 0 else -1
    rest = abs(n)
    moves = []
    for pv in place_values:
        digit, rest = divmod(rest, pv)
        if digit > 9:
            return None
        moves.append(sign * digit)
    return moves


def check_drill(drill, column_count: int, rows: int | None = None) -> list[str]:
    """Replay ``drill`` (a DrillSet or {"numbers", "answer"} dict) and list issues."""
    if isinstance(drill, dict):
        numbers = list(drill.get("numbers") or [])
        answer = drill.get("answer")
    else:
        numbers = list(drill.numbers)
        answer = drill.answer

    if not MIN_COLUMNS <= column_count <= MAX_COLUMNS:
        return ["bad_column_count"]

    issues: list[str] = []
    if not numbers:
        return ["empty_numbers"]
    if rows is not None and len(numbers) != rows:
        issues.append("wrong_length")
    if numbers[0] <= 0:
        issues.append("first_step_not_positive")

    place_values = place_values_for(column_count)
    values = [0] * column_count

    def _add(code: str) -> None:
        if code not in issues:
            issues.append(code)

    for n in numbers:
        if n == 0:
            _add("zero_step")
            continue
        moves = split_step(n, place_values)
        if moves is None:
            _add("step_too_wide")
            continue
        for k, m in enumerate(moves):
            if m == 0:
                _add("zero_column_move")
            elif not is_legal_move(values[k], m):
                _add("illegal_bead_move")
            values[k] += m
            if not MIN_VALUE <= values[k] <= MAX_VALUE:
                _add("column_out_of_range")
                values[k] = min(max(values[k], MIN_VALUE), MAX_VALUE)

    final = sum(v * pv for v, pv in zip(values, place_values))
    if answer != sum(numbers) or answer != final:
        issues.append("answer_mismatch")

    return issues
