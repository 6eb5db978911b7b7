"""Bead-transition rules for a single soroban column.

A column holds a value 0-9: one heaven bead worth 5 and four earth beads
worth 1 each. A move is a signed digit that must be performed as one direct
bead manipulation, without borrowing from or carrying into a neighbour
column and without the five/ten complement tricks.
"""

MIN_VALUE = 0
MAX_VALUE = 9

PLUS = 1
MINUS = -1


def heaven_active(value: int) -> bool:
    return value >= 5


def earth_count(value: int) -> int:
    return value % 5


def _is_legal(value: int, n: int) -> bool:
    magnitude = abs(n)
    uses_heaven = magnitude >= 5
    earth_n = magnitude % 5

    if n > 0:
        if value + n > MAX_VALUE:
            return False
        if uses_heaven and heaven_active(value):
            return False
        return earth_count(value) + earth_n <= 4

    if value + n < MIN_VALUE:
        return False
    if uses_heaven and not heaven_active(value):
        return False
    return earth_count(value) - earth_n >= 0


def valid_moves(value: int, sign: int | None = None) -> list[int]:
    """Return the legal moves from ``value``, ascending.

    ``sign`` restricts the result to additions (+1) or subtractions (-1);
    None returns both directions. An empty list is a valid answer: there is
    no direct move in that direction from this state.
    """
    if not MIN_VALUE <= value <= MAX_VALUE:
        raise ValueError(f"column value out of range: {value}")
    if sign not in (PLUS, MINUS, None):
        raise ValueError(f"sign must be +1, -1 or None, got {sign!r}")

    moves = []
    for n in range(-9, 10):
        if n == 0:
            continue
        if sign == PLUS and n < 0:
            continue
        if sign == MINUS and n > 0:
            continue
        if _is_legal(value, n):
            moves.append(n)
    return moves


def is_legal_move(value: int, n: int) -> bool:
    """True when ``n`` is a direct bead move from ``value``."""
    if n == 0 or abs(n) > 9 or not MIN_VALUE <= value <= MAX_VALUE:
        return False
    return _is_legal(value, n)
