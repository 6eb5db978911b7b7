"""Weighted anti-repetition move picker.

Hard digits (6-9) get three tickets in the pool against one for 1-5, and a
pick that exactly undoes the column's previous move is re-drawn up to
MAX_PICK_ATTEMPTS times before being accepted anyway.
"""

import random

HARD_DIGIT_MIN = 6
HARD_DIGIT_COPIES = 3
MAX_PICK_ATTEMPTS = 8


def build_candidate_pool(valid_moves: list[int]) -> list[int]:
    pool = []
    for n in valid_moves:
        copies = HARD_DIGIT_COPIES if abs(n) >= HARD_DIGIT_MIN else 1
        pool.extend([n] * copies)
    return pool


def _draw(pool: list[int], rng: random.Random) -> int:
    # floor(u * len) keeps the draw on a single rng.random() call
    return pool[int(rng.random() * len(pool))]


def pick_weighted_move(valid_moves: list[int], last_move: int, rng: random.Random) -> int:
    """Pick one move from ``valid_moves``, avoiding ``-last_move`` where possible.

    When every attempt lands on the reversal, one more draw is taken and
    accepted whatever it is, so the pick always terminates.
    """
    if not valid_moves:
        raise ValueError("pick_weighted_move needs at least one valid move")

    pool = build_candidate_pool(valid_moves)
    only_choice = len(valid_moves) == 1

    for _ in range(MAX_PICK_ATTEMPTS):
        candidate = _draw(pool, rng)
        if candidate != -last_move or only_choice:
            return candidate

    return _draw(pool, rng)
