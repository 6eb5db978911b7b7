import random
from typing import Optional


def get_rng(seed: Optional[int] = None) -> random.Random:
    """Return the randomness source for one generation call.

    Each request gets its own instance so concurrent requests never share
    state; a seed makes the output reproducible.
    """
    if seed is None:
        return random.Random()
    return random.Random(seed)
