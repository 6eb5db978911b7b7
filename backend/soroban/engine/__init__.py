from .assembler import (
    DEFAULT_MODE,
    MAX_COLUMNS,
    MAX_SET_ATTEMPTS,
    MIN_COLUMNS,
    DrillSet,
    GenerationReport,
    SetOutcome,
    generate_many,
    generate_set,
    generate_with_report,
    place_values_for,
)
from .beads import valid_moves
from .sampler import pick_weighted_move

__all__ = [
    "DEFAULT_MODE",
    "MAX_COLUMNS",
    "MAX_SET_ATTEMPTS",
    "MIN_COLUMNS",
    "DrillSet",
    "GenerationReport",
    "SetOutcome",
    "generate_many",
    "generate_set",
    "generate_with_report",
    "place_values_for",
    "valid_moves",
    "pick_weighted_move",
]
