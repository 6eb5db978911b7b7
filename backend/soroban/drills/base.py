"""Base magnitude contract for flash-drill generation.

Every magnitude (units, tens, ... hundred thousands) is one MagnitudeContract
instance that only differs by how many decimal columns it drives.
"""

import random

from soroban.engine.assembler import (
    DEFAULT_MODE,
    DrillSet,
    GenerationReport,
    generate_with_report,
    place_values_for,
)
from soroban.utils.drill_checker import check_drill, split_step

from .drill_metadata import label_for


class MagnitudeContract:
    magnitude_tag: str = ""
    column_count: int = 1

    @property
    def label(self) -> str:
        return label_for(self.magnitude_tag)

    @property
    def place_values(self) -> list[int]:
        return place_values_for(self.column_count)

    def generate(
        self,
        set_count: int,
        rows: int,
        rng: random.Random,
        mode: str = DEFAULT_MODE,
    ) -> GenerationReport:
        return generate_with_report(set_count, rows, self.column_count, rng, mode)

    def validate(self, drill: DrillSet | dict, rows: int | None = None) -> list[str]:
        return check_drill(drill, self.column_count, rows)

    def explain(self, drill: DrillSet | dict) -> dict:
        """
        Deterministic walkthrough of a drill set.
        Returns:
        {
            "steps": [str, ...],
            "final_answer": str | None
        }
        """
        if isinstance(drill, dict):
            numbers, answer = drill.get("numbers") or [], drill.get("answer")
        else:
            numbers, answer = drill.numbers, drill.answer

        if not numbers:
            return {"steps": [], "final_answer": None}

        steps = []
        total = 0
        for i, n in enumerate(numbers, start=1):
            total += n
            moves = split_step(n, self.place_values) or []
            cols = " ".join(f"{m:+d}" for m in moves)
            steps.append(f"Step {i}: {n:+d} [{cols}] → {total}")

        return {
            "steps": steps,
            "final_answer": None if answer is None else str(answer),
        }
