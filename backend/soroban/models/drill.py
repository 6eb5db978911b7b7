from pydantic import BaseModel, Field, field_validator, model_validator
from typing import Literal, Optional

from soroban.engine.assembler import DEFAULT_MODE
from soroban.services.session import clamp_rounds, clamp_rows

MagnitudeTag = Literal[
    "units", "tens", "hundreds", "thousands", "ten_thousands", "hundred_thousands",
]

MAGNITUDE_COLUMNS: dict[str, int] = {
    "units": 1,
    "tens": 2,
    "hundreds": 3,
    "thousands": 4,
    "ten_thousands": 5,
    "hundred_thousands": 6,
}


class DrillSetOut(BaseModel):
    numbers: list[int]
    answer: int


class GenerateRequest(BaseModel):
    set_count: int = Field(ge=0)
    rows: int = 10
    column_count: Optional[int] = Field(default=None, ge=1, le=6)
    magnitude: Optional[MagnitudeTag] = None
    mode: str = DEFAULT_MODE  # reserved, no effect on generation
    seed: Optional[int] = None

    @field_validator("rows")
    @classmethod
    def _clamp_rows(cls, v: int) -> int:
        return clamp_rows(v)

    @model_validator(mode="after")
    def _resolve_columns(self):
        if self.column_count is None and self.magnitude is None:
            self.column_count = 1
        elif self.column_count is None:
            self.column_count = MAGNITUDE_COLUMNS[self.magnitude]
        elif self.magnitude is not None and MAGNITUDE_COLUMNS[self.magnitude] != self.column_count:
            raise ValueError("magnitude and column_count disagree")
        return self


class GenerateResponse(BaseModel):
    sets: list[DrillSetOut]
    requested: int
    dropped: int
    generation_time_ms: int


class SessionRequest(BaseModel):
    total_rounds: int = 5
    rows: int = 10
    magnitude: MagnitudeTag = "units"
    mode: str = DEFAULT_MODE
    seed: Optional[int] = None

    @field_validator("rows")
    @classmethod
    def _clamp_rows(cls, v: int) -> int:
        return clamp_rows(v)

    @field_validator("total_rounds")
    @classmethod
    def _clamp_rounds(cls, v: int) -> int:
        return clamp_rounds(v)


class SessionResponse(BaseModel):
    magnitude: str
    rows: int
    sets: list[DrillSetOut]
    shortfall: int


class MagnitudeInfo(BaseModel):
    magnitude: str
    column_count: int
    label: str
