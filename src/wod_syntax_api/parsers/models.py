"""
WOD Models

Pydantic models for the structured document produced by the WOD syntax parser.
All models are frozen and use tuples for sequences, so a parsed document
cannot be changed once it has been returned.

The ``type`` discriminators match the keys stored in the parsed-workout cache
("exercise", "special_format", "sets_x_reps", ...).
"""

from enum import Enum
from typing import Annotated, Literal, Optional, Tuple, Union

from pydantic import BaseModel, Field, computed_field


class FormatKind(str, Enum):
    """Special training formats a group header can introduce"""
    AMRAP = "AMRAP"          # As Many Rounds As Possible in a time cap
    EMOM = "EMOM"            # Every Minute On the Minute
    FOR_TIME = "For Time"    # Fixed work, as fast as possible
    ROUNDS = "Rounds"        # Fixed number of circuits


# ---------------------------------------------------------------------------
# Rep schemes
# ---------------------------------------------------------------------------

class SetsReps(BaseModel):
    """Straight sets: ``3x8``"""
    type: Literal["sets_x_reps"] = "sets_x_reps"
    sets: int = Field(..., ge=0)
    reps: int = Field(..., ge=0)

    class Config:
        frozen = True

    @computed_field
    @property
    def display(self) -> str:
        return f"{self.sets}x{self.reps}"


class SetsRepRange(BaseModel):
    """Sets with a rep range: ``3x8-12``"""
    type: Literal["sets_x_rep_range"] = "sets_x_rep_range"
    sets: int = Field(..., ge=0)
    reps_min: int = Field(..., ge=0)
    reps_max: int = Field(..., ge=0)

    class Config:
        frozen = True

    @computed_field
    @property
    def display(self) -> str:
        return f"{self.sets}x{self.reps_min}-{self.reps_max}"


class Ladder(BaseModel):
    """Per-round rep counts: ``5-5-5-3-3-1``"""
    type: Literal["rep_ladder"] = "rep_ladder"
    rounds: Tuple[int, ...] = Field(..., min_length=2)
    source: Optional[str] = Field(default=None, description="Ladder exactly as written")

    class Config:
        frozen = True

    @computed_field
    @property
    def display(self) -> str:
        if self.source:
            return self.source
        return "-".join(str(r) for r in self.rounds)


class PlainReps(BaseModel):
    """A single rep count: ``5``"""
    type: Literal["single_set"] = "single_set"
    reps: int = Field(..., ge=0)

    class Config:
        frozen = True

    @computed_field
    @property
    def display(self) -> str:
        return str(self.reps)


RepScheme = Annotated[
    Union[SetsReps, SetsRepRange, Ladder, PlainReps],
    Field(discriminator="type"),
]


# ---------------------------------------------------------------------------
# Entries, blocks, document
# ---------------------------------------------------------------------------

class ExerciseEntry(BaseModel):
    """
    A single exercise.

    Top-level lines carry a ``scheme``; lines nested under a format header
    carry a leading rep count in ``reps`` (or nothing for holds and
    time-based movements).
    """
    type: Literal["exercise"] = "exercise"
    name: str = Field(..., min_length=1, description="Exercise name as written")
    scheme: Optional[RepScheme] = None
    reps: Optional[int] = Field(default=None, ge=0)
    loggable: bool = Field(default=False, description="Name was written as [Name]")

    class Config:
        frozen = True


class FormatGroupEntry(BaseModel):
    """An AMRAP / EMOM / For Time / Rounds header with its nested exercises"""
    type: Literal["special_format"] = "special_format"
    format: FormatKind
    duration_minutes: Optional[int] = Field(default=None, ge=1)
    rounds: Optional[int] = Field(default=None, ge=1)
    rep_ladder: Optional[Tuple[int, ...]] = None
    description: Optional[str] = None
    exercises: Tuple[ExerciseEntry, ...] = Field(..., min_length=1)

    class Config:
        frozen = True


Entry = Annotated[
    Union[ExerciseEntry, FormatGroupEntry],
    Field(discriminator="type"),
]


class Block(BaseModel):
    """A named section of a workout"""
    name: str = Field(..., min_length=1)
    entries: Tuple[Entry, ...] = Field(default_factory=tuple)

    class Config:
        frozen = True


class WodDocument(BaseModel):
    """Parsed workout: blocks in source order"""
    blocks: Tuple[Block, ...] = Field(..., min_length=1)

    class Config:
        frozen = True
