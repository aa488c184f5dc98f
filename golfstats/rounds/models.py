from __future__ import annotations

import json
from datetime import datetime
from typing import Any, List, NamedTuple, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from golfstats.handicap.differential import differential


class HoleRecord(BaseModel):
    hole_number: int = Field(
        validation_alias=AliasChoices("hole_number", "holeNumber"),
        serialization_alias="holeNumber",
    )
    par: int
    score: int
    putts: int
    fairway_hit: Optional[bool] = Field(
        default=None,
        validation_alias=AliasChoices("fairway_hit", "fairwayHit"),
        serialization_alias="fairwayHit",
    )
    yardage: Optional[int] = None
    handicap: Optional[int] = None

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class RoundStats(BaseModel):
    total_score: int = Field(default=0, serialization_alias="totalScore")
    total_putts: int = Field(default=0, serialization_alias="totalPutts")
    greens_in_regulation: int = Field(
        default=0, serialization_alias="greensInRegulation"
    )
    under_gir: int = Field(default=0, serialization_alias="underGIR")
    fairways_in_regulation: int = Field(
        default=0, serialization_alias="fairwaysInRegulation"
    )
    up_and_downs: int = Field(default=0, serialization_alias="upAndDowns")
    up_and_down_attempts: int = Field(
        default=0, serialization_alias="upAndDownAttempts"
    )
    gir_putts: int = Field(default=0, serialization_alias="girPutts")
    non_gir_putts: int = Field(default=0, serialization_alias="nonGirPutts")
    scrambling: float = 0.0
    par_or_better: int = Field(default=0, serialization_alias="parOrBetter")

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class EstimatedStats(BaseModel):
    """Subset of :class:`RoundStats` that can be guessed from round totals."""

    greens_in_regulation: int = Field(
        default=0, serialization_alias="greensInRegulation"
    )
    up_and_downs: int = Field(default=0, serialization_alias="upAndDowns")
    up_and_down_attempts: int = Field(
        default=0, serialization_alias="upAndDownAttempts"
    )
    gir_putts: int = Field(default=0, serialization_alias="girPutts")
    non_gir_putts: int = Field(default=0, serialization_alias="nonGirPutts")

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class UpAndDown(NamedTuple):
    is_attempt: bool
    is_success: bool


class Streaks(BaseModel):
    fairway: int = Field(default=0, serialization_alias="firStreak")
    no_three_putt: int = Field(default=0, serialization_alias="no3PuttStreak")
    no_double_bogey: int = Field(
        default=0, serialization_alias="noDoubleBogeyStreak"
    )

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class RoundRecord(BaseModel):
    id: int
    course_name: str = Field(
        default="",
        validation_alias=AliasChoices("course_name", "courseName"),
        serialization_alias="courseName",
    )
    date_played: datetime = Field(
        validation_alias=AliasChoices("date_played", "datePlayed"),
        serialization_alias="datePlayed",
    )
    score: int
    holes: int = 18
    course_rating: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices("course_rating", "courseRating"),
        serialization_alias="courseRating",
    )
    slope_rating: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices("slope_rating", "slopeRating"),
        serialization_alias="slopeRating",
    )
    handicap_differential: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices("handicap_differential", "handicapDifferential"),
        serialization_alias="handicapDifferential",
    )

    greens_in_regulation: Optional[int] = Field(
        default=None,
        validation_alias=AliasChoices("greens_in_regulation", "greensInRegulation"),
        serialization_alias="greensInRegulation",
    )
    fairways_in_regulation: Optional[int] = Field(
        default=None,
        validation_alias=AliasChoices(
            "fairways_in_regulation", "fairwaysInRegulation"
        ),
        serialization_alias="fairwaysInRegulation",
    )
    putts: Optional[int] = None
    gir_putts: Optional[int] = Field(
        default=None,
        validation_alias=AliasChoices("gir_putts", "girPutts"),
        serialization_alias="girPutts",
    )
    up_and_downs: Optional[int] = Field(
        default=None,
        validation_alias=AliasChoices("up_and_downs", "upAndDowns"),
        serialization_alias="upAndDowns",
    )
    up_and_down_attempts: Optional[int] = Field(
        default=None,
        validation_alias=AliasChoices("up_and_down_attempts", "upAndDownAttempts"),
        serialization_alias="upAndDownAttempts",
    )
    hole_by_hole: Optional[List[HoleRecord]] = Field(
        default=None,
        validation_alias=AliasChoices("hole_by_hole", "holeByHoleData"),
        serialization_alias="holeByHoleData",
    )

    @field_validator("hole_by_hole", mode="before")
    @classmethod
    def _decode_hole_json(cls, value: Any) -> Any:
        # some stores keep hole detail as a JSON string
        if isinstance(value, str):
            return json.loads(value) if value.strip() else None
        return value

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    def with_differential(self) -> "RoundRecord":
        """Return a copy whose differential matches its score and ratings."""

        value = differential(self.score, self.course_rating, self.slope_rating)
        return self.model_copy(update={"handicap_differential": value})


__all__ = [
    "HoleRecord",
    "RoundStats",
    "EstimatedStats",
    "UpAndDown",
    "Streaks",
    "RoundRecord",
]
