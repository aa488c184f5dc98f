from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class PlayerStats(BaseModel):
    total_rounds: int = Field(default=0, alias="totalRounds")
    gir_percentage: float = Field(default=0.0, alias="girPercentage")
    fir_percentage: float = Field(default=0.0, alias="firPercentage")
    avg_putts: float = Field(default=0.0, alias="avgPutts")
    avg_putts_per_gir: float = Field(default=0.0, alias="avgPuttsPerGIR")
    avg_score: float = Field(default=0.0, alias="avgScore")

    fir_streak: int = Field(default=0, alias="firStreak")
    no_three_putt_streak: int = Field(default=0, alias="no3PuttStreak")
    no_double_bogey_streak: int = Field(default=0, alias="noDoubleBogeyStreak")

    total_gir: int = Field(default=0, alias="totalGIR")
    total_gir_opportunities: int = Field(default=0, alias="totalGIROpportunities")
    total_fir: int = Field(default=0, alias="totalFIR")
    total_fir_opportunities: int = Field(default=0, alias="totalFIROpportunities")

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class RecentRound(BaseModel):
    id: int
    course_name: str = Field(alias="courseName")
    date_played: datetime = Field(alias="datePlayed")
    score: int
    holes: int
    handicap_differential: Optional[float] = Field(
        default=None, alias="handicapDifferential"
    )

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class DashboardStats(BaseModel):
    handicap_index: Optional[float] = Field(default=None, alias="handicapIndex")
    calculated_handicap_index: Optional[float] = Field(
        default=None, alias="calculatedHandicapIndex"
    )
    number_of_differentials_used: int = Field(alias="numberOfDifferentialsUsed")
    total_rounds: int = Field(alias="totalRounds")
    rounds_with_differential: int = Field(alias="roundsWithDifferential")
    average_score: Optional[float] = Field(default=None, alias="averageScore")
    greens_in_regulation_pct: Optional[float] = Field(
        default=None, alias="greensInRegulationPct"
    )
    fairways_in_regulation_pct: Optional[float] = Field(
        default=None, alias="fairwaysInRegulationPct"
    )
    average_putts: Optional[float] = Field(default=None, alias="averagePutts")
    up_and_down_pct: Optional[float] = Field(default=None, alias="upAndDownPct")
    recent_rounds: List[RecentRound] = Field(
        default_factory=list, alias="recentRounds"
    )

    model_config = ConfigDict(populate_by_name=True, frozen=True)


__all__ = ["PlayerStats", "RecentRound", "DashboardStats"]
