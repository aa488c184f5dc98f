"""Scoring differential for a single round."""

from __future__ import annotations

from typing import Optional

from golfstats.utils.numbers import round1

STANDARD_SLOPE = 113


def differential(
    score: float,
    course_rating: Optional[float],
    slope_rating: Optional[float],
) -> Optional[float]:
    """Return ``(113 / slope) * (score - rating)`` rounded to one decimal.

    A missing (or zero) rating leaves the differential undefined and yields
    ``None``. The value may be negative for rounds better than the rating.
    """

    if not course_rating or not slope_rating:
        return None

    value = (STANDARD_SLOPE / slope_rating) * (score - course_rating)
    return round1(value)


__all__ = ["STANDARD_SLOPE", "differential"]
