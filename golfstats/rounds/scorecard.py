from __future__ import annotations

from typing import Optional

from golfstats.utils.numbers import round_half_up

_SCORE_NAMES = {
    -2: "Eagle",
    -1: "Birdie",
    0: "Par",
    1: "Bogey",
    2: "Double Bogey",
    3: "Triple Bogey",
}


def score_name(score: Optional[int], par: int) -> str:
    """Name a hole result relative to par ("Birdie", "Bogey", "+4", ...)."""

    if not score:
        return "No Score"
    diff = score - par
    if diff <= -3:
        return "Albatross"
    if diff in _SCORE_NAMES:
        return _SCORE_NAMES[diff]
    return f"+{diff}"


def format_statistic(numerator: int, denominator: int) -> str:
    if denominator == 0:
        return "-"
    percentage = round_half_up((numerator / denominator) * 100)
    return f"{numerator}/{denominator} ({percentage}%)"


__all__ = ["score_name", "format_statistic"]
