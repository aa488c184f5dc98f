from __future__ import annotations

from typing import Callable, Iterable, Optional

from .models import HoleRecord, Streaks

HoleOutcome = Callable[[HoleRecord], Optional[bool]]


def longest_streak(outcomes: Iterable[Optional[bool]]) -> int:
    """Longest run of ``True``; ``None`` entries are skipped without a reset."""

    current = 0
    longest = 0
    for outcome in outcomes:
        if outcome is None:
            continue
        if outcome:
            current += 1
            longest = max(longest, current)
        else:
            current = 0
    return longest


def fairway_outcome(hole: HoleRecord) -> Optional[bool]:
    if hole.par <= 3 or hole.fairway_hit is None:
        return None
    return hole.fairway_hit


def no_three_putt_outcome(hole: HoleRecord) -> Optional[bool]:
    return hole.putts < 3


def no_double_bogey_outcome(hole: HoleRecord) -> Optional[bool]:
    if hole.score <= 0 or hole.par <= 0:
        return None
    return hole.score - hole.par < 2


def streak_for(holes: Iterable[HoleRecord], outcome: HoleOutcome) -> int:
    return longest_streak(outcome(hole) for hole in holes)


def compute_streaks(holes: Iterable[HoleRecord]) -> Streaks:
    """Longest streaks over a chronologically ordered, flattened hole list."""

    ordered = list(holes)
    return Streaks(
        fairway=streak_for(ordered, fairway_outcome),
        no_three_putt=streak_for(ordered, no_three_putt_outcome),
        no_double_bogey=streak_for(ordered, no_double_bogey_outcome),
    )


__all__ = [
    "HoleOutcome",
    "longest_streak",
    "fairway_outcome",
    "no_three_putt_outcome",
    "no_double_bogey_outcome",
    "streak_for",
    "compute_streaks",
]
