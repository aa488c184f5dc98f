"""Rounding helpers shared by the stats and handicap engines."""

from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties towards positive infinity.

    ``round()`` uses banker's rounding, which would turn 4.5 GIR into 4.
    """

    return int(math.floor(value + 0.5))


def round1(value: float) -> float:
    """Round to one decimal place with half-up ties."""

    return math.floor(value * 10 + 0.5) / 10


def safe_pct(numerator: float, denominator: float) -> float | None:
    if denominator <= 0:
        return None
    return (numerator / denominator) * 100


__all__ = ["round_half_up", "round1", "safe_pct"]
