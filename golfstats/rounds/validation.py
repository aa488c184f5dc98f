"""Sanity checks on hole data before it reaches the calculator."""

from __future__ import annotations

from typing import Iterable

from .models import HoleRecord

MIN_PAR = 3
MAX_PAR = 6


def validate_holes(holes: Iterable[HoleRecord]) -> list[str]:
    """Return one readable message per problem; an empty list means valid."""

    errors: list[str] = []
    for hole in holes:
        prefix = f"Hole {hole.hole_number}"
        if hole.score < 1:
            errors.append(f"{prefix}: Score must be at least 1")
        if hole.putts < 0:
            errors.append(f"{prefix}: Putts cannot be negative")
        if hole.putts > hole.score:
            errors.append(
                f"{prefix}: Putts ({hole.putts}) cannot exceed score ({hole.score})"
            )
        if hole.par < MIN_PAR or hole.par > MAX_PAR:
            errors.append(f"{prefix}: Par must be between {MIN_PAR} and {MAX_PAR}")
    return errors


__all__ = ["MIN_PAR", "MAX_PAR", "validate_holes"]
