"""Per-hole classification from score and putts.

Score and putts alone cannot tell where each shot finished, so GIR and
up-and-down are heuristics:

* the green counts as hit in regulation when the strokes before the first
  putt are at most ``par - 2``, when par was made with two or more putts, or
  when the hole was played under par;
* par with fewer than two putts (a chip-in or a one-putt save) is treated as
  a missed green, so short-game recoveries are kept apart from real GIR.
"""

from __future__ import annotations

from .models import HoleRecord, UpAndDown


def is_gir(par: int, score: int, putts: int) -> bool:
    strokes_to_green = score - putts
    if strokes_to_green <= par - 2:
        return True
    if score == par and putts >= 2:
        return True
    # birdie or better without hitting the green is rare enough to ignore
    if score < par:
        return True
    return False


def is_under_gir(par: int, score: int, putts: int) -> bool:
    """True when the green was reached in ``par - 3`` or fewer (eagle putt)."""

    if par <= 3:
        return False
    strokes_to_green = score - putts
    return 0 < strokes_to_green <= par - 3


def up_and_down(par: int, score: int, putts: int, hit_gir: bool) -> UpAndDown:
    if hit_gir:
        return UpAndDown(is_attempt=False, is_success=False)
    return UpAndDown(is_attempt=True, is_success=score <= par)


def is_fairway_opportunity(hole: HoleRecord) -> bool:
    """Par 4/5 holes with a recorded fairway result."""

    return hole.par > 3 and hole.fairway_hit is not None


__all__ = ["is_gir", "is_under_gir", "up_and_down", "is_fairway_opportunity"]
