from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

from golfstats.utils.numbers import round1

from .classify import is_fairway_opportunity, is_gir, is_under_gir, up_and_down
from .models import HoleRecord, RoundStats

logger = logging.getLogger(__name__)

# Typical 18-hole layout used when a course does not provide its own pars.
STANDARD_PARS: dict[int, int] = {
    1: 4,
    2: 4,
    3: 3,
    4: 5,
    5: 4,
    6: 4,
    7: 3,
    8: 4,
    9: 5,
    10: 4,
    11: 3,
    12: 4,
    13: 5,
    14: 4,
    15: 4,
    16: 3,
    17: 4,
    18: 4,
}

DEFAULT_PAR = 4


def aggregate(holes: Iterable[HoleRecord]) -> RoundStats:
    """Fold hole-by-hole data into round statistics."""

    total_score = 0
    total_putts = 0
    gir_count = 0
    under_gir_count = 0
    fairways_hit = 0
    up_and_downs = 0
    up_and_down_attempts = 0
    gir_putts = 0
    non_gir_putts = 0
    par_or_better = 0
    holes_seen = 0

    for hole in holes:
        holes_seen += 1
        total_score += hole.score
        total_putts += hole.putts

        hit_gir = is_gir(hole.par, hole.score, hole.putts)
        if hit_gir:
            gir_count += 1
            gir_putts += hole.putts
        else:
            non_gir_putts += hole.putts

        if is_under_gir(hole.par, hole.score, hole.putts):
            under_gir_count += 1

        attempt = up_and_down(hole.par, hole.score, hole.putts, hit_gir)
        if attempt.is_attempt:
            up_and_down_attempts += 1
            if attempt.is_success:
                up_and_downs += 1

        if is_fairway_opportunity(hole) and hole.fairway_hit:
            fairways_hit += 1

        if hole.score <= hole.par:
            par_or_better += 1

    scrambling = (
        (up_and_downs / up_and_down_attempts) * 100 if up_and_down_attempts else 0.0
    )

    logger.debug(
        "aggregated %d holes: gir=%d scrambling=%d/%d",
        holes_seen,
        gir_count,
        up_and_downs,
        up_and_down_attempts,
    )

    return RoundStats(
        total_score=total_score,
        total_putts=total_putts,
        greens_in_regulation=gir_count,
        under_gir=under_gir_count,
        fairways_in_regulation=fairways_hit,
        up_and_downs=up_and_downs,
        up_and_down_attempts=up_and_down_attempts,
        gir_putts=gir_putts,
        non_gir_putts=non_gir_putts,
        scrambling=round1(scrambling),
        par_or_better=par_or_better,
    )


def generate_default_holes(
    num_holes: int = 18, custom_pars: Optional[Sequence[int]] = None
) -> list[HoleRecord]:
    """Blank scorecard with zero score and putts, ready for entry."""

    holes: list[HoleRecord] = []
    for number in range(1, num_holes + 1):
        par = None
        if custom_pars is not None and number <= len(custom_pars):
            par = custom_pars[number - 1]
        holes.append(
            HoleRecord(
                hole_number=number,
                par=par or STANDARD_PARS.get(number) or DEFAULT_PAR,
                score=0,
                putts=0,
                fairway_hit=None,
            )
        )
    return holes


__all__ = ["STANDARD_PARS", "DEFAULT_PAR", "aggregate", "generate_default_holes"]
