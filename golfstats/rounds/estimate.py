"""Rough round statistics when only total score and putts are known.

Average putts per hole picks a GIR-rate band. The bands are deliberately not
monotonic: very few putts usually means the player chipped close after
missing greens, so it maps to a lower GIR rate than a steady two-putt round.
"""

from __future__ import annotations

import logging
from typing import Optional

from golfstats.config import get_settings
from golfstats.utils.numbers import round_half_up

from .models import EstimatedStats

logger = logging.getLogger(__name__)

# (upper bound on average putts per hole, estimated GIR rate); last band open
GIR_RATE_BANDS: tuple[tuple[float, float], ...] = (
    (1.7, 0.30),
    (2.0, 0.65),
    (2.2, 0.45),
    (float("inf"), 0.25),
)

STROKES_LOST_PER_MISSED_GREEN = 0.5
GOOD_SCRAMBLE_RATE = 0.6
POOR_SCRAMBLE_RATE = 0.3
PUTTS_PER_GIR = 2


def gir_rate_for(avg_putts_per_hole: float) -> float:
    for upper, rate in GIR_RATE_BANDS:
        if avg_putts_per_hole < upper:
            return rate
    return GIR_RATE_BANDS[-1][1]


def estimate_from_totals(
    total_score: int,
    total_putts: int,
    holes: Optional[int] = None,
    course_par: Optional[int] = None,
) -> EstimatedStats:
    settings = get_settings()
    holes = settings.default_holes if holes is None else holes
    course_par = settings.default_course_par if course_par is None else course_par

    if holes <= 0:
        return EstimatedStats()

    avg_putts = total_putts / holes
    estimated_gir = round_half_up(holes * gir_rate_for(avg_putts))

    missed_greens = holes - estimated_gir
    strokes_over_par = total_score - course_par
    expected_over_par = missed_greens * STROKES_LOST_PER_MISSED_GREEN
    if strokes_over_par < expected_over_par:
        scramble_rate = GOOD_SCRAMBLE_RATE
    else:
        scramble_rate = POOR_SCRAMBLE_RATE
    up_and_downs = round_half_up(missed_greens * scramble_rate)
    gir_putts = estimated_gir * PUTTS_PER_GIR

    logger.debug(
        "estimated %d GIR from %.2f putts/hole over %d holes",
        estimated_gir,
        avg_putts,
        holes,
    )

    return EstimatedStats(
        greens_in_regulation=max(0, estimated_gir),
        up_and_downs=max(0, up_and_downs),
        up_and_down_attempts=max(0, missed_greens),
        gir_putts=max(0, gir_putts),
        non_gir_putts=max(0, total_putts - gir_putts),
    )


__all__ = ["GIR_RATE_BANDS", "gir_rate_for", "estimate_from_totals"]
