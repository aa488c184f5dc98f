"""Player-level statistics across many rounds.

Rounds arrive from storage as :class:`RoundRecord` objects. This module picks
the rounds a view asks for (last N, a date range, one course), folds their
hole-by-hole data into percentages and streaks, and builds the dashboard
summary including the Handicap Index.
"""

from __future__ import annotations

import logging
import time
from datetime import datetime, timezone
from enum import Enum
from typing import Iterable, List, Optional

from golfstats.config import get_settings
from golfstats.handicap import index_from_rounds, number_of_differentials_used
from golfstats.rounds.classify import is_fairway_opportunity, is_gir
from golfstats.rounds.models import HoleRecord, RoundRecord
from golfstats.rounds.streaks import compute_streaks
from golfstats.schemas.player_stats import DashboardStats, PlayerStats, RecentRound
from golfstats.utils.numbers import round1, safe_pct

logger = logging.getLogger(__name__)


class RoundFilter(str, Enum):
    LAST5 = "last5"
    LAST10 = "last10"
    LAST15 = "last15"
    LAST20 = "last20"
    ALLTIME = "alltime"
    DATERANGE = "daterange"
    COURSE = "course"


_LAST_N = {
    RoundFilter.LAST5: 5,
    RoundFilter.LAST10: 10,
    RoundFilter.LAST15: 15,
    RoundFilter.LAST20: 20,
}


def parse_round_filter(value: str | RoundFilter | None) -> RoundFilter:
    if value is None:
        return RoundFilter.ALLTIME
    if isinstance(value, RoundFilter):
        return value
    try:
        return RoundFilter(value.strip().lower())
    except ValueError:
        logger.warning("Unknown round filter %r, falling back to alltime", value)
        return RoundFilter.ALLTIME


def _as_utc(value: datetime) -> datetime:
    # naive timestamps are taken to be UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _most_recent_first(rounds: Iterable[RoundRecord]) -> List[RoundRecord]:
    return sorted(rounds, key=lambda r: _as_utc(r.date_played), reverse=True)


def filter_rounds(
    rounds: Iterable[RoundRecord],
    round_filter: str | RoundFilter | None = None,
    *,
    start_date: Optional[datetime] = None,
    end_date: Optional[datetime] = None,
    course_name: Optional[str] = None,
) -> List[RoundRecord]:
    """Select rounds for a stats view, most recent first."""

    chosen = parse_round_filter(round_filter)
    selected = _most_recent_first(rounds)

    if chosen is RoundFilter.DATERANGE and start_date and end_date:
        start, end = _as_utc(start_date), _as_utc(end_date)
        selected = [r for r in selected if start <= _as_utc(r.date_played) <= end]
    elif chosen is RoundFilter.COURSE and course_name:
        selected = [r for r in selected if r.course_name == course_name]

    limit = _LAST_N.get(chosen)
    if limit is not None:
        selected = selected[:limit]
    return selected


def _flatten_holes(rounds: Iterable[RoundRecord]) -> List[HoleRecord]:
    holes: List[HoleRecord] = []
    for round_record in rounds:
        holes.extend(round_record.hole_by_hole or [])
    return holes


def compute_player_stats(rounds: Iterable[RoundRecord]) -> PlayerStats:
    """Totals, percentages and streaks over a set of rounds."""

    ordered = _most_recent_first(rounds)
    if not ordered:
        return PlayerStats()

    total_score = sum(r.score for r in ordered)

    rounds_with_putts = [r for r in ordered if r.putts]
    total_putts = sum(r.putts or 0 for r in rounds_with_putts)
    total_gir_putts = sum(r.gir_putts or 0 for r in ordered)

    total_gir = 0
    gir_opportunities = 0
    total_fir = 0
    fir_opportunities = 0

    # streaks run oldest to newest
    chronological = list(reversed(ordered))
    holes = _flatten_holes(chronological)
    for hole in holes:
        gir_opportunities += 1
        if hole.score > 0 and hole.putts >= 0:
            if is_gir(hole.par, hole.score, hole.putts):
                total_gir += 1

        if is_fairway_opportunity(hole):
            fir_opportunities += 1
            if hole.fairway_hit:
                total_fir += 1

    streaks = compute_streaks(holes)

    avg_putts = total_putts / len(rounds_with_putts) if rounds_with_putts else 0.0
    avg_putts_per_gir = total_gir_putts / total_gir if total_gir else 0.0

    return PlayerStats(
        total_rounds=len(ordered),
        gir_percentage=round1(safe_pct(total_gir, gir_opportunities) or 0.0),
        fir_percentage=round1(safe_pct(total_fir, fir_opportunities) or 0.0),
        avg_putts=round1(avg_putts),
        avg_putts_per_gir=round1(avg_putts_per_gir),
        avg_score=round1(total_score / len(ordered)),
        fir_streak=streaks.fairway,
        no_three_putt_streak=streaks.no_three_putt,
        no_double_bogey_streak=streaks.no_double_bogey,
        total_gir=total_gir,
        total_gir_opportunities=gir_opportunities,
        total_fir=total_fir,
        total_fir_opportunities=fir_opportunities,
    )


def _rounded_or_none(value: Optional[float]) -> Optional[float]:
    if not value:
        return None
    return round1(value)


def _fairways_for(holes: int, fairways_per_18: int) -> int:
    return fairways_per_18 if holes == 18 else fairways_per_18 // 2


def build_dashboard(
    rounds: Iterable[RoundRecord],
    stored_handicap_index: Optional[float] = None,
) -> DashboardStats:
    """Summary numbers for a player's home screen."""

    started = time.perf_counter()
    settings = get_settings()
    ordered = _most_recent_first(rounds)

    eighteen = [r for r in ordered if r.holes == 18]
    average_score = (
        sum(r.score for r in eighteen) / len(eighteen) if eighteen else None
    )

    with_gir = [r for r in ordered if r.greens_in_regulation is not None]
    gir_pct = safe_pct(
        sum(r.greens_in_regulation or 0 for r in with_gir),
        sum(r.holes for r in with_gir),
    )

    with_fir = [r for r in ordered if r.fairways_in_regulation is not None]
    fir_pct = safe_pct(
        sum(r.fairways_in_regulation or 0 for r in with_fir),
        sum(_fairways_for(r.holes, settings.standard_fairways_18) for r in with_fir),
    )

    with_putts = [r for r in ordered if r.putts is not None]
    average_putts = (
        sum(r.putts or 0 for r in with_putts) / len(with_putts) if with_putts else None
    )

    with_up_down = [
        r
        for r in ordered
        if r.up_and_downs is not None and r.up_and_down_attempts is not None
    ]
    up_down_pct = safe_pct(
        sum(r.up_and_downs or 0 for r in with_up_down),
        sum(r.up_and_down_attempts or 0 for r in with_up_down),
    )

    rounds_with_differential = sum(
        1 for r in ordered if r.handicap_differential is not None
    )

    recent = [
        RecentRound(
            id=r.id,
            course_name=r.course_name,
            date_played=r.date_played,
            score=r.score,
            holes=r.holes,
            handicap_differential=r.handicap_differential,
        )
        for r in ordered[: settings.recent_rounds_limit]
    ]

    stats = DashboardStats(
        handicap_index=stored_handicap_index,
        calculated_handicap_index=index_from_rounds(ordered),
        number_of_differentials_used=number_of_differentials_used(
            rounds_with_differential
        ),
        total_rounds=len(ordered),
        rounds_with_differential=rounds_with_differential,
        average_score=_rounded_or_none(average_score),
        greens_in_regulation_pct=_rounded_or_none(gir_pct),
        fairways_in_regulation_pct=_rounded_or_none(fir_pct),
        average_putts=_rounded_or_none(average_putts),
        up_and_down_pct=_rounded_or_none(up_down_pct),
        recent_rounds=recent,
    )

    duration_ms = (time.perf_counter() - started) * 1000
    logger.info(
        "Dashboard stats calculated",
        extra={
            "dashboard": {
                "totalRounds": stats.total_rounds,
                "hasHandicap": stored_handicap_index is not None,
                "statsAvailable": {
                    "gir": stats.greens_in_regulation_pct is not None,
                    "fir": stats.fairways_in_regulation_pct is not None,
                    "putts": stats.average_putts is not None,
                    "upDown": stats.up_and_down_pct is not None,
                },
                "durationMs": int(max(0, round(duration_ms))),
            }
        },
    )
    return stats


__all__ = [
    "RoundFilter",
    "parse_round_filter",
    "filter_rounds",
    "compute_player_stats",
    "build_dashboard",
]
