from .classify import is_fairway_opportunity, is_gir, is_under_gir, up_and_down
from .estimate import estimate_from_totals
from .models import (
    EstimatedStats,
    HoleRecord,
    RoundRecord,
    RoundStats,
    Streaks,
    UpAndDown,
)
from .scorecard import format_statistic, score_name
from .stats import STANDARD_PARS, aggregate, generate_default_holes
from .streaks import compute_streaks, longest_streak
from .validation import validate_holes

__all__ = [
    "HoleRecord",
    "RoundRecord",
    "RoundStats",
    "EstimatedStats",
    "Streaks",
    "UpAndDown",
    "STANDARD_PARS",
    "is_gir",
    "is_under_gir",
    "is_fairway_opportunity",
    "up_and_down",
    "aggregate",
    "estimate_from_totals",
    "generate_default_holes",
    "compute_streaks",
    "longest_streak",
    "validate_holes",
    "score_name",
    "format_statistic",
]
