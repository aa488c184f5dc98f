"""Golf round statistics and handicap engine."""

from golfstats.handicap import (  # noqa: F401
    differential,
    handicap_index,
    index_from_rounds,
    number_of_differentials_used,
)
from golfstats.rounds import (  # noqa: F401
    HoleRecord,
    RoundRecord,
    RoundStats,
    aggregate,
    estimate_from_totals,
    is_gir,
    is_under_gir,
    up_and_down,
)
from golfstats.services.player_stats import (  # noqa: F401
    RoundFilter,
    build_dashboard,
    compute_player_stats,
    filter_rounds,
)
