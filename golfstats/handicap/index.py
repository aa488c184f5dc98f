"""Handicap Index from a history of scoring differentials.

The number of differentials averaged, and any adjustment subtracted from the
average, depend only on how many differentials the player has. The rules live
in :data:`HANDICAP_BRACKETS`, an ordered table matched by round count, so a
rule change is an edit to the table rather than to the code.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Optional, Sequence

from golfstats.utils.numbers import round1

if TYPE_CHECKING:  # pragma: no cover
    from golfstats.rounds.models import RoundRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HandicapBracket:
    min_rounds: int
    max_rounds: Optional[int]
    used: int
    adjustment: float = 0.0

    def matches(self, count: int) -> bool:
        if count < self.min_rounds:
            return False
        return self.max_rounds is None or count <= self.max_rounds


HANDICAP_BRACKETS: tuple[HandicapBracket, ...] = (
    HandicapBracket(1, 3, used=1, adjustment=-2.0),
    HandicapBracket(4, 5, used=1, adjustment=-1.0),
    HandicapBracket(6, 6, used=2, adjustment=-1.0),
    HandicapBracket(7, 8, used=2),
    HandicapBracket(9, 11, used=3),
    HandicapBracket(12, 14, used=4),
    HandicapBracket(15, 16, used=5),
    HandicapBracket(17, 18, used=6),
    HandicapBracket(19, 19, used=7),
    HandicapBracket(20, None, used=8),
)

# No bracket covers zero rounds; lookups fall through to the open-ended one.
_FALLBACK_BRACKET = HANDICAP_BRACKETS[-1]


def bracket_for(count: int) -> HandicapBracket:
    for bracket in HANDICAP_BRACKETS:
        if bracket.matches(count):
            return bracket
    return _FALLBACK_BRACKET


def number_of_differentials_used(total_rounds: int) -> int:
    """How many of the lowest differentials feed the index for *total_rounds*.

    ``0`` reports 8, the open-ended bracket, because no bracket starts at zero.
    """

    return bracket_for(total_rounds).used


def handicap_index(differentials: Sequence[float]) -> Optional[float]:
    """Compute the Handicap Index, or ``None`` when there is no history."""

    count = len(differentials)
    if count == 0:
        return None

    bracket = bracket_for(count)
    lowest = sorted(differentials)[: bracket.used]
    value = sum(lowest) / len(lowest) + bracket.adjustment

    logger.debug(
        "handicap index from %d differentials using lowest %d (adjustment %.1f)",
        count,
        bracket.used,
        bracket.adjustment,
    )
    return round1(max(0.0, value))


def index_from_rounds(rounds: Iterable["RoundRecord"]) -> Optional[float]:
    """Handicap Index over the rounds that carry a differential."""

    valid = [
        r.handicap_differential for r in rounds if r.handicap_differential is not None
    ]
    return handicap_index(valid)


__all__ = [
    "HandicapBracket",
    "HANDICAP_BRACKETS",
    "bracket_for",
    "number_of_differentials_used",
    "handicap_index",
    "index_from_rounds",
]
