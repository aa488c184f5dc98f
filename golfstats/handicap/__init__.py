"""USGA-style scoring differentials and Handicap Index."""

from .differential import STANDARD_SLOPE, differential  # noqa: F401
from .index import (  # noqa: F401
    HANDICAP_BRACKETS,
    HandicapBracket,
    bracket_for,
    handicap_index,
    index_from_rounds,
    number_of_differentials_used,
)
