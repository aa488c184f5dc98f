"""Small numeric helpers."""

from .numbers import round1, round_half_up, safe_pct  # noqa: F401
