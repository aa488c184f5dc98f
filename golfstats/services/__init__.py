"""Service layer exports."""

from . import player_stats

__all__ = ["player_stats"]
