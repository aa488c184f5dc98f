"""Configuration for the stats and handicap engine."""

from __future__ import annotations

import logging
import os
from functools import lru_cache

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class _Settings(BaseSettings):
    log_level: str = Field(default="INFO", alias="GOLFSTATS_LOG_LEVEL")
    default_holes: int = Field(default=18, alias="GOLFSTATS_DEFAULT_HOLES")
    default_course_par: int = Field(default=72, alias="GOLFSTATS_DEFAULT_COURSE_PAR")
    recent_rounds_limit: int = Field(default=5, alias="GOLFSTATS_RECENT_ROUNDS")
    standard_fairways_18: int = Field(
        default=14, alias="GOLFSTATS_STANDARD_FAIRWAYS_18"
    )

    model_config = SettingsConfigDict(
        env_file=".env", extra="ignore", populate_by_name=True
    )


@lru_cache(maxsize=1)
def get_settings() -> _Settings:
    """Return cached application settings.

    A malformed environment value does not stop the engine: the defaults are
    used and the problem is logged.
    """

    try:
        return _Settings()  # type: ignore[call-arg]
    except ValidationError as exc:
        logger.warning("Invalid golfstats settings, using defaults: %s", exc)
        return _Settings.model_construct()


def reset_settings_cache() -> None:
    """Clear cached settings (primarily for tests)."""

    get_settings.cache_clear()


def env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """Apply the configured level to the ``golfstats`` logger tree."""

    resolved = level if level is not None else get_settings().log_level
    if isinstance(resolved, str):
        name = resolved.strip().upper()
        numeric = logging.getLevelName(name)
        if not isinstance(numeric, int):
            logger.warning(
                "Unknown GOLFSTATS_LOG_LEVEL=%r, falling back to INFO", resolved
            )
            numeric = logging.INFO
        resolved = numeric

    root = logging.getLogger("golfstats")
    root.setLevel(resolved)
    if env_bool("GOLFSTATS_LOG_STDERR", False) and not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        root.addHandler(handler)
    return root


__all__ = [
    "_Settings",
    "configure_logging",
    "env_bool",
    "get_settings",
    "reset_settings_cache",
]
