"""
Configuration for the Itinerary Router.

Loads environment variables (optionally from a .env file) and exposes
them as an immutable Settings object.
"""

import logging
import math
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Mapping, Optional, TypeVar

from dotenv import load_dotenv

from src.itinerary_search.exceptions import ValidationError
from src.itinerary_search.feasibility import DEFAULT_MIN_CONNECTION_MINUTES
from src.itinerary_search.models import SearchLimits
from src.itinerary_search.validation import validate_search_inputs

# Load environment variables from .env file
load_dotenv()

T = TypeVar("T")

LOG_LEVELS = tuple(
    logging.getLevelName(level)
    for level in (
        logging.DEBUG,
        logging.INFO,
        logging.WARNING,
        logging.ERROR,
        logging.CRITICAL,
    )
)


class ConfigurationError(ValueError):
    """Raised when an environment variable holds an unusable value."""

    pass


def _read(
    env: Mapping[str, str],
    key: str,
    parse: Callable[[str], T],
    default: Optional[T],
) -> Optional[T]:
    raw = env.get(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return parse(raw.strip())
    except ValueError as e:
        raise ConfigurationError(f"{key}={raw!r} is not valid: {e}") from e


@dataclass(frozen=True)
class Settings:
    """
    Application settings.

    Attributes:
        db_path: SQLite file with a legs table. None serves the built-in
            sample schedule.
        min_connection_minutes: Default minimum connection time.
        max_paths: Optional cap on explored paths per search.
        max_itineraries: Optional cap on itineraries per search.
        search_deadline_seconds: Optional wall-clock limit per search.
        cache_ttl_minutes: How long a loaded catalog stays fresh.
        log_level: Root log level name.
    """

    db_path: Optional[Path] = None
    min_connection_minutes: float = DEFAULT_MIN_CONNECTION_MINUTES
    max_paths: Optional[int] = None
    max_itineraries: Optional[int] = None
    search_deadline_seconds: Optional[float] = None
    cache_ttl_minutes: float = 60.0
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        """Reject settings the search would refuse later."""
        try:
            validate_search_inputs(self.min_connection_minutes, self.search_limits)
        except ValidationError as e:
            raise ConfigurationError(str(e)) from e
        if not math.isfinite(self.cache_ttl_minutes) or self.cache_ttl_minutes <= 0:
            raise ConfigurationError(
                f"cache_ttl_minutes must be a finite number > 0, "
                f"got {self.cache_ttl_minutes}"
            )
        if self.log_level not in LOG_LEVELS:
            raise ConfigurationError(
                f"log_level must be one of {', '.join(LOG_LEVELS)}, "
                f"got {self.log_level!r}"
            )

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from environment variables.

        Args:
            env: Mapping to read from. Defaults to os.environ.

        Raises:
            ConfigurationError: If a value cannot be parsed.
        """
        env = os.environ if env is None else env

        return cls(
            db_path=_read(env, "ITINERARY_DB_PATH", Path, None),
            min_connection_minutes=_read(
                env,
                "ITINERARY_MIN_CONNECTION_MINUTES",
                float,
                DEFAULT_MIN_CONNECTION_MINUTES,
            ),
            max_paths=_read(env, "ITINERARY_MAX_PATHS", int, None),
            max_itineraries=_read(env, "ITINERARY_MAX_ITINERARIES", int, None),
            search_deadline_seconds=_read(
                env, "ITINERARY_SEARCH_DEADLINE_SECONDS", float, None
            ),
            cache_ttl_minutes=_read(env, "ITINERARY_CACHE_TTL_MINUTES", float, 60.0),
            log_level=_read(env, "ITINERARY_LOG_LEVEL", str.upper, "INFO"),
        )

    @property
    def search_limits(self) -> SearchLimits:
        return SearchLimits(
            max_paths=self.max_paths,
            max_itineraries=self.max_itineraries,
            deadline_seconds=self.search_deadline_seconds,
        )
