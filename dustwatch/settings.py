"""
Configuration helpers for the DustWatch System.

Settings are read from environment variables (a .env file in the working
directory is loaded first). Missing or malformed values fall back to the
defaults, so the dashboard always starts.
"""

import os
from dataclasses import dataclass
from datetime import timedelta
from typing import Optional

from dotenv import load_dotenv


def _env_int(name: str, default: int, minimum: Optional[int] = None) -> int:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    try:
        parsed = int(value)
    except ValueError:
        return default
    if minimum is not None and parsed < minimum:
        return default
    return parsed


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    try:
        return float(value)
    except ValueError:
        return default


def _env_str(name: str, default: Optional[str]) -> Optional[str]:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value.strip()


@dataclass(frozen=True)
class DustWatchSettings:
    # Seed for route synthesis; each ward derives its own stream from it
    route_seed: int = 42

    # Contractor alert policy
    alert_window: int = 3
    alert_threshold: float = 15.0
    staleness_hours: int = 6

    # Dashboard
    critical_list_limit: int = 4

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None

    @property
    def staleness(self) -> timedelta:
        return timedelta(hours=self.staleness_hours)


def load_settings(load_env_file: bool = True) -> DustWatchSettings:
    """
    Load settings from environment variables.

    Args:
        load_env_file: If True, load a .env file into the environment first
            (existing variables are not overridden)
    """
    if load_env_file:
        load_dotenv()

    defaults = DustWatchSettings()

    # numpy seeds must be non-negative; a window needs at least one treatment
    return DustWatchSettings(
        route_seed=_env_int("DUSTWATCH_ROUTE_SEED", defaults.route_seed, minimum=0),
        alert_window=_env_int("DUSTWATCH_ALERT_WINDOW", defaults.alert_window, minimum=1),
        alert_threshold=_env_float("DUSTWATCH_ALERT_THRESHOLD", defaults.alert_threshold),
        staleness_hours=_env_int("DUSTWATCH_STALENESS_HOURS", defaults.staleness_hours, minimum=0),
        critical_list_limit=_env_int("DUSTWATCH_CRITICAL_LIST_LIMIT", defaults.critical_list_limit, minimum=0),
        log_level=(_env_str("DUSTWATCH_LOG_LEVEL", defaults.log_level) or defaults.log_level).upper(),
        log_file=_env_str("DUSTWATCH_LOG_FILE", defaults.log_file),
    )
