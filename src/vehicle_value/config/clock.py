"""
Clock for the year rule.

The hook decides "the current year" in a configured timezone instead of
changing the process timezone. Tests pass a fixed clock.
"""
import logging
from datetime import datetime, timezone as dt_timezone
from typing import Callable
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import pytz

logger = logging.getLogger(__name__)

YearClock = Callable[[], int]


def now_in_timezone(timezone: str) -> datetime:
    """Current time localized to timezone."""
    utc_now = datetime.now(dt_timezone.utc)
    try:
        return utc_now.astimezone(ZoneInfo(timezone))
    except ZoneInfoNotFoundError:
        # Hosts without a system tz database (slim Lambda images); pytz ships its own
        logger.debug(f"zoneinfo has no {timezone}, using pytz")
        return utc_now.astimezone(pytz.timezone(timezone))


def current_year_clock(timezone: str) -> YearClock:
    """Clock returning the current year in timezone."""
    def clock() -> int:
        return now_in_timezone(timezone).year
    return clock


def fixed_year_clock(year: int) -> YearClock:
    """Clock that always returns year."""
    return lambda: year
