"""Normalize recurring local rate windows into UTC army time.

A rate such as ``{"days": "mon", "times": "0900-2100", "tz": "America/Chicago"}``
is anchored to the next Monday in Chicago (relative to "now"), converted to
UTC, and stored as a pair of army-time values (``hours * 100 + minutes``).
When the UTC window runs past midnight the end value gets 2400 added so the
interval stays contiguous: 09:00-21:00 CDT becomes 1400-2600.

Anchoring depends on the current date, so the same rule ingested on two
different days can normalize differently around daylight saving changes.
"""

import logging
import re
from collections.abc import Callable
from datetime import UTC, date, datetime, timedelta
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from spotrate.rates.errors import (
    MalformedTimeRangeError,
    UnknownDayCodeError,
    UnknownTimezoneError,
)
from spotrate.rates.models import RateDetail, WeekdayRule

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

# Indexed by ``datetime.weekday()``
WEEKDAY_NAMES: tuple[str, ...] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

# Abbreviated day codes accepted in rate definitions
DAY_CODES: dict[str, str] = {
    "mon": "Monday",
    "tues": "Tuesday",
    "wed": "Wednesday",
    "thurs": "Thursday",
    "fri": "Friday",
    "sat": "Saturday",
    "sun": "Sunday",
}

# Midnight wraparound offset in army time
WRAPAROUND = 2400

_CLOCK_TOKEN = re.compile(r"\d{1,4}", re.ASCII)


def utc_now() -> datetime:
    """Default clock for anchoring rates."""
    return datetime.now(UTC)


def weekday_name(dt: datetime | date) -> str:
    """Get the canonical weekday name (e.g. ``"Monday"``) for a date."""
    return WEEKDAY_NAMES[dt.weekday()]


def resolve_day_code(code: str) -> str:
    """Map a day abbreviation (``"tues"``) to its weekday name (``"Tuesday"``).

    Raises:
        UnknownDayCodeError: If the code is not recognized
    """
    try:
        return DAY_CODES[code.strip()]
    except KeyError:
        raise UnknownDayCodeError(code) from None


def parse_time_range(times: str) -> tuple[tuple[int, int], tuple[int, int]]:
    """Parse ``"HHMM-HHMM"`` into ``((start_h, start_m), (end_h, end_m))``.

    Raises:
        MalformedTimeRangeError: If the range does not hold exactly two
            numeric clock values, or a value is not a valid time of day
    """
    tokens = times.split("-")
    if len(tokens) != 2:
        raise MalformedTimeRangeError(times)

    clocks = []
    for token in tokens:
        token = token.strip()
        if not _CLOCK_TOKEN.fullmatch(token):
            raise MalformedTimeRangeError(times)
        value = int(token)
        hours, minutes = value // 100, value % 100
        if hours > 23 or minutes > 59:
            raise MalformedTimeRangeError(times, f"{token} is not a valid time of day")
        clocks.append((hours, minutes))

    return clocks[0], clocks[1]


def load_zone(name: str) -> ZoneInfo:
    """Resolve an IANA timezone name.

    Raises:
        UnknownTimezoneError: If the name is empty or not in the tz database
    """
    if not name:
        raise UnknownTimezoneError(name)
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        raise UnknownTimezoneError(name) from None


def army_time(dt: datetime) -> float:
    """Get the UTC army time of an instant.

    ``12:15:00Z`` is ``1215.0``; seconds count as fractions of an hour, so
    ``12:15:23Z`` is ``1215.0063...``.
    """
    dt = dt.astimezone(UTC)
    return dt.hour * 100 + dt.minute + dt.second / 3600


def anchor_date(now: datetime, zone: ZoneInfo, weekday: str) -> date:
    """Find the next local date (today included) that falls on ``weekday``.

    ``now`` is localized to ``zone`` first, then advanced one day at a
    time, so the result is at most six days after the local date of ``now``.
    """
    local = now.astimezone(zone)
    while weekday_name(local) != weekday:
        local += timedelta(days=1)
    return local.date()


def normalize_window(
    weekday: str,
    start: tuple[int, int],
    end: tuple[int, int],
    zone: ZoneInfo,
    now: datetime,
    price: int = 0,
) -> WeekdayRule:
    """Convert one local weekday window into a UTC ``WeekdayRule``."""
    day = anchor_date(now, zone, weekday)
    utc_start = datetime(day.year, day.month, day.day, *start, tzinfo=zone).astimezone(UTC)
    utc_end = datetime(day.year, day.month, day.day, *end, tzinfo=zone).astimezone(UTC)

    start_clock = army_time(utc_start)
    end_clock = army_time(utc_end)
    # Window crossed UTC midnight: keep it contiguous for comparisons
    if end_clock < start_clock:
        end_clock += WRAPAROUND

    return WeekdayRule(
        weekday=weekday_name(utc_start),
        start_clock=start_clock,
        end_clock=end_clock,
        price=price,
        source_timezone=zone.key,
    )


def normalize_rate(detail: RateDetail, now: datetime) -> list[tuple[str, WeekdayRule]]:
    """Normalize a rate definition for every day it lists.

    Args:
        detail: The rate as authored (local days, times and timezone)
        now: Reference instant used to anchor each weekday

    Returns:
        ``(local_weekday, rule)`` pairs in the order the days were listed.
        The local weekday is the bucket key; ``rule.weekday`` is the UTC
        weekday of the window start and may differ.

    Raises:
        UnknownDayCodeError, MalformedTimeRangeError, UnknownTimezoneError
    """
    weekdays = [resolve_day_code(code) for code in detail.days.split(",")]
    start, end = parse_time_range(detail.times)
    zone = load_zone(detail.tz)

    results = []
    for weekday in weekdays:
        rule = normalize_window(weekday, start, end, zone, now, price=detail.price)
        if rule.weekday != weekday:
            logger.debug(
                "Rate %s %s (%s) starts on %s in UTC",
                weekday,
                detail.times,
                detail.tz,
                rule.weekday,
            )
        results.append((weekday, rule))
    return results
