"""
Wall-clock helpers.

Booking timestamps and the "scheduled in the future" rule depend on the
current time.  Everything that needs it takes a ``Clock`` so tests can
pin the moment with ``FixedClock`` instead of relying on the system
clock.
"""

import re
from calendar import monthrange
from datetime import datetime


DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M:%S"

_DATE_RE = re.compile(r"[0-9]{4}-(0[1-9]|1[0-2])-(0[1-9]|[12][0-9]|3[01])")
_TIME_RE = re.compile(r"([01][0-9]|2[0-3]):[0-5][0-9]:[0-5][0-9]")


class Clock:
    """Source of the current local time."""

    def now(self) -> datetime:
        raise NotImplementedError


class SystemClock(Clock):
    def now(self) -> datetime:
        return datetime.now()


class FixedClock(Clock):
    """Clock frozen at a given moment."""

    def __init__(self, moment: datetime) -> None:
        self.moment = moment

    def now(self) -> datetime:
        return self.moment


def current_date(clock: Clock) -> str:
    """Return today's date as ``YYYY-MM-DD``."""
    return clock.now().strftime(DATE_FORMAT)


def current_time(clock: Clock) -> str:
    """Return the current time as ``HH:MM:SS``."""
    return clock.now().strftime(TIME_FORMAT)


def is_valid_date(value: str) -> bool:
    """Check ``YYYY-MM-DD`` format and that the day exists in that month.

    February has 29 days in leap years.
    """
    if not _DATE_RE.fullmatch(value):
        return False
    year, month, day = int(value[0:4]), int(value[5:7]), int(value[8:10])
    return day <= monthrange(year, month)[1]


def is_valid_time(value: str) -> bool:
    """Check 24-hour ``HH:MM:SS`` format."""
    return bool(_TIME_RE.fullmatch(value))


def is_future(date: str, time: str, clock: Clock) -> bool:
    """Return True if ``date`` ``time`` lies strictly after the clock's now.

    Both values are expected in the formats accepted by
    ``is_valid_date`` and ``is_valid_time``; zero padding makes plain
    string comparison order them chronologically.
    """
    today = current_date(clock)
    if date > today:
        return True
    return date == today and time > current_time(clock)
