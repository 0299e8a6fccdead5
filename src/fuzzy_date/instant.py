# src/fuzzy_date/instant.py

"""
Millisecond instants on the proleptic Gregorian calendar.

An ``Instant`` is a plain ``int``: milliseconds since 1970-01-01T00:00:00Z.
Python's ``datetime`` stops at year 1, so the model keeps integers and only
converts to ``datetime`` on request.

Two instants are reserved as sentinels for unbounded intervals:

    NEG_INFINITY  -271821-04-20T00:00:00.000Z
    POS_INFINITY  +275760-09-13T00:00:00.000Z

No four-digit year can reach either of them.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone
from typing import Optional, Tuple

Instant = int

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE
MS_PER_DAY = 24 * MS_PER_HOUR

# 100,000,000 days either side of the epoch.
NEG_INFINITY: Instant = -8_640_000_000_000_000
POS_INFINITY: Instant = 8_640_000_000_000_000

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_ISO_RE = re.compile(
    r"(?P<year>[+-][0-9]{6}|[0-9]{4})-(?P<month>[0-9]{2})-(?P<day>[0-9]{2})"
    r"T(?P<hour>[0-9]{2}):(?P<minute>[0-9]{2}):(?P<second>[0-9]{2})"
    r"(?:\.(?P<fraction>[0-9]{1,3}))?Z"
)


# ---------------------------------------------------------------------------
# Civil calendar conversion
# ---------------------------------------------------------------------------

def _days_from_civil(year: int, month: int, day: int) -> int:
    """
    Days since the epoch for a (year, month, day) triple.

    The day is applied linearly, so a day past the end of the month rolls
    into the next one (31 Feb -> 3 Mar in a common year).
    """
    if month <= 2:
        year -= 1
    era = year // 400
    yoe = year - era * 400
    mp = (month + 9) % 12
    doy = (153 * mp + 2) // 5 + day - 1
    doe = yoe * 365 + yoe // 4 - yoe // 100 + doy
    return era * 146097 + doe - 719468


def _civil_from_days(days: int) -> Tuple[int, int, int]:
    days += 719468
    era = days // 146097
    doe = days - era * 146097
    yoe = (doe - doe // 1460 + doe // 36524 - doe // 146096) // 365
    doy = doe - (365 * yoe + yoe // 4 - yoe // 100)
    mp = (5 * doy + 2) // 153
    day = doy - (153 * mp + 2) // 5 + 1
    month = mp + 3 if mp < 10 else mp - 9
    year = yoe + era * 400
    if month <= 2:
        year += 1
    return year, month, day


def from_civil(year: int, month: int = 1, day: int = 1) -> Instant:
    """Midnight UTC of the given civil date."""
    # Month overflow is carried into the year before the day is applied.
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    return _days_from_civil(year, month, day) * MS_PER_DAY


def to_civil(instant: Instant) -> Tuple[int, int, int]:
    """Return the UTC (year, month, day) an instant falls on."""
    days = instant // MS_PER_DAY
    return _civil_from_days(days)


def _split(instant: Instant) -> Tuple[int, int]:
    # (days since epoch, ms into that day); the remainder is never negative.
    return divmod(instant, MS_PER_DAY)


# ---------------------------------------------------------------------------
# Calendar arithmetic
# ---------------------------------------------------------------------------

def add_days(instant: Instant, days: int) -> Instant:
    return instant + days * MS_PER_DAY


def add_months(instant: Instant, months: int) -> Instant:
    days, ms_of_day = _split(instant)
    year, month, day = _civil_from_days(days)
    return from_civil(year, month + months, day) + ms_of_day


def add_years(instant: Instant, years: int) -> Instant:
    return add_months(instant, years * 12)


# ---------------------------------------------------------------------------
# ISO-8601
# ---------------------------------------------------------------------------

def _format_year(year: int) -> str:
    if 0 <= year <= 9999:
        return f"{year:04d}"
    sign = "+" if year > 0 else "-"
    return f"{sign}{abs(year):06d}"


def to_iso(instant: Instant) -> str:
    """
    Render an instant as ``YYYY-MM-DDTHH:MM:SS.sssZ``.

    Years outside 0..9999 use the signed six-digit expanded form, e.g.
    ``-271821-04-20T00:00:00.000Z``.
    """
    days, ms_of_day = _split(instant)
    year, month, day = _civil_from_days(days)

    hour, rem = divmod(ms_of_day, MS_PER_HOUR)
    minute, rem = divmod(rem, MS_PER_MINUTE)
    second, millis = divmod(rem, MS_PER_SECOND)

    return (
        f"{_format_year(year)}-{month:02d}-{day:02d}"
        f"T{hour:02d}:{minute:02d}:{second:02d}.{millis:03d}Z"
    )


def from_iso(text: str) -> Instant:
    """
    Parse the output of :func:`to_iso` back into an instant.

    Raises ValueError for anything that is not a UTC timestamp in that shape.
    """
    m = _ISO_RE.fullmatch(text.strip())
    if m is None:
        raise ValueError(f"Not an ISO-8601 UTC timestamp: {text!r}")

    year = int(m.group("year"))
    month = int(m.group("month"))
    day = int(m.group("day"))
    if not 1 <= month <= 12 or not 1 <= day <= 31:
        raise ValueError(f"Date fields out of range: {text!r}")

    fraction = (m.group("fraction") or "").ljust(3, "0")

    return (
        from_civil(year, month, day)
        + int(m.group("hour")) * MS_PER_HOUR
        + int(m.group("minute")) * MS_PER_MINUTE
        + int(m.group("second")) * MS_PER_SECOND
        + int(fraction)
    )


def to_datetime(instant: Instant) -> Optional[datetime]:
    """Aware UTC datetime for the instant, or None if ``datetime`` can't hold it."""
    year, _, _ = to_civil(instant)
    if not 1 <= year <= 9999:
        return None
    return _EPOCH + timedelta(milliseconds=instant)


def from_datetime(value: datetime) -> Instant:
    """Instant for a datetime. Naive values are taken to be UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    delta = value - _EPOCH
    return (delta.days * MS_PER_DAY) + delta.seconds * MS_PER_SECOND + delta.microseconds // 1000
