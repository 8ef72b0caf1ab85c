#!/usr/bin/env python3
"""
Time utilities for chart and dasha calculations.

Provides UTC validation, moment parsing, Julian day conversion and the
mean-year / calendar-field arithmetic used by the dasha timeline.
"""

from __future__ import annotations

import calendar

from datetime import date, datetime, time, timedelta, timezone

import swisseph as swe

from .constants import MS_PER_YEAR
from .errors import InvalidMomentError


def ensure_utc(dt: datetime) -> datetime:
    """Ensure a datetime is timezone-aware and in UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def validate_utc_datetime(dt: datetime) -> datetime:
    """Validate a moment and return it as aware UTC.

    Raises:
        InvalidMomentError: If dt is not a datetime
    """
    if not isinstance(dt, datetime):
        raise InvalidMomentError(f"Expected datetime, got {type(dt).__name__}")
    return ensure_utc(dt)


def parse_moment(date_str: str, time_str: str = "00:00") -> datetime:
    """Combine a YYYY-MM-DD date and HH:MM[:SS] time into a UTC moment.

    Raises:
        InvalidMomentError: If either part does not resolve to a valid
            proleptic Gregorian instant (e.g. 2023-02-30 or 25:00)
    """
    try:
        d = date.fromisoformat(date_str.strip())
        t = time.fromisoformat(time_str.strip())
    except (AttributeError, TypeError, ValueError) as e:
        raise InvalidMomentError(
            f"Invalid date or time: {date_str!r} {time_str!r} ({e})"
        ) from e
    if t.tzinfo is not None:
        raise InvalidMomentError(f"Time must not carry an offset: {time_str!r}")
    return datetime.combine(d, t, tzinfo=timezone.utc)


def parse_iso_moment(value: str) -> datetime:
    """Parse an ISO-8601 instant into aware UTC; naive values are UTC."""
    try:
        dt = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except (AttributeError, TypeError, ValueError) as e:
        raise InvalidMomentError(f"Invalid ISO-8601 instant: {value!r}") from e
    return ensure_utc(dt)


def datetime_to_julian_day(dt: datetime) -> float:
    """Convert aware datetime to Julian Day (UT)."""
    dt = ensure_utc(dt)
    h = dt.hour + dt.minute / 60.0 + dt.second / 3600.0 + dt.microsecond / 3_600_000_000.0
    return swe.julday(dt.year, dt.month, dt.day, h, swe.GREG_CAL)


def add_years(dt: datetime, years: float) -> datetime:
    """Add fractional years using the mean Gregorian year (365.2425 days).

    No calendar-aware month stepping.
    """
    return dt + timedelta(milliseconds=years * MS_PER_YEAR)


def days_in_previous_month(dt: datetime) -> int:
    """Length of the month preceding dt's month."""
    if dt.month == 1:
        return calendar.monthrange(dt.year - 1, 12)[1]
    return calendar.monthrange(dt.year, dt.month - 1)[1]


def duration_ymd(start: datetime, end: datetime) -> tuple[int, int, int]:
    """Difference between two instants as calendar (years, months, days).

    Field-wise subtraction with borrow: a negative day count borrows the
    length of the month before end's month, a negative month count borrows
    a year.
    """
    start = ensure_utc(start)
    end = ensure_utc(end)

    years = end.year - start.year
    months = end.month - start.month
    days = end.day - start.day

    if days < 0:
        months -= 1
        days += days_in_previous_month(end)
    if months < 0:
        years -= 1
        months += 12

    return years, months, days


def ymd_to_years(years: int, months: int, days: int) -> float:
    """Approximate fractional years for a (Y, M, D) triple."""
    return years + months / 12.0 + days / 365.2425
