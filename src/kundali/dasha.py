#!/usr/bin/env python3
"""
Vimshottari Dasha period calculations.
120-year cycle of planetary periods with nested sub-periods.

This module provides:
- Mahadasha (major periods): one linear pass through the nine lords,
  starting with the balance of the Moon's birth nakshatra lord
- Antardasha (sub-periods)
- Pratyantardasha (sub-sub-periods)

Every generator returns a fresh tuple of exactly nine contiguous periods.
Durations use the mean Gregorian year (365.2425 days); the (Y, M, D)
breakdown is a calendar-field difference between start and end.
"""

import logging

from datetime import datetime
from itertools import accumulate

from .constants import DASHA_YEARS, LORD_CYCLE, NAKSHATRA_SPAN, TOTAL_CYCLE_YEARS
from .core_types import DashaPeriod, DashaTimeline
from .monitoring import increment, timed
from .numerics import normalize_angle
from .time_utils import add_years, duration_ymd, validate_utc_datetime

logger = logging.getLogger(__name__)

# Number of lords in the cycle; every timeline has this many periods
CYCLE_LENGTH = len(LORD_CYCLE)


def _lord_index(lord: str) -> int:
    """Position of a lord in the cycle

    Raises:
        ValueError: If lord is not a Vimshottari lord
    """
    try:
        return LORD_CYCLE.index(lord)
    except ValueError:
        raise ValueError(
            f"Unknown dasha lord: {lord!r}. Expected one of {list(LORD_CYCLE)}"
        ) from None


def _sequence_from(start_index: int) -> tuple[str, ...]:
    """The nine lords in cycle order starting at start_index"""
    return tuple(
        LORD_CYCLE[(start_index + i) % CYCLE_LENGTH] for i in range(CYCLE_LENGTH)
    )


def _boundaries(start: datetime, spans: tuple[float, ...]) -> list[datetime]:
    """Period boundaries laid end-to-end: [start, end1, ..., end9]"""
    return list(accumulate(spans, add_years, initial=start))


def birth_balance(moon_longitude: float) -> tuple[int, str, float]:
    """
    Balance of the first mahadasha at birth.

    Args:
        moon_longitude: Moon's sidereal longitude in degrees

    Returns:
        Tuple of (lord_index, lord, balance_years)
    """
    pos = normalize_angle(moon_longitude) / NAKSHATRA_SPAN
    nakshatra = int(pos)
    fraction_remaining = 1.0 - (pos - nakshatra)

    lord_index = nakshatra % CYCLE_LENGTH
    lord = LORD_CYCLE[lord_index]
    balance_years = DASHA_YEARS[lord] * fraction_remaining

    logger.debug(
        f"Birth nakshatra index: {nakshatra}, Lord: {lord}, "
        f"Remaining: {fraction_remaining:.4f} ({balance_years:.4f} years)"
    )

    return lord_index, lord, balance_years


def _build_timeline(
    start: datetime,
    lords: tuple[str, ...],
    spans: tuple[float, ...],
    level: int,
    parent_chain: tuple[str, ...],
) -> DashaTimeline:
    """Nine contiguous periods with calendar durations"""
    bounds = _boundaries(start, spans)
    periods = []
    for lord, years, begin, end in zip(lords, spans, bounds, bounds[1:]):
        y, m, d = duration_ymd(begin, end)
        periods.append(
            DashaPeriod(
                label=" - ".join(parent_chain + (lord,)),
                lord=lord,
                start=begin,
                end=end,
                years=years,
                duration_years=y,
                duration_months=m,
                duration_days=d,
                level=level,
                parent_chain=parent_chain,
            )
        )
    increment(f"dasha.periods.level{level}", len(periods))
    return tuple(periods)


@timed("dasha.mahadasha")
def compute_mahadashas(moon_longitude: float, birth: datetime) -> DashaTimeline:
    """
    Generate the nine Mahadasha periods from birth.

    The first period is the unexpired balance of the birth nakshatra lord;
    periods 2-9 carry their full allocations and report them as whole years.

    Args:
        moon_longitude: Moon's sidereal longitude in degrees
        birth: Birth UTC timestamp

    Returns:
        Tuple of nine level-1 DashaPeriod values
    """
    birth = validate_utc_datetime(birth)
    lord_index, first_lord, balance_years = birth_balance(moon_longitude)

    lords = _sequence_from(lord_index)
    spans = (balance_years,) + tuple(float(DASHA_YEARS[lord]) for lord in lords[1:])
    timeline = _build_timeline(birth, lords, spans, level=1, parent_chain=())

    # Full periods are reported as their table allocation
    full = tuple(
        DashaPeriod(
            label=p.label,
            lord=p.lord,
            start=p.start,
            end=p.end,
            years=p.years,
            duration_years=DASHA_YEARS[p.lord],
            duration_months=0,
            duration_days=0,
            level=1,
        )
        for p in timeline[1:]
    )
    return (timeline[0],) + full


@timed("dasha.antardasha")
def compute_antardashas(parent_lord: str, period_start: datetime) -> DashaTimeline:
    """
    Calculate the nine Antardasha sub-periods of a Mahadasha.

    Sub-period years = parent_years * sub_years / 120, starting from the
    parent lord itself.

    Args:
        parent_lord: Mahadasha lord
        period_start: Start of the Mahadasha (for the birth balance period,
            its displayed start)

    Returns:
        Tuple of nine level-2 DashaPeriod values

    Raises:
        ValueError: If parent_lord is unknown
    """
    period_start = validate_utc_datetime(period_start)
    lords = _sequence_from(_lord_index(parent_lord))
    parent_years = DASHA_YEARS[parent_lord]

    spans = tuple(parent_years * DASHA_YEARS[sub] / TOTAL_CYCLE_YEARS for sub in lords)
    return _build_timeline(
        period_start, lords, spans, level=2, parent_chain=(parent_lord,)
    )


@timed("dasha.pratyantardasha")
def compute_pratyantardashas(
    grandparent_lord: str, parent_lord: str, period_start: datetime
) -> DashaTimeline:
    """
    Calculate the nine Pratyantardasha sub-sub-periods of an Antardasha.

    Args:
        grandparent_lord: Mahadasha lord
        parent_lord: Antardasha lord (the sequence starts here)
        period_start: Start of the Antardasha

    Returns:
        Tuple of nine level-3 DashaPeriod values

    Raises:
        ValueError: If either lord is unknown
    """
    period_start = validate_utc_datetime(period_start)
    _lord_index(grandparent_lord)
    lords = _sequence_from(_lord_index(parent_lord))

    antar_years = DASHA_YEARS[grandparent_lord] * DASHA_YEARS[parent_lord] / TOTAL_CYCLE_YEARS
    spans = tuple(antar_years * DASHA_YEARS[sub] / TOTAL_CYCLE_YEARS for sub in lords)
    return _build_timeline(
        period_start,
        lords,
        spans,
        level=3,
        parent_chain=(grandparent_lord, parent_lord),
    )


def find_active_period(
    timeline: DashaTimeline, reference_time: datetime
) -> DashaPeriod | None:
    """Period whose [start, end) contains reference_time, if any"""
    reference_time = validate_utc_datetime(reference_time)
    for period in timeline:
        if period.is_active(reference_time):
            return period
    return None


def current_dashas(
    moon_longitude: float, birth: datetime, reference_time: datetime
) -> dict[str, DashaPeriod]:
    """
    Get the active Dasha periods at a reference time.

    Args:
        moon_longitude: Moon's sidereal longitude in degrees
        birth: Birth UTC timestamp
        reference_time: Time to check

    Returns:
        Dict with "mahadasha", "antardasha" and "pratyantardasha" keys for
        the levels active at reference_time; empty outside the 120-year pass
    """
    result = {}

    maha = find_active_period(compute_mahadashas(moon_longitude, birth), reference_time)
    if maha is None:
        return result
    result["mahadasha"] = maha

    antar = find_active_period(compute_antardashas(maha.lord, maha.start), reference_time)
    if antar is None:
        return result
    result["antardasha"] = antar

    pratyantar = find_active_period(
        compute_pratyantardashas(maha.lord, antar.lord, antar.start), reference_time
    )
    if pratyantar is not None:
        result["pratyantardasha"] = pratyantar

    return result
