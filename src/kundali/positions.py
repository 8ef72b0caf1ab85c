#!/usr/bin/env python3
"""
Ayanamsa and sidereal position calculations.

- Linear ayanamsa approximation (23.85° at 2000.0, +0.0139°/year)
- Tropical -> sidereal conversion
- Retrograde detection by one-hour backward difference
- Mean lunar nodes (Rahu/Ketu) from the J2000 mean node series
"""

import logging

from datetime import datetime, timedelta

from .constants import (
    AYANAMSA_AT_2000,
    AYANAMSA_RATE_PER_YEAR,
    DAYS_PER_JULIAN_CENTURY,
    EPHEMERIS_BODIES,
    J2000_JD,
    LUMINARIES,
    RETROGRADE_WINDOW_SECONDS,
)
from .core_types import SiderealPosition
from .ephemeris import EphemerisAdapter
from .numerics import longitude_delta, normalize_angle
from .time_utils import datetime_to_julian_day, validate_utc_datetime

logger = logging.getLogger(__name__)

RETROGRADE_WINDOW = timedelta(seconds=RETROGRADE_WINDOW_SECONDS)


def compute_ayanamsa(moment: datetime) -> float:
    """
    Ayanamsa for a calendar moment.

    Linear in the fractional year, where the month contributes
    (month - 1) / 12. Not an astronomical precession model.

    Args:
        moment: UTC instant

    Returns:
        Ayanamsa in degrees
    """
    moment = validate_utc_datetime(moment)
    year = moment.year + (moment.month - 1) / 12.0
    return AYANAMSA_AT_2000 + AYANAMSA_RATE_PER_YEAR * (year - 2000)


def to_sidereal(tropical_longitude: float, ayanamsa: float) -> float:
    """Tropical longitude -> sidereal longitude in [0, 360)"""
    return normalize_angle(tropical_longitude - ayanamsa)


def detect_retrograde(body: str, current: float, previous: float) -> bool:
    """
    Retrograde flag from two tropical samples one window apart.

    The Sun and Moon are never retrograde.
    """
    if body in LUMINARIES:
        return False
    return longitude_delta(current, previous) < 0.0


def mean_node_longitude(julian_day: float) -> float:
    """Tropical longitude of the mean ascending lunar node (Rahu)"""
    t = (julian_day - J2000_JD) / DAYS_PER_JULIAN_CENTURY
    return normalize_angle(
        125.04452 - 1934.136261 * t + 0.0020708 * t * t + (t * t * t) / 450000.0
    )


def compute_node_positions(
    moment: datetime, ayanamsa: float
) -> tuple[SiderealPosition, SiderealPosition]:
    """
    Sidereal Rahu and Ketu. Both are always retrograde.

    Returns:
        (rahu, ketu)
    """
    jd = datetime_to_julian_day(moment)
    rahu = to_sidereal(mean_node_longitude(jd), ayanamsa)
    ketu = normalize_angle(rahu + 180.0)
    return (
        SiderealPosition(longitude=rahu, is_retrograde=True),
        SiderealPosition(longitude=ketu, is_retrograde=True),
    )


def compute_body_position(
    adapter: EphemerisAdapter, body: str, moment: datetime, ayanamsa: float
) -> SiderealPosition:
    """
    Sidereal position of one ephemeris body.

    Non-luminaries are sampled twice (moment and one hour earlier).

    Raises:
        AdapterFailure: Propagated from the adapter
    """
    current = adapter.body_position(body, moment)
    is_retrograde = False
    if body not in LUMINARIES:
        previous = adapter.body_position(body, moment - RETROGRADE_WINDOW)
        is_retrograde = detect_retrograde(
            body, current.tropical_longitude, previous.tropical_longitude
        )

    return SiderealPosition(
        longitude=to_sidereal(current.tropical_longitude, ayanamsa),
        is_retrograde=is_retrograde,
    )


def compute_sidereal_positions(
    adapter: EphemerisAdapter, moment: datetime, ayanamsa: float
) -> dict[str, SiderealPosition]:
    """
    Sidereal positions for the seven classical bodies plus the nodes.

    Args:
        adapter: Ephemeris backend
        moment: UTC instant
        ayanamsa: Ayanamsa in degrees

    Returns:
        Ordered mapping of English body name -> SiderealPosition
        (Sun, Moon, Mars, Mercury, Jupiter, Venus, Saturn, Rahu, Ketu)
    """
    moment = validate_utc_datetime(moment)

    positions = {
        body: compute_body_position(adapter, body, moment, ayanamsa)
        for body in EPHEMERIS_BODIES
    }
    positions["Rahu"], positions["Ketu"] = compute_node_positions(moment, ayanamsa)

    logger.debug(
        f"Sidereal positions at {moment.isoformat()}: "
        + ", ".join(f"{k}={v.longitude:.4f}" for k, v in positions.items())
    )

    return positions
