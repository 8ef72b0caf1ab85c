# kundali/houses.py
from __future__ import annotations

import logging
import math

from datetime import datetime

from .constants import BHAVA_NAMES, OBLIQUITY_DEG
from .core_types import GeoCoordinate
from .ephemeris import EphemerisAdapter
from .numerics import normalize_angle
from .time_utils import validate_utc_datetime

logger = logging.getLogger(__name__)

_EPS_RAD = math.radians(OBLIQUITY_DEG)


def local_sidereal_degrees(gmst_hours: float, longitude: float) -> float:
    """Local sidereal time as an angle: (GMST + lon/15) hours -> degrees [0, 360)."""
    return normalize_angle((gmst_hours + longitude / 15.0) * 15.0)


def compute_ascendant(gmst_hours: float, longitude: float, latitude: float) -> float:
    """
    Tropical ascendant from sidereal time and location.
    - Fixed obliquity (23.44°), no nutation.
    - Undefined exactly at the poles (tan(±90°)); callers pass |lat| < 90.
    """
    ramc = math.radians(local_sidereal_degrees(gmst_hours, longitude))
    lat_rad = math.radians(latitude)

    num = math.cos(ramc)
    den = -math.sin(ramc) * math.cos(_EPS_RAD) - math.tan(lat_rad) * math.sin(_EPS_RAD)
    return normalize_angle(math.degrees(math.atan2(num, den)))


def compute_sidereal_ascendant(
    adapter: EphemerisAdapter,
    moment: datetime,
    coordinate: GeoCoordinate,
    ayanamsa: float,
) -> float:
    """
    Sidereal Lagna longitude.
    - moment must resolve to UTC.
    - Raises AdapterFailure when sidereal time is unavailable.
    """
    moment = validate_utc_datetime(moment)
    gmst = adapter.sidereal_time(moment)
    tropical = compute_ascendant(gmst, coordinate.longitude, coordinate.latitude)
    sidereal = normalize_angle(tropical - ayanamsa)
    logger.debug(
        f"Ascendant gmst={gmst:.6f}h tropical={tropical:.4f} sidereal={sidereal:.4f}"
    )
    return sidereal


def house_of(longitude: float, ascendant: float) -> int:
    """
    House 1..12 for a sidereal longitude.
    Equal 30° houses with house 1 starting 15° before the ascendant degree.
    """
    adj = normalize_angle(longitude - (ascendant - 15.0))
    # Guard float edge where adj rounds to just under 360
    return min(int(adj // 30.0), 11) + 1


def bhava_name(house: int) -> str:
    """Classical bhava name for house 1..12"""
    if not 1 <= house <= 12:
        raise ValueError(f"House must be between 1 and 12, got {house}")
    return BHAVA_NAMES[house - 1]
