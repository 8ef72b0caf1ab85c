#!/usr/bin/env python3
"""
Ephemeris adapter interface and Swiss Ephemeris backend.
Supplies tropical ecliptic longitudes and Greenwich sidereal time.
Thread-safe: every Swiss Ephemeris call is serialized through one lock.
"""

import logging
import threading

from datetime import datetime
from typing import Protocol, runtime_checkable

import swisseph as swe

from .config import get_engine_config
from .constants import EPHEMERIS_BODIES
from .core_types import RawSample
from .errors import AdapterFailure
from .numerics import normalize_angle
from .time_utils import datetime_to_julian_day, ensure_utc

logger = logging.getLogger(__name__)

# Thread lock for Swiss Ephemeris calls (it's not thread-safe)
_swe_lock = threading.Lock()

SWE_BODY_IDS = {
    "Sun": swe.SUN,
    "Moon": swe.MOON,
    "Mars": swe.MARS,
    "Mercury": swe.MERCURY,
    "Jupiter": swe.JUPITER,
    "Venus": swe.VENUS,
    "Saturn": swe.SATURN,
}


@runtime_checkable
class EphemerisAdapter(Protocol):
    """
    Contract for ephemeris backends.

    Implementations must be deterministic for the same input and accept
    arbitrary historical and future instants.
    """

    def body_position(self, body: str, moment: datetime) -> RawSample:
        """
        Tropical geocentric sample for a body

        Args:
            body: One of Sun, Moon, Mars, Mercury, Jupiter, Venus, Saturn
            moment: UTC instant

        Raises:
            AdapterFailure: If no sample can be produced
        """
        ...

    def sidereal_time(self, moment: datetime) -> float:
        """
        Greenwich sidereal time in hours [0, 24)

        Raises:
            AdapterFailure: If the value cannot be produced
        """
        ...


class SwissEphemerisAdapter:
    """
    Swiss Ephemeris implementation of EphemerisAdapter.

    Uses the data files under ephe_path when given, otherwise the built-in
    Moshier analytical ephemeris (no data files required).
    """

    def __init__(self, ephe_path: str | None = None):
        """
        Args:
            ephe_path: Path to Swiss Ephemeris data files (default: from config)
        """
        if ephe_path is None:
            ephe_path = get_engine_config().ephe_path

        self.ephe_path = ephe_path
        with _swe_lock:
            if ephe_path:
                swe.set_ephe_path(ephe_path)
                self._flags = swe.FLG_SWIEPH
            else:
                self._flags = swe.FLG_MOSEPH

        logger.info(
            f"SwissEphemerisAdapter initialized "
            f"({'files at ' + ephe_path if ephe_path else 'Moshier built-in'})"
        )

    def body_position(self, body: str, moment: datetime) -> RawSample:
        if body not in SWE_BODY_IDS:
            raise AdapterFailure(body, f"unsupported body, expected one of {EPHEMERIS_BODIES}")

        jd = datetime_to_julian_day(ensure_utc(moment))
        swe_id = SWE_BODY_IDS[body]

        try:
            with _swe_lock:
                (lon, _lat, _dist, *_speeds), _ = swe.calc_ut(jd, swe_id, self._flags)
                (x, y, z, *_), _ = swe.calc_ut(jd, swe_id, self._flags | swe.FLG_XYZ)
        except swe.Error as e:
            raise AdapterFailure(body, str(e)) from e

        return RawSample(
            body=body,
            tropical_longitude=normalize_angle(lon),
            geocentric_vector=(x, y, z),
        )

    def sidereal_time(self, moment: datetime) -> float:
        jd = datetime_to_julian_day(ensure_utc(moment))
        try:
            with _swe_lock:
                return swe.sidtime(jd)
        except swe.Error as e:
            raise AdapterFailure(None, str(e)) from e


# Module-level instance for convenience
_adapter = None


def get_default_adapter() -> SwissEphemerisAdapter:
    """Get or create singleton Swiss Ephemeris adapter"""
    global _adapter
    if _adapter is None:
        _adapter = SwissEphemerisAdapter()
    return _adapter
