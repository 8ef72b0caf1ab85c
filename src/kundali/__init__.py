"""
Vedic sidereal chart and Vimshottari dasha engine.
"""

from .core_types import (
    Chart,
    ChartMeta,
    ChartPoint,
    DashaPeriod,
    DashaTimeline,
    GeoCoordinate,
    RawSample,
    SiderealPosition,
)
from .dasha import (
    compute_antardashas,
    compute_mahadashas,
    compute_pratyantardashas,
    current_dashas,
    find_active_period,
)
from .ephemeris import EphemerisAdapter, SwissEphemerisAdapter
from .errors import AdapterFailure, ComputationFailed, InvalidMomentError, KundaliError
from .facade import compute_chart, compute_chart_for_details
from .geocoding import Geocoder, StaticGeocoder
from .models import BirthDetails, DashaRequest

__version__ = "1.0.0"

__all__ = [
    "AdapterFailure",
    "BirthDetails",
    "Chart",
    "ChartMeta",
    "ChartPoint",
    "ComputationFailed",
    "DashaPeriod",
    "DashaRequest",
    "DashaTimeline",
    "EphemerisAdapter",
    "GeoCoordinate",
    "Geocoder",
    "InvalidMomentError",
    "KundaliError",
    "RawSample",
    "SiderealPosition",
    "StaticGeocoder",
    "SwissEphemerisAdapter",
    "compute_antardashas",
    "compute_chart",
    "compute_chart_for_details",
    "compute_mahadashas",
    "compute_pratyantardashas",
    "current_dashas",
    "find_active_period",
]
