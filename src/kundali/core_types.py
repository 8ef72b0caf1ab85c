#!/usr/bin/env python3
"""
Core value types for charts and dasha timelines.
All types are frozen and round-trip through plain data via to_dict/from_dict.
"""

from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any

from .time_utils import ensure_utc, parse_iso_moment

# ============================================================================
# LOCATION
# ============================================================================


@dataclass(frozen=True)
class GeoCoordinate:
    """Geographic coordinate in decimal degrees"""

    latitude: float
    longitude: float

    def __post_init__(self):
        if not -90.0 <= self.latitude <= 90.0:
            raise ValueError(f"Latitude must be between -90 and 90, got {self.latitude}")
        if not -180.0 <= self.longitude <= 180.0:
            raise ValueError(
                f"Longitude must be between -180 and 180, got {self.longitude}"
            )

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "GeoCoordinate":
        return cls(latitude=float(data["latitude"]), longitude=float(data["longitude"]))


# ============================================================================
# EPHEMERIS SAMPLES
# ============================================================================


@dataclass(frozen=True)
class RawSample:
    """Tropical sample for one body, produced only by an ephemeris adapter"""

    body: str
    tropical_longitude: float  # Ecliptic longitude of date, degrees
    geocentric_vector: tuple[float, float, float] = (0.0, 0.0, 0.0)  # AU


@dataclass(frozen=True)
class SiderealPosition:
    """Sidereal longitude of a body with its motion flag"""

    longitude: float  # [0, 360)
    is_retrograde: bool = False


# ============================================================================
# CHART
# ============================================================================


@dataclass(frozen=True)
class ChartPoint:
    """One body's full placement in the chart"""

    name: str  # Vedic name (Surya, Chandra, ..., Lagna)
    sign_id: int  # 1-12
    sign: str
    degree_in_sign: str  # D° MM'
    position: str  # Total longitude D° MM'
    nakshatra: str
    nakshatra_lord: str
    sign_lord: str
    dignity: str
    is_retrograde: bool
    longitude: float  # Sidereal longitude [0, 360)
    house: int  # 1-12
    navamsa_sign: str

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization"""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "ChartPoint":
        return cls(**data)


@dataclass(frozen=True)
class ChartMeta:
    """Request echo carried alongside a chart"""

    date: str
    time: str
    place: str = ""
    moon_nakshatra: str = "-"
    latitude: float | None = None
    longitude: float | None = None

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class Chart:
    """Complete sidereal chart. Immutable once produced."""

    points: tuple[ChartPoint, ...]
    ascendant_sign: str
    ayanamsa: float
    meta: ChartMeta

    def point(self, name: str) -> ChartPoint:
        """Look up a point by Vedic name

        Raises:
            KeyError: If no such point exists in the chart
        """
        for p in self.points:
            if p.name == name:
                return p
        raise KeyError(f"No chart point named {name!r}")

    @property
    def moon_longitude(self) -> float:
        """Moon's sidereal longitude, the dasha engine's input"""
        return self.point("Chandra").longitude

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization"""
        return {
            "points": [p.to_dict() for p in self.points],
            "ascendant_sign": self.ascendant_sign,
            "ayanamsa": self.ayanamsa,
            "meta": self.meta.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Chart":
        """Create from dictionary"""
        return cls(
            points=tuple(ChartPoint.from_dict(p) for p in data["points"]),
            ascendant_sign=data["ascendant_sign"],
            ayanamsa=float(data["ayanamsa"]),
            meta=ChartMeta(**data["meta"]),
        )


# ============================================================================
# DASHA
# ============================================================================


@dataclass(frozen=True)
class DashaPeriod:
    """Represents a Vimshottari period at any level"""

    label: str  # "Kuja", "Kuja - Rahu", "Kuja - Rahu - Guru"
    lord: str  # Lord ruling this period (last element of label)
    start: datetime
    end: datetime
    years: float  # Span used to lay the period out
    duration_years: int
    duration_months: int
    duration_days: int
    level: int  # 1=Maha, 2=Antar, 3=Pratyantar
    parent_chain: tuple[str, ...] = field(default_factory=tuple)

    def is_active(self, reference_time: datetime) -> bool:
        """Check if period is active at given time"""
        return self.start <= ensure_utc(reference_time) < self.end

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization"""
        return {
            "label": self.label,
            "lord": self.lord,
            "start": self.start.isoformat(),
            "end": self.end.isoformat(),
            "years": self.years,
            "duration_years": self.duration_years,
            "duration_months": self.duration_months,
            "duration_days": self.duration_days,
            "level": self.level,
            "parent_chain": list(self.parent_chain),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "DashaPeriod":
        """Create from dictionary"""
        data = data.copy()
        data["start"] = parse_iso_moment(data["start"])
        data["end"] = parse_iso_moment(data["end"])
        data["parent_chain"] = tuple(data.get("parent_chain", ()))
        return cls(**data)


DashaTimeline = tuple[DashaPeriod, ...]
