"""
Input models for chart and dasha requests - Pydantic V2 compliant.

Hosts (CLI, services) validate raw input through these models before
calling the engine.
"""

from datetime import UTC, datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.functional_validators import AfterValidator

from .constants import LORD_CYCLE
from .core_types import GeoCoordinate
from .numerics import normalize_angle
from .time_utils import parse_moment

# --- Validators ---


def validate_latitude(v: float) -> float:
    """Validate latitude is within valid range"""
    if not -90 <= v <= 90:
        raise ValueError(f"Latitude must be between -90 and 90, got {v}")
    return v


def validate_longitude(v: float) -> float:
    """Validate longitude is within valid range"""
    if not -180 <= v <= 180:
        raise ValueError(f"Longitude must be between -180 and 180, got {v}")
    return v


def validate_lord(v: str | None) -> str | None:
    """Validate a Vimshottari lord name"""
    if v is not None and v not in LORD_CYCLE:
        raise ValueError(f"Lord must be one of {list(LORD_CYCLE)}, got {v!r}")
    return v


def ensure_utc(dt: datetime) -> datetime:
    """Ensure datetime is UTC timezone-aware"""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    elif dt.tzinfo != UTC:
        return dt.astimezone(UTC)
    return dt


# --- Type Aliases ---

Latitude = Annotated[float, AfterValidator(validate_latitude)]
Longitude = Annotated[float, AfterValidator(validate_longitude)]
EclipticLongitude = Annotated[float, AfterValidator(normalize_angle)]
Lord = Annotated[str | None, AfterValidator(validate_lord)]
UTCDateTime = Annotated[datetime, AfterValidator(ensure_utc)]


# --- Request Models ---


class BirthDetails(BaseModel):
    """Birth moment and place as entered by a user"""

    model_config = ConfigDict(
        str_strip_whitespace=True,
        frozen=True,
        json_schema_extra={
            "example": {
                "date": "1990-04-15",
                "time": "06:30",
                "place": "Hyderabad",
            }
        },
    )

    date: str = Field(..., description="Birth date, YYYY-MM-DD (UTC)")
    time: str = Field(default="00:00", description="Birth time, HH:MM[:SS] (UTC)")
    place: str = Field(default="", description="Free-text place name")
    latitude: Latitude | None = Field(
        default=None, description="Latitude in decimal degrees (-90 to 90)"
    )
    longitude: Longitude | None = Field(
        default=None, description="Longitude in decimal degrees (-180 to 180)"
    )

    @model_validator(mode="after")
    def validate_coordinate_pair(self) -> "BirthDetails":
        """Latitude and longitude must be given together"""
        if (self.latitude is None) != (self.longitude is None):
            raise ValueError("latitude and longitude must be provided together")
        return self

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None

    def coordinate(self) -> GeoCoordinate | None:
        if not self.has_coordinates:
            return None
        return GeoCoordinate(latitude=self.latitude, longitude=self.longitude)

    def to_moment(self) -> datetime:
        """Resolve date and time to a UTC instant

        Raises:
            InvalidMomentError: If the date or time is not a valid instant
        """
        return parse_moment(self.date, self.time)


class DashaRequest(BaseModel):
    """Dasha drill-down request"""

    model_config = ConfigDict(
        str_strip_whitespace=True,
        frozen=True,
        json_schema_extra={
            "example": {
                "moon_longitude": 54.5,
                "birth": "1990-04-15T06:30:00Z",
                "lord": "Kuja",
                "sub_lord": "Rahu",
            }
        },
    )

    moon_longitude: EclipticLongitude = Field(
        ..., description="Moon's sidereal longitude in degrees"
    )
    birth: UTCDateTime = Field(..., description="Birth instant (UTC)")
    lord: Lord = Field(default=None, description="Mahadasha lord to expand")
    sub_lord: Lord = Field(default=None, description="Antardasha lord to expand")

    @field_validator("sub_lord")
    @classmethod
    def validate_sub_lord_needs_lord(cls, v: str | None, info) -> str | None:
        """A sub-lord only makes sense under a mahadasha lord"""
        if v is not None and info.data.get("lord") is None:
            raise ValueError("sub_lord requires lord")
        return v

    @property
    def level(self) -> int:
        """Dasha level this request expands to (1, 2 or 3)"""
        if self.sub_lord is not None:
            return 3
        if self.lord is not None:
            return 2
        return 1
