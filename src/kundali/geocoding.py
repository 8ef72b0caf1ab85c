#!/usr/bin/env python3
"""
Place-name resolution for chart requests.

Resolves a free-text place to coordinates using a small built-in city
table: case-insensitive exact match on the first comma-separated component,
then prefix match (shortest name wins). Unresolved places fall back to the
configured default coordinate; resolution never fails. No fuzzy matching.
"""
from __future__ import annotations

import logging

from dataclasses import dataclass
from typing import Protocol

from .config import get_engine_config
from .core_types import GeoCoordinate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CityEntry:
    name: str
    latitude: float
    longitude: float
    region: str = ""

    @property
    def coordinate(self) -> GeoCoordinate:
        return GeoCoordinate(latitude=self.latitude, longitude=self.longitude)


# name, latitude, longitude, region
_CITY_ROWS: tuple[tuple[str, float, float, str], ...] = (
    ("New Delhi", 28.6139, 77.2090, "Delhi"),
    ("Mumbai", 19.0760, 72.8777, "Maharashtra"),
    ("Pune", 18.5204, 73.8567, "Maharashtra"),
    ("Nagpur", 21.1458, 79.0882, "Maharashtra"),
    ("Kolkata", 22.5726, 88.3639, "West Bengal"),
    ("Chennai", 13.0827, 80.2707, "Tamil Nadu"),
    ("Madurai", 9.9252, 78.1198, "Tamil Nadu"),
    ("Coimbatore", 11.0168, 76.9558, "Tamil Nadu"),
    ("Bengaluru", 12.9716, 77.5946, "Karnataka"),
    ("Mysuru", 12.2958, 76.6394, "Karnataka"),
    ("Hyderabad", 17.3850, 78.4867, "Telangana"),
    ("Warangal", 17.9689, 79.5941, "Telangana"),
    ("Vijayawada", 16.5062, 80.6480, "Andhra Pradesh"),
    ("Visakhapatnam", 17.6868, 83.2185, "Andhra Pradesh"),
    ("Tirupati", 13.6288, 79.4192, "Andhra Pradesh"),
    ("Guntur", 16.3067, 80.4365, "Andhra Pradesh"),
    ("Ahmedabad", 23.0225, 72.5714, "Gujarat"),
    ("Surat", 21.1702, 72.8311, "Gujarat"),
    ("Jaipur", 26.9124, 75.7873, "Rajasthan"),
    ("Lucknow", 26.8467, 80.9462, "Uttar Pradesh"),
    ("Varanasi", 25.3176, 82.9739, "Uttar Pradesh"),
    ("Patna", 25.5941, 85.1376, "Bihar"),
    ("Bhopal", 23.2599, 77.4126, "Madhya Pradesh"),
    ("Indore", 22.7196, 75.8577, "Madhya Pradesh"),
    ("Chandigarh", 30.7333, 76.7794, "Chandigarh"),
    ("Amritsar", 31.6340, 74.8723, "Punjab"),
    ("Bhubaneswar", 20.2961, 85.8245, "Odisha"),
    ("Guwahati", 26.1445, 91.7362, "Assam"),
    ("Thiruvananthapuram", 8.5241, 76.9366, "Kerala"),
    ("Kochi", 9.9312, 76.2673, "Kerala"),
    ("Kathmandu", 27.7172, 85.3240, "Nepal"),
    ("Colombo", 6.9271, 79.8612, "Sri Lanka"),
    ("Dhaka", 23.8103, 90.4125, "Bangladesh"),
    ("Singapore", 1.3521, 103.8198, "Singapore"),
    ("Dubai", 25.2048, 55.2708, "United Arab Emirates"),
    ("London", 51.5074, -0.1278, "United Kingdom"),
    ("New York", 40.7128, -74.0060, "United States"),
    ("San Francisco", 37.7749, -122.4194, "United States"),
    ("Toronto", 43.6532, -79.3832, "Canada"),
    ("Sydney", -33.8688, 151.2093, "Australia"),
)

CITIES: tuple[CityEntry, ...] = tuple(CityEntry(*row) for row in _CITY_ROWS)


class Geocoder(Protocol):
    """Contract for place resolution: never fails."""

    def resolve_coordinates(self, query: str) -> GeoCoordinate: ...


class StaticGeocoder:
    """Geocoder backed by an in-memory city table"""

    def __init__(
        self,
        cities: tuple[CityEntry, ...] = CITIES,
        default: GeoCoordinate | None = None,
    ):
        self._by_name = {c.name.lower(): c for c in cities}
        self._cities = cities
        if default is None:
            cfg = get_engine_config()
            default = GeoCoordinate(
                latitude=cfg.default_latitude, longitude=cfg.default_longitude
            )
        self.default = default

    def search(self, query: str) -> list[CityEntry]:
        """Cities matching the first comma-separated component of query.

        Exact matches first, then prefix matches ordered by name length.
        Queries shorter than two characters match nothing.
        """
        needle = (query or "").split(",")[0].strip().lower()
        if len(needle) < 2:
            return []

        exact = self._by_name.get(needle)
        prefix = sorted(
            (
                c
                for c in self._cities
                if c.name.lower().startswith(needle) and c is not exact
            ),
            key=lambda c: (len(c.name), c.name),
        )
        return ([exact] if exact else []) + prefix

    def resolve_coordinates(self, query: str) -> GeoCoordinate:
        matches = self.search(query)
        if matches:
            return matches[0].coordinate

        logger.warning(
            f"Place {query!r} not found in city table, "
            f"defaulting to ({self.default.latitude}, {self.default.longitude})"
        )
        return self.default
