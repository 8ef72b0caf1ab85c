#!/usr/bin/env python3
"""
Chart facade - orchestration only, no domain logic.
ephemeris -> ayanamsa -> sidereal positions -> {rasi, houses, varga} -> Chart
"""

import logging

from datetime import datetime

from .config import get_engine_config
from .constants import ASCENDANT, SIGNS, VEDIC_NAMES
from .core_types import Chart, ChartMeta, ChartPoint, GeoCoordinate
from .ephemeris import EphemerisAdapter, get_default_adapter
from .errors import AdapterFailure, ComputationFailed
from .geocoding import Geocoder, StaticGeocoder
from .houses import compute_sidereal_ascendant, house_of
from .models import BirthDetails
from .monitoring import increment, timed
from .numerics import degrees_to_dm
from .positions import compute_ayanamsa, compute_sidereal_positions
from .rasi import (
    dignity,
    format_degree_in_sign,
    nakshatra_lord,
    nakshatra_name,
    sign_index,
    sign_lord,
)
from .time_utils import parse_iso_moment, validate_utc_datetime
from .varga import navamsa_sign

# Initialize module logger
logger = logging.getLogger(__name__)

# ============================================================================
# CHART POINTS
# ============================================================================


def build_chart_point(
    body: str,
    longitude: float,
    is_retrograde: bool,
    ascendant: float,
    navamsa_scheme: str = "linear",
) -> ChartPoint:
    """Classify one sidereal longitude into a full ChartPoint

    Args:
        body: English body name (Sun, ..., Ketu, Ascendant)
        longitude: Sidereal longitude in degrees
        is_retrograde: Motion flag
        ascendant: Sidereal ascendant longitude, for the house
        navamsa_scheme: Varga scheme for the D9 sign
    """
    name = VEDIC_NAMES.get(body, body)
    idx = sign_index(longitude)
    sign = SIGNS[idx]

    return ChartPoint(
        name=name,
        sign_id=idx + 1,
        sign=sign,
        degree_in_sign=format_degree_in_sign(longitude),
        position=degrees_to_dm(longitude),
        nakshatra=nakshatra_name(longitude),
        nakshatra_lord=nakshatra_lord(longitude),
        sign_lord=sign_lord(sign),
        dignity=dignity(name, sign),
        is_retrograde=is_retrograde,
        longitude=longitude,
        house=house_of(longitude, ascendant),
        navamsa_sign=navamsa_sign(longitude, navamsa_scheme),
    )


# ============================================================================
# MAIN API FUNCTIONS
# ============================================================================


@timed("chart.compute")
def compute_chart(
    moment: datetime | str,
    coordinate: GeoCoordinate,
    adapter: EphemerisAdapter | None = None,
    *,
    place: str = "",
    navamsa_scheme: str | None = None,
) -> Chart:
    """Compute a complete sidereal chart

    Args:
        moment: Birth instant (datetime, naive = UTC, or ISO-8601 string)
        coordinate: Birth location
        adapter: Ephemeris backend (default: Swiss Ephemeris)
        place: Place label echoed in chart meta
        navamsa_scheme: Varga scheme for D9 (default: from config)

    Returns:
        Chart with nine bodies followed by the Lagna

    Raises:
        InvalidMomentError: If moment is not a valid instant
        ComputationFailed: If the ephemeris adapter fails
    """
    # Validate before any computation
    if isinstance(moment, str):
        moment = parse_iso_moment(moment)
    moment = validate_utc_datetime(moment)

    if adapter is None:
        adapter = get_default_adapter()
    if navamsa_scheme is None:
        navamsa_scheme = get_engine_config().navamsa_scheme

    ayanamsa = compute_ayanamsa(moment)

    try:
        positions = compute_sidereal_positions(adapter, moment, ayanamsa)
        ascendant = compute_sidereal_ascendant(adapter, moment, coordinate, ayanamsa)
    except AdapterFailure as e:
        logger.error(f"Chart computation failed at {moment.isoformat()}: {e}")
        increment("chart.adapter_failures")
        raise ComputationFailed(f"Chart computation failed: {e}") from e

    points = tuple(
        build_chart_point(body, pos.longitude, pos.is_retrograde, ascendant, navamsa_scheme)
        for body, pos in positions.items()
    ) + (build_chart_point(ASCENDANT, ascendant, False, ascendant, navamsa_scheme),)

    increment("chart.points", len(points))

    moon = next(p for p in points if p.name == VEDIC_NAMES["Moon"])
    lagna = points[-1]

    meta = ChartMeta(
        date=moment.date().isoformat(),
        time=moment.strftime("%H:%M"),
        place=place,
        moon_nakshatra=moon.nakshatra,
        latitude=coordinate.latitude,
        longitude=coordinate.longitude,
    )

    logger.info(
        f"Chart computed for {moment.isoformat()} "
        f"at ({coordinate.latitude:.2f}, {coordinate.longitude:.2f}): "
        f"Lagna {lagna.sign}, Moon {moon.nakshatra}"
    )

    return Chart(
        points=points,
        ascendant_sign=lagna.sign,
        ayanamsa=ayanamsa,
        meta=meta,
    )


def compute_chart_for_details(
    details: BirthDetails,
    adapter: EphemerisAdapter | None = None,
    geocoder: Geocoder | None = None,
) -> Chart:
    """Compute a chart from user-entered birth details

    Coordinates are resolved through the geocoder when the details carry
    only a place name.

    Raises:
        InvalidMomentError: If the date or time is invalid
        ComputationFailed: If the ephemeris adapter fails
    """
    moment = details.to_moment()

    coordinate = details.coordinate()
    if coordinate is None:
        if geocoder is None:
            geocoder = StaticGeocoder()
        coordinate = geocoder.resolve_coordinates(details.place)

    chart = compute_chart(moment, coordinate, adapter, place=details.place)

    # Echo the request as entered rather than the normalized moment
    return Chart(
        points=chart.points,
        ascendant_sign=chart.ascendant_sign,
        ayanamsa=chart.ayanamsa,
        meta=ChartMeta(
            date=details.date,
            time=details.time,
            place=details.place,
            moon_nakshatra=chart.meta.moon_nakshatra,
            latitude=coordinate.latitude,
            longitude=coordinate.longitude,
        ),
    )
