"""
Smoke tests against the real Swiss Ephemeris (built-in Moshier ephemeris,
no data files required).
"""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from kundali.core_types import GeoCoordinate
from kundali.ephemeris import EphemerisAdapter, SwissEphemerisAdapter
from kundali.errors import AdapterFailure
from kundali.facade import compute_chart

J2000 = datetime(2000, 1, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture(scope="module")
def adapter() -> SwissEphemerisAdapter:
    return SwissEphemerisAdapter(ephe_path="")


def test_adapter_satisfies_protocol(adapter, fake_ephemeris):
    assert isinstance(adapter, EphemerisAdapter)
    assert isinstance(fake_ephemeris, EphemerisAdapter)


def test_sun_tropical_longitude_at_j2000(adapter):
    sample = adapter.body_position("Sun", J2000)
    assert sample.body == "Sun"
    assert sample.tropical_longitude == pytest.approx(280.37, abs=0.5)
    x, y, z = sample.geocentric_vector
    assert 0.97 < (x * x + y * y + z * z) ** 0.5 < 1.0


def test_greenwich_sidereal_time_in_hours(adapter):
    assert adapter.sidereal_time(J2000) == pytest.approx(18.697, abs=0.01)


def test_unsupported_body(adapter):
    with pytest.raises(AdapterFailure):
        adapter.body_position("Pluto", J2000)


def test_real_chart_ranges(adapter):
    chart = compute_chart(J2000, GeoCoordinate(17.385, 78.4867), adapter)

    assert len(chart.points) == 10
    for point in chart.points:
        assert 0.0 <= point.longitude < 360.0
        assert 1 <= point.sign_id <= 12
        assert 1 <= point.house <= 12
    assert not chart.point("Surya").is_retrograde
    assert not chart.point("Chandra").is_retrograde

    rahu = chart.point("Rahu").longitude
    ketu = chart.point("Ketu").longitude
    assert (ketu - rahu) % 360.0 == pytest.approx(180.0)
