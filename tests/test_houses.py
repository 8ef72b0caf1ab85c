from __future__ import annotations

import pytest

from kundali.core_types import GeoCoordinate
from kundali.houses import (
    bhava_name,
    compute_ascendant,
    compute_sidereal_ascendant,
    house_of,
    local_sidereal_degrees,
)


def test_local_sidereal_degrees():
    assert local_sidereal_degrees(6.0, 0.0) == pytest.approx(90.0)
    assert local_sidereal_degrees(6.0, 15.0) == pytest.approx(105.0)
    assert local_sidereal_degrees(23.0, 30.0) == pytest.approx(15.0)


def test_ascendant_on_the_equator():
    # RAMC 0 rises 0 Cancer, RAMC 90 rises 0 Libra
    assert compute_ascendant(0.0, 0.0, 0.0) == pytest.approx(90.0)
    assert compute_ascendant(6.0, 0.0, 0.0) == pytest.approx(180.0)


def test_ascendant_in_range_for_many_locations():
    for gmst in (0.0, 3.3, 7.9, 12.0, 18.25, 23.99):
        for lat in (-60.0, -33.9, 0.0, 17.385, 51.5, 66.0):
            asc = compute_ascendant(gmst, 78.4867, lat)
            assert 0.0 <= asc < 360.0


def test_sidereal_ascendant_subtracts_ayanamsa(fake_ephemeris, epoch):
    asc = compute_sidereal_ascendant(fake_ephemeris, epoch, GeoCoordinate(0.0, 0.0), 23.85)
    assert asc == pytest.approx(180.0 - 23.85)


def test_house_of_starts_fifteen_degrees_before_ascendant():
    asc = 100.0
    assert house_of(asc, asc) == 1
    assert house_of(asc - 15.0, asc) == 1
    assert house_of(asc - 15.001, asc) == 12
    assert house_of(asc + 15.0, asc) == 2
    assert house_of(asc + 180.0, asc) == 7


def test_house_of_always_in_range():
    for asc in (0.0, 7.5, 359.9):
        houses = {house_of(lon * 0.5, asc) for lon in range(720)}
        assert houses == set(range(1, 13))


def test_bhava_name():
    assert bhava_name(1) == "Tanu"
    assert bhava_name(12) == "Vyaya"
    with pytest.raises(ValueError):
        bhava_name(13)
