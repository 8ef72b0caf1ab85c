from __future__ import annotations

from datetime import datetime, timezone

import pytest

from kundali.positions import (
    compute_ayanamsa,
    compute_body_position,
    compute_node_positions,
    compute_sidereal_positions,
    detect_retrograde,
    mean_node_longitude,
    to_sidereal,
)


def test_ayanamsa_linear_in_fractional_year():
    assert compute_ayanamsa(datetime(2000, 1, 1, tzinfo=timezone.utc)) == pytest.approx(23.85)
    # July contributes (7 - 1) / 12 of a year
    assert compute_ayanamsa(datetime(2010, 7, 15, tzinfo=timezone.utc)) == pytest.approx(
        23.85 + 0.0139 * 10.5
    )


def test_to_sidereal_wraps():
    assert to_sidereal(10.0, 23.85) == pytest.approx(346.15)
    assert to_sidereal(100.0, 23.85) == pytest.approx(76.15)


def test_detect_retrograde_uses_shortest_arc():
    assert detect_retrograde("Mars", 10.0, 10.5) is True
    assert detect_retrograde("Mars", 0.01, 359.98) is False
    assert detect_retrograde("Mars", 359.98, 0.01) is True


def test_luminaries_never_retrograde():
    assert detect_retrograde("Sun", 10.0, 11.0) is False
    assert detect_retrograde("Moon", 10.0, 11.0) is False


def test_mean_node_at_j2000():
    assert mean_node_longitude(2451545.0) == pytest.approx(125.04452)


def test_nodes_are_opposite_and_retrograde(epoch):
    rahu, ketu = compute_node_positions(epoch, 23.85)
    assert rahu.longitude == pytest.approx(125.04452 - 23.85)
    assert ketu.longitude == pytest.approx(rahu.longitude + 180.0)
    assert rahu.is_retrograde and ketu.is_retrograde


def test_body_position_retrograde_from_backward_sample(fake_ephemeris, epoch):
    saturn = compute_body_position(fake_ephemeris, "Saturn", epoch, 23.85)
    mars = compute_body_position(fake_ephemeris, "Mars", epoch, 23.85)

    assert saturn.longitude == pytest.approx(45.0 - 23.85)
    assert saturn.is_retrograde is True
    assert mars.longitude == pytest.approx(330.0 - 23.85)
    assert mars.is_retrograde is False


def test_body_position_retrograde_across_zero(make_ephemeris, epoch):
    adapter = make_ephemeris(longitudes={"Mars": 0.01}, rates={"Mars": 0.03})
    assert compute_body_position(adapter, "Mars", epoch, 0.0).is_retrograde is False


def test_luminaries_sampled_once(make_ephemeris, epoch):
    adapter = make_ephemeris(rates={"Sun": -1.0})
    sun = compute_body_position(adapter, "Sun", epoch, 23.85)
    assert sun.is_retrograde is False
    assert len(adapter.calls) == 1


def test_sidereal_positions_cover_nine_bodies(fake_ephemeris, epoch):
    positions = compute_sidereal_positions(fake_ephemeris, epoch, 23.85)
    assert list(positions) == [
        "Sun",
        "Moon",
        "Mars",
        "Mercury",
        "Jupiter",
        "Venus",
        "Saturn",
        "Rahu",
        "Ketu",
    ]
    assert all(0.0 <= p.longitude < 360.0 for p in positions.values())
