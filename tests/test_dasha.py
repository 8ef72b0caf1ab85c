from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from kundali.constants import DASHA_YEARS, LORD_CYCLE, TOTAL_CYCLE_YEARS
from kundali.core_types import DashaPeriod
from kundali.dasha import (
    birth_balance,
    compute_antardashas,
    compute_mahadashas,
    compute_pratyantardashas,
    current_dashas,
    find_active_period,
)
from kundali.time_utils import add_years, duration_ymd

BIRTH = datetime(1990, 4, 15, 6, 30, tzinfo=timezone.utc)


def _assert_contiguous(timeline):
    for prev, nxt in zip(timeline, timeline[1:]):
        assert prev.end == nxt.start


def test_dasha_years_total_120():
    assert sum(DASHA_YEARS.values()) == TOTAL_CYCLE_YEARS
    assert set(DASHA_YEARS) == set(LORD_CYCLE)


def test_birth_balance_for_mrigashira_moon():
    lord_index, lord, balance = birth_balance(54.5)
    assert lord_index == 4
    assert lord == "Kuja"
    assert balance == pytest.approx(7 * 0.9125)


def test_birth_balance_at_nakshatra_start_is_full():
    _, lord, balance = birth_balance(0.0)
    assert lord == "Ketu"
    assert balance == pytest.approx(7.0)


def test_mahadashas_first_period_is_balance():
    timeline = compute_mahadashas(54.5, BIRTH)

    assert len(timeline) == 9
    first = timeline[0]
    assert first.lord == "Kuja"
    assert first.label == "Kuja"
    assert first.start == BIRTH
    assert first.years == pytest.approx(6.3875)
    assert first.duration_years == 6
    assert (first.duration_years, first.duration_months, first.duration_days) == (
        duration_ymd(first.start, first.end)
    )


def test_mahadashas_sequence_and_full_periods():
    timeline = compute_mahadashas(54.5, BIRTH)

    assert [p.lord for p in timeline] == [
        "Kuja",
        "Rahu",
        "Guru",
        "Shani",
        "Budha",
        "Ketu",
        "Shukra",
        "Surya",
        "Chandra",
    ]
    for p in timeline[1:]:
        assert p.years == DASHA_YEARS[p.lord]
        assert (p.duration_years, p.duration_months, p.duration_days) == (
            DASHA_YEARS[p.lord],
            0,
            0,
        )
    assert sum(p.years for p in timeline) == pytest.approx(6.3875 + 120 - 7)
    _assert_contiguous(timeline)
    assert all(p.level == 1 and p.parent_chain == () for p in timeline)


def test_antardashas_sum_to_parent():
    timeline = compute_antardashas("Kuja", BIRTH)

    assert len(timeline) == 9
    assert [p.lord for p in timeline][:3] == ["Kuja", "Rahu", "Guru"]
    assert sum(p.years for p in timeline) == pytest.approx(7.0, rel=1e-9)
    assert timeline[0].years == pytest.approx(7 * 7 / 120)
    assert timeline[0].start == BIRTH
    assert abs((timeline[-1].end - add_years(BIRTH, 7.0)).total_seconds()) < 0.01
    _assert_contiguous(timeline)


def test_antardasha_labels():
    timeline = compute_antardashas("Shukra", BIRTH)
    assert timeline[0].label == "Shukra - Shukra"
    assert timeline[1].label == "Shukra - Surya"
    assert all(p.level == 2 and p.parent_chain == ("Shukra",) for p in timeline)


def test_pratyantardashas_sum_to_antardasha():
    timeline = compute_pratyantardashas("Kuja", "Rahu", BIRTH)

    assert len(timeline) == 9
    assert sum(p.years for p in timeline) == pytest.approx(7 * 18 / 120, rel=1e-9)
    assert timeline[0].label == "Kuja - Rahu - Rahu"
    assert timeline[1].label == "Kuja - Rahu - Guru"
    assert all(p.level == 3 and p.parent_chain == ("Kuja", "Rahu") for p in timeline)
    _assert_contiguous(timeline)


def test_every_lord_has_nine_sub_periods():
    for lord in LORD_CYCLE:
        antar = compute_antardashas(lord, BIRTH)
        assert sum(p.years for p in antar) == pytest.approx(DASHA_YEARS[lord], rel=1e-9)


@pytest.mark.parametrize("lord", ["Pluto", "kuja", ""])
def test_unknown_lord_rejected(lord):
    with pytest.raises(ValueError):
        compute_antardashas(lord, BIRTH)
    with pytest.raises(ValueError):
        compute_pratyantardashas("Kuja", lord, BIRTH)
    with pytest.raises(ValueError):
        compute_pratyantardashas(lord, "Kuja", BIRTH)


def test_naive_birth_treated_as_utc():
    naive = compute_mahadashas(54.5, BIRTH.replace(tzinfo=None))
    assert naive == compute_mahadashas(54.5, BIRTH)


def test_find_active_period_half_open():
    timeline = compute_mahadashas(54.5, BIRTH)
    assert find_active_period(timeline, BIRTH) is timeline[0]
    assert find_active_period(timeline, timeline[0].end) is timeline[1]
    assert find_active_period(timeline, BIRTH - timedelta(days=1)) is None


def test_current_dashas_drills_down():
    active = current_dashas(54.5, BIRTH, BIRTH + timedelta(days=1))

    assert active["mahadasha"].label == "Kuja"
    assert active["antardasha"].label == "Kuja - Kuja"
    assert active["pratyantardasha"].label == "Kuja - Kuja - Kuja"


def test_current_dashas_outside_cycle():
    assert current_dashas(54.5, BIRTH, BIRTH - timedelta(days=1)) == {}
    assert current_dashas(54.5, BIRTH, add_years(BIRTH, 150)) == {}


def test_period_round_trips_through_dict():
    period = compute_pratyantardashas("Kuja", "Rahu", BIRTH)[4]
    data = period.to_dict()
    assert data["start"] == period.start.isoformat()
    assert data["parent_chain"] == ["Kuja", "Rahu"]
    assert DashaPeriod.from_dict(data) == period
