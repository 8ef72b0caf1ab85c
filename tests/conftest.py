from __future__ import annotations

import os

from datetime import datetime, timezone

import pytest

# Ensure tests run without JIT compile overhead
os.environ.setdefault("NUMBA_DISABLE_JIT", "1")
# Keep the suite independent of local ephemeris files
os.environ.pop("KUNDALI_EPHE_PATH", None)

from kundali.config import reset_config  # noqa: E402
from kundali.core_types import RawSample  # noqa: E402
from kundali.errors import AdapterFailure  # noqa: E402
from kundali.monitoring import reset_metrics  # noqa: E402

EPOCH = datetime(2000, 1, 1, 12, 0, tzinfo=timezone.utc)

# Tropical longitudes at EPOCH and motion in degrees per hour
DEFAULT_LONGITUDES = {
    "Sun": 280.0,
    "Moon": 100.0,
    "Mars": 330.0,
    "Mercury": 270.0,
    "Jupiter": 30.0,
    "Venus": 250.0,
    "Saturn": 45.0,
}
DEFAULT_RATES = {
    "Sun": 0.04,
    "Moon": 0.55,
    "Mars": 0.03,
    "Mercury": 0.05,
    "Jupiter": 0.01,
    "Venus": 0.05,
    "Saturn": -0.005,
}


class FakeEphemeris:
    """Deterministic ephemeris: each body moves linearly from EPOCH"""

    def __init__(
        self,
        longitudes: dict[str, float] | None = None,
        rates: dict[str, float] | None = None,
        gmst_hours: float = 6.0,
        fail_on: str | None = None,
    ):
        self.longitudes = {**DEFAULT_LONGITUDES, **(longitudes or {})}
        self.rates = {**DEFAULT_RATES, **(rates or {})}
        self.gmst_hours = gmst_hours
        self.fail_on = fail_on
        self.calls: list[tuple[str, datetime]] = []

    def body_position(self, body: str, moment: datetime) -> RawSample:
        self.calls.append((body, moment))
        if body == self.fail_on:
            raise AdapterFailure(body, "simulated outage")
        hours = (moment - EPOCH).total_seconds() / 3600.0
        lon = (self.longitudes[body] + self.rates[body] * hours) % 360.0
        return RawSample(body=body, tropical_longitude=lon)

    def sidereal_time(self, moment: datetime) -> float:
        if self.fail_on == "sidereal_time":
            raise AdapterFailure(None, "simulated outage")
        return self.gmst_hours


@pytest.fixture
def fake_ephemeris() -> FakeEphemeris:
    return FakeEphemeris()


@pytest.fixture
def make_ephemeris():
    return FakeEphemeris


@pytest.fixture
def epoch() -> datetime:
    return EPOCH


@pytest.fixture(autouse=True)
def _fresh_state():
    reset_config()
    reset_metrics()
    yield
    reset_config()
