from __future__ import annotations

import numpy as np
import pytest

from kundali.varga import (
    is_vargottama,
    list_schemes,
    navamsa_sign,
    navamsa_sign_index,
    register_scheme,
    varga_pada,
    varga_sign,
    varga_sign_batch,
)


def test_builtin_schemes_registered():
    schemes = list_schemes()
    assert "linear" in schemes
    assert "navamsa_classical" in schemes


def test_navamsa_from_absolute_pada_count():
    assert navamsa_sign_index(0.0) == 0
    assert navamsa_sign_index(3.5) == 1
    # 30° = 1800' = 9 padas
    assert navamsa_sign(30.0) == "Makara"
    assert navamsa_sign(60.0) == "Tula"


def test_classical_navamsa_matches_pada_count_away_from_boundaries():
    for i in range(108):
        lon = i * (10.0 / 3.0) + 1.0
        assert navamsa_sign_index(lon, "navamsa_classical") == navamsa_sign_index(lon)


def test_varga_sign_d1_is_rasi():
    assert varga_sign(45.0, 1) == 1
    assert varga_sign(359.0, 1, "navamsa_classical") == 11


def test_varga_sign_linear_segments():
    assert varga_pada(15.0, 2) == 1
    assert varga_sign(15.0, 2) == 1
    assert varga_sign(45.0, 3) == 4


@pytest.mark.parametrize("divisor", [0, 301])
def test_varga_sign_divisor_range(divisor):
    with pytest.raises(ValueError):
        varga_sign(10.0, divisor)
    with pytest.raises(ValueError):
        varga_pada(10.0, divisor)


def test_unknown_scheme():
    with pytest.raises(KeyError):
        varga_sign(10.0, 9, "no_such_scheme")


def test_batch_matches_scalar():
    lons = [0.0, 3.5, 30.0, 123.4, 359.9]
    out = varga_sign_batch(lons, 9)
    assert out.dtype == np.int64
    assert out.tolist() == [navamsa_sign_index(x) for x in lons]


def test_vargottama():
    assert is_vargottama(0.5) is True
    assert is_vargottama(10.0) is False


def test_register_scheme_validation():
    with pytest.raises(ValueError):
        register_scheme("", lambda lon, div: 0)
    with pytest.raises(ValueError):
        register_scheme("bad", None)  # type: ignore[arg-type]


def test_register_custom_scheme():
    register_scheme("always_mesha", lambda lon, div: 0)
    assert "always_mesha" in list_schemes()
    assert navamsa_sign(200.0, "always_mesha") == "Mesha"
