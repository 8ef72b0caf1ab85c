"""
Divisional chart (varga) placement.

A varga splits each 30° sign into equal parts and maps every part to a sign.
Two D9 (navamsa) rules are available:

- "linear": the absolute pada count floor(L / 3°20') taken modulo 12.
  Charts use this by default. Other divisors use (rasi * D + part) mod 12.
- "navamsa_classical": each sign's nine padas start from the sign itself
  (movable), the 9th from it (fixed) or the 5th from it (dual).

Both give the same D9 sign except on floating-point pada boundaries.
Kernels are numba-compiled; nothing here touches the ephemeris.
"""

from __future__ import annotations

import logging

from collections.abc import Callable, Iterable

import numpy as np

from numba import njit

from .constants import NAVAMSA_PADA_MINUTES, NUM_SIGNS, SIGN_SPAN, SIGNS

__all__ = [
    "is_vargottama",
    "list_schemes",
    "navamsa_sign",
    "navamsa_sign_index",
    "register_scheme",
    "varga_pada",
    "varga_sign",
    "varga_sign_batch",
]

logger = logging.getLogger(__name__)

MAX_DIVISOR = 300

# (longitude, divisor) -> sign index 0..11
VargaScheme = Callable[[float, int], int]

_REGISTRY: dict[str, VargaScheme] = {}

# D9 starting offset by modality: movable, fixed, dual
_TRIPLICITY_START = (0, 8, 4)


# ============================================================================
# KERNELS
# ============================================================================


@njit(cache=True)
def _wrap360(longitude: float) -> float:
    x = longitude % 360.0
    return x + 360.0 if x < 0.0 else x


@njit(cache=True)
def _rasi(longitude: float) -> int:
    """D1 sign index, 0 = Mesha"""
    return int(_wrap360(longitude) // SIGN_SPAN) % NUM_SIGNS


@njit(cache=True)
def _part_in_sign(longitude: float, divisor: int) -> int:
    """Which of the sign's `divisor` equal parts holds the longitude"""
    offset = _wrap360(longitude) % SIGN_SPAN
    part = int(offset // (SIGN_SPAN / divisor))
    # offset just below 30.0 can round into part == divisor
    return min(part, divisor - 1)


@njit(cache=True)
def _equal_division(longitude: float, divisor: int) -> int:
    return (_rasi(longitude) * divisor + _part_in_sign(longitude, divisor)) % NUM_SIGNS


@njit(cache=True)
def _d9_pada_count(longitude: float) -> int:
    """floor(L * 60 / 200) mod 12"""
    padas = int((_wrap360(longitude) * 60.0) // NAVAMSA_PADA_MINUTES)
    return padas % NUM_SIGNS


@njit(cache=True)
def _d9_triplicity(longitude: float) -> int:
    rasi = _rasi(longitude)
    start = rasi + _TRIPLICITY_START[rasi % 3]
    return (start + _part_in_sign(longitude, 9)) % NUM_SIGNS


# ============================================================================
# SCHEMES
# ============================================================================


def _linear(longitude: float, divisor: int) -> int:
    if divisor == 9:
        return _d9_pada_count(longitude)
    return _equal_division(longitude, divisor)


def _classical(longitude: float, divisor: int) -> int:
    if divisor == 9:
        return _d9_triplicity(longitude)
    return _equal_division(longitude, divisor)


def register_scheme(name: str, fn: VargaScheme) -> None:
    """Add or replace a named varga scheme.

    Raises:
        ValueError: If name is empty or fn is not callable
    """
    if not name:
        raise ValueError("Varga scheme needs a name")
    if not callable(fn):
        raise ValueError(f"Varga scheme {name!r} is not callable")
    _REGISTRY[name] = fn
    logger.debug(f"Varga scheme registered: {name}")


def list_schemes() -> list[str]:
    return sorted(_REGISTRY)


def _scheme(name: str) -> VargaScheme:
    try:
        return _REGISTRY[name]
    except KeyError:
        raise KeyError(f"Unknown varga scheme {name!r}; known: {list_schemes()}") from None


def _check_divisor(divisor: int) -> None:
    if not 1 <= divisor <= MAX_DIVISOR:
        raise ValueError(f"Varga divisor must be in 1..{MAX_DIVISOR}, got {divisor}")


# ============================================================================
# PUBLIC API
# ============================================================================


def varga_pada(longitude: float, divisor: int) -> int:
    """Index 0..divisor-1 of the part of its sign a longitude falls in."""
    _check_divisor(divisor)
    return _part_in_sign(longitude, divisor)


def varga_sign(longitude: float, divisor: int, scheme: str = "linear") -> int:
    """Sign index (0 = Mesha) of a longitude in the D-`divisor` chart.

    Raises:
        KeyError: Unknown scheme
        ValueError: divisor outside 1..300
    """
    _check_divisor(divisor)
    if divisor == 1:
        return _rasi(longitude)
    return _scheme(scheme)(longitude, divisor)


def varga_sign_batch(
    longitudes: Iterable[float], divisor: int, scheme: str = "linear"
) -> np.ndarray:
    """varga_sign over many longitudes, as an int64 array."""
    _check_divisor(divisor)
    fn = _scheme(scheme)
    lons = np.asarray(list(longitudes), dtype=np.float64)
    out = np.empty(lons.shape[0], dtype=np.int64)
    for i in range(lons.shape[0]):
        out[i] = fn(float(lons[i]), divisor)
    return out


def navamsa_sign_index(longitude: float, scheme: str = "linear") -> int:
    return varga_sign(longitude, 9, scheme)


def navamsa_sign(longitude: float, scheme: str = "linear") -> str:
    """D9 sign name for a sidereal longitude."""
    return SIGNS[navamsa_sign_index(longitude, scheme)]


def is_vargottama(longitude: float, scheme: str = "linear") -> bool:
    """True when a longitude's D1 and D9 signs coincide."""
    return _rasi(longitude) == navamsa_sign_index(longitude, scheme)


register_scheme("linear", _linear)
register_scheme("navamsa_classical", _classical)
