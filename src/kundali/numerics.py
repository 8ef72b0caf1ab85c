#!/usr/bin/env python3
"""
Numerical helpers shared by the calculation modules.
"""

from __future__ import annotations

from math import floor


def normalize_angle(deg: float) -> float:
    """Normalize an angle in degrees to [0, 360).

    Handles negative inputs robustly.
    """
    x = float(deg) % 360.0
    x = x + 360.0 if x < 0.0 else x
    # -1e-15 % 360 rounds up to 360.0
    return 0.0 if x >= 360.0 else x


def longitude_delta(current: float, previous: float) -> float:
    """Signed difference current - previous folded into (-180, 180]."""
    diff = current - previous
    if diff <= -180.0:
        diff += 360.0
    if diff > 180.0:
        diff -= 360.0
    return diff


def clamp_value(v: float, lo: float, hi: float) -> float:
    """Clamp a value into [lo, hi]."""
    if v < lo:
        return lo
    if v > hi:
        return hi
    return v


def degrees_to_dm(deg: float) -> str:
    """Format degrees as D° MM' (floored minutes, no seconds).

    Example: 12.5 -> "12° 30'".
    """
    whole_deg = int(floor(deg))
    whole_min = int(floor((deg - whole_deg) * 60.0))
    return f"{whole_deg}° {whole_min:02d}'"
