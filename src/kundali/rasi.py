#!/usr/bin/env python3
"""
Rasi and nakshatra classification of sidereal longitudes.

Pure lookups over the static tables in constants:
- sign, degree within sign, sign lord
- nakshatra and its Vimshottari lord
- planetary dignity
"""

from math import floor

from .constants import (
    DEBILITATED,
    DIGNITY_RULES,
    EXALTED,
    LORD_CYCLE,
    NAKSHATRA_SPAN,
    NAKSHATRAS,
    NEUTRAL,
    NO_DIGNITY,
    NUM_NAKSHATRAS,
    NUM_SIGNS,
    OWN_SIGN,
    SIGN_LORDS,
    SIGN_SPAN,
    SIGNS,
)
from .numerics import clamp_value, degrees_to_dm, normalize_angle

# ============================================================================
# SIGNS
# ============================================================================


def sign_index(longitude: float) -> int:
    """Sign index 0..11 (0 = Mesha)"""
    lon = normalize_angle(longitude)
    return int(clamp_value(floor(lon / SIGN_SPAN), 0, NUM_SIGNS - 1))


def sign_name(longitude: float) -> str:
    return SIGNS[sign_index(longitude)]


def degree_in_sign(longitude: float) -> float:
    """Degrees elapsed within the sign [0, 30)"""
    return normalize_angle(longitude) % SIGN_SPAN


def format_degree_in_sign(longitude: float) -> str:
    return degrees_to_dm(degree_in_sign(longitude))


def sign_lord(sign: str) -> str:
    """Ruling planet of a sign

    Raises:
        KeyError: If sign is not one of the 12 sidereal sign names
    """
    return SIGN_LORDS[sign]


# ============================================================================
# NAKSHATRAS
# ============================================================================


def nakshatra_index(longitude: float) -> int:
    """Nakshatra index 0..26 (0 = Ashwini)"""
    lon = normalize_angle(longitude)
    return int(clamp_value(floor(lon / NAKSHATRA_SPAN), 0, NUM_NAKSHATRAS - 1))


def nakshatra_name(longitude: float) -> str:
    return NAKSHATRAS[nakshatra_index(longitude)]


def nakshatra_lord(longitude: float) -> str:
    """Vimshottari lord of the nakshatra containing longitude"""
    return LORD_CYCLE[nakshatra_index(longitude) % len(LORD_CYCLE)]


# ============================================================================
# DIGNITY
# ============================================================================


def dignity(body: str, sign: str) -> str:
    """
    Dignity of a body in a sign.

    First match wins: Exalted, Debilitated, Own Sign, else Neutral.
    Bodies without a rule (e.g. Lagna) get "-".
    """
    rule = DIGNITY_RULES.get(body)
    if rule is None:
        return NO_DIGNITY

    exaltation, debilitation, own_signs = rule
    if sign == exaltation:
        return EXALTED
    if sign == debilitation:
        return DEBILITATED
    if sign in own_signs:
        return OWN_SIGN
    return NEUTRAL
