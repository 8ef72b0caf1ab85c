#!/usr/bin/env python3
"""
Centralized Vedic constants and lookup tables.
All tables are immutable and exhaustively indexed - DO NOT MODIFY ORDER
"""

from types import MappingProxyType

# ============================================================================
# ZODIAC
# ============================================================================
# Sidereal sign names (index 0 = Mesha/Aries)
SIGNS: tuple[str, ...] = (
    "Mesha",  # Aries
    "Vrishabha",  # Taurus
    "Mithuna",  # Gemini
    "Karkataka",  # Cancer
    "Simha",  # Leo
    "Kanya",  # Virgo
    "Tula",  # Libra
    "Vrischika",  # Scorpio
    "Dhanu",  # Sagittarius
    "Makara",  # Capricorn
    "Kumbha",  # Aquarius
    "Meena",  # Pisces
)

NUM_SIGNS = 12
SIGN_SPAN = 30.0

# Sign -> ruling planet (7 classical planets)
SIGN_LORDS = MappingProxyType(
    {
        "Mesha": "Kuja",
        "Vrishabha": "Shukra",
        "Mithuna": "Budha",
        "Karkataka": "Chandra",
        "Simha": "Surya",
        "Kanya": "Budha",
        "Tula": "Shukra",
        "Vrischika": "Kuja",
        "Dhanu": "Guru",
        "Makara": "Shani",
        "Kumbha": "Shani",
        "Meena": "Guru",
    }
)

# Bhava (house) names, house 1..12
BHAVA_NAMES: tuple[str, ...] = (
    "Tanu",
    "Dhana",
    "Sahaja",
    "Sukha",
    "Putra",
    "Ari",
    "Yuvati",
    "Randhra",
    "Dharma",
    "Karma",
    "Labha",
    "Vyaya",
)

# ============================================================================
# NAKSHATRAS
# ============================================================================
NAKSHATRAS: tuple[str, ...] = (
    "Ashwini",
    "Bharani",
    "Krittika",
    "Rohini",
    "Mrigashira",
    "Ardra",
    "Punarvasu",
    "Pushya",
    "Ashlesha",
    "Magha",
    "Purva Phalguni",
    "Uttara Phalguni",
    "Hasta",
    "Chitra",
    "Swati",
    "Vishakha",
    "Anuradha",
    "Jyeshtha",
    "Mula",
    "Purva Ashadha",
    "Uttara Ashadha",
    "Shravana",
    "Dhanishta",
    "Shatabhisha",
    "Purva Bhadrapada",
    "Uttara Bhadrapada",
    "Revati",
)

NUM_NAKSHATRAS = 27
NAKSHATRA_SPAN = 360.0 / NUM_NAKSHATRAS  # 13°20'

# Navamsa pada span in arc-minutes (3°20')
NAVAMSA_PADA_MINUTES = 200.0

# ============================================================================
# VIMSHOTTARI
# ============================================================================
# Nakshatra lord cycle, also the dasha sequence
LORD_CYCLE: tuple[str, ...] = (
    "Ketu",
    "Shukra",
    "Surya",
    "Chandra",
    "Kuja",
    "Rahu",
    "Guru",
    "Shani",
    "Budha",
)

# Vimshottari period years for each lord
DASHA_YEARS = MappingProxyType(
    {
        "Ketu": 7,
        "Shukra": 20,
        "Surya": 6,
        "Chandra": 10,
        "Kuja": 7,
        "Rahu": 18,
        "Guru": 16,
        "Shani": 19,
        "Budha": 17,
    }
)

# Total cycle duration in years
TOTAL_CYCLE_YEARS = 120

# Mean Gregorian year used for dasha date arithmetic
DAYS_PER_YEAR = 365.2425
MS_PER_YEAR = DAYS_PER_YEAR * 24 * 60 * 60 * 1000

# ============================================================================
# BODIES
# ============================================================================
# Bodies sampled from the ephemeris (English names, adapter vocabulary)
EPHEMERIS_BODIES: tuple[str, ...] = (
    "Sun",
    "Moon",
    "Mars",
    "Mercury",
    "Jupiter",
    "Venus",
    "Saturn",
)

# Luminaries are never retrograde
LUMINARIES = frozenset({"Sun", "Moon"})

# English -> Vedic display names
VEDIC_NAMES = MappingProxyType(
    {
        "Sun": "Surya",
        "Moon": "Chandra",
        "Mars": "Kuja",
        "Mercury": "Budha",
        "Jupiter": "Guru",
        "Venus": "Shukra",
        "Saturn": "Shani",
        "Rahu": "Rahu",
        "Ketu": "Ketu",
        "Ascendant": "Lagna",
    }
)

ASCENDANT = "Ascendant"

# ============================================================================
# DIGNITY
# ============================================================================
# body -> (exaltation sign, debilitation sign, own signs)
DIGNITY_RULES = MappingProxyType(
    {
        "Surya": ("Mesha", "Tula", ("Simha",)),
        "Chandra": ("Vrishabha", "Vrischika", ("Karkataka",)),
        "Kuja": ("Makara", "Karkataka", ("Mesha", "Vrischika")),
        "Budha": ("Kanya", "Meena", ("Mithuna", "Kanya")),
        "Guru": ("Karkataka", "Makara", ("Dhanu", "Meena")),
        "Shukra": ("Meena", "Kanya", ("Vrishabha", "Tula")),
        "Shani": ("Tula", "Mesha", ("Makara", "Kumbha")),
        "Rahu": ("Vrishabha", "Vrischika", ("Kumbha",)),
        "Ketu": ("Vrischika", "Vrishabha", ("Vrischika",)),
    }
)

EXALTED = "Exalted"
DEBILITATED = "Debilitated"
OWN_SIGN = "Own Sign"
NEUTRAL = "Neutral"
NO_DIGNITY = "-"

# ============================================================================
# ASTRONOMICAL CONSTANTS
# ============================================================================
# Fixed obliquity of the ecliptic used for the ascendant
OBLIQUITY_DEG = 23.44

# J2000.0 epoch (Julian Day)
J2000_JD = 2451545.0
DAYS_PER_JULIAN_CENTURY = 36525.0

# Linear ayanamsa approximation: value at 2000.0 and yearly drift
AYANAMSA_AT_2000 = 23.85
AYANAMSA_RATE_PER_YEAR = 0.0139

# Retrograde sampling window in seconds
RETROGRADE_WINDOW_SECONDS = 3600
