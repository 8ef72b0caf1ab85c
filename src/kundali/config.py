#!/usr/bin/env python3
"""
Engine configuration - ephemeris path, geocoding fallback and logging.
Configuration is frozen at startup to ensure determinism.
"""

import logging
import os

from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class EngineConfig:
    """Immutable configuration for chart calculations"""

    # Swiss Ephemeris data files (None = built-in Moshier ephemeris)
    ephe_path: str | None = None

    # Geocoding fallback when a place cannot be resolved
    default_place: str = "New Delhi"
    default_latitude: float = 28.6139
    default_longitude: float = 77.2090

    # Divisional chart scheme used for navamsa_sign in charts
    navamsa_scheme: str = "linear"

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            "ephe_path": self.ephe_path,
            "default_place": self.default_place,
            "default_latitude": self.default_latitude,
            "default_longitude": self.default_longitude,
            "navamsa_scheme": self.navamsa_scheme,
            "log_level": self.log_level,
            "log_json": self.log_json,
        }

    @classmethod
    def from_env(cls) -> "EngineConfig":
        """Build configuration from KUNDALI_* environment variables"""
        return cls(
            ephe_path=os.environ.get("KUNDALI_EPHE_PATH") or None,
            default_place=os.environ.get("KUNDALI_DEFAULT_PLACE", cls.default_place),
            default_latitude=float(
                os.environ.get("KUNDALI_DEFAULT_LAT", cls.default_latitude)
            ),
            default_longitude=float(
                os.environ.get("KUNDALI_DEFAULT_LON", cls.default_longitude)
            ),
            navamsa_scheme=os.environ.get(
                "KUNDALI_NAVAMSA_SCHEME", cls.navamsa_scheme
            ),
            log_level=os.environ.get("KUNDALI_LOG_LEVEL", cls.log_level).upper(),
            log_json=_env_bool("KUNDALI_LOG_JSON", cls.log_json),
        )


# Global configuration instance (frozen at startup)
_config: EngineConfig | None = None
_initialized: bool = False


def initialize_engine_config(**overrides: Any) -> EngineConfig:
    """
    Initialize engine configuration. Can only be called once.

    Args:
        **overrides: EngineConfig fields that take precedence over the
            environment

    Returns:
        Frozen EngineConfig instance

    Raises:
        RuntimeError: If already initialized
        TypeError: If an override names an unknown field
    """
    global _config, _initialized

    if _initialized:
        raise RuntimeError("Engine configuration already initialized")

    base = EngineConfig.from_env().to_dict()
    for key, value in overrides.items():
        if key not in base:
            raise TypeError(f"Unknown engine config field: {key}")
        base[key] = value

    _config = EngineConfig(**base)
    _initialized = True

    logger.info(f"Engine configuration initialized: {_config.to_dict()}")

    return _config


def get_engine_config() -> EngineConfig:
    """
    Get the current engine configuration.

    Returns:
        Current EngineConfig instance
    """
    if _config is None:
        # Auto-initialize with defaults if not done
        logger.warning("Engine config not initialized, using defaults")
        return initialize_engine_config()

    return _config


def is_initialized() -> bool:
    """Check if engine configuration has been initialized"""
    return _initialized


def reset_config():
    """Reset configuration (for testing only)"""
    global _config, _initialized
    if _initialized:
        logger.warning("Resetting engine configuration (testing only)")
    _config = None
    _initialized = False
