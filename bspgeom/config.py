# bspgeom/config.py
"""Centralized configuration for the bspgeom geometry library.

All constants, settings, and configuration dataclasses are defined here.
Modules should import from this single source of truth.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Final

# ============================================================================
# PROJECT PATHS
# ============================================================================

BASE_DIR: Final[Path] = Path(__file__).resolve().parent.parent


def _env_path(key: str, default: Path | None) -> Path | None:
    """Resolve path from environment variable with fallback."""
    value = os.getenv(key)
    return Path(value).expanduser() if value else default


def _env_str(key: str, default: str) -> str:
    """Resolve string from environment variable with fallback."""
    value = os.getenv(key)
    return value if value is not None else default


def _env_bool(key: str, default: bool) -> bool:
    """Resolve boolean flag from environment variable with fallback."""
    value = os.getenv(key)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


# ============================================================================
# GEOMETRY CONSTANTS
# ============================================================================

# Every degeneracy and parallelism test compares against this one threshold.
TOLERANCE: Final[float] = 1.0e-10

# Component ratio used to pick a stable axis in orthogonal().
ORTHOGONAL_THRESHOLD: Final[float] = 0.6

# Half-size of the square that stands in for the unbounded 2D plane when
# region cells are clipped.
REGION_CLIP_EXTENT: Final[float] = 1.0e9

# ============================================================================
# LOGGING CONSTANTS
# ============================================================================

LOG_DEFAULT_LEVEL: Final[str] = "INFO"
LOG_FILE_PREFIX: Final[str] = "bspgeom"

# ============================================================================
# ENUMS
# ============================================================================


class LogLevel(str, Enum):
    """Logging levels."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


# ============================================================================
# DATACLASSES - Configuration Sections
# ============================================================================


@dataclass(frozen=True)
class PathsConfig:
    """File system paths configuration."""

    logs_root: Path | None = None


@dataclass(frozen=True)
class LoggingConfig:
    """Logging sinks configuration."""

    level: LogLevel = LogLevel(LOG_DEFAULT_LEVEL)
    to_file: bool = False
    file_prefix: str = LOG_FILE_PREFIX


@dataclass(frozen=True)
class GeometryConfig:
    """Numerical policy shared by all geometric primitives.

    Values are read-only mirrors of the module constants so that callers can
    inspect the policy in use without importing private names.
    """

    tolerance: float = TOLERANCE
    orthogonal_threshold: float = ORTHOGONAL_THRESHOLD
    region_clip_extent: float = REGION_CLIP_EXTENT


# ============================================================================
# MAIN CONFIGURATION
# ============================================================================


@dataclass(frozen=True)
class Settings:
    """Main library configuration.

    Instances are immutable (frozen=True) to prevent accidental mutation.
    """

    paths: PathsConfig
    logging: LoggingConfig
    geometry: GeometryConfig = field(default_factory=GeometryConfig)


def get_settings() -> Settings:
    """Factory function to create Settings with environment variable overrides.

    Environment variables:
        BSPGEOM_LOGS_ROOT: Directory for log files
        BSPGEOM_LOG_LEVEL: Logging level
        BSPGEOM_LOG_TO_FILE: Enable the file sink (defaults to on when
            BSPGEOM_LOGS_ROOT is set)
    """
    logs_root = _env_path("BSPGEOM_LOGS_ROOT", None)
    level_name = _env_str("BSPGEOM_LOG_LEVEL", LOG_DEFAULT_LEVEL).upper()
    try:
        level = LogLevel(level_name)
    except ValueError as exc:
        raise ValueError(
            f"Invalid BSPGEOM_LOG_LEVEL {level_name!r}, expected one of "
            f"{[lvl.value for lvl in LogLevel]}"
        ) from exc

    return Settings(
        paths=PathsConfig(logs_root=logs_root),
        logging=LoggingConfig(
            level=level,
            to_file=_env_bool("BSPGEOM_LOG_TO_FILE", logs_root is not None),
        ),
    )


# ============================================================================
# MODULE EXPORTS
# ============================================================================

__all__ = [
    # Factory
    "get_settings",
    # Main config
    "Settings",
    # Config sections
    "PathsConfig",
    "LoggingConfig",
    "GeometryConfig",
    # Enums
    "LogLevel",
    # Constants
    "BASE_DIR",
    "TOLERANCE",
    "ORTHOGONAL_THRESHOLD",
    "REGION_CLIP_EXTENT",
    "LOG_DEFAULT_LEVEL",
    "LOG_FILE_PREFIX",
]
