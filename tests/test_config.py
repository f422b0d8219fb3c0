# tests/test_config.py
"""Tests for centralized configuration module."""

from __future__ import annotations

from pathlib import Path

import pytest

from bspgeom.config import (
    BASE_DIR,
    LOG_FILE_PREFIX,
    ORTHOGONAL_THRESHOLD,
    REGION_CLIP_EXTENT,
    TOLERANCE,
    GeometryConfig,
    LogLevel,
    Settings,
    get_settings,
)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Environment without any BSPGEOM_* override."""
    for key in ("BSPGEOM_LOGS_ROOT", "BSPGEOM_LOG_LEVEL", "BSPGEOM_LOG_TO_FILE"):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


def test_constants_are_immutable() -> None:
    """Verify that constants are defined and have expected types."""
    assert TOLERANCE == 1.0e-10
    assert isinstance(ORTHOGONAL_THRESHOLD, float)
    assert isinstance(REGION_CLIP_EXTENT, float)
    assert isinstance(LOG_FILE_PREFIX, str)
    assert isinstance(BASE_DIR, Path)


def test_get_settings_defaults(clean_env: pytest.MonkeyPatch) -> None:
    """Test get_settings factory function."""
    settings = get_settings()

    assert isinstance(settings, Settings)
    assert settings.paths.logs_root is None
    assert settings.logging.level is LogLevel.INFO
    assert settings.logging.to_file is False
    assert settings.geometry == GeometryConfig()
    assert settings.geometry.tolerance == TOLERANCE


def test_settings_immutability(clean_env: pytest.MonkeyPatch) -> None:
    """Test that Settings is frozen and immutable."""
    settings = get_settings()

    with pytest.raises(Exception):  # FrozenInstanceError
        settings.paths = None  # type: ignore

    with pytest.raises(Exception):  # FrozenInstanceError
        settings.geometry.tolerance = 1.0  # type: ignore


def test_environment_overrides(clean_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Environment variables override logging settings."""
    clean_env.setenv("BSPGEOM_LOGS_ROOT", str(tmp_path))
    clean_env.setenv("BSPGEOM_LOG_LEVEL", "debug")

    settings = get_settings()

    assert settings.paths.logs_root == tmp_path
    assert settings.logging.level is LogLevel.DEBUG
    assert settings.logging.to_file is True

    clean_env.setenv("BSPGEOM_LOG_TO_FILE", "off")
    assert get_settings().logging.to_file is False


def test_invalid_log_level(clean_env: pytest.MonkeyPatch) -> None:
    """Unknown level names are rejected."""
    clean_env.setenv("BSPGEOM_LOG_LEVEL", "LOUD")

    with pytest.raises(ValueError, match="BSPGEOM_LOG_LEVEL"):
        get_settings()
