"""Tests for measurement configuration.

Covers:
- Default values
- Loading from DIAMETER_* environment variables
- Type coercion (string env vars to numeric and boolean fields)
- Fail-fast range validation
"""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest

from polygon_diameter.core.config import ConfigValidationError, DiameterConfig


class TestDiameterConfigDefaults:
    """Verify default configuration values."""

    def test_default_primitives(self) -> None:
        cfg = DiameterConfig()
        assert cfg.primitives == "geodesic"
        assert cfg.ellipsoid == "WGS84"

    def test_default_units(self) -> None:
        assert DiameterConfig().units == "kilometers"

    def test_default_tie_tolerance(self) -> None:
        assert DiameterConfig().tie_tolerance_rad == 1e-9

    def test_default_hull_is_convex(self) -> None:
        assert DiameterConfig().hull_concavity == 1.0

    def test_default_validates_wgs84(self) -> None:
        assert DiameterConfig().validate_wgs84 is True


class TestDiameterConfigFromEnv:
    """Verify loading from environment variables."""

    def test_loads_from_environment(self) -> None:
        """All env vars are read and coerced to correct types."""
        env = {
            "DIAMETER_PRIMITIVES": "haversine",
            "DIAMETER_UNITS": "miles",
            "DIAMETER_ELLIPSOID": "GRS80",
            "DIAMETER_TIE_TOLERANCE_RAD": "1e-6",
            "DIAMETER_HULL_CONCAVITY": "0.4",
            "DIAMETER_VALIDATE_WGS84": "false",
        }
        with patch.dict(os.environ, env, clear=False):
            cfg = DiameterConfig.from_env()

        assert cfg.primitives == "haversine"
        assert cfg.units == "miles"
        assert cfg.ellipsoid == "GRS80"
        assert cfg.tie_tolerance_rad == 1e-6
        assert cfg.hull_concavity == 0.4
        assert cfg.validate_wgs84 is False

    def test_defaults_when_env_missing(self) -> None:
        """Missing environment variables fall back to defaults."""
        with patch.dict(os.environ, {}, clear=True):
            cfg = DiameterConfig.from_env()

        assert cfg == DiameterConfig()

    def test_frozen_immutability(self) -> None:
        cfg = DiameterConfig()
        with pytest.raises(AttributeError):
            cfg.units = "meters"  # type: ignore[misc]

    @pytest.mark.parametrize("raw", ["1", "TRUE", "yes", " on "])
    def test_truthy_strings(self, raw: str) -> None:
        with patch.dict(os.environ, {"DIAMETER_VALIDATE_WGS84": raw}, clear=True):
            assert DiameterConfig.from_env().validate_wgs84 is True

    @pytest.mark.parametrize("raw", ["0", "False", "no", "off"])
    def test_falsy_strings(self, raw: str) -> None:
        with patch.dict(os.environ, {"DIAMETER_VALIDATE_WGS84": raw}, clear=True):
            assert DiameterConfig.from_env().validate_wgs84 is False


class TestDiameterConfigValidation:
    """Fail-fast range validation in from_env."""

    def test_empty_primitives_rejected(self) -> None:
        with (
            patch.dict(os.environ, {"DIAMETER_PRIMITIVES": ""}, clear=True),
            pytest.raises(ConfigValidationError, match="DIAMETER_PRIMITIVES"),
        ):
            DiameterConfig.from_env()

    def test_unknown_units_rejected(self) -> None:
        with (
            patch.dict(os.environ, {"DIAMETER_UNITS": "parsecs"}, clear=True),
            pytest.raises(ConfigValidationError, match="DIAMETER_UNITS"),
        ):
            DiameterConfig.from_env()

    def test_metres_spelling_accepted(self) -> None:
        with patch.dict(os.environ, {"DIAMETER_UNITS": "metres"}, clear=True):
            assert DiameterConfig.from_env().units == "metres"

    def test_empty_ellipsoid_rejected(self) -> None:
        with (
            patch.dict(os.environ, {"DIAMETER_ELLIPSOID": ""}, clear=True),
            pytest.raises(ConfigValidationError, match="DIAMETER_ELLIPSOID"),
        ):
            DiameterConfig.from_env()

    def test_negative_tolerance_rejected(self) -> None:
        with (
            patch.dict(os.environ, {"DIAMETER_TIE_TOLERANCE_RAD": "-1e-9"}, clear=True),
            pytest.raises(ConfigValidationError, match="DIAMETER_TIE_TOLERANCE_RAD"),
        ):
            DiameterConfig.from_env()

    def test_zero_tolerance_accepted(self) -> None:
        """A tolerance of 0 means exact-pi ties only."""
        with patch.dict(os.environ, {"DIAMETER_TIE_TOLERANCE_RAD": "0"}, clear=True):
            assert DiameterConfig.from_env().tie_tolerance_rad == 0.0

    def test_large_tolerance_rejected(self) -> None:
        with (
            patch.dict(os.environ, {"DIAMETER_TIE_TOLERANCE_RAD": "0.1"}, clear=True),
            pytest.raises(ConfigValidationError, match="radians"),
        ):
            DiameterConfig.from_env()

    def test_zero_concavity_rejected(self) -> None:
        with (
            patch.dict(os.environ, {"DIAMETER_HULL_CONCAVITY": "0"}, clear=True),
            pytest.raises(ConfigValidationError, match="DIAMETER_HULL_CONCAVITY"),
        ):
            DiameterConfig.from_env()

    def test_concavity_over_one_rejected(self) -> None:
        with (
            patch.dict(os.environ, {"DIAMETER_HULL_CONCAVITY": "1.5"}, clear=True),
            pytest.raises(ConfigValidationError, match="convex hull"),
        ):
            DiameterConfig.from_env()

    def test_concavity_boundary_one_accepted(self) -> None:
        with patch.dict(os.environ, {"DIAMETER_HULL_CONCAVITY": "1"}, clear=True):
            assert DiameterConfig.from_env().hull_concavity == 1.0

    def test_unrecognised_bool_rejected(self) -> None:
        with (
            patch.dict(os.environ, {"DIAMETER_VALIDATE_WGS84": "maybe"}, clear=True),
            pytest.raises(ConfigValidationError, match="boolean"),
        ):
            DiameterConfig.from_env()

    def test_non_numeric_env_raises_value_error(self) -> None:
        """Non-numeric string for a float field raises ValueError."""
        with (
            patch.dict(os.environ, {"DIAMETER_HULL_CONCAVITY": "abc"}, clear=True),
            pytest.raises(ValueError),
        ):
            DiameterConfig.from_env()

    def test_error_contains_key_and_value(self) -> None:
        with (
            patch.dict(os.environ, {"DIAMETER_HULL_CONCAVITY": "2"}, clear=True),
            pytest.raises(ConfigValidationError) as exc_info,
        ):
            DiameterConfig.from_env()
        assert exc_info.value.key == "DIAMETER_HULL_CONCAVITY"
        assert exc_info.value.value == 2.0
        assert exc_info.value.stage == "config"
        assert exc_info.value.code == "CONFIG_VALIDATION_FAILED"
