"""Measurement configuration loaded from environment variables.

All configuration values have sensible defaults, so ``DiameterConfig()``
is usable as-is. ``from_env()`` reads overrides from ``DIAMETER_*``
environment variables.

Fail-fast validation:
    ``from_env()`` raises ``ConfigValidationError`` if any value is out of
    its valid range. This catches bad configuration before a measurement
    runs rather than deep inside the caliper sweep.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from polygon_diameter.core.constants import (
    DEFAULT_TIE_TOLERANCE_RAD,
    DEFAULT_UNITS,
    METRES_PER_UNIT,
)
from polygon_diameter.core.exceptions import DiameterError

MAX_TIE_TOLERANCE_RAD = 0.1

_TRUE_STRINGS = frozenset({"1", "true", "yes", "on"})
_FALSE_STRINGS = frozenset({"0", "false", "no", "off"})


class ConfigValidationError(DiameterError):
    """Raised when configuration values are out of valid range.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
        message: Human-readable description of the valid range.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        self.message = message
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


@dataclass(frozen=True, slots=True)
class DiameterConfig:
    """Immutable measurement configuration.

    Attributes:
        primitives: Distance/bearing primitives name (``geodesic``,
            ``haversine`` or ``planar``).
        units: Output length unit (e.g. ``kilometers``, ``meters``).
        ellipsoid: pyproj ellipsoid name used by the geodesic primitives.
        tie_tolerance_rad: Absolute tolerance under which the caliper gap
            is treated as exactly pi (both calipers advance).
        hull_concavity: shapely concave-hull ratio in ``(0, 1]``;
            ``1.0`` yields the convex hull.
        validate_wgs84: Reject coordinates outside WGS 84 bounds.
    """

    primitives: str = "geodesic"
    units: str = DEFAULT_UNITS
    ellipsoid: str = "WGS84"
    tie_tolerance_rad: float = DEFAULT_TIE_TOLERANCE_RAD
    hull_concavity: float = 1.0
    validate_wgs84: bool = True

    @classmethod
    def from_env(cls) -> DiameterConfig:
        """Load and validate configuration from environment variables.

        Raises:
            ConfigValidationError: If a value is out of range, a required
                string is empty, or a boolean flag is unrecognised.
            ValueError: If a numeric environment variable cannot be
                parsed (e.g. ``DIAMETER_TIE_TOLERANCE_RAD=abc``).
        """
        config = cls(
            primitives=os.getenv("DIAMETER_PRIMITIVES", "geodesic"),
            units=os.getenv("DIAMETER_UNITS", DEFAULT_UNITS),
            ellipsoid=os.getenv("DIAMETER_ELLIPSOID", "WGS84"),
            tie_tolerance_rad=float(
                os.getenv("DIAMETER_TIE_TOLERANCE_RAD", str(DEFAULT_TIE_TOLERANCE_RAD))
            ),
            hull_concavity=float(os.getenv("DIAMETER_HULL_CONCAVITY", "1.0")),
            validate_wgs84=_parse_bool(
                "DIAMETER_VALIDATE_WGS84", os.getenv("DIAMETER_VALIDATE_WGS84", "true")
            ),
        )
        _validate(config)
        return config


def _parse_bool(key: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_STRINGS:
        return True
    if value in _FALSE_STRINGS:
        return False
    raise ConfigValidationError(key, raw, "must be a boolean (true/false)")


def _validate(config: DiameterConfig) -> None:
    """Validate configuration ranges.  Raises ``ConfigValidationError``."""
    if not config.primitives:
        raise ConfigValidationError(
            "DIAMETER_PRIMITIVES",
            config.primitives,
            "must not be empty",
        )

    if config.units not in METRES_PER_UNIT:
        raise ConfigValidationError(
            "DIAMETER_UNITS",
            config.units,
            f"must be one of {', '.join(sorted(METRES_PER_UNIT))}",
        )

    if not config.ellipsoid:
        raise ConfigValidationError(
            "DIAMETER_ELLIPSOID",
            config.ellipsoid,
            "must not be empty",
        )

    if not 0.0 <= config.tie_tolerance_rad < MAX_TIE_TOLERANCE_RAD:
        raise ConfigValidationError(
            "DIAMETER_TIE_TOLERANCE_RAD",
            config.tie_tolerance_rad,
            f"must be >= 0 and < {MAX_TIE_TOLERANCE_RAD} (radians)",
        )

    if not 0.0 < config.hull_concavity <= 1.0:
        raise ConfigValidationError(
            "DIAMETER_HULL_CONCAVITY",
            config.hull_concavity,
            "must be > 0 and <= 1 (1 = convex hull)",
        )
