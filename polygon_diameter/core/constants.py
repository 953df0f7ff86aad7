"""Shared constants — single source of truth.

Centralises angle constants, length-unit conversion factors and WGS 84
coordinate bounds used across the primitives, geometry and extraction
packages.
"""

from __future__ import annotations

import math

# ---------------------------------------------------------------------------
# Angles
# ---------------------------------------------------------------------------

PI: float = math.pi
TWO_PI: float = 2 * math.pi

DEFAULT_TIE_TOLERANCE_RAD: float = 1e-9
"""Absolute tolerance (radians) under which a caliper gap counts as exactly pi."""

# ---------------------------------------------------------------------------
# Length units
# ---------------------------------------------------------------------------

MEAN_EARTH_RADIUS_M: float = 6_371_008.8
"""Mean Earth radius in metres (IUGG), used by the spherical primitives."""

METRES_PER_UNIT: dict[str, float] = {
    "meters": 1.0,
    "metres": 1.0,
    "kilometers": 1_000.0,
    "kilometres": 1_000.0,
    "miles": 1_609.344,
    "nauticalmiles": 1_852.0,
    "feet": 0.3048,
}
"""Metres in one unit of each supported output length unit."""

DEFAULT_UNITS: str = "kilometers"

# ---------------------------------------------------------------------------
# WGS 84 coordinate bounds
# ---------------------------------------------------------------------------

MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0
MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0
