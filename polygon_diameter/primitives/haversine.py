"""Spherical primitives (great-circle distance, initial bearing).

Uses the haversine formula on a sphere of mean Earth radius. Cheaper
than the ellipsoidal solution and within about 0.5 % of it.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from polygon_diameter.core.constants import DEFAULT_UNITS, MEAN_EARTH_RADIUS_M
from polygon_diameter.primitives.base import (
    GeometryPrimitives,
    metres_to_units,
    normalize_bearing,
)

if TYPE_CHECKING:
    from polygon_diameter.models.ring import Coordinate


class HaversinePrimitives(GeometryPrimitives):
    """Great-circle distance and initial bearing on a sphere."""

    name = "haversine"

    def __init__(
        self, *, units: str = DEFAULT_UNITS, radius_m: float = MEAN_EARTH_RADIUS_M
    ) -> None:
        super().__init__(units=units)
        self._radius_m = radius_m

    def distance(self, p: Coordinate, q: Coordinate) -> float:
        lat1 = math.radians(p[1])
        lat2 = math.radians(q[1])
        dlat = lat2 - lat1
        dlon = math.radians(q[0] - p[0])

        a = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
        c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
        return metres_to_units(self._radius_m * c, self._units)

    def bearing(self, p: Coordinate, q: Coordinate) -> float:
        lat1 = math.radians(p[1])
        lat2 = math.radians(q[1])
        dlon = math.radians(q[0] - p[0])

        y = math.sin(dlon) * math.cos(lat2)
        x = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(dlon)
        return normalize_bearing(math.degrees(math.atan2(y, x)))
