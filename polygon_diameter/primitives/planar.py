"""Planar primitives for projected or unitless coordinates.

Treats coordinates as Cartesian ``(x, y)``. ``distance`` is Euclidean in
the input's own units (the ``units`` setting is accepted but not
applied), and ``bearing`` is measured clockwise from the +y axis so it
follows the same compass convention as the geographic adapters.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from polygon_diameter.primitives.base import GeometryPrimitives, normalize_bearing

if TYPE_CHECKING:
    from polygon_diameter.models.ring import Coordinate


class PlanarPrimitives(GeometryPrimitives):
    """Euclidean distance and compass-style bearing in the plane."""

    name = "planar"

    def distance(self, p: Coordinate, q: Coordinate) -> float:
        return math.hypot(q[0] - p[0], q[1] - p[1])

    def bearing(self, p: Coordinate, q: Coordinate) -> float:
        return normalize_bearing(math.degrees(math.atan2(q[0] - p[0], q[1] - p[1])))
