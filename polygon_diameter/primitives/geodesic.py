"""Ellipsoidal primitives backed by ``pyproj.Geod``.

Distances and azimuths are solved on the configured ellipsoid
(WGS 84 by default) with Karney's geodesic algorithms, so results are
accurate at any latitude, including the high latitudes where spherical
approximations drift.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from polygon_diameter.core.constants import DEFAULT_UNITS
from polygon_diameter.primitives.base import (
    GeometryPrimitives,
    PrimitivesError,
    metres_to_units,
    normalize_bearing,
)

if TYPE_CHECKING:
    from polygon_diameter.models.ring import Coordinate


class GeodesicPrimitives(GeometryPrimitives):
    """Geodesic distance and initial azimuth on an ellipsoid."""

    name = "geodesic"

    def __init__(self, *, units: str = DEFAULT_UNITS, ellipsoid: str = "WGS84") -> None:
        super().__init__(units=units)
        from pyproj import Geod
        from pyproj.exceptions import GeodError

        try:
            self._geod = Geod(ellps=ellipsoid)
        except (GeodError, KeyError, ValueError) as exc:
            msg = f"Unknown ellipsoid {ellipsoid!r}: {exc}"
            raise PrimitivesError(primitives=self.name, message=msg) from exc
        self._ellipsoid = ellipsoid

    @property
    def ellipsoid(self) -> str:
        return self._ellipsoid

    def distance(self, p: Coordinate, q: Coordinate) -> float:
        _az12, _az21, dist_m = self._geod.inv(p[0], p[1], q[0], q[1])
        return metres_to_units(dist_m, self._units)

    def bearing(self, p: Coordinate, q: Coordinate) -> float:
        az12, _az21, _dist = self._geod.inv(p[0], p[1], q[0], q[1])
        return normalize_bearing(az12)
