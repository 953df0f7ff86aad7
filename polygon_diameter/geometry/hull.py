"""Hull extraction and winding canonicalisation.

Reduces an arbitrary point set to the ordered boundary ring consumed by
the caliper sweep, using shapely's convex hull (or its concave hull when
a ratio below 1 is requested). Degenerate hulls collapse naturally:
coincident points yield a one-vertex ring and collinear points yield the
two extreme points.

The caliper sweep assumes counter-clockwise winding;
``canonicalize_winding`` enforces it regardless of the order the hull
was produced in.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from polygon_diameter.core.exceptions import ContractError, InvalidInputError
from polygon_diameter.models.ring import Ring

if TYPE_CHECKING:
    from collections.abc import Sequence

    from polygon_diameter.models.ring import Coordinate

logger = logging.getLogger("polygon_diameter.geometry.hull")

CONVEX_RATIO = 1.0


class HullError(ContractError):
    """Raised when hull extraction does not yield a usable boundary ring."""

    default_stage = "hull"
    default_code = "HULL_EXTRACTION_FAILED"


def extract_hull(points: Sequence[Coordinate], *, concavity: float = CONVEX_RATIO) -> Ring:
    """Return the hull boundary of ``points`` as a ring.

    Args:
        points: Point set as ``(lon, lat)`` tuples, in any order and with
            any number of duplicates.
        concavity: shapely concave-hull ratio in ``(0, 1]``. ``1.0`` gives
            the convex hull; smaller values hug the points more tightly.

    Returns:
        The hull ring in shapely's native winding, without the closing
        vertex. One vertex for a single distinct point, two for collinear
        points.

    Raises:
        InvalidInputError: If ``points`` is empty or ``concavity`` is out
            of range.
        HullError: If shapely returns an unexpected geometry type.
    """
    if not points:
        msg = "Cannot build a hull from an empty point set"
        raise InvalidInputError(msg, stage="hull", code="EMPTY_POINT_SET")
    if not 0.0 < concavity <= CONVEX_RATIO:
        msg = f"Hull concavity {concavity} is outside the allowed range (0, 1]"
        raise InvalidInputError(msg, stage="hull")

    import shapely
    from shapely.geometry import MultiPoint

    cloud = MultiPoint(list(points))
    if concavity >= CONVEX_RATIO:
        hull = cloud.convex_hull
    else:
        hull = shapely.concave_hull(cloud, ratio=concavity)

    if hull.is_empty:
        msg = f"Hull of {len(points)} point(s) is empty"
        raise HullError(msg)

    if hull.geom_type == "Point":
        ring = Ring.from_coords([(hull.x, hull.y)])
    elif hull.geom_type == "LineString":
        line = list(hull.coords)
        ring = Ring.from_coords([line[0], line[-1]])
    elif hull.geom_type == "Polygon":
        ring = Ring.from_coords(hull.exterior.coords)
    else:
        msg = f"Hull extraction returned unsupported geometry type {hull.geom_type!r}"
        raise HullError(msg)

    logger.debug(
        "Hull extracted | points=%d | hull=%d | type=%s | concavity=%.3f",
        len(points),
        len(ring),
        hull.geom_type,
        concavity,
    )
    return ring


def is_counter_clockwise(ring: Ring) -> bool:
    """Whether the ring's signed area is positive in the ``(x, y)`` plane.

    Rings with fewer than three vertices have no winding and count as
    counter-clockwise.
    """
    if len(ring) < 3:
        return True

    from shapely.geometry import LinearRing

    return bool(LinearRing(ring.coords).is_ccw)


def canonicalize_winding(ring: Ring) -> Ring:
    """Return ``ring`` wound counter-clockwise, reversing it if needed."""
    if is_counter_clockwise(ring):
        return ring
    logger.debug("Reversing clockwise ring of %d vertices", len(ring))
    return ring.reversed()
