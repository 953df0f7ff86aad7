"""Distance and bearing primitives.

Adapters consumed by the caliper sweep as two plain callables:

- ``geodesic``:  ellipsoidal geodesics via ``pyproj.Geod`` (default)
- ``haversine``: great circles on a sphere of mean Earth radius
- ``planar``:    Euclidean geometry for projected coordinates
"""

from polygon_diameter.primitives.base import (
    BearingFn,
    DistanceFn,
    GeometryPrimitives,
    PrimitivesError,
)
from polygon_diameter.primitives.factory import (
    GEODESIC,
    HAVERSINE,
    PLANAR,
    get_primitives,
    list_primitives,
    register_primitives,
)

__all__ = [
    "GEODESIC",
    "HAVERSINE",
    "PLANAR",
    "BearingFn",
    "DistanceFn",
    "GeometryPrimitives",
    "PrimitivesError",
    "get_primitives",
    "list_primitives",
    "register_primitives",
]
