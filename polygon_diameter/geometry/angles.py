"""Counter-clockwise angle between two directed ring edges."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from polygon_diameter.core.constants import TWO_PI

if TYPE_CHECKING:
    from polygon_diameter.models.ring import Ring
    from polygon_diameter.primitives.base import BearingFn


def angle_between(ring: Ring, a: int, b: int, bearing: BearingFn) -> float:
    """Return how far edge ``b`` is rotated counter-clockwise from edge ``a``.

    Each edge's direction is the compass bearing from its start vertex to
    the next vertex. Compass bearings grow clockwise, so the counter-clockwise
    rotation is the difference of the negated bearings.

    Args:
        ring: The ring both edges belong to.
        a: Start index of the reference edge (wraps past ``len(ring)``).
        b: Start index of the rotated edge (wraps past ``len(ring)``).
        bearing: Bearing primitive, degrees in ``(-180, 180]``.

    Returns:
        Angle in radians in ``[0, 2*pi)``: 0 for the same direction, pi for
        opposite directions.
    """
    bearing_a = bearing(*ring.edge(a))
    bearing_b = bearing(*ring.edge(b))

    delta = -bearing_b - -bearing_a
    return (TWO_PI + math.radians(delta)) % TWO_PI
