"""Rotating-calipers polygon diameter.

Sweeps two parallel supporting lines ("calipers") around a hull ring.
At every step the vertices under the calipers form an antipodal pair,
and the diameter of a convex polygon is always realised by one of the
O(n) antipodal pairs visited while the calipers turn through pi, so the
sweep does linear work instead of comparing all O(n^2) vertex pairs.

The ring must be wound counter-clockwise (see
``polygon_diameter.geometry.hull.canonicalize_winding``). Distance and
bearing are injected, so the same sweep serves geodesic, spherical and
planar coordinates.

References:
    Shamos, M. (1978). *Computational Geometry*, Yale University, pp. 76-81.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from polygon_diameter.core.constants import DEFAULT_TIE_TOLERANCE_RAD, PI, TWO_PI
from polygon_diameter.core.exceptions import InvalidInputError
from polygon_diameter.geometry.angles import angle_between
from polygon_diameter.models.result import DiameterResult
from polygon_diameter.models.ring import CaliperPair, Ring

if TYPE_CHECKING:
    from collections.abc import Sequence

    from polygon_diameter.models.ring import Coordinate
    from polygon_diameter.primitives.base import BearingFn, DistanceFn

logger = logging.getLogger("polygon_diameter.geometry.calipers")


class _RunningMaximum:
    """Largest candidate distance seen so far in one sweep."""

    __slots__ = ("_distance", "_ring", "endpoints", "evaluated", "value")

    def __init__(self, ring: Ring, distance: DistanceFn) -> None:
        self._ring = ring
        self._distance = distance
        self.value = 0.0
        self.endpoints: tuple[Coordinate, Coordinate] = (ring[0], ring[0])
        self.evaluated = 0

    def update(self, a: int, b: int) -> None:
        p = self._ring[a]
        q = self._ring[b]
        candidate = self._distance(p, q)
        self.evaluated += 1
        if candidate > self.value:
            self.value = candidate
            self.endpoints = (p, q)


def rotating_calipers(
    ring: Ring,
    distance: DistanceFn,
    bearing: BearingFn,
    *,
    tie_tolerance: float = DEFAULT_TIE_TOLERANCE_RAD,
) -> DiameterResult:
    """Compute the diameter of a counter-clockwise ring.

    Args:
        ring: Hull boundary, counter-clockwise, without a closing vertex.
        distance: Distance primitive; its unit is the result's unit.
        bearing: Bearing primitive, degrees in ``(-180, 180]``.
        tie_tolerance: Absolute tolerance in radians under which the gap
            between the calipers counts as exactly pi, in which case both
            calipers advance together.

    Returns:
        A ``DiameterResult`` with the diameter and the vertex pair at that
        distance.

    Raises:
        InvalidInputError: If the ring is empty.
    """
    size = len(ring)
    if size == 0:
        msg = "Cannot measure the diameter of an empty ring"
        raise InvalidInputError(msg, code="EMPTY_RING")
    if size == 1:
        return DiameterResult(
            distance=0.0, endpoints=(ring[0], ring[0]), pairs_evaluated=0, ring_size=1
        )
    if size == 2:
        return DiameterResult(
            distance=distance(ring[0], ring[1]),
            endpoints=(ring[0], ring[1]),
            pairs_evaluated=1,
            ring_size=2,
        )

    best = _RunningMaximum(ring, distance)
    calipers = CaliperPair(i=0, j=1, size=size)

    # Find the first edge j facing away from edge 0: the vertex starting it
    # is antipodal to vertex 0. Within tie_tolerance of pi counts as facing
    # away, so a parallel opposite edge is not skipped over rounding noise.
    while (
        calipers.i != calipers.j
        and angle_between(ring, calipers.i, calipers.j, bearing) < PI - tie_tolerance
    ):
        calipers.advance_j()

    best.update(calipers.i, calipers.j)

    # A half-turn of the calipers takes each of them across its side of the
    # ring, n edges in total, ending with i at the first j and j back at 0.
    edges_passed = 0
    while edges_passed < size:
        gap = TWO_PI - angle_between(ring, calipers.i, calipers.j, bearing)

        # Both candidates are evaluated on every step. Geographic bearings of
        # opposite edges are taken in different local frames, so two nearly
        # simultaneous pivots can come in the wrong order.
        best.update(calipers.next_i, calipers.j)
        best.update(calipers.i, calipers.next_j)

        if abs(gap - PI) <= tie_tolerance:
            # Parallel edges: both calipers pivot at once.
            best.update(calipers.next_i, calipers.next_j)
            calipers.advance_both()
            edges_passed += 2
        elif gap < PI:
            calipers.advance_i()
            edges_passed += 1
        else:
            calipers.advance_j()
            edges_passed += 1

    logger.debug(
        "Caliper sweep complete | vertices=%d | pairs=%d | diameter=%.6f",
        size,
        best.evaluated,
        best.value,
    )
    return DiameterResult(
        distance=best.value,
        endpoints=best.endpoints,
        pairs_evaluated=best.evaluated,
        ring_size=size,
    )


def brute_force_diameter(coords: Sequence[Coordinate], distance: DistanceFn) -> float:
    """Largest distance over all pairs of ``coords``, in O(n^2).

    Reference implementation for checking the caliper sweep.

    Raises:
        InvalidInputError: If ``coords`` is empty.
    """
    if not coords:
        msg = "Cannot measure the diameter of an empty point set"
        raise InvalidInputError(msg, code="EMPTY_RING")

    best = 0.0
    for idx, p in enumerate(coords):
        for q in coords[idx + 1 :]:
            best = max(best, distance(p, q))
    return best
