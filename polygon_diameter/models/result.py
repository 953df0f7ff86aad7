"""Result of one rotating-calipers sweep."""

from __future__ import annotations

from dataclasses import dataclass

from polygon_diameter.models.ring import Coordinate


@dataclass(frozen=True, slots=True)
class DiameterResult:
    """The diameter of a ring and the pair of vertices that realise it.

    Attributes:
        distance: The diameter, in the distance primitive's unit.
        endpoints: The two vertices at that distance. Both are the single
            vertex for a one-point ring.
        pairs_evaluated: Number of candidate pairs passed to the distance
            primitive.
        ring_size: Number of vertices in the swept ring.
    """

    distance: float
    endpoints: tuple[Coordinate, Coordinate]
    pairs_evaluated: int
    ring_size: int
