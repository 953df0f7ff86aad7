"""Ring and caliper-pair models for the rotating-calipers sweep.

A ``Ring`` is the ordered boundary of a hull, indexed with wraparound
(index ``n`` is index ``0``). Edges are never stored: edge ``a`` is the
directed segment ``ring[a] -> ring[a + 1]``, identified by its start index.

A ``CaliperPair`` is the mutable ``(i, j)`` state of one sweep.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from polygon_diameter.core.exceptions import InvalidInputError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

Coordinate = tuple[float, float]
"""A ``(lon, lat)`` pair (or ``(x, y)`` for planar rings)."""


@dataclass(frozen=True, slots=True)
class Ring:
    """An ordered, closed polygonal boundary with wraparound indexing.

    Attributes:
        coords: Ring vertices in winding order, without a repeated
            closing coordinate.
    """

    coords: tuple[Coordinate, ...]

    @classmethod
    def from_coords(cls, coords: Iterable[Iterable[float]]) -> Ring:
        """Build a ring from ``(lon, lat)`` pairs.

        Extra ordinates (altitude) are dropped. An explicit closing
        coordinate equal to the first one is removed, so a shapely or
        GeoJSON-style closed ring yields one vertex per corner.

        Raises:
            InvalidInputError: If a coordinate has fewer than two ordinates
                or cannot be converted to float.
        """
        points: list[Coordinate] = []
        for idx, raw in enumerate(coords):
            values = tuple(raw)
            if len(values) < 2:
                msg = (
                    f"Malformed coordinate at index {idx}: "
                    f"expected at least 2 elements, got {len(values)}"
                )
                raise InvalidInputError(msg)
            try:
                points.append((float(values[0]), float(values[1])))
            except (TypeError, ValueError) as exc:
                msg = (
                    f"Malformed coordinate at index {idx}: cannot convert {values!r} to float"
                )
                raise InvalidInputError(msg) from exc

        if len(points) > 1 and points[0] == points[-1]:
            points.pop()
        return cls(coords=tuple(points))

    def __len__(self) -> int:
        return len(self.coords)

    def __getitem__(self, index: int) -> Coordinate:
        return self.coords[index % len(self.coords)]

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self.coords)

    def next_index(self, index: int) -> int:
        """Index following ``index`` with wraparound."""
        return (index + 1) % len(self.coords)

    def edge(self, index: int) -> tuple[Coordinate, Coordinate]:
        """Endpoints of the directed edge starting at ``index``."""
        return (self[index], self[index + 1])

    def reversed(self) -> Ring:
        """Return the same boundary with the opposite winding."""
        return Ring(coords=tuple(reversed(self.coords)))


@dataclass(slots=True)
class CaliperPair:
    """Edge indices ``(i, j)`` currently touched by the two calipers.

    Attributes:
        i: Start index of the edge under the first caliper.
        j: Start index of the edge under the second caliper.
        size: Ring length; all advancement is modulo ``size``.
    """

    i: int
    j: int
    size: int

    def advance_i(self) -> None:
        self.i = (self.i + 1) % self.size

    def advance_j(self) -> None:
        self.j = (self.j + 1) % self.size

    def advance_both(self) -> None:
        self.advance_i()
        self.advance_j()

    @property
    def next_i(self) -> int:
        return (self.i + 1) % self.size

    @property
    def next_j(self) -> int:
        return (self.j + 1) % self.size
