"""Distance/bearing primitives abstract base class.

Defines the contract every primitives adapter implements. The caliper
sweep only ever sees two plain callables, ``distance`` and ``bearing``,
so a planar, spherical or ellipsoidal model can be swapped in without
touching the calipers.

Contract:
    ``distance(p, q)`` — non-negative length between two coordinates, in
    the adapter's configured unit.
    ``bearing(p, q)``  — initial compass direction from ``p`` towards
    ``q`` in degrees, clockwise from north, in ``(-180, 180]``.
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING, Protocol

from polygon_diameter.core.constants import DEFAULT_UNITS, METRES_PER_UNIT
from polygon_diameter.core.exceptions import PermanentError

if TYPE_CHECKING:
    from polygon_diameter.models.ring import Coordinate


class DistanceFn(Protocol):
    """Length between two coordinates."""

    def __call__(self, p: Coordinate, q: Coordinate, /) -> float: ...


class BearingFn(Protocol):
    """Initial compass bearing from one coordinate towards another."""

    def __call__(self, p: Coordinate, q: Coordinate, /) -> float: ...


class PrimitivesError(PermanentError):
    """Raised when a primitives adapter cannot be created or used.

    Attributes:
        primitives: Name of the primitives adapter involved.
    """

    default_stage = "primitives"
    default_code = "PRIMITIVES_ERROR"

    def __init__(self, primitives: str = "", message: str = "", *, code: str = "") -> None:
        self.primitives = primitives
        super().__init__(message, code=code)


def normalize_bearing(degrees: float) -> float:
    """Map a bearing in ``[-180, 180]`` onto ``(-180, 180]``."""
    return 180.0 if degrees == -180.0 else degrees


def metres_to_units(metres: float, units: str) -> float:
    """Convert a length in metres to ``units``.

    Raises:
        PrimitivesError: If ``units`` is not a known length unit.
    """
    factor = METRES_PER_UNIT.get(units)
    if factor is None:
        known = ", ".join(sorted(METRES_PER_UNIT))
        msg = f"Unknown length unit: {units!r}. Available: {known}"
        raise PrimitivesError(message=msg, code="UNKNOWN_UNITS")
    return metres / factor


class GeometryPrimitives(abc.ABC):
    """Abstract base class for distance/bearing adapters.

    Instances are stateless after construction and safe to share across
    concurrent measurements.

    Example usage::

        primitives = get_primitives("geodesic", units="kilometers")
        km = primitives.distance((10.19, 43.75), (10.57, 43.65))
        deg = primitives.bearing((10.19, 43.75), (10.57, 43.65))
    """

    #: Registry name of the adapter.
    name: str = ""

    def __init__(self, *, units: str = DEFAULT_UNITS) -> None:
        # Fail at construction rather than on the first distance call.
        metres_to_units(0.0, units)
        self._units = units

    @property
    def units(self) -> str:
        """Length unit returned by ``distance``."""
        return self._units

    @abc.abstractmethod
    def distance(self, p: Coordinate, q: Coordinate) -> float:
        """Return the distance from ``p`` to ``q`` in ``self.units``."""

    @abc.abstractmethod
    def bearing(self, p: Coordinate, q: Coordinate) -> float:
        """Return the initial bearing from ``p`` to ``q`` in ``(-180, 180]``."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(units={self._units!r})"
