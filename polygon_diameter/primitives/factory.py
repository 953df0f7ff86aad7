"""Primitives factory — selects a distance/bearing adapter by name.

The factory maintains a registry of known adapters. New adapters are
registered with ``register_primitives``.

Usage::

    from polygon_diameter.primitives.factory import get_primitives

    primitives = get_primitives("geodesic", units="meters")
    metres = primitives.distance(p, q)

The default name comes from the ``DIAMETER_PRIMITIVES`` environment
variable via ``DiameterConfig.primitives``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from polygon_diameter.core.constants import DEFAULT_UNITS
from polygon_diameter.primitives.base import GeometryPrimitives, PrimitivesError

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger("polygon_diameter.primitives.factory")

# ---------------------------------------------------------------------------
# Primitives name constants
# ---------------------------------------------------------------------------

GEODESIC = "geodesic"
HAVERSINE = "haversine"
PLANAR = "planar"

# ---------------------------------------------------------------------------
# Lazy-import adapter registry
# ---------------------------------------------------------------------------

# Each entry maps a name to a zero-argument callable returning the adapter
# *class*, so pyproj is only imported when the geodesic adapter is used.

_PRIMITIVES_REGISTRY: dict[str, Callable[[], type[GeometryPrimitives]]] = {}


def _register_builtin_primitives() -> None:
    """Register the built-in adapters as lazy import thunks."""

    def _geodesic() -> type[GeometryPrimitives]:
        from polygon_diameter.primitives.geodesic import GeodesicPrimitives

        return GeodesicPrimitives

    def _haversine() -> type[GeometryPrimitives]:
        from polygon_diameter.primitives.haversine import HaversinePrimitives

        return HaversinePrimitives

    def _planar() -> type[GeometryPrimitives]:
        from polygon_diameter.primitives.planar import PlanarPrimitives

        return PlanarPrimitives

    _PRIMITIVES_REGISTRY[GEODESIC] = _geodesic
    _PRIMITIVES_REGISTRY[HAVERSINE] = _haversine
    _PRIMITIVES_REGISTRY[PLANAR] = _planar


def _ensure_registry() -> None:
    """Initialise the registry once (idempotent)."""
    if not _PRIMITIVES_REGISTRY:
        _register_builtin_primitives()


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def register_primitives(
    name: str,
    loader: Callable[[], type[GeometryPrimitives]],
) -> None:
    """Register a custom primitives adapter.

    Args:
        name: Adapter name (e.g. ``"vincenty"``).
        loader: A zero-argument callable that returns the adapter class.

    Raises:
        ValueError: If the name is empty.
    """
    if not name:
        msg = "Primitives name must be non-empty"
        raise ValueError(msg)
    _ensure_registry()
    _PRIMITIVES_REGISTRY[name] = loader
    logger.debug("Registered primitives adapter: %s", name)


def get_primitives(
    name: str,
    *,
    units: str = DEFAULT_UNITS,
    **options: object,
) -> GeometryPrimitives:
    """Create and return a primitives adapter.

    Args:
        name: Adapter identifier (``"geodesic"``, ``"haversine"``, ``"planar"``).
        units: Output length unit for ``distance``.
        **options: Adapter-specific keyword arguments (e.g. ``ellipsoid``
            for the geodesic adapter).

    Returns:
        A configured ``GeometryPrimitives`` instance.

    Raises:
        PrimitivesError: If the name is not registered, the unit is
            unknown, or the adapter rejects its options.
    """
    _ensure_registry()

    loader = _PRIMITIVES_REGISTRY.get(name)
    if loader is None:
        available = ", ".join(sorted(_PRIMITIVES_REGISTRY))
        msg = f"Unknown primitives: {name!r}. Available: {available}"
        raise PrimitivesError(primitives=name, message=msg, code="UNKNOWN_PRIMITIVES")

    adapter_cls = loader()
    try:
        adapter = adapter_cls(units=units, **options)  # type: ignore[arg-type]
    except TypeError as exc:
        msg = f"Invalid options for primitives {name!r}: {exc}"
        raise PrimitivesError(primitives=name, message=msg) from exc

    logger.debug("Created primitives adapter: %s (units=%s)", name, units)
    return adapter


def list_primitives() -> list[str]:
    """Return the names of all registered adapters."""
    _ensure_registry()
    return sorted(_PRIMITIVES_REGISTRY)
