"""Shared pytest fixtures for the polygon diameter test suite."""

from __future__ import annotations

import math
from pathlib import Path

import pytest

from polygon_diameter.primitives.geodesic import GeodesicPrimitives
from polygon_diameter.primitives.haversine import HaversinePrimitives
from polygon_diameter.primitives.planar import PlanarPrimitives

# ---------------------------------------------------------------------------
# Path fixtures
# ---------------------------------------------------------------------------

TESTS_DIR = Path(__file__).parent
DATA_DIR = TESTS_DIR / "data"

# ---------------------------------------------------------------------------
# Reference geometries
# ---------------------------------------------------------------------------

# Five towns around Pisa, listed clockwise (NW, N, E, S, SW).
TUSCANY_PENTAGON = [
    (10.195312, 43.755225),
    (10.404052, 43.8424511),
    (10.579833, 43.659924),
    (10.360107, 43.516688),
    (10.14038, 43.588348),
]

# Spike tip radii of the star polygon; inner vertices sit well inside them.
_SPIKE_RADII = (1.0, 0.8, 0.95, 0.7, 0.9, 0.85)


def star_polygon(
    centre: tuple[float, float] = (-150.0, 64.5),
    *,
    vertices: int = 60,
    radius_deg: float = 0.18,
) -> list[tuple[float, float]]:
    """Concave, coastline-like star polygon with one spike every 10 vertices.

    Built in a local metric-like plane and mapped to degrees with the
    longitude stretched by ``1 / cos(lat)``, so the shape is not squashed
    at high latitude. The ring is closed (last vertex repeats the first).
    """
    lon0, lat0 = centre
    stretch = 1.0 / math.cos(math.radians(lat0))
    coords: list[tuple[float, float]] = []
    for k in range(vertices):
        theta = 2 * math.pi * k / vertices
        if k % 10 == 0:
            r = _SPIKE_RADII[(k // 10) % len(_SPIKE_RADII)]
        else:
            r = 0.4 + 0.15 * abs(math.sin(3.7 * k))
        x = r * math.cos(theta) * radius_deg
        y = r * math.sin(theta) * radius_deg
        coords.append((lon0 + x * stretch, lat0 + y))
    coords.append(coords[0])
    return coords


@pytest.fixture()
def data_dir() -> Path:
    """Return the path to the test data directory."""
    return DATA_DIR


@pytest.fixture()
def alaska_kml(data_dir: Path) -> Path:
    """KML with a polygon, a multi-point Placemark, an invalid and an empty one."""
    return data_dir / "alaska_placemarks.kml"


@pytest.fixture()
def tuscany_geojson(data_dir: Path) -> Path:
    """FeatureCollection of the five Tuscany points (one repeated)."""
    return data_dir / "tuscany_points.geojson"


# ---------------------------------------------------------------------------
# Primitives fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def planar() -> PlanarPrimitives:
    return PlanarPrimitives()


@pytest.fixture()
def haversine() -> HaversinePrimitives:
    return HaversinePrimitives(units="kilometers")


@pytest.fixture()
def geodesic() -> GeodesicPrimitives:
    return GeodesicPrimitives(units="kilometers")


# ---------------------------------------------------------------------------
# Geometry fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def tuscany_pentagon() -> list[tuple[float, float]]:
    """Five-vertex convex ring near Pisa, clockwise."""
    return list(TUSCANY_PENTAGON)


@pytest.fixture()
def alaska_star() -> list[tuple[float, float]]:
    """60-vertex concave star polygon at 64.5 N (closed ring)."""
    return star_polygon()
