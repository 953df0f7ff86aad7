"""Public entry points for polygon diameter measurement.

Pipeline per measurement:

1. Coordinate extraction (GeoJSON ``coord_all`` or KML Placemarks)
2. WGS 84 bounds validation (geographic primitives only)
3. Hull extraction (shapely convex hull, or concave hull on request)
4. Winding canonicalisation (counter-clockwise)
5. Rotating-calipers sweep with the configured distance/bearing primitives

Every call builds its own ring and caliper state, so measurements are
independent and safe to run concurrently on different inputs.

Example::

    from polygon_diameter.measure import diameter

    km = diameter(
        {
            "type": "MultiPoint",
            "coordinates": [[10.195312, 43.755225], [10.579833, 43.659924]],
        }
    )
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from polygon_diameter.core.config import DiameterConfig
from polygon_diameter.core.exceptions import DiameterError, InvalidInputError
from polygon_diameter.extraction._validation import validate_coordinates
from polygon_diameter.extraction.geojson import coord_all, features_from_geojson
from polygon_diameter.extraction.kml import parse_kml_file
from polygon_diameter.geometry.calipers import rotating_calipers
from polygon_diameter.geometry.hull import canonicalize_winding, extract_hull
from polygon_diameter.models.report import DiameterReport, MeasurementSettings
from polygon_diameter.models.ring import Ring
from polygon_diameter.primitives.factory import GEODESIC, PLANAR, get_primitives

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from pathlib import Path

    from polygon_diameter.models.feature import Feature
    from polygon_diameter.models.result import DiameterResult
    from polygon_diameter.models.ring import Coordinate
    from polygon_diameter.primitives.base import GeometryPrimitives

logger = logging.getLogger("polygon_diameter.measure")


# ---------------------------------------------------------------------------
# Scalar entry points
# ---------------------------------------------------------------------------


def diameter(
    geojson: dict[str, Any],
    *,
    config: DiameterConfig | None = None,
    primitives: GeometryPrimitives | None = None,
) -> float:
    """Return the diameter of a GeoJSON Feature, FeatureCollection or Geometry.

    Args:
        geojson: Parsed GeoJSON object. All positions across all features
            form one point set.
        config: Measurement settings. Defaults to ``DiameterConfig()``.
        primitives: Distance/bearing adapter overriding
            ``config.primitives``.

    Returns:
        The maximum distance between any two positions, in
        ``config.units`` (or the planar input's own units).

    Raises:
        InvalidInputError: If the object holds no positions or is
            malformed.
    """
    return measure_points(coord_all(geojson), config=config, primitives=primitives).distance


def ring_diameter(
    coords: Iterable[Iterable[float]],
    *,
    config: DiameterConfig | None = None,
    primitives: GeometryPrimitives | None = None,
) -> float:
    """Return the diameter of an already-ordered hull ring.

    The ring is taken as the hull: no hull extraction runs, but it is
    rewound counter-clockwise if needed. A closing coordinate equal to
    the first one is ignored.

    Raises:
        InvalidInputError: If the ring is empty or malformed.
    """
    config = config or DiameterConfig()
    primitives = primitives or build_primitives(config)

    ring = Ring.from_coords(coords)
    _check_bounds(ring.coords, primitives, config, "ring")
    result = rotating_calipers(
        canonicalize_winding(ring),
        primitives.distance,
        primitives.bearing,
        tie_tolerance=config.tie_tolerance_rad,
    )
    return result.distance


def measure_points(
    points: Sequence[Coordinate],
    *,
    config: DiameterConfig | None = None,
    primitives: GeometryPrimitives | None = None,
) -> DiameterResult:
    """Measure the diameter of a point set through its hull.

    Raises:
        InvalidInputError: If ``points`` is empty or out of bounds.
    """
    config = config or DiameterConfig()
    primitives = primitives or build_primitives(config)

    if not points:
        msg = "Cannot measure the diameter of a feature with no coordinates"
        raise InvalidInputError(msg, code="EMPTY_RING")
    _check_bounds(points, primitives, config, "point set")

    hull = canonicalize_winding(extract_hull(points, concavity=config.hull_concavity))
    return rotating_calipers(
        hull,
        primitives.distance,
        primitives.bearing,
        tie_tolerance=config.tie_tolerance_rad,
    )


# ---------------------------------------------------------------------------
# Per-feature reports
# ---------------------------------------------------------------------------


def measure_feature(
    feature: Feature,
    *,
    config: DiameterConfig | None = None,
    primitives: GeometryPrimitives | None = None,
) -> DiameterReport:
    """Measure one feature and return its ``DiameterReport``.

    Raises:
        InvalidInputError: If the feature has no coordinates or
            coordinates out of bounds.
    """
    config = config or DiameterConfig()
    primitives = primitives or build_primitives(config)

    result = measure_points(feature.coords, config=config, primitives=primitives)

    logger.info(
        "Diameter measured | feature=%s | points=%d | hull=%d | pairs=%d | "
        "diameter=%.6f %s | primitives=%s | source=%s",
        feature.name or f"#{feature.feature_index}",
        feature.point_count,
        result.ring_size,
        result.pairs_evaluated,
        result.distance,
        primitives.units,
        primitives.name,
        feature.source_file,
    )

    return DiameterReport.from_result(
        feature,
        result,
        settings=MeasurementSettings(
            primitives=primitives.name,
            units=primitives.units,
            hull_concavity=config.hull_concavity,
            tie_tolerance_rad=config.tie_tolerance_rad,
        ),
    )


def measure_geojson(
    geojson: dict[str, Any],
    *,
    config: DiameterConfig | None = None,
    primitives: GeometryPrimitives | None = None,
    source_file: str = "",
) -> list[DiameterReport]:
    """Measure every feature of a GeoJSON object separately.

    Features without coordinates (``null`` geometry) are skipped.

    Raises:
        InvalidInputError: If the GeoJSON is malformed or a feature's
            coordinates are out of bounds.
    """
    config = config or DiameterConfig()
    primitives = primitives or build_primitives(config)

    reports: list[DiameterReport] = []
    for feature in features_from_geojson(geojson, source_file=source_file):
        if not feature.coords:
            logger.warning("Skipping feature '%s' with no coordinates", feature.name)
            continue
        reports.append(measure_feature(feature, config=config, primitives=primitives))
    return reports


def measure_kml_file(
    kml_path: Path | str,
    *,
    config: DiameterConfig | None = None,
    primitives: GeometryPrimitives | None = None,
) -> list[DiameterReport]:
    """Measure every Placemark of a KML file.

    A Placemark that cannot be measured is logged and skipped; the rest
    of the file is still measured.

    Raises:
        KmlParseError: If the file is not valid KML.
    """
    config = config or DiameterConfig()
    primitives = primitives or build_primitives(config)

    reports: list[DiameterReport] = []
    for feature in parse_kml_file(kml_path):
        try:
            reports.append(measure_feature(feature, config=config, primitives=primitives))
        except DiameterError as exc:
            logger.warning(
                "Skipping feature '%s' in %s | code=%s | category=%s | %s",
                feature.name,
                feature.source_file,
                exc.code,
                exc.category,
                exc,
            )
    return reports


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def build_primitives(config: DiameterConfig) -> GeometryPrimitives:
    """Create the distance/bearing adapter named by ``config``.

    Raises:
        PrimitivesError: If the adapter or unit is unknown.
    """
    if config.primitives == GEODESIC:
        return get_primitives(config.primitives, units=config.units, ellipsoid=config.ellipsoid)
    return get_primitives(config.primitives, units=config.units)


def _check_bounds(
    coords: Iterable[Coordinate],
    primitives: GeometryPrimitives,
    config: DiameterConfig,
    context: str,
) -> None:
    if config.validate_wgs84 and primitives.name != PLANAR:
        validate_coordinates(coords, context)
