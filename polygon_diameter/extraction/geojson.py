"""GeoJSON coordinate extraction.

Flattens any GeoJSON object (Feature, FeatureCollection, Geometry or
GeometryCollection) into the list of positions it contains, and splits
a FeatureCollection into ``Feature`` models for per-feature measurement.

Altitude is dropped. Features with a ``null`` geometry contribute no
positions.
"""

from __future__ import annotations

import logging
from typing import Any

from polygon_diameter.extraction._constants import GEOJSON_POSITION_DEPTH
from polygon_diameter.extraction._validation import ExtractionError, to_position
from polygon_diameter.models.feature import Feature

logger = logging.getLogger("polygon_diameter.extraction.geojson")


def coord_all(geojson: dict[str, Any]) -> list[tuple[float, float]]:
    """Return every position in a GeoJSON object, in document order.

    Args:
        geojson: A parsed GeoJSON object.

    Returns:
        ``(lon, lat)`` tuples. Closed rings keep their closing position.

    Raises:
        ExtractionError: If the object (or a nested one) has an unknown
            ``type`` or malformed coordinates.
    """
    coords: list[tuple[float, float]] = []
    _collect(geojson, coords, "GeoJSON")
    return coords


def features_from_geojson(
    geojson: dict[str, Any], *, source_file: str = ""
) -> list[Feature]:
    """Split a GeoJSON object into one ``Feature`` per GeoJSON feature.

    A bare geometry becomes a single feature. Feature names come from the
    ``name`` property when present, otherwise ``"Feature {index}"``.

    Raises:
        ExtractionError: If the object is not valid GeoJSON.
    """
    kind = _type_of(geojson)
    if kind == "FeatureCollection":
        raw_features = geojson.get("features")
        if not isinstance(raw_features, list):
            msg = "FeatureCollection 'features' must be a list"
            raise ExtractionError(msg)
    elif kind == "Feature":
        raw_features = [geojson]
    else:
        raw_features = [{"type": "Feature", "properties": {}, "geometry": geojson}]

    features: list[Feature] = []
    for idx, raw in enumerate(raw_features):
        if _type_of(raw) != "Feature":
            msg = f"FeatureCollection member {idx} is not a Feature"
            raise ExtractionError(msg)

        properties = raw.get("properties") or {}
        if not isinstance(properties, dict):
            msg = f"Feature {idx} 'properties' must be an object"
            raise ExtractionError(msg)

        geometry = raw.get("geometry")
        geometry_type = _type_of(geometry) if geometry is not None else ""
        name = str(properties.get("name", "") or f"Feature {idx}")

        features.append(
            Feature(
                name=name,
                description=str(properties.get("description", "") or ""),
                coords=coord_all(raw),
                geometry_type=geometry_type,
                metadata={
                    str(k): str(v)
                    for k, v in properties.items()
                    if k not in ("name", "description") and v is not None
                },
                source_file=source_file,
                feature_index=idx,
            )
        )

    logger.debug("Extracted %d feature(s) from GeoJSON %s", len(features), source_file or kind)
    return features


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _type_of(obj: object) -> str:
    if not isinstance(obj, dict):
        msg = f"GeoJSON object must be a mapping, got {type(obj).__name__}"
        raise ExtractionError(msg)
    kind = obj.get("type")
    if not isinstance(kind, str):
        msg = "GeoJSON object has no 'type' member"
        raise ExtractionError(msg)
    return kind


def _collect(obj: Any, out: list[tuple[float, float]], context: str) -> None:
    kind = _type_of(obj)

    if kind == "FeatureCollection":
        features = obj.get("features")
        if not isinstance(features, list):
            msg = f"{context}: FeatureCollection 'features' must be a list"
            raise ExtractionError(msg)
        for idx, feature in enumerate(features):
            _collect(feature, out, f"{context} feature {idx}")
    elif kind == "Feature":
        geometry = obj.get("geometry")
        if geometry is not None:
            _collect(geometry, out, context)
    elif kind == "GeometryCollection":
        geometries = obj.get("geometries")
        if not isinstance(geometries, list):
            msg = f"{context}: GeometryCollection 'geometries' must be a list"
            raise ExtractionError(msg)
        for idx, geometry in enumerate(geometries):
            _collect(geometry, out, f"{context} geometry {idx}")
    elif kind in GEOJSON_POSITION_DEPTH:
        _flatten(obj.get("coordinates"), GEOJSON_POSITION_DEPTH[kind], out, f"{context} {kind}")
    else:
        msg = f"{context}: unsupported GeoJSON type {kind!r}"
        raise ExtractionError(msg)


def _flatten(
    nested: object, depth: int, out: list[tuple[float, float]], context: str
) -> None:
    if depth == 0:
        out.append(to_position(nested, context))
        return
    if not isinstance(nested, list | tuple):
        msg = f"{context}: expected a coordinate array, got {type(nested).__name__}"
        raise ExtractionError(msg)
    for item in nested:
        _flatten(item, depth - 1, out, context)
