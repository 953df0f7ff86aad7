"""Coordinate extraction from geographic feature formats.

Reduces GeoJSON objects and KML documents to plain ``(lon, lat)`` point
sets (``Feature`` models) for measurement:

- **geojson**: ``coord_all`` and per-feature splitting
- **kml**: lxml walk of Placemarks and their geometries
- **_validation**: position normalisation, WGS 84 bounds, KML root checks
"""

from __future__ import annotations

from polygon_diameter.extraction._constants import KML_NAMESPACE
from polygon_diameter.extraction._validation import (
    ExtractionError,
    InvalidCoordinateError,
    KmlParseError,
    validate_coordinates,
)
from polygon_diameter.extraction.geojson import coord_all, features_from_geojson
from polygon_diameter.extraction.kml import (
    parse_coordinates_text,
    parse_kml_bytes,
    parse_kml_file,
)

__all__ = [
    "KML_NAMESPACE",
    "ExtractionError",
    "InvalidCoordinateError",
    "KmlParseError",
    "coord_all",
    "features_from_geojson",
    "parse_coordinates_text",
    "parse_kml_bytes",
    "parse_kml_file",
    "validate_coordinates",
]
