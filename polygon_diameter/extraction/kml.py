"""KML coordinate extraction via lxml.

Walks every Placemark in a KML document, including Placemarks nested
in Folders and Documents, and collects the positions of all of its
geometries: Point, LineString, LinearRing and Polygon (outer and inner
boundaries), at any depth of MultiGeometry nesting.

One ``Feature`` is produced per Placemark with at least one position.
A Placemark whose coordinates fail WGS 84 validation is skipped with a
warning so one bad Placemark does not abort the rest of the file.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from polygon_diameter.extraction._constants import KML_NAMESPACE
from polygon_diameter.extraction._validation import (
    InvalidCoordinateError,
    KmlParseError,
    parse_kml_root,
    validate_coordinates,
)
from polygon_diameter.models.feature import Feature

if TYPE_CHECKING:
    from lxml.etree import _Element

logger = logging.getLogger("polygon_diameter.extraction.kml")

_NS = {"kml": KML_NAMESPACE}

_GEOMETRY_TAGS = ("Point", "LineString", "LinearRing", "Polygon")


def parse_kml_file(kml_path: Path | str, *, source_filename: str = "") -> list[Feature]:
    """Parse a KML file and extract one point-set feature per Placemark.

    Args:
        kml_path: Filesystem path to the KML file.
        source_filename: Original filename for metadata (defaults to the
            path's name).

    Raises:
        KmlParseError: If the file cannot be read or is not valid KML.
    """
    kml_path = Path(kml_path)
    if not source_filename:
        source_filename = kml_path.name

    try:
        content = kml_path.read_bytes()
    except OSError as exc:
        msg = f"Cannot read KML file: {exc}"
        raise KmlParseError(msg) from exc

    return parse_kml_bytes(content, source_filename=source_filename)


def parse_kml_bytes(content: bytes, *, source_filename: str = "") -> list[Feature]:
    """Parse KML content and extract one point-set feature per Placemark.

    Raises:
        KmlParseError: If the content is not valid KML.
    """
    root = parse_kml_root(content)

    features: list[Feature] = []
    for idx, placemark in enumerate(root.iterfind(".//kml:Placemark", _NS)):
        name = _child_text(placemark, "name")
        display_name = name or f"Feature {idx}"

        coords, geometry_types = _placemark_coords(placemark)
        if not coords:
            logger.debug("Placemark '%s' has no coordinates, skipping", display_name)
            continue

        try:
            validate_coordinates(coords, f"Placemark '{display_name}'")
        except InvalidCoordinateError as exc:
            logger.warning(
                "Skipping invalid feature '%s' in %s: %s",
                display_name,
                source_filename,
                exc,
            )
            continue

        features.append(
            Feature(
                name=name,
                description=_child_text(placemark, "description"),
                coords=coords,
                geometry_type=(
                    geometry_types[0] if len(geometry_types) == 1 else "MultiGeometry"
                ),
                metadata=_extended_data(placemark),
                source_file=source_filename,
                feature_index=idx,
            )
        )

    logger.info(
        "Parsed %d feature(s) from %s",
        len(features),
        source_filename or "KML document",
    )
    return features


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def parse_coordinates_text(text: str) -> list[tuple[float, float]]:
    """Parse KML coordinate text (``lon,lat,alt lon,lat,alt ...``) to (lon, lat) tuples."""
    coords: list[tuple[float, float]] = []
    for token in text.split():
        parts = token.strip().split(",")
        if len(parts) >= 2:
            try:
                coords.append((float(parts[0]), float(parts[1])))
            except ValueError:
                continue
    return coords


def _placemark_coords(placemark: _Element) -> tuple[list[tuple[float, float]], list[str]]:
    """Collect positions from every geometry under a Placemark."""
    coords: list[tuple[float, float]] = []
    geometry_types: list[str] = []
    for tag in _GEOMETRY_TAGS:
        for geometry in placemark.iterfind(f".//kml:{tag}", _NS):
            # LinearRings inside a Polygon are read with the Polygon.
            if tag == "LinearRing" and _inside_polygon(geometry):
                continue
            found = False
            for coords_elem in geometry.iterfind(".//kml:coordinates", _NS):
                if coords_elem.text:
                    parsed = parse_coordinates_text(coords_elem.text)
                    coords.extend(parsed)
                    found = found or bool(parsed)
            if found and tag not in geometry_types:
                geometry_types.append(tag)
    return coords, geometry_types


def _inside_polygon(element: _Element) -> bool:
    polygon_tag = f"{{{KML_NAMESPACE}}}Polygon"
    return any(ancestor.tag == polygon_tag for ancestor in element.iterancestors())


def _child_text(element: _Element, tag: str) -> str:
    child = element.find(f"kml:{tag}", _NS)
    if child is None or not child.text:
        return ""
    return child.text.strip()


def _extended_data(placemark: _Element) -> dict[str, str]:
    """Extract ``ExtendedData`` metadata from a Placemark.

    Handles both KML metadata patterns:
    - ``ExtendedData/Data/value`` — untyped key-value pairs.
    - ``ExtendedData/SchemaData/SimpleData`` — typed fields.
    """
    metadata: dict[str, str] = {}

    for data_elem in placemark.findall("kml:ExtendedData/kml:Data", _NS):
        key = data_elem.get("name", "")
        value_elem = data_elem.find("kml:value", _NS)
        if key and value_elem is not None and value_elem.text:
            metadata[key] = value_elem.text.strip()

    for schema_data in placemark.findall("kml:ExtendedData/kml:SchemaData", _NS):
        for simple_data in schema_data.findall("kml:SimpleData", _NS):
            key = simple_data.get("name", "")
            if key and simple_data.text:
                metadata[key] = simple_data.text.strip()

    return metadata
