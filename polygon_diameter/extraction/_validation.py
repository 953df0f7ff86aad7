"""Validation helpers for coordinate extraction.

Responsibilities:
- Position normalisation (drop altitude, coerce to float)
- Coordinate bounds checking (WGS 84)
- XML structure and KML namespace validation
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from polygon_diameter.core.constants import (
    MAX_LATITUDE,
    MAX_LONGITUDE,
    MIN_LATITUDE,
    MIN_LONGITUDE,
)
from polygon_diameter.core.exceptions import InvalidInputError
from polygon_diameter.extraction._constants import KML_NAMESPACE

if TYPE_CHECKING:
    from collections.abc import Iterable

    from lxml.etree import _Element


# ---------------------------------------------------------------------------
# Exceptions (public API, re-exported from __init__)
# ---------------------------------------------------------------------------


class ExtractionError(InvalidInputError):
    """Raised when coordinates cannot be extracted from a feature."""

    default_stage = "extract_coords"
    default_code = "EXTRACTION_FAILED"


class KmlParseError(ExtractionError):
    """Raised when a KML document cannot be parsed."""

    default_code = "KML_PARSE_FAILED"


class InvalidCoordinateError(ExtractionError):
    """Raised when coordinates are outside valid WGS 84 bounds."""

    default_code = "COORDINATE_INVALID"


# ---------------------------------------------------------------------------
# Position normalisation
# ---------------------------------------------------------------------------


def to_position(raw: object, context: str) -> tuple[float, float]:
    """Convert a GeoJSON-style position to a ``(lon, lat)`` tuple.

    Drops altitude (third element) if present.

    Raises:
        ExtractionError: If the position is malformed.
    """
    if not isinstance(raw, list | tuple):
        msg = f"Malformed position in {context}: expected list/tuple, got {type(raw).__name__}"
        raise ExtractionError(msg)
    if len(raw) < 2:
        msg = f"Malformed position in {context}: expected at least 2 elements, got {len(raw)}"
        raise ExtractionError(msg)
    try:
        return (float(raw[0]), float(raw[1]))
    except (TypeError, ValueError) as exc:
        msg = (
            f"Malformed position in {context}: cannot convert to float "
            f"(lon={raw[0]!r}, lat={raw[1]!r})"
        )
        raise ExtractionError(msg) from exc


# ---------------------------------------------------------------------------
# Coordinate validation
# ---------------------------------------------------------------------------


def validate_coordinates(coords: Iterable[tuple[float, float]], context: str) -> None:
    """Validate that all coordinates are within WGS 84 bounds.

    Raises:
        InvalidCoordinateError: If any coordinate is out of bounds.
    """
    for lon, lat in coords:
        if not (MIN_LONGITUDE <= lon <= MAX_LONGITUDE):
            msg = (
                f"Longitude {lon} out of WGS 84 range [{MIN_LONGITUDE}, {MAX_LONGITUDE}] "
                f"in {context}"
            )
            raise InvalidCoordinateError(msg)
        if not (MIN_LATITUDE <= lat <= MAX_LATITUDE):
            msg = (
                f"Latitude {lat} out of WGS 84 range [{MIN_LATITUDE}, {MAX_LATITUDE}] "
                f"in {context}"
            )
            raise InvalidCoordinateError(msg)


# ---------------------------------------------------------------------------
# XML / KML namespace validation
# ---------------------------------------------------------------------------


def parse_kml_root(content: bytes) -> _Element:
    """Parse KML bytes and return the root element.

    Raises:
        KmlParseError: If the content is empty, not well-formed XML, or
            lacks the KML namespace.
    """
    from lxml import etree  # type: ignore[attr-defined]

    if not content.strip():
        msg = "KML document is empty"
        raise KmlParseError(msg)

    parser = etree.XMLParser(resolve_entities=False, no_network=True, huge_tree=False)
    try:
        root = etree.fromstring(content, parser=parser)
    except etree.XMLSyntaxError as exc:
        msg = f"Not valid XML: {exc}"
        raise KmlParseError(msg) from exc

    tag = root.tag
    if f"{{{KML_NAMESPACE}}}" not in tag and "kml" not in tag.lower():
        msg = f"Not a KML document — root element is <{tag}>"
        raise KmlParseError(msg)
    return root
