"""Data model for a feature whose diameter is measured.

A Feature is the point set extracted from one GeoJSON feature or KML
Placemark, along with its name and metadata. It is the output of the
extraction package and the input to ``measure_feature``.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Feature:
    """A named point set extracted from a geographic feature.

    Attributes:
        name: Feature or Placemark name (e.g. ``"Kenai Peninsula"``).
        description: Free-text description.
        coords: Every position of the feature as ``(lon, lat)`` tuples, in
            source order. Rings keep their closing coordinate.
        geometry_type: Source geometry type (``"Polygon"``,
            ``"MultiPoint"``, ``"GeometryCollection"`` ...).
        crs: Coordinate reference system. Always ``"EPSG:4326"`` for
            GeoJSON and KML input.
        metadata: Key-value pairs from GeoJSON properties or KML
            ``ExtendedData``.
        source_file: Name of the source file, if any.
        feature_index: Zero-based index of the feature within its source.
    """

    name: str
    description: str = ""
    coords: list[tuple[float, float]] = field(default_factory=list)
    geometry_type: str = ""
    crs: str = "EPSG:4326"
    metadata: dict[str, str] = field(default_factory=dict)
    source_file: str = ""
    feature_index: int = 0

    @property
    def point_count(self) -> int:
        """Total number of positions in the feature."""
        return len(self.coords)
