"""Pydantic measurement record for one feature.

The ``DiameterReport`` is the serialisable summary of a measurement:
which feature was measured, how (primitives, units, hull), and the
result. It is what ``measure_feature`` and ``measure_kml_file`` return.

All coordinates are WGS 84 (EPSG:4326) unless planar primitives were
used, in which case they are in the input's own coordinate units.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from polygon_diameter.models.feature import Feature
    from polygon_diameter.models.result import DiameterResult

# Schema version for forward compatibility
SCHEMA_VERSION = "diameter-report-v1"


class MeasurementSettings(BaseModel):
    """How the diameter was measured.

    Attributes:
        primitives: Distance/bearing primitives name.
        units: Length unit of ``diameter``.
        hull_concavity: shapely hull ratio (``1.0`` = convex hull).
        tie_tolerance_rad: Caliper tie tolerance in radians.
    """

    primitives: str = "geodesic"
    units: str = "kilometers"
    hull_concavity: float = 1.0
    tie_tolerance_rad: float = 1e-9


class DiameterReport(BaseModel):
    """Top-level per-feature diameter record.

    Attributes:
        schema_version: Schema identifier for forward compatibility.
        feature_name: Name of the feature / Placemark.
        source_file: Name of the source file, if any.
        feature_index: Zero-based index of the feature within its source.
        point_count: Positions extracted from the feature.
        hull_size: Vertices in the hull ring that was swept.
        diameter: The feature diameter in ``settings.units``.
        endpoints: The two positions ``[[lon, lat], [lon, lat]]`` at that
            distance.
        pairs_evaluated: Candidate pairs evaluated by the sweep.
        settings: Measurement settings.
        timestamp: Measurement timestamp (ISO 8601).
    """

    schema_version: str = Field(default=SCHEMA_VERSION, alias="$schema")
    feature_name: str = ""
    source_file: str = ""
    feature_index: int = 0
    point_count: int = 0
    hull_size: int = 0
    diameter: float = 0.0
    endpoints: list[list[float]] = Field(default_factory=list)
    pairs_evaluated: int = 0
    settings: MeasurementSettings = Field(default_factory=MeasurementSettings)
    timestamp: str = ""

    model_config = {"populate_by_name": True}

    @classmethod
    def from_result(
        cls,
        feature: Feature,
        result: DiameterResult,
        *,
        settings: MeasurementSettings,
        timestamp: str = "",
    ) -> DiameterReport:
        """Construct a report from a ``Feature`` and its ``DiameterResult``.

        Args:
            feature: The measured ``Feature``.
            result: The ``DiameterResult`` of the sweep over its hull.
            settings: Settings the measurement ran with.
            timestamp: Measurement timestamp (ISO 8601). If empty, uses
                the current UTC time.
        """
        if not timestamp:
            timestamp = datetime.now(UTC).isoformat()

        return cls(
            feature_name=feature.name,
            source_file=feature.source_file,
            feature_index=feature.feature_index,
            point_count=feature.point_count,
            hull_size=result.ring_size,
            diameter=result.distance,
            endpoints=[list(p) for p in result.endpoints],
            pairs_evaluated=result.pairs_evaluated,
            settings=settings,
            timestamp=timestamp,
        )

    def to_json(self, *, indent: int = 2) -> str:
        """Serialise to a JSON string using the ``$schema`` alias."""
        return self.model_dump_json(indent=indent, by_alias=True)

    def to_dict(self) -> dict[str, object]:
        """Serialise to a plain dict."""
        return self.model_dump(by_alias=True)  # type: ignore[return-value]
