"""Data models.

Defines the data structures used throughout a measurement:
- Ring / CaliperPair: hull boundary and caliper sweep state
- Feature: Named point set extracted from GeoJSON or KML
- DiameterResult: Outcome of one caliper sweep
- DiameterReport: Serialisable per-feature measurement record
"""

from polygon_diameter.models.feature import Feature
from polygon_diameter.models.report import DiameterReport, MeasurementSettings
from polygon_diameter.models.result import DiameterResult
from polygon_diameter.models.ring import CaliperPair, Coordinate, Ring

__all__ = [
    "CaliperPair",
    "Coordinate",
    "DiameterReport",
    "DiameterResult",
    "Feature",
    "MeasurementSettings",
    "Ring",
]
