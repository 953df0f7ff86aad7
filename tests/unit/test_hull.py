"""Tests for hull extraction and winding canonicalisation."""

from __future__ import annotations

import logging

import pytest

from polygon_diameter.core.exceptions import ContractError, InvalidInputError
from polygon_diameter.geometry.hull import (
    HullError,
    canonicalize_winding,
    extract_hull,
    is_counter_clockwise,
)
from polygon_diameter.models.ring import Ring

SQUARE_WITH_CENTRE = [(0.0, 0.0), (2.0, 0.0), (2.0, 2.0), (0.0, 2.0), (1.0, 1.0)]


class TestExtractHull:
    """Convex and concave hulls via shapely."""

    def test_interior_point_dropped(self) -> None:
        ring = extract_hull(SQUARE_WITH_CENTRE)
        assert len(ring) == 4
        assert (1.0, 1.0) not in ring.coords
        assert set(ring.coords) == {(0.0, 0.0), (2.0, 0.0), (2.0, 2.0), (0.0, 2.0)}

    def test_no_closing_vertex(self) -> None:
        ring = extract_hull(SQUARE_WITH_CENTRE)
        assert ring.coords[0] != ring.coords[-1]

    def test_duplicates_collapse(self) -> None:
        ring = extract_hull([(1.0, 1.0), (3.0, 1.0), (3.0, 1.0), (2.0, 4.0), (1.0, 1.0)])
        assert len(ring) == 3

    def test_single_distinct_point(self) -> None:
        ring = extract_hull([(10.0, 43.0), (10.0, 43.0)])
        assert ring.coords == ((10.0, 43.0),)

    def test_collinear_points_become_extremes(self) -> None:
        ring = extract_hull([(0.0, 0.0), (0.0, 3.0), (0.0, 1.0), (0.0, 5.0)])
        assert len(ring) == 2
        assert set(ring.coords) == {(0.0, 0.0), (0.0, 5.0)}

    def test_empty_points_raise(self) -> None:
        with pytest.raises(InvalidInputError) as exc_info:
            extract_hull([])
        assert exc_info.value.stage == "hull"

    @pytest.mark.parametrize("concavity", [0.0, -0.5, 1.5])
    def test_concavity_out_of_range(self, concavity: float) -> None:
        with pytest.raises(InvalidInputError, match="concavity"):
            extract_hull(SQUARE_WITH_CENTRE, concavity=concavity)

    def test_concave_hull_keeps_more_vertices(self, alaska_star) -> None:
        convex = extract_hull(alaska_star)
        concave = extract_hull(alaska_star, concavity=0.2)
        assert len(concave) >= len(convex) >= 3

    def test_star_convex_hull_is_spike_tips(self, alaska_star) -> None:
        assert len(extract_hull(alaska_star)) == 6

    def test_logs_hull_size(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="polygon_diameter.geometry.hull"):
            extract_hull(SQUARE_WITH_CENTRE)
        assert "hull=4" in caplog.text

    def test_hull_error_is_contract_error(self) -> None:
        err = HullError("unexpected MultiPolygon")
        assert isinstance(err, ContractError)
        assert err.stage == "hull"
        assert err.code == "HULL_EXTRACTION_FAILED"


class TestWinding:
    """Counter-clockwise canonicalisation."""

    CCW = Ring.from_coords([(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)])

    def test_ccw_detected(self) -> None:
        assert is_counter_clockwise(self.CCW)
        assert not is_counter_clockwise(self.CCW.reversed())

    def test_ccw_ring_unchanged(self) -> None:
        assert canonicalize_winding(self.CCW) is self.CCW

    def test_cw_ring_reversed(self) -> None:
        assert canonicalize_winding(self.CCW.reversed()) == self.CCW

    def test_result_always_ccw(self, tuscany_pentagon) -> None:
        ring = Ring.from_coords(tuscany_pentagon)
        assert not is_counter_clockwise(ring)
        assert is_counter_clockwise(canonicalize_winding(ring))

    def test_short_rings_untouched(self) -> None:
        ring = Ring.from_coords([(0.0, 0.0), (1.0, 1.0)])
        assert canonicalize_winding(ring) is ring
