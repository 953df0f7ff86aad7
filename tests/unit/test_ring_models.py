"""Tests for the Ring, CaliperPair and Feature models."""

from __future__ import annotations

import pytest

from polygon_diameter.core.exceptions import InvalidInputError
from polygon_diameter.models.feature import Feature
from polygon_diameter.models.ring import CaliperPair, Ring


class TestRingConstruction:
    """Ring.from_coords normalisation."""

    def test_drops_closing_coordinate(self) -> None:
        ring = Ring.from_coords([(0, 0), (1, 0), (1, 1), (0, 0)])
        assert ring.coords == ((0.0, 0.0), (1.0, 0.0), (1.0, 1.0))

    def test_keeps_open_ring(self) -> None:
        ring = Ring.from_coords([(0, 0), (1, 0), (1, 1)])
        assert len(ring) == 3

    def test_single_point_is_not_emptied(self) -> None:
        ring = Ring.from_coords([(5, 5)])
        assert ring.coords == ((5.0, 5.0),)

    def test_drops_altitude(self) -> None:
        ring = Ring.from_coords([(-150.0, 61.0, 120.0), (-149.0, 61.5, 80.0)])
        assert ring.coords == ((-150.0, 61.0), (-149.0, 61.5))

    def test_accepts_lists(self) -> None:
        ring = Ring.from_coords([[10.1, 43.5], [10.2, 43.6]])
        assert ring[1] == (10.2, 43.6)

    def test_short_coordinate_raises(self) -> None:
        with pytest.raises(InvalidInputError, match="index 1"):
            Ring.from_coords([(0, 0), (1,)])

    def test_non_numeric_coordinate_raises(self) -> None:
        with pytest.raises(InvalidInputError, match="cannot convert"):
            Ring.from_coords([(0, 0), ("east", 1)])

    def test_empty(self) -> None:
        assert len(Ring.from_coords([])) == 0


class TestRingIndexing:
    """Wraparound indexing and derived edges."""

    RING = Ring.from_coords([(0, 0), (2, 0), (2, 2), (0, 2)])

    def test_index_wraps(self) -> None:
        assert self.RING[4] == self.RING[0]
        assert self.RING[7] == self.RING[3]

    def test_next_index_wraps(self) -> None:
        assert self.RING.next_index(2) == 3
        assert self.RING.next_index(3) == 0

    def test_edge_closes_ring(self) -> None:
        assert self.RING.edge(3) == ((0.0, 2.0), (0.0, 0.0))

    def test_reversed(self) -> None:
        assert self.RING.reversed().coords == tuple(reversed(self.RING.coords))

    def test_iteration(self) -> None:
        assert list(self.RING) == list(self.RING.coords)

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            self.RING.coords = ()  # type: ignore[misc]


class TestCaliperPair:
    """Caliper index advancement."""

    def test_advance_i_wraps(self) -> None:
        calipers = CaliperPair(i=4, j=2, size=5)
        calipers.advance_i()
        assert (calipers.i, calipers.j) == (0, 2)

    def test_advance_j_wraps(self) -> None:
        calipers = CaliperPair(i=1, j=4, size=5)
        calipers.advance_j()
        assert (calipers.i, calipers.j) == (1, 0)

    def test_advance_both(self) -> None:
        calipers = CaliperPair(i=1, j=3, size=4)
        calipers.advance_both()
        assert (calipers.i, calipers.j) == (2, 0)

    def test_next_indices(self) -> None:
        calipers = CaliperPair(i=2, j=3, size=4)
        assert calipers.next_i == 3
        assert calipers.next_j == 0


class TestFeature:
    """Derived counts."""

    def _feature(self) -> Feature:
        return Feature(
            name="Kenai Block",
            coords=[(-151.2, 60.4), (-150.6, 60.35), (-151.2, 60.4)],
            geometry_type="Polygon",
            metadata={"region": "Kenai Peninsula"},
            source_file="alaska.kml",
            feature_index=2,
        )

    def test_counts(self) -> None:
        feature = self._feature()
        assert feature.point_count == 3
