"""Polygon diameter via rotating calipers.

Computes the maximum distance between any two points of a polygon or
multi-point feature by sweeping a pair of calipers around the feature's
hull, with pluggable distance and bearing primitives (geodesic,
spherical, planar).
"""

__version__ = "0.1.0"
