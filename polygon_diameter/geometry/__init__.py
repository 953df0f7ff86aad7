"""Computational geometry for the diameter measurement.

- angles: Counter-clockwise angle between two ring edges
- calipers: Rotating-calipers sweep and brute-force reference
- hull: Hull extraction (shapely) and winding canonicalisation
"""
