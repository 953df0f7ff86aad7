"""Core utilities and shared infrastructure.

- config: Configuration loading and validation
- constants: Named constants (angles, units, WGS 84 bounds)
- exceptions: Custom exception hierarchy
"""
