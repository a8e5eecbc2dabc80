"""
Spatial Module
==============

Hexagonal spatial indexing and aggregation.

Components:
    - hex_index: H3 wrapper (cell lookup, centre, boundary, rings)
    - aggregator: Point set -> normalized hexagons, GeoJSON export
"""

from paris_traffic.spatial.hex_index import DEFAULT_RESOLUTION
from paris_traffic.spatial.aggregator import aggregate, to_geojson

__all__ = [
    "DEFAULT_RESOLUTION",
    "aggregate",
    "to_geojson",
]
