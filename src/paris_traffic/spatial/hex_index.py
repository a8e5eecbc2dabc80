"""
Hexagonal Spatial Index
=======================

Thin wrapper over the H3 library.

The rest of the package only needs three capabilities from the index:
    - (lat, lng, resolution) -> cell id
    - cell id -> centre / boundary
    - cell id -> k-ring neighbours

Coordinate order:
    H3 speaks (lat, lng). Map renderers expect (lng, lat). Functions here
    return H3 order; conversion happens in the aggregator and the legacy
    generator.
"""

from typing import Dict, List, Tuple

import h3

from paris_traffic.catalog.pois import MAP_BOUNDS
from paris_traffic.models.poi import Bounds


# ~174m edge length, neighbourhood scale
DEFAULT_RESOLUTION = 9


RESOLUTION_INFO: Dict[int, Dict[str, str]] = {
    7: {"edgeLength": "1.22 km", "area": "5.16 km²"},
    8: {"edgeLength": "461 m", "area": "0.74 km²"},
    9: {"edgeLength": "174 m", "area": "0.11 km²"},
    10: {"edgeLength": "66 m", "area": "0.015 km²"},
    11: {"edgeLength": "25 m", "area": "0.002 km²"},
}


def point_to_cell(lat: float, lng: float, resolution: int = DEFAULT_RESOLUTION) -> str:
    """Cell containing a coordinate."""
    return h3.latlng_to_cell(lat, lng, resolution)


def cell_center(cell: str) -> Tuple[float, float]:
    """Cell centre as (lat, lng)."""
    lat, lng = h3.cell_to_latlng(cell)
    return (lat, lng)


def cell_boundary(cell: str) -> List[Tuple[float, float]]:
    """Cell vertices as (lat, lng), not closed."""
    return [(lat, lng) for lat, lng in h3.cell_to_boundary(cell)]


def is_valid_cell(cell: str) -> bool:
    return h3.is_valid_cell(cell)


def cells_in_bounds(
    bounds: Bounds = MAP_BOUNDS,
    resolution: int = DEFAULT_RESOLUTION,
) -> List[str]:
    """All cells whose centres fall inside a bounding box."""
    outer = [
        (bounds.min_lat, bounds.min_lng),
        (bounds.min_lat, bounds.max_lng),
        (bounds.max_lat, bounds.max_lng),
        (bounds.max_lat, bounds.min_lng),
    ]
    return list(h3.polygon_to_cells(h3.LatLngPoly(outer), resolution))


def cell_ring(
    lat: float,
    lng: float,
    ring_size: int = 10,
    resolution: int = DEFAULT_RESOLUTION,
) -> List[str]:
    """Cells within ring_size steps of the cell containing a coordinate."""
    center = point_to_cell(lat, lng, resolution)
    return list(h3.grid_disk(center, ring_size))


def neighbors(cell: str) -> List[str]:
    """Immediate neighbours of a cell, excluding the cell itself."""
    return [c for c in h3.grid_disk(cell, 1) if c != cell]


def cell_area_m2(cell: str) -> float:
    """Cell area in square metres."""
    return float(h3.cell_area(cell, unit="m^2"))


def resolution_info(resolution: int) -> Dict[str, str]:
    """Human-readable size of a resolution, 'Unknown' outside 7-11."""
    return RESOLUTION_INFO.get(resolution, {"edgeLength": "Unknown", "area": "Unknown"})
