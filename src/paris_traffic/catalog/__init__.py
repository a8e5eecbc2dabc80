"""
Catalog Module
==============

Static inputs of the density model: where people gather, and when.

Components:
    - pois: Point-of-interest catalogs and area bounds
    - modulation: Hour/day multiplier curves per category
"""

from paris_traffic.catalog.pois import (
    BUSY_AREAS,
    LEGACY_BOUNDS,
    LEGACY_HOTSPOTS,
    MAP_BOUNDS,
    PARIS_BOUNDS,
    PARIS_CENTER,
)
from paris_traffic.catalog.modulation import (
    DEFAULT_DAY_MULTIPLIER,
    DEFAULT_HOUR_MULTIPLIER,
    DEFAULT_MODULATION,
    LEGACY_MODULATION,
    ModulationTable,
    lerp,
    smoothstep,
)

__all__ = [
    "BUSY_AREAS",
    "LEGACY_BOUNDS",
    "LEGACY_HOTSPOTS",
    "MAP_BOUNDS",
    "PARIS_BOUNDS",
    "PARIS_CENTER",
    "DEFAULT_DAY_MULTIPLIER",
    "DEFAULT_HOUR_MULTIPLIER",
    "DEFAULT_MODULATION",
    "LEGACY_MODULATION",
    "ModulationTable",
    "lerp",
    "smoothstep",
]
