"""
Traffic Module
==============

Legacy hexagon-per-cell traffic snapshots.
"""

from paris_traffic.traffic.legacy import (
    LEGACY_RESOLUTION,
    LEGACY_RING_SIZE,
    LegacyTrafficGenerator,
    euclidean_distance,
)

__all__ = [
    "LEGACY_RESOLUTION",
    "LEGACY_RING_SIZE",
    "LegacyTrafficGenerator",
    "euclidean_distance",
]
