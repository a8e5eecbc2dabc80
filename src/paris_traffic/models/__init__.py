"""
Data Models
===========

Data models for the Paris traffic density service.

This module re-exports all data models for convenient access.

Models:
    Geography:
        - Category: Kind of place (tourist, shopping, ...)
        - PointOfInterest: Named location with intensity and spread
        - Bounds: Geographic bounding box

    Field:
        - SamplePoint: One sample of the density field
        - DensitySummary: Rounded statistics over samples

    Aggregation:
        - Hexagon: Per-cell aggregation result

    Output:
        - DensityFieldResponse: Heatmap payload
        - TrafficPayload: Legacy hexagon payload
        - TrafficStats: Cached payload summary
"""

from paris_traffic.models.poi import Bounds, Category, PointOfInterest
from paris_traffic.models.density import DensitySummary, SamplePoint
from paris_traffic.models.hexagon import Hexagon
from paris_traffic.models.output import (
    DAY_NAMES,
    AggregateRequest,
    DensityFieldResponse,
    DensityMetadata,
    LegacyHexagon,
    TrafficPayload,
    TrafficStats,
)

__all__ = [
    # Geography
    "Category",
    "PointOfInterest",
    "Bounds",
    # Field
    "SamplePoint",
    "DensitySummary",
    # Aggregation
    "Hexagon",
    # Output
    "DAY_NAMES",
    "AggregateRequest",
    "DensityFieldResponse",
    "DensityMetadata",
    "LegacyHexagon",
    "TrafficPayload",
    "TrafficStats",
]
