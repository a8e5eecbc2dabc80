"""
API Output Models
=================

This module defines the JSON contracts served by the traffic API.

Two payload families exist:
    1. Density field: dense point cloud for the animated heatmap
    2. Legacy traffic: one hexagon per spatial-index cell with a zone label

Density Field Contract:
    {
        "points": [
            {"position": [2.2945, 48.8584], "lat": 48.8584, "lng": 2.2945,
             "density": 87.3, "weight": 0.873},
            ...
        ],
        "metadata": {
            "hour": 14,
            "minute": 0,
            "day": 5,
            "dayName": "Vendredi",
            "totalPoints": 4120,
            "avgDensity": 21,
            "maxDensity": 100,
            "minDensity": 3,
            "generatedAt": "2026-10-17T12:00:00.000Z"
        }
    }

Design Rules:
    - Wire names are camelCase (the map layer is JavaScript)
    - Python attribute names stay snake_case; aliases bridge the two
    - Serialize with model_dump(by_alias=True, exclude_none=True)
"""

from datetime import datetime, timezone
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from paris_traffic.models.density import DensitySummary, SamplePoint


DAY_NAMES = ["Dimanche", "Lundi", "Mardi", "Mercredi", "Jeudi", "Vendredi", "Samedi"]


def utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with millisecond precision and a Z suffix."""
    now = datetime.now(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


class CamelModel(BaseModel):
    """Base model accepting both attribute names and wire aliases."""

    model_config = ConfigDict(populate_by_name=True)


# =============================================================================
# Density Field
# =============================================================================

class SamplePointOut(CamelModel):
    """Serialized density sample."""

    position: List[float] = Field(..., description="[lng, lat]")
    lat: float
    lng: float
    density: float = Field(..., ge=0.0, le=100.0)
    weight: float = Field(..., ge=0.0, le=1.0)

    @classmethod
    def from_sample(cls, sample: SamplePoint) -> "SamplePointOut":
        return cls(**sample.to_dict())


class DensityMetadata(CamelModel):
    """Request echo and summary statistics of a density field."""

    hour: int = Field(..., ge=0, le=23)
    minute: int = Field(..., ge=0, le=59)
    day: int = Field(..., ge=0, le=6)
    day_name: str = Field(..., alias="dayName")
    total_points: int = Field(..., ge=0, alias="totalPoints")
    avg_density: int = Field(..., alias="avgDensity")
    max_density: int = Field(..., alias="maxDensity")
    min_density: int = Field(..., alias="minDensity")
    generated_at: str = Field(default_factory=utc_timestamp, alias="generatedAt")
    actual_cache_minute: Optional[int] = Field(
        default=None,
        alias="actualCacheMinute",
        description="Minute bucket actually generated when served from cache",
    )


class DensityFieldResponse(CamelModel):
    """Complete density field payload."""

    points: List[SamplePointOut]
    metadata: DensityMetadata

    @classmethod
    def build(
        cls,
        points: List[SamplePoint],
        hour: int,
        day: int,
        minute: int,
    ) -> "DensityFieldResponse":
        """Assemble the payload and its summary statistics."""
        summary = DensitySummary.from_points(points)
        return cls(
            points=[SamplePointOut.from_sample(p) for p in points],
            metadata=DensityMetadata(
                hour=hour,
                minute=minute,
                day=day,
                day_name=DAY_NAMES[day],
                total_points=summary.total_points,
                avg_density=summary.avg_density,
                max_density=summary.max_density,
                min_density=summary.min_density,
            ),
        )


# =============================================================================
# Legacy Hexagon Traffic
# =============================================================================

class LegacyHexagon(CamelModel):
    """One labelled cell of the legacy traffic view."""

    h3_index: str = Field(..., alias="h3Index")
    center: List[float] = Field(..., description="[lng, lat]")
    boundary: List[List[float]] = Field(..., description="[[lng, lat], ...]")
    density: float = Field(..., ge=0.0, le=100.0)
    zone_name: str = Field(..., alias="zoneName")
    zone_type: str = Field(..., alias="zoneType")


class TrafficMetadata(CamelModel):
    """Request echo and cell count of a legacy traffic payload."""

    hour: int = Field(..., ge=0, le=23)
    day: int = Field(..., ge=0, le=6)
    day_name: str = Field(..., alias="dayName")
    resolution: int
    hexagon_count: int = Field(..., ge=0, alias="hexagonCount")
    generated_at: str = Field(default_factory=utc_timestamp, alias="generatedAt")


class TrafficPayload(CamelModel):
    """Legacy hexagon-based traffic snapshot for one hour of one day."""

    hexagons: List[LegacyHexagon]
    metadata: TrafficMetadata

    def find(self, h3_index: str) -> Optional[LegacyHexagon]:
        """Look up a hexagon by cell id."""
        for hexagon in self.hexagons:
            if hexagon.h3_index == h3_index:
                return hexagon
        return None


class TrafficStats(CamelModel):
    """Summary of a cached legacy payload."""

    cached: bool
    message: Optional[str] = None
    hexagon_count: Optional[int] = Field(default=None, alias="hexagonCount")
    avg_density: Optional[float] = Field(default=None, alias="avgDensity")
    max_density: Optional[float] = Field(default=None, alias="maxDensity")
    min_density: Optional[float] = Field(default=None, alias="minDensity")
    hour: Optional[int] = None
    day: Optional[int] = None


# =============================================================================
# Aggregation
# =============================================================================

class AggregatePoint(BaseModel):
    """Input point of an aggregation request."""

    lat: float = Field(..., ge=-90.0, le=90.0)
    lng: float = Field(..., ge=-180.0, le=180.0)
    value: Optional[float] = Field(default=None, ge=0.0, description="Defaults to 1")


class AggregateRequest(BaseModel):
    """Body of POST /api/traffic/aggregate."""

    points: List[AggregatePoint] = Field(default_factory=list)
    geojson: bool = Field(default=False, description="Return a FeatureCollection")


class ColorStop(BaseModel):
    """One stop of the heatmap legend."""

    value: float
    color: List[int]


class Legend(BaseModel):
    """Heatmap legend payload."""

    stops: List[ColorStop]
    css: Dict[str, str]
