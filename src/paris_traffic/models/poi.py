"""
Point-of-Interest Models
========================

Static geography used by the density field synthesis engine.

Design Philosophy:
    Points of interest are EXPLICITLY DECLARED, not discovered at runtime.
    They are defined once in the catalog module and never mutated for the
    lifetime of the process.

Coordinates:
    All coordinates are WGS84 degrees. The spatial spread of a point of
    interest is also expressed in degrees (latitude-equivalent), which is
    only meaningful because the area of interest spans a fraction of a degree.
"""

from dataclasses import dataclass
from enum import Enum


class Category(str, Enum):
    """
    Kind of place a point of interest represents.

    The category selects the hour-of-day and day-of-week curves
    applied to the point's base intensity.
    """

    TOURIST = "tourist"
    SHOPPING = "shopping"
    BUSINESS = "business"
    TRANSPORT = "transport"
    NIGHTLIFE = "nightlife"
    PARK = "park"
    EDUCATION = "education"
    RESIDENTIAL = "residential"


@dataclass(frozen=True, slots=True)
class PointOfInterest:
    """
    Named location contributing a Gaussian bump to the density field.

    Attributes:
        name: Human-readable name
        latitude: Latitude in degrees
        longitude: Longitude in degrees
        category: Category selecting the temporal curves
        base_intensity: Peak contribution on a 0-100 scale
        spatial_spread: Influence radius in degrees
    """

    name: str
    latitude: float
    longitude: float
    category: Category
    base_intensity: float
    spatial_spread: float

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.spatial_spread <= 0:
            raise ValueError("spatial_spread must be positive")
        if not 0 <= self.base_intensity <= 100:
            raise ValueError("base_intensity must be in [0, 100]")


@dataclass(frozen=True, slots=True)
class Bounds:
    """Axis-aligned geographic bounding box."""

    min_lat: float
    max_lat: float
    min_lng: float
    max_lng: float

    def contains(self, lat: float, lng: float) -> bool:
        """Check whether a coordinate lies inside the box (inclusive)."""
        return (
            self.min_lat <= lat <= self.max_lat
            and self.min_lng <= lng <= self.max_lng
        )
