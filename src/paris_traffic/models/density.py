"""
Density Models
==============

Data models for the synthesized density field.

These records are produced fresh for every request by the rasterizer and
the cluster densifier, summarized by the generator, and discarded after
serialization.
"""

import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves upward (2.5 -> 3)."""
    return int(math.floor(value + 0.5))


@dataclass(frozen=True, slots=True)
class SamplePoint:
    """
    Single sample of the density field.

    Attributes:
        lat: Latitude of the (jittered) sample position
        lng: Longitude of the (jittered) sample position
        density: Field value in [0, 100]
    """

    lat: float
    lng: float
    density: float

    @property
    def position(self) -> Tuple[float, float]:
        """(lng, lat) pair, the order map renderers expect."""
        return (self.lng, self.lat)

    @property
    def weight(self) -> float:
        """Density scaled to [0, 1]."""
        return self.density / 100

    def to_dict(self) -> dict:
        """Export as dictionary for serialization."""
        return {
            "position": [self.lng, self.lat],
            "lat": self.lat,
            "lng": self.lng,
            "density": self.density,
            "weight": self.weight,
        }


@dataclass(frozen=True, slots=True)
class DensitySummary:
    """
    Summary statistics over a list of samples.

    Values are rounded to integers, matching what the heatmap legend shows.
    An empty sample list summarizes to zeros.
    """

    total_points: int
    avg_density: int
    max_density: int
    min_density: int

    @classmethod
    def from_points(cls, points: Sequence[SamplePoint]) -> "DensitySummary":
        if not points:
            return cls(total_points=0, avg_density=0, max_density=0, min_density=0)

        densities: List[float] = [p.density for p in points]
        return cls(
            total_points=len(densities),
            avg_density=round_half_up(sum(densities) / len(densities)),
            max_density=round_half_up(max(densities)),
            min_density=round_half_up(min(densities)),
        )
