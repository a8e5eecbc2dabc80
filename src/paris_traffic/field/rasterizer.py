"""
Grid Rasterizer
===============

Sweeps a regular lattice over the area of interest and samples the density
field at each (jittered) lattice point.

Resolution Tiers (lat step × lng step, approximate pitch):
    low      0.003  × 0.004    ~300m
    medium   0.002  × 0.0025   ~200m
    high     0.0012 × 0.0015   ~120m
    ultra    0.0008 × 0.001    ~80m
    extreme  0.0006 × 0.00075  ~60m

Jitter:
    Each lattice point is displaced by up to ±20% of the step on each axis.
    Offsets come from a linear congruential generator seeded with
    (hour × 60 + minute // 5) mod 1000, so the jitter pattern is identical
    for every frame inside a 5-minute bucket. Re-drawing it every frame
    makes the animated heatmap flicker.

Sparsity:
    Samples with density <= 3 are dropped; only visually relevant points
    reach the payload.
"""

import logging
import math
from dataclasses import dataclass
from typing import Dict, List, Tuple

import numpy as np

from paris_traffic.catalog.pois import PARIS_BOUNDS
from paris_traffic.field.evaluator import DensitySource
from paris_traffic.models.density import SamplePoint
from paris_traffic.models.poi import Bounds


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GridStep:
    """Lattice pitch in degrees."""

    lat_step: float
    lng_step: float


RESOLUTION_TIERS: Dict[str, GridStep] = {
    "low": GridStep(lat_step=0.003, lng_step=0.004),
    "medium": GridStep(lat_step=0.002, lng_step=0.0025),
    "high": GridStep(lat_step=0.0012, lng_step=0.0015),
    "ultra": GridStep(lat_step=0.0008, lng_step=0.001),
    "extreme": GridStep(lat_step=0.0006, lng_step=0.00075),
}

DEFAULT_TIER = "high"
JITTER_FRACTION = 0.4
GRID_THRESHOLD = 3.0


def resolve_tier(resolution: str) -> GridStep:
    """Grid step for a tier name, falling back to the high tier."""
    step = RESOLUTION_TIERS.get(resolution)
    if step is None:
        logger.debug(f"Unknown resolution tier '{resolution}', using '{DEFAULT_TIER}'")
        return RESOLUTION_TIERS[DEFAULT_TIER]
    return step


class LinearCongruentialGenerator:
    """
    Minimal LCG producing floats in [0, 1).

    state <- (state × 1103515245 + 12345) mod 2³¹
    """

    MULTIPLIER = 1103515245
    INCREMENT = 12345
    MODULUS = 2 ** 31

    def __init__(self, seed: int) -> None:
        self.state = seed % self.MODULUS

    def next_float(self) -> float:
        self.state = (self.state * self.MULTIPLIER + self.INCREMENT) % self.MODULUS
        return self.state / self.MODULUS


def jitter_seed(hour: int, minute: int) -> int:
    """Seed shared by every frame of a 5-minute bucket."""
    return (int(hour) * 60 + int(minute) // 5) % 1000


def _axis(start: float, stop: float, step: float) -> List[float]:
    count = int(math.floor((stop - start) / step + 1e-9)) + 1
    return [start + i * step for i in range(count)]


class GridRasterizer:
    """
    Samples the density field on a jittered regular grid.

    Attributes:
        field: Density source to sample
        bounds: Area swept by the grid
        threshold: Samples at or below this density are dropped
    """

    def __init__(
        self,
        field: DensitySource,
        bounds: Bounds = PARIS_BOUNDS,
        threshold: float = GRID_THRESHOLD,
    ) -> None:
        self.field = field
        self.bounds = bounds
        self.threshold = threshold

    def grid_positions(
        self,
        hour: int,
        minute: int,
        resolution: str = DEFAULT_TIER,
    ) -> Tuple[np.ndarray, np.ndarray]:
        """
        Jittered lattice positions in sweep order.

        Latitude is the outer loop and longitude the inner loop. For each
        cell the LCG is drawn twice: latitude offset first, then longitude.

        Returns:
            (lats, lngs) arrays of equal length
        """
        step = resolve_tier(resolution)
        rng = LinearCongruentialGenerator(jitter_seed(hour, minute))

        lat_axis = _axis(self.bounds.min_lat, self.bounds.max_lat, step.lat_step)
        lng_axis = _axis(self.bounds.min_lng, self.bounds.max_lng, step.lng_step)

        lats: List[float] = []
        lngs: List[float] = []
        for lat in lat_axis:
            for lng in lng_axis:
                lats.append(lat + (rng.next_float() - 0.5) * step.lat_step * JITTER_FRACTION)
                lngs.append(lng + (rng.next_float() - 0.5) * step.lng_step * JITTER_FRACTION)

        return np.array(lats), np.array(lngs)

    def rasterize(
        self,
        hour: int,
        day: int,
        minute: int = 0,
        resolution: str = DEFAULT_TIER,
    ) -> List[SamplePoint]:
        """
        Sample the field over the whole grid.

        Args:
            hour: Hour of day (0-23)
            day: Day of week (0 = Sunday)
            minute: Minute within the hour (0-59)
            resolution: Tier name; unknown names use the high tier

        Returns:
            Samples above the sparsity threshold, in row-major sweep order
        """
        lats, lngs = self.grid_positions(hour, minute, resolution)
        densities = self.field.evaluate(lats, lngs, hour, day, minute)

        points = [
            SamplePoint(lat=float(lat), lng=float(lng), density=float(density))
            for lat, lng, density in zip(lats, lngs, densities)
            if density > self.threshold
        ]

        logger.debug(
            f"Rasterized {len(lats)} cells at '{resolution}', "
            f"kept {len(points)} above {self.threshold}"
        )
        return points
