"""
Legacy Traffic Generator
========================

Hexagon-per-cell traffic snapshots, the first view the service offered
before the dense heatmap existed. Still served by /all, /hexagon and /stats.

Model:
    Cells are the k-ring (k = 20) around central Paris at resolution 9,
    keeping cells whose centre lies inside LEGACY_BOUNDS. For each cell:

        density = 5 + U[0, 10)
                + Σ over hotspots with d < 2r:
                      basePop × max(0, 1 - d / 1.5r) × hour × day + U[-5, 5)

    clamped to [0, 100], where d is a plain (unscaled) degree distance.

Labels:
    A cell within 0.02° of its nearest hotspot takes the hotspot's name and
    category; other cells are named after their id prefix with type
    "general".
"""

import logging
import math
from typing import Dict, Optional, Sequence, Tuple

import numpy as np

from paris_traffic.catalog.modulation import LEGACY_MODULATION, ModulationTable
from paris_traffic.catalog.pois import LEGACY_BOUNDS, LEGACY_HOTSPOTS, PARIS_CENTER
from paris_traffic.models.output import (
    DAY_NAMES,
    LegacyHexagon,
    TrafficMetadata,
    TrafficPayload,
)
from paris_traffic.models.poi import Bounds, PointOfInterest
from paris_traffic.spatial import hex_index


logger = logging.getLogger(__name__)


LEGACY_RESOLUTION = 9
LEGACY_RING_SIZE = 20
ZONE_NAME_RADIUS = 0.02


def euclidean_distance(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Unscaled distance in degrees."""
    return math.sqrt((lat1 - lat2) ** 2 + (lng1 - lng2) ** 2)


class LegacyTrafficGenerator:
    """
    Generates hexagon traffic snapshots.

    Attributes:
        hotspots: Hotspot catalog
        modulation: Hour/day curves (zero entries fall back to neutral)
        resolution: H3 resolution of the cells
        ring_size: k of the k-ring around the centre
    """

    def __init__(
        self,
        hotspots: Sequence[PointOfInterest] = LEGACY_HOTSPOTS,
        modulation: ModulationTable = LEGACY_MODULATION,
        resolution: int = LEGACY_RESOLUTION,
        ring_size: int = LEGACY_RING_SIZE,
        center: Tuple[float, float] = PARIS_CENTER,
        bounds: Bounds = LEGACY_BOUNDS,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self.hotspots = tuple(hotspots)
        self.modulation = modulation
        self.resolution = resolution
        self.ring_size = ring_size
        self.center = center
        self.bounds = bounds
        self.rng = rng if rng is not None else np.random.default_rng()

        logger.info(
            f"LegacyTrafficGenerator initialized: hotspots={len(self.hotspots)}, "
            f"resolution={resolution}, ring={ring_size}"
        )

    def cell_density(self, lat: float, lng: float, hour: int, day: int) -> float:
        """Noisy hotspot-weighted density at a cell centre, in [0, 100]."""
        total = 5 + self.rng.uniform(0, 10)

        for hotspot in self.hotspots:
            dist = euclidean_distance(lat, lng, hotspot.latitude, hotspot.longitude)
            if dist >= hotspot.spatial_spread * 2:
                continue

            influence = max(0.0, 1 - dist / (hotspot.spatial_spread * 1.5))
            contribution = (
                hotspot.base_intensity
                * influence
                * self.modulation.hour_value(hotspot.category, hour)
                * self.modulation.day_multiplier(hotspot.category, day)
            )
            total += contribution + self.rng.uniform(-5, 5)

        return min(100.0, max(0.0, float(total)))

    def nearest_hotspot(self, lat: float, lng: float) -> Tuple[Optional[PointOfInterest], float]:
        nearest = None
        nearest_dist = math.inf
        for hotspot in self.hotspots:
            dist = euclidean_distance(lat, lng, hotspot.latitude, hotspot.longitude)
            if dist < nearest_dist:
                nearest, nearest_dist = hotspot, dist
        return nearest, nearest_dist

    def generate(self, hour: int = 14, day: int = 5) -> TrafficPayload:
        """
        Generate the snapshot for one hour of one day.

        Args:
            hour: Hour of day (0-23)
            day: Day of week (0 = Sunday)

        Returns:
            Labelled hexagons plus metadata
        """
        cells = hex_index.cell_ring(
            self.center[0], self.center[1], self.ring_size, self.resolution
        )

        hexagons = []
        for cell in cells:
            lat, lng = hex_index.cell_center(cell)
            if not self.bounds.contains(lat, lng):
                continue

            hotspot, dist = self.nearest_hotspot(lat, lng)
            if hotspot is not None and dist < ZONE_NAME_RADIUS:
                zone_name, zone_type = hotspot.name, hotspot.category.value
            else:
                zone_name, zone_type = f"Zone {cell[:8]}", "general"

            hexagons.append(
                LegacyHexagon(
                    h3_index=cell,
                    center=[lng, lat],
                    boundary=[[v_lng, v_lat] for v_lat, v_lng in hex_index.cell_boundary(cell)],
                    density=self.cell_density(lat, lng, hour, day),
                    zone_name=zone_name,
                    zone_type=zone_type,
                )
            )

        logger.debug(f"Legacy traffic day={day} hour={hour}: {len(hexagons)} hexagons")

        return TrafficPayload(
            hexagons=hexagons,
            metadata=TrafficMetadata(
                hour=hour,
                day=day,
                day_name=DAY_NAMES[day],
                resolution=self.resolution,
                hexagon_count=len(hexagons),
            ),
        )

    def generate_day(self, day: int = 5) -> Dict[int, TrafficPayload]:
        """Snapshots for every hour of a day."""
        return {hour: self.generate(hour, day) for hour in range(24)}
