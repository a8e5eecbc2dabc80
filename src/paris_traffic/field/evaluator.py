"""
Scalar Field Evaluator
======================

Closed-form density model over geographic space.

For a position (lat, lng) at a given time, every point of interest p
contributes:

    p.base_intensity × exp(-d² / 2σ²) × hour(p.category, hour, minute)
                     × day(p.category, day)

where σ = 0.6 × p.spatial_spread and d is a planar distance in degrees,
with the longitude delta scaled by cos(mean latitude). Points further than
3 × spread are skipped; this truncates the kernel support for speed and is
not a hard cutoff of the model.

A small uniform noise term (±noise_amplitude, regenerated every call) is
added to the sum, which is then clamped to [0, 100]. The noise source is an
injectable numpy Generator so tests can seed it or switch it off.

Design Rules:
    - Total function: never raises for any numeric input
    - Unknown categories degrade to neutral multipliers
    - Vectorized evaluation matches the scalar path point for point
"""

import logging
import math
from typing import Optional, Protocol, Sequence

import numpy as np

from paris_traffic.catalog.modulation import DEFAULT_MODULATION, ModulationTable
from paris_traffic.catalog.pois import BUSY_AREAS
from paris_traffic.models.poi import PointOfInterest


logger = logging.getLogger(__name__)


SIGMA_FACTOR = 0.6
SUPPORT_FACTOR = 3.0
MAX_DENSITY = 100.0


def gaussian_falloff(distance: float, spread: float) -> float:
    """Gaussian kernel with σ = 0.6 × spread."""
    sigma = spread * SIGMA_FACTOR
    return math.exp(-(distance * distance) / (2 * sigma * sigma))


def planar_distance(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """
    Equirectangular distance in degrees.

    Only valid over extents of a fraction of a degree.
    """
    d_lat = lat1 - lat2
    d_lng = (lng1 - lng2) * math.cos(math.radians((lat1 + lat2) / 2))
    return math.sqrt(d_lat * d_lat + d_lng * d_lng)


class DensitySource(Protocol):
    """
    Protocol for anything the rasterizer and densifier can sample.

    Implemented by ScalarFieldEvaluator; tests may supply simpler fields.
    """

    def evaluate(
        self,
        lats: np.ndarray,
        lngs: np.ndarray,
        hour: float,
        day: int,
        minute: float = 0,
    ) -> np.ndarray:
        ...


class ScalarFieldEvaluator:
    """
    Evaluates the foot-traffic density field.

    Attributes:
        pois: Point-of-interest catalog
        modulation: Hour/day multiplier curves
        noise_amplitude: Half-width of the uniform noise band

    Example:
        evaluator = ScalarFieldEvaluator()
        evaluator.density_at(48.8584, 2.2945, hour=12, day=5)

        # Reproducible field for tests
        evaluator = ScalarFieldEvaluator(rng=np.random.default_rng(7))
    """

    def __init__(
        self,
        pois: Sequence[PointOfInterest] = BUSY_AREAS,
        modulation: ModulationTable = DEFAULT_MODULATION,
        noise_amplitude: float = 1.0,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        """
        Initialize the evaluator.

        Args:
            pois: Catalog of points of interest
            modulation: Temporal multiplier tables
            noise_amplitude: Noise band half-width (0 disables noise)
            rng: Noise source; a fresh unseeded generator when None
        """
        if noise_amplitude < 0:
            raise ValueError("noise_amplitude must be non-negative")

        self.pois = tuple(pois)
        self.modulation = modulation
        self.noise_amplitude = noise_amplitude
        self.rng = rng if rng is not None else np.random.default_rng()

        self._lat = np.array([p.latitude for p in self.pois], dtype=float)
        self._lng = np.array([p.longitude for p in self.pois], dtype=float)
        self._intensity = np.array([p.base_intensity for p in self.pois], dtype=float)
        self._spread = np.array([p.spatial_spread for p in self.pois], dtype=float)

        logger.info(
            f"ScalarFieldEvaluator initialized: pois={len(self.pois)}, "
            f"noise=±{noise_amplitude}"
        )

    def temporal_weights(self, hour: float, day: int, minute: float = 0) -> np.ndarray:
        """Per-POI product of hour and day multipliers."""
        return np.array(
            [
                self.modulation.hour_multiplier(p.category, hour, minute)
                * self.modulation.day_multiplier(p.category, day)
                for p in self.pois
            ],
            dtype=float,
        )

    def _noise(self, size: int) -> np.ndarray:
        if self.noise_amplitude == 0:
            return np.zeros(size)
        return self.rng.uniform(-self.noise_amplitude, self.noise_amplitude, size)

    def evaluate(
        self,
        lats: np.ndarray,
        lngs: np.ndarray,
        hour: float,
        day: int,
        minute: float = 0,
    ) -> np.ndarray:
        """
        Evaluate the field at many positions at once.

        Args:
            lats: Latitudes, shape (N,)
            lngs: Longitudes, shape (N,)
            hour: Hour of day
            day: Day of week (0 = Sunday)
            minute: Minute within the hour

        Returns:
            Densities in [0, 100], shape (N,)
        """
        lats = np.asarray(lats, dtype=float).reshape(-1, 1)
        lngs = np.asarray(lngs, dtype=float).reshape(-1, 1)

        d_lat = lats - self._lat
        d_lng = (lngs - self._lng) * np.cos(np.radians((lats + self._lat) / 2))
        distance = np.sqrt(d_lat * d_lat + d_lng * d_lng)

        sigma = self._spread * SIGMA_FACTOR
        kernel = np.exp(-(distance * distance) / (2 * sigma * sigma))
        kernel = np.where(distance < self._spread * SUPPORT_FACTOR, kernel, 0.0)

        weights = self._intensity * self.temporal_weights(hour, day, minute)
        total = kernel @ weights
        total = total + self._noise(total.shape[0])

        return np.clip(total, 0.0, MAX_DENSITY)

    def density_at(
        self,
        lat: float,
        lng: float,
        hour: float,
        day: int,
        minute: float = 0,
    ) -> float:
        """
        Evaluate the field at one position.

        Returns:
            Density in [0, 100]
        """
        total = 0.0
        for poi in self.pois:
            distance = planar_distance(lat, lng, poi.latitude, poi.longitude)
            if distance >= poi.spatial_spread * SUPPORT_FACTOR:
                continue
            total += (
                poi.base_intensity
                * gaussian_falloff(distance, poi.spatial_spread)
                * self.modulation.hour_multiplier(poi.category, hour, minute)
                * self.modulation.day_multiplier(poi.category, day)
            )

        total += float(self._noise(1)[0])

        return min(MAX_DENSITY, max(0.0, total))
