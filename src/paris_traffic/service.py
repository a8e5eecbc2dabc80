"""
Traffic Service
===============

Request-scoped orchestration behind the HTTP routes: parameter validation,
cache lookups and payload generation.

The service owns two caches, injected at construction:
    - traffic: legacy hexagon payloads keyed by (day, hour)
    - density: heatmap payloads keyed by day, hour, 5-minute bucket and tier

Both are bounded FIFO caches (see paris_traffic.cache).
"""

import logging
from typing import Any, Dict, List, Optional, Union

import numpy as np

from paris_traffic.cache import ResponseCache
from paris_traffic.config import Settings
from paris_traffic.errors import InvalidParameterError, NotFoundError
from paris_traffic.field import (
    DEFAULT_TIER,
    RESOLUTION_TIERS,
    ClusterDensifier,
    DensityFieldGenerator,
    GridRasterizer,
    ScalarFieldEvaluator,
)
from paris_traffic.models.output import (
    AggregateRequest,
    DensityFieldResponse,
    LegacyHexagon,
    TrafficPayload,
    TrafficStats,
)
from paris_traffic.spatial import aggregate, to_geojson
from paris_traffic.traffic import LegacyTrafficGenerator


logger = logging.getLogger(__name__)


CACHE_BUCKET_MINUTES = 5

HOUR_MESSAGE = "Hour must be between 0 and 23"
DAY_MESSAGE = "Day must be between 0 (Sunday) and 6 (Saturday)"
MINUTE_MESSAGE = "Minute must be between 0 and 59"

PARAM_MESSAGES = {
    "hour": HOUR_MESSAGE,
    "day": DAY_MESSAGE,
    "minute": MINUTE_MESSAGE,
}


def validate_time(hour: int, day: int, minute: Optional[int] = None) -> None:
    """
    Check time parameters are in range.

    Raises:
        InvalidParameterError: naming the first offending field
    """
    if not 0 <= hour <= 23:
        raise InvalidParameterError("hour", HOUR_MESSAGE)
    if not 0 <= day <= 6:
        raise InvalidParameterError("day", DAY_MESSAGE)
    if minute is not None and not 0 <= minute <= 59:
        raise InvalidParameterError("minute", MINUTE_MESSAGE)


def cache_bucket(minute: int) -> int:
    """Start minute of the 5-minute bucket containing minute."""
    return (minute // CACHE_BUCKET_MINUTES) * CACHE_BUCKET_MINUTES


class TrafficService:
    """
    Generates and memoizes traffic payloads.

    Attributes:
        density_generator: Heatmap payload generator
        legacy_generator: Hexagon payload generator
        traffic_cache: Cache of legacy payloads
        density_cache: Cache of heatmap payloads
        hex_resolution: Default resolution for ad-hoc aggregation
        default_resolution: Grid tier used when none is requested
    """

    def __init__(
        self,
        density_generator: DensityFieldGenerator,
        legacy_generator: LegacyTrafficGenerator,
        traffic_cache: ResponseCache,
        density_cache: ResponseCache,
        hex_resolution: int = 9,
        default_resolution: str = "high",
    ) -> None:
        self.density_generator = density_generator
        self.legacy_generator = legacy_generator
        self.traffic_cache = traffic_cache
        self.density_cache = density_cache
        self.hex_resolution = hex_resolution
        self.default_resolution = default_resolution

    # -------------------------------------------------------------------------
    # Density field
    # -------------------------------------------------------------------------

    def density(
        self,
        hour: int = 14,
        day: int = 5,
        minute: int = 0,
        resolution: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Heatmap payload for one instant, served from the 5-minute bucket.

        The field is generated at the bucket's start minute; the reply
        echoes the requested minute and reports the bucket as
        actualCacheMinute.
        """
        validate_time(hour, day, minute)

        # Missing -> configured default; unknown name -> high
        tier = resolution if resolution is not None else self.default_resolution
        if tier not in RESOLUTION_TIERS:
            tier = DEFAULT_TIER

        bucket = cache_bucket(minute)
        cache_key = f"density-{day}-{hour}-{bucket}-{tier}"

        payload: Optional[DensityFieldResponse] = self.density_cache.get(cache_key)
        if payload is None:
            payload = self.density_generator.generate(hour, day, bucket, tier)
            self.density_cache.set(cache_key, payload)
        else:
            logger.debug(f"Density cache hit: {cache_key}")

        metadata = payload.metadata.model_copy(
            update={"minute": minute, "actual_cache_minute": bucket}
        )
        return {
            "points": [p.model_dump() for p in payload.points],
            "metadata": metadata.model_dump(by_alias=True, exclude_none=True),
        }

    # -------------------------------------------------------------------------
    # Legacy hexagon traffic
    # -------------------------------------------------------------------------

    def traffic(self, hour: int = 14, day: int = 5) -> TrafficPayload:
        """Legacy payload for one hour, generated once per (day, hour)."""
        validate_time(hour, day)

        cache_key = (day, hour)
        payload = self.traffic_cache.get(cache_key)
        if payload is None:
            payload = self.legacy_generator.generate(hour, day)
            self.traffic_cache.set(cache_key, payload)
        return payload

    def day_traffic(self, day: int = 5) -> Dict[int, TrafficPayload]:
        """Legacy payloads for every hour of a day."""
        validate_time(0, day)
        return {hour: self.traffic(hour, day) for hour in range(24)}

    def hexagon(self, cell_id: str, hour: int = 14, day: int = 5) -> LegacyHexagon:
        """
        One hexagon of the legacy payload.

        Raises:
            NotFoundError: cell id absent from the generated set
        """
        hexagon = self.traffic(hour, day).find(cell_id)
        if hexagon is None:
            raise NotFoundError("Hexagon not found")
        return hexagon

    def stats(self, hour: int = 14, day: int = 5) -> TrafficStats:
        """Summary of the cached legacy payload; never triggers generation."""
        payload: Optional[TrafficPayload] = self.traffic_cache.get((day, hour))
        if payload is None:
            return TrafficStats(cached=False, message="Data not yet generated for this time")

        densities = [h.density for h in payload.hexagons]
        if not densities:
            return TrafficStats(cached=True, hexagon_count=0, hour=hour, day=day)

        return TrafficStats(
            cached=True,
            hexagon_count=len(densities),
            avg_density=sum(densities) / len(densities),
            max_density=max(densities),
            min_density=min(densities),
            hour=hour,
            day=day,
        )

    # -------------------------------------------------------------------------
    # Aggregation and housekeeping
    # -------------------------------------------------------------------------

    def aggregate(
        self,
        request: AggregateRequest,
        resolution: Optional[int] = None,
    ) -> Union[List[Dict[str, Any]], Dict[str, Any]]:
        """Aggregate caller-supplied points into hexagons."""
        res = self.hex_resolution if resolution is None else resolution
        if not 0 <= res <= 15:
            raise InvalidParameterError("resolution", "Resolution must be between 0 and 15")

        hexagons = aggregate(request.points, res)
        if request.geojson:
            return to_geojson(hexagons)
        return [h.to_dict() for h in hexagons]

    def clear_caches(self) -> int:
        """Drop every memoized payload; returns the number of entries removed."""
        return self.traffic_cache.clear() + self.density_cache.clear()

    def metrics(self) -> Dict[str, Any]:
        return {
            "traffic_cache": self.traffic_cache.metrics(),
            "density_cache": self.density_cache.metrics(),
        }


def build_service(settings: Settings) -> TrafficService:
    """Wire a TrafficService from settings."""
    rng = np.random.default_rng(settings.field.seed)

    evaluator = ScalarFieldEvaluator(
        noise_amplitude=settings.field.noise_amplitude,
        rng=rng,
    )
    density_generator = DensityFieldGenerator(
        evaluator=evaluator,
        rasterizer=GridRasterizer(evaluator, threshold=settings.field.grid_threshold),
        densifier=ClusterDensifier(
            evaluator,
            num_rings=settings.field.cluster_rings,
            points_per_ring=settings.field.cluster_points_per_ring,
            threshold=settings.field.cluster_threshold,
        ),
    )
    legacy_generator = LegacyTrafficGenerator(
        resolution=settings.hexagons.resolution,
        ring_size=settings.hexagons.legacy_ring_size,
        rng=rng,
    )

    return TrafficService(
        density_generator=density_generator,
        legacy_generator=legacy_generator,
        traffic_cache=ResponseCache(settings.cache.max_entries, name="traffic"),
        density_cache=ResponseCache(settings.cache.max_entries, name="density"),
        hex_resolution=settings.hexagons.resolution,
        default_resolution=settings.field.default_resolution,
    )
