"""
Hex Aggregator
==============

Buckets arbitrary point sets into hexagonal cells.

Algorithm (two passes):
    1. Bucket: map each point to its cell, counting points and summing
       values (a missing or zero value counts as 1)
    2. Normalize: density = 100 × total_value / max total_value

Normalization is relative to the current batch only. An empty batch has no
maximum and yields an empty result. A batch whose largest total is not
positive (values supplied directly, bypassing the API model) has no
meaningful scale and every cell gets density 0.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Union

from paris_traffic.models.hexagon import Hexagon
from paris_traffic.spatial import hex_index
from paris_traffic.spatial.hex_index import DEFAULT_RESOLUTION


logger = logging.getLogger(__name__)


PointLike = Union[Mapping[str, Any], Any]


@dataclass
class _Bucket:
    point_count: int = 0
    total_value: float = 0.0


def _field(point: PointLike, name: str) -> Any:
    if isinstance(point, Mapping):
        return point.get(name)
    return getattr(point, name, None)


def aggregate(
    points: Iterable[PointLike],
    resolution: int = DEFAULT_RESOLUTION,
) -> List[Hexagon]:
    """
    Aggregate points into hexagons.

    Args:
        points: Mappings or objects with lat, lng and optional value
        resolution: H3 resolution (0-15)

    Returns:
        One Hexagon per occupied cell, in first-seen order
    """
    buckets: Dict[str, _Bucket] = {}

    for point in points:
        cell = hex_index.point_to_cell(_field(point, "lat"), _field(point, "lng"), resolution)
        bucket = buckets.setdefault(cell, _Bucket())
        bucket.point_count += 1
        bucket.total_value += _field(point, "value") or 1

    if not buckets:
        return []

    max_value = max(b.total_value for b in buckets.values())

    hexagons = []
    for cell, bucket in buckets.items():
        lat, lng = hex_index.cell_center(cell)
        hexagons.append(
            Hexagon(
                cell_id=cell,
                center=(lng, lat),
                boundary=[(v_lng, v_lat) for v_lat, v_lng in hex_index.cell_boundary(cell)],
                point_count=bucket.point_count,
                total_value=bucket.total_value,
                density=(bucket.total_value / max_value) * 100 if max_value > 0 else 0.0,
            )
        )

    logger.debug(f"Aggregated into {len(hexagons)} cells at resolution {resolution}")
    return hexagons


def to_geojson(hexagons: Iterable[Hexagon]) -> Dict[str, Any]:
    """
    Serialize hexagons as a GeoJSON FeatureCollection.

    Each ring repeats its first vertex at the end to close the polygon.
    """
    features = []
    for hexagon in hexagons:
        ring = [list(v) for v in hexagon.boundary]
        if ring:
            ring.append(list(hexagon.boundary[0]))

        features.append({
            "type": "Feature",
            "properties": {
                "cellId": hexagon.cell_id,
                "density": hexagon.density,
                "pointCount": hexagon.point_count,
                "totalValue": hexagon.total_value,
            },
            "geometry": {
                "type": "Polygon",
                "coordinates": [ring],
            },
        })

    return {"type": "FeatureCollection", "features": features}
