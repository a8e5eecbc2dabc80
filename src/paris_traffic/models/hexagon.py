"""
Hexagon Models
==============

Output records of the hexagonal aggregator.
"""

from dataclasses import dataclass
from typing import List, Tuple


@dataclass(frozen=True, slots=True)
class Hexagon:
    """
    Aggregated statistics for one spatial-index cell.

    Density is normalized against the largest total value of the
    aggregation call that produced it, so it is only comparable to
    hexagons from the same batch.

    Attributes:
        cell_id: Spatial-index cell identifier
        center: Cell centre as (lng, lat)
        boundary: Cell vertices as (lng, lat), not closed
        point_count: Number of input points that fell in the cell
        total_value: Sum of input point values
        density: 100 * total_value / batch maximum
    """

    cell_id: str
    center: Tuple[float, float]
    boundary: List[Tuple[float, float]]
    point_count: int
    total_value: float
    density: float

    def to_dict(self) -> dict:
        """Export using the field names the map layer consumes."""
        return {
            "cellId": self.cell_id,
            "center": list(self.center),
            "boundary": [list(v) for v in self.boundary],
            "pointCount": self.point_count,
            "totalValue": self.total_value,
            "density": self.density,
        }
