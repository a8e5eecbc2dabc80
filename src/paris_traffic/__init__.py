"""
Paris Traffic
=============

Synthetic foot-traffic density field for Paris, served over HTTP.

This package synthesizes a smoothly varying density field from a catalog
of points of interest modulated by hour-of-day and day-of-week curves,
samples it on a jittered grid plus rings around each hotspot, and
aggregates point sets into hexagonal cells.

Components:
    - catalog: Points of interest and temporal modulation curves
    - field: Field evaluator, grid rasterizer, cluster densifier
    - spatial: H3 indexing and hexagon aggregation
    - traffic: Legacy hexagon-per-cell snapshots
    - cache: Bounded FIFO response cache
    - observability: Heatmap colour scale

Example:
    from paris_traffic.field import DensityFieldGenerator

    payload = DensityFieldGenerator().generate(hour=18, day=5, resolution="low")
    print(payload.metadata.total_points)

    # The HTTP service is started via the FastAPI application
    # See main.py for entry point
"""

__version__ = "1.0.0"
__author__ = "Paris Traffic Project"

__all__ = [
    "__version__",
]
