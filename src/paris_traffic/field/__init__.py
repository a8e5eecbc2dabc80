"""
Field Module
============

Density field synthesis engine.

Components:
    - ScalarFieldEvaluator: Closed-form density at any position and time
    - GridRasterizer: Jittered lattice sampling over the area bounds
    - ClusterDensifier: Ring sampling around points of interest
    - DensityFieldGenerator: Combines both samplers into one payload
"""

from paris_traffic.field.evaluator import (
    DensitySource,
    ScalarFieldEvaluator,
    gaussian_falloff,
    planar_distance,
)
from paris_traffic.field.rasterizer import (
    DEFAULT_TIER,
    RESOLUTION_TIERS,
    GridRasterizer,
    GridStep,
    LinearCongruentialGenerator,
    jitter_seed,
    resolve_tier,
)
from paris_traffic.field.densifier import ClusterDensifier, ring_jitter_seed
from paris_traffic.field.generator import DensityFieldGenerator

__all__ = [
    "DensitySource",
    "ScalarFieldEvaluator",
    "gaussian_falloff",
    "planar_distance",
    "DEFAULT_TIER",
    "RESOLUTION_TIERS",
    "GridRasterizer",
    "GridStep",
    "LinearCongruentialGenerator",
    "jitter_seed",
    "resolve_tier",
    "ClusterDensifier",
    "ring_jitter_seed",
    "DensityFieldGenerator",
]
