"""
Observability Module
====================

Display helpers for the density service.

This module provides:
    - color_scale: density -> RGBA, elevation and CSS colour

DESIGN RULES:
    - Does NOT import the field engine
    - Does NOT influence generated densities
"""

from paris_traffic.observability.color_scale import (
    COLOR_STOPS,
    density_to_color,
    density_to_css_color,
    density_to_elevation,
    lerp_color,
)


__all__ = [
    "COLOR_STOPS",
    "density_to_color",
    "density_to_css_color",
    "density_to_elevation",
    "lerp_color",
]
