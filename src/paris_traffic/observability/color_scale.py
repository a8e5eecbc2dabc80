"""
Color Scale
===========

Maps density values (0-100) to display colours for the heatmap legend.

Palette (RGBA):
    0   blue     (59, 130, 246, 140)
    25  emerald  (16, 185, 129, 155)
    50  green    (34, 197, 94, 170)
    65  amber    (245, 158, 11, 180)
    80  orange   (249, 115, 22, 190)
    100 red      (239, 68, 68, 200)

PURELY DESCRIPTIVE. Nothing here feeds back into the density model.
"""

from typing import List, Sequence, Tuple


COLOR_STOPS: Tuple[Tuple[float, Tuple[int, int, int, int]], ...] = (
    (0, (59, 130, 246, 140)),
    (25, (16, 185, 129, 155)),
    (50, (34, 197, 94, 170)),
    (65, (245, 158, 11, 180)),
    (80, (249, 115, 22, 190)),
    (100, (239, 68, 68, 200)),
)

MIN_ALPHA = 40
MAX_ALPHA = 200
MAX_ELEVATION = 600


def _round_half_up(value: float) -> int:
    # Matches the rounding of the browser layer
    return int(value + 0.5) if value >= 0 else -int(-value + 0.5)


def lerp_color(color1: Sequence[int], color2: Sequence[int], t: float) -> List[int]:
    """Channel-wise interpolation, rounded to integers."""
    return [_round_half_up(a + (b - a) * t) for a, b in zip(color1, color2)]


def density_to_color(density: float, opacity_multiplier: float = 1.0) -> List[int]:
    """
    RGBA colour for a density value.

    Args:
        density: Value, clamped to [0, 100]
        opacity_multiplier: Scales alpha, result clamped to [40, 200]

    Returns:
        [r, g, b, a]
    """
    value = max(0.0, min(100.0, density))

    lower, upper = COLOR_STOPS[0], COLOR_STOPS[-1]
    for i in range(len(COLOR_STOPS) - 1):
        if COLOR_STOPS[i][0] <= value <= COLOR_STOPS[i + 1][0]:
            lower, upper = COLOR_STOPS[i], COLOR_STOPS[i + 1]
            break

    span = upper[0] - lower[0]
    t = 0.0 if span == 0 else (value - lower[0]) / span

    color = lerp_color(lower[1], upper[1], t)
    color[3] = _round_half_up(min(MAX_ALPHA, max(MIN_ALPHA, color[3] * opacity_multiplier)))

    return color


def density_to_elevation(density: float, multiplier: float = 1.0) -> float:
    """Column height; eased so high densities stand out less abruptly."""
    normalized = max(0.0, density) / 100
    return (normalized ** 0.7) * MAX_ELEVATION * multiplier


def density_to_css_color(density: float) -> str:
    """CSS rgba() string for a density value."""
    r, g, b, a = density_to_color(density)
    return f"rgba({r}, {g}, {b}, {a / 255})"
