"""
Color Scale Tests
=================
"""

import pytest

from paris_traffic.observability import (
    COLOR_STOPS,
    density_to_color,
    density_to_css_color,
    density_to_elevation,
    lerp_color,
)


class TestDensityToColor:
    """Tests for the heatmap palette."""

    @pytest.mark.parametrize("value,color", COLOR_STOPS)
    def test_stops_exact(self, value, color):
        assert density_to_color(value) == list(color)

    def test_interpolates_between_stops(self):
        # Halfway between 0 and 25
        assert density_to_color(12.5) == lerp_color(COLOR_STOPS[0][1], COLOR_STOPS[1][1], 0.5)

    def test_clamps_out_of_range(self):
        assert density_to_color(-20) == density_to_color(0)
        assert density_to_color(250) == density_to_color(100)

    def test_alpha_clamped(self):
        assert density_to_color(50, opacity_multiplier=0.1)[3] == 40
        assert density_to_color(50, opacity_multiplier=5.0)[3] == 200

    def test_lerp_rounds_half_up(self):
        assert lerp_color([0, 0, 0, 0], [1, 3, 5, 7], 0.5) == [1, 2, 3, 4]

    def test_css_color(self):
        assert density_to_css_color(100) == f"rgba(239, 68, 68, {200 / 255})"


class TestDensityToElevation:
    """Tests for column heights."""

    def test_endpoints(self):
        assert density_to_elevation(0) == 0.0
        assert density_to_elevation(100) == pytest.approx(600.0)

    def test_multiplier(self):
        assert density_to_elevation(100, multiplier=2) == pytest.approx(1200.0)

    def test_monotonic(self):
        heights = [density_to_elevation(d) for d in range(0, 101, 10)]
        assert heights == sorted(heights)
