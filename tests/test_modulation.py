"""
Modulation Table Tests
======================

Hour/day curves, smoothstep interpolation and neutral fallbacks.
"""

import logging

import pytest

from paris_traffic.catalog import (
    BUSY_AREAS,
    DEFAULT_MODULATION,
    LEGACY_MODULATION,
    ModulationTable,
    lerp,
    smoothstep,
)
from paris_traffic.models.poi import Category


class TestSmoothstep:
    """Tests for the easing helpers."""

    def test_endpoints(self):
        assert smoothstep(0.0) == 0.0
        assert smoothstep(1.0) == 1.0
        assert smoothstep(0.5) == pytest.approx(0.5)

    def test_monotonic_on_unit_interval(self):
        values = [smoothstep(i / 100) for i in range(101)]
        assert all(a <= b for a, b in zip(values, values[1:]))

    def test_lerp(self):
        assert lerp(2.0, 4.0, 0.25) == pytest.approx(2.5)


class TestHourMultiplier:
    """Tests for minute-precision hour interpolation."""

    def test_whole_hour_matches_table(self):
        for category in Category:
            for hour in range(24):
                assert DEFAULT_MODULATION.hour_multiplier(category, hour, 0) == pytest.approx(
                    DEFAULT_MODULATION.hour_curves[category][hour]
                )

    @pytest.mark.parametrize("category", list(Category))
    def test_hour_boundary_continuity(self, category):
        """Value just before the hour equals the value at the next hour."""
        for hour in range(24):
            before = DEFAULT_MODULATION.hour_multiplier(category, hour, 59.999)
            after = DEFAULT_MODULATION.hour_multiplier(category, (hour + 1) % 24, 0)
            assert before == pytest.approx(after, abs=1e-6)

    def test_midnight_wraps(self):
        before = DEFAULT_MODULATION.hour_multiplier(Category.NIGHTLIFE, 23, 30)
        low, high = sorted([
            DEFAULT_MODULATION.hour_curves[Category.NIGHTLIFE][23],
            DEFAULT_MODULATION.hour_curves[Category.NIGHTLIFE][0],
        ])
        assert low <= before <= high

    def test_half_hour_is_midpoint(self):
        table = DEFAULT_MODULATION.hour_curves[Category.TOURIST]
        value = DEFAULT_MODULATION.hour_multiplier(Category.TOURIST, 8, 30)
        assert value == pytest.approx((table[8] + table[9]) / 2)


class TestFallbacks:
    """Missing categories degrade to neutral multipliers."""

    def test_unknown_category_defaults(self):
        table = ModulationTable({}, {})
        assert table.hour_multiplier("stadium", 12, 15) == 0.5
        assert table.day_multiplier("stadium", 3) == 1.0

    def test_unknown_category_warns_once(self, caplog):
        table = ModulationTable({}, {})
        with caplog.at_level(logging.WARNING, logger="paris_traffic.catalog.modulation"):
            table.hour_value("stadium", 1)
            table.hour_value("stadium", 2)
        assert len([r for r in caplog.records if "stadium" in r.getMessage()]) == 1

    def test_zero_entry_kept_in_density_table(self):
        assert DEFAULT_MODULATION.hour_value(Category.SHOPPING, 3) == 0.0

    def test_zero_entry_neutral_in_legacy_table(self):
        assert LEGACY_MODULATION.hour_value(Category.SHOPPING, 3) == 0.5

    def test_catalog_categories_covered(self):
        for poi in BUSY_AREAS:
            assert poi.category in DEFAULT_MODULATION.categories

    def test_curve_lengths_validated(self):
        with pytest.raises(ValueError):
            ModulationTable({"x": [1.0] * 23}, {})
        with pytest.raises(ValueError):
            ModulationTable({}, {"x": [1.0] * 6})
