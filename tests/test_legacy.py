"""
Legacy Traffic Tests
====================

Hexagon snapshots with hotspot labels.
"""

import numpy as np
import pytest

from paris_traffic.catalog import LEGACY_BOUNDS, LEGACY_HOTSPOTS
from paris_traffic.spatial import hex_index
from paris_traffic.traffic import LegacyTrafficGenerator, euclidean_distance


EIFFEL = (48.8584, 2.2945)


@pytest.fixture
def generator():
    """Small, seeded generator centred on the Eiffel Tower."""
    return LegacyTrafficGenerator(ring_size=3, center=EIFFEL, rng=np.random.default_rng(3))


class TestLegacyTrafficGenerator:
    """Tests for LegacyTrafficGenerator."""

    def test_payload_shape(self, generator):
        payload = generator.generate(hour=14, day=5)

        assert payload.metadata.hexagon_count == len(payload.hexagons) == 37
        assert payload.metadata.day_name == "Vendredi"
        assert payload.metadata.resolution == 9

    def test_density_range(self, generator):
        for hour in (3, 9, 14, 22):
            for hexagon in generator.generate(hour, 0).hexagons:
                assert 0.0 <= hexagon.density <= 100.0

    def test_zone_labels(self):
        generator = LegacyTrafficGenerator(
            hotspots=[LEGACY_HOTSPOTS[0]],
            ring_size=1,
            center=EIFFEL,
            rng=np.random.default_rng(3),
        )
        payload = generator.generate(14, 5)
        centre_cell = hex_index.point_to_cell(*EIFFEL, 9)

        hexagon = payload.find(centre_cell)
        assert hexagon is not None
        assert hexagon.zone_name == "Tour Eiffel"
        assert hexagon.zone_type == "tourist"

    def test_general_zone_far_from_hotspots(self):
        generator = LegacyTrafficGenerator(
            ring_size=0,
            center=(48.81, 2.21),
            rng=np.random.default_rng(0),
        )
        hexagon = generator.generate(12, 2).hexagons[0]

        assert hexagon.zone_type == "general"
        assert hexagon.zone_name == f"Zone {hexagon.h3_index[:8]}"

    def test_cells_inside_bounds(self):
        generator = LegacyTrafficGenerator(
            ring_size=4,
            center=(48.80, 2.20),
            rng=np.random.default_rng(0),
        )
        for hexagon in generator.generate(12, 2).hexagons:
            lng, lat = hexagon.center
            assert LEGACY_BOUNDS.contains(lat, lng)

    def test_baseline_without_hotspots(self):
        generator = LegacyTrafficGenerator(hotspots=[], rng=np.random.default_rng(0))
        density = generator.cell_density(48.85, 2.35, 12, 3)
        assert 5.0 <= density < 15.0

    def test_find_missing(self, generator):
        assert generator.generate(14, 5).find("nonexistent") is None

    def test_generate_day(self):
        generator = LegacyTrafficGenerator(ring_size=1, rng=np.random.default_rng(0))
        day = generator.generate_day(6)
        assert sorted(day) == list(range(24))
        assert all(p.metadata.day == 6 for p in day.values())

    def test_serialized_aliases(self, generator):
        record = generator.generate(14, 5).hexagons[0].model_dump(by_alias=True)
        assert set(record) == {"h3Index", "center", "boundary", "density", "zoneName", "zoneType"}


def test_euclidean_distance():
    assert euclidean_distance(0.0, 0.0, 3.0, 4.0) == pytest.approx(5.0)
