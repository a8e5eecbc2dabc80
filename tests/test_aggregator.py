"""
Hex Aggregator Tests
====================

Cell bucketing, batch normalization and GeoJSON export.
"""

import pytest

from paris_traffic.catalog import MAP_BOUNDS
from paris_traffic.models.output import AggregatePoint
from paris_traffic.spatial import aggregate, hex_index, to_geojson


class TestAggregate:
    """Tests for aggregate()."""

    def test_empty_input(self):
        assert aggregate([]) == []

    def test_bucketing_and_normalization(self, sample_points):
        hexagons = aggregate(sample_points, resolution=9)
        by_cell = {h.cell_id: h for h in hexagons}

        eiffel = by_cell[hex_index.point_to_cell(48.8584, 2.2945, 9)]
        louvre = by_cell[hex_index.point_to_cell(48.8606, 2.3376, 9)]
        gare = by_cell[hex_index.point_to_cell(48.8809, 2.3553, 9)]

        assert len(hexagons) == 3
        assert eiffel.point_count == 3
        # 10 + 5 + default 1
        assert eiffel.total_value == 16
        assert eiffel.density == pytest.approx(100.0)
        assert louvre.density == pytest.approx(25.0)
        assert gare.density == pytest.approx(6.25)

    def test_max_density_is_hundred(self, sample_points):
        densities = [h.density for h in aggregate(sample_points)]
        assert max(densities) == pytest.approx(100.0)
        assert all(0 < d <= 100 for d in densities)

    def test_zero_value_counts_as_one(self):
        hexagons = aggregate([{"lat": 48.85, "lng": 2.35, "value": 0}])
        assert hexagons[0].total_value == 1

    def test_cancelling_values_yield_zero_density(self):
        points = [
            {"lat": 48.8584, "lng": 2.2945, "value": 1},
            {"lat": 48.8584, "lng": 2.2945, "value": -1},
        ]
        hexagons = aggregate(points)

        assert len(hexagons) == 1
        assert hexagons[0].total_value == 0
        assert hexagons[0].density == 0.0

    def test_negative_batch_stays_bounded(self):
        points = [
            {"lat": 48.8584, "lng": 2.2945, "value": -1},
            {"lat": 48.8606, "lng": 2.3376, "value": -2},
        ]
        densities = [h.density for h in aggregate(points)]

        assert densities == [0.0, 0.0]
        assert all(d <= 100 for d in densities)

    def test_negative_value_rejected_by_request_model(self):
        from pydantic import ValidationError

        with pytest.raises(ValidationError):
            AggregatePoint(lat=48.85, lng=2.35, value=-1)

    def test_accepts_objects(self):
        points = [AggregatePoint(lat=48.85, lng=2.35, value=3)]
        hexagons = aggregate(points)
        assert hexagons[0].total_value == 3

    def test_first_seen_order(self, sample_points):
        cells = [h.cell_id for h in aggregate(sample_points)]
        assert cells[0] == hex_index.point_to_cell(48.8584, 2.2945, 9)

    def test_coordinates_in_map_order(self):
        hexagon = aggregate([{"lat": 48.8584, "lng": 2.2945}])[0]
        lng, lat = hexagon.center
        assert lat == pytest.approx(48.8584, abs=0.005)
        assert lng == pytest.approx(2.2945, abs=0.005)
        assert len(hexagon.boundary) == 6

    def test_to_dict_keys(self, sample_points):
        record = aggregate(sample_points)[0].to_dict()
        assert set(record) == {"cellId", "center", "boundary", "pointCount", "totalValue", "density"}


class TestGeoJson:
    """Tests for to_geojson()."""

    def test_rings_are_closed(self, sample_points):
        collection = to_geojson(aggregate(sample_points))

        assert collection["type"] == "FeatureCollection"
        assert len(collection["features"]) == 3
        for feature in collection["features"]:
            ring = feature["geometry"]["coordinates"][0]
            assert ring[0] == ring[-1]
            assert len(ring) == 7

    def test_properties(self, sample_points):
        feature = to_geojson(aggregate(sample_points))["features"][0]
        assert feature["properties"]["pointCount"] == 3
        assert feature["properties"]["density"] == pytest.approx(100.0)

    def test_empty_collection(self):
        assert to_geojson([]) == {"type": "FeatureCollection", "features": []}


class TestHexIndex:
    """Tests for the spatial index wrapper."""

    def test_cell_round_trip(self):
        cell = hex_index.point_to_cell(48.8566, 2.3522)
        assert hex_index.is_valid_cell(cell)
        lat, lng = hex_index.cell_center(cell)
        assert hex_index.point_to_cell(lat, lng) == cell

    def test_invalid_cell(self):
        assert not hex_index.is_valid_cell("nonexistent")

    def test_ring_size(self):
        assert len(hex_index.cell_ring(48.8566, 2.3522, ring_size=2)) == 19

    def test_neighbors_exclude_self(self):
        cell = hex_index.point_to_cell(48.8566, 2.3522)
        neighbors = hex_index.neighbors(cell)
        assert len(neighbors) == 6
        assert cell not in neighbors

    def test_cells_in_bounds(self):
        cells = hex_index.cells_in_bounds(MAP_BOUNDS, resolution=7)
        assert cells
        for cell in cells:
            lat, lng = hex_index.cell_center(cell)
            assert MAP_BOUNDS.contains(lat, lng)

    def test_cell_area(self):
        cell = hex_index.point_to_cell(48.8566, 2.3522, 9)
        assert 50_000 < hex_index.cell_area_m2(cell) < 200_000

    def test_resolution_info(self):
        assert hex_index.resolution_info(9)["edgeLength"] == "174 m"
        assert hex_index.resolution_info(3)["area"] == "Unknown"
