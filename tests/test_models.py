"""
Model Tests
===========

Records, summaries and wire contracts.
"""

import re

import pytest


class TestPointOfInterest:
    """Tests for catalog records."""

    def test_catalog_valid(self):
        """Every catalog entry has a positive spread and bounded intensity."""
        from paris_traffic.catalog import BUSY_AREAS, LEGACY_HOTSPOTS

        for poi in BUSY_AREAS + LEGACY_HOTSPOTS:
            assert poi.spatial_spread > 0
            assert 0 <= poi.base_intensity <= 100

    def test_zero_spread_rejected(self):
        """A zero spread would divide by zero in the kernel."""
        from paris_traffic.models.poi import Category, PointOfInterest

        with pytest.raises(ValueError):
            PointOfInterest("Bad", 48.85, 2.35, Category.PARK, 50, 0.0)

    def test_intensity_range(self):
        """Intensity above 100 is rejected."""
        from paris_traffic.models.poi import Category, PointOfInterest

        with pytest.raises(ValueError):
            PointOfInterest("Bad", 48.85, 2.35, Category.PARK, 120, 0.01)

    def test_bounds_contains(self):
        """Bounds are inclusive on every edge."""
        from paris_traffic.catalog import PARIS_BOUNDS

        assert PARIS_BOUNDS.contains(48.8566, 2.3522)
        assert PARIS_BOUNDS.contains(PARIS_BOUNDS.min_lat, PARIS_BOUNDS.max_lng)
        assert not PARIS_BOUNDS.contains(48.95, 2.35)


class TestDensityModels:
    """Tests for samples and their summary."""

    def test_sample_point(self):
        """Position is (lng, lat) and weight is density / 100."""
        from paris_traffic.models.density import SamplePoint

        point = SamplePoint(lat=48.85, lng=2.35, density=42.0)
        assert point.position == (2.35, 48.85)
        assert point.weight == pytest.approx(0.42)
        assert point.to_dict()["position"] == [2.35, 48.85]

    def test_summary_rounds(self):
        """Statistics are rounded to integers."""
        from paris_traffic.models.density import DensitySummary, SamplePoint

        points = [
            SamplePoint(48.85, 2.35, 10.2),
            SamplePoint(48.85, 2.35, 20.6),
            SamplePoint(48.85, 2.35, 30.1),
        ]
        summary = DensitySummary.from_points(points)
        assert summary.total_points == 3
        assert summary.avg_density == 20
        assert summary.max_density == 30
        assert summary.min_density == 10

    def test_summary_rounds_halves_up(self):
        """2.5 rounds to 3, not to the nearest even integer."""
        from paris_traffic.models.density import DensitySummary, SamplePoint, round_half_up

        points = [
            SamplePoint(48.85, 2.35, 0.5),
            SamplePoint(48.85, 2.35, 2.5),
            SamplePoint(48.85, 2.35, 4.5),
        ]
        summary = DensitySummary.from_points(points)
        assert summary.avg_density == 3
        assert summary.max_density == 5
        assert summary.min_density == 1
        assert round_half_up(3.49) == 3

    def test_empty_summary(self):
        """No points summarize to zeros rather than failing."""
        from paris_traffic.models.density import DensitySummary

        summary = DensitySummary.from_points([])
        assert summary.total_points == 0
        assert summary.max_density == 0


class TestOutputContracts:
    """Tests for serialized payloads."""

    def test_density_payload_aliases(self):
        """Metadata serializes to camelCase and omits an unset cache minute."""
        from paris_traffic.models.density import SamplePoint
        from paris_traffic.models.output import DensityFieldResponse

        payload = DensityFieldResponse.build(
            [SamplePoint(48.85, 2.35, 50.0)], hour=8, day=1, minute=15
        )
        metadata = payload.metadata.model_dump(by_alias=True, exclude_none=True)

        assert metadata["dayName"] == "Lundi"
        assert metadata["totalPoints"] == 1
        assert "actualCacheMinute" not in metadata

    def test_empty_density_payload(self):
        from paris_traffic.models.output import DensityFieldResponse

        payload = DensityFieldResponse.build([], hour=3, day=0, minute=0)
        assert payload.points == []
        assert payload.metadata.avg_density == 0

    def test_timestamp_format(self):
        """ISO-8601 UTC with milliseconds and a Z suffix."""
        from paris_traffic.models.output import utc_timestamp

        assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", utc_timestamp())

    def test_aggregate_request_defaults(self):
        from paris_traffic.models.output import AggregateRequest

        request = AggregateRequest.model_validate({"points": [{"lat": 48.85, "lng": 2.35}]})
        assert request.geojson is False
        assert request.points[0].value is None
