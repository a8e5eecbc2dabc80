"""
Test Configuration
==================

Pytest fixtures and test configuration for the Paris traffic service.
"""

import numpy as np
import pytest


@pytest.fixture
def quiet_evaluator():
    """Field evaluator with the noise term switched off."""
    from paris_traffic.field import ScalarFieldEvaluator

    return ScalarFieldEvaluator(noise_amplitude=0.0)


@pytest.fixture
def seeded_evaluator():
    """Field evaluator with reproducible noise."""
    from paris_traffic.field import ScalarFieldEvaluator

    return ScalarFieldEvaluator(rng=np.random.default_rng(1234))


@pytest.fixture
def eiffel_tower():
    """The highest-intensity point of interest in the catalog."""
    from paris_traffic.catalog import BUSY_AREAS

    return next(p for p in BUSY_AREAS if p.name == "Tour Eiffel")


@pytest.fixture
def test_settings():
    """Settings with seeded noise, a small legacy ring and a small cache."""
    from paris_traffic.config import CacheConfig, FieldConfig, HexagonConfig, Settings

    return Settings(
        field=FieldConfig(seed=42, default_resolution="low"),
        hexagons=HexagonConfig(legacy_ring_size=5),
        cache=CacheConfig(max_entries=10),
    )


@pytest.fixture
def client(test_settings):
    """HTTP client bound to a freshly built application."""
    from fastapi.testclient import TestClient

    from paris_traffic.main import create_app

    app = create_app(test_settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sample_points():
    """Points clustered around two landmarks, weighted by value."""
    return [
        {"lat": 48.8584, "lng": 2.2945, "value": 10},
        {"lat": 48.8584, "lng": 2.2945, "value": 5},
        {"lat": 48.8584, "lng": 2.2945},
        {"lat": 48.8606, "lng": 2.3376, "value": 4},
        {"lat": 48.8809, "lng": 2.3553, "value": 1},
    ]
