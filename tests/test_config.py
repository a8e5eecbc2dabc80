"""
Configuration Tests
===================

YAML loading and environment overrides.
"""

import pytest
from pydantic import ValidationError

from paris_traffic.config import FieldConfig, Settings, load_config


ENV_VARS = [
    "PARIS_TRAFFIC_NOISE",
    "PARIS_TRAFFIC_SEED",
    "PARIS_TRAFFIC_RESOLUTION",
    "PARIS_TRAFFIC_CACHE_SIZE",
    "PARIS_TRAFFIC_PORT",
    "PARIS_TRAFFIC_LOG_LEVEL",
    "MAPBOX_TOKEN",
    "PORT",
]


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "field:\n"
        "  noise_amplitude: 0.5\n"
        "  default_resolution: medium\n"
        "cache:\n"
        "  max_entries: 50\n"
        "server:\n"
        "  port: 8080\n"
    )
    return path


class TestSettings:
    """Tests for defaults and validation."""

    def test_defaults(self):
        settings = Settings()
        assert settings.field.noise_amplitude == 1.0
        assert settings.field.seed is None
        assert settings.field.default_resolution == "high"
        assert settings.hexagons.resolution == 9
        assert settings.cache.max_entries == 500
        assert settings.server.port == 3000
        assert settings.mapbox.token is None

    def test_negative_noise_rejected(self):
        with pytest.raises(ValidationError):
            FieldConfig(noise_amplitude=-1)


class TestLoadConfig:
    """Tests for load_config()."""

    def test_yaml_values(self, clean_env, config_file):
        settings = load_config(str(config_file))
        assert settings.field.noise_amplitude == 0.5
        assert settings.field.default_resolution == "medium"
        assert settings.cache.max_entries == 50
        assert settings.server.port == 8080

    def test_env_overrides_yaml(self, clean_env, config_file):
        clean_env.setenv("PARIS_TRAFFIC_NOISE", "0")
        clean_env.setenv("PARIS_TRAFFIC_SEED", "7")
        clean_env.setenv("PARIS_TRAFFIC_CACHE_SIZE", "25")
        clean_env.setenv("MAPBOX_TOKEN", "pk.test")

        settings = load_config(str(config_file))
        assert settings.field.noise_amplitude == 0.0
        assert settings.field.seed == 7
        assert settings.cache.max_entries == 25
        assert settings.mapbox.token == "pk.test"

    def test_port_precedence(self, clean_env, config_file):
        clean_env.setenv("PARIS_TRAFFIC_PORT", "9000")
        assert load_config(str(config_file)).server.port == 9000

        clean_env.setenv("PORT", "9100")
        assert load_config(str(config_file)).server.port == 9100

    def test_missing_file_uses_defaults(self, clean_env, tmp_path):
        settings = load_config(str(tmp_path / "absent.yaml"))
        assert settings.cache.max_entries == 500
