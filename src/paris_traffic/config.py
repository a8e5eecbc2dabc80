"""
Paris Traffic Configuration
===========================

This module handles configuration loading for the traffic density service.

Configuration Sources (in order of precedence):
    1. Environment variables (highest priority)
    2. config.yaml file
    3. Default values (lowest priority)

Environment Variable Mapping:
    PARIS_TRAFFIC_NOISE       -> field.noise_amplitude
    PARIS_TRAFFIC_SEED        -> field.seed
    PARIS_TRAFFIC_RESOLUTION  -> field.default_resolution
    PARIS_TRAFFIC_CACHE_SIZE  -> cache.max_entries
    PARIS_TRAFFIC_PORT        -> server.port
    PARIS_TRAFFIC_LOG_LEVEL   -> logging.level
    MAPBOX_TOKEN              -> mapbox.token
    PORT                      -> server.port (Cloud Run)

Example:
    from paris_traffic.config import settings

    print(settings.service.name)
    print(settings.field.noise_amplitude)
    print(settings.cache.max_entries)
"""

import os
import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field


logger = logging.getLogger(__name__)


# =============================================================================
# Configuration Models
# =============================================================================

class ServiceConfig(BaseModel):
    """Service identification configuration."""

    name: str = Field(default="Paris Traffic API", description="Service name")
    version: str = Field(default="1.0.0", description="API version")


class FieldConfig(BaseModel):
    """Density field synthesis configuration."""

    noise_amplitude: float = Field(
        default=1.0,
        ge=0,
        description="Half-width of the uniform noise band added to each sample",
    )
    seed: Optional[int] = Field(
        default=None,
        description="Seed for the noise source (None = fresh entropy)",
    )
    grid_threshold: float = Field(
        default=3.0,
        ge=0,
        description="Grid samples at or below this density are dropped",
    )
    cluster_threshold: float = Field(
        default=5.0,
        ge=0,
        description="Cluster samples at or below this density are dropped",
    )
    cluster_rings: int = Field(default=6, ge=1, description="Rings per POI")
    cluster_points_per_ring: int = Field(
        default=16,
        ge=1,
        description="Angular samples per ring",
    )
    default_resolution: str = Field(
        default="high",
        description="Grid tier: low, medium, high, ultra or extreme",
    )


class HexagonConfig(BaseModel):
    """Hexagonal index configuration."""

    resolution: int = Field(
        default=9,
        ge=0,
        le=15,
        description="H3 resolution for aggregation and the legacy view",
    )
    legacy_ring_size: int = Field(
        default=20,
        ge=1,
        description="k-ring size around the centre for the legacy view",
    )


class CacheConfig(BaseModel):
    """Response cache configuration."""

    max_entries: int = Field(
        default=500,
        ge=1,
        description="Entries kept per cache before FIFO eviction",
    )


class MapboxConfig(BaseModel):
    """Map renderer configuration handed to the browser."""

    token: Optional[str] = Field(default=None, description="Mapbox access token")


class ServerConfig(BaseModel):
    """Server configuration."""

    host: str = Field(default="0.0.0.0", description="Bind host")
    port: int = Field(default=3000, ge=1, le=65535, description="Bind port")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(default="json", description="Log format: json or text")


class Settings(BaseModel):
    """
    Main settings class for the traffic density service.

    Loads configuration from YAML file and environment variables.
    Environment variables take precedence over file values.
    """

    service: ServiceConfig = Field(default_factory=ServiceConfig)
    field: FieldConfig = Field(default_factory=FieldConfig)
    hexagons: HexagonConfig = Field(default_factory=HexagonConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)
    mapbox: MapboxConfig = Field(default_factory=MapboxConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# =============================================================================
# Configuration Loading
# =============================================================================

def load_config(config_path: Optional[str] = None) -> Settings:
    """
    Load configuration from YAML file and environment variables.

    Priority (highest to lowest):
        1. Environment variables
        2. YAML config file
        3. Default values

    Args:
        config_path: Path to config.yaml. If None, searches common locations.

    Returns:
        Settings: Loaded configuration
    """
    # Find config file
    if config_path is None:
        search_paths = [
            Path("config.yaml"),
            Path("config.yml"),
            Path("/app/config.yaml"),
            Path(__file__).parent.parent.parent / "config.yaml",
        ]
        for path in search_paths:
            if path.exists():
                config_path = str(path)
                break

    # Load from YAML if exists
    config_data = {}
    if config_path and Path(config_path).exists():
        logger.info(f"Loading config from: {config_path}")
        with open(config_path, "r") as f:
            config_data = yaml.safe_load(f) or {}
    else:
        logger.warning("No config file found, using defaults and environment variables")

    # Apply environment variable overrides
    _apply_env_overrides(config_data)

    # Build settings object
    settings = Settings.model_validate(config_data)

    return settings


def _apply_env_overrides(config_data: dict) -> None:
    """Apply environment variable overrides to config data."""

    # Field settings
    if env_noise := os.environ.get("PARIS_TRAFFIC_NOISE"):
        config_data.setdefault("field", {})["noise_amplitude"] = float(env_noise)
    if env_seed := os.environ.get("PARIS_TRAFFIC_SEED"):
        config_data.setdefault("field", {})["seed"] = int(env_seed)
    if env_res := os.environ.get("PARIS_TRAFFIC_RESOLUTION"):
        config_data.setdefault("field", {})["default_resolution"] = env_res

    # Cache settings
    if env_cache := os.environ.get("PARIS_TRAFFIC_CACHE_SIZE"):
        config_data.setdefault("cache", {})["max_entries"] = int(env_cache)

    # Map renderer token (kept out of config files)
    if env_token := os.environ.get("MAPBOX_TOKEN"):
        config_data.setdefault("mapbox", {})["token"] = env_token

    # Server settings (Cloud Run uses PORT env var)
    if env_port := os.environ.get("PORT"):
        config_data.setdefault("server", {})["port"] = int(env_port)
    elif env_port := os.environ.get("PARIS_TRAFFIC_PORT"):
        config_data.setdefault("server", {})["port"] = int(env_port)

    # Logging settings
    if env_log := os.environ.get("PARIS_TRAFFIC_LOG_LEVEL"):
        config_data.setdefault("logging", {})["level"] = env_log


def setup_logging(settings: Settings) -> None:
    """Configure logging based on settings."""
    log_level = getattr(logging, settings.logging.level.upper(), logging.INFO)

    if settings.logging.format == "json":
        log_format = '{"time": "%(asctime)s", "level": "%(levelname)s", "module": "%(name)s", "message": "%(message)s"}'
    else:
        log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt="%Y-%m-%dT%H:%M:%S",
    )


# =============================================================================
# Global Settings Instance
# =============================================================================

# Global settings instance - loaded on import
settings = load_config()
setup_logging(settings)
