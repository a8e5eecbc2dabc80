"""
Paris Traffic API Main Application
==================================

FastAPI entry point for the foot-traffic density service.

Endpoints:
    GET  /api/health                   - Liveness probe
    GET  /api/config                   - Browser configuration (map token)
    GET  /api/metrics                  - Cache metrics
    GET  /api/traffic                  - Legacy hexagon payload for one hour
    GET  /api/traffic/all              - Legacy payloads for all 24 hours
    GET  /api/traffic/density          - Dense heatmap point cloud
    GET  /api/traffic/hexagon/{id}     - One legacy hexagon
    GET  /api/traffic/stats            - Summary of a cached legacy payload
    GET  /api/traffic/legend           - Heatmap colour stops
    POST /api/traffic/aggregate        - Aggregate points into hexagons
    POST /api/traffic/clear-cache      - Drop memoized payloads
"""

import logging
import time
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import APIRouter, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from paris_traffic.config import Settings, settings
from paris_traffic.errors import TrafficAPIError
from paris_traffic.models.output import AggregateRequest, ColorStop, Legend, utc_timestamp
from paris_traffic.observability import (
    COLOR_STOPS,
    density_to_css_color,
)
from paris_traffic.service import PARAM_MESSAGES, TrafficService, build_service


logger = logging.getLogger(__name__)


# =============================================================================
# Dependencies
# =============================================================================

def get_service(request: Request) -> TrafficService:
    return request.app.state.service


# =============================================================================
# Traffic Routes
# =============================================================================

router = APIRouter(prefix="/api/traffic")


@router.get("")
def traffic(request: Request, hour: int = 14, day: int = 5) -> JSONResponse:
    """Legacy hexagon payload for one hour of one day."""
    try:
        payload = get_service(request).traffic(hour, day)
    except TrafficAPIError:
        raise
    except Exception:
        logger.exception("Error generating traffic data")
        return JSONResponse({"error": "Failed to generate traffic data"}, status_code=500)

    return JSONResponse(payload.model_dump(by_alias=True))


@router.get("/all")
def traffic_all(request: Request, day: int = 5) -> JSONResponse:
    """Legacy payloads for every hour of a day, keyed by hour."""
    service = get_service(request)
    try:
        day_data = service.day_traffic(day)
    except TrafficAPIError:
        raise
    except Exception:
        logger.exception("Error generating all traffic data")
        return JSONResponse({"error": "Failed to generate traffic data"}, status_code=500)

    return JSONResponse({
        str(hour): payload.model_dump(by_alias=True)
        for hour, payload in day_data.items()
    })


@router.get("/density")
def density(
    request: Request,
    hour: int = 14,
    day: int = 5,
    minute: int = 0,
    resolution: Optional[str] = None,
) -> JSONResponse:
    """
    Dense heatmap point cloud with minute precision.

    Payloads are memoized per 5-minute bucket.
    """
    service = get_service(request)
    try:
        payload = service.density(hour, day, minute, resolution)
    except TrafficAPIError:
        raise
    except Exception:
        logger.exception("Error generating density data")
        return JSONResponse({"error": "Failed to generate density data"}, status_code=500)

    return JSONResponse(payload)


@router.get("/hexagon/{cell_id}")
def hexagon(request: Request, cell_id: str, hour: int = 14, day: int = 5) -> JSONResponse:
    """One hexagon of the legacy payload, 404 when absent."""
    found = get_service(request).hexagon(cell_id, hour, day)
    return JSONResponse(found.model_dump(by_alias=True))


@router.get("/stats")
async def stats(request: Request, hour: int = 14, day: int = 5) -> JSONResponse:
    """Summary of the cached legacy payload for one hour."""
    summary = get_service(request).stats(hour, day)
    return JSONResponse(summary.model_dump(by_alias=True, exclude_none=True))


@router.get("/legend")
async def legend() -> JSONResponse:
    """Heatmap colour stops for the map legend."""
    payload = Legend(
        stops=[ColorStop(value=value, color=list(color)) for value, color in COLOR_STOPS],
        css={str(value): density_to_css_color(value) for value, _ in COLOR_STOPS},
    )
    return JSONResponse(payload.model_dump())


@router.post("/aggregate")
def aggregate_points(
    request: Request,
    body: AggregateRequest,
    resolution: Optional[int] = None,
) -> JSONResponse:
    """Aggregate caller-supplied points into normalized hexagons."""
    return JSONResponse(get_service(request).aggregate(body, resolution))


@router.post("/clear-cache")
async def clear_cache(request: Request) -> JSONResponse:
    """Drop every memoized payload."""
    cleared = get_service(request).clear_caches()
    return JSONResponse({"message": "Cache cleared successfully", "cleared": cleared})


# =============================================================================
# Exception Handlers
# =============================================================================

async def handle_api_error(request: Request, exc: TrafficAPIError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.url.path}: {exc.message}")
    return JSONResponse({"error": exc.message}, status_code=exc.status_code)


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed query parameters with the same wording as range errors."""
    for error in exc.errors():
        field = error.get("loc", ())[-1] if error.get("loc") else None
        if field in PARAM_MESSAGES:
            return JSONResponse({"error": PARAM_MESSAGES[field]}, status_code=400)

    first = exc.errors()[0] if exc.errors() else {}
    return JSONResponse(
        {"error": "Invalid request", "detail": first.get("msg", "")},
        status_code=400,
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Server error on {request.url.path}")
    return JSONResponse(
        {"error": "Internal server error", "message": str(exc)},
        status_code=500,
    )


# =============================================================================
# Application Factory
# =============================================================================

def create_app(
    app_settings: Settings = settings,
    service: Optional[TrafficService] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        app_settings: Configuration to wire components from
        service: Pre-built service (tests inject seeded generators here)
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        app.state.startup_time = time.time()
        logger.info(f"Starting {app_settings.service.name} {app_settings.service.version}")
        logger.info(
            f"Cache capacity: {app_settings.cache.max_entries}, "
            f"default tier: {app_settings.field.default_resolution}"
        )

        yield

        logger.info("Shutting down...")
        app.state.service.clear_caches()
        logger.info("Shutdown complete")

    app = FastAPI(
        title="Paris Traffic API",
        description="Synthetic foot-traffic density field for Paris",
        version=app_settings.service.version,
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.service = service or build_service(app_settings)
    app.state.startup_time = time.time()

    app.add_exception_handler(TrafficAPIError, handle_api_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    app.include_router(router)

    @app.get("/api/health")
    async def health() -> JSONResponse:
        """Liveness probe - always 200 while the process runs."""
        return JSONResponse({
            "status": "ok",
            "timestamp": utc_timestamp(),
            "service": app_settings.service.name,
            "uptime_seconds": round(time.time() - app.state.startup_time, 1),
        })

    @app.get("/api/config")
    async def browser_config() -> JSONResponse:
        """Configuration handed to the browser map layer."""
        return JSONResponse({"mapboxToken": app_settings.mapbox.token})

    @app.get("/api/metrics")
    async def metrics() -> JSONResponse:
        """Cache metrics for observability."""
        return JSONResponse(app.state.service.metrics())

    return app


app = create_app()


# =============================================================================
# Main Entry Point
# =============================================================================

def run() -> None:
    import uvicorn

    uvicorn.run(
        "paris_traffic.main:app",
        host=settings.server.host,
        port=settings.server.port,
        reload=False,
    )


if __name__ == "__main__":
    run()
