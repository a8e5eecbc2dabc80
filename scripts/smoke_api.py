#!/usr/bin/env python3
"""
API Smoke Test Script
=====================

Standalone script that exercises a running Paris traffic service.

This script:
    1. Checks /api/health
    2. Plays back an animated hour of the density field, one request per
       frame, and reports latency and cache behaviour
    3. Fetches the legacy hexagon view and its stats
    4. Reports a final summary

Prerequisites:
    - The service must be running at the configured URL
    - Install dependencies: pip install -e ".[scripts]"

Usage:
    python scripts/smoke_api.py
    python scripts/smoke_api.py --url http://localhost:3000 --hour 18 --step 2
"""

import argparse
import logging
import os
import sys
import time
from typing import Optional

import requests


# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%S",
)
logger = logging.getLogger(__name__)


def fetch_json(url: str, timeout: float, **params) -> Optional[dict]:
    """GET a JSON endpoint, None on any non-200 reply."""
    r = requests.get(url, params=params, timeout=timeout)
    if r.status_code != 200:
        logger.error(f"{r.url} -> {r.status_code}: {r.text[:200]}")
        return None
    return r.json()


def run_smoke(
    base_url: str,
    hour: int,
    day: int,
    step: int,
    resolution: str,
    timeout: float,
) -> dict:
    """
    Run the smoke test.

    Args:
        base_url: Service root, e.g. http://localhost:3000
        hour: Hour to animate
        day: Day of week (0 = Sunday)
        step: Minutes between frames
        resolution: Grid tier requested for every frame
        timeout: Per-request timeout in seconds

    Returns:
        Final metrics dict
    """
    logger.info("=" * 60)
    logger.info("Paris Traffic API Smoke Test")
    logger.info("=" * 60)
    logger.info(f"Service URL: {base_url}")
    logger.info(f"Animating day={day} hour={hour} every {step} min at '{resolution}'")
    logger.info("=" * 60)

    failures = 0

    health = fetch_json(f"{base_url}/api/health", timeout)
    if health is None:
        logger.error("Service is not healthy, aborting")
        return {"failures": 1, "frames": 0}
    logger.info(f"Health: {health['status']} (uptime {health.get('uptime_seconds')}s)")

    latencies = []
    cache_hits = 0
    for minute in range(0, 60, step):
        start = time.time()
        payload = fetch_json(
            f"{base_url}/api/traffic/density",
            timeout,
            hour=hour,
            day=day,
            minute=minute,
            resolution=resolution,
        )
        latencies.append((time.time() - start) * 1000)

        if payload is None:
            failures += 1
            continue

        metadata = payload["metadata"]
        if metadata.get("actualCacheMinute") != minute:
            cache_hits += 1
        logger.info(
            f"  {hour:02d}:{minute:02d} -> {metadata['totalPoints']} points, "
            f"avg {metadata['avgDensity']}, max {metadata['maxDensity']} "
            f"({latencies[-1]:.0f}ms)"
        )

    traffic = fetch_json(f"{base_url}/api/traffic", timeout, hour=hour, day=day)
    if traffic is None:
        failures += 1
    else:
        logger.info(f"Legacy view: {traffic['metadata']['hexagonCount']} hexagons")

    stats = fetch_json(f"{base_url}/api/traffic/stats", timeout, hour=hour, day=day)
    if stats is None or not stats.get("cached"):
        failures += 1
    else:
        logger.info(
            f"Stats: avg {stats['avgDensity']:.1f}, "
            f"min {stats['minDensity']:.1f}, max {stats['maxDensity']:.1f}"
        )

    avg_latency = sum(latencies) / len(latencies) if latencies else 0

    logger.info("=" * 60)
    logger.info("FINAL SUMMARY")
    logger.info("=" * 60)
    logger.info(f"Frames requested: {len(latencies)}")
    logger.info(f"Served from an earlier bucket: {cache_hits}")
    logger.info(f"Average latency: {avg_latency:.0f}ms")
    logger.info(f"Failures: {failures}")
    logger.info("=" * 60)

    if failures == 0:
        logger.info("SMOKE TEST PASSED")
    else:
        logger.error("SMOKE TEST FAILED")

    return {
        "frames": len(latencies),
        "cache_hits": cache_hits,
        "avg_latency_ms": avg_latency,
        "failures": failures,
    }


def main():
    parser = argparse.ArgumentParser(
        description="Smoke test for a running Paris traffic service"
    )
    parser.add_argument(
        "--url",
        type=str,
        default=os.environ.get("PARIS_TRAFFIC_URL", "http://localhost:3000"),
        help="Service root URL",
    )
    parser.add_argument("--hour", type=int, default=14, help="Hour to animate (default: 14)")
    parser.add_argument("--day", type=int, default=5, help="Day of week, 0 = Sunday (default: 5)")
    parser.add_argument(
        "--step",
        type=int,
        default=1,
        help="Minutes between frames (default: 1)",
    )
    parser.add_argument(
        "--resolution",
        type=str,
        default="medium",
        help="Grid tier (default: medium)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=30.0,
        help="Per-request timeout in seconds (default: 30)",
    )

    args = parser.parse_args()

    try:
        result = run_smoke(
            base_url=args.url.rstrip("/"),
            hour=args.hour,
            day=args.day,
            step=max(1, args.step),
            resolution=args.resolution,
            timeout=args.timeout,
        )
    except requests.RequestException as e:
        logger.error(f"Request failed: {e}")
        sys.exit(1)

    sys.exit(0 if result["failures"] == 0 else 1)


if __name__ == "__main__":
    main()
