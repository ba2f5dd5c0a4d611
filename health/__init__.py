# ============================================================================
# HEALTH CHECK MODULE
# ============================================================================
# EPOCH: 1 - UDP MONITOR
# STATUS: Infrastructure - HTTP adapter around the UDP prober
# PURPOSE: Serve UDP service liveness as an HTTP health endpoint
# CREATED: 17 OCT 2026
# ============================================================================
"""
Health Check Module

HTTP side of the UDP monitor:
- HealthStatus / HealthCheckResult: check result types
- UdpServiceCheck: one UDP probe per request, run off the event loop
- RequestRateLimiter: admission control in front of the probe
- health_router: /health (GET, HEAD), /health/get, /health/head,
  /health/probe, /livez

Usage:
    from health import health_router, configure_health, UdpServiceCheck

    configure_health(UdpServiceCheck(probe_config))
    app.include_router(health_router)
"""

from health.core import (
    HealthStatus,
    HealthCheckResult,
)
from health.checks.udp import UdpServiceCheck
from health.ratelimit import RequestRateLimiter
from health.router import health_router, configure_health

__all__ = [
    # Core types
    "HealthStatus",
    "HealthCheckResult",
    # Checks
    "UdpServiceCheck",
    # Rate limiting
    "RequestRateLimiter",
    # Router
    "health_router",
    "configure_health",
]
