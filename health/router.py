# ============================================================================
# HEALTH CHECK ROUTER
# ============================================================================
# EPOCH: 1 - UDP MONITOR
# STATUS: Infrastructure - FastAPI health check endpoints
# PURPOSE: Expose the UDP probe as an HTTP health endpoint
# CREATED: 17 OCT 2026
# ============================================================================
"""
Health Check Router

FastAPI router turning the UDP probe into HTTP health endpoints.

Endpoints:
    GET|HEAD /health      - Probe the UDP target
    GET /health/get       - Same, GET only
    HEAD /health/head     - Same, HEAD only
    GET /health/probe     - Probe the UDP target, JSON diagnostics
    GET /livez            - Monitor process is alive (no probe)

Response Codes (/health, /health/get, /health/head):
    200 - "UP", the target replied
    404 - "DOWN", no reply and no caller timeout configured
    400 - empty body, no reply; sent only after the caller timeout elapsed
    429 - rate limit exceeded, no probe sent

The caller timeout lets a load balancer's own client timeout fire before
the monitor answers "down". It is a per-request asyncio.sleep that starts
after the probe outcome is known, so other requests are not held up.
"""

import asyncio
import logging
import uuid
from typing import Optional

from fastapi import APIRouter, HTTPException, Request, Response
from fastapi.responses import JSONResponse, PlainTextResponse

from core.logging import log_context
from health.checks.udp import UdpServiceCheck
from health.ratelimit import RequestRateLimiter
from health.schemas import LivenessResponse, ProbeReport
from __version__ import __version__, BUILD_DATE

logger = logging.getLogger(__name__)

health_router = APIRouter(tags=["Health"])


# ============================================================================
# DEPENDENCY INJECTION
# ============================================================================
# Set by the main app at startup

_health_check: Optional[UdpServiceCheck] = None
_rate_limiter: Optional[RequestRateLimiter] = None


def configure_health(
    health_check: UdpServiceCheck,
    rate_limiter: Optional[RequestRateLimiter] = None,
) -> None:
    """Set the check and rate limiter used by the health routes."""
    global _health_check, _rate_limiter
    _health_check = health_check
    _rate_limiter = rate_limiter or RequestRateLimiter()


def get_health_check() -> UdpServiceCheck:
    if _health_check is None:
        raise HTTPException(500, "Health check not initialized")
    return _health_check


def get_rate_limiter() -> RequestRateLimiter:
    if _rate_limiter is None:
        raise HTTPException(500, "Rate limiter not initialized")
    return _rate_limiter


def _request_id(request: Request) -> str:
    return request.headers.get("x-request-id") or uuid.uuid4().hex[:12]


async def _rate_limited() -> bool:
    if await get_rate_limiter().acquire():
        return False
    logger.warning("Health check rate limit exceeded, request rejected")
    return True


# ============================================================================
# UDP HEALTH CHECK
# ============================================================================

async def _check_health(request: Request) -> Response:
    """Probe the target and render the outcome as a plain-text response."""
    check = get_health_check()

    with log_context(request_id=_request_id(request), operation="health"):
        if await _rate_limited():
            return PlainTextResponse("TOO MANY REQUESTS", status_code=429)

        logger.info(f"Received check health request ({request.method})")
        result = await check.check()

        if result.is_up:
            return PlainTextResponse("UP", status_code=200)

        logger.warning(f"UDP target {check.config.target} is DOWN! ({result.outcome.value})")

        caller_timeout = check.config.caller_timeout_seconds
        if caller_timeout <= 0:
            return PlainTextResponse("DOWN", status_code=404)

        logger.debug(f"Suspending response due to caller timeout: {caller_timeout}s")
        await asyncio.sleep(caller_timeout)
        return Response(status_code=400)


@health_router.api_route("/health", methods=["GET", "HEAD"])
async def health(request: Request):
    """
    UDP service health.

    Returns 200 "UP" when the target replied. When it did not, returns
    404 "DOWN" immediately, or 400 after the configured caller timeout.
    """
    return await _check_health(request)


@health_router.get("/health/get")
async def health_via_get(request: Request):
    """UDP service health (GET only)."""
    return await _check_health(request)


@health_router.head("/health/head")
async def health_via_head(request: Request):
    """UDP service health (HEAD only)."""
    return await _check_health(request)


# ============================================================================
# DIAGNOSTICS
# ============================================================================

@health_router.get("/health/probe", response_model=ProbeReport)
async def probe_report(request: Request):
    """
    Probe the UDP target and return the full result as JSON.

    Meant for operators debugging a payload or a firewall; never applies
    the caller timeout.

    Returns:
        200: Target replied
        503: Timed out or unreachable
    """
    check = get_health_check()

    with log_context(request_id=_request_id(request), operation="probe_report"):
        if await _rate_limited():
            return JSONResponse(status_code=429, content={"error": "Rate limit exceeded"})

        result = await check.check()
        report = ProbeReport.from_result(result)

    return JSONResponse(
        status_code=200 if result.is_up else 503,
        content=report.model_dump(mode="json"),
    )


@health_router.get("/livez", response_model=LivenessResponse)
async def liveness_probe():
    """
    Liveness of the monitor process.

    Instant, sends nothing over UDP.
    """
    return LivenessResponse(version=__version__, build_date=BUILD_DATE)


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "health_router",
    "configure_health",
    "get_health_check",
    "get_rate_limiter",
]
