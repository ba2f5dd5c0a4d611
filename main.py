# ============================================================================
# UDP MONITOR - MAIN APPLICATION
# ============================================================================
# EPOCH: 1 - UDP MONITOR
# STATUS: Core - FastAPI application entry point
# PURPOSE: HTTP health endpoint backed by a UDP probe
# CREATED: 17 OCT 2026
# ============================================================================
"""
UDP Monitor Main Application

FastAPI application that:
1. Loads the probe target from the environment at startup
2. Serves /health by probing the target over UDP
3. Rate limits health requests

Usage:
    UDP_MONITOR_PORT=27015 uvicorn main:app --host 0.0.0.0 --port 8000
"""

import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from __version__ import __version__, BUILD_DATE, EPOCH
from core.config import get_settings
from core.contracts import SocketAllocationError
from health import health_router, configure_health, UdpServiceCheck, RequestRateLimiter

# Configure logging using our structured logging system
from core.logging import configure_logging, get_logger

configure_logging(
    level=os.environ.get("LOG_LEVEL", "INFO"),
    json_output=os.environ.get("LOG_FORMAT", "").lower() == "json",
)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Loads and validates configuration on startup; a MalformedConfigError
    here aborts the process before it serves any traffic.
    """
    logger.info(f"Starting UDP Monitor v{__version__} (Epoch {EPOCH}, Build {BUILD_DATE})")

    settings = get_settings()
    probe_config = settings.probe

    health_check = UdpServiceCheck(probe_config)
    configure_health(
        health_check,
        RequestRateLimiter.from_config(settings.rate_limit),
    )

    logger.info(f"UDP host: {probe_config.host}")
    logger.info(f"UDP port: {probe_config.port}")
    logger.info(f"UDP payload (hex): {health_check.prober.payload_hex}")
    logger.info(f"UDP timeout: {probe_config.socket_timeout_ms}ms")
    logger.info(f"Service caller timeout: {probe_config.caller_timeout_seconds}s")
    logger.info(
        f"Health rate limit: {settings.rate_limit.limit_for_period} "
        f"per {settings.rate_limit.period_seconds}s"
    )

    yield

    logger.info("UDP Monitor stopped")


# Create FastAPI app
app = FastAPI(
    title="UDP Monitor",
    description="HTTP health endpoint for UDP services",
    version=__version__,
    lifespan=lifespan,
)


@app.exception_handler(SocketAllocationError)
async def socket_allocation_error_handler(request: Request, exc: SocketAllocationError):
    """Resource exhaustion is not a health result; surface it as a server error."""
    logger.error(f"Health probe aborted: {exc}", exc_info=exc)
    return PlainTextResponse("ERROR", status_code=500)


# Include health check routes (no prefix - /health, /livez)
app.include_router(health_router)


# Root endpoint
@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "service": "UDP Monitor",
        "version": __version__,
        "build_date": BUILD_DATE,
        "status": "running",
        "docs": "/docs",
        "health": "/health",
    }


# ============================================================================
# MAIN ENTRY POINT
# ============================================================================

if __name__ == "__main__":
    import uvicorn

    host = os.environ.get("HOST", "0.0.0.0")
    port = int(os.environ.get("PORT", "8000"))

    uvicorn.run(
        "main:app",
        host=host,
        port=port,
        reload=os.environ.get("RELOAD", "false").lower() == "true",
    )
