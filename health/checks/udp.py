# ============================================================================
# UDP SERVICE HEALTH CHECK
# ============================================================================
# EPOCH: 1 - UDP MONITOR
# STATUS: Infrastructure - Remote UDP service liveness check
# PURPOSE: Run one UDP probe and report it as a health check result
# CREATED: 17 OCT 2026
# ============================================================================
"""
UDP Service Health Check

Wraps UdpProber as an async health check. The probe blocks on a socket
receive bounded by the socket timeout, so it runs in a worker thread and
the event loop keeps serving other requests meanwhile.
"""

import asyncio
import logging
import time

from core.config import ProbeConfig
from health.core import HealthCheckResult
from probe.udp import UdpProber

logger = logging.getLogger(__name__)


class UdpServiceCheck:
    """
    Remote UDP service health check.

    Up only if the target replied to the configured payload.
    SocketAllocationError from the prober is not caught here.
    """

    name = "udp_service"

    def __init__(self, config: ProbeConfig, prober: UdpProber = None):
        self.config = config
        self.prober = prober or UdpProber(config)

    async def check(self) -> HealthCheckResult:
        start_time = time.monotonic()

        outcome = await asyncio.to_thread(self.prober.probe)

        result = HealthCheckResult.from_outcome(
            outcome,
            target=self.config.target,
            payload_hex=self.prober.payload_hex,
            socket_timeout_ms=self.config.socket_timeout_ms,
        )
        result.duration_ms = (time.monotonic() - start_time) * 1000

        logger.debug(
            f"Health check {self.name}: {result.status.value} "
            f"({result.duration_ms:.1f}ms)"
        )
        return result


__all__ = [
    "UdpServiceCheck",
]
