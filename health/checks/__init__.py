# ============================================================================
# HEALTH CHECK PLUGINS
# ============================================================================
# EPOCH: 1 - UDP MONITOR
# STATUS: Infrastructure - Health check implementations
# PURPOSE: Concrete health checks for the UDP monitor
# CREATED: 17 OCT 2026
# ============================================================================
"""
Health Check Plugins

- udp_service: one UDP probe against the configured target
"""

from health.checks.udp import UdpServiceCheck

__all__ = [
    "UdpServiceCheck",
]
