# ============================================================================
# BASE CONTRACTS & ENUMS
# ============================================================================
# EPOCH: 1 - UDP MONITOR
# STATUS: Foundation - Probe outcome enum and error taxonomy
# PURPOSE: Define the values that cross the prober / health adapter boundary
# LAST_REVIEWED: 17 OCT 2026
# EXPORTS: ProbeOutcome, MonitorError, MalformedConfigError, SocketAllocationError
# DEPENDENCIES: enum
# ============================================================================
"""
Base contracts for the UDP health monitor.

The prober produces a ProbeOutcome; the health adapter consumes it.
Expected probe failures (timeout, unreachable) are outcomes, not exceptions.
Only configuration errors and resource exhaustion are raised.
"""

from enum import Enum


# ============================================================================
# OUTCOMES
# ============================================================================

class ProbeOutcome(str, Enum):
    """
    Tri-state result of a single UDP probe.

    RESPONDED         - a reply datagram arrived before the timeout
    OPEN_NO_RESPONSE  - receive timed out (port may be open, nobody answered)
    UNREACHABLE       - resolution, send or receive failed with an I/O error
    """
    RESPONDED = "responded"
    OPEN_NO_RESPONSE = "open_no_response"
    UNREACHABLE = "unreachable"

    @property
    def is_up(self) -> bool:
        """Only a received reply counts as a positive signal."""
        return self is ProbeOutcome.RESPONDED


# ============================================================================
# EXCEPTIONS
# ============================================================================

class MonitorError(Exception):
    """Base exception for monitor errors."""
    pass


class MalformedConfigError(MonitorError, ValueError):
    """Raised at startup when configuration values are missing or invalid."""
    def __init__(self, field_name: str, reason: str):
        self.field_name = field_name
        self.reason = reason
        super().__init__(f"Invalid configuration for {field_name}: {reason}")


class SocketAllocationError(MonitorError, RuntimeError):
    """Raised when a UDP socket cannot be allocated (resource exhaustion)."""
    def __init__(self, cause: OSError):
        self.cause = cause
        super().__init__(f"Could not allocate UDP socket: {cause}")


__all__ = [
    "ProbeOutcome",
    "MonitorError",
    "MalformedConfigError",
    "SocketAllocationError",
]
