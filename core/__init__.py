# ============================================================================
# CORE MODULE
# ============================================================================
# EPOCH: 1 - UDP MONITOR
# STATUS: Core module initialization
# PURPOSE: Export core contracts and configuration
# LAST_REVIEWED: 17 OCT 2026
# ============================================================================

from core.contracts import (
    ProbeOutcome,
    MonitorError,
    MalformedConfigError,
    SocketAllocationError,
)
from core.config import ProbeConfig, RateLimitConfig, Settings

__all__ = [
    # Enums
    "ProbeOutcome",
    # Errors
    "MonitorError",
    "MalformedConfigError",
    "SocketAllocationError",
    # Config
    "ProbeConfig",
    "RateLimitConfig",
    "Settings",
]
