# ============================================================================
# CONFIGURATION MODULE
# ============================================================================
# EPOCH: 1 - UDP MONITOR
# STATUS: Core - Configuration and defaults
# PURPOSE: Centralized configuration management
# CREATED: 17 OCT 2026
# ============================================================================
"""
Configuration Module

Provides the probe target, timeouts and rate limit for the UDP monitor.
"""

from core.config.defaults import (
    ProbeConfig,
    RateLimitConfig,
    Settings,
    get_settings,
    reset_settings,
)

__all__ = [
    "ProbeConfig",
    "RateLimitConfig",
    "Settings",
    "get_settings",
    "reset_settings",
]
