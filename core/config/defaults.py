# ============================================================================
# CONFIGURATION DEFAULTS
# ============================================================================
# EPOCH: 1 - UDP MONITOR
# STATUS: Core - Probe and rate limit configuration
# PURPOSE: Immutable configuration values built once from the environment
# CREATED: 17 OCT 2026
# ============================================================================
"""
Configuration Defaults

Provides the probe target and rate limit settings for the monitor.
Values are read from environment variables once, at application startup,
and validated eagerly so a bad deployment fails before serving traffic.

Design:
- Immutable dataclasses for configuration
- Environment variable overrides
- MalformedConfigError for anything that cannot be used
"""

import os
from dataclasses import dataclass
from typing import Callable, Optional, TypeVar

from core.contracts import MalformedConfigError

T = TypeVar("T")

DEFAULT_HOST = "localhost"
DEFAULT_PAYLOAD = "ping"
DEFAULT_SOCKET_TIMEOUT_MS = 5000
DEFAULT_CALLER_TIMEOUT_SECONDS = 0.0


def _read_env(name: str, default: Optional[str], parse: Callable[[str], T]) -> T:
    """Read and parse an environment variable, mapping failures to MalformedConfigError."""
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        if default is None:
            raise MalformedConfigError(name, "required but not set")
        raw = default
    try:
        return parse(raw.strip())
    except ValueError:
        raise MalformedConfigError(name, f"cannot parse {raw!r}")


@dataclass(frozen=True)
class ProbeConfig:
    """
    Target and timing for the UDP probe.

    socket_timeout_ms bounds the receive inside a single probe.
    caller_timeout_seconds is the extra suspension applied by the HTTP
    layer before answering "down"; 0 disables it.
    """
    port: int
    host: str = DEFAULT_HOST
    payload_text: str = DEFAULT_PAYLOAD
    socket_timeout_ms: int = DEFAULT_SOCKET_TIMEOUT_MS
    caller_timeout_seconds: float = DEFAULT_CALLER_TIMEOUT_SECONDS

    def __post_init__(self):
        if not isinstance(self.host, str) or not self.host.strip():
            raise MalformedConfigError("host", "must be a non-empty string")
        if isinstance(self.port, bool) or not isinstance(self.port, int):
            raise MalformedConfigError("port", f"must be an integer, got {self.port!r}")
        if not 1 <= self.port <= 65535:
            raise MalformedConfigError("port", f"must be in 1-65535, got {self.port}")
        if self.socket_timeout_ms <= 0:
            raise MalformedConfigError(
                "socket_timeout_ms", f"must be positive, got {self.socket_timeout_ms}"
            )
        if self.caller_timeout_seconds < 0:
            raise MalformedConfigError(
                "caller_timeout_seconds",
                f"must not be negative, got {self.caller_timeout_seconds}",
            )

    @property
    def socket_timeout_seconds(self) -> float:
        return self.socket_timeout_ms / 1000.0

    @property
    def target(self) -> str:
        return f"{self.host}:{self.port}"

    @classmethod
    def from_env(cls) -> "ProbeConfig":
        """Create from environment variables."""
        return cls(
            host=_read_env("UDP_MONITOR_HOST", DEFAULT_HOST, str),
            port=_read_env("UDP_MONITOR_PORT", None, int),
            # Payload is taken verbatim, surrounding whitespace may be significant
            payload_text=os.getenv("UDP_MONITOR_PAYLOAD", DEFAULT_PAYLOAD),
            socket_timeout_ms=_read_env(
                "UDP_MONITOR_TIMEOUT_MS", str(DEFAULT_SOCKET_TIMEOUT_MS), int
            ),
            caller_timeout_seconds=_read_env(
                "UDP_MONITOR_CALLER_TIMEOUT", str(DEFAULT_CALLER_TIMEOUT_SECONDS), float
            ),
        )


@dataclass(frozen=True)
class RateLimitConfig:
    """
    Rate limit applied in front of the health routes.

    At most limit_for_period requests are admitted per period_seconds window.
    """
    limit_for_period: int = 50
    period_seconds: float = 1.0

    def __post_init__(self):
        if self.limit_for_period < 1:
            raise MalformedConfigError(
                "limit_for_period", f"must be at least 1, got {self.limit_for_period}"
            )
        if self.period_seconds <= 0:
            raise MalformedConfigError(
                "period_seconds", f"must be positive, got {self.period_seconds}"
            )

    @classmethod
    def from_env(cls) -> "RateLimitConfig":
        """Create from environment variables."""
        return cls(
            limit_for_period=_read_env("HEALTH_RATE_LIMIT", "50", int),
            period_seconds=_read_env("HEALTH_RATE_LIMIT_PERIOD_SECONDS", "1.0", float),
        )


# ============================================================================
# GLOBAL SETTINGS INSTANCE
# ============================================================================

@dataclass(frozen=True)
class Settings:
    """Container for all monitor configuration."""
    probe: ProbeConfig
    rate_limit: RateLimitConfig

    @classmethod
    def from_env(cls) -> "Settings":
        """Create all settings from environment variables."""
        return cls(
            probe=ProbeConfig.from_env(),
            rate_limit=RateLimitConfig.from_env(),
        )


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get global settings instance, loading it on first use."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def reset_settings() -> None:
    """Reset settings (for testing)."""
    global _settings
    _settings = None


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "ProbeConfig",
    "RateLimitConfig",
    "Settings",
    "get_settings",
    "reset_settings",
]
