# ============================================================================
# HEALTH CHECK CORE TYPES
# ============================================================================
# EPOCH: 1 - UDP MONITOR
# STATUS: Infrastructure - Shared health check types
# PURPOSE: Health status and result types
# CREATED: 17 OCT 2026
# ============================================================================
"""
Health Check Core Types

Result types shared by health checks and the HTTP routes.

Status:
- up: the monitored service answered the probe
- down: the probe timed out or the target was unreachable
"""

from enum import Enum
from typing import Any, Dict, Optional
from dataclasses import dataclass, field
from datetime import datetime, timezone

from core.contracts import ProbeOutcome


class HealthStatus(str, Enum):
    """Health check status values."""
    UP = "UP"
    DOWN = "DOWN"

    @classmethod
    def from_outcome(cls, outcome: ProbeOutcome) -> "HealthStatus":
        return cls.UP if outcome.is_up else cls.DOWN


@dataclass
class HealthCheckResult:
    """Result from a single health check."""
    status: HealthStatus
    outcome: Optional[ProbeOutcome] = None
    message: Optional[str] = None
    details: Dict[str, Any] = field(default_factory=dict)
    duration_ms: float = 0.0
    checked_at: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc)
    )

    @classmethod
    def from_outcome(cls, outcome: ProbeOutcome, **details) -> "HealthCheckResult":
        """Create result from a probe outcome."""
        messages = {
            ProbeOutcome.RESPONDED: "Service responded",
            ProbeOutcome.OPEN_NO_RESPONSE: "No response within timeout",
            ProbeOutcome.UNREACHABLE: "Service unreachable",
        }
        return cls(
            status=HealthStatus.from_outcome(outcome),
            outcome=outcome,
            message=messages[outcome],
            details=details,
        )

    @property
    def is_up(self) -> bool:
        return self.status == HealthStatus.UP


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "HealthStatus",
    "HealthCheckResult",
]
