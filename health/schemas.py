# ============================================================================
# HEALTH SCHEMAS
# ============================================================================
# EPOCH: 1 - UDP MONITOR
# STATUS: Infrastructure - Response schemas
# PURPOSE: Pydantic models for the health diagnostics API
# CREATED: 17 OCT 2026
# ============================================================================
"""
Health Schemas

Response models for the JSON health routes.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from core.contracts import ProbeOutcome
from health.core import HealthCheckResult, HealthStatus


class ProbeReport(BaseModel):
    """Diagnostic view of a single UDP probe."""
    status: HealthStatus = Field(..., description="UP if the target replied")
    outcome: ProbeOutcome = Field(..., description="Tri-state probe outcome")
    target: str = Field(..., description="Probed host:port")
    payload_hex: str = Field(..., description="Datagram sent, rendered as hex")
    socket_timeout_ms: int = Field(..., description="Receive timeout used")
    duration_ms: float = Field(..., description="Wall time spent probing")
    message: Optional[str] = None
    checked_at: datetime

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "status": "UP",
                    "outcome": "responded",
                    "target": "game01:27015",
                    "payload_hex": "FF FF FF FF 54",
                    "socket_timeout_ms": 5000,
                    "duration_ms": 12.7,
                    "message": "Service responded",
                    "checked_at": "2026-10-17T09:30:00Z",
                }
            ]
        }
    }

    @classmethod
    def from_result(cls, result: HealthCheckResult) -> "ProbeReport":
        return cls(
            status=result.status,
            outcome=result.outcome,
            target=result.details["target"],
            payload_hex=result.details["payload_hex"],
            socket_timeout_ms=result.details["socket_timeout_ms"],
            duration_ms=round(result.duration_ms, 2),
            message=result.message,
            checked_at=result.checked_at,
        )


class LivenessResponse(BaseModel):
    """Liveness of the monitor process itself."""
    status: str = "alive"
    version: str
    build_date: str


__all__ = [
    "ProbeReport",
    "LivenessResponse",
]
