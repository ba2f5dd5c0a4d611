# ============================================================================
# PROBE MODULE
# ============================================================================
# EPOCH: 1 - UDP MONITOR
# STATUS: Core - UDP probe protocol
# PURPOSE: Payload encoding and the single-shot UDP prober
# CREATED: 17 OCT 2026
# ============================================================================
"""
Probe Module

- encode_payload / render_hex: payload codec for \\xHH-escaped text
- probe_once: one send / one receive against a ProbeConfig target
- UdpProber: probe_once bound to a config with a precomputed payload

Usage:
    from core.config import ProbeConfig
    from probe import UdpProber

    prober = UdpProber(ProbeConfig(host="game01", port=27015))
    outcome = prober.probe()
"""

from probe.payload import encode_payload, render_hex
from probe.udp import RECEIVE_BUFFER_SIZE, probe_once, UdpProber

__all__ = [
    "encode_payload",
    "render_hex",
    "RECEIVE_BUFFER_SIZE",
    "probe_once",
    "UdpProber",
]
