# ============================================================================
# UDP PROBER
# ============================================================================
# EPOCH: 1 - UDP MONITOR
# STATUS: Core - Single-shot UDP send/receive probe
# PURPOSE: Infer liveness of a remote UDP service from one request/reply
# CREATED: 17 OCT 2026
# ============================================================================
"""
UDP Prober

Sends exactly one datagram to the configured target and waits for at most
one reply. UDP has no handshake, so the reply (or its absence) is the only
signal:

    reply before timeout        -> RESPONDED
    receive timed out           -> OPEN_NO_RESPONSE
    any other socket error      -> UNREACHABLE

The socket is connected to the target so ICMP port-unreachable errors are
reported back on receive (ConnectionRefusedError on Linux), which makes a
closed port fail fast instead of waiting out the timeout.

Every probe gets a fresh socket that is closed before returning.
"""

import socket
from typing import Optional

from core.config import ProbeConfig
from core.contracts import ProbeOutcome, SocketAllocationError
from core.logging import get_logger, log_context
from probe.payload import encode_payload, render_hex

logger = get_logger(__name__)

# Only arrival matters; larger replies are truncated by the OS
RECEIVE_BUFFER_SIZE = 1024


def _resolve(config: ProbeConfig):
    """
    Resolve the target to (family, socktype, proto, address).

    IPv4 results win over IPv6 so "localhost" reaches an IPv4-only
    listener even where the resolver lists ::1 first.
    """
    infos = socket.getaddrinfo(config.host, config.port, type=socket.SOCK_DGRAM)
    family, socktype, proto, _, address = min(
        infos, key=lambda info: info[0] != socket.AF_INET
    )
    return family, socktype, proto, address


def probe_once(config: ProbeConfig, payload: bytes) -> ProbeOutcome:
    """
    Send one datagram to config.host:config.port and classify the reply.

    Args:
        config: Probe target and socket timeout
        payload: Datagram bytes to send

    Returns:
        ProbeOutcome for this single exchange

    Raises:
        SocketAllocationError: If the OS refuses to create a socket
    """
    # Malformed labels ("foo..bar") fail in the idna codec, not the resolver
    try:
        family, socktype, proto, address = _resolve(config)
    except (OSError, UnicodeError) as e:
        logger.warning(
            f"UDP port {config.target} is closed or unreachable: "
            f"cannot resolve host ({e})"
        )
        return ProbeOutcome.UNREACHABLE

    try:
        sock = socket.socket(family, socktype, proto)
    except OSError as e:
        raise SocketAllocationError(e)

    with sock:
        try:
            sock.settimeout(config.socket_timeout_seconds)
            sock.connect(address)

            logger.info(
                f"Sending UDP packet to {config.target} with payload (hex): "
                f"{render_hex(payload)}, timeout: {config.socket_timeout_ms}ms"
            )
            sock.send(payload)

            reply = sock.recv(RECEIVE_BUFFER_SIZE)

        except socket.timeout:
            logger.warning(
                f"UDP port {config.target} is open but no response received within timeout"
            )
            return ProbeOutcome.OPEN_NO_RESPONSE

        except OSError as e:
            logger.warning(f"UDP port {config.target} is closed or unreachable: {e}")
            return ProbeOutcome.UNREACHABLE

    logger.info(
        f"SUCCESS: Received UDP response from {config.target} - Size: {len(reply)} bytes"
    )
    return ProbeOutcome.RESPONDED


class UdpProber:
    """
    Probes one configured UDP target.

    The payload text is encoded once at construction; each probe() call
    opens and closes its own socket, so a single prober can be shared by
    concurrent requests.
    """

    def __init__(self, config: ProbeConfig, payload: Optional[bytes] = None):
        self.config = config
        self.payload = encode_payload(config.payload_text) if payload is None else payload

    @property
    def payload_hex(self) -> str:
        return render_hex(self.payload)

    def probe(self) -> ProbeOutcome:
        """Run a single probe against the configured target."""
        with log_context(target=self.config.target, operation="udp_probe"):
            outcome = probe_once(self.config, self.payload)
            logger.debug(f"Probe outcome: {outcome.value}")
            return outcome


__all__ = [
    "RECEIVE_BUFFER_SIZE",
    "probe_once",
    "UdpProber",
]
