# ============================================================================
# SHARED TEST FIXTURES
# ============================================================================
# EPOCH: 1 - UDP MONITOR
# STATUS: Tests - Loopback UDP listeners
# PURPOSE: Real UDP endpoints for prober and router tests
# CREATED: 17 OCT 2026
# ============================================================================
"""
Shared fixtures.

All listeners bind 127.0.0.1 on an ephemeral port:
- udp_echo_server: replies "pong" to every datagram and records what it got
- silent_udp_port: bound socket that never replies
- closed_udp_port: port that was bound and released, nothing listening
"""

import socket
import socketserver
import threading

import pytest

from core.config import reset_settings


class _EchoHandler(socketserver.BaseRequestHandler):
    def handle(self):
        data, sock = self.request
        self.server.received.append(data)
        sock.sendto(self.server.reply, self.client_address)


class EchoServer(socketserver.ThreadingUDPServer):
    daemon_threads = True

    def __init__(self, reply: bytes = b"pong"):
        super().__init__(("127.0.0.1", 0), _EchoHandler)
        self.reply = reply
        self.received = []

    @property
    def port(self) -> int:
        return self.server_address[1]


@pytest.fixture
def udp_echo_server():
    server = EchoServer()
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield server
    finally:
        server.shutdown()
        server.server_close()
        thread.join(timeout=5)


@pytest.fixture
def silent_udp_port():
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    sock.bind(("127.0.0.1", 0))
    try:
        yield sock.getsockname()[1]
    finally:
        sock.close()


@pytest.fixture
def closed_udp_port():
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    sock.bind(("127.0.0.1", 0))
    port = sock.getsockname()[1]
    sock.close()
    return port


@pytest.fixture(autouse=True)
def _fresh_settings():
    reset_settings()
    yield
    reset_settings()
