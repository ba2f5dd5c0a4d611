# ============================================================================
# APPLICATION TESTS
# ============================================================================
# EPOCH: 1 - UDP MONITOR
# STATUS: Tests - FastAPI app lifespan wiring
# PURPOSE: Verify startup loads config from env and serves /health
# CREATED: 17 OCT 2026
# ============================================================================
"""
Application Tests

Runs the real app lifespan with TestClient as a context manager.

Run with:
    pytest tests/test_main.py -v
"""

from fastapi.testclient import TestClient

from __version__ import __version__
from main import app


class TestApplication:
    """Startup wiring and top-level routes."""

    def test_startup_wires_health_from_env(self, monkeypatch, udp_echo_server):
        monkeypatch.setenv("UDP_MONITOR_HOST", "127.0.0.1")
        monkeypatch.setenv("UDP_MONITOR_PORT", str(udp_echo_server.port))
        monkeypatch.setenv("UDP_MONITOR_PAYLOAD", "\\x01hi")
        monkeypatch.setenv("UDP_MONITOR_TIMEOUT_MS", "1000")

        with TestClient(app) as client:
            response = client.get("/health")

        assert response.status_code == 200
        assert response.text == "UP"
        assert udp_echo_server.received == [b"\x01hi"]

    def test_root_and_livez(self, monkeypatch, closed_udp_port):
        monkeypatch.setenv("UDP_MONITOR_HOST", "127.0.0.1")
        monkeypatch.setenv("UDP_MONITOR_PORT", str(closed_udp_port))

        with TestClient(app) as client:
            root = client.get("/")
            livez = client.get("/livez")

        assert root.json()["version"] == __version__
        assert livez.status_code == 200
        assert livez.json()["version"] == __version__
