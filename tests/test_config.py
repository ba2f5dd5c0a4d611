# ============================================================================
# CONFIGURATION TESTS
# ============================================================================
# EPOCH: 1 - UDP MONITOR
# STATUS: Tests - Environment configuration
# PURPOSE: Verify defaults, env overrides and startup validation
# CREATED: 17 OCT 2026
# ============================================================================
"""
Configuration Tests

Run with:
    pytest tests/test_config.py -v
"""

import dataclasses
import pytest

from core.config import ProbeConfig, RateLimitConfig, get_settings
from core.contracts import MalformedConfigError


ENV_VARS = [
    "UDP_MONITOR_HOST",
    "UDP_MONITOR_PORT",
    "UDP_MONITOR_PAYLOAD",
    "UDP_MONITOR_TIMEOUT_MS",
    "UDP_MONITOR_CALLER_TIMEOUT",
    "HEALTH_RATE_LIMIT",
    "HEALTH_RATE_LIMIT_PERIOD_SECONDS",
]


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


# ============================================================================
# PROBE CONFIG
# ============================================================================

class TestProbeConfig:
    """Tests for ProbeConfig construction and validation."""

    def test_defaults(self):
        config = ProbeConfig(port=27015)
        assert config.host == "localhost"
        assert config.payload_text == "ping"
        assert config.socket_timeout_ms == 5000
        assert config.caller_timeout_seconds == 0
        assert config.socket_timeout_seconds == 5.0
        assert config.target == "localhost:27015"

    def test_is_immutable(self):
        config = ProbeConfig(port=27015)
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.port = 1

    @pytest.mark.parametrize("port", [0, -1, 65536, 100000])
    def test_port_out_of_range(self, port):
        with pytest.raises(MalformedConfigError) as exc_info:
            ProbeConfig(port=port)
        assert exc_info.value.field_name == "port"

    @pytest.mark.parametrize("port", [1, 65535])
    def test_port_bounds_accepted(self, port):
        assert ProbeConfig(port=port).port == port

    def test_empty_host(self):
        with pytest.raises(MalformedConfigError):
            ProbeConfig(host="  ", port=27015)

    def test_zero_socket_timeout(self):
        with pytest.raises(MalformedConfigError):
            ProbeConfig(port=27015, socket_timeout_ms=0)

    def test_negative_caller_timeout(self):
        with pytest.raises(MalformedConfigError):
            ProbeConfig(port=27015, caller_timeout_seconds=-1)

    def test_malformed_config_is_value_error(self):
        with pytest.raises(ValueError):
            ProbeConfig(port=0)


class TestProbeConfigFromEnv:
    """Tests for ProbeConfig.from_env."""

    def test_port_required(self, clean_env):
        with pytest.raises(MalformedConfigError) as exc_info:
            ProbeConfig.from_env()
        assert exc_info.value.field_name == "UDP_MONITOR_PORT"

    def test_minimal_env(self, clean_env):
        clean_env.setenv("UDP_MONITOR_PORT", "27015")
        config = ProbeConfig.from_env()
        assert config == ProbeConfig(port=27015)

    def test_full_env(self, clean_env):
        clean_env.setenv("UDP_MONITOR_HOST", "game01.internal")
        clean_env.setenv("UDP_MONITOR_PORT", "27015")
        clean_env.setenv("UDP_MONITOR_PAYLOAD", "\\xFF\\xFF\\xFF\\xFFTSource Engine Query\\x00")
        clean_env.setenv("UDP_MONITOR_TIMEOUT_MS", "750")
        clean_env.setenv("UDP_MONITOR_CALLER_TIMEOUT", "2")

        config = ProbeConfig.from_env()

        assert config.host == "game01.internal"
        assert config.port == 27015
        assert config.payload_text == "\\xFF\\xFF\\xFF\\xFFTSource Engine Query\\x00"
        assert config.socket_timeout_ms == 750
        assert config.caller_timeout_seconds == 2.0

    def test_non_numeric_port(self, clean_env):
        clean_env.setenv("UDP_MONITOR_PORT", "http")
        with pytest.raises(MalformedConfigError):
            ProbeConfig.from_env()

    def test_non_numeric_timeout(self, clean_env):
        clean_env.setenv("UDP_MONITOR_PORT", "27015")
        clean_env.setenv("UDP_MONITOR_TIMEOUT_MS", "5s")
        with pytest.raises(MalformedConfigError):
            ProbeConfig.from_env()

    def test_payload_whitespace_preserved(self, clean_env):
        clean_env.setenv("UDP_MONITOR_PORT", "27015")
        clean_env.setenv("UDP_MONITOR_PAYLOAD", " ping ")
        assert ProbeConfig.from_env().payload_text == " ping "


# ============================================================================
# RATE LIMIT + SETTINGS
# ============================================================================

class TestRateLimitConfig:
    """Tests for RateLimitConfig."""

    def test_defaults(self, clean_env):
        config = RateLimitConfig.from_env()
        assert config.limit_for_period == 50
        assert config.period_seconds == 1.0

    def test_zero_limit_rejected(self):
        with pytest.raises(MalformedConfigError):
            RateLimitConfig(limit_for_period=0)

    def test_env_override(self, clean_env):
        clean_env.setenv("HEALTH_RATE_LIMIT", "5")
        clean_env.setenv("HEALTH_RATE_LIMIT_PERIOD_SECONDS", "10")
        assert RateLimitConfig.from_env() == RateLimitConfig(5, 10.0)


class TestSettings:
    """Tests for the global settings accessor."""

    def test_loaded_once(self, clean_env):
        clean_env.setenv("UDP_MONITOR_PORT", "27015")
        first = get_settings()
        clean_env.setenv("UDP_MONITOR_PORT", "27016")
        assert get_settings() is first
        assert first.probe.port == 27015

    def test_invalid_env_fails_load(self, clean_env):
        clean_env.setenv("UDP_MONITOR_PORT", "0")
        with pytest.raises(MalformedConfigError):
            get_settings()
