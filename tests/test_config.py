"""
Tests for deeply configuration
"""
import os
import pytest
from unittest.mock import patch

from deeply.config import (
    DEFAULT_METHOD,
    DeeplyConfig,
    ProtocolConfig,
    TelemetryConfig
)
from deeply.protocol import JsonRpcProtocol


class TestDefaults:
    """Test default configuration values"""

    def test_protocol_defaults(self):
        """Test default protocol config"""
        assert ProtocolConfig().default_method == "LMT_handle_jobs" == DEFAULT_METHOD

    def test_telemetry_defaults(self):
        """Test default telemetry config"""
        config = TelemetryConfig()
        assert config.enable_tracing is False
        assert config.enable_metrics is False
        assert config.service_name == "deeply.protocol"
        assert config.otlp_endpoint == "localhost:4317"
        assert config.export_interval_ms == 5000
        assert config.console_export is False

    def test_default_config(self):
        """Test DeeplyConfig.default() matches the dataclass defaults"""
        assert DeeplyConfig.default() == DeeplyConfig(ProtocolConfig(), TelemetryConfig())


class TestFromEnv:
    """Test configuration loading from environment variables"""

    def test_empty_environment(self):
        """Test defaults are used when nothing is set"""
        with patch.dict(os.environ, clear=True):
            assert DeeplyConfig.from_env() == DeeplyConfig.default()

    def test_all_variables(self):
        """Test every variable is read"""
        with patch.dict(os.environ, {
            "DEEPLY_DEFAULT_METHOD": "LMT_split_into_sentences",
            "DEEPLY_ENABLE_TRACING": "true",
            "DEEPLY_ENABLE_METRICS": "1",
            "DEEPLY_SERVICE_NAME": "translator",
            "DEEPLY_OTLP_ENDPOINT": "otel:4317",
            "DEEPLY_METRICS_EXPORT_INTERVAL_MS": "250",
            "DEEPLY_METRICS_CONSOLE_EXPORT": "yes"
        }, clear=True):
            config = DeeplyConfig.from_env()
            assert config.protocol.default_method == "LMT_split_into_sentences"
            assert config.telemetry.enable_tracing is True
            assert config.telemetry.enable_metrics is True
            assert config.telemetry.service_name == "translator"
            assert config.telemetry.otlp_endpoint == "otel:4317"
            assert config.telemetry.export_interval_ms == 250
            assert config.telemetry.console_export is True

    @pytest.mark.parametrize("value,expected", [
        ("YES", True), ("on", True), (" True ", True),
        ("0", False), ("false", False), ("", False), ("maybe", False),
    ])
    def test_boolean_values(self, value, expected):
        """Test boolean parsing of flag variables"""
        with patch.dict(os.environ, {"DEEPLY_ENABLE_TRACING": value}, clear=True):
            assert DeeplyConfig.from_env().telemetry.enable_tracing is expected

    def test_invalid_integer(self):
        """Test an invalid interval names the variable"""
        with patch.dict(os.environ, {"DEEPLY_METRICS_EXPORT_INTERVAL_MS": "soon"}, clear=True):
            with pytest.raises(ValueError, match="DEEPLY_METRICS_EXPORT_INTERVAL_MS"):
                DeeplyConfig.from_env()


class TestConfigUsage:
    """Test using the configuration"""

    def test_to_dict(self):
        """Test config serialization to dictionary"""
        config_dict = DeeplyConfig.default().to_dict()
        assert config_dict == {
            "default_method": "LMT_handle_jobs",
            "enable_tracing": False,
            "enable_metrics": False,
            "service_name": "deeply.protocol",
            "otlp_endpoint": "localhost:4317",
            "export_interval_ms": 5000,
            "console_export": False,
        }

    def test_protocol_from_config(self):
        """Test building a codec from config"""
        config = DeeplyConfig(protocol=ProtocolConfig(default_method="getClientState"))
        protocol = JsonRpcProtocol.from_config(config)
        assert protocol.default_method == "getClientState"
