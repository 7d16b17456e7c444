"""
Configuration settings for the deeply protocol layer
"""
import os
from typing import Dict, Any
from dataclasses import dataclass, field

DEFAULT_METHOD = "LMT_handle_jobs"

_TRUE_VALUES = ("1", "true", "yes", "on")


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUE_VALUES


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"Environment variable {name} must be an integer, got {value!r}")


@dataclass
class ProtocolConfig:
    """Configuration for the JSON-RPC codec"""
    default_method: str = DEFAULT_METHOD


@dataclass
class TelemetryConfig:
    """Configuration for OpenTelemetry tracing and metrics"""
    enable_tracing: bool = False
    enable_metrics: bool = False
    service_name: str = "deeply.protocol"
    otlp_endpoint: str = "localhost:4317"
    export_interval_ms: int = 5000
    console_export: bool = False


@dataclass
class DeeplyConfig:
    """Main configuration"""
    protocol: ProtocolConfig = field(default_factory=ProtocolConfig)
    telemetry: TelemetryConfig = field(default_factory=TelemetryConfig)

    @classmethod
    def default(cls) -> "DeeplyConfig":
        """Create default configuration"""
        return cls()

    @classmethod
    def from_env(cls) -> "DeeplyConfig":
        """Create config from environment variables"""
        return cls(
            protocol=ProtocolConfig(
                default_method=os.getenv("DEEPLY_DEFAULT_METHOD", DEFAULT_METHOD),
            ),
            telemetry=TelemetryConfig(
                enable_tracing=_env_bool("DEEPLY_ENABLE_TRACING", False),
                enable_metrics=_env_bool("DEEPLY_ENABLE_METRICS", False),
                service_name=os.getenv("DEEPLY_SERVICE_NAME", "deeply.protocol"),
                otlp_endpoint=os.getenv("DEEPLY_OTLP_ENDPOINT", "localhost:4317"),
                export_interval_ms=_env_int("DEEPLY_METRICS_EXPORT_INTERVAL_MS", 5000),
                console_export=_env_bool("DEEPLY_METRICS_CONSOLE_EXPORT", False),
            ),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            "default_method": self.protocol.default_method,
            "enable_tracing": self.telemetry.enable_tracing,
            "enable_metrics": self.telemetry.enable_metrics,
            "service_name": self.telemetry.service_name,
            "otlp_endpoint": self.telemetry.otlp_endpoint,
            "export_interval_ms": self.telemetry.export_interval_ms,
            "console_export": self.telemetry.console_export,
        }
