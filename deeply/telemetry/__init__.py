"""
OpenTelemetry Integration Module

Provides tracing and metrics for the protocol layer:
- tracer: Tracer setup and span creation
- metrics: Counters and latency histograms
"""

import logging

from .tracer import setup_tracer, create_span
from .metrics import (
    setup_metrics,
    get_counter,
    get_histogram,
    increment_counter,
    record_latency
)

logger = logging.getLogger(__name__)

def setup_telemetry(config):
    """Install tracer and meter providers according to a TelemetryConfig

    Args:
        config: TelemetryConfig instance

    Returns:
        Tuple: (tracer or None, meter or None)
    """
    tracer = None
    meter = None
    if config.enable_tracing:
        tracer = setup_tracer(config.service_name, config.otlp_endpoint)
    if config.enable_metrics:
        meter = setup_metrics(
            config.service_name,
            otlp_endpoint=config.otlp_endpoint,
            export_interval_ms=config.export_interval_ms,
            console_export=config.console_export
        )
    if tracer is None and meter is None:
        logger.debug("Telemetry disabled, using OpenTelemetry no-op providers")
    return tracer, meter

__all__ = [
    "setup_telemetry",
    "setup_tracer",
    "create_span",
    "setup_metrics",
    "get_counter",
    "get_histogram",
    "increment_counter",
    "record_latency"
]
