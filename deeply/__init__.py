"""
deeply - JSON-RPC protocol layer for the DeepL translation API

Encodes API calls into JSON-RPC 2.0 request envelopes and validates the responses
before handing the inner result to the caller. Network transport, retries and
caching are left to the caller.
"""

from deeply.config import DEFAULT_METHOD, DeeplyConfig, ProtocolConfig, TelemetryConfig
from deeply.protocol import (
    DeeplyError,
    InvalidArgumentError,
    JsonRpcProtocol,
    ProtocolError,
    ProtocolInterface,
    SerializationError
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_METHOD",
    "DeeplyConfig",
    "ProtocolConfig",
    "TelemetryConfig",
    "DeeplyError",
    "InvalidArgumentError",
    "JsonRpcProtocol",
    "ProtocolError",
    "ProtocolInterface",
    "SerializationError"
]
