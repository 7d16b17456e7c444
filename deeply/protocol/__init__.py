"""
Protocol Package

Wire protocol implementations used to talk to the translation API:
- json_rpc: JSON-RPC 2.0 request encoding and response validation

Transport (HTTP or otherwise) is not handled here; the protocol only turns calls
into request strings and response strings into result objects.
"""

from deeply.protocol.errors import (
    DeeplyError,
    InvalidArgumentError,
    ProtocolError,
    SerializationError
)
from deeply.protocol.json_rpc import JsonRpcProtocol
from deeply.protocol.protocol_interface import ProtocolInterface

__all__ = [
    "DeeplyError",
    "InvalidArgumentError",
    "JsonRpcProtocol",
    "ProtocolError",
    "ProtocolInterface",
    "SerializationError"
]
