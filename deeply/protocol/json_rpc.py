"""
JSON-RPC 2.0 protocol

Encodes API calls as JSON-RPC 2.0 request envelopes and validates the envelopes the
translation API sends back. Only the inner result object of a response is returned
to the caller; any deviation from the expected envelope raises ProtocolError.

@see https://www.jsonrpc.org/
"""

import json
import time
import logging
from typing import Any, Dict, Optional

from deeply.config import DEFAULT_METHOD
from deeply.protocol.errors import InvalidArgumentError, ProtocolError, SerializationError
from deeply.protocol.protocol_interface import ProtocolInterface
from deeply.telemetry.metrics import increment_counter, record_latency
from deeply.telemetry.tracer import create_span

logger = logging.getLogger(__name__)


class JsonRpcProtocol(ProtocolInterface):
    """
    JSON-RPC 2.0 codec for the translation API.
    Stateless: one instance can be shared between threads.
    """

    PROTOCOL_VERSION = "2.0"

    def __init__(self, default_method: str = DEFAULT_METHOD):
        """Initialize the codec

        Args:
            default_method: Method name used when encode_request() gets none
        """
        if not isinstance(default_method, str):
            raise InvalidArgumentError("The default_method argument has to be of type str")
        self.default_method = default_method

    @classmethod
    def from_config(cls, config) -> "JsonRpcProtocol":
        """Create a codec from a DeeplyConfig"""
        return cls(default_method=config.protocol.default_method)

    def encode_request(self, payload: Any, method: Optional[str] = None) -> str:
        """Create a JSON-RPC 2.0 request string

        Args:
            payload: The parameters of the request, encoded as the "params" member
            method: The method of the API call, None means the default method

        Returns:
            str: The request envelope encoded as JSON

        Raises:
            InvalidArgumentError: method is not None or a string, or payload is None
            SerializationError: payload contains values JSON cannot represent
        """
        if method is None:
            method = self.default_method
        if not isinstance(method, str):
            increment_counter("rpc.codec.errors", 1, {"type": "invalid_argument"})
            raise InvalidArgumentError("The method argument has to be None or of type str")
        if payload is None:
            increment_counter("rpc.codec.errors", 1, {"type": "invalid_argument", "method": method})
            raise InvalidArgumentError("The payload argument must not be None")

        with create_span("jsonrpc.encode_request", {"rpc.method": method}):
            request = {
                "jsonrpc": self.PROTOCOL_VERSION,
                "method": method,
                "params": payload
            }

            try:
                request_json = json.dumps(request, separators=(",", ":"), allow_nan=False)
            except (TypeError, ValueError, RecursionError) as e:
                logger.error(f"Could not serialize request for method {method}: {str(e)}")
                increment_counter("rpc.codec.errors", 1, {"type": "serialization", "method": method})
                raise SerializationError(f"Could not serialize the payload of method {method}: {str(e)}") from e

        logger.debug(f"Encoded request: {request_json[:200]}")
        increment_counter("rpc.codec.requests_encoded", 1, {"method": method})

        return request_json

    def decode_response(self, raw_response: str) -> Dict[str, Any]:
        """Process the raw data of a response to an API call

        Args:
            raw_response: The response body as a JSON string

        Returns:
            Dict: The inner result object of the response

        Raises:
            InvalidArgumentError: raw_response is not a string
            ProtocolError: the response is not valid JSON, not a JSON-RPC 2.0
                envelope, or reports an API error
        """
        if not isinstance(raw_response, str):
            increment_counter("rpc.codec.errors", 1, {"type": "invalid_argument"})
            raise InvalidArgumentError("The raw_response argument has to be of type str")

        start_time = time.time()

        with create_span("jsonrpc.decode_response"):
            try:
                response = json.loads(raw_response)
            # JSONDecodeError, integer digit limit, or nesting depth
            except (ValueError, RecursionError) as e:
                logger.error(f"Response is not valid JSON: {str(e)}")
                increment_counter("rpc.codec.errors", 1, {"type": "parse_error"})
                raise ProtocolError(f"API call did not return valid JSON: {str(e)}") from e

            self._validate_response(response)

        latency_ms = (time.time() - start_time) * 1000
        record_latency("rpc.codec.decode.latency", latency_ms)
        increment_counter("rpc.codec.responses_decoded", 1)

        result = response["result"]
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Decoded response in {latency_ms:.2f}ms, result keys: {list(result)[:20]}")

        # Only the inner result matters from here on
        return result

    def _validate_response(self, response: Any) -> None:
        """Validate a decoded response against the JSON-RPC 2.0 envelope

        Checks run in a fixed order and the first failing one is reported.

        Raises:
            ProtocolError: the envelope is malformed or carries an error
        """
        if not isinstance(response, dict):
            self._fail("API call did not return JSON that describes an object")

        if "jsonrpc" not in response:
            self._fail('The given response data does not look like a JSON-RPC response'
                       ' - it has no "jsonrpc" property')
        if response["jsonrpc"] != self.PROTOCOL_VERSION:
            self._fail(f"The version of the JSON-RPC response does not match the expected "
                       f"version {self.PROTOCOL_VERSION}")

        if "error" in response:
            error = response["error"]
            if isinstance(error, dict) and "message" in error:
                logger.error(f"API call error: {error['message']}, code: {error.get('code')}")
                increment_counter("rpc.codec.errors", 1, {
                    "type": "api_error",
                    "code": str(error.get("code", -1))
                })
                raise ProtocolError(
                    f"API call resulted in this error: {error['message']}",
                    code=error.get("code"),
                    api_message=error["message"],
                    data=error.get("data")
                )
            self._fail("API call resulted in an unknown error")

        if "result" not in response:
            self._fail("API call resulted in a malformed result - inner result property is missing")
        if not isinstance(response["result"], dict):
            self._fail("API call resulted in a malformed result - inner result property is not an object")

    @staticmethod
    def _fail(message: str):
        logger.error(f"Invalid JSON-RPC response: {message}")
        increment_counter("rpc.codec.errors", 1, {"type": "protocol_error"})
        raise ProtocolError(message)
