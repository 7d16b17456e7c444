"""
Protocol interface

Defines the interface every wire protocol implementation provides. The API client
only talks to this interface, so the encoding can change without touching the
higher-level method wrappers.
"""

import abc
from typing import Any, Dict, Optional


class ProtocolInterface(abc.ABC):
    """Protocol interface: turn calls into request strings and response strings into results"""

    @abc.abstractmethod
    def encode_request(self, payload: Any, method: Optional[str] = None) -> str:
        """Encode an API call as a request string

        Args:
            payload: Parameters of the call, must be serializable
            method: Name of the remote method, None means the default method

        Returns:
            str: Request data ready to be sent by the transport

        Raises:
            InvalidArgumentError: method is not a string or payload is missing
            SerializationError: payload cannot be serialized
        """
        pass

    @abc.abstractmethod
    def decode_response(self, raw_response: str) -> Dict[str, Any]:
        """Decode and validate a raw response string

        Args:
            raw_response: Response body as received from the transport

        Returns:
            Dict: The inner result object of the response

        Raises:
            InvalidArgumentError: raw_response is not a string
            ProtocolError: the response is malformed or reports an error
        """
        pass
