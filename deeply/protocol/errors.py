"""
Protocol error types

Every failure raised by the protocol layer derives from DeeplyError so callers can
catch the whole family at once, or pick the specific kind they care about.
"""

from typing import Any, Optional


class DeeplyError(Exception):
    """Base class for all errors raised by the deeply package."""


class InvalidArgumentError(DeeplyError, TypeError):
    """Raised when a caller passes an argument of the wrong type."""


class SerializationError(DeeplyError, ValueError):
    """Raised when a request payload cannot be encoded as JSON."""


class ProtocolError(DeeplyError):
    """Raised when a response does not conform to the JSON-RPC envelope.

    Also covers the case where the API itself reported an error. In that case
    ``api_message``, ``code`` and ``data`` carry the fields of the error object
    verbatim.
    """

    def __init__(self,
                 message: str,
                 *,
                 code: Optional[Any] = None,
                 api_message: Optional[Any] = None,
                 data: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.api_message = api_message
        self.data = data

