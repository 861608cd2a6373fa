"""
Unified RPC error taxonomy

Every failure of JsonRpcClient.call surfaces as one of three exception kinds,
whichever method was called:

- TransportError: no usable reply reached the client
- ProtocolError: the server reported a method error, decoded into the
  method's declared error type
- ShapeMismatchError: the reply did not match the declared shape
"""

import json
from typing import Any, Optional

# Raw payloads are truncated to this many characters in messages
SNIPPET_LENGTH = 200


def payload_snippet(payload: Any, limit: int = SNIPPET_LENGTH) -> str:
    """Render a raw payload as a short string for error messages"""
    if isinstance(payload, bytes):
        text = payload.decode("utf-8", errors="replace")
    elif isinstance(payload, str):
        text = payload
    else:
        try:
            text = json.dumps(payload, default=repr)
        except (TypeError, ValueError):
            text = repr(payload)
    if len(text) > limit:
        return text[:limit] + "..."
    return text


class SerializationError(ValueError):
    """Raised by RpcMethod.params() when a field cannot be encoded"""


class JsonRpcError(Exception):
    """Base class of every error raised by JsonRpcClient.call"""

    def __init__(self, message: str, method_name: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.method_name = method_name

    def __str__(self) -> str:
        if self.method_name:
            return f"[{self.method_name}] {self.message}"
        return self.message


class TransportError(JsonRpcError):
    """No usable reply: connection failure, timeout or malformed envelope"""

    CONNECTION = "connection"
    TIMEOUT = "timeout"
    HTTP_STATUS = "http_status"
    MALFORMED_RESPONSE = "malformed_response"
    ID_MISMATCH = "id_mismatch"
    SEND = "send"

    def __init__(self,
                 message: str,
                 kind: str = CONNECTION,
                 method_name: Optional[str] = None,
                 raw: Any = None,
                 status_code: Optional[int] = None):
        super().__init__(message, method_name)
        self.kind = kind
        self.raw = raw
        self.status_code = status_code

    def __str__(self) -> str:
        text = f"{super().__str__()} ({self.kind})"
        if self.raw is not None:
            text += f": {payload_snippet(self.raw)}"
        return text


class ProtocolError(JsonRpcError):
    """The server reported an error for this method

    ``error`` holds the payload decoded into the method's ``error_type``, or
    the SerializationError when the request parameters could not be built.
    """

    def __init__(self, error: Any, method_name: Optional[str] = None, raw: Any = None):
        if isinstance(error, SerializationError):
            message = f"cannot serialize params: {error}"
        else:
            message = f"server returned an error: {error!r}"
        super().__init__(message, method_name)
        self.error = error
        self.raw = raw


class ShapeMismatchError(JsonRpcError):
    """The reply did not decode into the declared success or error type"""

    def __init__(self,
                 expected: str,
                 raw: Any,
                 reason: Any = None,
                 method_name: Optional[str] = None):
        super().__init__(
            f"could not decode {expected} payload: {payload_snippet(raw)}",
            method_name,
        )
        self.expected = expected
        self.raw = raw
        self.reason = reason
