"""
JSON-RPC 2.0 envelopes

The request envelope handed to transport adapters and the validation of the
top-level reply they return.
"""

import json
import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union

from nearrpc.errors import TransportError

JSONRPC_VERSION = "2.0"


def new_request_id() -> str:
    """Return a correlation id unique to one call"""
    return uuid.uuid4().hex


@dataclass(frozen=True)
class RequestEnvelope:
    """Transport-neutral request: method name, parameters and correlation id"""
    method: str
    params: Any
    id: str = field(default_factory=new_request_id)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "jsonrpc": JSONRPC_VERSION,
            "method": self.method,
            "params": self.params,
            "id": self.id,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict())


@dataclass(frozen=True)
class ResponseEnvelope:
    """Validated top-level reply; exactly one of result/error is meaningful"""
    id: Optional[str]
    result: Any = None
    error: Any = None
    is_error: bool = False


def parse_response(raw: Union[Dict[str, Any], str, bytes],
                   request: RequestEnvelope) -> ResponseEnvelope:
    """Validate a raw reply against the request it answers

    Args:
        raw: Reply as returned by the adapter, decoded or not
        request: The request envelope the reply is expected to answer

    Returns:
        ResponseEnvelope: The validated reply

    Raises:
        TransportError: The reply is not a usable JSON-RPC response
    """
    method = request.method
    data = raw
    if isinstance(raw, (bytes, bytearray)):
        try:
            data = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise TransportError("response is not valid UTF-8",
                                 kind=TransportError.MALFORMED_RESPONSE,
                                 method_name=method, raw=raw) from e
    if isinstance(data, str):
        try:
            data = json.loads(data)
        except ValueError as e:
            raise TransportError("response is not valid JSON",
                                 kind=TransportError.MALFORMED_RESPONSE,
                                 method_name=method, raw=raw) from e

    if not isinstance(data, dict):
        raise TransportError("response is not a JSON-RPC object",
                             kind=TransportError.MALFORMED_RESPONSE,
                             method_name=method, raw=data)

    version = data.get("jsonrpc")
    if version is not None and version != JSONRPC_VERSION:
        raise TransportError(f"unsupported JSON-RPC version {version!r}",
                             kind=TransportError.MALFORMED_RESPONSE,
                             method_name=method, raw=data)

    # A missing id is tolerated, a different one is not
    response_id = data.get("id")
    if response_id is not None and response_id != request.id:
        raise TransportError(f"response id {response_id!r} does not match request id {request.id!r}",
                             kind=TransportError.ID_MISMATCH,
                             method_name=method, raw=data)

    has_result = "result" in data
    has_error = "error" in data and data["error"] is not None
    if has_error and has_result and data["result"] is not None:
        raise TransportError("response carries both result and error",
                             kind=TransportError.MALFORMED_RESPONSE,
                             method_name=method, raw=data)
    if has_error:
        return ResponseEnvelope(id=response_id, error=data["error"], is_error=True)
    if has_result:
        return ResponseEnvelope(id=response_id, result=data["result"])
    raise TransportError("response carries neither result nor error",
                         kind=TransportError.MALFORMED_RESPONSE,
                         method_name=method, raw=data)
