"""
nearrpc: typed JSON-RPC client for NEAR Protocol nodes

Every remote procedure is a sealed request type under nearrpc.methods that
declares its wire name, its params and the shapes of its success and error
replies. JsonRpcClient.call dispatches any of them over a pluggable transport
adapter (HTTP or ZeroMQ) and raises one of three error kinds on failure:

1. TransportError: no usable reply
2. ProtocolError: the server reported a method error
3. ShapeMismatchError: the reply did not match the declared types

Calls are traced with OpenTelemetry when tracing is configured.
"""

from .client import JsonRpcClient
from .config import ClientConfig, TransportType
from .envelope import RequestEnvelope
from .errors import (
    JsonRpcError,
    ProtocolError,
    SerializationError,
    ShapeMismatchError,
    TransportError,
)
from . import methods

__version__ = "0.1.0"

__all__ = [
    "JsonRpcClient",
    "ClientConfig",
    "TransportType",
    "RequestEnvelope",
    "JsonRpcError",
    "ProtocolError",
    "SerializationError",
    "ShapeMismatchError",
    "TransportError",
    "methods",
]
