"""
JSON-RPC client

JsonRpcClient.call is the single call path for every RPC method: it asks the
method for its name and params, hands the request envelope to the transport
adapter, and decodes the reply with the types the method declares. Nothing in
the call path depends on which method is being called.
"""

from typing import Any, Dict, Optional

from pydantic import ValidationError

from nearrpc.adapters.adapter_factory import AdapterFactory
from nearrpc.adapters.adapter_interface import TransportAdapterInterface
from nearrpc.adapters.http.client import HttpTransport
from nearrpc.config import ClientConfig
from nearrpc.envelope import RequestEnvelope, parse_response
from nearrpc.errors import ProtocolError, SerializationError, ShapeMismatchError, TransportError
from nearrpc.methods.base import RpcMethod, lookup
from nearrpc.telemetry.tracer import create_span, setup_tracer


class JsonRpcClient:
    """Dispatches RpcMethod instances over a transport adapter

    The client keeps no per-call state, so one instance can serve any number
    of concurrent calls as long as its transport can.
    """

    def __init__(self, transport: TransportAdapterInterface):
        self.transport = transport

    @classmethod
    def connect(cls,
                server_address: str,
                headers: Optional[Dict[str, str]] = None,
                timeout_ms: int = 10000) -> "JsonRpcClient":
        """Create a client talking JSON-RPC over HTTP to ``server_address``"""
        return cls(HttpTransport(server_address=server_address, timeout_ms=timeout_ms, headers=headers))

    @classmethod
    def from_config(cls, config: Optional[ClientConfig] = None) -> "JsonRpcClient":
        """Create a client from configuration, read from the environment by default"""
        if config is None:
            config = ClientConfig.from_env()
        if config.enable_tracing:
            setup_tracer(config.service_name, config.otlp_endpoint)
        transport = AdapterFactory.create_transport(config.transport.value, config.to_dict())
        return cls(transport)

    def close(self):
        self.transport.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def call(self, method: RpcMethod) -> Any:
        """Call a remote method

        Args:
            method: Request to send

        Returns:
            The ``result`` decoded into ``method.response_type``

        Raises:
            TypeError: ``method`` is not a registered RpcMethod
            TransportError: No usable reply was received
            ProtocolError: The server reported an error, or the params could
                not be serialized
            ShapeMismatchError: The reply does not match the declared types
        """
        spec = lookup(method)
        method_name = method.method_name()

        try:
            envelope = self._build_envelope(method, method_name)
        except SerializationError as e:
            raise ProtocolError(e, method_name=method_name) from e

        attributes = {
            "rpc.system": "jsonrpc",
            "rpc.method": method_name,
            "rpc.jsonrpc.request_id": envelope.id,
        }
        with create_span(f"rpc.call {method_name}", attributes):
            raw = self._send(envelope)
            response = parse_response(raw, envelope)

            if response.is_error:
                try:
                    error = spec.error_adapter.validate_python(response.error)
                except ValidationError as e:
                    raise ShapeMismatchError("error", response.error, e, method_name=method_name) from e
                raise ProtocolError(error, method_name=method_name, raw=response.error)

            try:
                return spec.response_adapter.validate_python(response.result)
            except ValidationError as e:
                raise ShapeMismatchError("result", response.result, e, method_name=method_name) from e

    @staticmethod
    def _build_envelope(method: RpcMethod, method_name: str) -> RequestEnvelope:
        """Build the request envelope, failing before any I/O if params cannot be encoded"""
        try:
            envelope = RequestEnvelope(method=method_name, params=method.params())
            envelope.to_json()
        except SerializationError:
            raise
        except (TypeError, ValueError) as e:
            raise SerializationError(f"params are not JSON-encodable: {e}") from e
        return envelope

    def _send(self, envelope: RequestEnvelope) -> Any:
        try:
            return self.transport.send(envelope)
        except TransportError as e:
            if e.method_name is None:
                e.method_name = envelope.method
            raise
        except OSError as e:
            # Includes ConnectionError and TimeoutError from custom transports
            kind = TransportError.TIMEOUT if isinstance(e, TimeoutError) else TransportError.CONNECTION
            raise TransportError(str(e) or type(e).__name__, kind=kind, method_name=envelope.method) from e
