"""
ZeroMQ transport adapter

Sends JSON-RPC 2.0 requests over ZeroMQ REQ sockets. The context is shared
and each request gets its own socket, so concurrent calls from several
threads never interleave on one socket.
"""

import json
import logging
import time
from typing import Any, Dict

import zmq

from nearrpc.adapters.adapter_interface import TransportAdapterInterface
from nearrpc.envelope import RequestEnvelope
from nearrpc.errors import TransportError
from nearrpc.telemetry.metrics import increment_counter, record_latency
from nearrpc.telemetry.tracer import inject_trace_context

logger = logging.getLogger(__name__)


class ZeroMQTransport(TransportAdapterInterface):
    """ZeroMQ transport adapter implementing JSON-RPC 2.0 request-response"""

    DEFAULT_ADDRESS = "tcp://localhost:5555"

    def __init__(self,
                 server_address: str = DEFAULT_ADDRESS,
                 timeout_ms: int = 5000,
                 context: zmq.Context = None):
        """Initialize ZeroMQ transport

        Args:
            server_address: ZeroMQ server address
            timeout_ms: Send and receive timeout (milliseconds)
            context: Existing ZeroMQ context to share; a new one is owned otherwise
        """
        self.server_address = server_address
        self.timeout_ms = timeout_ms
        self._owns_context = context is None
        self.context = context if context is not None else zmq.Context()
        self._closed = False
        logger.info(f"ZeroMQ transport targeting {server_address}")

    def close(self):
        """Release the ZeroMQ context if this transport created it"""
        if self._closed:
            return
        self._closed = True
        if self._owns_context:
            self.context.term()

    def send(self, envelope: RequestEnvelope) -> Dict[str, Any]:
        """Send a JSON-RPC 2.0 request and wait for its response

        Args:
            envelope: Request envelope

        Returns:
            Dict: Decoded JSON-RPC response object

        Raises:
            TransportError: Timeout, connection failure or undecodable response
        """
        method = envelope.method
        if self._closed:
            raise TransportError("ZeroMQ transport is closed", kind=TransportError.SEND, method_name=method)

        request = envelope.to_dict()

        # Inject OpenTelemetry trace context
        trace_context = inject_trace_context()
        if trace_context:
            request["trace_context"] = trace_context

        try:
            request_json = json.dumps(request)
        except (TypeError, ValueError) as e:
            increment_counter("rpc.client.errors", 1, {"type": "send", "method": method})
            raise TransportError(f"cannot encode request: {e}", kind=TransportError.SEND, method_name=method) from e

        socket = self.context.socket(zmq.REQ)
        socket.setsockopt(zmq.RCVTIMEO, self.timeout_ms)
        socket.setsockopt(zmq.SNDTIMEO, self.timeout_ms)
        socket.setsockopt(zmq.LINGER, 0)

        start_time = time.time()
        try:
            socket.connect(self.server_address)
            logger.debug(f"Sending request: {request_json[:200]}...")
            socket.send(request_json.encode('utf-8'))
            increment_counter("rpc.client.requests", 1, {"method": method})

            response_bytes = socket.recv()

        except zmq.error.Again as e:
            latency_ms = (time.time() - start_time) * 1000
            logger.error(f"Request timed out after {latency_ms:.2f}ms")
            increment_counter("rpc.client.errors", 1, {"type": "timeout", "method": method})
            raise TransportError(f"ZeroMQ request timed out ({self.timeout_ms}ms)",
                                 kind=TransportError.TIMEOUT, method_name=method) from e

        except zmq.error.ZMQError as e:
            logger.error(f"ZeroMQ error: {e}")
            increment_counter("rpc.client.errors", 1, {"type": "zmq_error", "method": method})
            raise TransportError(f"ZeroMQ connection error: {e}", method_name=method) from e

        finally:
            socket.close()

        latency_ms = (time.time() - start_time) * 1000
        record_latency("rpc.client.latency", latency_ms, {"method": method})
        logger.debug(f"Received response, latency: {latency_ms:.2f}ms")

        try:
            response = json.loads(response_bytes.decode('utf-8'))
        except ValueError as e:
            logger.error(f"Invalid JSON response: {response_bytes[:200]!r}")
            increment_counter("rpc.client.errors", 1, {"type": "invalid_response", "method": method})
            raise TransportError("response is not valid JSON", kind=TransportError.MALFORMED_RESPONSE,
                                 method_name=method, raw=response_bytes) from e

        if isinstance(response, dict) and response.get("error") is not None:
            increment_counter("rpc.client.errors", 1, {"type": "rpc_error", "method": method})
        else:
            increment_counter("rpc.client.success", 1, {"method": method})

        return response
