"""
HTTP transport adapter

Posts JSON-RPC requests to an RPC node with httpx. A single httpx.Client is
shared by all calls; it pools connections and is safe to use from several
threads.
"""

import logging
import time
from typing import Any, Dict, Optional

import httpx

from nearrpc.adapters.adapter_interface import TransportAdapterInterface
from nearrpc.envelope import RequestEnvelope
from nearrpc.errors import TransportError
from nearrpc.telemetry.metrics import increment_counter, record_latency
from nearrpc.telemetry.tracer import inject_trace_headers

logger = logging.getLogger(__name__)


class HttpTransport(TransportAdapterInterface):
    """HTTP transport adapter for JSON-RPC 2.0"""

    DEFAULT_ADDRESS = "https://archival-rpc.testnet.near.org"

    def __init__(self,
                 server_address: str = DEFAULT_ADDRESS,
                 timeout_ms: int = 10000,
                 headers: Optional[Dict[str, str]] = None,
                 client: Optional[httpx.Client] = None):
        """Initialize HTTP transport

        Args:
            server_address: RPC endpoint URL
            timeout_ms: Request timeout (milliseconds)
            headers: Extra headers sent with every request, e.g. an API key
            client: Existing httpx client to use; a new one is owned otherwise
        """
        self.server_address = server_address
        self.timeout_ms = timeout_ms
        self.headers = dict(headers or {})
        self._owns_client = client is None
        self.client = client if client is not None else httpx.Client(timeout=timeout_ms / 1000.0)
        logger.info(f"HTTP transport targeting {server_address}")

    def close(self):
        if self._owns_client:
            self.client.close()

    def send(self, envelope: RequestEnvelope) -> Dict[str, Any]:
        """POST a JSON-RPC request and return the decoded response body

        Args:
            envelope: Request envelope

        Returns:
            Dict: Decoded JSON-RPC response object

        Raises:
            TransportError: Timeout, connection failure, HTTP error status
                without a JSON-RPC body, or undecodable body
        """
        method = envelope.method
        try:
            body = envelope.to_json()
        except (TypeError, ValueError) as e:
            increment_counter("rpc.client.errors", 1, {"type": "send", "method": method})
            raise TransportError(f"cannot encode request: {e}", kind=TransportError.SEND, method_name=method) from e

        headers = {"Content-Type": "application/json", **self.headers}
        headers = inject_trace_headers(headers)

        start_time = time.time()
        try:
            logger.debug(f"POST {self.server_address}: {body[:200]}...")
            increment_counter("rpc.client.requests", 1, {"method": method})
            response = self.client.post(self.server_address, content=body, headers=headers)

        except httpx.TimeoutException as e:
            latency_ms = (time.time() - start_time) * 1000
            logger.error(f"Request timed out after {latency_ms:.2f}ms")
            increment_counter("rpc.client.errors", 1, {"type": "timeout", "method": method})
            raise TransportError(f"HTTP request timed out ({self.timeout_ms}ms)",
                                 kind=TransportError.TIMEOUT, method_name=method) from e

        except httpx.HTTPError as e:
            logger.error(f"HTTP error calling {self.server_address}: {e}")
            increment_counter("rpc.client.errors", 1, {"type": "http_error", "method": method})
            raise TransportError(f"HTTP connection error: {e}", method_name=method) from e

        latency_ms = (time.time() - start_time) * 1000
        record_latency("rpc.client.latency", latency_ms, {"method": method})
        logger.debug(f"Received HTTP {response.status_code}, latency: {latency_ms:.2f}ms")

        try:
            data = response.json()
        except ValueError as e:
            if response.is_success:
                logger.error(f"Invalid JSON response: {response.text[:200]}")
                increment_counter("rpc.client.errors", 1, {"type": "invalid_response", "method": method})
                raise TransportError("response is not valid JSON", kind=TransportError.MALFORMED_RESPONSE,
                                     method_name=method, raw=response.content) from e
            data = None

        # Nodes answer some handler errors with an error status and a JSON-RPC body
        if not response.is_success and not (isinstance(data, dict) and data.get("error") is not None):
            logger.error(f"HTTP status {response.status_code} from {self.server_address}")
            increment_counter("rpc.client.errors", 1, {"type": "http_status", "method": method})
            raise TransportError(f"HTTP status {response.status_code}", kind=TransportError.HTTP_STATUS,
                                 method_name=method, raw=response.text, status_code=response.status_code)

        if isinstance(data, dict) and data.get("error") is not None:
            increment_counter("rpc.client.errors", 1, {"type": "rpc_error", "method": method})
        else:
            increment_counter("rpc.client.success", 1, {"method": method})

        return data
