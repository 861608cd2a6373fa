"""
Configuration settings for the RPC client
"""
import os
from typing import Dict, Any, Optional
from dataclasses import dataclass, field
from enum import Enum


class TransportType(Enum):
    """Supported transports"""
    HTTP = "http"
    ZEROMQ = "zeromq"


DEFAULT_SERVER_ADDRESSES = {
    TransportType.HTTP: "https://archival-rpc.testnet.near.org",
    TransportType.ZEROMQ: "tcp://localhost:5555",
}

API_KEY_HEADER = "x-api-key"


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class ClientConfig:
    """Main configuration for JsonRpcClient"""
    transport: TransportType = TransportType.HTTP
    server_address: Optional[str] = None
    timeout_ms: int = 10000
    api_key: Optional[str] = None
    headers: Dict[str, str] = field(default_factory=dict)

    # Tracing configuration
    enable_tracing: bool = False
    service_name: str = "nearrpc.client"
    otlp_endpoint: str = "localhost:4317"

    def __post_init__(self):
        if not isinstance(self.transport, TransportType):
            self.transport = TransportType(str(self.transport).lower())
        if self.server_address is None:
            self.server_address = DEFAULT_SERVER_ADDRESSES[self.transport]
        if self.timeout_ms <= 0:
            raise ValueError(f"timeout_ms must be positive, got {self.timeout_ms}")

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Create config from environment variables"""
        return cls(
            transport=TransportType(os.getenv("NEAR_RPC_TRANSPORT", TransportType.HTTP.value).lower()),
            server_address=os.getenv("NEAR_RPC_URL"),
            timeout_ms=int(os.getenv("NEAR_RPC_TIMEOUT_MS", "10000")),
            api_key=os.getenv("NEAR_RPC_API_KEY"),
            enable_tracing=_env_flag("NEAR_RPC_ENABLE_TRACING", False),
            service_name=os.getenv("NEAR_RPC_SERVICE_NAME", "nearrpc.client"),
            otlp_endpoint=os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT", "localhost:4317"),
        )

    def request_headers(self) -> Dict[str, str]:
        headers = dict(self.headers)
        if self.api_key:
            headers[API_KEY_HEADER] = self.api_key
        return headers

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the adapter factory's configuration mapping"""
        return {
            "server_address": self.server_address,
            "timeout_ms": self.timeout_ms,
            "headers": self.request_headers(),
        }
