"""
Adapter factory

Creates transport adapter instances (HTTP, ZeroMQ) from a type name and a
configuration mapping.
"""

from typing import Dict, Any, Union

from nearrpc.adapters.adapter_interface import TransportAdapterInterface
from nearrpc.adapters.http.client import HttpTransport
from nearrpc.adapters.zeromq.client import ZeroMQTransport
from nearrpc.config import TransportType


class AdapterFactory:
    """Adapter factory, used to create transport adapter instances"""

    @staticmethod
    def create_transport(adapter_type: Union[TransportType, str], config: Dict[str, Any] = None) -> TransportAdapterInterface:
        """Create transport adapter

        Args:
            adapter_type: TransportType, or its value "http" or "zeromq"
            config: Adapter configuration parameters

        Returns:
            TransportAdapterInterface: Transport adapter instance

        Raises:
            ValueError: Invalid adapter type
        """
        if config is None:
            config = {}
        if isinstance(adapter_type, TransportType):
            adapter_type = adapter_type.value

        if adapter_type.lower() == TransportType.HTTP.value:
            return HttpTransport(
                server_address=config.get("server_address", HttpTransport.DEFAULT_ADDRESS),
                timeout_ms=config.get("timeout_ms", 10000),
                headers=config.get("headers")
            )
        elif adapter_type.lower() == TransportType.ZEROMQ.value:
            return ZeroMQTransport(
                server_address=config.get("server_address", ZeroMQTransport.DEFAULT_ADDRESS),
                timeout_ms=config.get("timeout_ms", 5000)
            )
        else:
            raise ValueError(f"Invalid adapter type: {adapter_type}")
