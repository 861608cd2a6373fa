"""
Transport Adapters Module

Adapter implementations providing one interface over different transports:
- http: JSON-RPC over HTTP POST (httpx)
- zeromq: JSON-RPC 2.0 over ZeroMQ REQ/REP

All adapters inject OpenTelemetry trace context and record client metrics.
"""

from .adapter_factory import AdapterFactory
from .adapter_interface import TransportAdapterInterface

__all__ = [
    "AdapterFactory",
    "TransportAdapterInterface"
]
