"""
ZeroMQ Adapter Module

JSON-RPC 2.0 transport over ZeroMQ REQ/REP sockets.
"""

from .client import ZeroMQTransport

__all__ = ["ZeroMQTransport"]
