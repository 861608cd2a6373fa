"""
HTTP Adapter Module

JSON-RPC over HTTP POST, the transport spoken by public RPC nodes.
"""

from .client import HttpTransport

__all__ = ["HttpTransport"]
