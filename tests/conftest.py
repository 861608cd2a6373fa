"""
Shared fixtures: a scriptable in-process transport for JsonRpcClient tests
"""

import threading

import pytest

from nearrpc.adapters.adapter_interface import TransportAdapterInterface
from nearrpc.client import JsonRpcClient


class StubTransport(TransportAdapterInterface):
    """Transport whose replies come from a handler(envelope) function"""

    def __init__(self):
        self.handler = lambda envelope: {"jsonrpc": "2.0", "id": envelope.id, "result": None}
        self.sent = []
        self.closed = False
        self._lock = threading.Lock()

    def reply_with(self, result=None, error=None):
        """Answer every request with a fixed result, or error when given"""
        def handler(envelope):
            response = {"jsonrpc": "2.0", "id": envelope.id}
            if error is not None:
                response["error"] = error
            else:
                response["result"] = result
            return response
        self.handler = handler

    def send(self, envelope):
        with self._lock:
            self.sent.append(envelope)
        return self.handler(envelope)

    def close(self):
        self.closed = True


@pytest.fixture
def transport():
    return StubTransport()


@pytest.fixture
def client(transport):
    return JsonRpcClient(transport)
