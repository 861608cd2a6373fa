"""
ZeroMQ transport contract tests

Run JsonRpcClient over the ZeroMQ transport against a REP socket served from
a background thread.
"""

import json
import threading
from concurrent.futures import ThreadPoolExecutor

import pytest
import zmq

from nearrpc.adapters.zeromq.client import ZeroMQTransport
from nearrpc.client import JsonRpcClient
from nearrpc.envelope import RequestEnvelope
from nearrpc.errors import ProtocolError, TransportError
from nearrpc.methods import RpcGasPriceRequest, RpcHealthRequest

# Test server addresses
TEST_SERVER_ADDRESS = "tcp://127.0.0.1:15555"
UNUSED_ADDRESS = "tcp://127.0.0.1:15599"


class EchoServer:
    """REP server answering each request with handler(request)"""

    def __init__(self, address, handler):
        self.address = address
        self.handler = handler
        self.requests = []
        self._stop = threading.Event()
        self._ready = threading.Event()
        self._thread = threading.Thread(target=self._serve, daemon=True)

    def _serve(self):
        context = zmq.Context()
        socket = context.socket(zmq.REP)
        socket.setsockopt(zmq.LINGER, 0)
        socket.bind(self.address)
        self._ready.set()
        poller = zmq.Poller()
        poller.register(socket, zmq.POLLIN)
        try:
            while not self._stop.is_set():
                if not dict(poller.poll(50)):
                    continue
                raw = socket.recv()
                self.requests.append(raw)
                reply = self.handler(json.loads(raw.decode("utf-8")))
                socket.send(reply if isinstance(reply, bytes) else json.dumps(reply).encode("utf-8"))
        finally:
            socket.close()
            context.term()

    def start(self):
        self._thread.start()
        self._ready.wait(timeout=5)

    def stop(self):
        self._stop.set()
        self._thread.join(timeout=5)


def gas_price_for_block(request):
    """Answer gas_price with the requested block id as price"""
    block_id = request["params"][0]
    if block_id is None:
        return {"jsonrpc": "2.0", "id": request["id"],
                "error": {"code": -32000, "name": "HANDLER_ERROR",
                          "cause": {"name": "UNKNOWN_BLOCK", "info": {}}}}
    return {"jsonrpc": "2.0", "id": request["id"], "result": {"gas_price": str(block_id)}}


@pytest.fixture
def server():
    """Create and start test server"""
    server = EchoServer(TEST_SERVER_ADDRESS, gas_price_for_block)
    server.start()
    yield server
    server.stop()


@pytest.fixture
def zmq_transport(server):
    transport = ZeroMQTransport(server_address=TEST_SERVER_ADDRESS, timeout_ms=2000)
    yield transport
    transport.close()


def test_raw_roundtrip(server, zmq_transport):
    envelope = RequestEnvelope(method="gas_price", params=[42])

    response = zmq_transport.send(envelope)

    assert response == {"jsonrpc": "2.0", "id": envelope.id, "result": {"gas_price": "42"}}
    sent = json.loads(server.requests[0])
    assert sent["method"] == "gas_price"
    assert sent["params"] == [42]
    assert sent["id"] == envelope.id


def test_client_call(zmq_transport):
    client = JsonRpcClient(zmq_transport)

    assert client.call(RpcGasPriceRequest(block_id=100)).gas_price == 100


def test_protocol_error(zmq_transport):
    client = JsonRpcClient(zmq_transport)

    with pytest.raises(ProtocolError) as excinfo:
        client.call(RpcGasPriceRequest())

    assert excinfo.value.error.kind == "UNKNOWN_BLOCK"


def test_concurrent_calls(zmq_transport):
    client = JsonRpcClient(zmq_transport)
    block_ids = list(range(1, 21))

    with ThreadPoolExecutor(max_workers=8) as pool:
        prices = list(pool.map(lambda block_id: client.call(RpcGasPriceRequest(block_id=block_id)).gas_price,
                               block_ids))

    assert prices == block_ids


def test_invalid_json_reply():
    server = EchoServer(TEST_SERVER_ADDRESS, lambda request: b"not json")
    server.start()
    try:
        with ZeroMQTransport(server_address=TEST_SERVER_ADDRESS, timeout_ms=2000) as transport:
            with pytest.raises(TransportError) as excinfo:
                transport.send(RequestEnvelope(method="health", params=[]))
        assert excinfo.value.kind == TransportError.MALFORMED_RESPONSE
    finally:
        server.stop()


def test_timeout_without_server():
    transport = ZeroMQTransport(server_address=UNUSED_ADDRESS, timeout_ms=200)
    try:
        with pytest.raises(TransportError) as excinfo:
            JsonRpcClient(transport).call(RpcHealthRequest())
        assert excinfo.value.kind == TransportError.TIMEOUT
        assert excinfo.value.method_name == "health"
    finally:
        transport.close()


def test_closed_transport():
    transport = ZeroMQTransport(server_address=UNUSED_ADDRESS)
    transport.close()

    with pytest.raises(TransportError) as excinfo:
        transport.send(RequestEnvelope(method="health", params=[]))

    assert excinfo.value.kind == TransportError.SEND


def test_shared_context_not_terminated():
    context = zmq.Context()
    try:
        transport = ZeroMQTransport(server_address=UNUSED_ADDRESS, context=context)
        transport.close()
        assert not context.closed
    finally:
        context.term()
