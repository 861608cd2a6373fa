"""
Error taxonomy tests
"""

from nearrpc.errors import (
    JsonRpcError,
    ProtocolError,
    SerializationError,
    ShapeMismatchError,
    TransportError,
    payload_snippet,
)


def test_every_kind_is_a_jsonrpc_error():
    for error_class in (TransportError, ProtocolError, ShapeMismatchError):
        assert issubclass(error_class, JsonRpcError)


def test_transport_error_message():
    error = TransportError("HTTP status 503", kind=TransportError.HTTP_STATUS,
                           method_name="status", raw="Service Unavailable", status_code=503)

    assert str(error) == "[status] HTTP status 503 (http_status): Service Unavailable"
    assert error.status_code == 503


def test_protocol_error_keeps_decoded_value():
    decoded = {"code": "InvalidNonce"}
    error = ProtocolError(decoded, method_name="broadcast_tx_commit", raw=decoded)

    assert error.error is decoded
    assert str(error).startswith("[broadcast_tx_commit] server returned an error")


def test_protocol_error_for_local_serialization_failure():
    error = ProtocolError(SerializationError("empty signed transaction"), method_name="broadcast_tx_async")

    assert str(error) == "[broadcast_tx_async] cannot serialize params: empty signed transaction"
    assert "server returned" not in str(error)


def test_shape_mismatch_includes_payload():
    error = ShapeMismatchError("result", {"unexpected": 1}, method_name="block")

    assert '"unexpected": 1' in str(error)
    assert error.raw == {"unexpected": 1}


def test_snippet_truncates_long_payloads():
    snippet = payload_snippet("x" * 1000, limit=10)

    assert snippet == "x" * 10 + "..."


def test_snippet_of_bytes():
    assert payload_snippet(b"abc") == "abc"
