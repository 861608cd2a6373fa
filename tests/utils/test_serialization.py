"""
Payload serialization tests
"""

import base64
import json

import pytest
from google.protobuf.api_pb2 import Method

from nearrpc.errors import SerializationError
from nearrpc.methods import RpcCheckTxRequest
from nearrpc.utils.serialization import (
    payload_from_dict,
    payload_from_json,
    payload_to_base64,
    payload_to_dict,
    payload_to_json,
)

SIGNED = {"name": "transfer", "request_type_url": "near/SignedTransaction", "request_streaming": True}


def test_payload_from_dict():
    message = payload_from_dict(SIGNED, Method)

    assert isinstance(message, Method)
    assert message.name == "transfer"
    assert message.request_type_url == "near/SignedTransaction"
    assert message.request_streaming is True


def test_payload_to_dict_keeps_field_names():
    message = Method(name="transfer", request_type_url="near/SignedTransaction", request_streaming=True)

    assert payload_to_dict(message) == SIGNED


def test_payload_from_empty_dict():
    assert payload_from_dict({}, Method) == Method()


def test_payload_from_dict_unknown_field():
    with pytest.raises(SerializationError, match="cannot build Method"):
        payload_from_dict({"bogus": 1}, Method)


def test_payload_json():
    message = payload_from_json(json.dumps(SIGNED), Method)

    assert json.loads(payload_to_json(message)) == SIGNED


def test_payload_from_invalid_json():
    with pytest.raises(SerializationError, match="invalid JSON"):
        payload_from_json("{not json", Method)


def test_payload_none():
    assert payload_to_dict(None) == {}
    assert payload_to_json(None) == "{}"


def test_payload_built_from_dict_goes_on_the_wire():
    message = payload_from_dict(SIGNED, Method)

    params = RpcCheckTxRequest(signed_transaction=message).params()

    assert params == [payload_to_base64(message)]
    assert base64.b64decode(params[0]) == message.SerializeToString(deterministic=True)
