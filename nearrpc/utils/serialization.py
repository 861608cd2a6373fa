"""
Payload serialization tools

Canonical encoding of already-signed payloads for use in JSON-RPC params,
and conversion between Protobuf payloads and Python dictionaries/JSON.
A payload is either raw bytes or a Protobuf message.
"""

import base64
import json
from typing import Any, Dict, Type, Union

from google.protobuf.json_format import MessageToDict, ParseDict, ParseError
from google.protobuf.message import EncodeError, Message

from nearrpc.errors import SerializationError

Payload = Union[bytes, bytearray, memoryview, Message]


def payload_to_bytes(payload: Payload) -> bytes:
    """Convert a signed payload to its canonical byte form

    Protobuf messages are serialized deterministically so that equal messages
    always produce equal bytes.

    Args:
        payload: Raw bytes or Protobuf message

    Returns:
        bytes: Canonical bytes

    Raises:
        SerializationError: The payload cannot be serialized
    """
    if isinstance(payload, (bytes, bytearray, memoryview)):
        return bytes(payload)

    if isinstance(payload, Message):
        if not payload.IsInitialized():
            missing = ", ".join(payload.FindInitializationErrors())
            raise SerializationError(
                f"{type(payload).__name__} is missing required fields: {missing}"
            )
        try:
            return payload.SerializeToString(deterministic=True)
        except EncodeError as e:
            raise SerializationError(f"cannot serialize {type(payload).__name__}: {e}") from e

    raise SerializationError(f"unsupported payload type: {type(payload).__name__}")


def payload_to_base64(payload: Payload) -> str:
    """Convert a signed payload to the base64 string sent over the wire

    Args:
        payload: Raw bytes or Protobuf message

    Returns:
        str: Standard base64 of the canonical bytes
    """
    return base64.b64encode(payload_to_bytes(payload)).decode("ascii")


def payload_to_dict(message: Message) -> Dict[str, Any]:
    """Convert a Protobuf payload to a dictionary

    Args:
        message: Protobuf message object

    Returns:
        Dict: Dictionary containing message fields
    """
    if message is None:
        return {}

    return MessageToDict(message, preserving_proto_field_name=True)


def payload_from_dict(data: Dict[str, Any], message_type: Type[Message]) -> Message:
    """Build a Protobuf payload from a dictionary

    Args:
        data: Dictionary data, as produced by payload_to_dict
        message_type: Protobuf message type

    Returns:
        Message: Protobuf message object

    Raises:
        SerializationError: The dictionary does not match ``message_type``
    """
    message = message_type()
    if not data:
        return message

    try:
        ParseDict(data, message)
    except ParseError as e:
        raise SerializationError(f"cannot build {message_type.__name__}: {e}") from e
    return message


def payload_to_json(message: Message) -> str:
    """Convert a Protobuf payload to a JSON string"""
    if message is None:
        return "{}"

    return json.dumps(payload_to_dict(message))


def payload_from_json(json_str: str, message_type: Type[Message]) -> Message:
    """Build a Protobuf payload from a JSON string

    Raises:
        SerializationError: The string is not JSON or does not match ``message_type``
    """
    if not json_str:
        return message_type()

    try:
        data = json.loads(json_str)
    except ValueError as e:
        raise SerializationError(f"invalid JSON for {message_type.__name__}: {e}") from e
    return payload_from_dict(data, message_type)
