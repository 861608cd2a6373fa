"""
query: read accounts, contract code, contract state and access keys, or call
a view function, at a given block
"""

import base64
import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict

from nearrpc.errors import SerializationError
from nearrpc.methods.base import RpcMethod
from nearrpc.methods.common import BlockReference, RpcQueryError


@dataclass(frozen=True)
class ViewAccount:
    account_id: str

    def to_params(self) -> Dict[str, Any]:
        return {"request_type": "view_account", "account_id": self.account_id}


@dataclass(frozen=True)
class ViewCode:
    account_id: str

    def to_params(self) -> Dict[str, Any]:
        return {"request_type": "view_code", "account_id": self.account_id}


@dataclass(frozen=True)
class ViewState:
    account_id: str
    prefix: bytes = b""
    include_proof: bool = False

    def to_params(self) -> Dict[str, Any]:
        if not isinstance(self.prefix, (bytes, bytearray, memoryview)):
            raise SerializationError(
                f"view_state prefix must be bytes, got {type(self.prefix).__name__}"
            )
        params = {
            "request_type": "view_state",
            "account_id": self.account_id,
            "prefix_base64": base64.b64encode(self.prefix).decode("ascii"),
        }
        if self.include_proof:
            params["include_proof"] = True
        return params


@dataclass(frozen=True)
class ViewAccessKey:
    account_id: str
    public_key: str

    def to_params(self) -> Dict[str, Any]:
        return {
            "request_type": "view_access_key",
            "account_id": self.account_id,
            "public_key": self.public_key,
        }


@dataclass(frozen=True)
class ViewAccessKeyList:
    account_id: str

    def to_params(self) -> Dict[str, Any]:
        return {"request_type": "view_access_key_list", "account_id": self.account_id}


@dataclass(frozen=True)
class CallFunction:
    """Call a view function; ``args`` is raw bytes or a JSON-serializable value"""
    account_id: str
    method_name: str
    args: Any = field(default=b"")

    def to_params(self) -> Dict[str, Any]:
        if isinstance(self.args, (bytes, bytearray, memoryview)):
            raw = bytes(self.args)
        else:
            try:
                raw = json.dumps(self.args).encode("utf-8")
            except (TypeError, ValueError) as e:
                raise SerializationError(f"cannot encode args of {self.method_name}: {e}") from e
        return {
            "request_type": "call_function",
            "account_id": self.account_id,
            "method_name": self.method_name,
            "args_base64": base64.b64encode(raw).decode("ascii"),
        }


QueryRequest = Union[ViewAccount, ViewCode, ViewState, ViewAccessKey, ViewAccessKeyList, CallFunction]


class RpcQueryResponse(BaseModel):
    """Query result; the fields beside the block coordinates depend on the request type"""
    model_config = ConfigDict(extra="allow", frozen=True)

    block_height: int
    block_hash: str

    # view_account
    amount: Optional[int] = None
    locked: Optional[int] = None
    code_hash: Optional[str] = None
    storage_usage: Optional[int] = None

    # call_function
    result: Optional[List[int]] = None
    logs: Optional[List[str]] = None

    def result_bytes(self) -> bytes:
        return bytes(self.result or [])

    def result_json(self) -> Any:
        """Decode a call_function result as JSON"""
        return json.loads(self.result_bytes().decode("utf-8"))


@dataclass(frozen=True)
class RpcQueryRequest(RpcMethod):
    METHOD_NAME = "query"
    response_type = RpcQueryResponse
    error_type = RpcQueryError

    request: QueryRequest
    block_reference: BlockReference = field(default_factory=BlockReference.latest)

    def params(self) -> Dict[str, Any]:
        params = self.request.to_params()
        params.update(self.block_reference.to_params())
        return params
