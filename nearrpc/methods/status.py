"""
status: general information about the node and its sync state
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict

from nearrpc.methods.base import RpcMethod
from nearrpc.methods.common import RpcStatusError


class NodeVersion(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True)

    version: str
    build: str


class SyncInfo(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True)

    latest_block_hash: str
    latest_block_height: int
    latest_block_time: Optional[str] = None
    latest_state_root: Optional[str] = None
    syncing: bool


class RpcStatusResponse(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True)

    chain_id: str
    protocol_version: int
    latest_protocol_version: Optional[int] = None
    rpc_addr: Optional[str] = None
    version: NodeVersion
    sync_info: SyncInfo
    validators: List[Dict[str, Any]] = []


@dataclass(frozen=True)
class RpcStatusRequest(RpcMethod):
    METHOD_NAME = "status"
    response_type = RpcStatusResponse
    error_type = RpcStatusError

    def params(self) -> List[Any]:
        return []
