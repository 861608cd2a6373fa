"""
block: a block header and its chunk headers
"""

from dataclasses import dataclass
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict

from nearrpc.methods.base import RpcMethod
from nearrpc.methods.common import BlockReference, RpcBlockError


class BlockHeader(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True)

    height: int
    hash: str
    prev_hash: str
    timestamp: int
    epoch_id: str


class RpcBlockResponse(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True)

    author: str
    header: BlockHeader
    chunks: List[Dict[str, Any]] = []


@dataclass(frozen=True)
class RpcBlockRequest(RpcMethod):
    """Fetch a block by finality, height or hash"""

    METHOD_NAME = "block"
    response_type = RpcBlockResponse
    error_type = RpcBlockError

    block_reference: BlockReference

    def params(self) -> Dict[str, Any]:
        return self.block_reference.to_params()
