"""
health: succeeds with a null result while the node is healthy
"""

from dataclasses import dataclass
from typing import Any, List

from nearrpc.methods.base import RpcMethod
from nearrpc.methods.common import RpcStatusError


@dataclass(frozen=True)
class RpcHealthRequest(RpcMethod):
    METHOD_NAME = "health"
    response_type = None
    error_type = RpcStatusError

    def params(self) -> List[Any]:
        return []
