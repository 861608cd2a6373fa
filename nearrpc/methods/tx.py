"""
tx: look up the status of a transaction by hash and sender
"""

from dataclasses import dataclass
from typing import Any, List

from nearrpc.errors import SerializationError
from nearrpc.methods.base import RpcMethod
from nearrpc.methods.broadcast_tx_commit import RpcTransactionResponse
from nearrpc.methods.common import RpcTransactionError


@dataclass(frozen=True)
class RpcTransactionStatusRequest(RpcMethod):
    """Query a transaction by its hash and the account that signed it"""

    METHOD_NAME = "tx"
    response_type = RpcTransactionResponse
    error_type = RpcTransactionError

    tx_hash: str
    sender_account_id: str

    def params(self) -> List[Any]:
        if not self.tx_hash or not self.sender_account_id:
            raise SerializationError("tx requires both tx_hash and sender_account_id")
        return [self.tx_hash, self.sender_account_id]
