"""
broadcast_tx_async: submit a signed transaction and return its hash at once
"""

from dataclasses import dataclass
from typing import Any, List

from nearrpc.methods.base import RpcMethod
from nearrpc.methods.common import RpcTransactionError, serialize_signed_transaction
from nearrpc.utils.serialization import Payload


@dataclass(frozen=True)
class RpcBroadcastTxAsyncRequest(RpcMethod):
    """Fire-and-forget submission; the result is the base58 transaction hash"""

    METHOD_NAME = "broadcast_tx_async"
    response_type = str
    error_type = RpcTransactionError

    signed_transaction: Payload

    def params(self) -> List[Any]:
        return [serialize_signed_transaction(self.signed_transaction)]
