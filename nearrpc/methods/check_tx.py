"""
EXPERIMENTAL_check_tx: validate a signed transaction without broadcasting it
"""

from dataclasses import dataclass
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict

from nearrpc.methods.base import RpcMethod
from nearrpc.methods.common import RpcTransactionError, serialize_signed_transaction
from nearrpc.utils.serialization import Payload


class RpcBroadcastTxSyncResponse(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True)

    transaction_hash: Optional[str] = None


@dataclass(frozen=True)
class RpcCheckTxRequest(RpcMethod):
    """Check a signed transaction against the current chain state"""

    METHOD_NAME = "EXPERIMENTAL_check_tx"
    response_type = RpcBroadcastTxSyncResponse
    error_type = RpcTransactionError

    signed_transaction: Payload

    def params(self) -> List[Any]:
        return [serialize_signed_transaction(self.signed_transaction)]
