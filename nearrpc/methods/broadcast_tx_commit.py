"""
broadcast_tx_commit: submit a signed transaction and wait for its outcome
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict

from nearrpc.methods.base import RpcMethod
from nearrpc.methods.common import RpcTransactionError, serialize_signed_transaction
from nearrpc.utils.serialization import Payload


class RpcTransactionResponse(BaseModel):
    """Final execution outcome of a transaction"""
    model_config = ConfigDict(extra="allow", frozen=True)

    status: Union[str, Dict[str, Any]]
    transaction: Dict[str, Any]
    transaction_outcome: Optional[Dict[str, Any]] = None
    receipts_outcome: List[Dict[str, Any]] = []
    final_execution_status: Optional[str] = None

    @property
    def is_success(self) -> bool:
        if isinstance(self.status, dict):
            return "SuccessValue" in self.status or "SuccessReceiptId" in self.status
        return False

    @property
    def failure(self) -> Optional[Any]:
        if isinstance(self.status, dict):
            return self.status.get("Failure")
        return None


@dataclass(frozen=True)
class RpcBroadcastTxCommitRequest(RpcMethod):
    METHOD_NAME = "broadcast_tx_commit"
    response_type = RpcTransactionResponse
    error_type = RpcTransactionError

    signed_transaction: Payload

    def params(self) -> List[Any]:
        return [serialize_signed_transaction(self.signed_transaction)]
