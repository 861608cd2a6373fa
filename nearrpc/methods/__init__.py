"""
RPC method descriptors

One module per remote procedure. Importing this package registers every
method with the dispatcher's method registry.
"""

from .base import RpcMethod, registry
from .common import BlockReference, Finality, RpcServerError
from .block import RpcBlockRequest
from .broadcast_tx_async import RpcBroadcastTxAsyncRequest
from .broadcast_tx_commit import RpcBroadcastTxCommitRequest
from .check_tx import RpcCheckTxRequest
from .gas_price import RpcGasPriceRequest
from .health import RpcHealthRequest
from .query import RpcQueryRequest
from .status import RpcStatusRequest
from .tx import RpcTransactionStatusRequest

__all__ = [
    "RpcMethod",
    "registry",
    "BlockReference",
    "Finality",
    "RpcServerError",
    "RpcBlockRequest",
    "RpcBroadcastTxAsyncRequest",
    "RpcBroadcastTxCommitRequest",
    "RpcCheckTxRequest",
    "RpcGasPriceRequest",
    "RpcHealthRequest",
    "RpcQueryRequest",
    "RpcStatusRequest",
    "RpcTransactionStatusRequest",
]
