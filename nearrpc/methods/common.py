"""
Pieces shared by the method descriptors: block references, signed
transaction encoding and the server error model.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict

from nearrpc.errors import SerializationError
from nearrpc.utils.serialization import Payload, payload_to_base64

BlockId = Union[int, str]


class Finality(str, Enum):
    """How final a block must be to answer a request"""
    OPTIMISTIC = "optimistic"
    NEAR_FINAL = "near-final"
    FINAL = "final"


@dataclass(frozen=True)
class BlockReference:
    """A block addressed either by finality or by height/hash"""
    finality: Optional[Finality] = None
    block_id: Optional[BlockId] = None

    def __post_init__(self):
        if (self.finality is None) == (self.block_id is None):
            raise ValueError("BlockReference needs exactly one of finality or block_id")

    @classmethod
    def latest(cls) -> "BlockReference":
        return cls(finality=Finality.OPTIMISTIC)

    @classmethod
    def final(cls) -> "BlockReference":
        return cls(finality=Finality.FINAL)

    @classmethod
    def at(cls, block_id: BlockId) -> "BlockReference":
        return cls(block_id=block_id)

    def to_params(self) -> Dict[str, Any]:
        if self.block_id is not None:
            return {"block_id": self.block_id}
        return {"finality": Finality(self.finality).value}


def serialize_signed_transaction(signed_transaction: Payload) -> str:
    """Encode a signed transaction as the base64 string the RPC expects

    Raises:
        SerializationError: The transaction is empty or cannot be serialized
    """
    encoded = payload_to_base64(signed_transaction)
    if not encoded:
        raise SerializationError("signed transaction is empty")
    return encoded


class ErrorCause(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True)

    name: str
    info: Any = None


class RpcServerError(BaseModel):
    """Error object returned by the server

    Handler errors carry a structured ``cause``; ``kind`` gives the most
    specific name available.
    """
    model_config = ConfigDict(extra="allow", frozen=True)

    code: Union[int, str]
    message: Optional[str] = None
    name: Optional[str] = None
    cause: Optional[ErrorCause] = None
    data: Any = None

    @property
    def kind(self) -> str:
        if self.cause is not None:
            return self.cause.name
        if self.name:
            return self.name
        return str(self.code)


class RpcTransactionError(RpcServerError):
    """Error of the transaction submission and status methods"""


class RpcStatusError(RpcServerError):
    """Error of the node status and health methods"""


class RpcGasPriceError(RpcServerError):
    pass


class RpcBlockError(RpcServerError):
    pass


class RpcQueryError(RpcServerError):
    pass
