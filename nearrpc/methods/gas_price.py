"""
gas_price: the gas price of a block, or of the latest block
"""

from dataclasses import dataclass
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict

from nearrpc.methods.base import RpcMethod
from nearrpc.methods.common import BlockId, RpcGasPriceError


class RpcGasPriceResponse(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True)

    # yoctoNEAR, sent as a decimal string
    gas_price: int


@dataclass(frozen=True)
class RpcGasPriceRequest(RpcMethod):
    METHOD_NAME = "gas_price"
    response_type = RpcGasPriceResponse
    error_type = RpcGasPriceError

    block_id: Optional[BlockId] = None

    def params(self) -> List[Any]:
        return [self.block_id]
