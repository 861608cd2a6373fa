#!/usr/bin/env python
"""
RPC Client Example

Demonstrates JsonRpcClient against a NEAR RPC node: node status, an account
query, and error handling for a transaction lookup.

Configure with NEAR_RPC_URL / NEAR_RPC_API_KEY / NEAR_RPC_ENABLE_TRACING.
"""

import logging

from nearrpc import ClientConfig, JsonRpcClient, ProtocolError, ShapeMismatchError, TransportError
from nearrpc.methods import BlockReference, RpcQueryRequest, RpcStatusRequest, RpcTransactionStatusRequest
from nearrpc.methods.query import ViewAccount
from nearrpc.telemetry.metrics import setup_metrics

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def main():
    """Run RPC client example"""
    config = ClientConfig.from_env()
    if config.enable_tracing:
        setup_metrics(config.service_name, config.otlp_endpoint)

    with JsonRpcClient.from_config(config) as client:
        try:
            status = client.call(RpcStatusRequest())
            logger.info(f"Connected to {status.chain_id}, latest block {status.sync_info.latest_block_height}")

            account = client.call(RpcQueryRequest(
                request=ViewAccount(account_id="fido.testnet"),
                block_reference=BlockReference.final(),
            ))
            logger.info(f"fido.testnet balance: {account.amount} yoctoNEAR at block {account.block_height}")

            client.call(RpcTransactionStatusRequest(
                tx_hash="9FtHUFBQsZ2MG77K3x3MJ9wjX3UT8zE1TczCrhZEcG8U",
                sender_account_id="miraclx.near",
            ))

        except ProtocolError as e:
            logger.error(f"Server rejected {e.method_name}: {e.error.kind}")
        except ShapeMismatchError as e:
            logger.error(f"Unexpected reply shape for {e.method_name}: {e}")
        except TransportError as e:
            logger.error(f"Transport failure ({e.kind}): {e}")

    logger.info("Client exited")


if __name__ == "__main__":
    main()
