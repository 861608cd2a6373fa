"""
Transport adapter interface

The contract every transport (HTTP, ZeroMQ) implements for JsonRpcClient, so
that switching the underlying communication mechanism needs no change to the
client or the method descriptors.
"""

import abc
from typing import Any, Dict, Union

from nearrpc.envelope import RequestEnvelope

RawResponse = Union[Dict[str, Any], str, bytes]


class TransportAdapterInterface(abc.ABC):
    """Transport adapter: send one request envelope, return exactly one reply"""

    @abc.abstractmethod
    def send(self, envelope: RequestEnvelope) -> RawResponse:
        """Deliver a request and wait for its reply

        Args:
            envelope: Request to send

        Returns:
            The top-level JSON-RPC reply, as a dict or as undecoded JSON text

        Raises:
            TransportError: No reply could be obtained
        """

    @abc.abstractmethod
    def close(self) -> None:
        """Close connections and release resources"""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
