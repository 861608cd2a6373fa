"""
Tests for client configuration
"""
import os
from unittest.mock import patch

import pytest

from nearrpc.adapters.http.client import HttpTransport
from nearrpc.adapters.zeromq.client import ZeroMQTransport
from nearrpc.client import JsonRpcClient
from nearrpc.config import ClientConfig, TransportType


class TestClientConfig:
    """Test client configuration"""

    def test_default_values(self):
        config = ClientConfig()
        assert config.transport == TransportType.HTTP
        assert config.server_address == "https://archival-rpc.testnet.near.org"
        assert config.timeout_ms == 10000
        assert config.enable_tracing is False

    def test_default_zeromq_address(self):
        config = ClientConfig(transport="zeromq")
        assert config.transport == TransportType.ZEROMQ
        assert config.server_address == "tcp://localhost:5555"

    def test_invalid_timeout(self):
        with pytest.raises(ValueError):
            ClientConfig(timeout_ms=0)

    def test_unsupported_transport(self):
        with pytest.raises(ValueError):
            ClientConfig(transport="smoke-signals")

    def test_from_env(self):
        with patch.dict(os.environ, {
            "NEAR_RPC_TRANSPORT": "ZEROMQ",
            "NEAR_RPC_URL": "tcp://10.0.0.1:6000",
            "NEAR_RPC_TIMEOUT_MS": "2500",
            "NEAR_RPC_API_KEY": "key-123",
            "NEAR_RPC_ENABLE_TRACING": "true",
        }, clear=True):
            config = ClientConfig.from_env()
            assert config.transport == TransportType.ZEROMQ
            assert config.server_address == "tcp://10.0.0.1:6000"
            assert config.timeout_ms == 2500
            assert config.api_key == "key-123"
            assert config.enable_tracing is True

    def test_from_empty_env(self):
        with patch.dict(os.environ, {}, clear=True):
            config = ClientConfig.from_env()
            assert config.transport == TransportType.HTTP
            assert config.api_key is None
            assert config.enable_tracing is False

    def test_to_dict_adds_api_key_header(self):
        config = ClientConfig(api_key="key-123", headers={"user-agent": "nearrpc-tests"})
        assert config.to_dict() == {
            "server_address": "https://archival-rpc.testnet.near.org",
            "timeout_ms": 10000,
            "headers": {"user-agent": "nearrpc-tests", "x-api-key": "key-123"},
        }


class TestClientFromConfig:

    def test_http_client(self):
        client = JsonRpcClient.from_config(ClientConfig(server_address="https://rpc.mainnet.near.org"))
        try:
            assert isinstance(client.transport, HttpTransport)
            assert client.transport.server_address == "https://rpc.mainnet.near.org"
        finally:
            client.close()

    def test_zeromq_client_with_tracing(self):
        config = ClientConfig(transport=TransportType.ZEROMQ, enable_tracing=True, service_name="tests")
        with patch("nearrpc.client.setup_tracer") as setup_tracer:
            client = JsonRpcClient.from_config(config)
        try:
            setup_tracer.assert_called_once_with("tests", "localhost:4317")
            assert isinstance(client.transport, ZeroMQTransport)
        finally:
            client.close()

    def test_from_environment(self):
        with patch.dict(os.environ, {"NEAR_RPC_URL": "https://rpc.testnet.near.org"}, clear=True):
            client = JsonRpcClient.from_config()
        try:
            assert client.transport.server_address == "https://rpc.testnet.near.org"
        finally:
            client.close()

    def test_connect(self):
        with JsonRpcClient.connect("https://rpc.testnet.near.org", headers={"x-api-key": "k"}) as client:
            assert client.transport.headers == {"x-api-key": "k"}
