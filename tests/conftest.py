"""
Pytest configuration for imx_offchain tests

Mock Immutable X API served through httpx.MockTransport and a fake wallet
signer provider, so no test touches the network.
"""

import functools

import pytest

from api.tests.mocks import FakeSignerProvider, MockImmutableXAPI
from imx_offchain.client import ImmutableXClient
from imx_offchain.config import ImmutableXSettings
from imx_offchain.network import ImmutableXNetwork
from imx_offchain.sessions import SessionRegistry


TESTNET_API_URL = "https://api.ropsten.x.immutable.test"
MAINNET_API_URL = "https://api.x.immutable.test"


@pytest.fixture
def imx_settings():
    """Settings with test endpoints, independent of the environment"""
    return ImmutableXSettings(
        imx_mainnet_api_url=MAINNET_API_URL,
        imx_testnet_api_url=TESTNET_API_URL,
        imx_request_timeout=5.0,
    )


@pytest.fixture
def testnet(imx_settings):
    return ImmutableXNetwork(88, imx_settings)


@pytest.fixture
def unsupported_network(imx_settings):
    return ImmutableXNetwork(1, imx_settings)


@pytest.fixture
def mock_api():
    return MockImmutableXAPI()


@pytest.fixture
def signer_provider():
    return FakeSignerProvider()


@pytest.fixture
def client_factory(mock_api):
    """ImmutableXClient.build wired to the mock API"""
    return functools.partial(ImmutableXClient.build, transport=mock_api.transport)


@pytest.fixture
def registry(testnet, signer_provider, client_factory):
    return SessionRegistry(testnet, signer_provider, client_factory)


@pytest.fixture
def eth_transfer():
    """Raw ETH transfer as returned by GET /v1/transfers"""
    return {
        "transaction_id": 4207345,
        "status": "success",
        "user": "0x6c21ec8de44ae44d0992ec3e2d9f1abb6207d864",
        "receiver": "0x4527be8f31e2ebfbef4fcaddb5a17447b27d2aef",
        "token": {
            "type": "ETH",
            "data": {
                "token_address": "0x1111111111111111111111111111111111111111",
                "decimals": 18,
                "quantity": "1000000000000000000",
            },
        },
        "timestamp": "2022-12-02T16:55:23.456Z",
    }


@pytest.fixture
def erc20_transfer():
    """Raw ERC20 transfer as returned by GET /v1/transfers"""
    return {
        "transaction_id": 4207346,
        "status": "success",
        "user": "0x6c21ec8de44ae44d0992ec3e2d9f1abb6207d864",
        "receiver": "0x72a06bf2a1ce5e39cba06c0cab824960b587d64c",
        "token": {
            "type": "ERC20",
            "data": {
                "token_address": "0xccc8cb5229b0ac8069c51fd58367fd1e622afd97",
                "decimals": 18,
                "quantity": "123456789012345678901234567890",
            },
        },
        "timestamp": "2022-12-02T16:55:23.950Z",
    }
