"""
Immutable X Configuration

Endpoint settings loaded from the environment and the static contract table
for every supported Immutable X network.
"""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


# Get the project root directory (two levels up from src/imx_offchain/)
PROJECT_ROOT = Path(__file__).parent.parent.parent

MAINNET_CHAIN_ID = 8
TESTNET_CHAIN_ID = 88

CONTRACTS = {
    "ropsten": {
        "stark_contract_address": "0x4527BE8f31E2ebFbEF4fCADDb5a17447B27d2aef",
        "registration_contract_address": "0x6C21EC8DE44AE44D0992ec3e2d9f1aBb6207D864",
    },
    "mainnet": {
        "stark_contract_address": "0x5FDCCA53617f4d2b9134B29090C87D01058e27e9",
        "registration_contract_address": "0x72a06bf2a1CE5e39cBA06c0CAb824960B587d64c",
    },
}

# Immutable X has no testnet transaction browser
EXPLORER_URLS = {
    MAINNET_CHAIN_ID: {
        "tx": "https://immutascan.io/tx/",
        "account": "https://market.immutable.com/inventory/",
    },
    TESTNET_CHAIN_ID: {
        "tx": "",
        "account": "https://market.ropsten.immutable.com/inventory/",
    },
}


class ImmutableXSettings(BaseSettings):
    """Immutable X endpoint configuration from environment variables"""

    imx_mainnet_api_url: str = "https://api.x.immutable.com"
    imx_testnet_api_url: str = "https://api.ropsten.x.immutable.com"

    # Passed to httpx, the layer itself never retries
    imx_request_timeout: float = 30.0

    # JSON-RPC node holding the accounts used for signing
    imx_wallet_provider_url: str = "http://127.0.0.1:8545"

    model_config = SettingsConfigDict(
        env_file=str(PROJECT_ROOT / ".env"), env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )
