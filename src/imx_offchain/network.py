"""
Immutable X Network Profiles

Pure lookup of the API endpoint and contract addresses for a chain id.
No network I/O happens here; unsupported chain ids resolve to an empty
profile and it is up to the caller to reject it.
"""

from dataclasses import dataclass

from imx_offchain.config import (
    CONTRACTS,
    EXPLORER_URLS,
    MAINNET_CHAIN_ID,
    TESTNET_CHAIN_ID,
    ImmutableXSettings,
)


@dataclass(frozen=True)
class NetworkProfile:
    """Endpoint and contracts needed to address one Immutable X network"""

    public_api_url: str = ""
    stark_contract_address: str = ""
    registration_contract_address: str = ""

    def missing_field(self) -> str | None:
        """Name of the first empty contract address, or None if both are set"""
        if not self.stark_contract_address:
            return "stark_contract_address"
        if not self.registration_contract_address:
            return "registration_contract_address"
        return None


def _parse_chain_id(chain_id: int | str | None) -> int | None:
    if isinstance(chain_id, bool):
        return None
    try:
        return int(str(chain_id).strip())
    except (TypeError, ValueError):
        return None


class ImmutableXNetwork:
    """Resolves the Immutable X network profile for a chain id"""

    def __init__(self, chain_id: int | str, settings: ImmutableXSettings | None = None):
        """
        Initialize network profile

        Args:
            chain_id: Chain identifier (8 = mainnet, 88 = test network)
            settings: Endpoint settings (loads from environment if not provided)
        """
        self.chain_id = _parse_chain_id(chain_id)
        self.settings = settings or ImmutableXSettings()

        # Set network configuration
        if self.chain_id == MAINNET_CHAIN_ID:
            self.network = "mainnet"
            self._profile = NetworkProfile(
                public_api_url=self.settings.imx_mainnet_api_url,
                **CONTRACTS["mainnet"],
            )
        elif self.chain_id == TESTNET_CHAIN_ID:
            self.network = "ropsten"
            self._profile = NetworkProfile(
                public_api_url=self.settings.imx_testnet_api_url,
                **CONTRACTS["ropsten"],
            )
        else:
            self.network = ""
            self._profile = NetworkProfile()

        explorer = EXPLORER_URLS.get(self.chain_id, {})
        self.tx_explorer_url = explorer.get("tx", "")
        self.account_explorer_url = explorer.get("account", "")

    @property
    def profile(self) -> NetworkProfile:
        return self._profile

    @property
    def is_supported(self) -> bool:
        return bool(self._profile.public_api_url)

    def get_network_info(self) -> dict:
        """
        Get network configuration information

        Returns:
            Dictionary containing network information
        """
        return {
            "chain_id": self.chain_id,
            "network": self.network,
            "public_api_url": self._profile.public_api_url,
            "stark_contract_address": self._profile.stark_contract_address,
            "registration_contract_address": self._profile.registration_contract_address,
            "tx_explorer_url": self.tx_explorer_url,
            "account_explorer_url": self.account_explorer_url,
        }
