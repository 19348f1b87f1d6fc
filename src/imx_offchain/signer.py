"""
Wallet Signer Provider

Resolves a signer for an account held by an Ethereum JSON-RPC node. The node
owns the keys.
"""

from typing import Protocol

from web3 import AsyncHTTPProvider, AsyncWeb3, Web3


class Signer(Protocol):
    """Anything that can sign on behalf of one Ethereum account"""

    async def get_address(self) -> str: ...


class SignerProvider(Protocol):
    """Host wallet context handing out per-account signers"""

    def get_signer(self, address_or_index: str | int) -> Signer: ...


class Web3Signer:
    """Signer for one node-managed account, selected by address or index"""

    def __init__(self, web3: AsyncWeb3, address_or_index: str | int):
        self.web3 = web3
        self.address_or_index = address_or_index

    async def get_address(self) -> str:
        """
        Resolve the checksummed account address

        Integer keys select an entry of eth.accounts on the node.

        Raises:
            IndexError: If the node has no account at that index
            ValueError: If the address is not a valid Ethereum address
        """
        if isinstance(self.address_or_index, int):
            accounts = await self.web3.eth.accounts
            return Web3.to_checksum_address(accounts[self.address_or_index])
        return Web3.to_checksum_address(self.address_or_index)


class Web3SignerProvider:
    """Hands out signers backed by a single JSON-RPC provider"""

    def __init__(self, provider_url: str | None = None, web3: AsyncWeb3 | None = None):
        """
        Args:
            provider_url: JSON-RPC endpoint of the wallet node
            web3: Pre-built AsyncWeb3 instance (takes precedence over provider_url)
        """
        if web3 is None:
            if not provider_url:
                raise ValueError("Either provider_url or web3 is required")
            web3 = AsyncWeb3(AsyncHTTPProvider(provider_url))
        self.web3 = web3

    def get_signer(self, address_or_index: str | int) -> Web3Signer:
        return Web3Signer(self.web3, address_or_index)
