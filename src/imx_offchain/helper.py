"""
Immutable X Helper

One object per chain id bundling the network profile, the session registry,
balance lookups and transfer mapping.
"""

import logging
from typing import Any, Dict, List, Optional

from imx_offchain.balances import BalanceAggregator
from imx_offchain.client import ImmutableXClient
from imx_offchain.config import ImmutableXSettings
from imx_offchain.network import ImmutableXNetwork, NetworkProfile
from imx_offchain.sessions import ClientFactory, SessionRegistry
from imx_offchain.signer import SignerProvider
from imx_offchain.transactions import (
    TransactionView,
    TransferRecord,
    timestamp_to_nonce,
    to_transaction,
)

logger = logging.getLogger(__name__)


class ImmutableXHelper:
    """Entry point for wallet code talking to Immutable X"""

    def __init__(
        self,
        chain_id: int | str,
        settings: Optional[ImmutableXSettings] = None,
        signer_provider: Optional[SignerProvider] = None,
        client_factory: Optional[ClientFactory] = None,
    ):
        """
        Args:
            chain_id: Chain identifier (8 = mainnet, 88 = test network)
            settings: Endpoint settings (loads from environment if not provided)
            signer_provider: Wallet context for account-bound sessions
            client_factory: Coroutine building clients, defaults to ImmutableXClient.build
        """
        self.network = ImmutableXNetwork(chain_id, settings)
        self.registry = SessionRegistry(self.network, signer_provider, client_factory)
        self.balances = BalanceAggregator(self.registry)

    @property
    def profile(self) -> NetworkProfile:
        return self.network.profile

    async def get_immutablex_client(
        self, account_key: str | int | None = None, force_new: bool = False
    ) -> ImmutableXClient:
        return await self.registry.get_session(account_key, force_new)

    async def get_balance_by_symbol(self, user: str, symbol: str = "ETH") -> int:
        return await self.balances.get_balance_by_symbol(user, symbol)

    def to_transaction(self, transfer: TransferRecord | Dict[str, Any]) -> TransactionView:
        """Map a transfer, accepting either a parsed record or raw API JSON"""
        if not isinstance(transfer, TransferRecord):
            transfer = TransferRecord.model_validate(transfer)
        return to_transaction(transfer)

    def timestamp_to_nonce(self, timestamp: int | str | None) -> str:
        return timestamp_to_nonce(timestamp)

    async def list_transactions(self, user: str, page_size: int = 50) -> List[TransactionView]:
        """
        Transfers sent by a user, mapped to transaction records

        Args:
            user: Sender address
            page_size: Maximum number of transfers to fetch

        Returns:
            Transaction records, newest first

        Raises:
            httpx.HTTPError: If the transfers call fails
            pydantic.ValidationError: If a transfer cannot be parsed
        """
        client = await self.registry.get_session()
        data = await client.list_transfers(user=user, page_size=page_size)
        transfers = data.get("result") or []
        logger.debug(f"Fetched {len(transfers)} transfers for {user}")
        return [self.to_transaction(item) for item in transfers]

    async def aclose(self) -> None:
        await self.registry.aclose()
