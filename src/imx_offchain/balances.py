"""
Balance Aggregation

Sums the Immutable X balances of a user for one token symbol.
"""

import logging
from typing import List

from pydantic import BaseModel, ConfigDict, ValidationError

from imx_offchain.errors import InvalidArgumentError, RemoteLookupError
from imx_offchain.sessions import SessionRegistry

logger = logging.getLogger(__name__)


class BalanceEntry(BaseModel):
    """One balance line of the balances API"""

    model_config = ConfigDict(extra="ignore")

    symbol: str
    balance: int


def sum_balances(entries: List[BalanceEntry], symbol: str) -> int:
    """Sum entries whose symbol matches case-insensitively"""
    wanted = symbol.upper()
    return sum((entry.balance for entry in entries if entry.symbol.upper() == wanted), 0)


class BalanceAggregator:
    """Balance lookups through the default (read-only) session"""

    def __init__(self, registry: SessionRegistry):
        self.registry = registry

    async def fetch_balances(self, user: str) -> List[BalanceEntry]:
        """
        Fetch every balance entry of a user

        Returns:
            Parsed entries, empty when the response has no result list

        Raises:
            MissingConfigurationError: If the network is not configured
            RemoteLookupError: If the call fails or the response is malformed
        """
        client = await self.registry.get_session()
        try:
            data = await client.list_balances(user)
            if not isinstance(data, dict):
                raise RemoteLookupError(f"Unexpected balances response: {data!r}")
            result = data.get("result")
            if not result:
                return []
            return [BalanceEntry.model_validate(item) for item in result]
        except RemoteLookupError:
            raise
        except (ValidationError, TypeError) as e:
            raise RemoteLookupError(f"Malformed balances response: {e}") from e
        except Exception as e:
            raise RemoteLookupError(str(e)) from e

    async def get_balance_by_symbol(self, user: str, symbol: str = "ETH") -> int:
        """
        Total balance of a user for a token symbol

        A failed lookup is never an error here: it is logged as a warning and
        the balance is reported as 0.

        Args:
            user: Account address
            symbol: Token symbol, compared case-insensitively

        Returns:
            Sum of all matching balances in the token's base unit

        Raises:
            InvalidArgumentError: If user or symbol is empty
        """
        if not user:
            raise InvalidArgumentError("user")
        if not symbol:
            raise InvalidArgumentError("symbol")

        try:
            entries = await self.fetch_balances(user)
        except RemoteLookupError as e:
            logger.warning(f"GetBalanceBySymbol failed: {e}")
            return 0

        return sum_balances(entries, symbol)
