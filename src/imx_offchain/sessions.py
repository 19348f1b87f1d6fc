"""
Session Registry

In-memory storage for Immutable X client sessions.
Stores one ImmutableXClient per account key, plus a read-only default session
under the empty key.
"""

import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Dict, List

from imx_offchain.client import ImmutableXClient
from imx_offchain.errors import MissingConfigurationError
from imx_offchain.network import ImmutableXNetwork
from imx_offchain.signer import SignerProvider

logger = logging.getLogger(__name__)

ClientFactory = Callable[..., Awaitable[ImmutableXClient]]


@dataclass(frozen=True)
class SessionOptions:
    """
    How to obtain a session.

    account_key: address or node account index to sign with, None for the
        read-only default session
    force_new: build a fresh client even if one is cached for the key
    """

    account_key: str | int | None = None
    force_new: bool = False

    @property
    def session_key(self) -> str:
        return "" if self.account_key is None else str(self.account_key)


class SessionRegistry:
    """
    Lazily built, memoized Immutable X sessions for one network.

    There is no locking: two concurrent requests for the same uncached key
    both build a client and the one that finishes last stays in the cache.
    """

    def __init__(
        self,
        network: ImmutableXNetwork,
        signer_provider: SignerProvider | None = None,
        client_factory: ClientFactory | None = None,
    ):
        """
        Initialize session registry.

        Args:
            network: Resolved network whose profile every session uses
            signer_provider: Source of account signers (only needed for account sessions)
            client_factory: Coroutine building a client, defaults to ImmutableXClient.build
        """
        self.network = network
        self.signer_provider = signer_provider
        self._client_factory = client_factory or ImmutableXClient.build
        self._sessions: Dict[str, ImmutableXClient] = {}
        # clients displaced by force_new or a lost race, closed only in aclose()
        self._replaced: List[ImmutableXClient] = []

    async def get_session(self, account_key: str | int | None = None, force_new: bool = False) -> ImmutableXClient:
        """
        Get the session for an account, building it on first use.

        Example:
            >>> default = await registry.get_session()
            >>> signed = await registry.get_session("0xAbc...")
        """
        return await self.get(SessionOptions(account_key=account_key, force_new=force_new))

    async def get(self, options: SessionOptions) -> ImmutableXClient:
        """
        Get or build a session.

        Raises:
            MissingConfigurationError: If a contract address or the signer
                provider is missing; nothing remote is attempted
        """
        key = options.session_key

        cached = self._sessions.get(key)
        if cached is not None and not options.force_new:
            return cached

        profile = self.network.profile
        missing = profile.missing_field()
        if missing:
            raise MissingConfigurationError(missing)

        signer = None
        if key:
            if self.signer_provider is None:
                raise MissingConfigurationError("signer_provider")
            signer = self.signer_provider.get_signer(options.account_key)

        client = await self._client_factory(
            public_api_url=profile.public_api_url,
            stark_contract_address=profile.stark_contract_address,
            registration_contract_address=profile.registration_contract_address,
            signer=signer,
            timeout=self.network.settings.imx_request_timeout,
        )
        logger.info(f"Built Immutable X session for key '{key}' on {self.network.network}")

        previous = self._sessions.get(key)
        if previous is not None and previous is not client:
            self._replaced.append(previous)

        self._sessions[key] = client
        return client

    def session_exists(self, key: str) -> bool:
        return key in self._sessions

    def get_session_count(self) -> int:
        return len(self._sessions)

    def clear_all(self) -> int:
        """
        Forget all sessions without closing them.

        Returns:
            Number of sessions cleared
        """
        count = len(self._sessions)
        self._sessions.clear()
        return count

    async def aclose(self) -> None:
        """Close the HTTP clients of every cached and replaced session (application shutdown)"""
        for client in [*self._replaced, *self._sessions.values()]:
            await client.aclose()
        self._replaced.clear()
        self._sessions.clear()
