"""
Immutable X Client

Async REST client for the Immutable X public API, optionally bound to the
signer of one account.
"""

import logging
from typing import Any, Dict, Optional

import httpx

from imx_offchain.errors import MissingConfigurationError
from imx_offchain.signer import Signer

logger = logging.getLogger(__name__)


class ImmutableXClient:
    """
    Connection to one Immutable X network.

    Use ImmutableXClient.build() rather than the constructor so that the
    configuration is validated and the signer address is resolved.
    """

    def __init__(
        self,
        public_api_url: str,
        stark_contract_address: str,
        registration_contract_address: str,
        http_client: httpx.AsyncClient,
        signer: Optional[Signer] = None,
        address: Optional[str] = None,
    ):
        self.public_api_url = public_api_url
        self.stark_contract_address = stark_contract_address
        self.registration_contract_address = registration_contract_address
        self.signer = signer
        self.address = address
        self._http = http_client

    @classmethod
    async def build(
        cls,
        public_api_url: str,
        stark_contract_address: str,
        registration_contract_address: str,
        signer: Optional[Signer] = None,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "ImmutableXClient":
        """
        Build a client for an Immutable X network

        Args:
            public_api_url: Base URL of the public API
            stark_contract_address: Stark contract of the network
            registration_contract_address: Registration contract of the network
            signer: Signer of the account this client acts for (read-only if None)
            timeout: HTTP timeout in seconds
            transport: Custom httpx transport

        Returns:
            Ready to use client

        Raises:
            MissingConfigurationError: If the URL or a contract address is empty
        """
        if not public_api_url:
            raise MissingConfigurationError("public_api_url")
        if not stark_contract_address:
            raise MissingConfigurationError("stark_contract_address")
        if not registration_contract_address:
            raise MissingConfigurationError("registration_contract_address")

        address = None
        if signer is not None:
            address = await signer.get_address()

        http_client = httpx.AsyncClient(
            base_url=public_api_url.rstrip("/"),
            timeout=timeout,
            transport=transport,
        )
        return cls(
            public_api_url=public_api_url,
            stark_contract_address=stark_contract_address,
            registration_contract_address=registration_contract_address,
            http_client=http_client,
            signer=signer,
            address=address,
        )

    @property
    def is_read_only(self) -> bool:
        return self.signer is None

    async def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        logger.debug(f"GET {self.public_api_url}{path} params={params}")
        response = await self._http.get(path, params=params)
        response.raise_for_status()
        return response.json()

    async def list_balances(self, user: str) -> Dict[str, Any]:
        """
        List every token balance of a user

        Returns:
            Raw API response, balances under "result"

        Raises:
            httpx.HTTPError: On transport failures or error status codes
        """
        return await self._get(f"/v2/balances/{user}")

    async def list_transfers(
        self,
        user: Optional[str] = None,
        receiver: Optional[str] = None,
        page_size: int = 50,
        cursor: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        List transfers, newest first

        Args:
            user: Only transfers sent by this address
            receiver: Only transfers received by this address
            page_size: Number of transfers per page
            cursor: Cursor returned by the previous page

        Returns:
            Raw API response, transfers under "result"
        """
        params: Dict[str, Any] = {"page_size": page_size}
        if user:
            params["user"] = user
        if receiver:
            params["receiver"] = receiver
        if cursor:
            params["cursor"] = cursor
        return await self._get("/v1/transfers", params=params)

    async def aclose(self) -> None:
        await self._http.aclose()
