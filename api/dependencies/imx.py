"""
Immutable X Dependency

FastAPI dependency for accessing the ImmutableXHelper of the configured chain.
"""

from fastapi import HTTPException

from api.config import imx_settings, settings
from imx_offchain.helper import ImmutableXHelper
from imx_offchain.signer import Web3SignerProvider


# Global state for the helper
_imx_helper: ImmutableXHelper | None = None


def get_imx_helper() -> ImmutableXHelper:
    """
    Get or initialize the Immutable X helper.

    Returns:
        ImmutableXHelper: Helper bound to settings.imx_chain_id

    Raises:
        HTTPException: If the configured chain id is not an Immutable X network
    """
    global _imx_helper
    if _imx_helper is None:
        helper = ImmutableXHelper(
            settings.imx_chain_id,
            settings=imx_settings,
            signer_provider=Web3SignerProvider(imx_settings.imx_wallet_provider_url),
        )
        if not helper.network.is_supported:
            raise HTTPException(
                status_code=500,
                detail=f"Unsupported IMX_CHAIN_ID: {settings.imx_chain_id}"
            )
        _imx_helper = helper
    return _imx_helper


async def close_imx_helper() -> None:
    """Close every cached session, called on application shutdown"""
    global _imx_helper
    if _imx_helper is not None:
        await _imx_helper.aclose()
        _imx_helper = None
