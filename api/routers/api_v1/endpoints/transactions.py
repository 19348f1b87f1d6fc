"""
Transaction Endpoints

FastAPI endpoints exposing Immutable X transfers as Etherscan-style
transactions, plus the nonce derivation used for them.
"""

import logging

import httpx
from fastapi import APIRouter, Depends, HTTPException, Path, Query
from pydantic import ValidationError

from api.dependencies.imx import get_imx_helper
from api.schemas.transaction import (
    NonceResponse,
    TransactionErrorResponse,
    TransactionHistoryResponse,
)
from imx_offchain.errors import MissingConfigurationError
from imx_offchain.helper import ImmutableXHelper
from imx_offchain.transactions import timestamp_to_nonce


logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/nonce/{timestamp}",
    response_model=NonceResponse,
    summary="Derive nonce from timestamp",
)
async def get_nonce(
    timestamp: int = Path(ge=0, description="Milliseconds since the epoch"),
) -> NonceResponse:
    return NonceResponse(timestamp=timestamp, nonce=timestamp_to_nonce(timestamp))


@router.get(
    "/{user}",
    response_model=TransactionHistoryResponse,
    summary="List transactions",
    description="Transfers sent by a user, reshaped as base-chain transaction records.",
    responses={
        500: {"model": TransactionErrorResponse, "description": "Network not configured"},
        502: {"model": TransactionErrorResponse, "description": "Immutable X lookup failed"},
    },
)
async def list_transactions(
    user: str = Path(description="Sender address"),
    page_size: int = Query(default=50, ge=1, le=200, description="Number of transfers to fetch (1-200)"),
    helper: ImmutableXHelper = Depends(get_imx_helper),
) -> TransactionHistoryResponse:
    try:
        transactions = await helper.list_transactions(user, page_size=page_size)
    except MissingConfigurationError as e:
        raise HTTPException(status_code=500, detail=str(e))
    except (httpx.HTTPError, ValidationError) as e:
        logger.error(f"Error listing transfers for {user}: {str(e)}")
        raise HTTPException(status_code=502, detail=f"Immutable X lookup failed: {str(e)}")

    return TransactionHistoryResponse(user=user, transactions=transactions, total=len(transactions))
