"""
Balance Endpoints

FastAPI endpoints for Immutable X balance lookups.
"""

from fastapi import APIRouter, Depends, HTTPException, Path, Query

from api.dependencies.imx import get_imx_helper
from api.schemas.balance import BalanceResponse
from imx_offchain.errors import InvalidArgumentError, MissingConfigurationError
from imx_offchain.helper import ImmutableXHelper


router = APIRouter()


@router.get(
    "/{user}",
    response_model=BalanceResponse,
    summary="Get balance by symbol",
    description="Sum of all balances of a user for a token symbol. A failed lookup reports a balance of 0.",
)
async def get_balance(
    user: str = Path(description="Account address"),
    symbol: str = Query(default="ETH", description="Token symbol"),
    helper: ImmutableXHelper = Depends(get_imx_helper),
) -> BalanceResponse:
    try:
        balance = await helper.get_balance_by_symbol(user, symbol)
    except InvalidArgumentError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except MissingConfigurationError as e:
        raise HTTPException(status_code=500, detail=str(e))

    return BalanceResponse(user=user, symbol=symbol, balance=str(balance))
