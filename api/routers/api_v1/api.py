from fastapi import APIRouter, Security

from api.routers.api_v1.endpoints import balances, transactions
from api.utils.security import get_api_key


api_router = APIRouter(dependencies=[Security(get_api_key)])

api_router.include_router(balances.router, prefix="/balances", tags=["Balances"])
api_router.include_router(
    transactions.router, prefix="/transactions", tags=["Transactions"]
)
