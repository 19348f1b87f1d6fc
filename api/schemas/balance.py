"""
Balance Schemas

Pydantic models for balance-related API responses.
"""

from pydantic import BaseModel, Field


class BalanceResponse(BaseModel):
    """Aggregated balance of one token symbol"""

    user: str = Field(description="Account address")
    symbol: str = Field(description="Token symbol (case-insensitive match)")
    balance: str = Field(description="Sum of all matching balances in the token's base unit, as a decimal string")
