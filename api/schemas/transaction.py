"""
Transaction Schemas

Pydantic models for transaction-related API responses.
"""

from pydantic import BaseModel, Field

from imx_offchain.transactions import TransactionView


# ============================================================================
# Transaction History Schemas
# ============================================================================


class TransactionHistoryResponse(BaseModel):
    """Transfers of a user reshaped as Etherscan-style transactions"""

    user: str = Field(description="Sender address")
    transactions: list[TransactionView] = Field(description="Transactions, newest first")
    total: int = Field(description="Number of transactions returned")


# ============================================================================
# Nonce Schemas
# ============================================================================


class NonceResponse(BaseModel):
    """Synthetic nonce derived from a millisecond timestamp"""

    timestamp: int = Field(description="Milliseconds since the epoch")
    nonce: str = Field(description="Derived nonce (not unique across transfers)")


class TransactionErrorResponse(BaseModel):
    """Error response for transaction operations"""

    detail: str = Field(description="Error message")
