"""
Transfer Record Mapping

Converts Immutable X transfers into Etherscan-style transaction records so
that code written against base-chain transaction lists can consume them.
"""

import re
from datetime import datetime, timedelta, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_TRAILING_DIGITS = re.compile(r"(\d{3})$")


class TokenType(str, Enum):
    """Known token kinds, the transfers API may report others"""

    ETH = "ETH"
    ERC20 = "ERC20"
    ERC721 = "ERC721"


class TokenData(BaseModel):
    model_config = ConfigDict(extra="ignore")

    token_address: str | None = None
    quantity: int = 0


class Token(BaseModel):
    model_config = ConfigDict(extra="ignore")

    type: str
    data: TokenData


class TransferRecord(BaseModel):
    """One transfer as returned by the Immutable X transfers API"""

    model_config = ConfigDict(extra="ignore")

    timestamp: datetime
    token: Token
    transaction_id: int | str
    user: str
    receiver: str
    status: str


class TransactionView(BaseModel):
    """
    Base-chain shaped view of a transfer.

    Serialize with model_dump(by_alias=True) to get the Etherscan field names.
    blockHash, transactionIndex and confirmations are placeholders, the
    transfers API has no equivalent.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    time_stamp: int = Field(alias="timeStamp")
    hash: str
    nonce: str
    block_hash: str = Field(default="", alias="blockHash")
    transaction_index: int = Field(default=0, alias="transactionIndex")
    from_address: str = Field(alias="from")
    to_address: str = Field(alias="to")
    value: str
    txreceipt_status: str
    contract_address: str = Field(alias="contractAddress")
    confirmations: int = 0


def timestamp_ms(value: datetime) -> int:
    """Exact milliseconds since the epoch, naive datetimes are taken as UTC"""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return (value - _EPOCH) // timedelta(milliseconds=1)


def timestamp_to_nonce(timestamp: int | str | None) -> str:
    """
    Derive a nonce from a millisecond timestamp.

    The transfers API does not return a nonce, so the last three digits of the
    timestamp stand in for it. Two transfers can end up with the same nonce.

    Args:
        timestamp: Milliseconds since the epoch

    Returns:
        Nonce as a decimal string, "0" when there is no timestamp

    Example:
        >>> timestamp_to_nonce(1670000123950)
        '850'
    """
    nonce = 0

    if timestamp:
        match = _TRAILING_DIGITS.search(str(timestamp))
        if match:
            nonce = int(match.group(1))

        # the millisecond counter over-reports in its last 100 values
        if nonce > 900:
            nonce = nonce - 100

    return str(nonce)


def to_transaction(transfer: TransferRecord) -> TransactionView:
    """
    Immutable X transfer => Ethereum transaction

    Args:
        transfer: Immutable X transfer

    Returns:
        Etherscan-style transaction record
    """
    time_stamp_ms = timestamp_ms(transfer.timestamp)

    contract_address = transfer.token.data.token_address or ""
    if transfer.token.type == TokenType.ETH:
        contract_address = ZERO_ADDRESS

    return TransactionView(
        time_stamp=time_stamp_ms // 1000,
        hash=str(transfer.transaction_id),
        nonce=timestamp_to_nonce(time_stamp_ms),
        block_hash="",
        transaction_index=0,
        from_address=transfer.user,
        to_address=transfer.receiver,
        value=str(transfer.token.data.quantity),
        txreceipt_status=transfer.status,
        contract_address=contract_address,
        confirmations=0,
    )
