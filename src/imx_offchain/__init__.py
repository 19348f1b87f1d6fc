"""
Immutable X Offchain Library

Session management, balance lookups and transfer mapping for wallets talking
to the Immutable X Layer-2 network.
"""

from .balances import BalanceAggregator, BalanceEntry
from .client import ImmutableXClient
from .config import ImmutableXSettings
from .errors import (
    ImmutableXError,
    InvalidArgumentError,
    MissingConfigurationError,
    RemoteLookupError,
)
from .helper import ImmutableXHelper
from .network import ImmutableXNetwork, NetworkProfile
from .sessions import SessionOptions, SessionRegistry
from .signer import Web3Signer, Web3SignerProvider
from .transactions import (
    ZERO_ADDRESS,
    TransactionView,
    TransferRecord,
    timestamp_to_nonce,
    to_transaction,
)


__all__ = [
    "BalanceAggregator",
    "BalanceEntry",
    "ImmutableXClient",
    "ImmutableXError",
    "ImmutableXHelper",
    "ImmutableXNetwork",
    "ImmutableXSettings",
    "InvalidArgumentError",
    "MissingConfigurationError",
    "NetworkProfile",
    "RemoteLookupError",
    "SessionOptions",
    "SessionRegistry",
    "TransactionView",
    "TransferRecord",
    "Web3Signer",
    "Web3SignerProvider",
    "ZERO_ADDRESS",
    "timestamp_to_nonce",
    "to_transaction",
]
