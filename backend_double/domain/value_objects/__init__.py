"""Value objects for the backend double.

Immutable domain primitives: chain, DAG and staking records returned by the
backend interface, plus the ResultEntry that holds canned behaviour.
"""

from .chain import (
    AccountState,
    ChainConfig,
    EvmBlock,
    EvmHeader,
    Message,
    NewTxsNotify,
    PeerProgress,
    Receipt,
    StateDB,
    Transaction,
)
from .dag import EpochStats, Event, EventHeaderData
from .primitives import (
    LATEST_BLOCK,
    PENDING_BLOCK,
    ZERO_ADDRESS,
    ZERO_HASH,
    Address,
    BlockIndex,
    BlockNumber,
    Epoch,
    EventHash,
    EventIndex,
    Hash,
    StakerID,
    Timestamp,
    to_address,
    to_event_hash,
    to_hash,
)
from .result_entry import EMPTY_ENTRY, ResultEntry
from .sfc import SfcDelegator, SfcDelegatorAndAddr, SfcStaker, SfcStakerAndID, Validators
from .wallet import Account, WalletEvent, WalletEventType

__all__ = [
    # Primitives
    "Address",
    "BlockIndex",
    "BlockNumber",
    "Epoch",
    "EventHash",
    "EventIndex",
    "Hash",
    "StakerID",
    "Timestamp",
    "LATEST_BLOCK",
    "PENDING_BLOCK",
    "ZERO_ADDRESS",
    "ZERO_HASH",
    "to_address",
    "to_event_hash",
    "to_hash",
    # Chain
    "AccountState",
    "ChainConfig",
    "EvmBlock",
    "EvmHeader",
    "Message",
    "NewTxsNotify",
    "PeerProgress",
    "Receipt",
    "StateDB",
    "Transaction",
    # DAG
    "EpochStats",
    "Event",
    "EventHeaderData",
    # Staking
    "SfcDelegator",
    "SfcDelegatorAndAddr",
    "SfcStaker",
    "SfcStakerAndID",
    "Validators",
    # Wallet
    "Account",
    "WalletEvent",
    "WalletEventType",
    # Results
    "EMPTY_ENTRY",
    "ResultEntry",
]
