"""Chain value objects returned by block, state and pool queries."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional, Tuple

from .primitives import (
    ZERO_ADDRESS,
    ZERO_HASH,
    Address,
    BlockIndex,
    Epoch,
    EventHash,
    Hash,
    Timestamp,
)


@dataclass(frozen=True)
class Transaction:
    """Signed or unsigned transaction."""

    nonce: int
    to: Optional[Address]
    value: int
    gas: int
    gas_price: int
    data: bytes = b""
    hash: Optional[Hash] = None


@dataclass(frozen=True)
class EvmHeader:
    """Block header as seen by the EVM."""

    number: int
    hash: Hash = ZERO_HASH
    parent_hash: Hash = ZERO_HASH
    root: Hash = ZERO_HASH
    tx_hash: Hash = ZERO_HASH
    time: Timestamp = Timestamp(0)
    coinbase: Address = ZERO_ADDRESS
    gas_limit: int = 0
    gas_used: int = 0


@dataclass(frozen=True)
class EvmBlock:
    """Block: header plus its transactions."""

    header: EvmHeader
    transactions: Tuple[Transaction, ...] = ()

    @property
    def number(self) -> int:
        """Block number taken from the header."""
        return self.header.number

    @property
    def hash(self) -> Hash:
        """Block hash taken from the header."""
        return self.header.hash


@dataclass(frozen=True)
class Receipt:
    """Transaction receipt."""

    status: int
    cumulative_gas_used: int
    post_state: bytes = b""
    contract_address: Optional[Address] = None
    logs: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ChainConfig:
    """Chain parameters."""

    chain_id: int


@dataclass(frozen=True)
class PeerProgress:
    """Synchronisation progress of the node."""

    current_epoch: Epoch
    current_block: BlockIndex
    current_block_hash: EventHash
    current_block_time: Timestamp
    highest_block: BlockIndex
    highest_epoch: Epoch


@dataclass(frozen=True)
class AccountState:
    """State of a single account at some block."""

    nonce: int = 0
    balance: int = 0
    code: bytes = b""


# Account state keyed by address
StateDB = Mapping[Address, AccountState]


@dataclass(frozen=True)
class Message:
    """Call message handed to the EVM."""

    sender: Address
    to: Optional[Address]
    gas: int
    gas_price: int
    value: int
    data: bytes = b""


@dataclass(frozen=True)
class NewTxsNotify:
    """Notification of transactions entering the pool."""

    transactions: Tuple[Transaction, ...] = field(default_factory=tuple)
