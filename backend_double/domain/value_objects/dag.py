"""DAG value objects returned by consensus queries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .chain import Transaction
from .primitives import ZERO_HASH, Epoch, EventHash, Hash, StakerID, Timestamp


@dataclass(frozen=True)
class EventHeaderData:
    """Header fields of a DAG event."""

    version: int
    epoch: Epoch
    seq: int
    frame: int
    is_root: bool
    creator: StakerID
    prev_epoch_hash: Hash = ZERO_HASH
    parents: Tuple[EventHash, ...] = ()
    gas_power_used: int = 0
    lamport: int = 0
    claimed_time: Timestamp = Timestamp(0)
    median_time: Timestamp = Timestamp(0)
    tx_hash: Hash = ZERO_HASH
    extra: bytes = b""


@dataclass(frozen=True)
class Event:
    """DAG event: header, transactions and signature."""

    header: EventHeaderData
    transactions: Tuple[Transaction, ...] = ()
    sig: bytes = b""

    @property
    def epoch(self) -> Epoch:
        return self.header.epoch


@dataclass(frozen=True)
class EpochStats:
    """Per-epoch statistics."""

    start: Timestamp
    end: Timestamp
    epoch: Epoch
    total_fee: int = 0
    total_base_reward_weight: int = 0
    total_tx_reward_weight: int = 0
