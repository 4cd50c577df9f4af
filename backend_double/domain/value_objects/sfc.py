"""Staking registry value objects."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from .primitives import Address, Epoch, StakerID, Timestamp


@dataclass(frozen=True)
class SfcStaker:
    """Staker record."""

    created_epoch: Epoch
    created_time: Timestamp
    address: Address
    stake_amount: int
    delegated_me: int = 0
    deactivated_epoch: Epoch = Epoch(0)
    deactivated_time: Timestamp = Timestamp(0)

    @property
    def is_active(self) -> bool:
        return self.deactivated_epoch == 0


@dataclass(frozen=True)
class SfcDelegator:
    """Delegation record."""

    created_epoch: Epoch
    created_time: Timestamp
    to_staker_id: StakerID
    amount: Optional[int] = None
    deactivated_epoch: Epoch = Epoch(0)
    deactivated_time: Timestamp = Timestamp(0)


@dataclass(frozen=True)
class SfcStakerAndID:
    staker_id: StakerID
    staker: SfcStaker


@dataclass(frozen=True)
class SfcDelegatorAndAddr:
    delegator: SfcDelegator
    addr: Address


# Validator weights keyed by staker id
Validators = Mapping[StakerID, int]
