"""ISfcReader interface for staking registry queries."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from ..helpers.operation_markers import fallible
from ..value_objects.primitives import Address, BlockIndex, StakerID, Timestamp
from ..value_objects.sfc import (
    SfcDelegator,
    SfcDelegatorAndAddr,
    SfcStaker,
    SfcStakerAndID,
    Validators,
)


class ISfcReader(ABC):
    """Interface for staker and delegator records.

    Amounts, rewards and scores are integers in the smallest unit.

    Example:
        >>> staker = backend.get_staker(StakerID(1))
        >>> weights = backend.get_reward_weights(StakerID(1))
    """

    @abstractmethod
    def get_validators(self) -> Validators:
        """Validator weights of the current epoch."""

    @abstractmethod
    @fallible
    def get_staker(self, staker_id: StakerID) -> Optional[SfcStaker]:
        """Staker record, None if unknown."""

    @abstractmethod
    @fallible
    def get_staker_id(self, addr: Address) -> StakerID:
        """Staker id registered for ``addr``; 0 if none."""

    @abstractmethod
    @fallible
    def get_stakers(self) -> List[SfcStakerAndID]:
        """All stakers."""

    @abstractmethod
    @fallible
    def get_delegator(self, addr: Address) -> Optional[SfcDelegator]:
        """Delegation record of ``addr``, None if unknown."""

    @abstractmethod
    @fallible
    def get_delegators_of(self, staker_id: StakerID) -> List[SfcDelegatorAndAddr]:
        """Delegations to ``staker_id``."""

    @abstractmethod
    @fallible
    def get_delegator_claimed_rewards(self, addr: Address) -> int:
        """Rewards claimed by the delegator."""

    @abstractmethod
    @fallible
    def get_staker_claimed_rewards(self, staker_id: StakerID) -> int:
        """Rewards claimed by the staker."""

    @abstractmethod
    @fallible
    def get_staker_delegators_claimed_rewards(self, staker_id: StakerID) -> int:
        """Rewards claimed by all delegators of the staker."""

    @abstractmethod
    @fallible
    def get_validation_score(self, staker_id: StakerID) -> int:
        """Validation score."""

    @abstractmethod
    @fallible
    def get_origination_score(self, staker_id: StakerID) -> int:
        """Origination score."""

    @abstractmethod
    @fallible
    def get_reward_weights(self, staker_id: StakerID) -> Tuple[int, int]:
        """Reward weights as (base weight, transaction weight)."""

    @abstractmethod
    @fallible
    def get_staker_poi(self, staker_id: StakerID) -> int:
        """Proof of importance."""

    @abstractmethod
    @fallible
    def get_downtime(self, staker_id: StakerID) -> Tuple[BlockIndex, Timestamp]:
        """Missed blocks and time offline."""
