"""Small RPC-style API written against IBackend.

Stands in for the consumer code a stub backend is built for: it only knows
the backend interface, handles business errors and never catches faults.
"""

from typing import Any, Dict, List, Optional

from backend_double.domain.exceptions import BackendError
from backend_double.domain.interfaces import IBackend
from backend_double.domain.value_objects import Address, StakerID


class StakingAPI:
    """Staking queries as served over RPC."""

    def __init__(self, backend: IBackend):
        self._backend = backend

    def get_staker(self, staker_id: int) -> Optional[Dict[str, Any]]:
        """Staker record with scores, None when unknown."""
        try:
            staker = self._backend.get_staker(StakerID(staker_id))
        except BackendError:
            return None
        if staker is None:
            return None
        return {
            "id": staker_id,
            "address": staker.address,
            "stake": staker.stake_amount,
            "totalStake": staker.stake_amount + staker.delegated_me,
            "isActive": staker.is_active,
            "validationScore": self._backend.get_validation_score(StakerID(staker_id)),
        }

    def get_staker_by_address(self, address: Address) -> Optional[Dict[str, Any]]:
        """Staker record looked up through its address."""
        staker_id = self._backend.get_staker_id(address)
        if staker_id == 0:
            return None
        return self.get_staker(staker_id)

    def staker_ids(self) -> List[int]:
        """Ids of every staker."""
        return [entry.staker_id for entry in self._backend.get_stakers()]

    def gas_price(self) -> int:
        """Suggested gas price, 0 when the backend cannot tell."""
        try:
            return self._backend.suggest_price()
        except BackendError:
            return 0
