"""Tests driving consumer code through the stub backend."""

import pytest

from backend_double import create_stub_backend
from backend_double.domain.exceptions import (
    BackendError,
    InjectedFailure,
    UnconfiguredOperationError,
)
from backend_double.domain.value_objects import (
    SfcStaker,
    SfcStakerAndID,
    StakerID,
    to_address,
)
from tests.doubles import StakingAPI


def _staker(deactivated_epoch: int = 0) -> SfcStaker:
    return SfcStaker(
        created_epoch=1,
        created_time=1,
        address=to_address(5),
        stake_amount=100,
        delegated_me=50,
        deactivated_epoch=deactivated_epoch,
    )


class TestStakingAPI:
    """Test a consumer against configured behaviour."""

    def test_happy_path(self, backend):
        """Test values flow through the consumer."""
        backend.register("get_staker", _staker())
        backend.register("get_validation_score", 7)
        api = StakingAPI(backend)

        assert api.get_staker(1) == {
            "id": 1,
            "address": to_address(5),
            "stake": 100,
            "totalStake": 150,
            "isActive": True,
            "validationScore": 7,
        }

    def test_business_error_handled(self, backend):
        """Test the consumer turns business errors into empty results."""
        backend.set_error("get_staker", BackendError("staker not found"))
        assert StakingAPI(backend).get_staker(1) is None

    def test_missing_staker(self, backend):
        """Test a None result is handled."""
        backend.register("get_staker", None)
        assert StakingAPI(backend).get_staker(1) is None

    def test_lookup_by_address(self, backend):
        """Test chained operations each replay their own entry."""
        backend.register("get_staker_id", StakerID(2))
        backend.register("get_staker", _staker(deactivated_epoch=4))
        backend.register("get_validation_score", 0)

        result = StakingAPI(backend).get_staker_by_address(to_address(5))
        assert result["id"] == 2
        assert result["isActive"] is False

    def test_unknown_address(self, backend):
        """Test a zero staker id short-circuits."""
        backend.register("get_staker_id", StakerID(0))
        assert StakingAPI(backend).get_staker_by_address(to_address(5)) is None

    def test_failure_propagates(self, backend):
        """Test injected failures are never swallowed by the consumer."""
        backend.register("get_staker", _staker())
        backend.set_failure("get_validation_score", "score db corrupted")

        with pytest.raises(InjectedFailure, match="score db corrupted"):
            StakingAPI(backend).get_staker(1)

    def test_incomplete_setup_surfaces(self, backend):
        """Test an operation the consumer needs but the test forgot fails fast."""
        backend.register("get_staker", _staker())
        with pytest.raises(UnconfiguredOperationError, match="get_validation_score"):
            StakingAPI(backend).get_staker(1)

    def test_gas_price_fallback(self, backend):
        """Test the consumer falls back when no price can be suggested."""
        backend.set_error("suggest_price", BackendError("no data"))
        assert StakingAPI(backend).gas_price() == 0

    def test_with_default_preset(self):
        """Test the consumer works against the default preset."""
        backend = create_stub_backend()
        backend.register(
            "get_stakers",
            [SfcStakerAndID(staker_id=StakerID(1), staker=_staker()),
             SfcStakerAndID(staker_id=StakerID(3), staker=_staker())],
        )
        api = StakingAPI(backend)
        assert api.staker_ids() == [1, 3]
        assert api.gas_price() == 1
