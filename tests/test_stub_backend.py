"""Tests for StubBackend."""

import logging

import pytest

from backend_double.domain.entities import OperationState
from backend_double.domain.exceptions import (
    ArityMismatchError,
    BackendError,
    DoubleSetupError,
    InjectedFailure,
    NoErrorChannelError,
    ResultTypeMismatchError,
    UnconfiguredOperationError,
    UnknownOperationError,
)
from backend_double.domain.value_objects import (
    BlockNumber,
    EvmHeader,
    Event,
    EventHeaderData,
    Epoch,
    StakerID,
    Transaction,
    to_address,
    to_hash,
)
from backend_double.doubles import StubBackend
from backend_double.infrastructure.call_site import operation_name
from tests.doubles import EventSpy


def _event(seq: int) -> Event:
    return Event(
        header=EventHeaderData(
            version=1, epoch=Epoch(1), seq=seq, frame=1, is_root=False, creator=StakerID(1)
        )
    )


def _tx(nonce: int) -> Transaction:
    return Transaction(nonce=nonce, to=to_address(1), value=1, gas=21000, gas_price=1)


class TestScenarios:
    """Test the basic setup-then-invoke scenarios."""

    def test_registered_value_is_returned(self, backend):
        """Test a registered value is returned without error."""
        backend.register("get_td", 7)
        assert backend.get_td(to_hash(1)) == 7

    def test_error_is_raised(self, backend):
        """Test an injected business error reaches the caller."""
        error = BackendError("no price data")
        backend.set_error("suggest_price", error)

        with pytest.raises(BackendError) as exc_info:
            backend.suggest_price()
        assert exc_info.value is error

    def test_failure_aborts_with_message(self, backend):
        """Test an injected failure aborts with exactly its message."""
        backend.set_failure("lock_account", "boom")

        with pytest.raises(InjectedFailure) as exc_info:
            backend.lock_account(to_address(1))
        assert str(exc_info.value) == "boom"
        assert exc_info.value.operation == "lock_account"

    def test_unregistered_operation_fails_fast(self, backend):
        """Test an operation never registered raises even if others are."""
        backend.register("get_td", 1)
        backend.register("stats", 1, 1)
        backend.set_failure("suggest_price", "boom")

        with pytest.raises(UnconfiguredOperationError, match="get_block"):
            backend.get_block(to_hash(1))


class TestReturnShapes:
    """Test projection of registered values into declared results."""

    def test_several_results_return_tuple(self, backend):
        """Test operations with several results return a tuple."""
        backend.register("stats", 2, 3)
        pending, queued = backend.stats()
        assert (pending, queued) == (2, 3)

    def test_no_results_return_none(self, backend):
        """Test operations without results return None once registered."""
        backend.register("send_tx")
        assert backend.send_tx(_tx(1)) is None

    def test_optional_result_accepts_none(self, backend):
        """Test None can be registered for optional results."""
        backend.register("header_by_number", None)
        assert backend.header_by_number(BlockNumber(1)) is None

    def test_values_returned_as_registered(self, backend):
        """Test the registered objects themselves are returned."""
        txs = [_tx(1), _tx(2)]
        backend.register("get_pool_transactions", txs)
        assert backend.get_pool_transactions() is txs

    def test_mixed_result_types(self, backend):
        """Test heterogeneous results keep their positions."""
        tx = _tx(1)
        backend.register("get_transaction", tx, 5, 0)
        assert backend.get_transaction(to_hash(1)) == (tx, 5, 0)

    def test_callable_result(self, backend):
        """Test callables are accepted as results."""
        evm = object()
        backend.register("get_evm", evm, lambda: None)
        returned_evm, vm_error = backend.get_evm(None, {}, EvmHeader(number=1))
        assert returned_evm is evm
        assert vm_error() is None

    def test_replayed_on_every_invocation(self, backend):
        """Test repeated invocations replay the same values."""
        backend.register("current_epoch", Epoch(4))
        assert [backend.current_epoch() for _ in range(3)] == [4, 4, 4]


class TestSetupSemantics:
    """Test how setup calls combine."""

    def test_reregister_replaces(self, backend):
        """Test a second registration fully replaces the first."""
        backend.register("get_td", 1)
        backend.register("get_td", 2)
        assert backend.get_td(to_hash(1)) == 2

    def test_reregister_clears_error(self, backend):
        """Test registering again clears a previously set error."""
        backend.set_error("suggest_price", BackendError("x"))
        backend.register("suggest_price", 5)
        assert backend.suggest_price() == 5

    def test_reregister_clears_failure(self, backend):
        """Test registering again clears a previously set failure."""
        backend.register("get_td", 1)
        backend.set_failure("get_td", "boom")
        for _ in range(3):
            with pytest.raises(InjectedFailure, match="^boom$"):
                backend.get_td(to_hash(1))

        backend.register("get_td", 2)
        assert backend.get_td(to_hash(1)) == 2

    def test_clearing_error_restores_values(self, backend):
        """Test setting an error leaves values for the next invocation."""
        backend.register("get_staker_id", StakerID(3))
        backend.set_error("get_staker_id", BackendError("x"))
        with pytest.raises(BackendError):
            backend.get_staker_id(to_address(1))

        backend.set_error("get_staker_id", None)
        assert backend.get_staker_id(to_address(1)) == 3

    def test_failure_beats_error(self, backend):
        """Test a failure takes priority over a business error."""
        backend.set_error("suggest_price", BackendError("x"))
        backend.set_failure("suggest_price", "boom")
        with pytest.raises(InjectedFailure):
            backend.suggest_price()

    def test_clearing_failure_with_empty_message(self, backend):
        """Test an empty failure message clears the failure."""
        backend.register("get_td", 1)
        backend.set_failure("get_td", "boom")
        backend.set_failure("get_td", "")
        assert backend.get_td(to_hash(1)) == 1

    def test_error_without_values_on_operation_without_results(self, backend):
        """Test submission errors need no registered values."""
        backend.set_error("send_tx", BackendError("nonce too low"))
        with pytest.raises(BackendError, match="nonce too low"):
            backend.send_tx(_tx(1))

    def test_unregistered_operation_without_results_fails_fast(self, backend):
        """Test operations without results still need a registration."""
        with pytest.raises(UnconfiguredOperationError, match="send_tx"):
            backend.send_tx(_tx(1))

    def test_operations_independent(self, backend):
        """Test configuring one operation never affects another."""
        backend.register("get_td", 1)
        backend.register("suggest_price", 2)
        backend.set_failure("suggest_price", "boom")
        assert backend.get_td(to_hash(1)) == 1

    def test_stubs_independent(self):
        """Test two stubs never share configuration."""
        first = StubBackend()
        second = StubBackend()
        first.register("get_td", 1)
        with pytest.raises(UnconfiguredOperationError):
            second.get_td(to_hash(1))


class TestRegistrationChecks:
    """Test values are checked when registered through the stub."""

    def test_unknown_operation(self, backend):
        """Test typos are rejected."""
        with pytest.raises(UnknownOperationError, match="get_tdd"):
            backend.register("get_tdd", 1)

    def test_arity_mismatch(self, backend):
        """Test the value count must match the declared results."""
        with pytest.raises(ArityMismatchError, match="declares 2 result"):
            backend.register("stats", 1)

    def test_type_mismatch(self, backend):
        """Test values must conform to the declared result types."""
        with pytest.raises(ResultTypeMismatchError, match="result 0 must be int"):
            backend.register("get_td", "1")

    def test_type_mismatch_is_type_error(self, backend):
        """Test type mismatches can be caught as TypeError."""
        with pytest.raises(TypeError):
            backend.register("stats", 1, "2")

    def test_bool_rejected_for_int(self, backend):
        """Test bool is not accepted as a count."""
        with pytest.raises(ResultTypeMismatchError):
            backend.register("get_pool_nonce", True)

    def test_failed_registration_keeps_previous_entry(self, backend):
        """Test a rejected registration leaves the table untouched."""
        backend.register("get_td", 1)
        with pytest.raises(DoubleSetupError):
            backend.register("get_td", "x")
        assert backend.get_td(to_hash(1)) == 1

    def test_error_on_operation_without_error_channel(self, backend):
        """Test errors are only accepted by fallible operations."""
        with pytest.raises(NoErrorChannelError, match="current_block"):
            backend.set_error("current_block", BackendError("x"))

    def test_error_must_be_exception(self, backend):
        """Test errors must be exception instances."""
        with pytest.raises(TypeError, match="exception instance"):
            backend.set_error("suggest_price", "not an exception")

    def test_any_exception_can_be_injected(self, backend):
        """Test errors other than BackendError are raised as they are."""
        backend.set_error("get_block", KeyError("missing"))
        with pytest.raises(KeyError):
            backend.get_block(to_hash(1))

    def test_failure_on_unknown_operation(self, backend):
        """Test failures are checked against the catalogue."""
        with pytest.raises(UnknownOperationError):
            backend.set_failure("lock", "boom")


class TestUncheckedRegistration:
    """Test values written straight into the table are checked on invocation."""

    def test_wrong_type_raises_on_invocation(self, backend):
        """Test mismatched values are reported when projected."""
        backend.results.register("get_td", "one")
        with pytest.raises(ResultTypeMismatchError, match="get_td"):
            backend.get_td(to_hash(1))

    def test_missing_position_raises_on_invocation(self, backend):
        """Test missing positions are reported when projected."""
        backend.results.register("stats", 1)
        with pytest.raises(UnconfiguredOperationError) as exc_info:
            backend.stats()
        assert exc_info.value.position == 1
        assert exc_info.value.registered == 1

    def test_extra_values_ignored(self, backend):
        """Test values beyond the declared results are not returned."""
        backend.results.register("get_td", 1, 2)
        assert backend.get_td(to_hash(1)) == 1


class TestOperationNames:
    """Test name resolution failures surface clearly."""

    def test_anonymous_call_site_is_rejected(self, backend):
        """Test an unresolvable caller never matches an entry."""
        backend.register("get_td", 1)
        respond = lambda: backend._respond(operation_name())  # noqa: E731
        with pytest.raises(UnknownOperationError, match="Could not resolve"):
            respond()

    def test_every_operation_dispatches_to_its_own_name(self, backend):
        """Test each operation body resolves to its own name."""
        for name in backend.catalogue:
            backend.set_failure(name, name)
        for name in ("get_td", "stats", "wallets", "ttf_report", "rpc_gas_cap"):
            method = getattr(backend, name)
            arg_count = method.__code__.co_argcount - 1
            with pytest.raises(InjectedFailure, match=f"^{name}$"):
                method(*([None] * arg_count))


class TestStreaming:
    """Test operations feeding values into a callback."""

    def test_feeds_every_value(self, backend):
        """Test registered events are fed in order."""
        events = [_event(1), _event(2), _event(3)]
        backend.register("for_each_event", *events)
        spy = EventSpy()

        assert backend.for_each_event(BlockNumber(1), spy) is None
        assert spy.received == events

    def test_stops_when_callback_returns_false(self, backend):
        """Test the feed stops once the callback returns False."""
        backend.register("for_each_event", _event(1), _event(2), _event(3))
        spy = EventSpy(stop_after=2)
        backend.for_each_event(BlockNumber(1), spy)
        assert spy.calls == 2

    def test_none_return_continues(self, backend):
        """Test only an explicit False stops the feed."""
        backend.register("for_each_event", _event(1), _event(2))
        received = []
        backend.for_each_event(BlockNumber(1), received.append)
        assert len(received) == 2

    def test_empty_feed(self, backend):
        """Test registering no events feeds nothing."""
        backend.register("for_each_event")
        spy = EventSpy()
        backend.for_each_event(BlockNumber(1), spy)
        assert spy.calls == 0

    def test_error_raised_after_feed(self, backend):
        """Test a set error is raised once the events are fed."""
        backend.register("for_each_event", _event(1))
        backend.set_error("for_each_event", BackendError("epoch pruned"))
        spy = EventSpy()
        with pytest.raises(BackendError, match="epoch pruned"):
            backend.for_each_event(BlockNumber(1), spy)
        assert spy.calls == 1

    def test_failure_feeds_nothing(self, backend):
        """Test a failure aborts before any event is fed."""
        backend.register("for_each_event", _event(1))
        backend.set_failure("for_each_event", "boom")
        spy = EventSpy()
        with pytest.raises(InjectedFailure):
            backend.for_each_event(BlockNumber(1), spy)
        assert spy.calls == 0

    def test_unregistered_fails_fast(self, backend):
        """Test streaming operations also need a registration."""
        with pytest.raises(UnconfiguredOperationError):
            backend.for_each_event(BlockNumber(1), EventSpy())

    def test_items_checked_against_stream_type(self, backend):
        """Test fed items must be events."""
        with pytest.raises(ResultTypeMismatchError):
            backend.register("for_each_event", _event(1), "not an event")


class TestInspection:
    """Test state inspection helpers."""

    def test_state(self, backend):
        """Test state follows setup calls."""
        assert backend.state("get_td") == OperationState.UNCONFIGURED
        backend.register("get_td", 1)
        assert backend.state("get_td") == OperationState.CONFIGURED
        backend.set_failure("get_td", "boom")
        assert backend.state("get_td") == OperationState.FAILING

    def test_state_unknown_operation(self, backend):
        """Test state rejects unknown names."""
        with pytest.raises(UnknownOperationError):
            backend.state("nope")

    def test_unconfigured(self, backend):
        """Test unconfigured lists operations that would fail fast."""
        assert backend.unconfigured() == sorted(backend.catalogue)
        backend.register("get_td", 1)
        assert "get_td" not in backend.unconfigured()
        assert len(backend.unconfigured()) == len(backend.catalogue) - 1

    def test_results_exposes_table(self, backend):
        """Test the underlying table reflects checked registrations."""
        backend.register("get_td", 1)
        assert backend.results.lookup("get_td").values == (1,)


class TestInvocationLogging:
    """Test invocations stay silent."""

    def test_invocation_not_logged(self, backend, caplog):
        """Test invoking operations emits no log records."""
        backend.register("get_td", 1)
        backend.set_failure("suggest_price", "boom")
        caplog.clear()

        with caplog.at_level(logging.DEBUG):
            backend.get_td(to_hash(1))
            with pytest.raises(InjectedFailure):
                backend.suggest_price()

        assert caplog.records == []
