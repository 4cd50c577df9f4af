"""Generic stub implementing the whole backend interface.

Every operation body is the same one-liner: resolve its own name from the
call site and replay whatever the result table holds for that name.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Any, Callable, Dict, List, Mapping, MutableMapping, Optional, Tuple

from ..domain.entities.operation_state import OperationState
from ..domain.exceptions import (
    ArityMismatchError,
    InjectedFailure,
    NoErrorChannelError,
    ResultTypeMismatchError,
    UnconfiguredOperationError,
    UnknownOperationError,
)
from ..domain.helpers.type_projection import conforms, describe
from ..domain.interfaces import (
    IAccountManager,
    IBackend,
    ISubscription,
    IWallet,
    PoolContent,
)
from ..domain.value_objects.chain import (
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
from ..domain.value_objects.dag import EpochStats, Event, EventHeaderData
from ..domain.value_objects.primitives import (
    Address,
    BlockIndex,
    BlockNumber,
    Epoch,
    EventHash,
    EventIndex,
    Hash,
    StakerID,
    Timestamp,
)
from ..domain.value_objects.result_entry import ResultEntry
from ..domain.value_objects.sfc import (
    SfcDelegator,
    SfcDelegatorAndAddr,
    SfcStaker,
    SfcStakerAndID,
    Validators,
)
from ..domain.value_objects.wallet import WalletEvent
from ..infrastructure.call_site import operation_name
from ..infrastructure.operation_catalogue import OperationSpec, build_catalogue
from ..infrastructure.result_table import ResultTable


class StubBackend(IBackend):
    """Stub backend replaying canned results per operation.

    Configure operations by name, hand the stub to the code under test, and
    every invocation replays the latest setup call for that name:

    - ``register(name, *values)``: return ``values`` (clean slate)
    - ``set_error(name, error)``: raise ``error`` (operations marked fallible)
    - ``set_failure(name, message)``: abort with InjectedFailure(message)

    Invoking an operation that was never configured raises
    UnconfiguredOperationError. Values registered here are checked against
    the declared result types right away; values written straight into
    ``results`` are only checked when the operation is invoked.

    The stub is meant for one test on one thread. Invocations never log and
    never change the table.

    Example:
        >>> backend = StubBackend()
        >>> backend.register("get_td", 1)
        >>> backend.get_td(to_hash(1))
        1
        >>> backend.set_failure("lock_account", "boom")
        >>> backend.lock_account(to_address(1))
        Traceback (most recent call last):
        ...
        InjectedFailure: boom
    """

    def __init__(self):
        """Initialize stub with nothing configured."""
        self._catalogue = build_catalogue(IBackend)
        self._results = ResultTable(operations=self._catalogue)

    # Setup API

    @property
    def results(self) -> ResultTable:
        """Underlying result table (unchecked setup)."""
        return self._results

    @property
    def catalogue(self) -> Mapping[str, OperationSpec]:
        """Every operation of the backend interface."""
        return self._catalogue

    def register(self, name: str, *values: Any) -> None:
        """Register the values ``name`` returns, clearing error and failure.

        Raises:
            UnknownOperationError: If name is not a backend operation
            ArityMismatchError: If the value count differs from the
                declared result count
            ResultTypeMismatchError: If a value does not conform to its
                declared type
        """
        spec = self._spec(name)
        if not spec.is_streaming and len(values) != spec.arity:
            raise ArityMismatchError(name, spec.arity, len(values))
        for position, value in enumerate(values):
            self._check_type(spec, position, value)
        self._results.register(name, *values)

    def set_error(self, name: str, error: Optional[BaseException]) -> None:
        """Make ``name`` raise ``error``; None clears it.

        Raises:
            UnknownOperationError: If name is not a backend operation
            NoErrorChannelError: If the operation is not fallible
            TypeError: If error is not an exception instance
        """
        spec = self._spec(name)
        if error is not None:
            if not spec.fallible:
                raise NoErrorChannelError(name)
            if not isinstance(error, BaseException):
                raise TypeError(
                    f"error must be an exception instance, got {type(error).__name__}"
                )
        self._results.set_error(name, error)

    def set_failure(self, name: str, message: Optional[str]) -> None:
        """Make ``name`` abort with ``message`` until registered again."""
        self._spec(name)
        self._results.set_failure(name, message)

    def state(self, name: str) -> OperationState:
        """Configured state of ``name``."""
        self._spec(name)
        return self._results.state(name)

    def unconfigured(self) -> List[str]:
        """Operations that would raise UnconfiguredOperationError, sorted."""
        return [
            name
            for name in self._catalogue
            if self._results.state(name) == OperationState.UNCONFIGURED
        ]

    # Dispatch

    def _spec(self, name: str) -> OperationSpec:
        spec = self._catalogue.get(name) if name else None
        if spec is None:
            raise UnknownOperationError(name)
        return spec

    @staticmethod
    def _check_type(spec: OperationSpec, position: int, value: Any) -> None:
        declared = spec.expected_type(position)
        if not conforms(value, declared):
            raise ResultTypeMismatchError(spec.name, position, describe(declared), value)

    def _project(self, spec: OperationSpec, entry: ResultEntry) -> List[Any]:
        values = entry.values
        projected = []
        for position in range(spec.arity):
            if position >= len(values):
                raise UnconfiguredOperationError(spec.name, position, len(values))
            self._check_type(spec, position, values[position])
            projected.append(values[position])
        return projected

    def _feed(self, spec: OperationSpec, entry: ResultEntry, sink: Callable[[Any], Any]) -> None:
        for position, value in enumerate(entry.values):
            self._check_type(spec, position, value)
            if sink(value) is False:
                break

    def _respond(self, name: str, sink: Optional[Callable[[Any], Any]] = None) -> Any:
        """Replay the entry configured for ``name``.

        Order: injected failure, then streamed values, then business error,
        then the projected results.
        """
        spec = self._spec(name)
        entry = self._results.lookup(name)

        if entry.is_failing:
            raise InjectedFailure(name, entry.failure_message)

        if spec.is_streaming and entry.registered and sink is not None:
            self._feed(spec, entry, sink)

        if spec.fallible and entry.error is not None:
            raise entry.error

        if not entry.registered:
            raise UnconfiguredOperationError(name, 0, 0)

        if spec.is_streaming:
            return None
        return spec.pack(self._project(spec, entry))

    # Capability flags

    def ext_rpc_enabled(self) -> bool:
        return self._respond(operation_name())

    def rpc_gas_cap(self) -> int:
        return self._respond(operation_name())  # gas cap for eth_call over RPC

    # Chain API

    def protocol_version(self) -> int:
        return self._respond(operation_name())

    def progress(self) -> PeerProgress:
        return self._respond(operation_name())

    def chain_db(self) -> MutableMapping[bytes, bytes]:
        return self._respond(operation_name())

    def chain_config(self) -> ChainConfig:
        return self._respond(operation_name())

    def current_block(self) -> EvmBlock:
        return self._respond(operation_name())

    def header_by_number(self, number: BlockNumber) -> Optional[EvmHeader]:
        return self._respond(operation_name())

    def header_by_hash(self, block_hash: Hash) -> Optional[EvmHeader]:
        return self._respond(operation_name())

    def block_by_number(self, number: BlockNumber) -> Optional[EvmBlock]:
        return self._respond(operation_name())

    def state_and_header_by_number(self, number: BlockNumber) -> Tuple[StateDB, EvmHeader]:
        return self._respond(operation_name())

    def get_block(self, block_hash: Hash) -> Optional[EvmBlock]:
        return self._respond(operation_name())

    def get_receipts_by_number(self, number: BlockNumber) -> List[Receipt]:
        return self._respond(operation_name())

    def get_td(self, block_hash: Hash) -> int:
        return self._respond(operation_name())

    def get_evm(
        self, msg: Message, state: StateDB, header: EvmHeader
    ) -> Tuple[object, Callable[[], Optional[Exception]]]:
        return self._respond(operation_name())

    # Transaction pool API

    def send_tx(self, signed_tx: Transaction) -> None:
        return self._respond(operation_name())

    def get_transaction(self, tx_hash: Hash) -> Tuple[Optional[Transaction], int, int]:
        return self._respond(operation_name())

    def get_pool_transactions(self) -> List[Transaction]:
        return self._respond(operation_name())

    def get_pool_transaction(self, tx_hash: Hash) -> Optional[Transaction]:
        return self._respond(operation_name())

    def get_pool_nonce(self, addr: Address) -> int:
        return self._respond(operation_name())

    def stats(self) -> Tuple[int, int]:
        return self._respond(operation_name())

    def tx_pool_content(self) -> Tuple[PoolContent, PoolContent]:
        return self._respond(operation_name())

    def subscribe_new_txs_notify(self, sink: Callable[[NewTxsNotify], None]) -> ISubscription:
        return self._respond(operation_name())

    def suggest_price(self) -> int:
        return self._respond(operation_name())

    # DAG API

    def get_event(self, short_event_id: str) -> Optional[Event]:
        return self._respond(operation_name())

    def get_event_header(self, short_event_id: str) -> Optional[EventHeaderData]:
        return self._respond(operation_name())

    def get_consensus_time(self, short_event_id: str) -> Timestamp:
        return self._respond(operation_name())

    def get_heads(self, epoch: BlockNumber) -> List[EventHash]:
        return self._respond(operation_name())

    def current_epoch(self) -> Epoch:
        return self._respond(operation_name())

    def get_epoch_stats(self, requested_epoch: BlockNumber) -> Optional[EpochStats]:
        return self._respond(operation_name())

    def for_each_event(self, epoch: BlockNumber, on_event: Callable[[Event], bool]) -> None:
        return self._respond(operation_name(), on_event)

    def ttf_report(
        self, until_block: BlockNumber, max_blocks: BlockIndex, mode: str
    ) -> Dict[EventHash, timedelta]:
        return self._respond(operation_name())

    def validator_time_drifts(
        self, epoch: BlockNumber, max_events: EventIndex
    ) -> Dict[StakerID, Dict[EventHash, timedelta]]:
        return self._respond(operation_name())

    # Staking API

    def get_validators(self) -> Validators:
        return self._respond(operation_name())

    def get_staker(self, staker_id: StakerID) -> Optional[SfcStaker]:
        return self._respond(operation_name())

    def get_staker_id(self, addr: Address) -> StakerID:
        return self._respond(operation_name())

    def get_stakers(self) -> List[SfcStakerAndID]:
        return self._respond(operation_name())

    def get_delegator(self, addr: Address) -> Optional[SfcDelegator]:
        return self._respond(operation_name())

    def get_delegators_of(self, staker_id: StakerID) -> List[SfcDelegatorAndAddr]:
        return self._respond(operation_name())

    def get_delegator_claimed_rewards(self, addr: Address) -> int:
        return self._respond(operation_name())

    def get_staker_claimed_rewards(self, staker_id: StakerID) -> int:
        return self._respond(operation_name())

    def get_staker_delegators_claimed_rewards(self, staker_id: StakerID) -> int:
        return self._respond(operation_name())

    def get_validation_score(self, staker_id: StakerID) -> int:
        return self._respond(operation_name())

    def get_origination_score(self, staker_id: StakerID) -> int:
        return self._respond(operation_name())

    def get_reward_weights(self, staker_id: StakerID) -> Tuple[int, int]:
        return self._respond(operation_name())

    def get_staker_poi(self, staker_id: StakerID) -> int:
        return self._respond(operation_name())

    def get_downtime(self, staker_id: StakerID) -> Tuple[BlockIndex, Timestamp]:
        return self._respond(operation_name())

    # Account API

    def wallets(self) -> List[IWallet]:
        return self._respond(operation_name())

    def subscribe(self, sink: Callable[[WalletEvent], None]) -> ISubscription:
        return self._respond(operation_name())

    def account_manager(self) -> IAccountManager:
        return self._respond(operation_name())

    def lock_account(self, address: Address) -> bool:
        return self._respond(operation_name())

    def unlock_account(
        self, address: Address, passphrase: str, duration: Optional[int] = None
    ) -> bool:
        return self._respond(operation_name())
