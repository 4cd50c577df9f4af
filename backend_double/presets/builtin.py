"""Built-in presets.

Each preset is produced by a factory so every double gets its own objects
(wallets, subscriptions, the chain database) and nothing is shared between
tests.
"""

from __future__ import annotations

import time
from datetime import timedelta

from ..const import DEFAULT_PRESET_ID
from ..doubles.fake_account_manager import FakeAccountManager
from ..doubles.fake_subscription import FakeSubscription
from ..doubles.fake_wallet import FakeWallet
from ..domain.value_objects.chain import (
    AccountState,
    ChainConfig,
    EvmBlock,
    EvmHeader,
    PeerProgress,
    Receipt,
    Transaction,
)
from ..domain.value_objects.dag import EpochStats, Event, EventHeaderData
from ..domain.value_objects.primitives import (
    BlockIndex,
    Epoch,
    StakerID,
    Timestamp,
    to_address,
    to_event_hash,
    to_hash,
)
from ..domain.value_objects.sfc import (
    SfcDelegator,
    SfcDelegatorAndAddr,
    SfcStaker,
    SfcStakerAndID,
)
from .result_preset import ResultPreset

# Node looks 91 minutes behind so sync-status handlers report "syncing"
PROGRESS_LAG = timedelta(minutes=91)


def _tx(seed: int) -> Transaction:
    return Transaction(nonce=seed, to=to_address(seed), value=seed, gas=seed, gas_price=0)


def _block() -> EvmBlock:
    return EvmBlock(
        header=EvmHeader(
            number=1,
            hash=to_hash(2),
            parent_hash=to_hash(3),
            root=to_hash(4),
            tx_hash=to_hash(5),
            time=Timestamp(6),
            coinbase=to_address(7),
            gas_limit=8,
            gas_used=9,
        ),
        transactions=(_tx(1),),
    )


def _event_header(frame: int = 1, is_root: bool = True) -> EventHeaderData:
    return EventHeaderData(
        version=1,
        epoch=Epoch(2),
        seq=1,
        frame=frame,
        is_root=is_root,
        creator=StakerID(1),
    )


def _staker() -> SfcStaker:
    return SfcStaker(
        created_epoch=Epoch(1),
        created_time=Timestamp(1),
        address=to_address(1),
        stake_amount=1,
        delegated_me=0,
    )


def _delegator() -> SfcDelegator:
    return SfcDelegator(
        created_epoch=Epoch(1),
        created_time=Timestamp(2),
        to_staker_id=StakerID(1),
    )


def build_default_preset() -> ResultPreset:
    """Preset configuring every backend operation with small sample data."""
    wallets = [FakeWallet(), FakeWallet(), FakeWallet()]
    lagging = Timestamp(time.time_ns() - int(PROGRESS_LAG.total_seconds() * 1e9))
    eh = to_event_hash

    results = {
        # Capability flags
        "ext_rpc_enabled": (False,),
        "rpc_gas_cap": (1,),
        # Chain
        "protocol_version": (1,),
        "progress": (
            PeerProgress(
                current_epoch=Epoch(1),
                current_block=BlockIndex(2),
                current_block_hash=eh(3),
                current_block_time=lagging,
                highest_block=BlockIndex(5),
                highest_epoch=Epoch(6),
            ),
        ),
        "chain_db": ({},),
        "chain_config": (ChainConfig(chain_id=1),),
        "current_block": (_block(),),
        "header_by_number": (EvmHeader(number=1),),
        "header_by_hash": (EvmHeader(number=1),),
        "block_by_number": (_block(),),
        "get_block": (_block(),),
        "state_and_header_by_number": (
            {to_address(1): AccountState(nonce=1, balance=10, code=b"\x01\x02\x03")},
            EvmHeader(number=0),
        ),
        "get_receipts_by_number": (
            [
                Receipt(
                    status=0,
                    cumulative_gas_used=100,
                    post_state=b"\x01\x02\x03",
                    contract_address=to_address(1),
                ),
                Receipt(status=0, cumulative_gas_used=100),
            ],
        ),
        "get_td": (1,),
        "get_evm": (object(), lambda: None),
        # Transaction pool
        "send_tx": (),
        "get_transaction": (_tx(1), 1, 1),
        "get_pool_transactions": ([_tx(3), _tx(4)],),
        "get_pool_transaction": (_tx(1),),
        "get_pool_nonce": (1,),
        "stats": (2, 2),
        "tx_pool_content": (
            {to_address(1): [_tx(1), _tx(2)]},
            {to_address(1): [_tx(3), _tx(4)]},
        ),
        "subscribe_new_txs_notify": (FakeSubscription(),),
        "suggest_price": (1,),
        # DAG
        "get_event": (Event(header=_event_header(), transactions=(_tx(1),)),),
        "get_event_header": (_event_header(),),
        "get_consensus_time": (Timestamp(1),),
        "get_heads": ([eh(1)],),
        "current_epoch": (Epoch(1),),
        "get_epoch_stats": (EpochStats(start=Timestamp(1), end=Timestamp(2), epoch=Epoch(1)),),
        "for_each_event": (Event(header=_event_header(frame=0, is_root=False)),),
        "ttf_report": (
            {eh(n): timedelta(seconds=n) for n in range(1, 5)},
        ),
        "validator_time_drifts": (
            {
                StakerID(1): {eh(1): timedelta(seconds=1), eh(2): timedelta(seconds=2)},
                StakerID(2): {eh(3): timedelta(seconds=3), eh(4): timedelta(seconds=4)},
            },
        ),
        # Staking
        "get_validators": ({StakerID(1): 1},),
        "get_staker": (_staker(),),
        "get_staker_id": (StakerID(1),),
        "get_stakers": ([SfcStakerAndID(staker_id=StakerID(1), staker=_staker())],),
        "get_delegator": (_delegator(),),
        "get_delegators_of": ([SfcDelegatorAndAddr(delegator=_delegator(), addr=to_address(1))],),
        "get_delegator_claimed_rewards": (1,),
        "get_staker_claimed_rewards": (1,),
        "get_staker_delegators_claimed_rewards": (1,),
        "get_validation_score": (1,),
        "get_origination_score": (1,),
        "get_reward_weights": (1, 1),
        "get_staker_poi": (1,),
        "get_downtime": (BlockIndex(1), Timestamp(1)),
        # Accounts
        "wallets": (wallets,),
        "subscribe": (FakeSubscription(),),
        "account_manager": (FakeAccountManager(wallets),),
        "lock_account": (True,),
        "unlock_account": (True,),
    }

    return ResultPreset(
        id=DEFAULT_PRESET_ID,
        name="Default",
        description="Every operation configured with small sample records",
        results=results,
        is_builtin=True,
    )


BUILTIN_PRESETS = {
    DEFAULT_PRESET_ID: build_default_preset,
}
