"""ITxPool interface for transaction pool queries and submission."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Dict, List, Optional, Tuple

from ..helpers.operation_markers import fallible
from ..value_objects.chain import NewTxsNotify, Transaction
from ..value_objects.primitives import Address, Hash
from .i_subscription import ISubscription

PoolContent = Dict[Address, List[Transaction]]


class ITxPool(ABC):
    """Interface for the transaction pool.

    Example:
        >>> pending, queued = backend.stats()
        >>> backend.send_tx(signed_tx)
    """

    @abstractmethod
    @fallible
    def send_tx(self, signed_tx: Transaction) -> None:
        """Submit a signed transaction.

        Raises:
            Exception: Whatever the pool rejects the transaction with
        """

    @abstractmethod
    @fallible
    def get_transaction(self, tx_hash: Hash) -> Tuple[Optional[Transaction], int, int]:
        """Transaction with ``tx_hash``.

        Returns:
            Tuple of (transaction, block number, index in block)
        """

    @abstractmethod
    @fallible
    def get_pool_transactions(self) -> List[Transaction]:
        """All pooled transactions."""

    @abstractmethod
    def get_pool_transaction(self, tx_hash: Hash) -> Optional[Transaction]:
        """Pooled transaction with ``tx_hash``, None if absent."""

    @abstractmethod
    @fallible
    def get_pool_nonce(self, addr: Address) -> int:
        """Next nonce for ``addr`` taking pooled transactions into account."""

    @abstractmethod
    def stats(self) -> Tuple[int, int]:
        """Number of (pending, queued) transactions."""

    @abstractmethod
    def tx_pool_content(self) -> Tuple[PoolContent, PoolContent]:
        """Pending and queued transactions grouped by sender."""

    @abstractmethod
    def subscribe_new_txs_notify(
        self, sink: Callable[[NewTxsNotify], None]
    ) -> ISubscription:
        """Subscribe ``sink`` to transactions entering the pool."""

    @abstractmethod
    @fallible
    def suggest_price(self) -> int:
        """Suggested gas price."""
