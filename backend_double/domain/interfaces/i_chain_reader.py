"""IChainReader interface for block, header and state queries."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, List, MutableMapping, Optional, Tuple

from ..helpers.operation_markers import fallible
from ..value_objects.chain import (
    ChainConfig,
    EvmBlock,
    EvmHeader,
    Message,
    PeerProgress,
    Receipt,
    StateDB,
)
from ..value_objects.primitives import BlockNumber, Hash


class IChainReader(ABC):
    """Interface for chain and state queries.

    Operations marked ``@fallible`` raise a business error (for example
    "header not found") that RPC handlers are expected to translate.
    Lookups by number accept ``LATEST_BLOCK`` and ``PENDING_BLOCK``.

    Example:
        >>> header = backend.header_by_number(LATEST_BLOCK)
        >>> block = backend.get_block(header.hash)
    """

    @abstractmethod
    def protocol_version(self) -> int:
        """Wire protocol version."""

    @abstractmethod
    def progress(self) -> PeerProgress:
        """Synchronisation progress."""

    @abstractmethod
    def chain_db(self) -> MutableMapping[bytes, bytes]:
        """Raw key-value store holding the chain."""

    @abstractmethod
    def chain_config(self) -> ChainConfig:
        """Chain parameters."""

    @abstractmethod
    def current_block(self) -> EvmBlock:
        """Head block."""

    @abstractmethod
    @fallible
    def header_by_number(self, number: BlockNumber) -> Optional[EvmHeader]:
        """Header at ``number``, None if unknown."""

    @abstractmethod
    @fallible
    def header_by_hash(self, block_hash: Hash) -> Optional[EvmHeader]:
        """Header with ``block_hash``, None if unknown."""

    @abstractmethod
    @fallible
    def block_by_number(self, number: BlockNumber) -> Optional[EvmBlock]:
        """Block at ``number``, None if unknown."""

    @abstractmethod
    @fallible
    def state_and_header_by_number(self, number: BlockNumber) -> Tuple[StateDB, EvmHeader]:
        """Account state at ``number`` together with its header.

        Args:
            number: Block number or LATEST_BLOCK / PENDING_BLOCK

        Returns:
            Tuple of (state, header)
        """

    @abstractmethod
    @fallible
    def get_block(self, block_hash: Hash) -> Optional[EvmBlock]:
        """Block with ``block_hash``, None if unknown."""

    @abstractmethod
    @fallible
    def get_receipts_by_number(self, number: BlockNumber) -> List[Receipt]:
        """Receipts of every transaction in the block at ``number``."""

    @abstractmethod
    def get_td(self, block_hash: Hash) -> int:
        """Accumulated difficulty up to ``block_hash``."""

    @abstractmethod
    @fallible
    def get_evm(
        self, msg: Message, state: StateDB, header: EvmHeader
    ) -> Tuple[object, Callable[[], Optional[Exception]]]:
        """EVM prepared for executing ``msg``.

        Returns:
            Tuple of (evm, error_getter); error_getter reports the VM error
            after execution, if any
        """
