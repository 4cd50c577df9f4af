"""IBackend interface: the full backend surface used by the RPC layer."""

from __future__ import annotations

from abc import abstractmethod

from .i_account_backend import IAccountBackend
from .i_chain_reader import IChainReader
from .i_dag_reader import IDagReader
from .i_sfc_reader import ISfcReader
from .i_tx_pool import ITxPool


class IBackend(IChainReader, ITxPool, IDagReader, ISfcReader, IAccountBackend):
    """Everything the RPC API layer needs from a node.

    The return annotation of each operation is its declared result list:
    ``Tuple[...]`` means several results, ``None`` means none. Operations
    with an error channel are marked ``@fallible``.
    """

    @abstractmethod
    def ext_rpc_enabled(self) -> bool:
        """Whether RPC is reachable from outside the host."""

    @abstractmethod
    def rpc_gas_cap(self) -> int:
        """Gas cap applied to simulated calls."""
