"""Interfaces for the backend double.

IBackend is the surface a node offers to the RPC layer, split by category.
The collaborator interfaces (wallets, subscriptions, account manager) type
the objects that backend operations hand out.
"""

from .i_account_backend import IAccountBackend
from .i_account_manager import IAccountManager
from .i_backend import IBackend
from .i_chain_reader import IChainReader
from .i_dag_reader import IDagReader
from .i_sfc_reader import ISfcReader
from .i_subscription import ISubscription
from .i_tx_pool import ITxPool, PoolContent
from .i_wallet import IWallet

__all__ = [
    "IAccountBackend",
    "IAccountManager",
    "IBackend",
    "IChainReader",
    "IDagReader",
    "ISfcReader",
    "ISubscription",
    "ITxPool",
    "IWallet",
    "PoolContent",
]
