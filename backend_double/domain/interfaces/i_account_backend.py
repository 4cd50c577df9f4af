"""IAccountBackend interface for wallet and account operations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, List, Optional

from ..helpers.operation_markers import fallible
from ..value_objects.primitives import Address
from ..value_objects.wallet import WalletEvent
from .i_account_manager import IAccountManager
from .i_subscription import ISubscription
from .i_wallet import IWallet


class IAccountBackend(ABC):
    """Interface for wallets, wallet events and account locking."""

    @abstractmethod
    def wallets(self) -> List[IWallet]:
        """All wallets."""

    @abstractmethod
    def subscribe(self, sink: Callable[[WalletEvent], None]) -> ISubscription:
        """Subscribe ``sink`` to wallet arrival/opening/removal."""

    @abstractmethod
    def account_manager(self) -> IAccountManager:
        """Account manager behind the wallets."""

    @abstractmethod
    @fallible
    def lock_account(self, address: Address) -> bool:
        """Lock ``address``; True if it was unlocked."""

    @abstractmethod
    @fallible
    def unlock_account(
        self, address: Address, passphrase: str, duration: Optional[int] = None
    ) -> bool:
        """Unlock ``address`` for ``duration`` seconds (None: until locked)."""
