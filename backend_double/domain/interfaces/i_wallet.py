"""IWallet interface for wallets exposed by the account backend."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from ..value_objects.chain import Transaction
from ..value_objects.wallet import Account


class IWallet(ABC):
    """Interface for a wallet holding one or more accounts.

    Wallets are external collaborators: the backend double only hands them
    out, it never signs anything itself.

    Example:
        >>> wallet = backend.wallets()[0]
        >>> wallet.open("secret")
        >>> accounts = wallet.accounts()
    """

    @abstractmethod
    def url(self) -> str:
        """Canonical URL of the wallet."""

    @abstractmethod
    def status(self) -> str:
        """Textual status, e.g. "ok" or "locked"."""

    @abstractmethod
    def open(self, passphrase: str) -> None:
        """Open the wallet.

        Args:
            passphrase: Passphrase unlocking the wallet
        """

    @abstractmethod
    def close(self) -> None:
        """Close the wallet; safe to call multiple times."""

    @abstractmethod
    def accounts(self) -> List[Account]:
        """Accounts held by the wallet."""

    @abstractmethod
    def contains(self, account: Account) -> bool:
        """Whether ``account`` belongs to this wallet."""

    @abstractmethod
    def sign_data(self, account: Account, mime_type: str, data: bytes) -> bytes:
        """Sign arbitrary data with ``account``."""

    @abstractmethod
    def sign_tx(self, account: Account, tx: Transaction, chain_id: int) -> Transaction:
        """Sign ``tx`` for ``chain_id`` with ``account``."""
