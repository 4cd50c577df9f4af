"""IAccountManager interface for the account manager behind the backend."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from ..value_objects.primitives import Address
from ..value_objects.wallet import Account
from .i_wallet import IWallet


class IAccountManager(ABC):
    """Interface for the account manager exposed by the backend.

    Keystore and signing live behind this interface and are out of scope
    for the double; tests hand in a fake.
    """

    @abstractmethod
    def wallets(self) -> List[IWallet]:
        """All wallets known to the manager."""

    @abstractmethod
    def accounts(self) -> List[Address]:
        """Addresses of all accounts over all wallets."""

    @abstractmethod
    def find(self, account: Account) -> IWallet:
        """Wallet containing ``account``.

        Raises:
            LookupError: If no wallet holds the account
        """
