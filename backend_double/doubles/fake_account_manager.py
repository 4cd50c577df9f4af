"""Fake account manager handed out by the backend double."""

from __future__ import annotations

from typing import List, Optional

from ..domain.interfaces import IAccountManager, IWallet
from ..domain.value_objects.primitives import Address
from ..domain.value_objects.wallet import Account


class FakeAccountManager(IAccountManager):
    """Account manager over a fixed list of wallets.

    Example:
        >>> manager = FakeAccountManager([FakeWallet()])
        >>> manager.accounts()
        ['0x01...']
    """

    def __init__(self, wallets: Optional[List[IWallet]] = None):
        self._wallets = list(wallets or [])

    def wallets(self) -> List[IWallet]:
        return list(self._wallets)

    def accounts(self) -> List[Address]:
        return [account.address for wallet in self._wallets for account in wallet.accounts()]

    def find(self, account: Account) -> IWallet:
        for wallet in self._wallets:
            if wallet.contains(account):
                return wallet
        raise LookupError(f"Unknown account: {account.address}")
