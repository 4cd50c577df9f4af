"""Fake wallet handed out by the backend double.

This fake implements IWallet without any key material.
"""

from __future__ import annotations

from dataclasses import replace
from typing import List, Optional

from ..domain.interfaces import IWallet
from ..domain.value_objects.chain import Transaction
from ..domain.value_objects.primitives import Address, to_address
from ..domain.value_objects.wallet import Account

SIGNATURE_LENGTH = 128


class FakeWallet(IWallet):
    """Fake wallet holding fixed accounts.

    Signing returns zero bytes of signature length, transaction signing
    returns the transaction unchanged apart from its hash.

    Example:
        >>> wallet = FakeWallet()
        >>> wallet.open("1234")
        >>> assert wallet.status() == "ok"
        >>> assert wallet.accounts()[0].address == to_address(1)
    """

    def __init__(self, url: str = "https://test.ru/test", addresses: Optional[List[Address]] = None):
        self._url = url
        self._accounts = [
            Account(address=address, url=url) for address in (addresses or [to_address(1)])
        ]
        self._open = False

    def url(self) -> str:
        return self._url

    def status(self) -> str:
        return "ok" if self._open else "closed"

    def open(self, passphrase: str) -> None:
        self._open = True

    def close(self) -> None:
        self._open = False

    def accounts(self) -> List[Account]:
        return list(self._accounts)

    def contains(self, account: Account) -> bool:
        return any(held.address == account.address for held in self._accounts)

    def sign_data(self, account: Account, mime_type: str, data: bytes) -> bytes:
        return bytes(SIGNATURE_LENGTH)

    def sign_tx(self, account: Account, tx: Transaction, chain_id: int) -> Transaction:
        return replace(tx, hash=tx.hash or "0x" + "ab" * 32)
