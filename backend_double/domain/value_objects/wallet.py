"""Wallet value objects."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .primitives import Address


class WalletEventType(Enum):
    """Wallet lifecycle events."""

    ARRIVED = "arrived"  # Wallet detected
    OPENED = "opened"  # Wallet opened
    DROPPED = "dropped"  # Wallet removed


@dataclass(frozen=True)
class Account:
    """Account held by a wallet."""

    address: Address
    url: str = ""


@dataclass(frozen=True)
class WalletEvent:
    """Notification fired on wallet arrival, opening or removal."""

    wallet: object  # IWallet
    kind: WalletEventType
