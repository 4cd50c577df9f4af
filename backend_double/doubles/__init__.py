"""Test doubles for the backend interface.

StubBackend returns predetermined values for every backend operation.
The Fake* classes are lightweight working implementations of the
collaborator interfaces (wallets, subscriptions, account manager) that
backend operations hand out.

Example:
    >>> from backend_double.doubles import StubBackend
    >>> backend = StubBackend()
    >>> backend.register("stats", 2, 3)
    >>> pending, queued = backend.stats()
"""

from .fake_account_manager import FakeAccountManager
from .fake_subscription import FakeSubscription
from .fake_wallet import FakeWallet
from .stub_backend import StubBackend

__all__ = [
    "FakeAccountManager",
    "FakeSubscription",
    "FakeWallet",
    "StubBackend",
]
