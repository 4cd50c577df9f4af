"""Test doubles for a chain backend interface.

StubBackend implements every backend operation with one shared dispatch:
each operation resolves its own name from the call site and replays the
values, business error or injected failure configured for that name.

Example:
    >>> from backend_double import create_stub_backend
    >>> backend = create_stub_backend()
    >>> backend.register("suggest_price", 2)
    >>> backend.suggest_price()
    2
"""

from .presets import PresetManager, ResultPreset
from .factory import create_stub_backend
from .doubles import FakeAccountManager, FakeSubscription, FakeWallet, StubBackend
from .domain.entities import OperationState
from .domain.exceptions import (
    ArityMismatchError,
    BackendDoubleError,
    BackendError,
    DoubleSetupError,
    InjectedFailure,
    NoErrorChannelError,
    PresetError,
    ResultTypeMismatchError,
    UnconfiguredOperationError,
    UnknownOperationError,
)
from .domain.interfaces import IBackend
from .infrastructure import ResultTable, operation_name

__version__ = "1.0.0"

__all__ = [
    "ArityMismatchError",
    "BackendDoubleError",
    "BackendError",
    "DoubleSetupError",
    "FakeAccountManager",
    "FakeSubscription",
    "FakeWallet",
    "IBackend",
    "InjectedFailure",
    "NoErrorChannelError",
    "OperationState",
    "PresetError",
    "PresetManager",
    "ResultPreset",
    "ResultTable",
    "ResultTypeMismatchError",
    "StubBackend",
    "UnconfiguredOperationError",
    "UnknownOperationError",
    "create_stub_backend",
    "operation_name",
]
