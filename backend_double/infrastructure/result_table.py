"""Result table holding canned behaviour per backend operation."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Iterator, List, Optional

from ..domain.entities.operation_state import OperationState
from ..domain.exceptions import UnknownOperationError
from ..domain.value_objects.result_entry import EMPTY_ENTRY, ResultEntry

_LOGGER = logging.getLogger(__name__)


class ResultTable:
    """Per-double store mapping operation names to ResultEntry records.

    At most one entry exists per name; every setup call replaces it.
    Registering values gives the operation a clean slate (error and failure
    cleared), while setting an error or a failure leaves the values alone.

    The table knows nothing about result types. Lookups never fail: an
    unknown name yields an empty entry, and it is up to the caller to treat
    missing values as a setup defect.

    Attributes:
        _entries: Entry per operation name
        _operations: Optional whitelist of accepted names

    Example:
        >>> table = ResultTable()
        >>> table.register("get_td", 1)
        >>> table.set_failure("get_td", "boom")
        >>> table.lookup("get_td").failure_message
        'boom'
        >>> table.register("get_td", 2)
        >>> table.lookup("get_td").failure_message is None
        True
    """

    def __init__(self, operations: Optional[Iterable[str]] = None):
        """Initialize empty table.

        Args:
            operations: Accepted operation names; any non-empty name is
                accepted when omitted
        """
        self._entries: Dict[str, ResultEntry] = {}
        self._operations = frozenset(operations) if operations is not None else None

    def _check_name(self, name: str) -> None:
        if not name:
            raise UnknownOperationError(name)
        if self._operations is not None and name not in self._operations:
            raise UnknownOperationError(name)

    def register(self, name: str, *values: Any) -> None:
        """Store ``values`` for ``name`` and clear its error and failure.

        Args:
            name: Operation name
            *values: Results in declared order

        Raises:
            UnknownOperationError: If name is empty or not accepted
        """
        self._check_name(name)
        self._entries[name] = self.lookup(name).with_values(values)
        _LOGGER.debug("Registered %d value(s) for %s", len(values), name)

    def set_error(self, name: str, error: Optional[BaseException]) -> None:
        """Store ``error`` for ``name``; None clears it.

        Values and failure message are kept.
        """
        self._check_name(name)
        self._entries[name] = self.lookup(name).with_error(error)
        _LOGGER.debug("Set error for %s: %r", name, error)

    def set_failure(self, name: str, message: Optional[str]) -> None:
        """Make ``name`` abort with ``message`` until it is registered again.

        An empty message or None clears the failure.
        """
        self._check_name(name)
        self._entries[name] = self.lookup(name).with_failure(message)
        _LOGGER.debug("Set failure for %s: %r", name, message)

    def lookup(self, name: str) -> ResultEntry:
        """Entry for ``name``; an empty entry if nothing was configured."""
        return self._entries.get(name, EMPTY_ENTRY)

    def state(self, name: str) -> OperationState:
        """Configured state of ``name``."""
        return self.lookup(name).state

    def names(self) -> List[str]:
        """Configured operation names, sorted."""
        return sorted(self._entries)

    def clear(self) -> None:
        """Forget every entry."""
        self._entries.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())
