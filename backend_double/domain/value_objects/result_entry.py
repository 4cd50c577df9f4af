"""ResultEntry value object.

Holds what one backend operation replays when invoked.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Tuple

from ..entities.operation_state import OperationState


@dataclass(frozen=True)
class ResultEntry:
    """Immutable behaviour configured for one operation.

    Attributes:
        values: Results in declared order, matched positionally
        error: Business error raised by operations with an error channel
        failure_message: When non-empty, invoking the operation aborts
            with this message instead of returning
        registered: Whether values were ever registered

    Example:
        >>> entry = ResultEntry(values=(1,), registered=True)
        >>> entry.state
        <OperationState.CONFIGURED: 'configured'>
        >>> ResultEntry().state
        <OperationState.UNCONFIGURED: 'unconfigured'>
    """

    values: Tuple[Any, ...] = ()
    error: Optional[BaseException] = None
    failure_message: Optional[str] = None
    registered: bool = False

    @property
    def is_failing(self) -> bool:
        """True when invoking the operation must abort."""
        return bool(self.failure_message)

    @property
    def state(self) -> OperationState:
        """Current state of the operation."""
        if self.is_failing:
            return OperationState.FAILING
        if self.registered or self.error is not None:
            return OperationState.CONFIGURED
        return OperationState.UNCONFIGURED

    def with_values(self, values: Tuple[Any, ...]) -> ResultEntry:
        """Return a clean entry holding ``values`` (error and failure cleared)."""
        return ResultEntry(values=tuple(values), registered=True)

    def with_error(self, error: Optional[BaseException]) -> ResultEntry:
        """Return a copy with ``error`` set, values and failure untouched."""
        return ResultEntry(
            values=self.values,
            error=error,
            failure_message=self.failure_message,
            registered=self.registered,
        )

    def with_failure(self, message: Optional[str]) -> ResultEntry:
        """Return a copy with the failure message set, values and error untouched."""
        return ResultEntry(
            values=self.values,
            error=self.error,
            failure_message=message or None,
            registered=self.registered,
        )


EMPTY_ENTRY = ResultEntry()
