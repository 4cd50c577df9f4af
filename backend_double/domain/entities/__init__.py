"""Domain entities."""

from .operation_state import OperationState

__all__ = ["OperationState"]
