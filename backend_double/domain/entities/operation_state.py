"""Operation state enum for configured behaviour.

Valid transitions:
    UNCONFIGURED -> CONFIGURED (register)
    CONFIGURED -> CONFIGURED (register, set_error)
    CONFIGURED -> FAILING (set_failure)
    FAILING -> CONFIGURED (register)
"""

from enum import Enum


class OperationState(Enum):
    """Configured behaviour of one backend operation."""

    UNCONFIGURED = "unconfigured"  # Nothing registered yet
    CONFIGURED = "configured"  # Replays values and optional error
    FAILING = "failing"  # Aborts with the failure message
