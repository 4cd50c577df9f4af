"""Exceptions raised by the backend double.

Two failure channels:

- BackendError (or any exception a test injects) is an ordinary business
  error that consumer code is expected to handle.
- InjectedFailure is a simulated backend fault that aborts the operation.

Everything deriving from DoubleSetupError is a defect in the test setup
itself and is raised as soon as it is detected.
"""


class BackendDoubleError(Exception):
    """Base class for all backend double errors."""


class BackendError(BackendDoubleError):
    """Business error returned by a backend operation.

    Tests inject it with StubBackend.set_error to drive the ordinary
    failure paths of consumer code.

    Example:
        >>> backend.set_error("get_staker", BackendError("staker not found"))
    """


class InjectedFailure(BackendDoubleError):
    """Simulated backend fault.

    The string form is exactly the configured message.

    Attributes:
        operation: Name of the operation that aborted
        message: Configured failure message
    """

    def __init__(self, operation: str, message: str):
        super().__init__(message)
        self.operation = operation
        self.message = message


class DoubleSetupError(BackendDoubleError):
    """The double was configured or used incorrectly by the test."""


class UnknownOperationError(DoubleSetupError):
    """Operation name is empty or not part of the backend interface."""

    def __init__(self, name: str):
        if name:
            text = f"Unknown backend operation: {name!r}"
        else:
            text = "Could not resolve the calling operation name"
        super().__init__(text)
        self.name = name


class UnconfiguredOperationError(DoubleSetupError):
    """Operation was invoked without a value registered for a result position.

    Attributes:
        name: Operation name
        position: Result position that has no value
        registered: Number of values registered for the operation
    """

    def __init__(self, name: str, position: int, registered: int):
        super().__init__(
            f"Operation {name!r} has no registered value at position {position} "
            f"({registered} registered); call register({name!r}, ...) first"
        )
        self.name = name
        self.position = position
        self.registered = registered


class ArityMismatchError(DoubleSetupError):
    """Number of registered values differs from the declared result count."""

    def __init__(self, name: str, expected: int, got: int):
        super().__init__(
            f"Operation {name!r} declares {expected} result(s), got {got} value(s)"
        )
        self.name = name
        self.expected = expected
        self.got = got


class ResultTypeMismatchError(DoubleSetupError, TypeError):
    """Registered value does not conform to the declared result type."""

    def __init__(self, name: str, position: int, expected: str, value: object):
        super().__init__(
            f"Operation {name!r} result {position} must be {expected}, "
            f"got {type(value).__name__}: {value!r}"
        )
        self.name = name
        self.position = position
        self.expected = expected
        self.value = value


class NoErrorChannelError(DoubleSetupError):
    """An error was set for an operation that cannot fail with one."""

    def __init__(self, name: str):
        super().__init__(f"Operation {name!r} has no error channel")
        self.name = name


class PresetError(BackendDoubleError):
    """Preset is unknown or its definition is invalid."""
