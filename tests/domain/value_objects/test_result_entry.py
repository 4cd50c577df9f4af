"""Tests for ResultEntry value object."""

from dataclasses import FrozenInstanceError

import pytest

from backend_double.domain.entities import OperationState
from backend_double.domain.exceptions import BackendError
from backend_double.domain.value_objects import EMPTY_ENTRY, ResultEntry


class TestResultEntryState:
    """Test the derived operation state."""

    def test_empty_entry_is_unconfigured(self):
        """Test the empty entry has nothing configured."""
        assert EMPTY_ENTRY.state == OperationState.UNCONFIGURED
        assert not EMPTY_ENTRY.is_failing

    def test_registered_entry_is_configured(self):
        """Test registered values make the entry configured."""
        entry = EMPTY_ENTRY.with_values((1,))
        assert entry.state == OperationState.CONFIGURED

    def test_error_alone_is_configured(self):
        """Test an error without values still counts as configured."""
        entry = EMPTY_ENTRY.with_error(BackendError("x"))
        assert entry.state == OperationState.CONFIGURED

    def test_failure_wins(self):
        """Test a failure message dominates values and error."""
        entry = EMPTY_ENTRY.with_values((1,)).with_error(BackendError("x")).with_failure("boom")
        assert entry.state == OperationState.FAILING
        assert entry.is_failing


class TestResultEntryTransitions:
    """Test copy-on-write transitions."""

    def test_with_values_clears_error_and_failure(self):
        """Test new values give a clean slate."""
        entry = ResultEntry(values=(1,), error=BackendError("x"), failure_message="boom")
        fresh = entry.with_values((2, 3))
        assert fresh == ResultEntry(values=(2, 3), registered=True)

    def test_with_values_copies_to_tuple(self):
        """Test any sequence of values is stored as a tuple."""
        assert EMPTY_ENTRY.with_values([1, 2]).values == (1, 2)

    def test_with_error_keeps_values_and_failure(self):
        """Test setting the error leaves the rest untouched."""
        entry = ResultEntry(values=(1,), failure_message="boom", registered=True)
        error = BackendError("x")
        updated = entry.with_error(error)
        assert updated.values == (1,)
        assert updated.failure_message == "boom"
        assert updated.error is error
        assert updated.registered

    def test_with_failure_keeps_values_and_error(self):
        """Test setting the failure leaves the rest untouched."""
        error = BackendError("x")
        entry = ResultEntry(values=(1,), error=error, registered=True)
        updated = entry.with_failure("boom")
        assert updated.values == (1,)
        assert updated.error is error
        assert updated.failure_message == "boom"

    def test_empty_failure_normalized_to_none(self):
        """Test an empty message clears the failure."""
        assert EMPTY_ENTRY.with_failure("").failure_message is None

    def test_transitions_do_not_mutate(self):
        """Test the source entry is unchanged."""
        entry = EMPTY_ENTRY.with_values((1,))
        entry.with_failure("boom")
        assert entry.failure_message is None

    def test_frozen(self):
        """Test entries cannot be modified."""
        with pytest.raises(FrozenInstanceError):
            EMPTY_ENTRY.values = (1,)
