"""Unit tests for architector.helpers.exceptions module.

Tests custom exception classes.
"""

import pytest

from architector.helpers.exceptions import InvalidIdentifierError, StorageIOError


class TestInvalidIdentifierError:
    """Tests for InvalidIdentifierError exception."""

    @pytest.mark.unit
    def test_is_value_error(self) -> None:
        """InvalidIdentifierError should be catchable as ValueError."""
        assert issubclass(InvalidIdentifierError, ValueError)

    @pytest.mark.unit
    def test_can_be_raised_with_message(self) -> None:
        with pytest.raises(InvalidIdentifierError, match="required"):
            raise InvalidIdentifierError("Project ID is required")


class TestStorageIOError:
    """Tests for StorageIOError exception."""

    @pytest.mark.unit
    def test_stores_message_and_path(self) -> None:
        """StorageIOError should keep the message and the failing path."""
        error = StorageIOError("boom", "/tmp/x.json")
        assert str(error) == "boom"
        assert error.path == "/tmp/x.json"

    @pytest.mark.unit
    def test_path_is_optional(self) -> None:
        assert StorageIOError("boom").path is None

    @pytest.mark.unit
    def test_is_not_an_os_error(self) -> None:
        """Callers must not confuse wrapped faults with raw OSError."""
        assert not issubclass(StorageIOError, OSError)
