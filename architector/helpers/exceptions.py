"""Custom exceptions used across multiple layers.

Rules:
- Only put exceptions here if they need to be raised in one layer and caught in another.
- Keep exceptions simple and focused.
- No I/O, no config loading, no complex logic.
- "Not found" outcomes are NOT exceptions; they are returned as None or a status value.
"""

from __future__ import annotations


class InvalidIdentifierError(ValueError):
    """Raised when a project identifier cannot be derived from caller input."""


class StorageIOError(Exception):
    """Raised for any filesystem failure other than a missing file.

    Covers permission errors, full disks, undecodable bytes and malformed
    JSON. Wraps the original exception as ``__cause__``.
    """

    def __init__(self, message: str, path: str | None = None) -> None:
        """Initialize with a message and the path that failed."""
        self.path = path
        super().__init__(message)
