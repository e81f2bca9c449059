"""
Helpers package.
"""

from .exceptions import InvalidIdentifierError, StorageIOError
from .logging_helper import configure_logging, sanitize_exception_message
from .project_id_helper import normalize_project_id
from .time_helper import new_id, now_iso

__all__ = [
    "InvalidIdentifierError",
    "StorageIOError",
    "configure_logging",
    "new_id",
    "normalize_project_id",
    "now_iso",
    "sanitize_exception_message",
]
