"""
DTOs for the persistence layer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal


@dataclass
class DocumentReadResult:
    """Result from DocumentStore.read.

    "missing" means the file does not exist. Real failures never produce a
    result; they raise StorageIOError.
    """

    status: Literal["found", "missing"]
    document: dict[str, Any] | None = None

    @property
    def found(self) -> bool:
        return self.status == "found"
