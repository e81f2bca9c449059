"""
Persistence package.
"""

from .document_store import DocumentStore
from .storage_paths import EntityKind, StoragePaths

__all__ = [
    "DocumentStore",
    "EntityKind",
    "StoragePaths",
]
