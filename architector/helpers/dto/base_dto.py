"""
Base model for persisted JSON documents.

Attributes are snake_case in Python and camelCase on disk. Absent optional
fields are omitted from the serialized document instead of being written as null.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class DocumentModel(BaseModel):
    """Pydantic base for every stored document and its embedded values."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",  # keep keys written by other tool versions
    )

    def to_document(self) -> dict[str, Any]:
        """Serialize to the on-disk JSON shape (camelCase, no nulls)."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
