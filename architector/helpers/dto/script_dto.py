"""
DTOs for script/command documentation.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from .base_dto import DocumentModel


class ScriptDocumentation(DocumentModel):
    """Documentation for one script, stored at scripts/<script_id>.json."""

    script_id: str
    script_name: str
    description: str
    usage: str
    examples: list[str] = Field(default_factory=list)
    parameters: dict[str, str] = Field(default_factory=dict)  # parameter name -> description
    notes: str | None = None
    created_at: str
    updated_at: str


class ScriptInput(BaseModel):
    """Caller-supplied script documentation for set_script."""

    script_name: str = Field(description="Name of the script")
    description: str = Field(description="Description of what the script does")
    usage: str = Field(description="Usage command or syntax")
    examples: list[str] = Field(default_factory=list, description="Usage examples")
    parameters: dict[str, str] = Field(
        default_factory=dict, description="Parameters and their descriptions"
    )
    notes: str = Field(default="", description="Additional notes")
