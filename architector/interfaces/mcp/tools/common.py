"""Shared plumbing for MCP tool implementations.

- Project id resolution (explicit argument → configured default → normalized)
- Error translation: InvalidIdentifierError and StorageIOError become
  {"error": ...} responses; absence is never an error here.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Awaitable, Callable
from typing import Any, ParamSpec

from architector.helpers.exceptions import InvalidIdentifierError, StorageIOError
from architector.helpers.logging_helper import sanitize_exception_message
from architector.helpers.project_id_helper import normalize_project_id

logger = logging.getLogger(__name__)

P = ParamSpec("P")

STORAGE_ERROR_MESSAGE = "Storage failure while accessing project documents"


def resolve_project_id(provided: str | None, default_project_id: str) -> str:
    """Pick the caller's project id or the server default, then normalize it."""
    return normalize_project_id(provided or default_project_id)


def tool_errors(
    func: Callable[P, Awaitable[dict[str, Any]]],
) -> Callable[P, Awaitable[dict[str, Any]]]:
    """Turn identifier and storage failures into error responses."""

    @functools.wraps(func)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> dict[str, Any]:
        try:
            return await func(*args, **kwargs)
        except InvalidIdentifierError as e:
            return {"error": str(e)}
        except StorageIOError as e:
            return {"error": sanitize_exception_message(e, STORAGE_ERROR_MESSAGE)}

    return wrapper
