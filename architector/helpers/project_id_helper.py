"""
Project identifier normalization.

Rules:
- Pure: no I/O, no config loading.
- Distinct inputs may collide after normalization; that is accepted.
"""

from __future__ import annotations

import re

from .exceptions import InvalidIdentifierError

_DISALLOWED = re.compile(r"[^A-Za-z0-9_-]")


def normalize_project_id(raw: str | None) -> str:
    """
    Convert a caller-supplied context string into a filesystem-safe project id.

    Every character outside ``[A-Za-z0-9_-]`` is replaced with ``_``; length
    and ordering are preserved.

    Args:
        raw: Workspace path or user-supplied project name

    Returns:
        Normalized project identifier

    Raises:
        InvalidIdentifierError: If raw is None or empty

    Examples:
        >>> normalize_project_id("/home/me/proj 1")
        '_home_me_proj_1'
    """
    if not raw:
        raise InvalidIdentifierError("Project ID is required (workdir context)")
    return _DISALLOWED.sub("_", raw)
