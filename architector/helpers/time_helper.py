"""Time and identifier supplier helpers."""

import uuid
from datetime import datetime, timezone


def now_iso() -> str:
    """
    Get the current UTC time as an ISO-8601 string.

    Millisecond precision with a ``Z`` suffix, e.g. ``2024-05-01T12:00:00.123Z``.
    """
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def new_id() -> str:
    """Mint a new globally unique document id (UUID4 string)."""
    return str(uuid.uuid4())
