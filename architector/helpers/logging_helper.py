"""
Logging helpers for stderr-only logging and safe error reporting.

MCP stdio servers use stdout for JSON-RPC, so every handler configured here
writes to stderr.
"""

from __future__ import annotations

import logging
import sys

logger = logging.getLogger(__name__)

NOISY_LOGGERS = ("asyncio", "urllib3", "httpcore", "httpx")


def configure_logging(level: str | int = logging.WARNING) -> None:
    """
    Configure root logging to stderr and quiet noisy third-party loggers.

    Args:
        level: Level name ("INFO", "debug", ...) or numeric level
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(name)s: %(message)s",
        stream=sys.stderr,  # Critical: MCP uses stdout for JSON-RPC
    )

    for noisy_logger in NOISY_LOGGERS:
        logging.getLogger(noisy_logger).setLevel(logging.ERROR)


def sanitize_exception_message(e: Exception, safe_message: str = "An error occurred") -> str:
    """
    Sanitize exception message for user display.

    Logs the full exception (with traceback) and returns a generic message
    that does not leak filesystem paths to the caller.

    Args:
        e: The exception to sanitize
        safe_message: Generic message to return to users

    Returns:
        Safe error message for user display

    Example:
        >>> try:
        ...     await store.read(path)
        ... except StorageIOError as e:
        ...     return {"error": sanitize_exception_message(e, "Storage failure")}
    """
    logger.exception(f"[storage] Exception sanitized: {e}")
    return safe_message
