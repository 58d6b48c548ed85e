"""Logging helpers for openclaw-config-patch.

Output follows the plain prefix format used by the container tooling:
debug lines go to stdout when enabled, warnings and errors to stderr.
"""

from __future__ import annotations

import os
import sys

DEBUG_ENV_VAR = "CONFIG_PATCH_DEBUG"


def debug_enabled() -> bool:
    """Return True when CONFIG_PATCH_DEBUG=1."""
    return os.environ.get(DEBUG_ENV_VAR) == "1"


def log_debug(msg: str) -> None:
    """Log a debug message (only if CONFIG_PATCH_DEBUG=1).

    Args:
        msg: The message to log.
    """
    if debug_enabled():
        print(f"DEBUG: {msg}")


def log_warn(msg: str) -> None:
    """Log a warning message to stderr.

    Args:
        msg: The message to log.
    """
    print(f"Warning: {msg}", file=sys.stderr)


def log_error(msg: str) -> None:
    """Log an error message to stderr.

    Args:
        msg: The message to log.
    """
    print(f"Error: {msg}", file=sys.stderr)
