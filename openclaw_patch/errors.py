"""Exception hierarchy for openclaw-config-patch.

Callers can catch the broad ``ConfigPatchError`` or a specific failure
mode.  Every error aborts the patch before the config file is written.

This module is a base-layer module: it must NOT import from any
other ``openclaw_patch`` submodule.
"""

from __future__ import annotations


class ConfigPatchError(Exception):
    """Base exception for all openclaw-config-patch errors."""


class ConfigNotFoundError(ConfigPatchError):
    """CONFIG_FILE is unset, empty, or does not name an existing file."""


class InvalidJsonError(ConfigPatchError):
    """Config content does not parse as JSON or has the wrong shape."""


class IncompleteTlsConfigError(ConfigPatchError):
    """Custom TLS was requested without both a certificate and a key path."""
