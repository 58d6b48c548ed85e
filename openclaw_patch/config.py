"""JSON config file operations.

Strict counterparts of the usual load/write helpers: a missing or
malformed config is an error here, never an empty dict.
"""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any

from openclaw_patch.atomic_io import atomic_replace
from openclaw_patch.errors import ConfigNotFoundError, InvalidJsonError

INDENT = 2

# Surrogates left in a str after json.loads have no partner; they cannot be
# encoded as UTF-8 and are written as \uXXXX escapes instead.
_LONE_SURROGATE = re.compile("[\ud800-\udfff]")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def resolve_config_path(config_file: str) -> Path:
    """Turn the CONFIG_FILE value into a path to an existing regular file.

    Raises:
        ConfigNotFoundError: If the value is empty or the file does not exist.
    """
    if not config_file:
        raise ConfigNotFoundError("CONFIG_FILE is not set")
    path = Path(config_file)
    if not path.is_file():
        raise ConfigNotFoundError(f"Config file not found: {config_file}")
    return path


def load_config(path: Path) -> dict[str, Any]:
    """Load a UTF-8 JSON config file whose top-level value is an object.

    Raises:
        ConfigNotFoundError: If the file cannot be read.
        InvalidJsonError: If the content is not JSON or not a JSON object.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ConfigNotFoundError(f"Config file not found: {path}") from exc
    except UnicodeDecodeError as exc:
        raise InvalidJsonError(f"Config file {path} is not valid UTF-8: {exc}") from exc
    except OSError as exc:
        raise ConfigNotFoundError(f"Cannot read config file {path}: {exc}") from exc

    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except ValueError as exc:
        raise InvalidJsonError(f"Invalid JSON in {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise InvalidJsonError(
            f"Config file {path} must contain a JSON object, got {type(data).__name__}"
        )
    return data


def dump_config(data: dict[str, Any]) -> str:
    """Serialize with 2-space indentation and no trailing newline.

    Non-ASCII text stays as-is; lone surrogates become ``\\uXXXX`` escapes.
    """
    text = json.dumps(data, indent=INDENT, ensure_ascii=False)
    return _LONE_SURROGATE.sub(lambda m: f"\\u{ord(m.group()):04x}", text)


def write_config(path: Path, data: dict[str, Any], *, atomic: bool = False) -> None:
    """Write *data* back to *path*.

    By default the file is truncated and rewritten in place.  With
    ``atomic=True`` the content goes through a temp file + rename.
    The content is fully encoded before the file is opened.
    """
    content = dump_config(data).encode("utf-8")
    if atomic:
        atomic_replace(path, content)
    else:
        path.write_bytes(content)


def ensure_object(parent: dict[str, Any], key: str, *, where: str = "") -> dict[str, Any]:
    """Return ``parent[key]``, creating an empty object if absent or null.

    Existing objects are returned as-is so their other fields survive.

    Raises:
        InvalidJsonError: If the existing value is not a JSON object.
    """
    dotted = f"{where}.{key}" if where else key
    value = parent.get(key)
    if value is None:
        value = {}
        parent[key] = value
    elif not isinstance(value, dict):
        raise InvalidJsonError(
            f"Expected '{dotted}' to be a JSON object, got {type(value).__name__}"
        )
    return value
