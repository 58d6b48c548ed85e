"""
Top-level pytest conftest.py -- shared fixtures for config patch tests.

Provides:
    clean_env   - removes every variable the patcher reads
    config_file - writes a JSON document to a temp file and returns its path
"""

import json

import pytest

PATCH_ENV_VARS = (
    "CONFIG_FILE",
    "OPENCLAW_MODEL",
    "TLS_HAS_CUSTOM",
    "TLS_ENABLED",
    "TLS_CERT_PATH",
    "TLS_KEY_PATH",
    "CONFIG_PATCH_ATOMIC",
    "CONFIG_PATCH_DEBUG",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Make sure the host environment never leaks into a test."""
    for name in PATCH_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def config_file(tmp_path):
    """Return a callable that writes *document* to openclaw.json.

    Usage::

        path = config_file({"gateway": {}})
        path = config_file("not json")   # raw text is written verbatim
    """
    path = tmp_path / "openclaw.json"

    def _write(document):
        if isinstance(document, str):
            path.write_text(document, encoding="utf-8")
        else:
            path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return _write
