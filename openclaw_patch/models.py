from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field

# Flags are compared literally; "TRUE" or "1" do not enable anything.
FLAG_TRUE = "true"

# Undecodable environment bytes reach os.environ as lone surrogates.
_SURROGATE = re.compile("[\ud800-\udfff]")


def _env_value(environ: Mapping[str, str], name: str) -> str:
    return _SURROGATE.sub("\ufffd", environ.get(name, ""))


class PatchSettings(BaseModel):
    """Snapshot of the environment variables that drive a config patch.

    Built once at startup via ``from_env()`` and handed to the patch logic
    as a plain argument, so the patch logic never reads ``os.environ``.
    Unset variables are stored as empty strings; undecodable bytes become
    U+FFFD.
    """

    config_file: str = ""
    """Path to the JSON config file (CONFIG_FILE)."""

    model: str = ""
    """Model identifier written to agent.model (OPENCLAW_MODEL)."""

    tls_has_custom: str = ""
    """Raw TLS_HAS_CUSTOM value."""

    tls_enabled: str = ""
    """Raw TLS_ENABLED value."""

    tls_cert_path: str = ""
    """Certificate path for custom TLS (TLS_CERT_PATH)."""

    tls_key_path: str = ""
    """Private key path for custom TLS (TLS_KEY_PATH)."""

    atomic_write: bool = False
    """Write via temp file + rename instead of truncating in place (CONFIG_PATCH_ATOMIC=1)."""

    @classmethod
    def from_env(cls, environ: Mapping[str, str]) -> PatchSettings:
        """Build settings from an environment mapping such as ``os.environ``."""
        return cls(
            config_file=_env_value(environ, "CONFIG_FILE"),
            model=_env_value(environ, "OPENCLAW_MODEL"),
            tls_has_custom=_env_value(environ, "TLS_HAS_CUSTOM"),
            tls_enabled=_env_value(environ, "TLS_ENABLED"),
            tls_cert_path=_env_value(environ, "TLS_CERT_PATH"),
            tls_key_path=_env_value(environ, "TLS_KEY_PATH"),
            atomic_write=environ.get("CONFIG_PATCH_ATOMIC") == "1",
        )

    @property
    def has_custom_tls(self) -> bool:
        return self.tls_has_custom == FLAG_TRUE

    @property
    def tls_requested(self) -> bool:
        """True when TLS should be on, either custom or auto-generated."""
        return self.has_custom_tls or self.tls_enabled == FLAG_TRUE


class TlsDisabled(BaseModel):
    """``gateway.tls`` when TLS is off."""

    enabled: Literal[False] = False


class TlsAutoGenerated(BaseModel):
    """``gateway.tls`` when the gateway generates its own certificates."""

    model_config = ConfigDict(populate_by_name=True)

    enabled: Literal[True] = True
    auto_generate: Literal[True] = Field(default=True, alias="autoGenerate")


class TlsCustom(BaseModel):
    """``gateway.tls`` with operator-supplied certificate and key files."""

    model_config = ConfigDict(populate_by_name=True)

    enabled: Literal[True] = True
    auto_generate: Literal[False] = Field(default=False, alias="autoGenerate")
    cert_path: str = Field(alias="certPath")
    key_path: str = Field(alias="keyPath")


TlsConfig = Union[TlsDisabled, TlsAutoGenerated, TlsCustom]
