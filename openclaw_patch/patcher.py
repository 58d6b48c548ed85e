"""Patch an OpenClaw config for container use.

Applied once per container/image build:

1. ``gateway.controlUi.dangerouslyDisableDeviceAuth`` is forced to true.
   This deliberately turns on the insecure control UI mode.
2. ``agent.model`` is set when OPENCLAW_MODEL is non-empty.
3. ``gateway.tls`` is replaced wholesale with one of three shapes:

   =============  ==========  ==========================================
   has custom     enabled     result
   =============  ==========  ==========================================
   true           (any)       custom cert/key paths
   false          true        auto-generated certificates
   false          false       disabled
   =============  ==========  ==========================================

Everything else in the document is left alone.
"""

from __future__ import annotations

from typing import Any

from openclaw_patch.config import (
    ensure_object,
    load_config,
    resolve_config_path,
    write_config,
)
from openclaw_patch.errors import IncompleteTlsConfigError
from openclaw_patch.models import (
    FLAG_TRUE,
    PatchSettings,
    TlsAutoGenerated,
    TlsConfig,
    TlsCustom,
    TlsDisabled,
)
from openclaw_patch.utils import log_debug, log_warn


def _warn_on_loose_flag(name: str, value: str) -> None:
    # Only the exact string "true" enables a flag.
    if value and value != FLAG_TRUE and value.strip().lower() in {"true", "1", "yes", "on"}:
        log_warn(f"{name}={value!r} is treated as false; only the exact value 'true' enables it")


def build_tls_config(settings: PatchSettings) -> TlsConfig:
    """Pick the ``gateway.tls`` shape for *settings*.

    Raises:
        IncompleteTlsConfigError: Custom TLS was requested but TLS_CERT_PATH
            or TLS_KEY_PATH is missing.
    """
    _warn_on_loose_flag("TLS_HAS_CUSTOM", settings.tls_has_custom)
    _warn_on_loose_flag("TLS_ENABLED", settings.tls_enabled)

    if settings.has_custom_tls:
        missing = [
            name
            for name, value in (
                ("TLS_CERT_PATH", settings.tls_cert_path),
                ("TLS_KEY_PATH", settings.tls_key_path),
            )
            if not value
        ]
        if missing:
            raise IncompleteTlsConfigError(
                f"TLS_HAS_CUSTOM=true requires {' and '.join(missing)} to be set"
            )
        return TlsCustom(cert_path=settings.tls_cert_path, key_path=settings.tls_key_path)
    if settings.tls_requested:
        return TlsAutoGenerated()
    return TlsDisabled()


def apply_patch(document: dict[str, Any], settings: PatchSettings) -> dict[str, Any]:
    """Apply the patch to *document* in memory and return it.

    The TLS shape is computed before anything is touched, so an invalid
    combination leaves *document* unchanged.
    """
    tls = build_tls_config(settings)

    gateway = ensure_object(document, "gateway")
    control_ui = ensure_object(gateway, "controlUi", where="gateway")
    control_ui["dangerouslyDisableDeviceAuth"] = True

    if settings.model:
        agent = ensure_object(document, "agent")
        agent["model"] = settings.model
        log_debug(f"agent.model = {settings.model!r}")

    gateway["tls"] = tls.model_dump(by_alias=True)
    log_debug(f"gateway.tls = {gateway['tls']}")
    return document


def patch(file_path: str, settings: PatchSettings) -> None:
    """Patch the config file at *file_path* in place.

    Raises:
        ConfigNotFoundError: The file is missing or unreadable.
        InvalidJsonError: The file is not a JSON object of the expected shape.
        IncompleteTlsConfigError: Custom TLS without cert/key paths.
    """
    path = resolve_config_path(file_path)
    document = load_config(path)
    apply_patch(document, settings)
    write_config(path, document, atomic=settings.atomic_write)
    log_debug(f"Patched {path}")
