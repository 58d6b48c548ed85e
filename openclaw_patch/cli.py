"""Click entrypoint for openclaw-config-patch.

Takes no arguments: everything comes from the environment.  Exit code 0
on success, 1 on any ConfigPatchError.
"""

from __future__ import annotations

import os
import sys

import click

from openclaw_patch.errors import ConfigPatchError
from openclaw_patch.models import PatchSettings
from openclaw_patch.patcher import patch
from openclaw_patch.utils import log_debug, log_error


@click.command(
    context_settings={"help_option_names": ["-h", "--help"]},
    epilog=(
        "Environment: CONFIG_FILE (required), OPENCLAW_MODEL, TLS_HAS_CUSTOM, "
        "TLS_ENABLED, TLS_CERT_PATH, TLS_KEY_PATH, CONFIG_PATCH_ATOMIC, "
        "CONFIG_PATCH_DEBUG."
    ),
)
def cli() -> None:
    """Patch the OpenClaw config file named by CONFIG_FILE.

    Disables control UI device auth, sets agent.model from OPENCLAW_MODEL
    and rewrites gateway.tls from the TLS_* variables.
    """
    settings = PatchSettings.from_env(os.environ)
    log_debug(f"Patching {settings.config_file or '<unset>'}")
    try:
        patch(settings.config_file, settings)
    except ConfigPatchError as exc:
        log_error(str(exc))
        sys.exit(1)


def main() -> None:
    """Entry point for the console script.

    Runs Click with ``standalone_mode=False`` and normalises usage errors
    (stray arguments) to exit code 1, same as a patch failure.
    """
    try:
        cli(standalone_mode=False)
    except click.UsageError as exc:
        click.echo(f"Error: {exc.format_message()}", err=True)
        sys.exit(1)
    except SystemExit as exc:
        code = exc.code if isinstance(exc.code, int) else 1
        sys.exit(1 if code == 2 else code)


if __name__ == "__main__":
    main()
