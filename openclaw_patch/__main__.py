"""Allow ``python -m openclaw_patch``."""

from openclaw_patch.cli import main

main()
