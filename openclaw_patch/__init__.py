"""openclaw-config-patch - environment-driven patcher for OpenClaw config files."""

from importlib.metadata import PackageNotFoundError, version as _pkg_version

try:
    __version__ = _pkg_version("openclaw-config-patch")
except PackageNotFoundError:
    __version__ = "0.1.0"  # fallback for editable installs / dev
