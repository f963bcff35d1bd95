"""Version lookup for openenum."""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version


def get_version() -> str:
    """Installed distribution version, or 0.0.0 for an uninstalled source tree."""
    try:
        return _metadata_version("openenum")
    except PackageNotFoundError:
        return "0.0.0"
