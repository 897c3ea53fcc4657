"""Application version module.

In development: read from the VERSION file at the project root.
In frozen builds: uses _BAKED_VERSION baked in at freeze time.
"""

from pathlib import Path

# Set to a literal version string when freezing a release build
_BAKED_VERSION = None

_FALLBACK_VERSION = "0.0.0"


def get_version() -> str:
    """Get the application version string (e.g. '0.1.0')."""
    if _BAKED_VERSION is not None:
        return _BAKED_VERSION
    # editor/src/version.py -> project root
    version_file = Path(__file__).resolve().parent.parent.parent / "VERSION"
    try:
        return version_file.read_text().strip() or _FALLBACK_VERSION
    except FileNotFoundError:
        return _FALLBACK_VERSION
