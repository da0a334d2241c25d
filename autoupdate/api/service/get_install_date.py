"""When was the launcher written."""

from datetime import datetime
from pathlib import Path


def get_install_date(script_path: Path) -> datetime | None:
    """Creation time of the launcher, or None if it does not exist.

    Uses the birth time where the platform records one (macOS) and the
    modification time elsewhere. ``start`` always recreates the launcher,
    so both reflect the last start.
    """
    try:
        stat = script_path.stat()
    except OSError:
        return None
    timestamp = getattr(stat, "st_birthtime", None) or stat.st_mtime
    return datetime.fromtimestamp(timestamp)
