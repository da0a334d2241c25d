"""Read the command line out of an installed launcher script."""

from pathlib import Path


def read_launcher_command(script_path: Path) -> str | None:
    """Return the last non-empty line of the launcher, or None if unreadable.

    The first line is the interpreter directive; the last one carries the
    brew invocations.
    """
    try:
        lines = script_path.read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError):
        return None
    for line in reversed(lines):
        if line.strip():
            return line
    return None
