"""Detect whether the plist runs the launcher when loaded."""

from typing import Any


def read_run_at_load(definition: dict[str, Any] | None) -> bool:
    """True when the plist carries a ``RunAtLoad`` key, whatever its value."""
    if not definition:
        return False
    return "RunAtLoad" in definition
