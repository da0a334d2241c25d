"""Read the options record written next to the launcher."""

import json
from pathlib import Path

from pydantic import ValidationError

from .UpdateOptions import UpdateOptions


def read_options_record(options_path: Path) -> tuple[UpdateOptions | None, str]:
    """Load the options ``start`` recorded.

    Returns:
        (options, error) - options is None when the record is absent or
        unusable; error is empty when the record is simply absent.
    """
    if not options_path.exists():
        return None, ""
    try:
        raw = json.loads(options_path.read_text(encoding="utf-8"))
        return UpdateOptions(**raw), ""
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, TypeError, ValidationError) as exc:
        return None, f"Ignoring unreadable options record {options_path}: {exc}"
