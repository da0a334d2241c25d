"""Read the installed plist into a dictionary."""

import plistlib
from pathlib import Path
from typing import Any
from xml.parsers.expat import ExpatError


def load_service_definition(definition_path: Path) -> tuple[dict[str, Any] | None, str]:
    """Parse the plist at ``definition_path``.

    Returns:
        (definition, error) - the parsed top-level dict and an empty string,
        or None and a description of why the file could not be used.
    """
    try:
        with definition_path.open("rb") as fh:
            definition = plistlib.load(fh)
    except FileNotFoundError:
        return None, f"Service definition not found at {definition_path}"
    except (OSError, plistlib.InvalidFileException, ExpatError, ValueError) as exc:
        return None, f"Unable to read service definition {definition_path}: {exc}"

    if not isinstance(definition, dict):
        return None, f"Service definition {definition_path} is not a dictionary"
    return definition, ""
