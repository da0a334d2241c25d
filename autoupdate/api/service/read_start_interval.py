"""Extract the StartInterval from a parsed plist."""

from typing import Any


def read_start_interval(definition: dict[str, Any] | None) -> int | None:
    """Return StartInterval in seconds, or None when the key is missing.

    A missing key usually means the plist schedules with another key such as
    StartCalendarInterval, which autoupdate does not generate.
    """
    if not definition:
        return None
    value = definition.get("StartInterval")
    # plistlib gives bool for <true/>, which is an int subclass
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value
