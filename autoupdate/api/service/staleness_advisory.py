"""Advise restarting long-lived installs."""

from datetime import date

from ...constants import STALE_AFTER_DAYS
from .is_stale import is_stale


def staleness_advisory(installed_on: date | None, today: date, stale_after_days: int = STALE_AFTER_DAYS) -> str:
    """Advisory text for old installs, empty string otherwise."""
    if not is_stale(installed_on, today, stale_after_days):
        return ""
    return (
        f"Autoupdate has been running for more than {stale_after_days} days. Please consider\n"
        "periodically deleting and re-starting this command to ensure the\n"
        "latest features are enabled for you."
    )
