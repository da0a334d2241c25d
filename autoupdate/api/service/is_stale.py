"""Decide whether an install is old enough to advise a restart."""

from datetime import date

from ...constants import STALE_AFTER_DAYS


def is_stale(installed_on: date | None, today: date, stale_after_days: int = STALE_AFTER_DAYS) -> bool:
    """Whether an install is at least ``stale_after_days`` whole days old."""
    if installed_on is None:
        return False
    return (today - installed_on).days >= stale_after_days
