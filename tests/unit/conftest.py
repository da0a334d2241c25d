"""Unit test fixtures.

Most configuration helpers are in tests/conftest.py.
"""

from datetime import date, datetime

import pytest

# Re-export commonly used helpers from root conftest
from tests.conftest import (
    TEST_BREW,
    TEST_LABEL,
    FakeLaunchctl,
    minimal_config_dict,
    run_cmd,
)
from autoupdate.api.service.ServiceState import ServiceState
from autoupdate.api.service.StatusSnapshot import StatusSnapshot

__all__ = [
    "TEST_BREW",
    "TEST_LABEL",
    "FakeLaunchctl",
    "make_snapshot",
    "minimal_config_dict",
    "run_cmd",
]


def make_snapshot(state: ServiceState, **overrides) -> StatusSnapshot:
    """Build a StatusSnapshot with realistic defaults for a fresh install."""
    values = {
        "state": state,
        "definition_path": "/tmp/agent.plist",
        "script_path": "/tmp/updater",
        "interval": 86400,
        "run_at_load": True,
        "flags": ["--upgrade", "--cleanup"],
        "flags_source": "recorded",
        "installed_on": datetime(2026, 1, 1, 9, 30),
        "is_stale": False,
    }
    values.update(overrides)
    return StatusSnapshot(**values)


@pytest.fixture
def today() -> date:
    return date(2026, 1, 15)
