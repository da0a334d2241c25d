"""Unit tests for autoupdate.api.service.render_status."""

from datetime import datetime

from autoupdate.api.service.render_status import MISSING_DATE, MISSING_INTERVAL, render_status
from autoupdate.api.service.ServiceState import ServiceState
from autoupdate.constants import ISSUES_URL
from tests.unit.conftest import make_snapshot


def test_running(today):
    text = render_status(make_snapshot(ServiceState.RUNNING), today)

    expected_date = datetime(2026, 1, 1).strftime("%x")
    assert text == (
        "Autoupdate is installed and running.\n"
        "\n"
        "Options:\n"
        "Interval: 86400\n"
        "--upgrade\n"
        "--cleanup\n"
        "--immediate\n"
        "\n"
        f"Autoupdate was initialised on {expected_date}.\n"
    )


def test_stopped_reports_options_at_last_start(today):
    text = render_status(make_snapshot(ServiceState.INSTALLED_BUT_STOPPED, run_at_load=False, flags=[]), today)

    assert text.startswith("Autoupdate is installed but stopped.\n")
    assert "Options at last start:\nInterval: 86400\n\n" in text
    assert "--immediate" not in text


def test_missing_interval_and_date(today):
    text = render_status(make_snapshot(ServiceState.RUNNING, interval=None, installed_on=None), today)

    assert MISSING_INTERVAL in text
    assert MISSING_DATE in text
    assert "more than 90 days" not in text


def test_stale_install_gets_advisory(today):
    text = render_status(make_snapshot(ServiceState.RUNNING, installed_on=datetime(2025, 6, 1)), today)

    assert text.rstrip().endswith("latest features are enabled for you.")


def test_not_configured(today):
    text = render_status(make_snapshot(ServiceState.NOT_CONFIGURED), today)

    assert text == "Autoupdate is not configured. Use `autoupdate start` to begin.\n"


def test_unknown(today):
    text = render_status(make_snapshot(ServiceState.UNKNOWN), today)

    assert text.startswith("Autoupdate cannot determine its status.\n")
    assert ISSUES_URL in text
    assert "Interval" not in text
