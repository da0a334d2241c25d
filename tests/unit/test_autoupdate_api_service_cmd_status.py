"""Unit tests for autoupdate.api.service.cmd_status."""

import pytest

from autoupdate.api.config.AutoupdateConfig import AutoupdateConfig
from autoupdate.api.service.cmd_start import cmd_start
from autoupdate.api.service.cmd_status import cmd_status
from autoupdate.api.service.cmd_stop import cmd_stop
from tests.unit.conftest import run_cmd

pytestmark = pytest.mark.service


def test_cmd_status_not_configured(patch_config, fake_launchctl):
    result = run_cmd(cmd_status)

    assert result.success is True
    assert result.output["state"] == "not_configured"
    assert result.output["message"] == "Autoupdate is not configured. Use `autoupdate start` to begin.\n"
    assert result.output["interval"] == -1
    assert result.output["installed_on"] == ""


def test_cmd_status_running(patch_config, fake_launchctl):
    run_cmd(cmd_start, upgrade=True, greedy=True)

    result = run_cmd(cmd_status)

    assert result.success is True
    assert result.output["state"] == "running"
    assert result.output["interval"] == 86400
    assert result.output["run_at_load"] is True
    assert result.output["flags"] == ["--upgrade", "--greedy"]
    assert result.output["flags_source"] == "recorded"
    assert result.output["installed_on"]
    assert result.output["stale"] is False
    message = result.output["message"]
    assert message.startswith("Autoupdate is installed and running.\n\nOptions:\n")
    assert "Interval: 86400\n--upgrade\n--greedy\n--immediate\n" in message


def test_cmd_status_stopped(patch_config, fake_launchctl):
    run_cmd(cmd_start, upgrade=True)
    run_cmd(cmd_stop)

    result = run_cmd(cmd_status)

    assert result.output["state"] == "installed_but_stopped"
    assert "Options at last start:" in result.output["message"]
    assert result.result == "Autoupdate status: installed_but_stopped"


def test_cmd_status_unknown(patch_config, fake_launchctl):
    run_cmd(cmd_start)
    run_cmd(cmd_stop)
    patch_config.service.data.install_dir.joinpath("updater").unlink()

    result = run_cmd(cmd_status)

    assert result.success is True
    assert result.output["state"] == "unknown"
    assert "cannot determine its status" in result.output["message"]
    assert "https://github.com/Homebrew/homebrew-autoupdate/issues" in result.output["message"]


def test_cmd_status_probe_unavailable(patch_config, fake_launchctl):
    fake_launchctl.available = False

    result = run_cmd(cmd_status)

    assert result.success is True
    assert result.output["state"] == "not_configured"
    assert any("Unable to query" in w for w in result.output["warnings"])


def test_cmd_status_bad_config_falls_back(monkeypatch, fake_launchctl):
    def bad_load(cls):
        raise ValueError("Invalid JSON in config file")

    monkeypatch.setattr(AutoupdateConfig, "load", classmethod(bad_load))

    result = run_cmd(cmd_status)

    assert result.success is True
    assert any("using default configuration" in w for w in result.output["warnings"])


def test_cmd_status_running_with_truncated_definition(patch_config, fake_launchctl):
    run_cmd(cmd_start, upgrade=True)
    definition_path = patch_config.service.data.launch_agents_dir / "com.test.autoupdate.plist"
    definition_path.write_bytes(definition_path.read_bytes()[:200])

    result = run_cmd(cmd_status)

    assert result.output["state"] == "running"
    assert result.output["interval"] == -1
    assert "Interval: Not found, maybe using `StartCalendarInterval`" in result.output["message"]
    assert any("Unable to read service definition" in w for w in result.output["warnings"])
