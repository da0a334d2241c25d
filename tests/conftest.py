"""Shared pytest configuration and fixtures for all tests."""

import subprocess
from pathlib import Path

import pytest

from autoupdate.api.config.AutoupdateConfig import AutoupdateConfig
from autoupdate.api.service._darwin._Impl import _Impl
from autoupdate.utils import logger

TEST_LABEL = "com.test.autoupdate"
TEST_BREW = "/opt/homebrew/bin/brew"


def pytest_configure(config):
    for marker in ("unit", "integration", "smoke"):
        config.addinivalue_line("markers", f"{marker}: tests under tests/{marker}/")
    config.addinivalue_line("markers", "service: launchd agent commands")
    config.addinivalue_line("markers", "config: configuration loading")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/smoke/" in path_str:
            item.add_marker(pytest.mark.smoke)
        elif "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Configuration Helpers
# =============================================================================


def service_config_dict(root: Path) -> dict:
    """Build a launchd service config dict with every path under ``root``."""
    return {
        "type": "darwin",
        "data": {
            "label": TEST_LABEL,
            "install_dir": str(root / "Library" / "Application Support" / TEST_LABEL),
            "log_dir": str(root / "Library" / "Logs" / TEST_LABEL),
            "launch_agents_dir": str(root / "Library" / "LaunchAgents"),
            "brew": TEST_BREW,
        },
    }


def minimal_config_dict(root: Path) -> dict:
    """Minimal valid autoupdate configuration dict rooted at ``root``."""
    return {
        "service": service_config_dict(root),
        "stale_after_days": 90,
    }


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


class FakeLaunchctl:
    """Stand-in for launchctl that keeps a set of loaded labels.

    Patched over ``_Impl._launchctl`` so no real service manager is touched.
    """

    def __init__(self, label: str = TEST_LABEL):
        self.label = label
        self.loaded: set[str] = set()
        self.calls: list[tuple[str, ...]] = []
        self.available = True
        self.load_returncode = 0
        self.unload_returncode = 0
        self.register_on_load = True

    def __call__(self, *args: str) -> subprocess.CompletedProcess | None:
        self.calls.append(args)
        if not self.available:
            return None
        command = args[0]
        if command == "list":
            lines = ["PID\tStatus\tLabel", "-\t0\tcom.apple.something"]
            lines += [f"-\t0\t{label}" for label in sorted(self.loaded)]
            return subprocess.CompletedProcess(args, 0, stdout="\n".join(lines) + "\n", stderr="")
        if command == "load":
            if self.load_returncode != 0:
                return subprocess.CompletedProcess(args, self.load_returncode, stdout="", stderr="Load failed: 5")
            if self.register_on_load:
                self.loaded.add(self.label)
            return subprocess.CompletedProcess(args, 0, stdout="", stderr="")
        if command == "unload":
            if self.unload_returncode != 0:
                return subprocess.CompletedProcess(
                    args, self.unload_returncode, stdout="", stderr="Could not find specified service"
                )
            self.loaded.discard(self.label)
            return subprocess.CompletedProcess(args, 0, stdout="", stderr="")
        raise AssertionError(f"unexpected launchctl call: {args}")

    def commands(self) -> list[str]:
        return [call[0] for call in self.calls]


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch) -> Path:
    """Point AUTOUPDATE_HOME at a temp dir and keep log records in-process."""
    home = tmp_path / ".autoupdate"
    monkeypatch.setenv("AUTOUPDATE_HOME", str(home))
    monkeypatch.setattr(logger, "_CONFIGURED", True)
    return home


@pytest.fixture
def agent_root(tmp_path: Path) -> Path:
    """Stand-in for the user's home directory holding ~/Library."""
    root = tmp_path / "user"
    root.mkdir()
    return root


@pytest.fixture(name="minimal_config_dict")
def minimal_config_dict_fixture(agent_root: Path) -> dict:
    return minimal_config_dict(agent_root)


@pytest.fixture
def agent_config(minimal_config_dict: dict) -> AutoupdateConfig:
    return AutoupdateConfig(**minimal_config_dict)


@pytest.fixture
def patch_config(monkeypatch, agent_config: AutoupdateConfig) -> AutoupdateConfig:
    """Make AutoupdateConfig.load return the temp-rooted config."""
    monkeypatch.setattr(AutoupdateConfig, "load", classmethod(lambda cls: agent_config))
    return agent_config


@pytest.fixture
def fake_launchctl(monkeypatch) -> FakeLaunchctl:
    fake = FakeLaunchctl()
    monkeypatch.setattr(_Impl, "_launchctl", fake)
    return fake


@pytest.fixture
def impl(agent_config: AutoupdateConfig, fake_launchctl: FakeLaunchctl) -> _Impl:
    """launchd backend wired to temp paths and the fake launchctl."""
    return _Impl(agent_config.service)
