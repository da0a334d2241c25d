"""Unit tests for autoupdate.api.service.compose_update_command."""

import itertools

import pytest

from autoupdate.api.service.compose_update_command import compose_update_command
from autoupdate.api.service.UpdateOptions import UpdateOptions

BREW = "/opt/homebrew/bin/brew"
ALL_OPTIONS = [
    UpdateOptions(upgrade=u, cleanup=c, greedy=g) for u, c, g in itertools.product([False, True], repeat=3)
]


def test_update_only():
    assert compose_update_command(BREW, UpdateOptions()) == f"{BREW} update"


def test_upgrade_and_cleanup():
    command = compose_update_command(BREW, UpdateOptions(upgrade=True, cleanup=True))
    assert command == f"{BREW} update && {BREW} upgrade -v && {BREW} cleanup"


def test_greedy_runs_between_upgrade_and_cleanup():
    command = compose_update_command(BREW, UpdateOptions(upgrade=True, cleanup=True, greedy=True))
    assert command == (
        f"{BREW} update && {BREW} upgrade -v && {BREW} upgrade --cask -v --greedy && {BREW} cleanup"
    )


@pytest.mark.parametrize("options", ALL_OPTIONS, ids=str)
def test_cleanup_only_follows_upgrade(options):
    command = compose_update_command(BREW, options)
    assert command.startswith(f"{BREW} update")
    if "cleanup" in command:
        assert "upgrade -v" in command
        assert command.index("upgrade -v") < command.index("cleanup")
    if "--greedy" in command:
        assert command.index("upgrade -v") < command.index("--greedy")


def test_cleanup_without_upgrade_has_no_effect():
    assert compose_update_command(BREW, UpdateOptions(cleanup=True)) == compose_update_command(BREW, UpdateOptions())
    assert compose_update_command(BREW, UpdateOptions(cleanup=True, greedy=True)) == f"{BREW} update"
