"""Service status DTO."""

from dataclasses import dataclass, field
from datetime import datetime

from .ServiceState import ServiceState


@dataclass
class StatusSnapshot:
    """What ``status`` could work out about the installed agent.

    Computed fresh on every query, never persisted.
    """

    state: ServiceState
    """The single top-level state that matched."""

    definition_path: str
    """Path to the plist."""

    script_path: str
    """Path to the launcher that was inspected."""

    interval: int | None = None
    """StartInterval from the plist, or None if the key is absent or unreadable."""

    run_at_load: bool = False
    """Whether the plist asks launchd to run the launcher on load."""

    flags: list[str] = field(default_factory=list)
    """Options the agent was started with, in launcher order."""

    flags_source: str = ""
    """'recorded' when read from the options record, 'inferred' when guessed from the launcher text."""

    installed_on: datetime | None = None
    """Creation time of the launcher, or None if it is missing."""

    is_stale: bool = False
    """Whether the install is old enough to advise a restart."""

    warnings: list[str] = field(default_factory=list)
    """Problems found while reading the agent's files."""

    @property
    def running(self) -> bool:
        return self.state is ServiceState.RUNNING

    @property
    def installed_but_stopped(self) -> bool:
        return self.state is ServiceState.INSTALLED_BUT_STOPPED

    @property
    def not_configured(self) -> bool:
        return self.state is ServiceState.NOT_CONFIGURED

    @property
    def ambiguous(self) -> bool:
        return self.state is ServiceState.UNKNOWN
