"""Resolved stdout/stderr destinations for the agent."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class LogPaths:
    """Where launchd should send the agent's output."""

    stdout: Path | None
    stderr: Path | None
    warning: str = ""
    """Non-empty when no writable log directory was found."""

    @property
    def redirected(self) -> bool:
        return self.stdout is not None and self.stderr is not None
