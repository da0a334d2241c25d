"""Immutable description of where the managed agent lives."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict

from ...constants import LEGACY_SCRIPT_NAME, OPTIONS_NAME, SCRIPT_NAME


class ServiceIdentity(BaseModel):
    """Label and well-known paths of the launchd agent.

    Built once from configuration and passed explicitly to everything that
    touches the agent's files.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    """Launchd label, also the stem of the log file names."""

    install_dir: Path
    """Directory holding the launcher script and the options record."""

    log_dir: Path
    """Preferred directory for the agent's stdout/stderr."""

    definition_path: Path
    """Path to the launchd plist."""

    brew: str
    """Path to the brew executable written into the launcher."""

    @property
    def script_path(self) -> Path:
        return self.install_dir / SCRIPT_NAME

    @property
    def legacy_script_path(self) -> Path:
        """Launcher filename used by older installs."""
        return self.install_dir / LEGACY_SCRIPT_NAME

    @property
    def options_path(self) -> Path:
        return self.install_dir / OPTIONS_NAME

    @property
    def stdout_name(self) -> str:
        return f"{self.name}.out"

    @property
    def stderr_name(self) -> str:
        return f"{self.name}.err"
