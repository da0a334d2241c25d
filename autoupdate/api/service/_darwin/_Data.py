"""macOS (launchd) specific service configuration data."""

import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ....constants import DEFAULT_LABEL


def _default_brew() -> str:
    prefix = os.environ.get("HOMEBREW_PREFIX", "/opt/homebrew")
    return str(Path(prefix) / "bin" / "brew")


class _Data(BaseModel):
    """macOS launchd agent configuration data."""

    model_config = ConfigDict(extra="forbid", validate_default=True)

    label: str = Field(DEFAULT_LABEL, description="Launchd service identifier (reverse DNS format)")
    install_dir: Path = Field(
        Path("~/Library/Application Support") / DEFAULT_LABEL,
        description="Directory holding the generated launcher script",
    )
    log_dir: Path = Field(Path("~/Library/Logs") / DEFAULT_LABEL, description="Directory for agent stdout/stderr")
    launch_agents_dir: Path = Field(Path("~/Library/LaunchAgents"), description="Directory holding the plist")
    brew: str = Field(default_factory=_default_brew, description="Path to the brew executable")

    @field_validator("label")
    @classmethod
    def validate_label(cls, v: str) -> str:
        if not v:
            raise ValueError("service.data.label is required when service.type is 'darwin'")
        parts = v.split(".")
        if len(parts) < 2:
            raise ValueError(f"service.data.label must be in reverse DNS format (e.g., 'com.example.app'), got: {v!r}")
        return v

    @field_validator("install_dir", "log_dir", "launch_agents_dir")
    @classmethod
    def expand_dir(cls, v: Path) -> Path:
        return Path(v).expanduser()

    @field_validator("brew")
    @classmethod
    def validate_brew(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("service.data.brew must not be empty")
        return v
