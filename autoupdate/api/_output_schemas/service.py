"""Output schemas for service commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import output_schema


@output_schema("service.start")
class ServiceStartOutput(BaseOutputSchema):
    """Output schema for service start command."""

    message: str = Field(..., description="Human-readable outcome")
    label: str = Field(..., description="Launchd label, empty string if not applicable")
    plist_path: str = Field(..., description="Path to the written plist, empty string if not written")
    script_path: str = Field(..., description="Path to the written launcher, empty string if not written")
    options: list[str] = Field(..., description="Requested options as CLI flags")
    loaded: bool = Field(..., description="Whether launchctl accepted the plist")


@output_schema("service.status")
class ServiceStatusOutput(BaseOutputSchema):
    """Output schema for service status command.

    All fields must always be present for consistency.
    """

    message: str = Field(..., description="Rendered status narrative")
    state: str = Field(..., description="One of: running, installed_but_stopped, not_configured, unknown")
    interval: int = Field(..., description="StartInterval in seconds, -1 if not found")
    run_at_load: bool = Field(..., description="Whether the plist runs the launcher when loaded")
    flags: list[str] = Field(..., description="Options the agent was started with")
    flags_source: str = Field(..., description="'recorded', 'inferred', or empty string if unavailable")
    installed_on: str = Field(..., description="ISO timestamp of the launcher, empty string if unknown")
    stale: bool = Field(..., description="Whether the install is old enough to advise a restart")
    plist_path: str = Field(..., description="Path to the plist")
    script_path: str = Field(..., description="Path to the launcher script")


@output_schema("service.stop")
class ServiceStopOutput(BaseOutputSchema):
    """Output schema for service stop command."""

    message: str = Field(..., description="Human-readable outcome")
    stopped: bool = Field(..., description="Whether the agent is now unloaded")


@output_schema("service.delete")
class ServiceDeleteOutput(BaseOutputSchema):
    """Output schema for service delete command."""

    message: str = Field(..., description="Human-readable outcome")
    deleted: bool = Field(..., description="Whether the agent files are gone")
    removed: list[str] = Field(..., description="Paths that were removed")

