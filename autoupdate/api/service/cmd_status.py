"""Service status command - reports how the installed agent is configured."""

from collections.abc import Iterator
from datetime import date

from ..config.AutoupdateConfig import AutoupdateConfig
from ..StageResult import StageResult
from ...utils.get_logger import get_logger
from . import ServiceStatusOutput
from .render_status import render_status
from .Service import Service
from .ServiceState import ServiceState
from .StatusSnapshot import StatusSnapshot


def cmd_status() -> StageResult:
    """Report the agent's state and the options it was started with.

    Never fails: missing or unreadable files are reported as warnings and
    placeholder text.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result.

        Yields: (progress_percent: float, message: str) tuples
        Updates result_obj.result, result_obj.output, and result_obj.success before finishing.
        """
        yield (0.1, "Loading configuration...")
        warnings: list[str] = []
        try:
            config = AutoupdateConfig.load()
        except ValueError as e:
            warnings.append(f"{e}; using default configuration")
            config = AutoupdateConfig()

        yield (0.4, "Inspecting launchd agent...")
        today = date.today()
        try:
            with Service(config.service) as service:
                snapshot = service.get_service_status(today, config.stale_after_days)
        except Exception as e:
            get_logger("service.status").exception("Error inspecting autoupdate")
            warnings.append(f"Error inspecting autoupdate: {e}")
            snapshot = StatusSnapshot(state=ServiceState.UNKNOWN, definition_path="", script_path="")
        warnings.extend(snapshot.warnings)

        yield (0.8, "Rendering status...")
        message = render_status(snapshot, today, config.stale_after_days)

        yield (1.0, "Complete")
        result_obj.result = f"Autoupdate status: {snapshot.state.value}"
        result_obj.output = ServiceStatusOutput(
            errors=[],
            warnings=warnings,
            message=message,
            state=snapshot.state.value,
            interval=snapshot.interval if snapshot.interval is not None else -1,
            run_at_load=snapshot.run_at_load,
            flags=snapshot.flags,
            flags_source=snapshot.flags_source,
            installed_on=snapshot.installed_on.isoformat() if snapshot.installed_on else "",
            stale=snapshot.is_stale,
            plist_path=snapshot.definition_path,
            script_path=snapshot.script_path,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Checking autoupdate status...",
        progress_callback=do_work,
    )
