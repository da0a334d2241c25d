"""Service stop command - unloads the agent but keeps its files."""

from collections.abc import Iterator

from ..config.AutoupdateConfig import AutoupdateConfig
from ..StageResult import StageResult
from . import ServiceStopOutput
from .Service import Service


def cmd_stop() -> StageResult:
    """Unload the agent from launchd."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result.

        Yields: (progress_percent: float, message: str) tuples
        Updates result_obj.result, result_obj.output, and result_obj.success before finishing.
        """
        yield (0.1, "Loading configuration...")
        try:
            config = AutoupdateConfig.load()
            yield (0.5, "Unloading agent...")
            with Service(config.service) as service:
                result = service.stop_service()
        except Exception as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error stopping autoupdate: {e}"
            result_obj.output = ServiceStopOutput(
                errors=[str(e)],
                warnings=[],
                message=result_obj.result,
                stopped=False,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        if result["success"]:
            result_obj.result = "Autoupdate is already stopped" if "note" in result else "Autoupdate stopped successfully"
        else:
            result_obj.result = f"Error stopping autoupdate: {result['error']}"
        result_obj.output = ServiceStopOutput(
            errors=[] if result["success"] else [result["error"]],
            warnings=[],
            message=result_obj.result,
            stopped=result["success"],
        ).model_dump(mode="python")
        result_obj.success = result["success"]

    return StageResult(
        announce="Stopping autoupdate...",
        progress_callback=do_work,
    )
