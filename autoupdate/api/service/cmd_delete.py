"""Service delete command - unloads the agent and removes its files."""

from collections.abc import Iterator

from ..config.AutoupdateConfig import AutoupdateConfig
from ..StageResult import StageResult
from . import ServiceDeleteOutput
from .Service import Service


def cmd_delete() -> StageResult:
    """Unload the agent and remove the plist, launcher and options record.

    Logs are kept. Deleting when nothing is installed succeeds.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result.

        Yields: (progress_percent: float, message: str) tuples
        Updates result_obj.result, result_obj.output, and result_obj.success before finishing.
        """
        yield (0.1, "Loading configuration...")
        try:
            config = AutoupdateConfig.load()
            yield (0.5, "Removing agent files...")
            with Service(config.service) as service:
                result = service.delete_service()
        except Exception as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error deleting autoupdate: {e}"
            result_obj.output = ServiceDeleteOutput(
                errors=[str(e)],
                warnings=[],
                message=result_obj.result,
                deleted=False,
                removed=[],
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = result.get("note", "Autoupdate has been stopped and its files removed.")
        result_obj.output = ServiceDeleteOutput(
            errors=[],
            warnings=[],
            message=result_obj.result,
            deleted=True,
            removed=result["removed"],
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Deleting autoupdate...",
        progress_callback=do_work,
    )
